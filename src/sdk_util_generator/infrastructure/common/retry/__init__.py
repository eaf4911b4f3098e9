from sdk_util_generator.infrastructure.common.retry.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
