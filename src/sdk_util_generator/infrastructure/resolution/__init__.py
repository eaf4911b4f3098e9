from sdk_util_generator.infrastructure.resolution.container import build_sdk_util_workflow

__all__ = ["build_sdk_util_workflow"]
