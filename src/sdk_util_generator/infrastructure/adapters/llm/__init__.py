from sdk_util_generator.infrastructure.adapters.llm.chat_completion_http_adapter import (
    ChatCompletionHttpAdapter,
)

__all__ = ["ChatCompletionHttpAdapter"]
