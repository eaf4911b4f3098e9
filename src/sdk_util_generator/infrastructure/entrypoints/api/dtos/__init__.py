from sdk_util_generator.infrastructure.entrypoints.api.dtos.chat_message_dto import (
    ChatMessageRequestDTO,
    ChatMessageResponseDTO,
    ChatTurnDTO,
)

__all__ = ["ChatMessageRequestDTO", "ChatMessageResponseDTO", "ChatTurnDTO"]
