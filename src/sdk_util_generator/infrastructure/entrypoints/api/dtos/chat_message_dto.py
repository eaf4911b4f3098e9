from pydantic import BaseModel, Field

from sdk_util_generator.core.domain.shared import ChatTurnKind


class ChatMessageRequestDTO(BaseModel):
    text: str = Field(..., min_length=1, description="Free-text request, e.g. 'generate stripe util'")


class ChatTurnDTO(BaseModel):
    kind: ChatTurnKind
    text: str


class ChatMessageResponseDTO(BaseModel):
    turns: list[ChatTurnDTO]
