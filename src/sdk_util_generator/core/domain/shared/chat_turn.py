from dataclasses import dataclass
from enum import StrEnum


class ChatTurnKind(StrEnum):
    PROGRESS = "progress"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class ChatTurn:
    kind: ChatTurnKind
    text: str
