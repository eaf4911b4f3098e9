from sdk_util_generator.core.domain.shared.chat_turn import ChatTurn, ChatTurnKind
from sdk_util_generator.core.domain.shared.lookup_tables import (
    DEFAULT_KNOWN_SDK_NAMES,
    DEFAULT_LANGUAGE_EXTENSIONS,
    FALLBACK_EXTENSION,
    FALLBACK_SDK_NAME,
)

__all__ = [
    "DEFAULT_KNOWN_SDK_NAMES",
    "DEFAULT_LANGUAGE_EXTENSIONS",
    "FALLBACK_EXTENSION",
    "FALLBACK_SDK_NAME",
    "ChatTurn",
    "ChatTurnKind",
]
