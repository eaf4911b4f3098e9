import re
from collections.abc import Sequence

from sdk_util_generator.core.domain.shared.lookup_tables import (
    DEFAULT_KNOWN_SDK_NAMES,
    FALLBACK_SDK_NAME,
)

_VERB_PATTERN = re.compile(r"(?:generate|create)\s+(\w+)")


def extract_sdk_name(
    message: str,
    known_names: Sequence[str] = DEFAULT_KNOWN_SDK_NAMES,
) -> str:
    """Guess which service the user is asking about.

    Known names win by case-insensitive substring match, in order. Otherwise the
    word after "generate"/"create" is taken verbatim, so "create a utility"
    yields "a". Falls back to ``"sdk"``.
    """
    lowered = message.lower()

    for name in known_names:
        if name.lower() in lowered:
            return name

    match = _VERB_PATTERN.search(lowered)
    if match:
        return match.group(1)

    return FALLBACK_SDK_NAME
