import re

# Regex patterns for common secrets
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Authorization:\s*)(?!Bearer\s)([a-zA-Z0-9\-\._~+/=]+)",
    r"(api[_-]?key\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
    r"(\bsk_(?:live|test)_)([a-zA-Z0-9]+)",
]

_MAX_LOG_TEXT_LENGTH = 10_000


def redact_text(text: str) -> str:
    """
    Redacts secrets from a string using regex patterns.
    """
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        # Each pattern is (prefix)(secret); only the secret is replaced
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)

    return redacted_text


def redact_for_log(text: str, max_length: int = _MAX_LOG_TEXT_LENGTH) -> str:
    """Redact and truncate text before it goes into a log event."""
    redacted = redact_text(text)
    if len(redacted) > max_length:
        return redacted[:max_length] + "... [TRUNCATED]"
    return redacted
