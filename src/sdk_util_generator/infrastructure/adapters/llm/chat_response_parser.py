"""Pure functions for reading chat-completion response bodies."""

import json
from typing import Any

from sdk_util_generator.core.application.exceptions import (
    NoContentInResponseError,
    RemoteCallFailedError,
)


def parse_response_body(raw_body: str, endpoint: str) -> Any:
    """Decode the JSON body, treating malformed payloads as a failed remote call."""
    try:
        return json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise RemoteCallFailedError(
            f"API call failed: invalid JSON in response: {exc}",
            context={"endpoint": endpoint},
        ) from exc


def extract_message_content(data: Any) -> str:
    """Return ``choices[0].message.content`` or raise ``NoContentInResponseError``."""
    content = _first_choice_content(data)
    if not content:
        raise NoContentInResponseError("No content found in AI response")
    return content


def _first_choice_content(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None
