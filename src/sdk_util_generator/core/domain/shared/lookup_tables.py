from types import MappingProxyType
from typing import Mapping

DEFAULT_LANGUAGE_EXTENSIONS: Mapping[str, str] = MappingProxyType(
    {
        "python": ".py",
        "javascript": ".js",
        "typescript": ".ts",
        "java": ".java",
        "go": ".go",
        "rust": ".rs",
    }
)

FALLBACK_EXTENSION = ".txt"

# Checked in order; the first substring hit wins.
DEFAULT_KNOWN_SDK_NAMES: tuple[str, ...] = (
    "sendgrid",
    "stripe",
    "twilio",
    "aws",
    "mailgun",
    "firebase",
)

FALLBACK_SDK_NAME = "sdk"
