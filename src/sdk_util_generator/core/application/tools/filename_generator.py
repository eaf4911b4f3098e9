import re
from typing import Mapping

from sdk_util_generator.core.domain.shared.lookup_tables import (
    DEFAULT_LANGUAGE_EXTENSIONS,
    FALLBACK_EXTENSION,
)


def generate_filename(
    service_name: str,
    language: str,
    extensions: Mapping[str, str] = DEFAULT_LANGUAGE_EXTENSIONS,
) -> str:
    """
    Builds the utility filename for a service, e.g. ``Send-Grid`` + python -> ``send_grid_util.py``.
    - Lowercase
    - Hyphens and whitespace runs become underscores
    - ``_util`` suffix
    - Extension from *extensions*, ``.txt`` for unknown languages
    """
    normalized = service_name.lower()
    normalized = normalized.replace("-", "_")
    normalized = re.sub(r"\s+", "_", normalized)

    extension = extensions.get(language.lower(), FALLBACK_EXTENSION)
    return f"{normalized}_util{extension}"
