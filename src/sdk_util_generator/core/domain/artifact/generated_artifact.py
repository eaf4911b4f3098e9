from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratedArtifact:
    """Utility file produced by one generation run and persisted under ``utils/``."""

    service_name: str
    target_language: str
    filename: str
    code: str
    file_path: Path
