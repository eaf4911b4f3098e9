from dataclasses import dataclass


@dataclass(frozen=True)
class ScannedFile:
    """A workspace file captured by a scan, with its path relative to the scan root."""

    path: str
    name: str
    content: str
