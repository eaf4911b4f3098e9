from abc import ABC, abstractmethod
from pathlib import Path


class EditorPort(ABC):
    """Hands a freshly written file to whatever editor surface hosts the generator."""

    @abstractmethod
    async def open_file(self, file_path: Path) -> None:
        """Reveal *file_path* to the user."""
