from abc import ABC, abstractmethod
from pathlib import Path


class ArtifactStorePort(ABC):
    """Persists generated utility files inside the workspace."""

    @abstractmethod
    async def write(self, workspace_root: Path, base_dir: str, filename: str, code: str) -> Path:
        """Write *code* to ``<workspace_root>/<base_dir>/<filename>`` and return the full path.

        The directory is created when missing and an existing file is overwritten.

        Raises:
            FileWriteFailedError: when the directory or file cannot be written.
        """
