import asyncio
from pathlib import Path

import structlog

from sdk_util_generator.core.application.exceptions import FileWriteFailedError
from sdk_util_generator.core.application.ports import ArtifactStorePort

logger = structlog.get_logger()


class UtilFileWriter(ArtifactStorePort):
    """Writes generated files under the workspace, creating the target directory on demand."""

    async def write(self, workspace_root: Path, base_dir: str, filename: str, code: str) -> Path:
        return await asyncio.to_thread(self._write_sync, workspace_root, base_dir, filename, code)

    @staticmethod
    def _write_sync(workspace_root: Path, base_dir: str, filename: str, code: str) -> Path:
        dir_path = workspace_root / base_dir
        file_path = dir_path / filename
        try:
            dir_path.mkdir(parents=True, exist_ok=True)
            if file_path.exists():
                logger.info("Overwriting existing utility file", file_path=str(file_path))
            file_path.write_text(code, encoding="utf-8")
        except OSError as exc:
            raise FileWriteFailedError(
                f"File creation failed: {exc}",
                context={"file_path": str(file_path)},
            ) from exc
        return file_path
