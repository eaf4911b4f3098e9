from pathlib import Path

import structlog

from sdk_util_generator.core.application.ports import EditorPort

logger = structlog.get_logger()


class LoggingEditorAdapter(EditorPort):
    """Headless editor surface: announces the file instead of opening a buffer."""

    async def open_file(self, file_path: Path) -> None:
        logger.info("Utility file ready", file_path=str(file_path))
