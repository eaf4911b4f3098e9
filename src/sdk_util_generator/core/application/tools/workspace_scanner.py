"""Bounded, best-effort depth-first scan of a workspace directory."""

import asyncio
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from sdk_util_generator.core.domain.workspace import ScanConfig, ScannedFile

logger = structlog.get_logger()


@dataclass
class _ScanState:
    """Counters threaded through one scan so the scanner itself holds no run state."""

    root: str
    files: list[ScannedFile] = field(default_factory=list)
    skipped: int = 0
    errored: int = 0


class WorkspaceScanner:
    """Collects eligible workspace files for prompt context.

    Traversal is depth-first in directory-listing order (unsorted) over an
    explicit stack of open directory iterators, so nesting depth is not bounded
    by the interpreter recursion limit. Excluded directory names are never
    entered, only allow-listed extensions at or below ``max_file_size`` bytes are
    read, and no more than ``max_files`` records are produced. I/O and decode
    failures are logged and the entry skipped; the scan itself never raises for
    them and never writes to disk.
    """

    def __init__(self, config: ScanConfig | None = None) -> None:
        self._config = config or ScanConfig()

    @property
    def config(self) -> ScanConfig:
        return self._config

    def scan(self, root_path: str | Path) -> list[ScannedFile]:
        state = _ScanState(root=os.fspath(root_path))
        stack: list[tuple[str, Iterator[os.DirEntry]]] = []
        try:
            self._open_dir(state.root, stack, state)
            while stack and not self._limit_reached(state):
                dir_path, entries = stack[-1]
                entry = self._next_entry(dir_path, entries, state)
                if entry is None:
                    stack.pop()
                    entries.close()
                elif entry.is_dir(follow_symlinks=False):
                    if entry.name not in self._config.excluded_directory_names:
                        self._open_dir(entry.path, stack, state)
                else:
                    self._visit_file(entry, state)
        finally:
            for _, entries in stack:
                entries.close()

        logger.info(
            "Workspace scan complete",
            root=state.root,
            files_included=len(state.files),
            files_skipped=state.skipped,
            files_errored=state.errored,
        )
        return state.files

    async def scan_async(self, root_path: str | Path) -> list[ScannedFile]:
        """Run :meth:`scan` in a worker thread so the event loop keeps running."""
        return await asyncio.to_thread(self.scan, root_path)

    def _limit_reached(self, state: _ScanState) -> bool:
        return len(state.files) >= self._config.max_files

    def _open_dir(
        self, dir_path: str, stack: list[tuple[str, Iterator[os.DirEntry]]], state: _ScanState
    ) -> None:
        try:
            stack.append((dir_path, os.scandir(dir_path)))
        except OSError as exc:
            self._log_dir_error(dir_path, exc, state)

    def _next_entry(
        self, dir_path: str, entries: Iterator[os.DirEntry], state: _ScanState
    ) -> os.DirEntry | None:
        try:
            return next(entries, None)
        except OSError as exc:
            self._log_dir_error(dir_path, exc, state)
            return None

    @staticmethod
    def _log_dir_error(dir_path: str, exc: OSError, state: _ScanState) -> None:
        state.errored += 1
        logger.warning(
            "Error reading directory",
            path=dir_path,
            error_type=type(exc).__name__,
            error_details=str(exc),
        )

    def _visit_file(self, entry: os.DirEntry, state: _ScanState) -> None:
        if not entry.is_file(follow_symlinks=False):
            return

        _, extension = os.path.splitext(entry.name)
        if extension not in self._config.included_extensions:
            return

        try:
            size = entry.stat().st_size
            if size > self._config.max_file_size:
                state.skipped += 1
                logger.debug("Skipped (size)", path=entry.path, size=size)
                return
            with open(entry.path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            state.errored += 1
            logger.warning(
                "Error reading file",
                path=entry.path,
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            return

        state.files.append(
            ScannedFile(
                path=os.path.relpath(entry.path, state.root),
                name=entry.name,
                content=content,
            )
        )
