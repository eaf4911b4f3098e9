import json
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sdk_util_generator.core.domain.workspace import ScanConfig
from sdk_util_generator.core.domain.workspace.scan_config import (
    DEFAULT_EXCLUDED_DIRECTORY_NAMES,
    DEFAULT_INCLUDED_EXTENSIONS,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_FILES,
)


class WorkspaceSettings(BaseSettings):
    """Workspace root and scanner limits."""

    workspace_root: Path | None = Field(default=None, alias="WORKSPACE_ROOT")

    scan_max_files: int = Field(default=DEFAULT_MAX_FILES, ge=0, alias="SCAN_MAX_FILES")
    scan_max_file_size: int = Field(
        default=DEFAULT_MAX_FILE_SIZE, ge=0, alias="SCAN_MAX_FILE_SIZE"
    )
    scan_excluded_dirs: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_EXCLUDED_DIRECTORY_NAMES),
        alias="SCAN_EXCLUDED_DIRS",
    )
    scan_included_extensions: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_INCLUDED_EXTENSIONS),
        alias="SCAN_INCLUDED_EXTENSIONS",
    )

    @field_validator("scan_excluded_dirs", "scan_included_extensions", mode="before")
    @classmethod
    def parse_json_list(cls, value: object) -> list[str]:
        """Accept both raw JSON strings and native lists from .env or direct injection."""
        if isinstance(value, str):
            parsed = json.loads(value)
            if not isinstance(parsed, list):
                raise ValueError(f"Expected a JSON list, got {type(parsed).__name__}")
            return parsed
        if isinstance(value, (list, tuple, set, frozenset)):
            return list(value)
        raise ValueError(f"Expected str or list, got {type(value).__name__}")

    def to_scan_config(self) -> ScanConfig:
        return ScanConfig(
            excluded_directory_names=frozenset(self.scan_excluded_dirs),
            included_extensions=frozenset(self.scan_included_extensions),
            max_file_size=self.scan_max_file_size,
            max_files=self.scan_max_files,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
