from dataclasses import dataclass, field

DEFAULT_EXCLUDED_DIRECTORY_NAMES: frozenset[str] = frozenset(
    {"node_modules", ".git", "venv", "__pycache__", ".vscode", "dist", "build"}
)

DEFAULT_INCLUDED_EXTENSIONS: frozenset[str] = frozenset(
    {".py", ".js", ".ts", ".java", ".go", ".rs", ".txt", ".md", ".json", ".yaml", ".yml"}
)

DEFAULT_MAX_FILE_SIZE = 100_000
DEFAULT_MAX_FILES = 50


@dataclass(frozen=True)
class ScanConfig:
    """Limits and filters applied by the workspace scanner."""

    excluded_directory_names: frozenset[str] = field(
        default_factory=lambda: DEFAULT_EXCLUDED_DIRECTORY_NAMES
    )
    included_extensions: frozenset[str] = field(
        default_factory=lambda: DEFAULT_INCLUDED_EXTENSIONS
    )
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_files: int = DEFAULT_MAX_FILES

    def __post_init__(self) -> None:
        if self.max_files < 0:
            raise ValueError("ScanConfig.max_files must be >= 0")
        if self.max_file_size < 0:
            raise ValueError("ScanConfig.max_file_size must be >= 0")
