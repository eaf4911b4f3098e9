from pathlib import Path

import pytest

from sdk_util_generator.core.domain.workspace.scan_config import (
    DEFAULT_EXCLUDED_DIRECTORY_NAMES,
    DEFAULT_INCLUDED_EXTENSIONS,
)
from sdk_util_generator.infrastructure.configuration import Settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "SDK_GEN_API_URL",
        "SDK_GEN_API_KEY",
        "WORKSPACE_ROOT",
        "SCAN_MAX_FILES",
        "SCAN_EXCLUDED_DIRS",
        "SCAN_INCLUDED_EXTENSIONS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings()

    assert settings.api_key is None
    assert settings.workspace_root is None
    assert settings.target_language == "python"
    assert settings.max_context_length == 50_000
    assert settings.max_attempts == 1
    config = settings.to_scan_config()
    assert config.excluded_directory_names == DEFAULT_EXCLUDED_DIRECTORY_NAMES
    assert config.included_extensions == DEFAULT_INCLUDED_EXTENSIONS
    assert config.max_files == 50
    assert config.max_file_size == 100_000


def test_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SDK_GEN_API_URL", "https://llm.example.com/chat")
    monkeypatch.setenv("SDK_GEN_API_KEY", "abc123")
    monkeypatch.setenv("WORKSPACE_ROOT", str(tmp_path))
    monkeypatch.setenv("SCAN_MAX_FILES", "7")
    monkeypatch.setenv("SCAN_EXCLUDED_DIRS", '["vendor", ".venv"]')

    settings = Settings()

    assert settings.api_url == "https://llm.example.com/chat"
    assert settings.api_key.get_secret_value() == "abc123"
    assert settings.workspace_root == tmp_path
    config = settings.to_scan_config()
    assert config.max_files == 7
    assert config.excluded_directory_names == frozenset({"vendor", ".venv"})


def test_api_key_is_masked_in_repr() -> None:
    settings = Settings(api_key="super-secret")

    assert "super-secret" not in repr(settings)


def test_rejects_non_list_json() -> None:
    with pytest.raises(ValueError):
        Settings(scan_included_extensions='{"py": 1}')
