from pathlib import Path

import pytest

from sdk_util_generator.infrastructure.configuration import Settings

API_URL = "https://agent.example.com/api/v1/chat/completions"


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def settings(workspace: Path) -> Settings:
    return Settings(
        api_url=API_URL,
        api_key="mock_api_key",
        workspace_root=workspace,
        request_timeout_seconds=5.0,
        integration_timeout_seconds=5.0,
        app_name="TestSdkGenerator",
    )

