from sdk_util_generator.infrastructure.configuration.generation_settings import (
    GenerationSettings,
)
from sdk_util_generator.infrastructure.configuration.main_settings import Settings
from sdk_util_generator.infrastructure.configuration.workspace_settings import WorkspaceSettings

__all__ = ["GenerationSettings", "Settings", "WorkspaceSettings"]
