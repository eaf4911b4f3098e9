from pydantic import Field
from pydantic_settings import SettingsConfigDict

from sdk_util_generator.infrastructure.configuration.generation_settings import (
    GenerationSettings,
)
from sdk_util_generator.infrastructure.configuration.workspace_settings import WorkspaceSettings


class Settings(GenerationSettings, WorkspaceSettings):
    """
    Combines all settings.
    Inherits from GenerationSettings and WorkspaceSettings.
    """

    app_name: str = Field(default="SDK Generator Chatbot", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
