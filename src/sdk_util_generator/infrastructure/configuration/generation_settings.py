from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationSettings(BaseSettings):
    """Settings for the hosted chat-completion endpoint and prompt sizing."""

    api_url: str = Field(
        default="http://localhost:8080/api/v1/chat/completions", alias="SDK_GEN_API_URL"
    )
    api_key: SecretStr | None = Field(default=None, alias="SDK_GEN_API_KEY")

    request_timeout_seconds: float = Field(default=120.0, alias="SDK_GEN_REQUEST_TIMEOUT_SECONDS")
    integration_timeout_seconds: float = Field(
        default=3000.0, alias="SDK_GEN_INTEGRATION_TIMEOUT_SECONDS"
    )
    max_attempts: int = Field(default=1, ge=1, alias="SDK_GEN_MAX_ATTEMPTS")

    target_language: str = Field(default="python", alias="SDK_GEN_TARGET_LANGUAGE")
    max_context_length: int = Field(default=50_000, gt=0, alias="SDK_GEN_MAX_CONTEXT_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
