from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application configuration loaded from environment or .env."""

    app_name: str = Field(default="LinguaFlow Translation API")
    app_env: str = Field(default="dev", alias="APP_ENV")
    debug: bool = Field(default=False, alias="APP_DEBUG")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS"
    )

    translation_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("TRANSLATION_API_KEY", "LOVABLE_API_KEY"),
    )
    translation_api_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1/chat/completions",
        alias="TRANSLATION_API_URL",
    )
    translation_model: str = Field(
        default="google/gemini-2.5-flash-lite", alias="TRANSLATION_MODEL"
    )
    translation_temperature: float = Field(default=0.1, alias="TRANSLATION_TEMPERATURE")
    translation_timeout_seconds: float = Field(
        default=30.0, alias="TRANSLATION_TIMEOUT_SECONDS"
    )
    translation_max_retries: int = Field(default=1, ge=0, alias="TRANSLATION_MAX_RETRIES")

    translator_api_base_url: str = Field(
        default="http://127.0.0.1:8000", alias="TRANSLATOR_API_BASE_URL"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> AppSettings:
    """Return cached application settings."""
    return AppSettings()  # type: ignore[call-arg]
