from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_VERSION = "dev"


def resolve_version(env_value: Optional[str]) -> str:
    """Return the configured version, falling back to ``"dev"`` when unset or empty."""
    if env_value:
        return env_value
    return DEFAULT_VERSION


class Settings(BaseSettings):
    app_name: str = "user-service"
    version: str = Field(
        default=DEFAULT_VERSION,
        validation_alias=AliasChoices("VERSION", "version"),
    )
    app_host: str = "0.0.0.0"
    app_port: int = 3000

    log_format: str = "json"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("version", mode="before")
    @classmethod
    def _fallback_version(cls, value: Optional[str]) -> str:
        return resolve_version(value)


settings = Settings()
