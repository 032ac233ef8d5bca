"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GOPEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"

    # Remote used when --remote is not given
    remote: str = "origin"

    # Set by git when gopen runs as an alias (subdirectory of the invocation)
    git_prefix: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GIT_PREFIX", "GOPEN_GIT_PREFIX"),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
