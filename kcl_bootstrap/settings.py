"""Runtime configuration for the KCL bootstrap."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from ``KCL_BOOTSTRAP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KCL_BOOTSTRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Maven repository
    repository_url: str = Field("https://search.maven.org/remotecontent?filepath=")
    http_timeout: float = Field(30.0, gt=0)
    verify_tls: bool = True
    download_workers: int = Field(4, ge=1)

    # Local defaults
    default_jar_folder: str = "jars"
    default_java: str = "java"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(message)s"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
