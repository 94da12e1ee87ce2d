"""Centralized settings management for event_facade."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings powered by pydantic-settings.

    Loads configuration from EVENT_FACADE_* environment variables and an
    optional .env file in the working directory.
    """

    # -------------------------------------------------------------------------
    # FACADES
    # -------------------------------------------------------------------------
    # Deep-copy values handed out by proxy()/field() so callers cannot
    # mutate the wrapped payload
    CLONE: bool = True

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # -------------------------------------------------------------------------
    # PATHS
    # -------------------------------------------------------------------------
    BASE_DIR: Path = Path(__file__).resolve().parent
    ALIAS_CONFIG_PATH: Path = BASE_DIR / "configs" / "aliases.yaml"

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="EVENT_FACADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached library settings.

    Returns
    -------
    Settings
        The singleton settings instance.
    """
    return Settings()
