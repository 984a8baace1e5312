"""
Configuration settings for the UA Mixer.

Uses Pydantic Settings to load environment variables for logging, the default
primary pool, the pools a fresh registry is seeded with, and the export target.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Mixer defaults
    primary_pool: str = Field("iPhone", alias="MIXER_PRIMARY_POOL")
    default_pools: List[str] = Field(
        default_factory=lambda: ["iPhone", "Samsung", "Motorola"],
        alias="MIXER_DEFAULT_POOLS",
    )
    output_file: str = Field("mixed-user-agents.txt", alias="MIXER_OUTPUT_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
