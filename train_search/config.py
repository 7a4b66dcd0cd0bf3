"""
Configuration settings for Train Search.

Uses Pydantic Settings to load environment variables (and an optional `.env`
file) for the dataset location, result size, and logging. CLI options take
precedence over these values.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Dataset
    data_path: str = Field("data.json", alias="TRAINS_DATA_PATH")

    # Query defaults
    top_n: int = Field(3, gt=0, alias="TRAINS_TOP_N")
    default_criterion: Optional[str] = Field(None, alias="TRAINS_DEFAULT_CRITERION")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

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
