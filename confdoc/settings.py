"""Runtime settings for the rendering service, read from ``CONFDOC_*`` env vars."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFDOC_", extra="ignore")

    log_level: str = Field(default="INFO")
    max_upload_bytes: int = Field(default=1024 * 1024, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
