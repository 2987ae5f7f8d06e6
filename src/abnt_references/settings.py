"""Process-level settings, read from ``ABNT_*`` environment variables or ``.env``."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="ABNT_",
    )

    HOST: str = Field(default="127.0.0.1", description="Interface the HTTP API binds to.")
    PORT: int = Field(default=8000, description="Port the HTTP API listens on.")
    LOG_LEVEL: str = Field(default="INFO", description="Root logging level.")


def get_settings() -> Settings:
    return Settings()
