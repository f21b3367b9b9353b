"""
Application settings for flicks.

This module defines the runtime configuration using Pydantic BaseSettings.
None of these values affect the tick denominator itself, which is a fixed
constant; they only shape logging and the derivation tooling.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..duration import NANOSECONDS_PER_SECOND


class Settings(BaseSettings):
    """Main application settings using Pydantic BaseSettings."""

    log_level: str = Field(default="INFO", alias="FLICKS_LOG_LEVEL")
    log_json: bool = Field(default=True, alias="FLICKS_LOG_JSON")
    env: str = Field(default="dev", alias="FLICKS_ENV")  # dev|prod|test

    # Default bound handed to the solver by the CLI
    upper_bound: int = Field(default=NANOSECONDS_PER_SECOND, alias="FLICKS_UPPER_BOUND")

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("upper_bound")
    @classmethod
    def _positive_bound(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("FLICKS_UPPER_BOUND must be greater than zero")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def _resolve_env_file() -> str | None:
    # 1) Explicit override
    explicit = os.getenv("FLICKS_ENV_FILE")
    if explicit and Path(explicit).is_file():
        return explicit

    # 2) CWD .env
    cwd_env = Path.cwd() / ".env"
    if cwd_env.is_file():
        return str(cwd_env)
    return None


def load_settings() -> Settings:
    """Build a fresh settings object from the environment and any .env file."""
    env_file = _resolve_env_file()
    return Settings(_env_file=env_file) if env_file else Settings()  # type: ignore[call-arg]


# Global settings instance
settings = load_settings()
