"""Application configuration using Pydantic Settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Todo UI settings, read from TODO_UI_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: str = Field(
        default="http://localhost:3000/api/trpc",
        description="Base URL of the tRPC endpoint",
    )
    timeout: float | None = Field(
        default=30.0,
        description="HTTP timeout in seconds for each remote call (None disables it)",
    )
    superjson: bool = Field(
        default=True,
        description="Wrap inputs and unwrap outputs with the superjson envelope",
    )
    log_level: str = Field(default="INFO", description="Root logging level for the CLI")

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {v!r}")
        return level


def get_settings(**overrides) -> Settings:
    """Load settings from the environment, applying explicit overrides."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
