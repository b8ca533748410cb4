"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the tfv2rd command line.

    Values are read from ``TFV2RD_``-prefixed environment variables and from
    a ``.env`` file in the working directory.  Command-line flags take
    precedence over anything set here.
    """

    model_config = SettingsConfigDict(
        env_prefix="TFV2RD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Conversion
    source: str = "terraform validate"
    output_format: str = "rdjsonl"
    skip_errors: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level
