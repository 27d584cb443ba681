"""Logging knobs shared by switch entrypoints."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pressf_commons.observability.logging import LogFormat


class ObservabilitySettings(BaseSettings):
    """Root log level and line format, read from ``LOG_LEVEL`` and ``LOG_FORMAT``.

    ``LOG_FORMAT=auto`` switches to JSON lines only on managed runtimes.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: LogFormat = Field(default="auto", alias="LOG_FORMAT")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


__all__ = ["ObservabilitySettings"]
