"""Configuration helpers for switch runtime wiring."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pressf_commons.config.observability import ObservabilitySettings


def _default_settings_path() -> Path:
    return Path.home() / ".pressf" / "switch.json"


class Settings(BaseSettings):
    """Switch runtime configuration resolved from the environment.

    The switch's own state (protocol length, last check-in) lives in the
    settings store, not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    # --- Store ---
    settings_path: Path = Field(default_factory=_default_settings_path, alias="PRESSF_SETTINGS_PATH")

    # --- Cadence ---
    poll_interval_seconds: float = Field(default=60.0, gt=0, alias="PRESSF_POLL_INTERVAL_SECONDS")
    reminder_poll_seconds: float = Field(default=300.0, gt=0, alias="PRESSF_REMINDER_POLL_SECONDS")

    # --- Reminders ---
    reminder_webhook_url: str | None = Field(default=None, alias="PRESSF_REMINDER_WEBHOOK_URL")
    reminder_timeout_seconds: float = Field(default=10.0, gt=0, alias="PRESSF_REMINDER_TIMEOUT_SECONDS")

    # --- Component settings ---
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    # --- Loader ---
    @classmethod
    def load(cls) -> Settings:
        instance = cls()
        logger = logging.getLogger("pressf_switch.settings")
        logger.info("switch settings loaded: %r", instance)
        return instance


__all__ = ["Settings"]
