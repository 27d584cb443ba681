"""Switch logging bootstrap on top of the shared commons console setup."""

from __future__ import annotations

from pressf_commons.config.observability import ObservabilitySettings
from pressf_commons.observability.logging import configure_logging

SWITCH_LOGGER_LEVELS = {
    "pressf_switch.reminders": "INFO",
    "pressf_switch.notifications": "INFO",
}


def init_logging(settings: ObservabilitySettings | None = None) -> None:
    """Configure console logging for switch entrypoints."""

    resolved = settings or ObservabilitySettings()
    configure_logging(
        level=resolved.log_level,
        output=resolved.log_format,
        loggers=SWITCH_LOGGER_LEVELS,
    )


__all__ = ["SWITCH_LOGGER_LEVELS", "init_logging"]
