"""Switch configuration primitives: time units, defaults and the preview override."""

from __future__ import annotations

from dataclasses import dataclass

from pressf_switch.domain.exceptions import InvalidProtocolLengthError

MS_PER_HOUR = 60 * 60 * 1000
MS_PER_DAY = 24 * MS_PER_HOUR

DEFAULT_PROTOCOL_LENGTH_DAYS = 7
SUPPORTED_PROTOCOL_LENGTHS: tuple[int, ...] = (1, 7, 30)

DEFAULT_REMINDER_INTERVAL_MINUTES = 60
MIN_REMINDER_INTERVAL_MINUTES = 5
MAX_REMINDER_INTERVAL_MINUTES = 1440


def validate_protocol_length(days: int) -> int:
    """Return ``days`` when it is a whole number of days, at least one."""

    if isinstance(days, bool) or not isinstance(days, int) or days < 1:
        raise InvalidProtocolLengthError(f"protocol length must be a positive number of days, got {days!r}")
    return days


@dataclass(frozen=True, slots=True)
class SettingsOverride:
    """Ephemeral what-if values layered over the persisted settings.

    Used while the user is editing the protocol; never written to the store.
    A ``None`` field falls through to the persisted value.
    """

    protocol_length_days: int | None = None
    last_check_in_timestamp: int | None = None


@dataclass(frozen=True, slots=True)
class EffectiveConfig:
    """Resolved inputs of one deadline evaluation."""

    protocol_length_days: int
    last_check_in_timestamp: int

    @property
    def is_24h_mode(self) -> bool:
        return self.protocol_length_days == 1


__all__ = [
    "DEFAULT_PROTOCOL_LENGTH_DAYS",
    "DEFAULT_REMINDER_INTERVAL_MINUTES",
    "EffectiveConfig",
    "MAX_REMINDER_INTERVAL_MINUTES",
    "MIN_REMINDER_INTERVAL_MINUTES",
    "MS_PER_DAY",
    "MS_PER_HOUR",
    "SUPPORTED_PROTOCOL_LENGTHS",
    "SettingsOverride",
    "validate_protocol_length",
]
