"""Domain-specific exception types."""

from __future__ import annotations

from pressf_commons.errors import NotificationError, SettingsStoreError


class CheckInError(RuntimeError):
    """Raised when the store did not accept a check-in; nothing was published."""


class InvalidProtocolLengthError(ValueError):
    """Raised when a protocol length below one day is requested."""


class InvalidReminderIntervalError(ValueError):
    """Raised when a reminder interval falls outside the accepted bounds."""


__all__ = [
    "CheckInError",
    "InvalidProtocolLengthError",
    "InvalidReminderIntervalError",
    "NotificationError",
    "SettingsStoreError",
]
