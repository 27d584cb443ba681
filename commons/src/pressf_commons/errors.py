"""Exceptions shared by switch components and their adapters."""

from __future__ import annotations


class SettingsStoreError(RuntimeError):
    """Raised when persisted switch settings cannot be read or written."""


class NotificationError(RuntimeError):
    """Raised when a reminder could not be delivered."""


__all__ = [
    "NotificationError",
    "SettingsStoreError",
]
