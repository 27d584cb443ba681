"""Port describing access to the persisted switch settings."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol

from pressf_switch.application.dto.settings import SettingsUpdate, StoredSettings


class SettingsStorePort(Protocol):
    """Single source of truth for ``protocolLengthDays`` and ``lastCheckInTimestamp``.

    Implementations may be synchronous or return awaitables; callers in the
    application layer accept both.
    """

    def get_settings(self) -> StoredSettings | Awaitable[StoredSettings]:
        """Return the latest persisted settings."""

    def update_settings(self, update: SettingsUpdate) -> None | Awaitable[None]:
        """Durably apply the explicitly set fields of ``update``."""


class SyncSettingsStorePort(Protocol):
    """Blocking store flavour used by the threaded reminder worker."""

    def get_settings(self) -> StoredSettings:
        ...

    def update_settings(self, update: SettingsUpdate) -> None:
        ...


__all__ = ["SettingsStorePort", "SyncSettingsStorePort"]
