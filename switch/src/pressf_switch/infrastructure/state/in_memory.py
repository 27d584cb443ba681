"""In-memory settings store implementation."""

from __future__ import annotations

from threading import Lock

from pressf_switch.application.dto.settings import SettingsUpdate, StoredSettings


class InMemorySettingsStore:
    """Keeps the settings document in process memory; shared safely across threads."""

    def __init__(self, initial: StoredSettings | None = None) -> None:
        self._settings = initial or StoredSettings()
        self._lock = Lock()

    def get_settings(self) -> StoredSettings:
        with self._lock:
            return self._settings

    def update_settings(self, update: SettingsUpdate) -> None:
        with self._lock:
            self._settings = self._settings.apply(update)


__all__ = ["InMemorySettingsStore"]
