from __future__ import annotations

from pressf_switch.application.dto.settings import SettingsUpdate, StoredSettings
from pressf_switch.infrastructure.state.in_memory import InMemorySettingsStore


def test_updates_merge_into_the_current_document() -> None:
    store = InMemorySettingsStore(StoredSettings(protocol_length_days=30, last_check_in_timestamp=1))

    store.update_settings(SettingsUpdate(last_check_in_timestamp=2))

    settings = store.get_settings()
    assert settings.protocol_length_days == 30
    assert settings.last_check_in_timestamp == 2


def test_last_write_wins() -> None:
    store = InMemorySettingsStore()

    store.update_settings(SettingsUpdate(last_check_in_timestamp=20))
    store.update_settings(SettingsUpdate(last_check_in_timestamp=10))

    assert store.get_settings().last_check_in_timestamp == 10
