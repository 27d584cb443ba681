from __future__ import annotations

from pressf_switch.application.dto.settings import StoredSettings
from pressf_switch.application.resolve_config import resolve
from pressf_switch.domain.settings import DEFAULT_PROTOCOL_LENGTH_DAYS, SettingsOverride
from switch.tests.fixtures.fakes import DAY_MS, START_MS


def test_empty_settings_default_to_a_week_starting_now() -> None:
    config = resolve(StoredSettings(), now=START_MS)

    assert config.protocol_length_days == DEFAULT_PROTOCOL_LENGTH_DAYS == 7
    assert config.last_check_in_timestamp == START_MS


def test_persisted_values_are_used_without_override() -> None:
    settings = StoredSettings(protocol_length_days=30, last_check_in_timestamp=START_MS - DAY_MS)

    config = resolve(settings, None, now=START_MS)

    assert config.protocol_length_days == 30
    assert config.last_check_in_timestamp == START_MS - DAY_MS


def test_override_protocol_length_wins_over_settings() -> None:
    settings = StoredSettings(protocol_length_days=7, last_check_in_timestamp=START_MS - DAY_MS)

    config = resolve(settings, SettingsOverride(protocol_length_days=1), now=START_MS)

    assert config.protocol_length_days == 1
    assert config.is_24h_mode is True
    assert config.last_check_in_timestamp == START_MS - DAY_MS


def test_override_timestamp_wins_and_length_falls_through() -> None:
    settings = StoredSettings(protocol_length_days=30, last_check_in_timestamp=START_MS - DAY_MS)

    config = resolve(settings, SettingsOverride(last_check_in_timestamp=START_MS - 2 * DAY_MS), now=START_MS)

    assert config.protocol_length_days == 30
    assert config.last_check_in_timestamp == START_MS - 2 * DAY_MS


def test_override_fills_fields_missing_from_settings() -> None:
    config = resolve(StoredSettings(), SettingsOverride(protocol_length_days=1), now=START_MS)

    assert config.protocol_length_days == 1
    assert config.last_check_in_timestamp == START_MS
