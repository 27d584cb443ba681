"""Merge the preview override over persisted settings."""

from __future__ import annotations

from pressf_switch.application.dto.settings import StoredSettings
from pressf_switch.domain.settings import DEFAULT_PROTOCOL_LENGTH_DAYS, EffectiveConfig, SettingsOverride


def resolve(
    settings: StoredSettings,
    override: SettingsOverride | None = None,
    *,
    now: int,
) -> EffectiveConfig:
    """Return the effective config, field by field: override, then settings, then default.

    A missing check-in timestamp defaults to ``now`` so first use does not
    start with an expired deadline.
    """

    override = override or SettingsOverride()

    protocol_length_days = override.protocol_length_days
    if protocol_length_days is None:
        protocol_length_days = settings.protocol_length_days
    if protocol_length_days is None:
        protocol_length_days = DEFAULT_PROTOCOL_LENGTH_DAYS

    last_check_in = override.last_check_in_timestamp
    if last_check_in is None:
        last_check_in = settings.last_check_in_timestamp
    if last_check_in is None:
        last_check_in = now

    return EffectiveConfig(
        protocol_length_days=protocol_length_days,
        last_check_in_timestamp=last_check_in,
    )


__all__ = ["resolve"]
