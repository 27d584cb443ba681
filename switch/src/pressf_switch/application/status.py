"""JSON-friendly snapshot of an evaluated switch status."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TypedDict

from pressf_switch.application.evaluate_deadline import compute_deadline
from pressf_switch.domain.settings import EffectiveConfig
from pressf_switch.domain.status import SwitchStatus


class StatusSnapshot(TypedDict):
    state: str
    daysRemaining: int
    hoursRemaining: int
    is24hMode: bool
    isDead: bool
    protocolLengthDays: int
    lastCheckInTimestamp: int
    deadline: str


def status_snapshot(status: SwitchStatus, config: EffectiveConfig, *, now: int) -> StatusSnapshot:
    deadline_ms = compute_deadline(config, now=now)
    return {
        "state": status.state.value,
        "daysRemaining": status.days_remaining,
        "hoursRemaining": status.hours_remaining,
        "is24hMode": status.is_24h_mode,
        "isDead": status.is_dead,
        "protocolLengthDays": config.protocol_length_days,
        "lastCheckInTimestamp": config.last_check_in_timestamp,
        "deadline": _iso(deadline_ms),
    }


def _iso(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC).isoformat()


__all__ = ["StatusSnapshot", "status_snapshot"]
