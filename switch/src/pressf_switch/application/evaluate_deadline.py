"""Deadline arithmetic turning an effective config into a switch status."""

from __future__ import annotations

from pressf_switch.domain.settings import MS_PER_DAY, MS_PER_HOUR, EffectiveConfig
from pressf_switch.domain.status import SwitchStatus


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def compute_deadline(config: EffectiveConfig, *, now: int) -> int:
    """Return the instant (ms since epoch) at which the switch fires.

    A check-in timestamp later than ``now`` is treated as ``now``, so the
    countdown never exceeds the protocol length. A protocol length below one
    day yields a deadline no later than the check-in, i.e. already expired.
    """

    last_check_in = min(config.last_check_in_timestamp, now)
    return last_check_in + config.protocol_length_days * MS_PER_DAY


def evaluate(config: EffectiveConfig, now: int) -> SwitchStatus:
    """Derive the countdown for ``config`` at ``now``.

    Remaining time is rounded up, so any time left reports at least one unit.
    """

    diff = compute_deadline(config, now=now) - now
    is_dead = diff <= 0

    if config.is_24h_mode:
        return SwitchStatus(
            days_remaining=0 if is_dead else 1,
            hours_remaining=max(0, _ceil_div(diff, MS_PER_HOUR)),
            is_24h_mode=True,
            is_dead=is_dead,
        )
    return SwitchStatus(
        days_remaining=max(0, _ceil_div(diff, MS_PER_DAY)),
        hours_remaining=0,
        is_24h_mode=False,
        is_dead=is_dead,
    )


__all__ = ["compute_deadline", "evaluate"]
