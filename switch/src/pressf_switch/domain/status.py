"""Derived switch status and the liveness states it maps onto."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SwitchState(StrEnum):
    ALIVE_MULTI_DAY = "alive_multi_day"
    ALIVE_24H = "alive_24h"
    DEAD = "dead"


@dataclass(frozen=True, slots=True)
class SwitchStatus:
    """Countdown view recomputed on every evaluation.

    In 24h mode ``days_remaining`` is 0 or 1 and ``hours_remaining`` carries
    the countdown; otherwise ``hours_remaining`` is always 0.
    """

    days_remaining: int
    hours_remaining: int
    is_24h_mode: bool
    is_dead: bool

    @classmethod
    def dead(cls, *, is_24h_mode: bool) -> SwitchStatus:
        return cls(days_remaining=0, hours_remaining=0, is_24h_mode=is_24h_mode, is_dead=True)

    @property
    def state(self) -> SwitchState:
        if self.is_dead:
            return SwitchState.DEAD
        if self.is_24h_mode:
            return SwitchState.ALIVE_24H
        return SwitchState.ALIVE_MULTI_DAY


__all__ = ["SwitchState", "SwitchStatus"]
