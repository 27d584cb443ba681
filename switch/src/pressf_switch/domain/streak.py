"""Check-in streak bookkeeping.

A streak counts consecutive UTC calendar days with at least one check-in.
Missing exactly one day costs a free skip when one is available; missing more
restarts the streak at one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from types import MappingProxyType

STREAK_BONUSES = MappingProxyType({3: 5, 7: 15, 14: 30, 30: 100, 100: 500})


def utc_day(timestamp_ms: int) -> date:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC).date()


@dataclass(frozen=True, slots=True)
class StreakProgress:
    """Streak after one check-in."""

    current: int
    longest: int
    day: date
    free_skips: int
    advanced: bool
    used_free_skip: bool = False

    @property
    def bonus(self) -> int:
        """Milestone bonus, paid only on the check-in that reaches the milestone."""

        if not self.advanced:
            return 0
        return STREAK_BONUSES.get(self.current, 0)


def advance_streak(
    *,
    current: int,
    longest: int,
    last_day: date | None,
    free_skips: int,
    today: date,
) -> StreakProgress:
    if last_day is None:
        return StreakProgress(
            current=1,
            longest=max(longest, 1),
            day=today,
            free_skips=free_skips,
            advanced=True,
        )

    gap = (today - last_day).days
    if gap <= 0:
        # same day, or a clock that moved backwards
        return StreakProgress(
            current=current,
            longest=max(longest, current),
            day=today,
            free_skips=free_skips,
            advanced=False,
        )

    used_free_skip = gap == 2 and free_skips > 0
    if gap == 1 or used_free_skip:
        streak = current + 1
    else:
        streak = 1
    return StreakProgress(
        current=streak,
        longest=max(longest, streak),
        day=today,
        free_skips=free_skips - 1 if used_free_skip else free_skips,
        advanced=True,
        used_free_skip=used_free_skip,
    )


__all__ = ["STREAK_BONUSES", "StreakProgress", "advance_streak", "utc_day"]
