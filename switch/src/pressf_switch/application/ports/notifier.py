"""Port for delivering check-in reminders."""

from __future__ import annotations

from typing import Protocol


class ReminderNotifierPort(Protocol):
    def notify(self, *, message: str, deadline_ms: int) -> None:
        """Deliver one reminder; raise ``NotificationError`` on failure."""


__all__ = ["ReminderNotifierPort"]
