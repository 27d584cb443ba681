"""Use case for nudging a dead user to check in again."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pressf_switch.application.dto.settings import SettingsUpdate
from pressf_switch.application.evaluate_deadline import compute_deadline, evaluate
from pressf_switch.application.liveness import Clock, system_clock_ms
from pressf_switch.application.ports.notifier import ReminderNotifierPort
from pressf_switch.application.ports.settings_store import SyncSettingsStorePort
from pressf_switch.application.resolve_config import resolve
from pressf_switch.domain.exceptions import InvalidReminderIntervalError, NotificationError
from pressf_switch.domain.settings import (
    DEFAULT_REMINDER_INTERVAL_MINUTES,
    MAX_REMINDER_INTERVAL_MINUTES,
    MIN_REMINDER_INTERVAL_MINUTES,
)
from pressf_switch.domain.status import SwitchStatus

REMINDER_MESSAGE = "Reminder: please check-in to keep your timer alive."

logger = logging.getLogger("pressf_switch.reminders")


def validate_reminder_interval(minutes: int) -> int:
    """Return ``minutes`` when within the accepted reminder bounds."""

    if not MIN_REMINDER_INTERVAL_MINUTES <= minutes <= MAX_REMINDER_INTERVAL_MINUTES:
        raise InvalidReminderIntervalError(
            f"reminder interval must be between {MIN_REMINDER_INTERVAL_MINUTES} and "
            f"{MAX_REMINDER_INTERVAL_MINUTES} minutes, got {minutes}"
        )
    return minutes


def is_reminder_due(
    status: SwitchStatus,
    *,
    notified_at: int | None,
    interval_minutes: int,
    now: int,
) -> bool:
    """Return ``True`` when a dead switch has not been reminded within the interval."""

    if not status.is_dead:
        return False
    if notified_at is None:
        return True
    return notified_at <= now - interval_minutes * 60_000


@dataclass(frozen=True, slots=True)
class ReminderOutcome:
    sent: bool
    reason: str


class CheckInReminderService:
    """Sends at most one reminder per interval while the switch is dead."""

    def __init__(
        self,
        *,
        store: SyncSettingsStorePort,
        notifier: ReminderNotifierPort,
        clock: Clock = system_clock_ms,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._clock = clock

    def run_once(self) -> ReminderOutcome:
        settings = self._store.get_settings()
        if not settings.notifications_enabled:
            return ReminderOutcome(sent=False, reason="notifications_disabled")

        now = self._clock()
        config = resolve(settings, now=now)
        status = evaluate(config, now)
        interval = settings.checkin_reminder_interval_minutes or DEFAULT_REMINDER_INTERVAL_MINUTES
        if not is_reminder_due(
            status,
            notified_at=settings.checkin_notified_at,
            interval_minutes=interval,
            now=now,
        ):
            return ReminderOutcome(sent=False, reason="alive" if not status.is_dead else "recently_notified")

        deadline_ms = compute_deadline(config, now=now)
        try:
            self._notifier.notify(message=REMINDER_MESSAGE, deadline_ms=deadline_ms)
        except NotificationError as exc:
            logger.warning(
                "failed to deliver check-in reminder",
                extra={"data": {"deadline_ms": deadline_ms, "error": str(exc)}},
            )
            return ReminderOutcome(sent=False, reason="delivery_failed")

        self._store.update_settings(SettingsUpdate(checkin_notified_at=now))
        logger.info("check-in reminder sent", extra={"data": {"deadline_ms": deadline_ms}})
        return ReminderOutcome(sent=True, reason="sent")

    def set_interval(self, minutes: int) -> None:
        self._store.update_settings(
            SettingsUpdate(checkin_reminder_interval_minutes=validate_reminder_interval(minutes))
        )

    def set_enabled(self, enabled: bool) -> None:
        self._store.update_settings(SettingsUpdate(notifications_enabled=enabled))


__all__ = [
    "REMINDER_MESSAGE",
    "CheckInReminderService",
    "ReminderOutcome",
    "is_reminder_due",
    "validate_reminder_interval",
]
