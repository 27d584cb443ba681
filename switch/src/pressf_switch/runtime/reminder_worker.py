"""Background worker that periodically sends check-in reminders."""

from __future__ import annotations

from pressf_commons.runtime.base_worker import BaseWorker
from pressf_switch.application.reminders import CheckInReminderService, ReminderOutcome

# Matches the notification job cadence of the hosted service.
DEFAULT_REMINDER_POLL_INTERVAL = 300.0


class ReminderWorker(BaseWorker):
    """Runs the reminder use case on a fixed cadence until stopped."""

    worker_name = "pressf-reminder-worker"
    logger_name = "pressf_switch.reminders"
    default_poll_interval = DEFAULT_REMINDER_POLL_INTERVAL

    def __init__(
        self,
        *,
        reminder_service: CheckInReminderService,
        poll_interval_seconds: float = DEFAULT_REMINDER_POLL_INTERVAL,
    ) -> None:
        super().__init__(poll_interval=poll_interval_seconds)
        self._service = reminder_service
        self.last_outcome: ReminderOutcome | None = None

    def _tick(self) -> None:
        self.last_outcome = self._service.run_once()
        self._logger.debug("reminder tick", extra={"data": {"reason": self.last_outcome.reason}})


__all__ = ["DEFAULT_REMINDER_POLL_INTERVAL", "ReminderWorker"]
