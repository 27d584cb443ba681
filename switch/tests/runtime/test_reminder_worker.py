from __future__ import annotations

import threading

from pressf_switch.application.reminders import ReminderOutcome
from pressf_switch.runtime.reminder_worker import ReminderWorker


class FakeReminderService:
    """Fake reminder service for testing."""

    def __init__(self) -> None:
        self.calls = 0
        self.called = threading.Event()

    def run_once(self) -> ReminderOutcome:
        self.calls += 1
        self.called.set()
        return ReminderOutcome(sent=True, reason="sent")


def test_reminder_worker_ticks_immediately_and_stops_promptly() -> None:
    service = FakeReminderService()
    worker = ReminderWorker(reminder_service=service, poll_interval_seconds=3600.0)  # type: ignore[arg-type]

    worker.start()
    assert service.called.wait(timeout=1.0)
    worker.stop(timeout=1.0)

    assert worker.running is False
    assert service.calls == 1
    assert worker.last_outcome == ReminderOutcome(sent=True, reason="sent")
