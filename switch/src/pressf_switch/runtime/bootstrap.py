"""Runtime wiring for switch entrypoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pressf_switch.application.liveness import Clock, LivenessController, StatusObserver, system_clock_ms
from pressf_switch.application.ports.notifier import ReminderNotifierPort
from pressf_switch.application.reminders import CheckInReminderService
from pressf_switch.domain.settings import SettingsOverride
from pressf_switch.infrastructure.notifications.webhook import LoggingNotifier, WebhookNotifier
from pressf_switch.infrastructure.state.settings_file import JsonFileSettingsStore
from pressf_switch.runtime.reminder_worker import ReminderWorker
from pressf_switch.runtime.settings import Settings

logger = logging.getLogger("pressf_switch.runtime")


@dataclass(frozen=True, slots=True)
class RuntimeContext:
    """Aggregated runtime components for one switch process."""

    settings: Settings
    store: JsonFileSettingsStore
    notifier: ReminderNotifierPort
    reminder_service: CheckInReminderService
    clock: Clock

    def create_controller(
        self,
        *,
        override: SettingsOverride | None = None,
        observers: tuple[StatusObserver, ...] = (),
    ) -> LivenessController:
        """Build a fresh controller; each observing surface owns its own."""

        return LivenessController(
            store=self.store,
            clock=self.clock,
            poll_interval_seconds=self.settings.poll_interval_seconds,
            override=override,
            observers=observers,
        )

    def create_reminder_worker(self) -> ReminderWorker:
        return ReminderWorker(
            reminder_service=self.reminder_service,
            poll_interval_seconds=self.settings.reminder_poll_seconds,
        )


def create_notifier(settings: Settings) -> ReminderNotifierPort:
    if settings.reminder_webhook_url:
        return WebhookNotifier(
            url=settings.reminder_webhook_url,
            timeout_seconds=settings.reminder_timeout_seconds,
        )
    logger.info("no reminder webhook configured; reminders go to the log")
    return LoggingNotifier()


def create_runtime_context(settings: Settings | None = None, *, clock: Clock = system_clock_ms) -> RuntimeContext:
    resolved = settings or Settings.load()
    store = JsonFileSettingsStore(resolved.settings_path)
    notifier = create_notifier(resolved)
    return RuntimeContext(
        settings=resolved,
        store=store,
        notifier=notifier,
        reminder_service=CheckInReminderService(store=store, notifier=notifier, clock=clock),
        clock=clock,
    )


__all__ = ["RuntimeContext", "create_notifier", "create_runtime_context"]
