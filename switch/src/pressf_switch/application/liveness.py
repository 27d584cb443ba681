"""Liveness controller: periodic re-evaluation and the check-in action."""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from pressf_switch.application.dto.settings import SettingsUpdate, StoredSettings
from pressf_switch.application.evaluate_deadline import evaluate
from pressf_switch.application.ports.settings_store import SettingsStorePort
from pressf_switch.application.resolve_config import resolve
from pressf_switch.domain.exceptions import CheckInError
from pressf_switch.domain.settings import (
    DEFAULT_PROTOCOL_LENGTH_DAYS,
    EffectiveConfig,
    SettingsOverride,
    validate_protocol_length,
)
from pressf_switch.domain.status import SwitchState, SwitchStatus
from pressf_switch.domain.streak import StreakProgress, advance_streak, utc_day

Clock = Callable[[], int]
Sleep = Callable[[float], Awaitable[None]]
StatusObserver = Callable[[SwitchStatus], None]

DEFAULT_POLL_INTERVAL_SECONDS = 60.0

logger = logging.getLogger("pressf_switch.liveness")

_T = TypeVar("_T")


def system_clock_ms() -> int:
    return time.time_ns() // 1_000_000


async def _settle(value: _T | Awaitable[_T]) -> _T:
    if inspect.isawaitable(value):
        return await value
    return value


class LivenessController:
    """Keeps one observer's view of the switch fresh.

    Each activation gets a generation number. Work started under an older
    generation (a poll tick, a store call still in flight) never publishes,
    so nothing reaches observers once ``dispose()`` or ``stop()`` returns
    control. Each evaluation is also numbered before it reads the store; a
    result overtaken by a later evaluation that already published is dropped.

    While no preview override is set, a dead status is held until the
    persisted check-in timestamp moves forward, even if the protocol length
    is edited elsewhere in the meantime.
    """

    def __init__(
        self,
        *,
        store: SettingsStorePort,
        clock: Clock = system_clock_ms,
        sleep: Sleep = asyncio.sleep,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        override: SettingsOverride | None = None,
        observers: Iterable[StatusObserver] = (),
    ) -> None:
        if poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be positive")
        self._store = store
        self._clock = clock
        self._sleep = sleep
        self._poll_interval = poll_interval_seconds
        self._override = override
        self._observers: list[StatusObserver] = list(observers)
        self._generation = 0
        self._active = False
        self._task: asyncio.Task[None] | None = None
        self._last_now: int | None = None
        self._status: SwitchStatus | None = None
        self._config: EffectiveConfig | None = None
        self._dead_check_in: int | None = None
        self._evaluations = 0
        self._published_evaluation = 0
        self._streak: StreakProgress | None = None

    # ------------------------------------------------------------------
    # observation

    @property
    def active(self) -> bool:
        return self._active

    @property
    def status(self) -> SwitchStatus | None:
        """Last published status, or ``None`` before the first publication."""

        return self._status

    @property
    def config(self) -> EffectiveConfig | None:
        return self._config

    @property
    def streak(self) -> StreakProgress | None:
        """Streak recorded by the last check-in through this controller."""

        return self._streak

    @property
    def override(self) -> SettingsOverride | None:
        return self._override

    def subscribe(self, observer: StatusObserver) -> Callable[[], None]:
        """Register ``observer`` and return a callable that unregisters it."""

        self._observers.append(observer)

        def _unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._observers.remove(observer)

        return _unsubscribe

    # ------------------------------------------------------------------
    # lifecycle

    async def start(self) -> None:
        """Publish a first evaluation, then re-evaluate every poll interval."""

        if self._active:
            return
        self._generation += 1
        generation = self._generation
        self._active = True
        self._dead_check_in = None
        try:
            await self._run_pipeline(generation)
        except Exception:
            self.dispose()
            raise
        if not self._is_current(generation):
            return
        self._task = asyncio.create_task(self._poll(generation), name="pressf-liveness-poll")
        logger.debug("liveness controller started", extra={"data": {"poll_interval_s": self._poll_interval}})

    def dispose(self) -> None:
        """Disarm the poll without waiting; nothing is published afterwards."""

        if not self._active and self._task is None:
            return
        self._active = False
        self._generation += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
        logger.debug("liveness controller disposed")

    async def stop(self) -> None:
        """Dispose and wait for the poll task to unwind."""

        task = self._task
        self.dispose()
        if task is None or task is asyncio.current_task():
            return
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def __aenter__(self) -> LivenessController:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    # ------------------------------------------------------------------
    # actions

    async def refresh(self) -> SwitchStatus:
        """Evaluate now, outside the poll cadence."""

        return await self._run_pipeline(self._generation)

    async def check_in(self) -> SwitchStatus:
        """Record a check-in at the current time and republish immediately.

        The same write advances the daily check-in streak.
        """

        generation = self._generation
        settings = await self._read(action="check-in")
        now = self._now()
        streak = advance_streak(
            current=settings.current_streak or 0,
            longest=settings.longest_streak or 0,
            last_day=settings.last_streak_date,
            free_skips=settings.streak_free_skips or 0,
            today=utc_day(now),
        )
        await self._write(
            SettingsUpdate(
                last_check_in_timestamp=now,
                checkin_notified_at=None,
                current_streak=streak.current,
                longest_streak=streak.longest,
                last_streak_date=streak.day,
                streak_free_skips=streak.free_skips,
            ),
            action="check-in",
        )
        self._streak = streak
        logger.info(
            "checked in",
            extra={"data": {"timestamp": now, "streak": streak.current, "bonus": streak.bonus}},
        )
        return await self._run_pipeline(generation)

    async def set_protocol_length(self, days: int) -> SwitchStatus:
        """Persist a new protocol length; changing the timer also checks in.

        Choosing the length already stored writes nothing and keeps the
        running countdown.
        """

        validate_protocol_length(days)
        generation = self._generation
        settings = await self._read(action="protocol length change")
        stored_days = settings.protocol_length_days
        if (stored_days if stored_days is not None else DEFAULT_PROTOCOL_LENGTH_DAYS) == days:
            logger.debug("protocol length unchanged", extra={"data": {"days": days}})
            return await self._run_pipeline(generation)
        now = self._now()
        await self._write(
            SettingsUpdate(
                protocol_length_days=days,
                last_check_in_timestamp=now,
                checkin_notified_at=None,
            ),
            action="protocol length change",
        )
        logger.info("protocol length changed", extra={"data": {"days": days, "timestamp": now}})
        return await self._run_pipeline(generation)

    async def set_override(self, override: SettingsOverride | None) -> SwitchStatus | None:
        """Swap the preview override; a new reference recomputes immediately while active."""

        if override is self._override:
            return self._status
        self._override = override
        if not self._active:
            return None
        return await self._run_pipeline(self._generation)

    # ------------------------------------------------------------------
    # helpers

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation

    def _now(self) -> int:
        now = self._clock()
        if self._last_now is not None and now < self._last_now:
            now = self._last_now
        self._last_now = now
        return now

    async def _read(self, *, action: str) -> StoredSettings:
        try:
            return await _settle(self._store.get_settings())
        except Exception as exc:
            logger.error("store read failed", extra={"data": {"action": action}}, exc_info=exc)
            raise CheckInError(f"{action} could not read the settings store") from exc

    async def _write(self, update: SettingsUpdate, *, action: str) -> None:
        try:
            await _settle(self._store.update_settings(update))
        except Exception as exc:
            logger.error(
                "store rejected settings update",
                extra={"data": {"action": action, "update": update.to_storage()}},
                exc_info=exc,
            )
            raise CheckInError(f"{action} was not recorded by the settings store") from exc

    async def _run_pipeline(self, generation: int) -> SwitchStatus:
        self._evaluations += 1
        evaluation = self._evaluations
        settings = await _settle(self._store.get_settings())
        now = self._now()
        config = resolve(settings, self._override, now=now)
        status = evaluate(config, now)
        if evaluation < self._published_evaluation:
            logger.debug("dropped overtaken evaluation", extra={"data": {"evaluation": evaluation}})
            return status
        if self._is_current(generation):
            self._published_evaluation = evaluation
            status = self._hold_dead(config, status)
            self._config = config
            self._publish(status)
        return status

    def _hold_dead(self, config: EffectiveConfig, status: SwitchStatus) -> SwitchStatus:
        if self._override is not None:
            return status
        if status.is_dead:
            self._dead_check_in = config.last_check_in_timestamp
            return status
        if self._dead_check_in is not None:
            if config.last_check_in_timestamp <= self._dead_check_in:
                return SwitchStatus.dead(is_24h_mode=config.is_24h_mode)
            self._dead_check_in = None
        return status

    def _publish(self, status: SwitchStatus) -> None:
        previous: SwitchState | None = self._status.state if self._status is not None else None
        self._status = status
        if previous is not status.state:
            logger.info(
                "switch state changed",
                extra={"data": {"from": previous.value if previous else None, "to": status.state.value}},
            )
        for observer in tuple(self._observers):
            try:
                observer(status)
            except Exception:
                logger.exception("status observer failed", extra={"data": {"state": status.state.value}})

    async def _poll(self, generation: int) -> None:
        while self._is_current(generation):
            await self._sleep(self._poll_interval)
            if not self._is_current(generation):
                return
            try:
                await self._run_pipeline(generation)
            except Exception:
                logger.exception("liveness poll failed")


__all__ = [
    "Clock",
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "LivenessController",
    "Sleep",
    "StatusObserver",
    "system_clock_ms",
]
