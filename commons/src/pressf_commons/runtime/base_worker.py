"""Polling worker abstraction with a threaded start/stop lifecycle."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import ClassVar


class BaseWorker(ABC):
    """Abstract background worker that calls ``_tick()`` on a fixed cadence.

    The first tick runs as soon as the thread starts. Between ticks the worker
    waits on its stop event, so ``stop()`` interrupts the wait instead of
    sleeping out the remaining interval.
    """

    worker_name: ClassVar[str] = "pressf-worker"
    logger_name: ClassVar[str] = "pressf_commons.worker"
    default_poll_interval: ClassVar[float] = 60.0

    def __init__(self, *, poll_interval: float | None = None) -> None:
        self._poll_interval = poll_interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._logger = logging.getLogger(self.logger_name)
        self.ticks = 0

    def start(self) -> None:
        """Start the background worker thread (idempotent)."""

        if self._thread and self._thread.is_alive():
            return

        self._stop.clear()
        self._thread = threading.Thread(target=self._run_loop, name=self.worker_name, daemon=True)
        self._thread.start()
        self._logger.info(
            "worker started",
            extra={"data": {"worker": self.worker_name, "poll_interval_s": self.poll_interval}},
        )

    def stop(self, timeout: float = 5.0) -> None:
        """Signal the worker to stop and wait for termination."""

        if not self._thread:
            return

        self._stop.set()
        self._thread.join(timeout=timeout)
        self._thread = None
        self._logger.info("worker stopped", extra={"data": {"worker": self.worker_name, "ticks": self.ticks}})

    @property
    def running(self) -> bool:
        """Return True if the worker thread is alive."""

        return bool(self._thread and self._thread.is_alive())

    @property
    def poll_interval(self) -> float:
        """Return the poll interval (instance override or class default)."""

        return self._poll_interval if self._poll_interval is not None else self.default_poll_interval

    def _run_loop(self) -> None:
        while not self._stop.is_set():
            try:
                self._tick()
            except Exception:
                self._logger.exception("worker tick failed", extra={"data": {"worker": self.worker_name}})
                self._on_error()
            finally:
                self.ticks += 1

            if self._stop.wait(self.poll_interval):
                break

    @abstractmethod
    def _tick(self) -> None:
        """Execute one iteration of the worker's task and return quickly."""

    def _on_error(self) -> None:  # noqa: B027
        """Hook called when ``_tick()`` raises."""


__all__ = ["BaseWorker"]
