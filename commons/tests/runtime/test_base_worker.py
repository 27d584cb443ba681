from __future__ import annotations

import threading

from pressf_commons.runtime.base_worker import BaseWorker


class CountingWorker(BaseWorker):
    worker_name = "counting-worker"
    logger_name = "pressf_commons.tests.counting_worker"

    def __init__(self, *, fail_first: bool = False, ticks_wanted: int = 1) -> None:
        super().__init__(poll_interval=0.01)
        self.fail_first = fail_first
        self.errors = 0
        self.done = threading.Event()
        self._ticks_wanted = ticks_wanted
        self._calls = 0

    def _tick(self) -> None:
        self._calls += 1
        if self._calls >= self._ticks_wanted:
            self.done.set()
        if self.fail_first and self._calls == 1:
            raise RuntimeError("first tick fails")

    def _on_error(self) -> None:
        self.errors += 1


def test_worker_runs_until_stopped() -> None:
    worker = CountingWorker(ticks_wanted=3)

    worker.start()
    assert worker.done.wait(timeout=1.0)
    worker.stop(timeout=1.0)

    assert worker.running is False
    assert worker.ticks >= 3


def test_worker_keeps_running_after_a_failed_tick() -> None:
    worker = CountingWorker(fail_first=True, ticks_wanted=2)

    worker.start()
    assert worker.done.wait(timeout=1.0)
    worker.stop(timeout=1.0)

    assert worker.errors == 1


def test_start_is_idempotent_and_stop_without_start_is_a_noop() -> None:
    worker = CountingWorker(ticks_wanted=1)
    worker.stop()

    worker.start()
    first_thread = worker._thread
    worker.start()
    assert worker._thread is first_thread

    worker.stop(timeout=1.0)
    assert worker.poll_interval == 0.01
