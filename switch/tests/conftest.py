from __future__ import annotations

import pytest

from switch.tests.fixtures.fakes import ManualTimer, RecordingStore


@pytest.fixture
def anyio_backend() -> str:
    # Force AnyIO-managed tests in the switch suite to use asyncio only
    return "asyncio"


@pytest.fixture
def timer() -> ManualTimer:
    return ManualTimer()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()
