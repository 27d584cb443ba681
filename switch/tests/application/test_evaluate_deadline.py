from __future__ import annotations

import pytest

from pressf_switch.application.evaluate_deadline import compute_deadline, evaluate
from pressf_switch.domain.settings import EffectiveConfig
from pressf_switch.domain.status import SwitchState, SwitchStatus
from switch.tests.fixtures.fakes import DAY_MS, HOUR_MS, START_MS


def _config(days: int, last_check_in: int = START_MS) -> EffectiveConfig:
    return EffectiveConfig(protocol_length_days=days, last_check_in_timestamp=last_check_in)


@pytest.mark.parametrize("days", [2, 7, 30, 365])
def test_multi_day_protocol_reports_full_length_right_after_check_in(days: int) -> None:
    status = evaluate(_config(days), START_MS)

    assert status == SwitchStatus(days_remaining=days, hours_remaining=0, is_24h_mode=False, is_dead=False)
    assert status.state is SwitchState.ALIVE_MULTI_DAY


def test_one_day_protocol_counts_hours() -> None:
    status = evaluate(_config(1), START_MS)

    assert status.is_24h_mode is True
    assert status.hours_remaining == 24
    assert status.days_remaining == 1
    assert status.is_dead is False
    assert status.state is SwitchState.ALIVE_24H


@pytest.mark.parametrize("days", [1, 7, 30])
def test_switch_is_dead_exactly_at_deadline(days: int) -> None:
    status = evaluate(_config(days), START_MS + days * DAY_MS)

    assert status.is_dead is True
    assert status.days_remaining == 0
    assert status.hours_remaining == 0


@pytest.mark.parametrize("days", [1, 7, 30])
def test_switch_reports_nothing_left_past_deadline(days: int) -> None:
    status = evaluate(_config(days), START_MS + days * DAY_MS + 1)

    assert status.is_dead is True
    assert status.days_remaining == 0
    assert status.hours_remaining == 0
    assert status.state is SwitchState.DEAD


def test_evaluation_is_deterministic() -> None:
    config = _config(7, START_MS - 3 * DAY_MS - 5 * HOUR_MS)

    assert evaluate(config, START_MS) == evaluate(config, START_MS)


def test_half_day_left_rounds_up_to_one_day() -> None:
    status = evaluate(_config(7, START_MS - int(6.5 * DAY_MS)), START_MS)

    assert status.days_remaining == 1
    assert status.is_dead is False


def test_one_hour_left_in_24h_mode() -> None:
    status = evaluate(_config(1, START_MS - 23 * HOUR_MS), START_MS)

    assert status.hours_remaining == 1
    assert status.days_remaining == 1
    assert status.is_dead is False


def test_last_millisecond_still_counts_as_a_full_hour() -> None:
    status = evaluate(_config(1), START_MS + DAY_MS - 1)

    assert status.hours_remaining == 1
    assert status.is_dead is False


def test_check_in_from_the_future_is_clamped_to_now() -> None:
    status = evaluate(_config(7, START_MS + 5 * DAY_MS), START_MS)

    assert status.days_remaining == 7
    assert compute_deadline(_config(7, START_MS + 5 * DAY_MS), now=START_MS) == START_MS + 7 * DAY_MS


@pytest.mark.parametrize("days", [0, -3])
def test_non_positive_protocol_length_is_an_immediate_deadline(days: int) -> None:
    status = evaluate(_config(days), START_MS)

    assert status.is_dead is True
    assert status.is_24h_mode is False
    assert status.days_remaining == 0


def test_compute_deadline_adds_protocol_length() -> None:
    assert compute_deadline(_config(30), now=START_MS) == START_MS + 30 * DAY_MS
