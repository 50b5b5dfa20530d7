import pytest

from siderealday.drift import (
    DRIFT_PER_DAY_SECONDS,
    cumulative_drift,
    day_count_difference_minutes,
    instantaneous_drift,
    seconds_to_minutes,
    sidereal_days_elapsed,
    solar_days_elapsed,
)


def test_drift_per_day():
    assert DRIFT_PER_DAY_SECONDS == 236


def test_ten_steps_drift_about_forty_minutes():
    assert cumulative_drift(10) == 2360
    assert seconds_to_minutes(cumulative_drift(10)) == pytest.approx(39.33, abs=0.01)


def test_cumulative_drift_is_linear():
    assert cumulative_drift(0) == 0
    assert cumulative_drift(365) == 365 * cumulative_drift(1)


def test_instantaneous_drift():
    assert instantaneous_drift(0) == 0
    assert instantaneous_drift(86164) == pytest.approx(-236)
    assert instantaneous_drift(1_000_000) < 0


def test_days_elapsed():
    assert sidereal_days_elapsed(3 * 86164) == pytest.approx(3)
    assert solar_days_elapsed(3 * 86400) == pytest.approx(3)
    assert sidereal_days_elapsed(86400) > solar_days_elapsed(86400)


def test_day_count_difference_after_one_solar_day():
    assert day_count_difference_minutes(86400) == pytest.approx(236 / 86164 * 1440)
