"""Day-completion and drift bookkeeping between sidereal and solar time."""

from siderealday.astronomy import SIDEREAL_DAY_SECONDS, SOLAR_DAY_SECONDS

DRIFT_PER_DAY_SECONDS = SOLAR_DAY_SECONDS - SIDEREAL_DAY_SECONDS  # 236


def cumulative_drift(day_steps: int) -> int:
    """Seconds the stars have drifted after day_steps whole-day steps.

    Exact: both day lengths are integer constants.
    """
    return day_steps * DRIFT_PER_DAY_SECONDS


def instantaneous_drift(t: float) -> float:
    """Solar-minus-sidereal elapsed time when both clocks run from the same t.

    Negative for t > 0: sidereal days complete faster than solar days.
    """
    return t - (t / SIDEREAL_DAY_SECONDS) * SOLAR_DAY_SECONDS


def sidereal_days_elapsed(t: float) -> float:
    return t / SIDEREAL_DAY_SECONDS


def solar_days_elapsed(t: float) -> float:
    return t / SOLAR_DAY_SECONDS


def day_count_difference_minutes(t: float) -> float:
    """How far the sidereal day count leads the solar day count, in minutes of a day."""
    return (sidereal_days_elapsed(t) - solar_days_elapsed(t)) * 24 * 60


def seconds_to_minutes(seconds: float) -> float:
    return seconds / 60
