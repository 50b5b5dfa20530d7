"""Tests for the view computation layer."""

import math

import pytest

from siderealday.astronomy import TROPICAL_YEAR_DAYS, normalize_angle
from siderealday.catalog import BRIGHT_STARS
from siderealday.compute import (
    compute_orbital_data,
    compute_sky_data,
    compute_sun_position,
    compute_views,
    project_to_dome,
)
from siderealday.config import PRESET_LOCATIONS
from siderealday.models import ReferenceConvention, StepMode
from siderealday.playback import ContinuousClock, SteppedClock, get_effective_time

GREENWICH = PRESET_LOCATIONS["Greenwich, UK"]
EQUATOR = PRESET_LOCATIONS["Equator"]
TOKYO = PRESET_LOCATIONS["Tokyo, Japan"]


def _circular_gap(a: float, b: float) -> float:
    return abs((a - b + math.pi) % (2 * math.pi) - math.pi)


# --- project_to_dome ---


def test_zenith_is_center():
    assert project_to_dome(math.pi / 2, 1.234) == pytest.approx((0, 0))


def test_horizon_north_and_east():
    assert project_to_dome(0, 0) == pytest.approx((0, 1))
    x, y = project_to_dome(0, math.pi / 2)
    assert x == pytest.approx(1)
    assert y == pytest.approx(0, abs=1e-12)


def test_dome_radius_grows_toward_horizon():
    x, y = project_to_dome(math.pi / 4, 2.0)
    assert math.hypot(x, y) == pytest.approx(0.5)


# --- sky ---


@pytest.mark.parametrize("t", [0.0, 20_000.0, 1e6])
def test_only_stars_above_horizon(t):
    sky = compute_sky_data(t, TOKYO)
    names = {s.name for s in BRIGHT_STARS}
    assert sky.stars
    for star in sky.stars:
        assert star.altitude >= 0
        assert star.name in names
        assert math.hypot(star.x, star.y) <= 1 + 1e-12


def test_sun_transits_greenwich_at_noon_convention_zero():
    sky = compute_sky_data(0.0, GREENWICH, ReferenceConvention.NOON_AT_ZERO)
    assert sky.lst == pytest.approx(0)
    assert sky.sun.altitude == pytest.approx(math.pi / 2 - GREENWICH.latitude)
    assert sky.sun.azimuth == pytest.approx(math.pi)
    assert sky.sun.is_up
    assert sky.sun.is_visible


def test_midnight_convention_puts_sun_below_twilight():
    sky = compute_sky_data(0.0, GREENWICH, ReferenceConvention.MIDNIGHT_AT_ZERO)
    assert sky.sun.altitude == pytest.approx(-(math.pi / 2 - GREENWICH.latitude))
    assert not sky.sun.is_up
    assert not sky.sun.is_visible


def test_sun_below_horizon_pinned_to_dome_edge():
    sun = compute_sun_position(0.0, GREENWICH.latitude, math.pi)
    assert math.hypot(sun.x, sun.y) == pytest.approx(1)


def test_stepped_clock_noon_puts_sun_near_zenith_on_equator():
    clock = SteppedClock()
    _, sky = compute_views(clock, EQUATOR)
    assert sky.time == 43200
    assert sky.sun.altitude == pytest.approx(math.pi / 2, abs=0.01)


def test_sidereal_steps_keep_stars_fixed():
    t0 = get_effective_time(0, 43200, StepMode.SIDEREAL)
    t10 = get_effective_time(10, 43200, StepMode.SIDEREAL)
    start = compute_sky_data(t0, TOKYO, ReferenceConvention.MIDNIGHT_AT_ZERO)
    later = compute_sky_data(t10, TOKYO, ReferenceConvention.MIDNIGHT_AT_ZERO)

    assert [s.name for s in later.stars] == [s.name for s in start.stars]
    for a, b in zip(start.stars, later.stars):
        assert a.altitude == pytest.approx(b.altitude, abs=1e-9)
        assert _circular_gap(a.azimuth, b.azimuth) < 1e-9
    assert _circular_gap(start.sun.azimuth, later.sun.azimuth) > 1e-3


def test_solar_steps_shift_sidereal_time():
    t0 = get_effective_time(0, 43200, StepMode.SOLAR)
    t10 = get_effective_time(10, 43200, StepMode.SOLAR)
    start = compute_sky_data(t0, TOKYO, ReferenceConvention.MIDNIGHT_AT_ZERO)
    later = compute_sky_data(t10, TOKYO, ReferenceConvention.MIDNIGHT_AT_ZERO)
    expected = 10 * 2 * math.pi * 236 / 86164
    assert _circular_gap(later.lst, start.lst) == pytest.approx(expected)


def test_sky_labels_and_drift():
    sky = compute_sky_data(3661.0, EQUATOR)
    assert sky.solar_time_label == "01:01:01"
    assert sky.drift_seconds < 0


# --- orbital ---


def test_orbital_position_quarter_year():
    t = TROPICAL_YEAR_DAYS * 86400 / 4
    orbital = compute_orbital_data(t, EQUATOR)
    assert orbital.earth_x == pytest.approx(0, abs=1e-9)
    assert orbital.earth_y == pytest.approx(-1)


def test_pin_faces_sun_at_noon_convention_zero():
    orbital = compute_orbital_data(0.0, GREENWICH, ReferenceConvention.NOON_AT_ZERO)
    assert orbital.solar_hour_angle == pytest.approx(0)
    assert orbital.pin_angle == pytest.approx(orbital.sun_direction)


def test_pin_faces_away_at_midnight_convention_zero():
    orbital = compute_orbital_data(0.0, GREENWICH, ReferenceConvention.MIDNIGHT_AT_ZERO)
    assert orbital.solar_hour_angle == pytest.approx(math.pi)


def test_solar_hour_angle_repeats_each_solar_day():
    start = compute_orbital_data(0.0, GREENWICH).solar_hour_angle
    after_solar = compute_orbital_data(86400.0, GREENWICH).solar_hour_angle
    after_sidereal = compute_orbital_data(86164.0, GREENWICH).solar_hour_angle
    assert _circular_gap(after_solar, start) < 1e-4
    assert _circular_gap(after_sidereal, start) > 0.01


@pytest.mark.parametrize("t", [0.0, 12345.0, 4e6])
def test_rotation_tracks_sidereal_angle_at_greenwich_midnight(t):
    orbital = compute_orbital_data(t, GREENWICH, ReferenceConvention.MIDNIGHT_AT_ZERO)
    expected = normalize_angle(orbital.earth_state.sidereal_angle + math.pi / 2)
    assert _circular_gap(orbital.rotation, expected) < 1e-9


def test_compute_views_shares_one_snapshot():
    clock = ContinuousClock()
    clock.play(0.0)
    clock.tick(100.0)
    orbital, sky = compute_views(clock, TOKYO)
    assert orbital.time == sky.time == clock.current_time
    assert len(orbital.markers) == 2
    assert sky.gmst == pytest.approx(
        normalize_angle(2 * math.pi * clock.current_time / 86164)
    )
