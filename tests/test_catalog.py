import math

import pytest

from siderealday.catalog import (
    BRIGHT_STARS,
    get_star,
    get_star_opacity,
    get_star_size,
    get_stars_by_magnitude,
)


def test_catalog_size_and_unique_names():
    names = [s.name for s in BRIGHT_STARS]
    assert len(names) == 36
    assert len(set(names)) == len(names)


def test_catalog_coordinates_in_range():
    for star in BRIGHT_STARS:
        assert 0 <= star.right_ascension < 2 * math.pi
        assert -math.pi / 2 <= star.declination <= math.pi / 2


def test_get_star():
    polaris = get_star("Polaris")
    assert polaris.declination == pytest.approx(math.radians(89.26))
    assert polaris.magnitude == 1.98


def test_get_star_unknown_raises():
    with pytest.raises(KeyError):
        get_star("Vulcan")


def test_filter_by_magnitude_preserves_order():
    bright = get_stars_by_magnitude(0.5)
    assert [s.name for s in bright] == [
        "Sirius",
        "Canopus",
        "Arcturus",
        "Vega",
        "Capella",
        "Rigel",
        "Procyon",
        "Betelgeuse",
    ]
    assert all(s.magnitude <= 0.5 for s in bright)


def test_filter_with_high_limit_returns_everything():
    assert get_stars_by_magnitude(10) == BRIGHT_STARS


@pytest.mark.parametrize(
    "magnitude,expected",
    [(-1.46, 4.968), (3.31, 1.152), (-1.5, 5.0), (-3.0, 5.0), (10.0, 1.0)],
)
def test_star_size(magnitude, expected):
    assert get_star_size(magnitude) == pytest.approx(expected)


@pytest.mark.parametrize(
    "magnitude,expected",
    [(-1.5, 1.0), (-3.0, 1.0), (0.0, 0.775), (10.0, 0.3)],
)
def test_star_opacity(magnitude, expected):
    assert get_star_opacity(magnitude) == pytest.approx(expected)


def test_brighter_stars_are_never_smaller():
    ordered = sorted(BRIGHT_STARS, key=lambda s: s.magnitude)
    sizes = [get_star_size(s.magnitude) for s in ordered]
    assert sizes == sorted(sizes, reverse=True)
