import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import plotly.graph_objects as go  # noqa: E402
import pytest  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from siderealday.compute import compute_orbital_data, compute_sky_data  # noqa: E402
from siderealday.config import EARTH_RADIUS, PRESET_LOCATIONS  # noqa: E402
from siderealday.models import (  # noqa: E402
    DayMarker,
    ReferenceConvention,
    StepMode,
    VisualOptions,
)
from siderealday.renderers.plotly_2d import (  # noqa: E402
    render_orbital_figure,
    render_sky_figure,
)
from siderealday.renderers.static import (  # noqa: E402
    render_orbital_chart,
    render_sky_chart,
    save_charts,
)

GREENWICH = PRESET_LOCATIONS["Greenwich, UK"]

ALL_ON = VisualOptions(
    show_labels=True,
    show_grid=True,
    high_contrast=True,
    show_orbit_trail=True,
    show_rotation_ticks=True,
    show_markers=True,
)
MARKERS = (
    DayMarker(kind=StepMode.SIDEREAL, time=86164),
    DayMarker(kind=StepMode.SOLAR, time=86400),
)


@pytest.fixture
def day_views():
    orbital = compute_orbital_data(0.0, GREENWICH, markers=MARKERS)
    sky = compute_sky_data(0.0, GREENWICH, ReferenceConvention.NOON_AT_ZERO)
    return orbital, sky


@pytest.fixture
def night_views():
    orbital = compute_orbital_data(0.0, GREENWICH, ReferenceConvention.MIDNIGHT_AT_ZERO)
    sky = compute_sky_data(0.0, GREENWICH, ReferenceConvention.MIDNIGHT_AT_ZERO)
    return orbital, sky


# --- matplotlib ---


@pytest.mark.parametrize("options", [VisualOptions(), ALL_ON])
def test_static_charts_build(day_views, options):
    orbital, sky = day_views
    orbital_fig = render_orbital_chart(orbital, options)
    sky_fig = render_sky_chart(sky, options)
    assert isinstance(orbital_fig, Figure)
    assert isinstance(sky_fig, Figure)
    plt.close("all")


def test_save_charts_writes_pngs(night_views, tmp_path):
    orbital, sky = night_views
    orbital_path, sky_path = save_charts(orbital, sky, tmp_path)
    assert orbital_path.exists()
    assert sky_path.exists()
    assert orbital_path.parent == tmp_path
    assert sky_path.name == "sky_Greenwich_UK__t0.png"


# --- plotly ---


def test_sky_figure_daytime_shows_sun(day_views):
    _, sky = day_views
    fig = render_sky_figure(sky)
    assert isinstance(fig, go.Figure)
    # glow, stars, sun halo, sun
    assert len(fig.data) == 4
    assert len(fig.data[1].x) == len(sky.stars)


def test_sky_figure_night_hides_sun(night_views):
    _, sky = night_views
    fig = render_sky_figure(sky)
    assert len(fig.data) == 2
    assert len(fig.data[1].x) == len(sky.stars)


def test_sky_figure_hides_labels(day_views):
    _, sky = day_views
    fig = render_sky_figure(sky, VisualOptions(show_labels=False))
    assert fig.data[1].mode == "markers"


def test_orbital_figure_builds(day_views):
    orbital, _ = day_views
    plain = render_orbital_figure(orbital)
    full = render_orbital_figure(orbital, ALL_ON)
    assert isinstance(plain, go.Figure)
    assert len(full.data) > len(plain.data)


@pytest.mark.parametrize("t", [0.0, 20_000.0, 3e6])
def test_rotation_ticks_spin_with_earth(t):
    orbital = compute_orbital_data(t, PRESET_LOCATIONS["Tokyo, Japan"])
    fig = render_orbital_figure(orbital, VisualOptions(show_rotation_ticks=True))
    ticks = [s for s in fig.layout.shapes if s.line.color and s.line.color.startswith("rgba(255,51,51")]
    assert len(ticks) == 8
    # The first tick sits on the observer's meridian
    assert ticks[0].x0 == pytest.approx(orbital.earth_x + EARTH_RADIUS * math.cos(orbital.pin_angle))
    assert ticks[0].y0 == pytest.approx(orbital.earth_y - EARTH_RADIUS * math.sin(orbital.pin_angle))
