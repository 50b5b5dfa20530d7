"""Configuration constants, preset locations, and environment-derived settings.

Environment variables are read at call time so a `.env` loaded by the
entrypoint (python-dotenv) is honored:

    SIDEREALDAY_LOG_LEVEL         logging level name (default INFO)
    SIDEREALDAY_DEFAULT_LOCATION  preset name used at startup (default Equator)
    SIDEREALDAY_NOMINATIM_URL     place-search endpoint
    SIDEREALDAY_USER_AGENT        User-Agent sent to the place-search endpoint
"""

import os

from siderealday.models import DaySpeed, ObserverLocation, PlaySpeed, StepMode

# Playback defaults
DEFAULT_PLAY_SPEED = PlaySpeed.X1000
DEFAULT_DAY_SPEED = DaySpeed.D1
DEFAULT_STEP_MODE = StepMode.SOLAR
NOON_SECONDS = 43200  # Stepped clock starts and resets at noon
MAX_MARKERS = 64  # Day-completion markers kept for display
SLIDER_MAX_DAYS = 30  # Continuous time slider range

# Scheduler intervals (seconds between reruns)
FRAME_INTERVAL = 1 / 30
REDUCED_MOTION_INTERVAL = 0.1

# Sky view
TWILIGHT_ALTITUDE_DEG = -18.0  # Sun drawn while above astronomical twilight
LABEL_MAGNITUDE_LIMIT = 1.0  # Star names shown for stars brighter than this
GLOW_MAGNITUDE_LIMIT = 0.5  # Halo drawn for stars brighter than this
GRID_ALTITUDES_DEG = (30, 60)
GRID_AZIMUTH_STEP_DEG = 45

# Orbital view (unit orbit radius = 1)
EARTH_RADIUS = 0.1
SUN_RADIUS = 0.15
REFERENCE_STAR_DISTANCE = 1.5
ROTATION_TICK_COUNT = 8

# Static renderer
CHART_SIZE = 6  # inches
RESULTS_DIR = "results"

_DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
_DEFAULT_USER_AGENT = "SiderealDay/1.0"

PRESET_LOCATIONS: dict[str, ObserverLocation] = {
    loc.name: loc
    for loc in (
        ObserverLocation.from_degrees(51.48, 0.0, "Greenwich, UK"),
        ObserverLocation.from_degrees(40.71, -74.01, "New York, USA"),
        ObserverLocation.from_degrees(35.68, 139.65, "Tokyo, Japan"),
        ObserverLocation.from_degrees(-33.87, 151.21, "Sydney, Australia"),
        ObserverLocation.from_degrees(30.04, 31.24, "Cairo, Egypt"),
        ObserverLocation.from_degrees(0.0, 0.0, "Equator"),
        ObserverLocation.from_degrees(90.0, 0.0, "North Pole"),
    )
}


class UnknownLocationError(KeyError):
    """Preset name not in PRESET_LOCATIONS."""


def get_preset_location(name: str) -> ObserverLocation:
    """Return the preset named name.

    Raises:
        UnknownLocationError: If name is not a preset.
    """
    try:
        return PRESET_LOCATIONS[name]
    except KeyError:
        raise UnknownLocationError(name) from None


def default_location() -> ObserverLocation:
    return get_preset_location(
        os.environ.get("SIDEREALDAY_DEFAULT_LOCATION", "Equator")
    )


def log_level() -> str:
    return os.environ.get("SIDEREALDAY_LOG_LEVEL", "INFO").upper()


def nominatim_url() -> str:
    return os.environ.get("SIDEREALDAY_NOMINATIM_URL", _DEFAULT_NOMINATIM_URL)


def user_agent() -> str:
    return os.environ.get("SIDEREALDAY_USER_AGENT", _DEFAULT_USER_AGENT)
