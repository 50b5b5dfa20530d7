"""Data model definitions — values passed between the clock, compute, and render layers.

All angles are radians. All times are seconds.
"""

import math
from dataclasses import dataclass
from enum import Enum, IntEnum


class StepMode(str, Enum):
    """Length of one discrete day step."""

    SOLAR = "solar"
    SIDEREAL = "sidereal"


class PlaySpeed(IntEnum):
    """Continuous clock rate: simulated seconds per real second."""

    X1 = 1
    X10 = 10
    X100 = 100
    X1000 = 1000


class DaySpeed(IntEnum):
    """Stepped clock rate: simulated days per real second."""

    D1 = 1
    D5 = 5
    D30 = 30
    D120 = 120
    D365 = 365


class ReferenceConvention(Enum):
    """Phase of the sidereal clock at t=0, as a GMST offset.

    NOON_AT_ZERO: the Sun transits the Greenwich meridian at t=0.
    MIDNIGHT_AT_ZERO: t=0 is Greenwich midnight, so seconds-of-day read as clock time.
    """

    NOON_AT_ZERO = 0.0
    MIDNIGHT_AT_ZERO = math.pi

    @property
    def initial_gmst(self) -> float:
        return self.value


@dataclass(frozen=True)
class EarthState:
    """Earth's orientation and orbital position at one instant."""

    sidereal_angle: float  # Rotation relative to distant stars, [0, 2π)
    orbit_angle: float  # Heliocentric position along a circular orbit, [0, 2π)
    sun_ecliptic_longitude: float  # Apparent Sun position along the ecliptic, [0, 2π)


@dataclass(frozen=True)
class CelestialCoordinates:
    """Equatorial frame position."""

    right_ascension: float  # [0, 2π)
    declination: float  # [-π/2, π/2]


@dataclass(frozen=True)
class HorizontalCoordinates:
    """Observer-relative sky position."""

    altitude: float  # [-π/2, π/2], 0 = horizon
    azimuth: float  # [0, 2π), 0 = North, π/2 = East


@dataclass(frozen=True)
class ObserverLocation:
    """Observer on the ground. Replaced wholesale, never mutated."""

    latitude: float  # [-π/2, π/2]
    longitude: float  # (-π, π], positive east
    name: str

    @classmethod
    def from_degrees(
        cls, latitude_deg: float, longitude_deg: float, name: str
    ) -> "ObserverLocation":
        return cls(
            latitude=math.radians(latitude_deg),
            longitude=math.radians(longitude_deg),
            name=name,
        )


@dataclass(frozen=True)
class Star:
    """Catalog entry. Lower magnitude = brighter (may be negative)."""

    name: str
    right_ascension: float
    declination: float
    magnitude: float


@dataclass(frozen=True)
class DayMarker:
    """A day boundary crossed during playback."""

    kind: StepMode  # SOLAR for an 86400 s boundary, SIDEREAL for 86164 s
    time: float  # Simulation time of the boundary itself


@dataclass(frozen=True)
class TickResult:
    """Outcome of one clock tick."""

    elapsed: float  # Simulated seconds the effective time moved
    sidereal_day_completed: bool = False
    solar_day_completed: bool = False


@dataclass
class PlaybackState:
    """Play/pause state. Owned and mutated only by a TimeSource."""

    is_playing: bool
    speed: int
    last_timestamp: float  # Scheduler clock reading (seconds) at the last tick


@dataclass(frozen=True)
class VisualOptions:
    """Display toggles shared by every renderer."""

    show_labels: bool = True
    show_grid: bool = True
    high_contrast: bool = False
    reduce_motion: bool = False
    show_orbit_trail: bool = True
    show_rotation_ticks: bool = False
    show_markers: bool = False


@dataclass(frozen=True)
class StarPosition:
    """A catalog star placed on the sky dome."""

    name: str
    magnitude: float
    altitude: float
    azimuth: float
    x: float  # Dome projection x (east = +x), unit radius = horizon
    y: float  # Dome projection y (north = +y)
    size: float  # Marker radius in pixels, [1, 5]
    opacity: float  # [0.3, 1]


@dataclass(frozen=True)
class SunPosition:
    """The Sun in equatorial, horizontal, and dome coordinates."""

    ecliptic_longitude: float
    right_ascension: float
    declination: float
    altitude: float
    azimuth: float
    x: float  # Dome projection using max(0, altitude)
    y: float
    is_up: bool  # Above the horizon
    is_visible: bool  # Above the twilight limit


@dataclass(frozen=True)
class SkyData:
    """The sole input to sky renderers. Fully computed state."""

    time: float
    location: ObserverLocation
    earth_state: EarthState
    gmst: float
    lst: float
    stars: tuple[StarPosition, ...]  # Only stars above the horizon
    sun: SunPosition
    solar_time_label: str  # "HH:MM:SS"
    sidereal_time_label: str  # "HH:MM:SS"
    drift_seconds: float  # Instantaneous solar-minus-sidereal gap


@dataclass(frozen=True)
class OrbitalData:
    """The sole input to orbital renderers. Fully computed state."""

    time: float
    earth_state: EarthState
    earth_x: float  # Unit orbit, drawn clockwise: (cos θ, -sin θ)
    earth_y: float
    pin_angle: float  # Direction of the observer's meridian, [0, 2π)
    rotation: float  # Spin for a marker drawn at the top of the disk
    sun_direction: float  # Direction from Earth to the Sun, [0, 2π)
    solar_hour_angle: float  # 0 = local noon, π = local midnight
    markers: tuple[DayMarker, ...] = ()
