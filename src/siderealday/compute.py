"""View computation layer — turns (time, observer) into renderer-ready data."""

import logging
import math

from siderealday.astronomy import (
    calculate_earth_state,
    calculate_gmst,
    calculate_lst,
    deg2rad,
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    format_sidereal_time,
    format_time,
    normalize_angle,
)
from siderealday.catalog import BRIGHT_STARS, get_star_opacity, get_star_size
from siderealday.config import TWILIGHT_ALTITUDE_DEG
from siderealday.drift import instantaneous_drift
from siderealday.models import (
    DayMarker,
    ObserverLocation,
    OrbitalData,
    ReferenceConvention,
    SkyData,
    Star,
    StarPosition,
    SunPosition,
)
from siderealday.playback import TimeSource

logger = logging.getLogger(__name__)

_HALF_PI = math.pi / 2


def project_to_dome(altitude: float, azimuth: float) -> tuple[float, float]:
    """Map altitude/azimuth onto the unit sky dome.

    Zenith is the center and the horizon the unit circle. North is +y, East is +x.
    """
    r = 1 - altitude / _HALF_PI
    return r * math.sin(azimuth), r * math.cos(azimuth)


def _place_star(star: Star, latitude: float, lst: float) -> StarPosition:
    horizontal = equatorial_to_horizontal(
        star.right_ascension, star.declination, latitude, lst
    )
    x, y = project_to_dome(horizontal.altitude, horizontal.azimuth)
    return StarPosition(
        name=star.name,
        magnitude=star.magnitude,
        altitude=horizontal.altitude,
        azimuth=horizontal.azimuth,
        x=x,
        y=y,
        size=get_star_size(star.magnitude),
        opacity=get_star_opacity(star.magnitude),
    )


def compute_sun_position(
    sun_ecliptic_longitude: float, latitude: float, lst: float
) -> SunPosition:
    """Place the Sun, modeled on the ecliptic (latitude 0), on the sky dome."""
    equatorial = ecliptic_to_equatorial(sun_ecliptic_longitude)
    horizontal = equatorial_to_horizontal(
        equatorial.right_ascension, equatorial.declination, latitude, lst
    )
    # Below the horizon the Sun is pinned to the dome edge while in twilight
    x, y = project_to_dome(max(0.0, horizontal.altitude), horizontal.azimuth)
    return SunPosition(
        ecliptic_longitude=sun_ecliptic_longitude,
        right_ascension=equatorial.right_ascension,
        declination=equatorial.declination,
        altitude=horizontal.altitude,
        azimuth=horizontal.azimuth,
        x=x,
        y=y,
        is_up=horizontal.altitude > 0,
        is_visible=horizontal.altitude > deg2rad(TWILIGHT_ALTITUDE_DEG),
    )


def compute_sky_data(
    t: float,
    location: ObserverLocation,
    convention: ReferenceConvention = ReferenceConvention.NOON_AT_ZERO,
    stars: tuple[Star, ...] = BRIGHT_STARS,
) -> SkyData:
    """Compute the local sky for an observer at simulation time t.

    Args:
        t: Simulation time in seconds.
        location: Observer on the ground.
        convention: Sidereal clock phase at t=0. Use the owning clock's convention
            so the Sun's transit lines up with that clock's notion of noon.
        stars: Catalog to place. Defaults to the full bright-star catalog.

    Returns:
        SkyData with stars above the horizon, the Sun, and time labels.
    """
    earth_state = calculate_earth_state(t)
    gmst = calculate_gmst(t, convention.initial_gmst)
    lst = calculate_lst(gmst, location.longitude)

    placed = (_place_star(s, location.latitude, lst) for s in stars)
    visible = tuple(p for p in placed if p.altitude >= 0)
    sun = compute_sun_position(earth_state.sun_ecliptic_longitude, location.latitude, lst)

    return SkyData(
        time=t,
        location=location,
        earth_state=earth_state,
        gmst=gmst,
        lst=lst,
        stars=visible,
        sun=sun,
        solar_time_label=format_time(t),
        sidereal_time_label=format_sidereal_time(t),
        drift_seconds=instantaneous_drift(t),
    )


def compute_orbital_data(
    t: float,
    location: ObserverLocation,
    convention: ReferenceConvention = ReferenceConvention.NOON_AT_ZERO,
    markers: tuple[DayMarker, ...] = (),
) -> OrbitalData:
    """Compute the overhead orbital view at simulation time t.

    The orbit is drawn clockwise on screen. The observer's meridian points at
    LST + π in the orbital frame, so it faces the Sun once per solar day. A
    marker drawn at the top of the Earth disk is spun by pin_angle + π/2;
    for MIDNIGHT_AT_ZERO at longitude 0 that is sidereal_angle + π/2.
    """
    earth_state = calculate_earth_state(t)
    gmst = calculate_gmst(t, convention.initial_gmst)
    lst = calculate_lst(gmst, location.longitude)

    pin_angle = normalize_angle(lst + math.pi)
    sun_direction = normalize_angle(earth_state.orbit_angle + math.pi)

    return OrbitalData(
        time=t,
        earth_state=earth_state,
        earth_x=math.cos(earth_state.orbit_angle),
        earth_y=-math.sin(earth_state.orbit_angle),
        pin_angle=pin_angle,
        rotation=normalize_angle(pin_angle + _HALF_PI),
        sun_direction=sun_direction,
        solar_hour_angle=normalize_angle(pin_angle - sun_direction),
        markers=markers,
    )


def compute_views(
    source: TimeSource, location: ObserverLocation
) -> tuple[OrbitalData, SkyData]:
    """Read the clock once and compute both views from the same snapshot."""
    t = source.effective_time()
    logger.debug("computing views at t=%.1f for %s", t, location.name)
    orbital = compute_orbital_data(
        t, location, source.convention, markers=tuple(source.markers)
    )
    sky = compute_sky_data(t, location, source.convention)
    return orbital, sky
