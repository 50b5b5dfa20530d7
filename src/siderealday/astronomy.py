"""Astronomy layer — angle utilities, Earth state, and coordinate transforms.

Every function here is pure: results depend only on the arguments.
All angles are radians, all times seconds. No function accepts degrees except deg2rad.
"""

import math

from siderealday.models import (
    CelestialCoordinates,
    EarthState,
    HorizontalCoordinates,
)

SIDEREAL_DAY_SECONDS = 86164  # 23h 56m 4s
SOLAR_DAY_SECONDS = 86400  # 24h
TROPICAL_YEAR_DAYS = 365.2422
OBLIQUITY_RADIANS = math.radians(23.44)  # Earth's axial tilt

TWO_PI = 2 * math.pi
_YEAR_SECONDS = TROPICAL_YEAR_DAYS * SOLAR_DAY_SECONDS


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 2π).

    math.fmod keeps the sign of the dividend, so negative remainders are shifted up.
    A tiny negative remainder can round to exactly 2π after the shift; that maps to 0.
    """
    normalized = math.fmod(angle, TWO_PI) + 0.0  # -0.0 becomes 0.0
    if normalized < 0:
        normalized += TWO_PI
    if normalized >= TWO_PI:
        normalized = 0.0
    return normalized


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


def rad2deg(radians: float) -> float:
    return radians * 180 / math.pi


def calculate_earth_state(t: float, initial_sun_longitude: float = 0.0) -> EarthState:
    """Compute Earth's state at simulation time t (seconds from start).

    Args:
        t: Simulation time in seconds. Negative values are accepted.
        initial_sun_longitude: Sun's ecliptic longitude at t=0, so callers can
            align t=0 with any solar configuration.

    Returns:
        EarthState with all angles in [0, 2π).
    """
    sidereal_angle = TWO_PI * t / SIDEREAL_DAY_SECONDS
    orbit_angle = TWO_PI * t / _YEAR_SECONDS
    return EarthState(
        sidereal_angle=normalize_angle(sidereal_angle),
        orbit_angle=normalize_angle(orbit_angle),
        sun_ecliptic_longitude=normalize_angle(orbit_angle + initial_sun_longitude),
    )


def ecliptic_to_equatorial(
    ecliptic_longitude: float, ecliptic_latitude: float = 0.0
) -> CelestialCoordinates:
    """Rotate ecliptic coordinates into the equatorial frame by the obliquity.

    ecliptic_latitude must be 0 unless the caller accepts reduced accuracy near
    ±π/2, where tan(latitude) is singular. The Sun is always passed with 0.
    """
    eps = OBLIQUITY_RADIANS
    sin_lon = math.sin(ecliptic_longitude)
    cos_lon = math.cos(ecliptic_longitude)
    sin_lat = math.sin(ecliptic_latitude)
    cos_lat = math.cos(ecliptic_latitude)

    ra = math.atan2(
        sin_lon * math.cos(eps) - math.tan(ecliptic_latitude) * math.sin(eps), cos_lon
    )
    dec = math.asin(sin_lat * math.cos(eps) + cos_lat * math.sin(eps) * sin_lon)
    return CelestialCoordinates(right_ascension=normalize_angle(ra), declination=dec)


def calculate_gmst(t: float, initial_gmst: float = 0.0) -> float:
    """Greenwich Mean Sidereal Time (simplified) as an angle.

    initial_gmst fixes the phase between the sidereal clock and the solar day;
    pass ReferenceConvention.initial_gmst rather than a bare literal.
    """
    return normalize_angle(initial_gmst + TWO_PI * t / SIDEREAL_DAY_SECONDS)


def calculate_lst(gmst: float, longitude: float) -> float:
    """Local Sidereal Time. longitude is positive east."""
    return normalize_angle(gmst + longitude)


def equatorial_to_horizontal(
    ra: float, dec: float, latitude: float, lst: float
) -> HorizontalCoordinates:
    """Convert equatorial coordinates to altitude/azimuth.

    Azimuth is measured from North through East. Exactly at the poles the
    azimuth is whatever atan2 returns for near-zero arguments; altitude is
    still valid there.

    Args:
        ra: Right ascension.
        dec: Declination.
        latitude: Observer latitude.
        lst: Local Sidereal Time.

    Returns:
        HorizontalCoordinates with azimuth in [0, 2π).
    """
    hour_angle = lst - ra

    sin_alt = math.sin(latitude) * math.sin(dec) + math.cos(latitude) * math.cos(
        dec
    ) * math.cos(hour_angle)
    # Rounding can push |sin_alt| a hair past 1 at the zenith
    altitude = math.asin(max(-1.0, min(1.0, sin_alt)))

    azimuth = math.atan2(
        -math.sin(hour_angle) * math.cos(dec),
        math.sin(dec) * math.cos(latitude)
        - math.cos(dec) * math.sin(latitude) * math.cos(hour_angle),
    )
    return HorizontalCoordinates(altitude=altitude, azimuth=normalize_angle(azimuth))


def time_to_next_sidereal_day(current_time: float) -> float:
    """Seconds until the next sidereal day boundary. A full day when on a boundary."""
    periods = math.floor(current_time / SIDEREAL_DAY_SECONDS)
    return (periods + 1) * SIDEREAL_DAY_SECONDS - current_time


def time_to_next_solar_day(current_time: float) -> float:
    """Seconds until the next solar day boundary. A full day when on a boundary."""
    periods = math.floor(current_time / SOLAR_DAY_SECONDS)
    return (periods + 1) * SOLAR_DAY_SECONDS - current_time


# --- Display formatting ---


def format_time(seconds: float) -> str:
    """Format as HH:MM:SS, wrapping hours at 24."""
    h = math.floor(seconds / 3600) % 24
    m = math.floor((seconds % 3600) / 60)
    s = math.floor(seconds % 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_sidereal_time(seconds: float) -> str:
    """Format as sidereal HH:MM:SS (24 sidereal hours per sidereal day)."""
    sidereal_hours = seconds / SIDEREAL_DAY_SECONDS * 24
    fraction = sidereal_hours % 1
    h = math.floor(sidereal_hours) % 24
    m = math.floor(fraction * 60)
    s = math.floor((fraction * 60) % 1 * 60)
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_duration(seconds: float) -> str:
    """Compact elapsed-time label using the two most significant units."""
    days = math.floor(seconds / 86400)
    hours = math.floor((seconds % 86400) / 3600)
    mins = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {mins}m"
    if mins > 0:
        return f"{mins}m {secs}s"
    return f"{secs}s"


def format_time_of_day(seconds: float) -> str:
    """12-hour clock label, e.g. 43200 → "12:00 PM"."""
    total_minutes = math.floor(seconds / 60)
    hours = math.floor(total_minutes / 60) % 24
    minutes = total_minutes % 60
    ampm = "PM" if hours >= 12 else "AM"
    hours = hours % 12 or 12
    return f"{hours}:{minutes:02d} {ampm}"


# --- Time-of-day dial ---
# The dial face rotates so the current time sits under a fixed pointer at the top.


def dial_angle_from_time_of_day(seconds: float) -> float:
    """Face rotation for a time of day. Noon → 0, midnight → π."""
    return math.pi - seconds / SOLAR_DAY_SECONDS * TWO_PI


def time_of_day_from_dial_angle(angle: float) -> float:
    """Time of day for a pointer angle measured clockwise from the top.

    Top → noon, right → 6 PM, bottom → midnight. Result is in [0, 86400).
    """
    time = math.fmod(angle / TWO_PI * SOLAR_DAY_SECONDS + 43200, SOLAR_DAY_SECONDS)
    if time < 0:
        time += SOLAR_DAY_SECONDS
    if time >= SOLAR_DAY_SECONDS:
        time = 0.0
    return time
