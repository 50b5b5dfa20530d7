"""Bright star catalog and magnitude → marker mapping.

Coordinates are J2000. The set is illustrative, not an ephemeris.
"""

from siderealday.astronomy import deg2rad
from siderealday.models import Star


def _star(name: str, ra_deg: float, dec_deg: float, magnitude: float) -> Star:
    return Star(
        name=name,
        right_ascension=deg2rad(ra_deg),
        declination=deg2rad(dec_deg),
        magnitude=magnitude,
    )


BRIGHT_STARS: tuple[Star, ...] = (
    _star("Sirius", 101.29, -16.72, -1.46),
    _star("Canopus", 95.99, -52.70, -0.72),
    _star("Arcturus", 213.92, 19.18, -0.05),
    _star("Vega", 279.23, 38.78, 0.03),
    _star("Capella", 79.17, 45.99, 0.08),
    _star("Rigel", 78.63, -8.20, 0.12),
    _star("Procyon", 114.83, 5.22, 0.38),
    _star("Betelgeuse", 88.79, 7.41, 0.50),
    _star("Altair", 297.70, 8.87, 0.77),
    _star("Aldebaran", 68.98, 16.51, 0.85),
    _star("Spica", 201.30, -11.16, 0.97),
    _star("Antares", 247.35, -26.43, 1.06),
    _star("Pollux", 116.33, 28.03, 1.14),
    _star("Fomalhaut", 344.41, -29.62, 1.16),
    _star("Deneb", 310.36, 45.28, 1.25),
    _star("Regulus", 152.09, 11.97, 1.35),
    _star("Castor", 113.65, 31.88, 1.58),
    _star("Polaris", 37.95, 89.26, 1.98),
    # Orion's belt
    _star("Alnitak", 85.19, -1.94, 1.77),
    _star("Alnilam", 84.05, -1.20, 1.69),
    _star("Mintaka", 83.00, -0.30, 2.23),
    # Big Dipper
    _star("Dubhe", 165.93, 61.75, 1.79),
    _star("Merak", 165.46, 56.38, 2.37),
    _star("Phecda", 178.46, 53.69, 2.44),
    _star("Megrez", 183.86, 57.03, 3.31),
    _star("Alioth", 193.51, 55.96, 1.77),
    _star("Mizar", 200.98, 54.93, 2.27),
    _star("Alkaid", 206.89, 49.31, 1.86),
    # Southern Cross
    _star("Acrux", 186.65, -63.10, 0.77),
    _star("Mimosa", 191.93, -59.69, 1.25),
    _star("Gacrux", 187.79, -57.11, 1.63),
    _star("Bellatrix", 81.28, 6.35, 1.64),
    _star("Alhena", 99.43, 16.40, 1.93),
    _star("Shaula", 263.40, -37.10, 1.63),
    _star("Hadar", 210.96, -60.37, 0.61),
    _star("Miaplacidus", 138.30, -69.72, 1.68),
)

_BY_NAME: dict[str, Star] = {s.name: s for s in BRIGHT_STARS}


def get_star(name: str) -> Star:
    """Look up a catalog star by name.

    Raises:
        KeyError: If no star has that name.
    """
    return _BY_NAME[name]


def get_stars_by_magnitude(max_magnitude: float) -> tuple[Star, ...]:
    """Stars at least as bright as max_magnitude, in catalog order."""
    return tuple(s for s in BRIGHT_STARS if s.magnitude <= max_magnitude)


def get_star_size(magnitude: float) -> float:
    """Marker radius in pixels: magnitude -1.5..3.5 maps linearly to 5..1."""
    size = 5 - (magnitude + 1.5) * 0.8
    return max(1.0, min(5.0, size))


def get_star_opacity(magnitude: float) -> float:
    """Brighter stars are more opaque, floored at 0.3."""
    opacity = 1 - (magnitude + 1.5) * 0.15
    return max(0.3, min(1.0, opacity))
