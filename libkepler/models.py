"""
Value types shared across libkepler.
"""

from typing import NamedTuple


class EclipticPosition(NamedTuple):
    """
    Geocentric ecliptic position of a celestial body.

    Attributes:
        lon: Ecliptic longitude, arc-degrees (0-360)
        lat: Ecliptic latitude, arc-degrees (-90 to +90)
        dist: Distance from the Earth, AU
    """

    lon: float
    lat: float
    dist: float


class MoonPosition(NamedTuple):
    """
    Result of the lunar theory, computed as one unit.

    Attributes:
        position: Geocentric ecliptic position of the Moon
        parallax: Horizontal parallax, arc-degrees
        motion: Angular speed, arc-degrees per day
    """

    position: EclipticPosition
    parallax: float
    motion: float
