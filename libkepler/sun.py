"""
Geocentric position of the Sun.

Low-precision solar theory referred to the 1900 January 0.5 epoch
(Duffett-Smith, after Newcomb), with the main planetary and lunar
corrections in longitude and radius vector. Accuracy is about 0.01°.

Functions:
- mean_longitude(): Mean longitude of the Sun
- mean_anomaly(): Mean anomaly of the Sun
- true_geocentric(): True geometric longitude and Sun-Earth distance
- apparent(): Apparent longitude (nutation, aberration, light travel)
"""

import math
from typing import Optional, Tuple

from .constants import DAYS_PER_CENT, J1900, SUN_ABERRATION
from .kepler import eccentric_anomaly, true_anomaly
from .models import EclipticPosition
from .utils import frac360, polynome, reduce_deg


def mean_longitude(t: float) -> float:
    """
    Mean longitude of the Sun.

    Args:
        t: Julian centuries since 1900 January 0.5

    Returns:
        float: Mean longitude in arc-degrees (0-360)
    """
    return reduce_deg(2.7969668e2 + 3.025e-4 * t * t + frac360(1.000021359e2 * t))


def mean_anomaly(t: float) -> float:
    """
    Mean anomaly of the Sun.

    Args:
        t: Julian centuries since 1900 January 0.5

    Returns:
        float: Mean anomaly in arc-degrees (0-360)
    """
    return reduce_deg(
        3.5847583e2 - (1.5e-4 + 3.3e-6 * t) * t * t + frac360(9.999736042e1 * t)
    )


def true_geocentric(
    t: float, ms: Optional[float] = None, ls: Optional[float] = None
) -> Tuple[float, float]:
    """
    True geocentric longitude of the Sun and its distance from the Earth.

    Args:
        t: Julian centuries since 1900 January 0.5
        ms: Mean anomaly of the Sun, arc-degrees (computed if omitted)
        ls: Mean longitude of the Sun, arc-degrees (computed if omitted)

    Returns:
        Tuple[float, float]: (lsn, rsn) where:
            - lsn: True geometric longitude, arc-degrees (0-360)
            - rsn: Sun-Earth distance, AU
    """
    if ms is None:
        ms = mean_anomaly(t)
    if ls is None:
        ls = mean_longitude(t)

    ma = math.radians(ms)
    s = polynome(t, (1.675104e-2, -4.18e-5, -1.26e-7))  # eccentricity
    ea = eccentric_anomaly(s, ma)
    nu = true_anomaly(s, ea)
    t2 = t * t

    def arg(a: float, b: float) -> float:
        return math.radians(a + frac360(b * t))

    a = arg(153.23, 6.255209472e1)  # Venus
    b = arg(216.57, 1.251041894e2)  # Venus, second harmonic
    c = arg(312.69, 9.156766028e1)  # Jupiter
    d = arg(350.74 - 1.44e-3 * t2, 1.236853095e3)  # Moon
    h = arg(353.4, 1.831353208e2)
    e = math.radians(231.19 + 20.2 * t)  # long-period inequality

    # correction in orbital longitude, degrees
    dl = (
        1.34e-3 * math.cos(a)
        + 1.54e-3 * math.cos(b)
        + 2e-3 * math.cos(c)
        + 1.79e-3 * math.sin(d)
        + 1.78e-3 * math.sin(e)
    )
    # correction in radius vector, AU
    dr = (
        5.43e-6 * math.sin(a)
        + 1.575e-5 * math.sin(b)
        + 1.627e-5 * math.sin(c)
        + 3.076e-5 * math.cos(d)
        + 9.27e-6 * math.sin(h)
    )
    lsn = reduce_deg(math.degrees(nu) + ls - ms + dl)
    rsn = 1.0000002 * (1.0 - s * math.cos(ea)) + dr
    return lsn, rsn


def apparent(
    jd: float, dpsi: float = 0.0, ignore_light_travel: bool = False
) -> EclipticPosition:
    """
    Apparent geocentric position of the Sun.

    Args:
        jd: Julian Day
        dpsi: Nutation in longitude, arc-degrees
        ignore_light_travel: Skip the light-time correction (Duffett-Smith
            does not apply it to the Sun)

    Returns:
        EclipticPosition: (longitude, 0.0, distance)

    Note:
        Aberration is the constant 20.5" (5.69e-3°). Light travel time is
        1.365·R seconds of time, i.e. 1.365·R·15" of longitude.
    """
    t = (jd - J1900) / DAYS_PER_CENT
    lsn, rsn = true_geocentric(t)
    lsn += dpsi - SUN_ABERRATION
    if not ignore_light_travel:
        lsn -= 1.365 * rsn * 15.0 / 3600.0
    return EclipticPosition(reduce_deg(lsn), 0.0, rsn)
