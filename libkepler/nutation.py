"""
Nutation and obliquity of the ecliptic.

Two nutation models are available:
- classic: the short series used with the 1900-epoch theories
  (Duffett-Smith), accurate to about 0.5"
- iau2000b: Skyfield's IAU 2000B implementation (77 luni-solar terms)

The model used by ephemeris contexts is selected with
state.set_nutation_model(). All results are in arc-degrees.
"""

import math
from typing import Tuple

from skyfield.nutationlib import iau2000b_radians, mean_obliquity

from .constants import DAYS_PER_CENT, J1900, NUTATION_IAU2000B
from .state import get_nutation_model, get_timescale
from .utils import frac360


def nutation(t: float) -> Tuple[float, float]:
    """
    Nutation in longitude and obliquity, classic series.

    Args:
        t: Julian centuries since 1900 January 0.5

    Returns:
        Tuple[float, float]: (dpsi, deps) in arc-degrees
    """
    t2 = t * t
    ls = 2.796967e2 + 3.03e-4 * t2 + frac360(1.000021358e2 * t)  # Sun mean longitude
    ms = 3.584758e2 - 1.5e-4 * t2 + frac360(9.999736056e1 * t)  # Sun mean anomaly
    ld = 2.704342e2 - 1.133e-3 * t2 + frac360(1.336855231e3 * t)  # Moon mean longitude
    md = 2.961046e2 + 9.192e-3 * t2 + frac360(1.325552359e3 * t)  # Moon mean anomaly
    nm = 2.591833e2 + 2.078e-3 * t2 - frac360(5.372616667 * t)  # Moon ascending node

    ls, ms, ld, md, nm = map(math.radians, (ls, ms, ld, md, nm))
    tls = ls + ls
    tnm = nm + nm
    tld = ld + ld

    dpsi = (
        (-17.2327 - 1.737e-2 * t) * math.sin(nm)
        + (-1.2729 - 1.3e-4 * t) * math.sin(tls)
        + 2.088e-1 * math.sin(tnm)
        - 2.037e-1 * math.sin(tld)
        + (1.261e-1 - 3.1e-4 * t) * math.sin(ms)
        + 6.75e-2 * math.sin(md)
        - (4.97e-2 - 1.2e-4 * t) * math.sin(tls + ms)
        - 3.42e-2 * math.sin(tld - nm)
        - 2.61e-2 * math.sin(tld + md)
        + 2.14e-2 * math.sin(tls - ms)
        - 1.49e-2 * math.sin(tls - tld + md)
        + 1.24e-2 * math.sin(tls - nm)
        + 1.14e-2 * math.sin(tld - md)
    )
    deps = (
        (9.21 + 9.1e-4 * t) * math.cos(nm)
        + (5.522e-1 - 2.9e-4 * t) * math.cos(tls)
        - 9.04e-2 * math.cos(tnm)
        + 8.84e-2 * math.cos(tld)
        + 2.16e-2 * math.cos(tls + ms)
        + 1.83e-2 * math.cos(tld - nm)
        + 1.13e-2 * math.cos(tld + md)
        - 9.3e-3 * math.cos(tls - ms)
        - 6.6e-3 * math.cos(tls - nm)
    )

    # arc-seconds -> arc-degrees
    return dpsi / 3600.0, deps / 3600.0


def nutation_iau2000b(jd: float) -> Tuple[float, float]:
    """
    Nutation in longitude and obliquity, IAU 2000B model via Skyfield.

    Args:
        jd: Julian Day (TT)

    Returns:
        Tuple[float, float]: (dpsi, deps) in arc-degrees
    """
    ts = get_timescale()
    dpsi, deps = iau2000b_radians(ts.tt_jd(jd))
    return math.degrees(dpsi), math.degrees(deps)


def obliquity(t: float, deps: float = 0.0) -> float:
    """
    Obliquity of the ecliptic.

    Args:
        t: Julian centuries since 1900 January 0.5
        deps: Nutation in obliquity, arc-degrees. Pass 0 for the mean value.

    Returns:
        float: True (or mean) obliquity in arc-degrees

    Note:
        Formula: 23°27'08.26" - 46.845"T - 0.0059"T² + 0.00181"T³
    """
    c = ((-1.81e-3 * t + 5.9e-3) * t + 46.845) * t / 3600.0
    return 23.452294 - c + deps


def obliquity_iau2000b(jd: float, deps: float = 0.0) -> float:
    """
    Obliquity of the ecliptic from Skyfield's IAU 2006 mean obliquity.

    Args:
        jd: Julian Day (TT)
        deps: Nutation in obliquity, arc-degrees

    Returns:
        float: Obliquity in arc-degrees
    """
    return mean_obliquity(jd) / 3600.0 + deps


def nutation_and_obliquity(jd: float) -> Tuple[Tuple[float, float], float]:
    """
    Nutation and true obliquity with the configured model.

    Args:
        jd: Julian Day (TT)

    Returns:
        Tuple: ((dpsi, deps), eps), all in arc-degrees
    """
    if get_nutation_model() == NUTATION_IAU2000B:
        nut = nutation_iau2000b(jd)
        return nut, obliquity_iau2000b(jd, nut[1])

    t = (jd - J1900) / DAYS_PER_CENT
    nut = nutation(t)
    return nut, obliquity(t, nut[1])
