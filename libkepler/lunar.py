"""
Lunar node calculations for libkepler.

This module computes:
- Mean Lunar Node: Average ascending node of Moon's orbit on ecliptic
- True Lunar Node: Mean node corrected by its five largest periodic terms

Formulas are based on:
- Jean Meeus "Astronomical Algorithms" (2nd ed., 1998), Chapters 47-48

Polynomials below are in Julian centuries since J2000.0.
"""

import math

from .constants import DAYS_PER_CENT, J2000
from .utils import polynome, reduce_deg

# Mean node of the lunar orbit
NODE = (125.0445479, -1934.1362891, 0.0020754, 1.0 / 467441, 1.0 / 60616000)

# Mean elongation of the Moon
MOON_D = (297.8501921, 445267.1114034, -0.0018819, 1.0 / 545868, -1.0 / 113065000)

# Mean anomaly of the Moon
MOON_M = (134.9633964, 477198.8675055, 0.0087414, 1.0 / 69699, -1.0 / 14712000)

# Argument of latitude (mean distance of the Moon from its ascending node)
MOON_F = (93.272095, 483202.0175233, -0.0036539, -1.0 / 3526000, 1.0 / 863310000)

# Mean anomaly of the Sun
SUN_M = (357.5291092, 35999.0502909, -0.0001536, 1.0 / 24490000)


def calc_mean_lunar_node(jd: float) -> float:
    """
    Calculate Mean Lunar Node (ascending node of lunar orbit on ecliptic).

    Args:
        jd: Julian Day (TT)

    Returns:
        float: Ecliptic longitude of mean ascending node in degrees (0-360)

    Note:
        The mean node is a smoothed average that ignores short-period
        perturbations. For instant precision, use calc_true_lunar_node().
    """
    t = (jd - J2000) / DAYS_PER_CENT
    return reduce_deg(polynome(t, NODE))


def calc_true_lunar_node(jd: float) -> float:
    """
    Calculate True Lunar Node.

    Algorithm:
        Ω_true = Ω - 1.4979 sin 2(D - F) - 0.1500 sin M
                   - 0.1226 sin 2D + 0.1176 sin 2F - 0.0801 sin 2(M' - F)

    Args:
        jd: Julian Day (TT)

    Returns:
        float: Ecliptic longitude of true ascending node in degrees (0-360),
            referred to the true equinox of date

    Precision:
        About 0.01° against the full theory; the true node oscillates
        up to ±1.7° around the mean node.
    """
    t = (jd - J2000) / DAYS_PER_CENT

    def arg(terms) -> float:
        return math.radians(reduce_deg(polynome(t, terms)))

    d = arg(MOON_D)
    m = arg(MOON_M)
    f = arg(MOON_F)
    ms = arg(SUN_M)
    node = (
        polynome(t, NODE)
        - 1.4979 * math.sin(2 * (d - f))
        - 0.1500 * math.sin(ms)
        - 0.1226 * math.sin(2 * d)
        + 0.1176 * math.sin(2 * f)
        - 0.0801 * math.sin(2 * (m - f))
    )
    return reduce_deg(node)


def lunar_node(jd: float, mean: bool = False) -> float:
    """
    Longitude of the ascending lunar node.

    Args:
        jd: Julian Day (TT)
        mean: Return the mean node instead of the true node

    Returns:
        float: Ecliptic longitude in degrees (0-360)
    """
    if mean:
        return calc_mean_lunar_node(jd)
    return calc_true_lunar_node(jd)
