"""
Utility functions for libkepler.

Angle reduction, fractional revolutions and polynomial evaluation shared by
the Sun, Moon and planetary theories.
"""

import math
from typing import Sequence

from .constants import PI2


def difdeg2n(p1: float, p2: float) -> float:
    """
    Calculate distance in degrees p1 - p2 normalized to [-180;180].

    Compatible with pyswisseph's swe.difdeg2n() function.
    Computes the signed angular difference, handling 360° wrapping.

    Args:
        p1: First angle in degrees
        p2: Second angle in degrees

    Returns:
        Normalized difference in range [-180, 180]

    Examples:
        >>> difdeg2n(10, 20)
        -10.0
        >>> difdeg2n(350, 10)
        -20.0
        >>> difdeg2n(10, 350)
        20.0
        >>> difdeg2n(180, 0)
        180.0
    """
    diff = (p1 - p2) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff


def reduce_deg(x: float) -> float:
    """Reduce an angle in degrees to [0, 360)."""
    x = x % 360.0
    # float modulo may round up to exactly 360.0 for tiny negative input
    return 0.0 if x >= 360.0 else x


def reduce_rad(x: float) -> float:
    """Reduce an angle in radians to [0, 2π)."""
    x = x % PI2
    return 0.0 if x >= PI2 else x


def frac(x: float) -> float:
    """Fractional part of x, keeping the sign of x."""
    return math.fmod(x, 1.0)


def frac360(x: float) -> float:
    """
    Convert a number of revolutions to degrees, dropping whole turns.

    Used by the classic theories, where fast rates are given in
    revolutions per century to preserve precision.
    """
    return frac(x) * 360.0


def polynome(t: float, terms: Sequence[float]) -> float:
    """
    Evaluate a0 + a1*t + a2*t^2 + ... by Horner's scheme.

    Args:
        t: Argument, usually Julian centuries
        terms: Coefficients, lowest order first

    Returns:
        float: Value of the polynomial
    """
    res = 0.0
    for a in reversed(terms):
        res = res * t + a
    return res
