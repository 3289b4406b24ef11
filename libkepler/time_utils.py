"""
Time conversion utilities for libkepler.

The classic theories count time from 1900 January 0.5 (JD 2415020.0), so
calendar dates are counted in days from that epoch as in Duffett-Smith's
JULDAY routine. The inverse follows Meeus "Astronomical Algorithms", Ch. 7.

Delta T (TT - UT1) comes from Skyfield's timescale. Function names and
argument order follow the Swiss Ephemeris API.
"""

import math
from typing import Tuple

from .constants import DAYS_PER_CENT, J1900, SE_GREG_CAL
from .state import get_timescale


def _gregorian_correction(year: int) -> int:
    century = int(year / 100)
    return 2 - century + int(century / 4)


def swe_julday(
    year: int, month: int, day: int, hour: float, gregflag: int = SE_GREG_CAL
) -> float:
    """
    Convert calendar date to Julian Day number.

    Args:
        year: Calendar year (negative for BCE, astronomical numbering)
        month: Month (1-12)
        day: Day of month (1-31)
        hour: Decimal hour (0.0-23.999...)
        gregflag: SE_GREG_CAL (1) for Gregorian, SE_JUL_CAL (0) for Julian

    Returns:
        float: Julian Day number

    Note:
        JD 2415020.0 = 1899 Dec 31 12:00 (1900 January 0.5)
        JD 2451545.0 = 2000 Jan 1 12:00 (J2000.0)
    """
    if month < 3:
        year -= 1
        month += 12
    b = _gregorian_correction(year) if gregflag == SE_GREG_CAL else 0
    c = math.floor(365.25 * year)
    d = int(30.6001 * (month + 1))
    # whole days since 1900 January 0.5, at 0h of the date
    days = b + c + d + day - 694025.5
    return (J1900 + days) + hour / 24.0


def swe_revjul(jd: float, gregflag: int = SE_GREG_CAL) -> Tuple[int, int, int, float]:
    """
    Convert Julian Day number to calendar date.

    Args:
        jd: Julian Day number
        gregflag: SE_GREG_CAL (1) for Gregorian, SE_JUL_CAL (0) for Julian

    Returns:
        tuple: (year, month, day, hour), hour as a decimal fraction

    Note:
        Dates before 1582 October 15 are always given in the Julian calendar.
    """
    fraction, whole = math.modf(jd + 0.5)
    if fraction < 0:
        fraction += 1.0
        whole -= 1.0
    z = int(whole)

    if gregflag == SE_GREG_CAL and z >= 2299161:
        alpha = int((z - 1867216.25) / 36524.25)
        z += 1 + alpha - int(alpha / 4)

    b = z + 1524
    c = int((b - 122.1) / 365.25)
    days_in_years = int(365.25 * c)
    e = int((b - days_in_years) / 30.6001)

    day = b - days_in_years - int(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day, fraction * 24.0


def swe_deltat(tjd: float) -> float:
    """
    Calculate Delta T (TT - UT1) for a given Julian Day.

    Args:
        tjd: Julian Day number in UT1

    Returns:
        float: Delta T in days (TT - UT1)

    Note:
        Values come from Skyfield's bundled IERS tables and long-term
        model. For modern dates: ~0.0008 days (~69 seconds as of 2024).
    """
    ts = get_timescale()
    t = ts.ut1_jd(tjd)
    return t.delta_t / 86400.0


def djd(jd: float) -> float:
    """Days elapsed since 1900 January 0.5 (JD 2415020.0)."""
    return jd - J1900


def centuries(jd: float) -> float:
    """Julian centuries elapsed since 1900 January 0.5."""
    return (jd - J1900) / DAYS_PER_CENT


def jd_from_djd(days: float) -> float:
    """Julian Day for a number of days since 1900 January 0.5."""
    return days + J1900
