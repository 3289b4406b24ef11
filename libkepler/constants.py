"""
Constants for libkepler.

Body identifiers and calculation flags follow the Swiss Ephemeris numbering
so that callers familiar with pyswisseph can reuse their constants.
Epochs and time units are those of the classic 1900-based theories used
throughout the package.
"""

import math

# =============================================================================
# BODY IDENTIFIERS
# =============================================================================

SE_SUN = 0
SE_MOON = 1
SE_MERCURY = 2
SE_VENUS = 3
SE_MARS = 4
SE_JUPITER = 5
SE_SATURN = 6
SE_URANUS = 7
SE_NEPTUNE = 8
SE_PLUTO = 9
SE_MEAN_NODE = 10
SE_TRUE_NODE = 11

# Names accepted by EphemerisContext.position()
SUN = "Sun"
MOON = "Moon"
MERCURY = "Mercury"
VENUS = "Venus"
MARS = "Mars"
JUPITER = "Jupiter"
SATURN = "Saturn"
URANUS = "Uranus"
NEPTUNE = "Neptune"
PLUTO = "Pluto"
LUNAR_NODE = "LunarNode"

PLANET_NAMES = (MERCURY, VENUS, MARS, JUPITER, SATURN, URANUS, NEPTUNE, PLUTO)
BODY_NAMES = (SUN, MOON) + PLANET_NAMES + (LUNAR_NODE,)

BODY_ID_TO_NAME = {
    SE_SUN: SUN,
    SE_MOON: MOON,
    SE_MERCURY: MERCURY,
    SE_VENUS: VENUS,
    SE_MARS: MARS,
    SE_JUPITER: JUPITER,
    SE_SATURN: SATURN,
    SE_URANUS: URANUS,
    SE_NEPTUNE: NEPTUNE,
    SE_PLUTO: PLUTO,
    SE_MEAN_NODE: LUNAR_NODE,
    SE_TRUE_NODE: LUNAR_NODE,
}

# =============================================================================
# CALCULATION FLAGS (Swiss Ephemeris values)
# =============================================================================

SEFLG_MOSEPH = 4
SEFLG_TRUEPOS = 16
SEFLG_NONUT = 64
SEFLG_SPEED = 256
SEFLG_NOABERR = 1024

SE_GREG_CAL = 1
SE_JUL_CAL = 0

# =============================================================================
# TIME
# =============================================================================

J1900 = 2415020.0  # 1900 January 0.5 (noon, Dec 31 1899)
J2000 = 2451545.0  # 2000 January 1.5
DAYS_PER_CENT = 36525.0

# Light travel time for 1 AU, in days
LIGHT_TIME_PER_AU = 5.775518e-3

# =============================================================================
# ANGLES
# =============================================================================

PI2 = math.pi * 2

# Annual aberration of the Sun, degrees
SUN_ABERRATION = 5.69e-3

# Aberration constant for planets, radians
PLANET_ABERRATION = 9.9387e-5

NUTATION_CLASSIC = "classic"
NUTATION_IAU2000B = "iau2000b"
