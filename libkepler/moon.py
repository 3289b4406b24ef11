"""
Geocentric position of the Moon.

Closed-form lunar theory referred to the 1900 January 0.5 epoch
(Duffett-Smith routine MOON, after the Improved Lunar Ephemeris).
It is independent of the Kepler solver: longitude, latitude, horizontal
parallax and angular speed are evaluated directly from trigonometric series
in the fundamental arguments.

Precision:
    Longitude ~0.003°, latitude ~0.001°, parallax ~0.0002°

All coefficients are literal reference values.
"""

from math import cos, radians, sin

from .constants import DAYS_PER_CENT, J1900
from .models import EclipticPosition, MoonPosition
from .utils import frac360, reduce_deg

# Periods of the fundamental arguments, days: mean longitude, Sun mean
# anomaly, Moon mean anomaly, mean elongation, argument of latitude, node.
_PERIODS = (
    27.32158213,
    365.2596407,
    27.55455094,
    29.53058868,
    27.21222039,
    6798.363307,
)


def true_position(jd: float) -> MoonPosition:
    """
    True geocentric position of the Moon, with parallax and angular speed.

    Args:
        jd: Julian Day

    Returns:
        MoonPosition: (position, parallax, motion) where:
            - position: EclipticPosition, longitude/latitude in arc-degrees
              referred to the mean equinox of date, distance in AU
            - parallax: Horizontal parallax, arc-degrees
            - motion: Angular speed, arc-degrees per day
    """
    djd = jd - J1900
    t = djd / DAYS_PER_CENT
    t2 = t * t
    m = [frac360(djd / p) for p in _PERIODS]

    ld = 270.434164 + m[0] - (1.133e-3 - 1.9e-6 * t) * t2  # mean longitude
    ms = 358.475833 + m[1] - (1.5e-4 + 3.3e-6 * t) * t2  # Sun mean anomaly
    md = 296.104608 + m[2] + (9.192e-3 + 1.44e-5 * t) * t2  # mean anomaly
    de = 350.737486 + m[3] - (1.436e-3 - 1.9e-6 * t) * t2  # mean elongation
    f = 11.250889 + m[4] - (3.211e-3 + 3e-7 * t) * t2  # argument of latitude
    n = 259.183275 - m[5] + (2.078e-3 + 2.2e-5 * t) * t2  # ascending node

    # planetary and long-period perturbations of the arguments
    a = radians(51.2 + 20.2 * t)
    sa = sin(a)
    sn = sin(radians(n))
    b = 346.56 + (132.87 - 9.1731e-3 * t) * t
    sb = 3.964e-3 * sin(radians(b))
    c = radians(n + 275.05 - 2.3 * t)
    sc = sin(c)
    ld += 2.33e-4 * sa + sb + 1.964e-3 * sn
    ms -= 1.778e-3 * sa
    md += 8.17e-4 * sa + sb + 2.541e-3 * sn
    f += sb - 2.4691e-2 * sn - 4.328e-3 * sc
    de += 2.011e-3 * sa + sb + 1.964e-3 * sn
    e = 1 - (2.495e-3 + 7.52e-6 * t) * t
    e2 = e * e

    ms = radians(ms)
    n = radians(n)
    de = radians(de)
    f = radians(f)
    md = radians(md)

    de2 = de + de
    de3 = de2 + de
    de4 = de2 + de2
    md2 = md + md
    md3 = md2 + md
    ms2 = ms + ms
    f2 = f + f
    f3 = f2 + f

    # ecliptic longitude
    l = (
        6.28875 * sin(md)
        + 1.274018 * sin(de2 - md)
        + 6.58309e-1 * sin(de2)
        + 2.13616e-1 * sin(md2)
        - e * 1.85596e-1 * sin(ms)
        - 1.14336e-1 * sin(f2)
        + 5.8793e-2 * sin(2 * (de - md))
        + 5.7212e-2 * e * sin(de2 - ms - md)
        + 5.332e-2 * sin(de2 + md)
        + 4.5874e-2 * e * sin(de2 - ms)
        + 4.1024e-2 * e * sin(md - ms)
        - 3.4718e-2 * sin(de)
        - e * 3.0465e-2 * sin(ms + md)
        + 1.5326e-2 * sin(2 * (de - f))
        - 1.2528e-2 * sin(f2 + md)
        - 1.098e-2 * sin(f2 - md)
        + 1.0674e-2 * sin(de4 - md)
        + 1.0034e-2 * sin(md3)
        + 8.548e-3 * sin(de4 - md2)
        - e * 7.91e-3 * sin(ms - md + de2)
        - e * 6.783e-3 * sin(de2 + ms)
        + 5.162e-3 * sin(md - de)
        + e * 5e-3 * sin(ms + de)
        + 3.862e-3 * sin(de4)
        + e * 4.049e-3 * sin(md - ms + de2)
        + 3.996e-3 * sin(2 * (md + de))
        + 3.665e-3 * sin(de2 - md3)
        + e * 2.695e-3 * sin(md2 - ms)
        + 2.602e-3 * sin(md - 2 * (f + de))
        + e * 2.396e-3 * sin(2 * (de - md) - ms)
        - 2.349e-3 * sin(md + de)
        + e2 * 2.249e-3 * sin(2 * (de - ms))
        - e * 2.125e-3 * sin(md2 + ms)
        - e2 * 2.079e-3 * sin(ms2)
        + e2 * 2.059e-3 * sin(2 * (de - ms) - md)
        - 1.773e-3 * sin(md + 2 * (de - f))
        - 1.595e-3 * sin(2 * (f + de))
        + e * 1.22e-3 * sin(de4 - ms - md)
        - 1.11e-3 * sin(2 * (md + f))
        + 8.92e-4 * sin(md - de3)
        - e * 8.11e-4 * sin(ms + md + de2)
        + e * 7.61e-4 * sin(de4 - ms - md2)
        + e2 * 7.04e-4 * sin(md - 2 * (ms + de))
        + e * 6.93e-4 * sin(ms - 2 * (md - de))
        + e * 5.98e-4 * sin(2 * (de - f) - ms)
        + 5.5e-4 * sin(md + de4)
        + 5.38e-4 * sin(4 * md)
        + e * 5.21e-4 * sin(de4 - ms)
        + 4.86e-4 * sin(md2 - de)
        + e2 * 7.17e-4 * sin(md - ms2)
    )
    lam = reduce_deg(ld + l)

    # ecliptic latitude
    g = (
        5.128189 * sin(f)
        + 0.280606 * sin(md + f)
        + 0.277693 * sin(md - f)
        + 0.173238 * sin(de2 - f)
        + 0.055413 * sin(de2 + f - md)
        + 0.046272 * sin(de2 - f - md)
        + 0.032573 * sin(de2 + f)
        + 0.017198 * sin(md2 + f)
        + 0.009267 * sin(de2 + md - f)
        + 0.008823 * sin(md2 - f)
        + e * 0.008247 * sin(de2 - ms - f)
        + 0.004323 * sin(2 * (de - md) - f)
        + 0.0042 * sin(de2 + f + md)
        + e * 0.003372 * sin(f - ms - de2)
        + e * 0.002472 * sin(de2 + f - ms - md)
        + e * 0.002222 * sin(de2 + f - ms)
        + e * 0.002072 * sin(de2 - f - ms - md)
        + e * 0.001877 * sin(f - ms + md)
        + 0.001828 * sin(de4 - f - md)
        - e * 0.001803 * sin(f + ms)
        - 0.00175 * sin(f3)
        + e * 0.00157 * sin(md - ms - f)
        - 0.001487 * sin(f + de)
        - e * 0.001481 * sin(f + ms + md)
        + e * 0.001417 * sin(f - ms - md)
        + e * 0.00135 * sin(f - ms)
        + 0.00133 * sin(f - de)
        + 0.001106 * sin(f + md3)
        + 0.00102 * sin(de4 - f)
        + 0.000833 * sin(f + de4 - md)
        + 0.000781 * sin(md - f3)
        + 0.00067 * sin(f + de4 - md2)
        + 0.000606 * sin(de2 - f3)
        + 0.000597 * sin(2 * (de + md) - f)
        + e * 0.000492 * sin(de2 + md - ms - f)
        + 0.00045 * sin(2 * (md - de) - f)
        + 0.000439 * sin(md3 - f)
        + 0.000423 * sin(f + 2 * (de + md))
        + 0.000422 * sin(de2 - f - md3)
        - e * 0.000367 * sin(ms + f + de2 - md)
        - e * 0.000353 * sin(ms + f + de2)
        + 0.000331 * sin(f + de4)
        + e * 0.000317 * sin(de2 + f - ms + md)
        + e2 * 0.000306 * sin(2 * (de - ms) - f)
        - 0.000283 * sin(md + f3)
    )
    w1 = 0.0004664 * cos(n)
    w2 = 0.0000754 * cos(c)
    bet = g * (1 - w1 - w2)

    # horizontal parallax
    parallax = (
        0.950724
        + 0.051818 * cos(md)
        + 0.009531 * cos(de2 - md)
        + 0.007843 * cos(de2)
        + 0.002824 * cos(md2)
        + 0.000857 * cos(de2 + md)
        + e * 0.000533 * cos(de2 - ms)
        + e * 0.000401 * cos(de2 - md - ms)
        + e * 0.00032 * cos(md - ms)
        - 0.000271 * cos(de)
        - e * 0.000264 * cos(ms + md)
        - 0.000198 * cos(f2 - md)
        + 0.000173 * cos(md3)
        + 0.000167 * cos(de4 - md)
        - e * 0.000111 * cos(ms)
        + 0.000103 * cos(de4 - md2)
        - 0.000084 * cos(md2 - de2)
        - e * 0.000083 * cos(de2 + ms)
        + 0.000079 * cos(de2 + md2)
        + 0.000072 * cos(de4)
        + e * 0.000064 * cos(de2 - ms + md)
        - e * 0.000063 * cos(de2 + ms - md)
        + e * 0.000041 * cos(ms + de)
        + e * 0.000035 * cos(md2 - ms)
        - 0.000033 * cos(md3 - de2)
        - 0.00003 * cos(md + de)
        - 0.000029 * cos(2 * (f - de))
        - e * 0.000029 * cos(md2 + ms)
        + e2 * 0.000026 * cos(2 * (de - ms))
        - 0.000023 * cos(2 * (f - de) + md)
        + e * 0.000019 * cos(de4 - ms - md)
    )

    # distance from the Earth, AU (8.794" is the solar parallax)
    delta = 8.794 / (parallax * 3600)

    # angular speed, degrees per day
    motion = (
        13.176397
        + 1.434006 * cos(md)
        + 0.280135 * cos(de2)
        + 0.251632 * cos(de2 - md)
        + 0.097420 * cos(md2)
        - 0.052799 * cos(f2)
        + 0.034848 * cos(de2 + md)
        + 0.018732 * cos(de2 - ms)
        + 0.010316 * cos(de2 - ms - md)
        + 0.008649 * cos(ms - md)
        - 0.008642 * cos(f2 + md)
        - 0.007471 * cos(ms + md)
        - 0.007387 * cos(de)
        + 0.006864 * cos(md2 + md)
        + 0.006650 * cos(de4 - md)
        + 0.003523 * cos(de2 + md2)
        + 0.003377 * cos(de4 - md2)
        + 0.003287 * cos(de4)
        - 0.003193 * cos(ms)
        - 0.003003 * cos(de2 + ms)
        + 0.002577 * cos(md - ms + de2)
        - 0.002567 * cos(f2 - md)
        - 0.001794 * cos(de2 - md2)
        - 0.001716 * cos(md - f2 - de2)
        - 0.001698 * cos(de2 + ms - md)
        - 0.001415 * cos(de2 + f2)
        + 0.001183 * cos(md2 - ms)
        + 0.001150 * cos(de + ms)
        - 0.001035 * cos(de + md)
        - 0.001019 * cos(f2 + md2)
        - 0.001006 * cos(ms + md2)
    )

    return MoonPosition(EclipticPosition(lam, bet, delta), parallax, motion)
