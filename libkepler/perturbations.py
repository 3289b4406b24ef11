"""
Periodic perturbations of the planetary orbits.

Closed-form correction series for the 1900-epoch mean elements
(Duffett-Smith routine PLANS, after Meeus "Astronomical Formulae for
Calculators" Ch. 24). Each body has its own argument vector:

- Mercury: (M_mercury, M_venus, M_jupiter)
- Venus:   (t, M_sun, M_venus, M_jupiter)
- Mars:    (M_sun, M_venus, M_mars, M_jupiter)
- Jupiter, Saturn, Uranus, Neptune: (t, e) where e is the unperturbed
  eccentricity; the corrections are driven by the long-period
  Jupiter-Saturn-Uranus-Neptune arguments computed from t
- Pluto: no arguments, no corrections

Anomalies are in radians, t in Julian centuries since 1900 January 0.5.
Angular corrections are returned in arc-degrees, radius vector and
semi-axis corrections in AU, eccentricity corrections dimensionless.
"""

from dataclasses import dataclass
from math import cos, sin
from typing import Callable, NamedTuple, Tuple

from .constants import (
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    PLUTO,
    SATURN,
    URANUS,
    VENUS,
)
from .utils import reduce_rad


@dataclass(frozen=True)
class PerturbationResult:
    """
    Corrections to the osculating elements of a planet.

    Attributes:
        dl: Heliocentric longitude, arc-degrees
        dr: Radius vector, AU
        dml: Mean longitude, arc-degrees
        ds: Eccentricity
        dm: Mean anomaly, arc-degrees
        da: Semi-major axis, AU
        dhl: Heliocentric latitude, arc-degrees
    """

    dl: float = 0.0
    dr: float = 0.0
    dml: float = 0.0
    ds: float = 0.0
    dm: float = 0.0
    da: float = 0.0
    dhl: float = 0.0


NO_PERTURBATION = PerturbationResult()


class PerturbationArgs(NamedTuple):
    """
    Quantities a planet may need to build its argument vector.

    Attributes:
        t: Julian centuries since 1900 January 0.5
        sun_anomaly: Mean anomaly of the Sun, radians
        eccentricity: Unperturbed eccentricity of the planet
        mean_anomaly: Callable returning the (light-time shifted) mean
            anomaly of a planet, in radians, given its name
    """

    t: float
    sun_anomaly: float
    eccentricity: float
    mean_anomaly: Callable[[str], float]


# =============================================================================
# INNER PLANETS AND MARS
# =============================================================================


def mercury(m: float, ve: float, ju: float) -> PerturbationResult:
    dl = (
        2.04e-3 * cos(5 * ve - 2 * m + 0.21328)
        + 1.03e-3 * cos(2 * ve - m - 2.8046)
        + 9.1e-4 * cos(2 * ju - m - 0.64582)
        + 7.8e-4 * cos(5 * ve - 3 * m + 0.17692)
    )
    dr = (
        7.525e-6 * cos(2 * ju - m + 0.925251)
        + 6.802e-6 * cos(5 * ve - 3 * m - 4.53642)
        + 5.457e-6 * cos(2 * ve - 2 * m - 1.24246)
        + 3.569e-6 * cos(5 * ve - m - 1.35699)
    )
    return PerturbationResult(dl=dl, dr=dr)


def venus(t: float, ms: float, m: float, ju: float) -> PerturbationResult:
    dml = 7.7e-4 * sin(4.1406 + t * 2.6227)
    dl = (
        3.13e-3 * cos(2 * ms - 2 * m - 2.587)
        + 1.98e-3 * cos(3 * ms - 3 * m + 0.044768)
        + 1.36e-3 * cos(ms - m - 2.0788)
        + 9.6e-4 * cos(3 * ms - 2 * m - 2.3721)
        + 8.2e-4 * cos(ju - m - 3.6335)
    )
    dr = (
        2.2501e-5 * cos(2 * ms - 2 * m - 1.01592)
        + 1.9045e-5 * cos(3 * ms - 3 * m + 1.61577)
        + 6.887e-6 * cos(ju - m - 2.06106)
        + 5.172e-6 * cos(ms - m - 0.508065)
        + 3.62e-6 * cos(5 * ms - 4 * m - 1.81877)
        + 3.283e-6 * cos(4 * ms - 4 * m + 1.10851)
        + 3.074e-6 * cos(2 * ju - 2 * m - 0.962846)
    )
    return PerturbationResult(dl=dl, dr=dr, dml=dml, dm=dml)


def mars(ms: float, ve: float, m: float, ju: float) -> PerturbationResult:
    a = 3 * ju - 8 * m + 4 * ms
    dml = -(1.133e-2 * sin(a) + 9.33e-3 * cos(a))
    dl = (
        7.05e-3 * cos(ju - m - 0.85448)
        + 6.07e-3 * cos(2 * ju - m - 3.2873)
        + 4.45e-3 * cos(2 * ju - 2 * m - 3.3492)
        + 3.88e-3 * cos(ms - 2 * m + 0.35771)
        + 2.38e-3 * cos(ms - m + 0.61256)
        + 2.04e-3 * cos(2 * ms - 3 * m + 2.7688)
        + 1.77e-3 * cos(3 * m - ve - 1.0053)
        + 1.36e-3 * cos(2 * ms - 4 * m + 2.6894)
        + 1.04e-3 * cos(ju + 0.30749)
    )
    dr = (
        5.3227e-5 * cos(ju - m + 0.717864)
        + 5.0989e-5 * cos(2 * ju - 2 * m - 1.77997)
        + 3.8278e-5 * cos(2 * ju - m - 1.71617)
        + 1.5996e-5 * cos(ms - m - 0.969618)
        + 1.4764e-5 * cos(2 * ms - 3 * m + 1.19768)
        + 8.966e-6 * cos(ju - 2 * m + 0.761225)
        + 7.914e-6 * cos(3 * ju - 2 * m - 2.43887)
        + 7.004e-6 * cos(2 * ju - 3 * m - 1.79573)
        + 6.62e-6 * cos(ms - 2 * m + 1.97575)
        + 4.93e-6 * cos(3 * ju - 3 * m - 1.33069)
        + 4.693e-6 * cos(3 * ms - 5 * m + 3.32665)
        + 4.571e-6 * cos(2 * ms - 4 * m + 4.27086)
        + 4.409e-6 * cos(3 * ju - m - 2.02158)
    )
    return PerturbationResult(dl=dl, dr=dr, dml=dml, dm=dml)


# =============================================================================
# OUTER PLANETS
# =============================================================================


class _LongPeriod(NamedTuple):
    u: float  # t/5 + 0.1
    p: float  # Jupiter argument
    q: float  # Saturn argument
    s: float  # Uranus argument
    sv: float
    cv: float
    s2v: float
    c2v: float
    sw: float
    sz: Tuple[float, ...]  # sin(k·ζ), k = 0..5
    cz: Tuple[float, ...]
    sq: Tuple[float, ...]  # sin(k·Q), k = 0..4
    cq: Tuple[float, ...]
    spsi: Tuple[float, ...]  # sin(k·ψ), k = 0..3
    cpsi: Tuple[float, ...]


def _long_period(t: float) -> _LongPeriod:
    p = reduce_rad(4.14473 + 5.29691e1 * t)
    q = reduce_rad(4.641118 + 2.132991e1 * t)
    s = reduce_rad(4.250177 + 7.478172 * t)
    v = 5 * q - 2 * p
    w = 2 * p - 6 * q + 3 * s
    zeta = q - p
    psi = s - q
    return _LongPeriod(
        u=t / 5 + 0.1,
        p=p,
        q=q,
        s=s,
        sv=sin(v),
        cv=cos(v),
        s2v=sin(2 * v),
        c2v=cos(2 * v),
        sw=sin(w),
        sz=tuple(sin(k * zeta) for k in range(6)),
        cz=tuple(cos(k * zeta) for k in range(6)),
        sq=tuple(sin(k * q) for k in range(5)),
        cq=tuple(cos(k * q) for k in range(5)),
        spsi=tuple(sin(k * psi) for k in range(4)),
        cpsi=tuple(cos(k * psi) for k in range(4)),
    )


def _outer_result(a, b, de, da, e, **extra) -> PerturbationResult:
    # a, b in degrees, de in units of 1e-7
    return PerturbationResult(dml=a, dm=a - b / e, ds=de * 1e-7, da=da, **extra)


def jupiter(t: float, e: float) -> PerturbationResult:
    x = _long_period(t)
    u, sz, cz, sq, cq = x.u, x.sz, x.cz, x.sq, x.cq

    a = (
        (0.331364 - 0.010281 * u - 0.004692 * u * u) * x.sv
        + (0.003228 - 0.064436 * u + 0.002075 * u * u) * x.cv
        - (0.003083 + 0.000275 * u - 0.000489 * u * u) * x.s2v
        + 0.002472 * x.sw
        + 0.013619 * sz[1]
        + 0.018472 * sz[2]
        + 0.006717 * sz[3]
        + 0.002775 * sz[4]
        + (0.007275 - 0.001253 * u) * sz[1] * sq[1]
        + 0.006417 * sz[2] * sq[1]
        + 0.002439 * sz[3] * sq[1]
        - (0.033839 + 0.001125 * u) * cz[1] * sq[1]
        - 0.003767 * cz[2] * sq[1]
        - (0.035681 + 0.001208 * u) * sz[1] * cq[1]
        - 0.004261 * sz[2] * cq[1]
        + 0.002178 * cq[1]
        + (-0.006333 + 0.001161 * u) * cz[1] * cq[1]
        - 0.006675 * cz[2] * cq[1]
        - 0.002664 * cz[3] * cq[1]
        - 0.002572 * sz[1] * sq[2]
        - 0.003567 * sz[2] * sq[2]
        + 0.002094 * cz[1] * cq[2]
        + 0.003342 * cz[2] * cq[2]
    )
    de = (
        (3606 + 130 * u - 43 * u * u) * x.sv
        + (1289 - 580 * u) * x.cv
        - 6764 * sz[1] * sq[1]
        - 1110 * sz[2] * sq[1]
        - 224 * sz[3] * sq[1]
        - 204 * sq[1]
        + (1284 + 116 * u) * cz[1] * sq[1]
        + 188 * cz[2] * sq[1]
        + (1460 + 130 * u) * sz[1] * cq[1]
        + 224 * sz[2] * cq[1]
        - 817 * cq[1]
        + 6074 * cz[1] * cq[1]
        + 992 * cz[2] * cq[1]
        + 508 * cz[3] * cq[1]
        + 230 * cz[4] * cq[1]
        + 108 * cz[5] * cq[1]
        - (956 + 73 * u) * sz[1] * sq[2]
        + 448 * sz[2] * sq[2]
        + 137 * sz[3] * sq[2]
        + (-997 + 108 * u) * cz[1] * sq[2]
        + 480 * cz[2] * sq[2]
        + 148 * cz[3] * sq[2]
        + (-956 + 99 * u) * sz[1] * cq[2]
        + 490 * sz[2] * cq[2]
        + 158 * sz[3] * cq[2]
        + 179 * cq[2]
        + (1024 + 75 * u) * cz[1] * cq[2]
        - 437 * cz[2] * cq[2]
        - 132 * cz[3] * cq[2]
    )
    b = (
        (0.007192 - 0.003147 * u) * x.sv
        + (-0.020428 - 0.000675 * u + 0.000197 * u * u) * x.cv
        + (0.007269 + 0.000672 * u) * sz[1] * sq[1]
        - 0.004344 * sq[1]
        + 0.034036 * cz[1] * sq[1]
        + 0.005614 * cz[2] * sq[1]
        + 0.002964 * cz[3] * sq[1]
        + 0.037761 * sz[1] * cq[1]
        + 0.006158 * sz[2] * cq[1]
        - 0.006603 * cz[1] * cq[1]
        - 0.005356 * sz[1] * sq[2]
        + 0.002722 * sz[2] * sq[2]
        + 0.004483 * cz[1] * sq[2]
        - 0.002642 * cz[2] * sq[2]
        + 0.004403 * sz[1] * cq[2]
        - 0.002536 * sz[2] * cq[2]
        + 0.005547 * cz[1] * cq[2]
        - 0.002689 * cz[2] * cq[2]
    )
    da = (
        -263 * x.cv
        + 205 * cz[1]
        + 693 * cz[2]
        + 312 * cz[3]
        + 147 * cz[4]
        + 299 * sz[1] * sq[1]
        + 181 * cz[2] * sq[1]
        + 204 * sz[2] * cq[1]
        + 111 * sz[3] * cq[1]
        - 337 * cz[1] * cq[1]
        - 111 * cz[2] * cq[1]
    )
    return _outer_result(a, b, de, da * 1e-6, e)


def saturn(t: float, e: float) -> PerturbationResult:
    x = _long_period(t)
    u, sz, cz, sq, cq = x.u, x.sz, x.cz, x.sq, x.cq
    sp, cp = x.spsi, x.cpsi

    a = (
        (-0.814181 + 0.018150 * u + 0.016714 * u * u) * x.sv
        + (-0.010497 + 0.160906 * u - 0.004100 * u * u) * x.cv
        + 0.007581 * x.s2v
        - 0.007986 * x.sw
        - 0.148811 * sz[1]
        - 0.040786 * sz[2]
        - 0.015208 * sz[3]
        - 0.006339 * sz[4]
        - 0.006244 * sq[1]
        + (0.008931 + 0.002728 * u) * sz[1] * sq[1]
        - 0.016500 * sz[2] * sq[1]
        - 0.005775 * sz[3] * sq[1]
        + (0.081344 + 0.003206 * u) * cz[1] * sq[1]
        + 0.015019 * cz[2] * sq[1]
        + (0.085581 + 0.002494 * u) * sz[1] * cq[1]
        + (0.025328 - 0.003117 * u) * cz[1] * cq[1]
        + 0.014394 * cz[2] * cq[1]
        + 0.006319 * cz[3] * cq[1]
        + 0.006369 * sz[1] * sq[2]
        + 0.009156 * sz[2] * sq[2]
        + 0.007525 * sp[3] * sq[2]
        - 0.005236 * cz[1] * cq[2]
        - 0.007736 * cz[2] * cq[2]
        - 0.007528 * cp[3] * cq[2]
    )
    de = (
        (-7927 + 2548 * u + 91 * u * u) * x.sv
        + (13381 + 1226 * u - 253 * u * u) * x.cv
        + (248 - 121 * u) * x.s2v
        - (305 + 91 * u) * x.c2v
        + 412 * sz[2]
        + 12415 * sq[1]
        + (390 - 617 * u) * sz[1] * sq[1]
        + (165 - 204 * u) * sz[2] * sq[1]
        + 26599 * cz[1] * sq[1]
        - 4687 * cz[2] * sq[1]
        - 1870 * cz[3] * sq[1]
        - 821 * cz[4] * sq[1]
        - 377 * cz[5] * sq[1]
        + 497 * cp[2] * sq[1]
        + (163 - 611 * u) * cq[1]
        - 12696 * sz[1] * cq[1]
        - 4200 * sz[2] * cq[1]
        - 1503 * sz[3] * cq[1]
        - 619 * sz[4] * cq[1]
        - 268 * sz[5] * cq[1]
        - (282 + 1306 * u) * cz[1] * cq[1]
        + (-86 + 230 * u) * cz[2] * cq[1]
        + 461 * sp[2] * cq[1]
        - 350 * sq[2]
        + (2211 - 286 * u) * sz[1] * sq[2]
        - 2208 * sz[2] * sq[2]
        - 568 * sz[3] * sq[2]
        - 346 * sz[4] * sq[2]
        - (2780 + 222 * u) * cz[1] * sq[2]
        + (2022 + 263 * u) * cz[2] * sq[2]
        + 248 * cz[3] * sq[2]
        + 242 * sp[3] * sq[2]
        + 467 * cp[3] * sq[2]
        - 490 * cq[2]
        - (2842 + 279 * u) * sz[1] * cq[2]
        + (128 + 226 * u) * sz[2] * cq[2]
        + 224 * sz[3] * cq[2]
        + (-1594 + 282 * u) * cz[1] * cq[2]
        + (2162 - 207 * u) * cz[2] * cq[2]
        + 561 * cz[3] * cq[2]
        + 343 * cz[4] * cq[2]
        + 469 * sp[3] * cq[2]
        - 242 * cp[3] * cq[2]
        - 205 * sz[1] * sq[3]
        + 262 * sz[3] * sq[3]
        + 208 * cz[1] * cq[3]
        - 271 * cz[3] * cq[3]
        - 382 * cz[3] * sq[4]
        - 376 * sz[3] * cq[4]
    )
    b = (
        (0.077108 + 0.007186 * u - 0.001533 * u * u) * x.sv
        + (0.045803 - 0.014766 * u - 0.000536 * u * u) * x.cv
        - 0.007075 * sz[1]
        - 0.075825 * sz[1] * sq[1]
        - 0.024839 * sz[2] * sq[1]
        - 0.008631 * sz[3] * sq[1]
        - 0.072586 * cq[1]
        - 0.150383 * cz[1] * cq[1]
        + 0.026897 * cz[2] * cq[1]
        + 0.010053 * cz[3] * cq[1]
        - (0.013597 + 0.001719 * u) * sz[1] * sq[2]
        + (-0.007742 + 0.001517 * u) * cz[1] * sq[2]
        + (0.013586 - 0.001375 * u) * cz[2] * sq[2]
        + (-0.013667 + 0.001239 * u) * sz[1] * cq[2]
        + 0.011981 * sz[2] * cq[2]
        + (0.014861 + 0.001136 * u) * cz[1] * cq[2]
        - (0.013064 + 0.001628 * u) * cz[2] * cq[2]
    )
    da = (
        572 * u * x.sv
        + 2933 * x.cv
        + 33629 * cz[1]
        - 3081 * cz[2]
        - 1423 * cz[3]
        - 671 * cz[4]
        - 320 * cz[5]
        + 1098 * sq[1]
        - 2812 * sz[1] * sq[1]
        + 688 * sz[2] * sq[1]
        - 393 * sz[3] * sq[1]
        - 228 * sz[4] * sq[1]
        + 2138 * cz[1] * sq[1]
        - 999 * cz[2] * sq[1]
        - 642 * cz[3] * sq[1]
        - 325 * cz[4] * sq[1]
        - 890 * cq[1]
        + 2206 * sz[1] * cq[1]
        - 1590 * sz[2] * cq[1]
        - 647 * sz[3] * cq[1]
        - 344 * sz[4] * cq[1]
        + 2885 * cz[1] * cq[1]
        + (2172 + 102 * u) * cz[2] * cq[1]
        + 296 * cz[3] * cq[1]
        - 267 * sz[2] * sq[2]
        - 778 * cz[1] * sq[2]
        + 495 * cz[2] * sq[2]
        + 250 * cz[3] * sq[2]
        - 856 * sz[1] * cq[2]
        + 441 * sz[2] * cq[2]
        + 296 * cz[2] * cq[2]
        + 211 * cz[3] * cq[2]
        - 427 * sz[1] * sq[3]
        + 398 * sz[3] * sq[3]
        + 344 * cz[1] * cq[3]
        - 427 * cz[3] * cq[3]
    )
    dhl = (
        0.000747 * cz[1] * sq[1]
        + 0.001069 * cz[1] * cq[1]
        + 0.002108 * sz[2] * sq[2]
        + 0.001261 * cz[2] * sq[2]
        + 0.001236 * sz[2] * cq[2]
        - 0.002075 * cz[2] * cq[2]
    )
    return _outer_result(a, b, de, da * 1e-6, e, dhl=dhl)


class _Trans(NamedTuple):
    u: float
    s: float  # Uranus argument
    g: float  # Neptune argument
    h: float  # 2G - S
    zeta: float  # S - P
    eta: float  # S - Q
    theta: float  # G - S
    sw: float


def _trans_saturnian(t: float) -> _Trans:
    x = _long_period(t)
    g = reduce_rad(1.46205 + 3.81337 * t)
    return _Trans(
        u=x.u,
        s=x.s,
        g=g,
        h=2 * g - x.s,
        zeta=x.s - x.p,
        eta=x.s - x.q,
        theta=g - x.s,
        sw=x.sw,
    )


def uranus(t: float, e: float) -> PerturbationResult:
    x = _trans_saturnian(t)
    u, s, h, eta, theta = x.u, x.s, x.h, x.eta, x.theta
    sh, ch = sin(h), cos(h)
    s2h, c2h = sin(2 * h), cos(2 * h)

    a = (
        (0.864319 - 0.001583 * u) * sh
        + (0.082222 - 0.006833 * u) * ch
        + 0.036017 * s2h
        - 0.003019 * c2h
        + 0.008122 * x.sw
    )
    de = (-3349 + 163 * u) * sh + 20981 * ch + 1311 * c2h
    b = 0.120303 * sh + (0.019472 - 0.000947 * u) * ch + 0.006197 * s2h
    da = -0.003825 * ch

    dl = (
        (0.010122 - 0.000988 * u) * sin(s + eta)
        + (-0.038581 + 0.002031 * u - 0.001910 * u * u) * cos(s + eta)
        + (0.034964 - 0.001038 * u + 0.000868 * u * u) * cos(2 * s + eta)
        + 0.005594 * sin(s + 3 * theta)
        - 0.014808 * sin(x.zeta)
        - 0.005794 * sin(eta)
        + 0.002347 * cos(eta)
        + 0.009872 * sin(theta)
        + 0.008803 * sin(2 * theta)
        - 0.004308 * sin(3 * theta)
    )
    ss, cs = sin(s), cos(s)
    dr = (
        -0.025948
        + 0.004985 * cos(x.zeta)
        - 0.001230 * cs
        + 0.003354 * cos(eta)
        + (0.005795 * cs - 0.001165 * ss + 0.001388 * cos(2 * s)) * sin(eta)
        + (0.001351 * cs + 0.005702 * ss + 0.001388 * sin(2 * s)) * cos(eta)
        + 0.000904 * cos(2 * theta)
        + 0.000894 * (cos(theta) - cos(3 * theta))
    )
    return _outer_result(a, b, de, da, e, dl=dl, dr=dr)


def neptune(t: float, e: float) -> PerturbationResult:
    x = _trans_saturnian(t)
    u, g, h, eta, theta = x.u, x.g, x.h, x.eta, x.theta
    sh, ch = sin(h), cos(h)
    s2h, c2h = sin(2 * h), cos(2 * h)
    s2t, c2t = sin(2 * theta), cos(2 * theta)
    sg, cg = sin(g), cos(g)

    a = (-0.589833 + 0.001089 * u) * sh + (-0.056094 + 0.004658 * u) * ch - 0.024286 * s2h
    de = 4389 * sh + 4262 * ch + 1129 * s2h + 1089 * c2h
    b = 0.024039 * sh - 0.025303 * ch + 0.006206 * s2h - 0.005992 * c2h
    da = -0.000817 * sh + 0.008189 * ch + 0.000781 * c2h

    dl = (
        -0.009556 * sin(x.zeta)
        - 0.005178 * sin(eta)
        + 0.002572 * s2t
        - 0.002972 * c2t * sg
        - 0.002833 * s2t * cg
    )
    dhl = 0.000336 * c2t * sg + 0.000364 * s2t * cg
    dr = (
        -0.040596
        + 0.004992 * cos(x.zeta)
        + 0.002744 * cos(eta)
        + 0.002044 * cos(theta)
        + 0.001051 * c2t
    )
    return _outer_result(a, b, de, da, e, dl=dl, dr=dr, dhl=dhl)


def pluto() -> PerturbationResult:
    return NO_PERTURBATION


# =============================================================================
# DISPATCH TABLE
# =============================================================================


class PerturbationTable(NamedTuple):
    """
    Correction series of one planet together with its argument builder.

    Attributes:
        arguments: Builds the body-specific argument vector
        corrections: Evaluates the series on that vector
    """

    arguments: Callable[[PerturbationArgs], Tuple[float, ...]]
    corrections: Callable[..., PerturbationResult]

    def __call__(self, args: PerturbationArgs) -> PerturbationResult:
        return self.corrections(*self.arguments(args))


def _outer_args(a: PerturbationArgs) -> Tuple[float, ...]:
    return a.t, a.eccentricity


PERTURBATIONS = {
    MERCURY: PerturbationTable(
        lambda a: (
            a.mean_anomaly(MERCURY),
            a.mean_anomaly(VENUS),
            a.mean_anomaly(JUPITER),
        ),
        mercury,
    ),
    VENUS: PerturbationTable(
        lambda a: (a.t, a.sun_anomaly, a.mean_anomaly(VENUS), a.mean_anomaly(JUPITER)),
        venus,
    ),
    MARS: PerturbationTable(
        lambda a: (
            a.sun_anomaly,
            a.mean_anomaly(VENUS),
            a.mean_anomaly(MARS),
            a.mean_anomaly(JUPITER),
        ),
        mars,
    ),
    JUPITER: PerturbationTable(_outer_args, jupiter),
    SATURN: PerturbationTable(_outer_args, saturn),
    URANUS: PerturbationTable(_outer_args, uranus),
    NEPTUNE: PerturbationTable(_outer_args, neptune),
    PLUTO: PerturbationTable(lambda a: (), pluto),
}
