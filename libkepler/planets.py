"""
Planetary position calculations for libkepler.

Converts perturbed osculating elements into heliocentric and then
geocentric ecliptic coordinates (Duffett-Smith routine PLANS), and exposes
the Swiss Ephemeris-style entry points.

Supported Bodies:
- Sun, Moon (own theories, see sun.py and moon.py)
- Mercury, Venus, Mars, Jupiter, Saturn, Uranus, Neptune, Pluto
- Lunar nodes (Mean/True) via lunar.py

Main Functions:
- swe_calc_ut(): Calculate positions in Universal Time
- swe_calc(): Calculate positions in Terrestrial Time

Projection:
- Inner planets (Mercury, Venus) are projected from the Sun-Earth line
- Outer planets (Mars and beyond) from the planet's heliocentric longitude

Precision Notes:
- Mercury-Neptune: about 1' against modern ephemerides for the 20th-21st
  centuries
- Pluto: unperturbed mean elements, a few arcminutes
"""

import logging
import math
import threading
from enum import IntEnum
from typing import Dict, NamedTuple, Tuple

from .constants import (
    BODY_ID_TO_NAME,
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    PLANET_ABERRATION,
    PLUTO,
    SATURN,
    SE_JUPITER,
    SE_MARS,
    SE_MERCURY,
    SE_NEPTUNE,
    SE_PLUTO,
    SE_SATURN,
    SE_TRUE_NODE,
    SE_URANUS,
    SE_VENUS,
    SEFLG_NOABERR,
    SEFLG_NONUT,
    SEFLG_SPEED,
    SEFLG_TRUEPOS,
    URANUS,
    VENUS,
)
from .exceptions import UnknownBodyError
from .kepler import eccentric_anomaly, true_anomaly
from .orbits import ORBITAL_ELEMENTS, ElementSet, OrbitalElements
from .perturbations import PERTURBATIONS, PerturbationArgs, PerturbationResult
from .utils import reduce_rad

logger = logging.getLogger(__name__)


class PlanetId(IntEnum):
    """Planet identifiers, numbered as the Swiss Ephemeris body ids."""

    MERCURY = SE_MERCURY
    VENUS = SE_VENUS
    MARS = SE_MARS
    JUPITER = SE_JUPITER
    SATURN = SE_SATURN
    URANUS = SE_URANUS
    NEPTUNE = SE_NEPTUNE
    PLUTO = SE_PLUTO


_PLANET_NAMES = {
    PlanetId.MERCURY: MERCURY,
    PlanetId.VENUS: VENUS,
    PlanetId.MARS: MARS,
    PlanetId.JUPITER: JUPITER,
    PlanetId.SATURN: SATURN,
    PlanetId.URANUS: URANUS,
    PlanetId.NEPTUNE: NEPTUNE,
    PlanetId.PLUTO: PLUTO,
}
_NAME_TO_ID = {name: pid for pid, name in _PLANET_NAMES.items()}

INNER_PLANETS = frozenset({PlanetId.MERCURY, PlanetId.VENUS})


class HeliocentricResult(NamedTuple):
    """
    Intermediate heliocentric quantities, angles in radians.

    Attributes:
        ll: Heliocentric longitude of the planet minus that of the Earth
        rpd: Radius vector projected on the ecliptic, AU
        lpd: Heliocentric ecliptic longitude
        spsi: Sine of the (corrected) heliocentric latitude
        cpsi: Cosine of the heliocentric latitude
        rho: Distance from the Earth, AU
    """

    ll: float
    rpd: float
    lpd: float
    spsi: float
    cpsi: float
    rho: float


class Planet:
    """
    A major planet: its mean elements, perturbation series and the
    heliocentric / geocentric transform.

    Instances are immutable and shared by all contexts through the
    PlanetRegistry.
    """

    def __init__(self, pid: PlanetId):
        self.id = PlanetId(pid)
        self.name = _PLANET_NAMES[self.id]
        self.elements: OrbitalElements = ORBITAL_ELEMENTS[self.name]
        self._perturbations = PERTURBATIONS[self.name]

    def __repr__(self) -> str:
        return f"Planet({self.name})"

    def __str__(self) -> str:
        return self.name

    @property
    def inner(self) -> bool:
        """True for Mercury and Venus, whose orbits lie inside the Earth's."""
        return self.id in INNER_PLANETS

    @property
    def daily_motion(self) -> float:
        """Mean daily motion, arc-degrees per day."""
        return self.elements.daily_motion

    def perturbations(self, args: PerturbationArgs) -> PerturbationResult:
        """
        Corrections to the orbit of this planet.

        Args:
            args: Snapshot from which the body-specific argument vector
                is assembled

        Returns:
            PerturbationResult: Angular corrections in arc-degrees,
            radius and semi-axis corrections in AU
        """
        return self._perturbations(args)

    def heliocentric(
        self,
        elements: ElementSet,
        ma: float,
        re: float,
        lg: float,
        pert: PerturbationResult,
    ) -> HeliocentricResult:
        """
        Heliocentric position of the planet.

        Args:
            elements: Osculating elements at the instant
            ma: Mean anomaly, radians
            re: Sun-Earth distance, AU
            lg: Heliocentric longitude of the Earth, radians
            pert: Corrections to apply

        Returns:
            HeliocentricResult: (ll, rpd, lpd, spsi, cpsi, rho)

        Raises:
            NumericConvergenceError: If Kepler's equation does not converge
        """
        s = elements.s + pert.ds
        ma += math.radians(pert.dm)
        ea = eccentric_anomaly(s, reduce_rad(ma))
        nu = true_anomaly(s, ea)

        rp = (elements.sa + pert.da) * (1 - s * s) / (1 + s * math.cos(nu)) + pert.dr
        lp = nu + elements.ph + math.radians(pert.dml - pert.dm)  # orbital longitude
        lo = lp - elements.nd
        sin_lo = math.sin(lo)
        spsi = sin_lo * math.sin(elements.ic)
        y = sin_lo * math.cos(elements.ic)
        psi = math.asin(spsi) + math.radians(pert.dhl)  # heliocentric latitude
        lpd = math.atan2(y, math.cos(lo)) + elements.nd + math.radians(pert.dl)
        cpsi = math.cos(psi)
        ll = lpd - lg
        rho = math.sqrt(re * re + rp * rp - 2 * re * rp * cpsi * math.cos(ll))

        # sin(psi) is not spsi above: psi carries the latitude correction
        return HeliocentricResult(ll, rp * cpsi, lpd, math.sin(psi), cpsi, rho)

    def geocentric(
        self,
        helio: HeliocentricResult,
        lg: float,
        rsn: float,
        dpsi: float = 0.0,
        aberration: bool = False,
    ) -> Tuple[float, float]:
        """
        Geocentric ecliptic longitude and latitude.

        Args:
            helio: Result of heliocentric()
            lg: Heliocentric longitude of the Earth, radians
            rsn: Sun-Earth distance, AU
            dpsi: Nutation in longitude to add, arc-degrees (0 for the mean
                equinox of date)
            aberration: Apply annual aberration

        Returns:
            Tuple[float, float]: (longitude 0-360, latitude), arc-degrees
        """
        sll = math.sin(helio.ll)
        cll = math.cos(helio.ll)

        if self.inner:
            lam = math.atan2(-helio.rpd * sll, rsn - helio.rpd * cll) + lg + math.pi
        else:
            lam = math.atan2(rsn * sll, helio.rpd - rsn * cll) + helio.lpd

        if sll == 0.0:
            # conjunction or opposition: sin(lam - lpd) / sin(ll) tends to
            # rsn over the projected Earth distance
            rho_p = abs(helio.rpd - rsn * cll)
            bet = math.atan(helio.rpd * helio.spsi / (helio.cpsi * rho_p))
        else:
            bet = math.atan(
                helio.rpd * helio.spsi * math.sin(lam - helio.lpd)
                / (helio.cpsi * rsn * sll)
            )

        lam += math.radians(dpsi)
        if aberration:
            a = lg + math.pi - lam
            lam -= PLANET_ABERRATION * math.cos(a) / math.cos(bet)
            bet -= PLANET_ABERRATION * math.sin(a) * math.sin(bet)

        return math.degrees(reduce_rad(lam)), math.degrees(bet)


class PlanetRegistry:
    """
    Build-once collection of Planet objects keyed by PlanetId.

    Planets are created on first request under a lock and never replaced,
    so lookups after creation are safe from any thread.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._planets: Dict[PlanetId, Planet] = {}

    def for_id(self, pid: int) -> Planet:
        """
        Get the planet with the given identifier.

        Raises:
            UnknownBodyError: If pid is not a planet identifier
        """
        try:
            key = PlanetId(pid)
        except ValueError:
            raise UnknownBodyError(pid) from None

        planet = self._planets.get(key)
        if planet is None:
            with self._lock:
                planet = self._planets.get(key)
                if planet is None:
                    logger.debug("Building planet %s", key.name)
                    planet = Planet(key)
                    self._planets[key] = planet
        return planet

    def for_name(self, name: str) -> Planet:
        """
        Get the planet with the given name ("Mercury" ... "Pluto").

        Raises:
            UnknownBodyError: If name is not a planet name
        """
        try:
            pid = _NAME_TO_ID[name]
        except (KeyError, TypeError):
            raise UnknownBodyError(name) from None
        return self.for_id(pid)

    def __contains__(self, name) -> bool:
        return name in _NAME_TO_ID

    def __iter__(self):
        return (self.for_id(pid) for pid in PlanetId)

    def __len__(self) -> int:
        return len(PlanetId)


# =============================================================================
# SWISS EPHEMERIS STYLE API
# =============================================================================


def swe_calc_ut(
    tjd_ut: float, ipl: int, iflag: int
) -> Tuple[Tuple[float, float, float, float, float, float], int]:
    """
    Calculate the position of a body for Universal Time.

    Args:
        tjd_ut: Julian Day in Universal Time (UT1)
        ipl: Body ID (SE_SUN ... SE_PLUTO, SE_MEAN_NODE, SE_TRUE_NODE)
        iflag: Calculation flags (SEFLG_SPEED, SEFLG_NONUT, SEFLG_NOABERR,
            SEFLG_TRUEPOS)

    Returns:
        Tuple containing:
            - Position tuple: (longitude, latitude, distance, speed_lon, 0.0, 0.0)
            - Return flag: iflag value on success

    Note:
        The time is converted to TT with swe_deltat() before calculation.

    Example:
        >>> pos, retflag = swe_calc_ut(2451545.0, SE_MARS, SEFLG_SPEED)
        >>> lon, lat, dist = pos[0], pos[1], pos[2]
    """
    from .time_utils import swe_deltat

    return _calc_body(tjd_ut + swe_deltat(tjd_ut), ipl, iflag)


def swe_calc(
    tjd: float, ipl: int, iflag: int
) -> Tuple[Tuple[float, float, float, float, float, float], int]:
    """
    Calculate the position of a body for Terrestrial Time.

    Args:
        tjd: Julian Day in Terrestrial Time (TT/ET)
        ipl: Body ID (SE_SUN ... SE_PLUTO, SE_MEAN_NODE, SE_TRUE_NODE)
        iflag: Calculation flags (SEFLG_SPEED, SEFLG_NONUT, SEFLG_NOABERR,
            SEFLG_TRUEPOS)

    Returns:
        Same as swe_calc_ut()

    Example:
        >>> pos, retflag = swe_calc(2451545.0, SE_JUPITER, SEFLG_SPEED)
    """
    return _calc_body(tjd, ipl, iflag)


def _calc_body(
    jd: float, ipl: int, iflag: int
) -> Tuple[Tuple[float, float, float, float, float, float], int]:
    """
    Calculate the position of a body (internal dispatcher).

    Positions are apparent by default. SEFLG_NONUT refers them to the mean
    equinox of date, SEFLG_NOABERR drops annual aberration and
    SEFLG_TRUEPOS gives the geometric position (no light-time, no
    aberration). Latitude and distance speeds are not computed and are
    always 0.0.

    Raises:
        UnknownBodyError: If ipl is not a supported body
    """
    from .context import EphemerisContext

    name = BODY_ID_TO_NAME.get(ipl)
    if name is None:
        raise UnknownBodyError(ipl)

    truepos = bool(iflag & SEFLG_TRUEPOS)
    ctx = EphemerisContext(
        jd,
        true_node=ipl == SE_TRUE_NODE,
        nutation=not iflag & SEFLG_NONUT,
        aberration=not (truepos or iflag & SEFLG_NOABERR),
        light_time=not truepos,
    )
    pos = ctx.position(name)
    speed = ctx.daily_motion(name) if iflag & SEFLG_SPEED else 0.0
    return (pos.lon, pos.lat, pos.dist, speed, 0.0, 0.0), iflag
