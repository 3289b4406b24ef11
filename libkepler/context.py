"""
Per-epoch ephemeris context.

An EphemerisContext computes, once, the quantities shared by every body at
its instant (Sun position and mean anomaly, nutation, obliquity) and
memoizes the positions, daily motions, mean anomalies and eccentricities of
the bodies queried on it.

Usage:
    >>> from libkepler import EphemerisContext
    >>> ctx = EphemerisContext(2451545.0, apparent=True)
    >>> ctx.position("Mars")
    EclipticPosition(lon=..., lat=..., dist=...)
    >>> ctx.daily_motion("Mars")

Daily motion of every body except the Moon is a symmetric finite
difference between two sibling contexts 12 hours before and after.

Thread Safety:
    Each context guards its caches with its own re-entrant lock, so one
    context may be shared between threads. Contexts for different epochs
    are fully independent.
"""

import logging
import math
import threading
from functools import partial
from typing import Dict, Optional, Tuple, Union

from .constants import (
    BODY_NAMES,
    DAYS_PER_CENT,
    J1900,
    LIGHT_TIME_PER_AU,
    LUNAR_NODE,
    MOON,
    SUN,
    SUN_ABERRATION,
)
from .exceptions import UnknownBodyError
from .lunar import lunar_node
from .models import EclipticPosition, MoonPosition
from .moon import true_position
from .nutation import nutation_and_obliquity
from .perturbations import PerturbationArgs
from .planets import HeliocentricResult, Planet, PlanetRegistry
from .sun import mean_anomaly as sun_mean_anomaly
from .sun import true_geocentric
from .state import get_default_flags, get_registry
from .utils import difdeg2n, reduce_deg

logger = logging.getLogger(__name__)

PlanetLike = Union[Planet, str]


class EphemerisContext:
    """
    Geocentric positions of the Sun, Moon, planets and lunar node at one
    instant.

    Args:
        jd: Julian Day (TT)
        apparent: Apply nutation and aberration. Defaults to the configured
            value (see state.set_default_flags)
        true_node: Report the true, not mean, lunar node. Defaults to the
            configured value
        registry: Planet registry; the process-wide one by default
        nutation: Refer positions to the true equinox of date. Defaults to
            `apparent`
        aberration: Apply annual aberration. Defaults to `apparent`
        light_time: Correct planet positions for light time

    Attributes:
        jd: Julian Day
        djd: Days since 1900 January 0.5
        t: Julian centuries since 1900 January 0.5
        ms: Mean anomaly of the Sun, arc-degrees
        nut: (dpsi, deps) nutation in longitude and obliquity, arc-degrees
        eps: True obliquity of the ecliptic, arc-degrees
        sun_geo: (lsn, rsn) true longitude of the Sun, arc-degrees, and
            Sun-Earth distance, AU
    """

    def __init__(
        self,
        jd: float,
        apparent: Optional[bool] = None,
        true_node: Optional[bool] = None,
        registry: Optional[PlanetRegistry] = None,
        nutation: Optional[bool] = None,
        aberration: Optional[bool] = None,
        light_time: bool = True,
    ):
        default_apparent, default_true_node = get_default_flags()
        self._jd = jd
        self._apparent = default_apparent if apparent is None else bool(apparent)
        self._true_node = default_true_node if true_node is None else bool(true_node)
        self._nutation = self._apparent if nutation is None else bool(nutation)
        self._aberration = self._apparent if aberration is None else bool(aberration)
        self._light_time = bool(light_time)
        self._registry = registry if registry is not None else get_registry()

        self._djd = jd - J1900
        self._t = self._djd / DAYS_PER_CENT
        self._ms = sun_mean_anomaly(self._t)
        self._nut, self._eps = nutation_and_obliquity(jd)
        self._sun_geo = true_geocentric(self._t, ms=self._ms)

        self._lock = threading.RLock()
        self._positions: Dict[str, EclipticPosition] = {}
        self._daily_motions: Dict[str, float] = {}
        self._mean_anomalies: Dict[str, float] = {}
        self._eccentricities: Dict[str, float] = {}
        self._moon: Optional[MoonPosition] = None
        self._prev: Optional["EphemerisContext"] = None
        self._next: Optional["EphemerisContext"] = None

        logger.debug(
            "Created ephemeris context jd=%r nutation=%s aberration=%s true_node=%s",
            jd,
            self._nutation,
            self._aberration,
            self._true_node,
        )

    @classmethod
    def for_djd(
        cls,
        djd: float,
        apparent: Optional[bool] = None,
        true_node: Optional[bool] = None,
        registry: Optional[PlanetRegistry] = None,
        **switches,
    ) -> "EphemerisContext":
        """Create a context from days since 1900 January 0.5."""
        return cls(
            djd + J1900,
            apparent=apparent,
            true_node=true_node,
            registry=registry,
            **switches,
        )

    def __repr__(self) -> str:
        return (
            f"EphemerisContext(jd={self._jd!r}, nutation={self._nutation}, "
            f"aberration={self._aberration}, light_time={self._light_time}, "
            f"true_node={self._true_node})"
        )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def jd(self) -> float:
        return self._jd

    @property
    def djd(self) -> float:
        return self._djd

    @property
    def t(self) -> float:
        return self._t

    @property
    def apparent(self) -> bool:
        return self._apparent

    @property
    def true_node(self) -> bool:
        return self._true_node

    @property
    def nutation(self) -> bool:
        return self._nutation

    @property
    def aberration(self) -> bool:
        return self._aberration

    @property
    def light_time(self) -> bool:
        return self._light_time

    @property
    def registry(self) -> PlanetRegistry:
        return self._registry

    @property
    def ms(self) -> float:
        return self._ms

    @property
    def nut(self) -> Tuple[float, float]:
        return self._nut

    @property
    def eps(self) -> float:
        return self._eps

    @property
    def sun_geo(self) -> Tuple[float, float]:
        return self._sun_geo

    @property
    def prev(self) -> "EphemerisContext":
        """Context 12 hours earlier, created on first access."""
        with self._lock:
            if self._prev is None:
                self._prev = self._sibling(-0.5)
            return self._prev

    @property
    def next(self) -> "EphemerisContext":
        """Context 12 hours later, created on first access."""
        with self._lock:
            if self._next is None:
                self._next = self._sibling(0.5)
            return self._next

    def _sibling(self, offset: float) -> "EphemerisContext":
        logger.debug("Creating sibling context at %+.1f day", offset)
        return EphemerisContext(
            self._jd + offset,
            apparent=self._apparent,
            true_node=self._true_node,
            registry=self._registry,
            nutation=self._nutation,
            aberration=self._aberration,
            light_time=self._light_time,
        )

    # =========================================================================
    # ORBITAL QUANTITIES
    # =========================================================================

    def _planet(self, planet: PlanetLike) -> Planet:
        if isinstance(planet, Planet):
            return planet
        return self._registry.for_name(planet)

    def mean_anomaly(self, planet: PlanetLike, dt: float = 0.0) -> float:
        """
        Mean anomaly of a planet, radians.

        Args:
            planet: Planet or planet name
            dt: Time correction, days. The mean anomaly is moved back by
                dt times the mean daily motion (light-time correction).

        Returns:
            float: Mean anomaly in radians (not reduced when dt != 0)
        """
        pla = self._planet(planet)
        with self._lock:
            ma = self._mean_anomalies.get(pla.name)
            if ma is None:
                ma = math.radians(pla.elements.mean_anomaly(self._t))
                self._mean_anomalies[pla.name] = ma
        return ma - math.radians(dt * pla.daily_motion)

    def eccentricity(self, planet: PlanetLike) -> float:
        """Unperturbed eccentricity of a planet's orbit."""
        pla = self._planet(planet)
        with self._lock:
            ec = self._eccentricities.get(pla.name)
            if ec is None:
                ec = pla.elements.at(self._t).s
                self._eccentricities[pla.name] = ec
        return ec

    # =========================================================================
    # POSITIONS
    # =========================================================================

    def _moon_result(self) -> MoonPosition:
        with self._lock:
            if self._moon is None:
                self._moon = true_position(self._jd)
            return self._moon

    def moon_parallax(self) -> float:
        """Horizontal parallax of the Moon, arc-degrees."""
        return self._moon_result().parallax

    def _dpsi(self) -> float:
        return self._nut[0] if self._nutation else 0.0

    def _calculate_sun(self) -> EclipticPosition:
        lsn, rsn = self._sun_geo
        # no light-time term for the Sun
        lsn += self._dpsi()
        if self._aberration:
            lsn -= SUN_ABERRATION
        return EclipticPosition(reduce_deg(lsn), 0.0, rsn)

    def _calculate_moon(self) -> EclipticPosition:
        pos = self._moon_result().position
        if self._nutation:
            pos = pos._replace(lon=reduce_deg(pos.lon + self._nut[0]))
        return pos

    def _calculate_node(self) -> EclipticPosition:
        return EclipticPosition(lunar_node(self._jd, mean=not self._true_node), 0.0, 0.0)

    def _planet_helio(
        self, pla: Planet, lg: float, dt: float = 0.0
    ) -> HeliocentricResult:
        elements = pla.elements.at(self._t)._replace(s=self.eccentricity(pla))
        args = PerturbationArgs(
            t=self._t,
            sun_anomaly=math.radians(self._ms),
            eccentricity=elements.s,
            mean_anomaly=partial(self.mean_anomaly, dt=dt),
        )
        return pla.heliocentric(
            elements,
            self.mean_anomaly(pla, dt=dt),
            self._sun_geo[1],
            lg,
            pla.perturbations(args),
        )

    def _calculate_planet(self, pla: Planet) -> EclipticPosition:
        lsn, rsn = self._sun_geo
        lg = math.radians(lsn) + math.pi  # heliocentric longitude of the Earth

        h1 = self._planet_helio(pla, lg)
        h2 = h1
        if self._light_time:
            h2 = self._planet_helio(pla, lg, dt=h1.rho * LIGHT_TIME_PER_AU)
        lam, bet = pla.geocentric(
            h2, lg, rsn, dpsi=self._dpsi(), aberration=self._aberration
        )
        # distance of the uncorrected pass
        return EclipticPosition(lam, bet, h1.rho)

    def position(self, name: str) -> EclipticPosition:
        """
        Geocentric ecliptic position of a body.

        Planet positions are corrected for light time. When the context is
        apparent, nutation and aberration are also applied.

        Args:
            name: "Sun", "Moon", "LunarNode" or a planet name

        Returns:
            EclipticPosition: (lon 0-360, lat, dist) in arc-degrees and AU.
            The same object is returned on every call.

        Raises:
            UnknownBodyError: If the name is not supported
        """
        if name not in BODY_NAMES:
            raise UnknownBodyError(name)
        with self._lock:
            pos = self._positions.get(name)
            if pos is not None:
                return pos

            if name == SUN:
                pos = self._calculate_sun()
            elif name == MOON:
                pos = self._calculate_moon()
            elif name == LUNAR_NODE:
                pos = self._calculate_node()
            else:
                pos = self._calculate_planet(self._registry.for_name(name))

            self._positions[name] = pos
            return pos

    def daily_motion(self, name: str) -> float:
        """
        Daily motion in longitude, arc-degrees per day.

        The Moon's value comes from its own series; other bodies use the
        difference between the next and previous sibling contexts,
        normalized to [-180, 180].

        Raises:
            UnknownBodyError: If the name is not supported
        """
        if name not in BODY_NAMES:
            raise UnknownBodyError(name)
        with self._lock:
            motion = self._daily_motions.get(name)
            if motion is not None:
                return motion

            if name == MOON:
                motion = self._moon_result().motion
            else:
                x0 = self.prev.position(name).lon
                x1 = self.next.position(name).lon
                motion = difdeg2n(x1, x0)

            self._daily_motions[name] = motion
            return motion


def create_context(
    jd: float, apparent: Optional[bool] = None, true_node: Optional[bool] = None
) -> EphemerisContext:
    """
    Create an ephemeris context with the process-wide planet registry.

    Args:
        jd: Julian Day (TT)
        apparent: Apply nutation and aberration
        true_node: Report the true lunar node

    Returns:
        EphemerisContext
    """
    return EphemerisContext(jd, apparent=apparent, true_node=true_node)
