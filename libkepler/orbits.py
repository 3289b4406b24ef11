"""
Osculating orbital elements of the major planets.

Mean elements as polynomials in Julian centuries T since 1900 January 0.5,
referred to the mean ecliptic and equinox of date (Meeus "Astronomical
Formulae for Calculators", Table 23.A; Duffett-Smith routine PLANS).

Each element set is static configuration, one frozen instance per planet.
Evaluating it at a time t yields a snapshot (ElementSet) used by the
heliocentric transform.

Mean longitude uses a split form to keep precision for fast planets:
    L = L0 + 360·frac(L1·T) + L2·T² + L3·T³
where L1 is given in revolutions per century.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from .constants import (
    DAYS_PER_CENT,
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    PLUTO,
    SATURN,
    URANUS,
    VENUS,
)
from .utils import frac360, polynome, reduce_deg


class ElementSet(NamedTuple):
    """
    Orbital elements evaluated at one instant.

    Attributes:
        s: Eccentricity
        sa: Semi-major axis, AU
        ph: Longitude of perihelion, radians
        nd: Longitude of ascending node, radians
        ic: Inclination, radians
    """

    s: float
    sa: float
    ph: float
    nd: float
    ic: float


@dataclass(frozen=True)
class OrbitalElements:
    """
    Mean orbital elements of a planet.

    Attributes:
        name: Planet name
        mean_longitude: (L0 deg, L1 rev/century, L2 deg, L3 deg)
        perihelion: Longitude of perihelion polynomial, degrees
        eccentricity: Eccentricity polynomial
        inclination: Inclination polynomial, degrees
        node: Longitude of ascending node polynomial, degrees
        semi_axis: Semi-major axis, AU
    """

    name: str
    mean_longitude: Tuple[float, ...]
    perihelion: Tuple[float, ...]
    eccentricity: Tuple[float, ...]
    inclination: Tuple[float, ...]
    node: Tuple[float, ...]
    semi_axis: float

    @property
    def daily_motion(self) -> float:
        """Mean daily motion in degrees per day."""
        return self.mean_longitude[1] * 360.0 / DAYS_PER_CENT

    def mean_longitude_at(self, t: float) -> float:
        l0, l1 = self.mean_longitude[:2]
        higher = self.mean_longitude[2:]
        return reduce_deg(l0 + frac360(l1 * t) + t * t * polynome(t, higher))

    def mean_anomaly(self, t: float) -> float:
        """
        Mean anomaly at time t.

        Args:
            t: Julian centuries since 1900 January 0.5

        Returns:
            float: Mean anomaly in degrees (0-360)
        """
        return reduce_deg(self.mean_longitude_at(t) - polynome(t, self.perihelion))

    def at(self, t: float) -> ElementSet:
        """Snapshot of the elements at time t (centuries since 1900.0)."""
        return ElementSet(
            s=polynome(t, self.eccentricity),
            sa=self.semi_axis,
            ph=math.radians(polynome(t, self.perihelion)),
            nd=math.radians(polynome(t, self.node)),
            ic=math.radians(polynome(t, self.inclination)),
        )


# =============================================================================
# ELEMENT TABLES
# =============================================================================

MERCURY_ELEMENTS = OrbitalElements(
    name=MERCURY,
    mean_longitude=(178.179078, 415.2057519, 3.011e-4, 0.0),
    perihelion=(75.899697, 1.5554889, 2.947e-4, 0.0),
    eccentricity=(2.0561421e-1, 2.046e-5, -3e-8, 0.0),
    inclination=(7.002881, 1.8608e-3, -1.83e-5, 0.0),
    node=(47.145944, 1.1852083, 1.739e-4, 0.0),
    semi_axis=3.870986e-1,
)

VENUS_ELEMENTS = OrbitalElements(
    name=VENUS,
    mean_longitude=(342.767053, 162.5533664, 3.097e-4, 0.0),
    perihelion=(130.163833, 1.4080361, -9.764e-4, 0.0),
    eccentricity=(6.82069e-3, -4.774e-5, 9.1e-8, 0.0),
    inclination=(3.393631, 1.0058e-3, -1e-6, 0.0),
    node=(75.779647, 0.89985, 4.1e-4, 0.0),
    semi_axis=7.233316e-1,
)

MARS_ELEMENTS = OrbitalElements(
    name=MARS,
    mean_longitude=(293.737334, 53.17137642, 3.107e-4, 0.0),
    perihelion=(3.34218203e2, 1.8407584, 1.299e-4, -1.19e-6),
    eccentricity=(9.33129e-2, 9.2064e-5, -7.7e-8, 0.0),
    inclination=(1.850333, -6.75e-4, 1.26e-5, 0.0),
    node=(48.786442, 0.7709917, -1.4e-6, -5.33e-6),
    semi_axis=1.5236883,
)

JUPITER_ELEMENTS = OrbitalElements(
    name=JUPITER,
    mean_longitude=(238.049257, 8.434172183, 3.347e-4, -1.65e-6),
    perihelion=(1.2720972e1, 1.6099617, 1.05627e-3, -3.43e-6),
    eccentricity=(4.833475e-2, 1.6418e-4, -4.676e-7, -1.7e-9),
    inclination=(1.308736, -5.6961e-3, 3.9e-6, 0.0),
    node=(99.443414, 1.01053, 3.5222e-4, -8.51e-6),
    semi_axis=5.202561,
)

SATURN_ELEMENTS = OrbitalElements(
    name=SATURN,
    mean_longitude=(266.564377, 3.398638567, 3.245e-4, -5.8e-6),
    perihelion=(9.1098214e1, 1.9584158, 8.2636e-4, 4.61e-6),
    eccentricity=(5.589232e-2, -3.455e-4, -7.28e-7, 7.4e-10),
    inclination=(2.492519, -3.9189e-3, -1.549e-5, 4e-8),
    node=(112.790414, 0.8731951, -1.5218e-4, -5.31e-6),
    semi_axis=9.554747,
)

URANUS_ELEMENTS = OrbitalElements(
    name=URANUS,
    mean_longitude=(244.19747, 1.194065406, 3.16e-4, -6e-7),
    perihelion=(1.71548692e2, 1.4844328, 2.372e-4, -6.1e-7),
    eccentricity=(4.63444e-2, -2.658e-5, 7.7e-8, 0.0),
    inclination=(7.72464e-1, 6.253e-4, 3.95e-5, 0.0),
    node=(73.477111, 0.4986678, 1.3117e-3, 0.0),
    semi_axis=19.21814,
)

NEPTUNE_ELEMENTS = OrbitalElements(
    name=NEPTUNE,
    mean_longitude=(84.457994, 0.6107942056, 3.205e-4, -6e-7),
    perihelion=(4.6727364e1, 1.4245744, 3.9082e-4, -6.05e-7),
    eccentricity=(8.99704e-3, 6.33e-6, -2e-9, 0.0),
    inclination=(1.779242, -9.5436e-3, -9.1e-6, 0.0),
    node=(130.681389, 1.098935, 2.4987e-4, -4.718e-6),
    semi_axis=30.10957,
)

# FIXME: Precision - Pluto has no classic 1900-epoch table. These are the
# J2000 mean elements (Standish) moved to 1900.0 and referred to the
# equinox of date with general precession (1.39697°/cy). Good to a few
# arcminutes within a century of 2000.
PLUTO_ELEMENTS = OrbitalElements(
    name=PLUTO,
    mean_longitude=(92.3242619, 0.4072354901, 0.0, 0.0),
    perihelion=(222.71257443, 1.35634186, 0.0, 0.0),
    eccentricity=(0.2487756, 5.17e-5, 0.0, 0.0),
    inclination=(17.13996388, 4.818e-5, 0.0, 0.0),
    node=(108.91880038, 1.38513646, 0.0, 0.0),
    semi_axis=39.48211675,
)

ORBITAL_ELEMENTS = {
    MERCURY: MERCURY_ELEMENTS,
    VENUS: VENUS_ELEMENTS,
    MARS: MARS_ELEMENTS,
    JUPITER: JUPITER_ELEMENTS,
    SATURN: SATURN_ELEMENTS,
    URANUS: URANUS_ELEMENTS,
    NEPTUNE: NEPTUNE_ELEMENTS,
    PLUTO: PLUTO_ELEMENTS,
}
