from .constants import *
from .exceptions import (
    EphemerisError,
    NumericConvergenceError,
    UnknownBodyError,
    InvalidEccentricityError,
)
from .time_utils import swe_julday, swe_revjul, swe_deltat, djd, centuries
from .kepler import eccentric_anomaly, solve_kepler, true_anomaly
from .models import EclipticPosition, MoonPosition
from .planets import swe_calc_ut, swe_calc, Planet, PlanetId, PlanetRegistry
from .context import EphemerisContext, create_context
from .state import (
    set_nutation_model,
    get_nutation_model,
    set_kepler_options,
    get_kepler_options,
    set_default_flags,
    get_default_flags,
    set_data_path,
)
from .utils import difdeg2n


# =============================================================================
# PYSWISSEPH-COMPATIBLE FUNCTION ALIASES (without swe_ prefix)
# =============================================================================
# pyswisseph uses function names without the swe_ prefix

# Time functions
julday = swe_julday
revjul = swe_revjul
deltat = swe_deltat

# Planet calculation
calc_ut = swe_calc_ut
calc = swe_calc

__version__ = "0.1.0"

__all__ = [
    # Context API
    "EphemerisContext",
    "create_context",
    "EclipticPosition",
    "MoonPosition",
    # Kepler solver
    "eccentric_anomaly",
    "solve_kepler",
    "true_anomaly",
    # Planets
    "Planet",
    "PlanetId",
    "PlanetRegistry",
    # Time functions (both swe_ and non-prefixed aliases)
    "swe_julday",
    "julday",
    "swe_revjul",
    "revjul",
    "swe_deltat",
    "deltat",
    "djd",
    "centuries",
    # Planet calculation
    "swe_calc_ut",
    "calc_ut",
    "swe_calc",
    "calc",
    # Configuration
    "set_nutation_model",
    "get_nutation_model",
    "set_kepler_options",
    "get_kepler_options",
    "set_default_flags",
    "get_default_flags",
    "set_data_path",
    # Errors
    "EphemerisError",
    "NumericConvergenceError",
    "UnknownBodyError",
    "InvalidEccentricityError",
    # Utilities
    "difdeg2n",
]
