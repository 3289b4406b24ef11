"""
Global state management for libkepler.

This module maintains the library's process-wide state including:
- Skyfield data loader and timescale (Delta T, IAU 2000B nutation)
- Nutation model used by new ephemeris contexts
- Kepler solver tolerance and iteration budget
- Default apparent / true-node flags for new contexts
- The build-once planet registry shared by all contexts

Settings are stored in module-level globals, mirroring the stateful
configuration style of the Swiss Ephemeris API. Setters are expected to be
called at start-up, before contexts are created from several threads.
"""

import logging
import os
import threading
from typing import Optional

from skyfield.api import Loader
from skyfield.timelib import Timescale

from .constants import NUTATION_CLASSIC, NUTATION_IAU2000B

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL STATE VARIABLES
# =============================================================================

_DATA_PATH: Optional[str] = None  # Custom directory for Skyfield data files
_LOADER: Optional[Loader] = None  # Skyfield data loader
_TS: Optional[Timescale] = None  # Timescale object
_NUTATION_MODEL: str = NUTATION_CLASSIC  # Nutation series used by contexts
_KEPLER_TOLERANCE: float = 1e-7  # Kepler equation residual, radians
_KEPLER_MAX_ITER: int = 100  # Newton-Raphson step budget
_APPARENT: bool = False  # Default 'apparent' flag for new contexts
_TRUE_NODE: bool = True  # Default 'true node' flag for new contexts
_REGISTRY = None  # Process-wide PlanetRegistry
_REGISTRY_LOCK = threading.Lock()

_NUTATION_MODELS = (NUTATION_CLASSIC, NUTATION_IAU2000B)


def get_loader() -> Loader:
    """
    Get or create the Skyfield data loader.

    Returns:
        Loader: Skyfield Loader instance for downloading/caching data files

    Note:
        Data files are cached in the parent directory of this module by
        default, or in the directory set by set_data_path().
    """
    global _LOADER
    if _LOADER is None:
        data_dir = _DATA_PATH or os.path.join(os.path.dirname(__file__), "..")
        _LOADER = Loader(data_dir)
    return _LOADER


def get_timescale() -> Timescale:
    """
    Get or create the Skyfield timescale object.

    Returns:
        Timescale: Skyfield timescale for time conversions (UT1, TT, etc.)

    Note:
        Uses the Delta T tables bundled with Skyfield; no download is needed.
    """
    global _TS
    if _TS is None:
        load = get_loader()
        _TS = load.timescale()
    return _TS


def set_data_path(path: Optional[str]) -> None:
    """
    Set the directory where Skyfield keeps its data files.

    Args:
        path: Directory path, or None to restore the default

    Note:
        Clears the cached loader and timescale so they are rebuilt on next use.
    """
    global _DATA_PATH, _LOADER, _TS
    _DATA_PATH = path
    _LOADER = None
    _TS = None


def set_nutation_model(model: str) -> None:
    """
    Select the nutation series used by new ephemeris contexts.

    Args:
        model: "classic" (low-precision series, no external data) or
            "iau2000b" (Skyfield's IAU 2000B implementation)

    Raises:
        ValueError: If the model name is not recognised
    """
    global _NUTATION_MODEL
    if model not in _NUTATION_MODELS:
        raise ValueError(
            f"Unknown nutation model {model!r}, expected one of {_NUTATION_MODELS}"
        )
    _NUTATION_MODEL = model


def get_nutation_model() -> str:
    """Return the name of the active nutation model."""
    return _NUTATION_MODEL


def set_kepler_options(
    tolerance: Optional[float] = None, max_iterations: Optional[int] = None
) -> None:
    """
    Configure the Kepler equation solver.

    Args:
        tolerance: Convergence threshold for |E - e·sin(E) - M|, radians
        max_iterations: Step budget before NumericConvergenceError is raised

    Raises:
        ValueError: If a non-positive value is given
    """
    global _KEPLER_TOLERANCE, _KEPLER_MAX_ITER
    if tolerance is not None:
        if tolerance <= 0:
            raise ValueError(f"Kepler tolerance must be positive, got {tolerance}")
        _KEPLER_TOLERANCE = tolerance
    if max_iterations is not None:
        if max_iterations < 1:
            raise ValueError(
                f"Kepler iteration budget must be positive, got {max_iterations}"
            )
        _KEPLER_MAX_ITER = max_iterations


def get_kepler_options() -> tuple[float, int]:
    """Return (tolerance, max_iterations) of the Kepler solver."""
    return _KEPLER_TOLERANCE, _KEPLER_MAX_ITER


def set_default_flags(
    apparent: Optional[bool] = None, true_node: Optional[bool] = None
) -> None:
    """
    Set the flags used by contexts created without explicit values.

    Args:
        apparent: Apply nutation and aberration to positions
        true_node: Report the true (not mean) ascending lunar node
    """
    global _APPARENT, _TRUE_NODE
    if apparent is not None:
        _APPARENT = bool(apparent)
    if true_node is not None:
        _TRUE_NODE = bool(true_node)


def get_default_flags() -> tuple[bool, bool]:
    """Return (apparent, true_node) defaults for new contexts."""
    return _APPARENT, _TRUE_NODE


def get_registry():
    """
    Get the process-wide planet registry.

    Returns:
        PlanetRegistry: Build-once registry of Planet objects

    Note:
        The registry itself is created under a lock; planets inside it are
        immutable once built, so concurrent reads are safe.
    """
    global _REGISTRY
    if _REGISTRY is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                from .planets import PlanetRegistry

                logger.debug("Creating process-wide planet registry")
                _REGISTRY = PlanetRegistry()
    return _REGISTRY


def reset() -> None:
    """
    Restore every setting to its default value.

    Intended for tests; the planet registry is kept since it is immutable.
    """
    global _NUTATION_MODEL, _KEPLER_TOLERANCE, _KEPLER_MAX_ITER
    global _APPARENT, _TRUE_NODE
    _NUTATION_MODEL = NUTATION_CLASSIC
    _KEPLER_TOLERANCE = 1e-7
    _KEPLER_MAX_ITER = 100
    _APPARENT = False
    _TRUE_NODE = True
