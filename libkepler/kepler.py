"""
Kepler equation for elliptic motion.

Solves E - e·sin(E) = M for the eccentric anomaly E with Newton-Raphson
iteration, and converts eccentric anomaly to true anomaly.
All angular values are in radians.

References:
    Duffett-Smith "Astronomy with your Personal Computer", routine ANOMALY
    Meeus "Astronomical Algorithms" Ch. 30
"""

import logging
import math
from typing import Optional

from .exceptions import InvalidEccentricityError, NumericConvergenceError
from .state import get_kepler_options

logger = logging.getLogger(__name__)


def eccentric_anomaly(
    s: float,
    m: float,
    tolerance: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> float:
    """
    Solve Kepler's equation for the eccentric anomaly.

    Args:
        s: Eccentricity (0 ≤ s < 1)
        m: Mean anomaly in radians
        tolerance: Residual threshold, defaults to the configured value (1e-7)
        max_iterations: Step budget, defaults to the configured value (100)

    Returns:
        float: Eccentric anomaly in radians

    Raises:
        InvalidEccentricityError: If s is outside [0, 1)
        NumericConvergenceError: If the residual is still above tolerance
            after max_iterations steps

    Algorithm:
        Newton-Raphson starting from E0 = M:
        E_{n+1} = E_n - (E_n - s·sin(E_n) - M) / (1 - s·cos(E_n))
        stopping when |E_n - s·sin(E_n) - M| < tolerance.
    """
    if not 0.0 <= s < 1.0:
        raise InvalidEccentricityError(s)

    default_tol, default_iter = get_kepler_options()
    tol = default_tol if tolerance is None else tolerance
    budget = default_iter if max_iterations is None else max_iterations

    ea = m
    for _ in range(budget + 1):
        dla = ea - s * math.sin(ea) - m
        if abs(dla) < tol:
            return ea
        ea -= dla / (1.0 - s * math.cos(ea))

    logger.error(
        "Kepler equation did not converge: s=%r m=%r after %d steps", s, m, budget
    )
    raise NumericConvergenceError(
        f"Kepler equation did not converge for s={s}, m={m} "
        f"after {budget} iterations (residual {dla:.3e})",
        iterations=budget,
        residual=dla,
    )


def true_anomaly(s: float, ea: float) -> float:
    """
    True anomaly from eccentric anomaly.

    Args:
        s: Eccentricity (0 ≤ s < 1)
        ea: Eccentric anomaly in radians

    Returns:
        float: True anomaly in radians, in (-π, π]
    """
    return 2.0 * math.atan(math.sqrt((1.0 + s) / (1.0 - s)) * math.tan(ea / 2.0))


solve_kepler = eccentric_anomaly
