"""
Exception types raised by libkepler.

All errors are local input-validation or numeric failures. They are raised
directly to the caller and never replaced by default values.
"""


class EphemerisError(Exception):
    """Base class for all libkepler errors."""


class NumericConvergenceError(EphemerisError, RuntimeError):
    """An iterative solver did not converge within its step budget."""

    def __init__(self, message: str, iterations: int = 0, residual: float = 0.0):
        super().__init__(message)
        self.iterations = iterations
        self.residual = residual


class UnknownBodyError(EphemerisError, ValueError):
    """A body name or identifier is not in the supported set."""

    def __init__(self, body):
        super().__init__(f"Unknown body: {body!r}")
        self.body = body


class InvalidEccentricityError(EphemerisError, ValueError):
    """Eccentricity outside [0, 1) was supplied to the elliptic solver."""

    def __init__(self, eccentricity: float):
        super().__init__(
            f"Eccentricity must be in [0, 1) for elliptic motion, got {eccentricity}"
        )
        self.eccentricity = eccentricity
