"""
Unit tests for the Kepler equation solver.
"""

import math

import pytest
import libkepler as ephem
from libkepler import state
from libkepler.exceptions import (
    EphemerisError,
    InvalidEccentricityError,
    NumericConvergenceError,
)
from libkepler.kepler import eccentric_anomaly, true_anomaly

# (mean anomaly, eccentricity, eccentric anomaly, true anomaly)
KEPLER_CASES = [
    (3.5208387374141448, 0.016718, 3.5147440476661806, -2.774497552017826),
    (0.763009079752865, 0.965, 1.7176273861066755, 2.9122563898777387),
]


@pytest.mark.unit
class TestEccentricAnomaly:
    """Tests for eccentric_anomaly()."""

    @pytest.mark.parametrize("m,s,ea,ta", KEPLER_CASES)
    def test_reference_values(self, m, s, ea, ta):
        assert eccentric_anomaly(s, m) == pytest.approx(ea, abs=1e-4)

    @pytest.mark.parametrize("s", [0.0, 0.0167, 0.2, 0.5, 0.9])
    @pytest.mark.parametrize("m", [0.0, 0.5, 1.5, math.pi, 4.0, 6.2])
    def test_residual(self, s, m):
        """Solution satisfies Kepler's equation."""
        ea = eccentric_anomaly(s, m)
        assert abs(ea - s * math.sin(ea) - m) < 1e-6

    def test_circular_orbit(self):
        """With zero eccentricity E equals M."""
        assert eccentric_anomaly(0.0, 1.234) == 1.234

    def test_alias(self):
        assert ephem.solve_kepler is eccentric_anomaly

    @pytest.mark.parametrize("s", [1.0, 1.5, -0.1])
    def test_invalid_eccentricity(self, s):
        with pytest.raises(InvalidEccentricityError) as excinfo:
            eccentric_anomaly(s, 1.0)
        assert excinfo.value.eccentricity == s
        assert isinstance(excinfo.value, ValueError)

    def test_iteration_budget(self):
        """Exhausted step budget raises instead of looping."""
        with pytest.raises(NumericConvergenceError) as excinfo:
            eccentric_anomaly(0.965, 0.763009079752865, max_iterations=1)
        assert excinfo.value.iterations == 1
        assert abs(excinfo.value.residual) > 1e-7
        assert isinstance(excinfo.value, EphemerisError)

    def test_configured_budget(self):
        """Solver picks up the configured iteration budget."""
        state.set_kepler_options(max_iterations=1)
        with pytest.raises(NumericConvergenceError):
            eccentric_anomaly(0.965, 0.763009079752865)

    def test_configured_tolerance(self):
        state.set_kepler_options(tolerance=1e-12)
        ea = eccentric_anomaly(0.5, 2.0)
        assert abs(ea - 0.5 * math.sin(ea) - 2.0) < 1e-12


@pytest.mark.unit
class TestTrueAnomaly:
    """Tests for true_anomaly()."""

    @pytest.mark.parametrize("m,s,ea,ta", KEPLER_CASES)
    def test_reference_values(self, m, s, ea, ta):
        assert true_anomaly(s, ea) == pytest.approx(ta, abs=1e-4)

    @pytest.mark.parametrize("s", [0.0, 0.1, 0.5, 0.9])
    @pytest.mark.parametrize("ea", [0.1, 1.0, 2.5, 3.0])
    def test_odd_symmetry(self, s, ea):
        assert true_anomaly(s, -ea) == pytest.approx(-true_anomaly(s, ea), abs=1e-12)

    def test_circular_orbit(self):
        """True anomaly equals eccentric anomaly for a circle."""
        assert true_anomaly(0.0, 1.0) == pytest.approx(1.0)

    def test_true_ahead_of_eccentric(self):
        """Between perihelion and aphelion the true anomaly leads."""
        ea = eccentric_anomaly(0.3, 1.0)
        assert true_anomaly(0.3, ea) > ea > 1.0
