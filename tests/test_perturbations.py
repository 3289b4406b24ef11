"""
Unit tests for the planetary perturbation series.
"""

import math
from dataclasses import FrozenInstanceError, fields

import pytest
from libkepler import perturbations as pert
from libkepler.constants import *
from libkepler.perturbations import (
    NO_PERTURBATION,
    PERTURBATIONS,
    PerturbationArgs,
    PerturbationResult,
)

FIELDS = ("dl", "dr", "dml", "ds", "dm", "da", "dhl")


def _snapshot(t=0.85, e=0.05):
    anomalies = {name: 0.3 * (i + 1) for i, name in enumerate(PLANET_NAMES)}
    return PerturbationArgs(
        t=t, sun_anomaly=4.0, eccentricity=e, mean_anomaly=anomalies.__getitem__
    )


@pytest.mark.unit
class TestPerturbationResult:
    def test_defaults_zero(self):
        res = PerturbationResult()
        assert tuple(f.name for f in fields(res)) == FIELDS
        assert all(getattr(res, name) == 0.0 for name in FIELDS)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            NO_PERTURBATION.dl = 1.0

    def test_pluto_zero(self):
        assert pert.pluto() == NO_PERTURBATION
        assert PERTURBATIONS[PLUTO](_snapshot()) == NO_PERTURBATION


@pytest.mark.unit
class TestInnerPlanets:
    """Mercury, Venus and Mars series."""

    def test_mercury_only_longitude_and_radius(self):
        res = pert.mercury(1.0, 2.0, 3.0)
        assert res.dml == res.dm == res.ds == res.da == res.dhl == 0.0
        assert abs(res.dl) <= 0.00204 + 0.00103 + 0.00091 + 0.00078
        assert abs(res.dr) <= 7.525e-6 + 6.802e-6 + 5.457e-6 + 3.569e-6

    def test_mercury_value(self):
        res = pert.mercury(0.0, 0.0, 0.0)
        expected = (
            0.00204 * math.cos(0.21328)
            + 0.00103 * math.cos(-2.8046)
            + 0.00091 * math.cos(-0.64582)
            + 0.00078 * math.cos(0.17692)
        )
        assert res.dl == pytest.approx(expected)

    def test_venus_mean_longitude(self):
        """Venus mean longitude and mean anomaly get the same correction."""
        res = pert.venus(0.0, 1.0, 2.0, 3.0)
        assert res.dml == res.dm == pytest.approx(0.00077 * math.sin(4.1406))
        assert res.ds == res.da == res.dhl == 0.0

    def test_mars_great_inequality(self):
        ms, ve, m, ju = 1.0, 2.0, 3.0, 4.0
        a = 3 * ju - 8 * m + 4 * ms
        res = pert.mars(ms, ve, m, ju)
        assert res.dml == res.dm == pytest.approx(-(1.133e-2 * math.sin(a) + 9.33e-3 * math.cos(a)))

    def test_argument_order(self):
        """Each body draws its own vector from the snapshot."""
        snap = _snapshot()
        ma = snap.mean_anomaly
        assert PERTURBATIONS[MERCURY](snap) == pert.mercury(ma(MERCURY), ma(VENUS), ma(JUPITER))
        assert PERTURBATIONS[VENUS](snap) == pert.venus(snap.t, 4.0, ma(VENUS), ma(JUPITER))
        assert PERTURBATIONS[MARS](snap) == pert.mars(4.0, ma(VENUS), ma(MARS), ma(JUPITER))


@pytest.mark.unit
class TestOuterPlanets:
    """Jupiter to Neptune series driven by (t, e)."""

    @pytest.mark.parametrize("name", [JUPITER, SATURN, URANUS, NEPTUNE])
    def test_argument_order(self, name):
        snap = _snapshot()
        assert PERTURBATIONS[name](snap) == getattr(pert, name.lower())(snap.t, snap.eccentricity)

    @pytest.mark.parametrize("t", [-0.5, 0.0, 0.5, 0.84, 1.24])
    def test_great_inequality_amplitude(self, t):
        """Mean longitude terms are bounded by the sum of their amplitudes."""
        assert abs(pert.jupiter(t, 0.048).dml) < 0.6
        assert abs(pert.saturn(t, 0.056).dml) < 1.5

    @pytest.mark.parametrize("t", [-0.5, 0.0, 0.5, 0.84, 1.24])
    def test_eccentricity_corrections_small(self, t):
        for fn, e in ((pert.jupiter, 0.048), (pert.saturn, 0.056), (pert.uranus, 0.046), (pert.neptune, 0.009)):
            res = fn(t, e)
            assert abs(res.ds) < 0.02
            assert abs(res.da) < 0.1

    def test_mean_anomaly_correction(self):
        """dm differs from dml by B/e."""
        res = pert.jupiter(0.84, 0.048)
        res2 = pert.jupiter(0.84, 0.096)
        # dml does not depend on e; dm - dml scales with 1/e
        assert res.dml == res2.dml
        assert (res.dm - res.dml) == pytest.approx(2 * (res2.dm - res2.dml))

    def test_saturn_latitude(self):
        res = pert.saturn(0.84, 0.056)
        assert res.dhl != 0.0
        assert abs(res.dhl) < 0.01
        assert res.dl == res.dr == 0.0

    @pytest.mark.parametrize("fn", [pert.uranus, pert.neptune])
    def test_radius_vector_bias(self, fn):
        """Uranus and Neptune carry a constant radius correction of a few 0.01 AU."""
        res = fn(0.84, 0.02)
        assert -0.06 < res.dr < 0.0
