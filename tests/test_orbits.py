"""
Unit tests for the mean orbital elements.
"""

import math

import pytest
from libkepler.constants import *
from libkepler.orbits import ORBITAL_ELEMENTS, ElementSet, OrbitalElements


@pytest.mark.unit
class TestElementTables:
    """Sanity checks of the element tables."""

    def test_all_planets_present(self):
        assert set(ORBITAL_ELEMENTS) == set(PLANET_NAMES)
        for name, el in ORBITAL_ELEMENTS.items():
            assert el.name == name

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ORBITAL_ELEMENTS[MARS].semi_axis = 2.0

    @pytest.mark.parametrize(
        "name,period",
        [
            (MERCURY, 87.968),
            (VENUS, 224.695),
            (MARS, 686.93),
            (JUPITER, 4330.6),
            (SATURN, 10746.9),
            (URANUS, 30588.7),
            (NEPTUNE, 59799.9),
            (PLUTO, 89696.0),
        ],
    )
    def test_daily_motion(self, name, period):
        """Mean daily motion matches the tropical period."""
        assert ORBITAL_ELEMENTS[name].daily_motion == pytest.approx(360.0 / period, rel=2e-3)

    def test_semi_axis_order(self):
        axes = [ORBITAL_ELEMENTS[name].semi_axis for name in PLANET_NAMES]
        assert axes == sorted(axes)


@pytest.mark.unit
class TestEvaluation:
    """Tests for evaluating the elements at a given time."""

    def test_mean_anomaly_epoch(self):
        """At t = 0 the mean anomaly is L0 minus the perihelion constant."""
        el = ORBITAL_ELEMENTS[MARS]
        assert el.mean_anomaly(0.0) == pytest.approx(293.737334 - 334.218203 + 360.0)

    @pytest.mark.parametrize("name", PLANET_NAMES)
    @pytest.mark.parametrize("t", [-1.0, 0.0, 0.84, 1.0, 1.25])
    def test_mean_anomaly_range(self, name, t):
        assert 0.0 <= ORBITAL_ELEMENTS[name].mean_anomaly(t) < 360.0

    def test_mean_anomaly_advances(self):
        """One day moves the mean anomaly by about the daily motion."""
        el = ORBITAL_ELEMENTS[JUPITER]
        t0 = 1.0
        t1 = t0 + 1.0 / DAYS_PER_CENT
        delta = el.mean_anomaly(t1) - el.mean_anomaly(t0)
        assert delta == pytest.approx(el.daily_motion, rel=1e-2)

    def test_snapshot(self):
        el = ORBITAL_ELEMENTS[VENUS]
        snap = el.at(0.0)
        assert isinstance(snap, ElementSet)
        assert snap.s == pytest.approx(6.82069e-3)
        assert snap.sa == el.semi_axis
        assert snap.ph == pytest.approx(math.radians(130.163833))
        assert snap.nd == pytest.approx(math.radians(75.779647))
        assert snap.ic == pytest.approx(math.radians(3.393631))

    @pytest.mark.parametrize("name", PLANET_NAMES)
    def test_eccentricity_elliptic(self, name):
        for t in (-2.0, 0.0, 1.0, 2.0):
            assert 0.0 <= ORBITAL_ELEMENTS[name].at(t).s < 1.0

    def test_custom_elements(self):
        el = OrbitalElements(
            name="Test",
            mean_longitude=(10.0, 1.0, 0.0, 0.0),
            perihelion=(5.0,),
            eccentricity=(0.1,),
            inclination=(0.0,),
            node=(0.0,),
            semi_axis=1.0,
        )
        # one revolution per century: full turns drop out
        assert el.mean_anomaly(1.0) == pytest.approx(5.0)
        assert el.mean_anomaly(0.25) == pytest.approx(95.0)
