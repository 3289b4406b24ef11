"""
Tests for library configuration.

Tests the setters in libkepler.state to ensure users can configure the data
path, nutation model, Kepler solver and default context flags.
"""

import pytest
from libkepler import (
    EphemerisContext,
    NUTATION_CLASSIC,
    NUTATION_IAU2000B,
    NumericConvergenceError,
    eccentric_anomaly,
    get_default_flags,
    get_kepler_options,
    get_nutation_model,
    set_data_path,
    set_default_flags,
    set_kepler_options,
    set_nutation_model,
)
from libkepler import state


def test_set_data_path_clears_cache():
    """Test that set_data_path() clears the loader and timescale"""
    _ = state.get_timescale()
    assert state._LOADER is not None
    assert state._TS is not None

    set_data_path("/tmp")

    assert state._LOADER is None
    assert state._TS is None
    assert state._DATA_PATH == "/tmp"

    set_data_path(None)
    assert state._DATA_PATH is None


def test_timescale_cached():
    assert state.get_timescale() is state.get_timescale()
    assert state.get_loader() is state.get_loader()


def test_nutation_model_defaults_to_classic():
    assert get_nutation_model() == NUTATION_CLASSIC


def test_set_nutation_model():
    set_nutation_model(NUTATION_IAU2000B)
    assert get_nutation_model() == NUTATION_IAU2000B
    set_nutation_model(NUTATION_CLASSIC)
    assert get_nutation_model() == NUTATION_CLASSIC


def test_set_nutation_model_rejects_unknown():
    with pytest.raises(ValueError):
        set_nutation_model("iau1980")
    assert get_nutation_model() == NUTATION_CLASSIC


def test_kepler_options_defaults():
    assert get_kepler_options() == (1e-7, 100)


def test_set_kepler_options_partial():
    """Omitted options keep their current value"""
    set_kepler_options(tolerance=1e-10)
    assert get_kepler_options() == (1e-10, 100)
    set_kepler_options(max_iterations=5)
    assert get_kepler_options() == (1e-10, 5)


@pytest.mark.parametrize(
    "kwargs", [{"tolerance": 0.0}, {"tolerance": -1e-7}, {"max_iterations": 0}]
)
def test_set_kepler_options_rejects_non_positive(kwargs):
    with pytest.raises(ValueError):
        set_kepler_options(**kwargs)
    assert get_kepler_options() == (1e-7, 100)


def test_kepler_budget_applies():
    """A one-step budget cannot solve a highly eccentric orbit"""
    set_kepler_options(max_iterations=1)
    with pytest.raises(NumericConvergenceError):
        eccentric_anomaly(0.9, 0.3)


def test_default_flags():
    assert get_default_flags() == (False, True)
    set_default_flags(apparent=True)
    assert get_default_flags() == (True, True)
    set_default_flags(true_node=False)
    assert get_default_flags() == (True, False)
    assert EphemerisContext(2451545.0).apparent is True


def test_reset():
    set_nutation_model(NUTATION_IAU2000B)
    set_kepler_options(tolerance=1e-9, max_iterations=7)
    set_default_flags(apparent=True, true_node=False)

    state.reset()

    assert get_nutation_model() == NUTATION_CLASSIC
    assert get_kepler_options() == (1e-7, 100)
    assert get_default_flags() == (False, True)


def test_registry_survives_reset():
    reg = state.get_registry()
    state.reset()
    assert state.get_registry() is reg
