"""Tests for one-parameter sweeps."""

import numpy as np
import pytest

from jetperf.core.params import reference_parameters
from jetperf.cycle.solver import EngineType
from jetperf.optimization.sweep import METRICS, sweep_parameter


class TestSweepParameter:
    def test_shapes(self):
        result = sweep_parameter(
            reference_parameters(), EngineType.TURBOJET, "mach", np.linspace(0.0, 1.5, 7)
        )
        assert len(result) == 7
        assert result.engine_type == "turbojet"
        for m in METRICS:
            assert result[m].shape == (7,)
        assert result.feasible.dtype == bool
        assert len(result.analyses) == 7

    def test_combustor_fuel_increases_with_tt4(self):
        result = sweep_parameter(
            reference_parameters(), "turbofan", "turbine_inlet_temp", np.linspace(1300, 1900, 13)
        )
        assert np.all(np.diff(result["combustor_fuel_air_ratio"]) > 0)

    def test_matches_single_runs(self):
        params = reference_parameters()
        result = sweep_parameter(params, "turbojet", "bypass_ratio", [0.5, 2.0])
        # Bypass ratio does not affect the turbojet
        assert result["specific_thrust"][0] == result["specific_thrust"][1]

    def test_baseline_unchanged(self):
        params = reference_parameters()
        sweep_parameter(params, "turbojet", "mach", [0.0, 1.0])
        assert params.mach == 0.85

    def test_infeasible_points_flagged(self):
        result = sweep_parameter(
            reference_parameters(), "turbojet", "fuel_heating_value", [1.0e6, 43.1e6]
        )
        assert result.feasible.tolist() == [False, True]
        assert result.best("tsfc") == 1

    def test_best_requires_feasible_point(self):
        result = sweep_parameter(reference_parameters(), "turbojet", "eta_nozzle", [0.0])
        with pytest.raises(ValueError, match="No feasible point"):
            result.best("tsfc")

    def test_best_maximize(self):
        result = sweep_parameter(
            reference_parameters(), "turbojet", "afterburner_exit_temp", [1800.0, 2000.0, 2200.0]
        )
        assert result.best("specific_thrust", minimize=False) == 2

    def test_unknown_parameter(self):
        with pytest.raises(ValueError, match="Unknown parameter"):
            sweep_parameter(reference_parameters(), "turbojet", "thrust", [1.0])
