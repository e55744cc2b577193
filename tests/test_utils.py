"""Tests for utility modules."""

import pytest

from jetperf.core.params import reference_parameters
from jetperf.utils.constants import MACHINE_EPSILON, SPECIFIC_THRUST_FLOOR
from jetperf.utils.units import parse_quantity, pressure_from_si, tsfc_from_si
from jetperf.utils.validation import (
    Severity,
    ValidationResult,
    validate_parameters,
    validate_positive,
    validate_range,
)


class TestConstants:
    def test_epsilon(self):
        assert 0 < MACHINE_EPSILON < 1e-15

    def test_thrust_floor(self):
        assert SPECIFIC_THRUST_FLOOR == 1e-9


class TestUnits:
    def test_pressure_pa_to_kpa(self):
        assert pressure_from_si(22632.0, "kPa") == pytest.approx(22.632)

    def test_pressure_pa_to_psi(self):
        assert pressure_from_si(101325.0, "psi") == pytest.approx(14.696, rel=1e-4)

    def test_tsfc_mg(self):
        assert tsfc_from_si(3.0e-5, "mg/(N*s)") == pytest.approx(30.0)

    def test_tsfc_per_hour(self):
        assert tsfc_from_si(1.0e-5, "kg/(N*h)") == pytest.approx(0.036)

    def test_tsfc_imperial(self):
        """1e-5 kg/(N·s) ≈ 0.353 lb/(lbf·h)."""
        assert tsfc_from_si(1.0e-5, "lb/(lbf*h)") == pytest.approx(0.3530, rel=1e-3)

    def test_parse_bare_number(self):
        assert parse_quantity("1.5e3", "Pa") == 1500.0

    def test_parse_with_unit(self):
        assert parse_quantity(" 2 bar ", "Pa") == pytest.approx(2e5)

    def test_parse_celsius(self):
        assert parse_quantity("-56.45 degC", "K") == pytest.approx(216.7)

    def test_parse_wrong_dimension(self):
        with pytest.raises(ValueError):
            parse_quantity("3 m", "Pa")

    def test_parse_bad_unit(self):
        with pytest.raises(ValueError):
            parse_quantity("3 furlongz", "m")

    def test_parse_not_a_number(self):
        with pytest.raises(ValueError):
            parse_quantity("kPa", "Pa")


class TestValidation:
    def test_reference_is_clean(self):
        result = validate_parameters(reference_parameters())
        assert result.is_valid
        assert not result.has_warnings

    def test_gamma_not_above_one(self):
        result = validate_parameters(reference_parameters().replace(gamma_gas=1.0))
        assert not result.is_valid
        assert result.errors[0].parameter == "gamma_gas"

    def test_negative_pressure(self):
        result = validate_parameters(reference_parameters().replace(ambient_pressure=-1.0))
        assert not result.is_valid

    def test_negative_mach(self):
        result = validate_parameters(reference_parameters().replace(mach=-0.1))
        assert [m.parameter for m in result.errors] == ["mach"]

    def test_negative_bypass_ratio(self):
        result = validate_parameters(reference_parameters().replace(bypass_ratio=-1.0))
        assert not result.is_valid

    @pytest.mark.parametrize(
        "name", ["eta_inlet", "eta_compressor", "eta_fan", "eta_turbine", "eta_nozzle"]
    )
    def test_zero_efficiency_is_error(self, name):
        result = validate_parameters(reference_parameters().replace(**{name: 0.0}))
        assert [m.parameter for m in result.errors] == [name]

    @pytest.mark.parametrize("name", ["turbine_inlet_temp", "afterburner_exit_temp"])
    def test_non_positive_limit_temperature_is_error(self, name):
        result = validate_parameters(reference_parameters().replace(**{name: 0.0}))
        assert [m.parameter for m in result.errors] == [name]

    def test_efficiency_above_one_warns(self):
        result = validate_parameters(reference_parameters().replace(eta_nozzle=1.05))
        assert result.is_valid
        assert [m.parameter for m in result.warnings] == ["eta_nozzle"]

    def test_loss_ratio_above_one_warns(self):
        result = validate_parameters(reference_parameters().replace(pi_mixer=1.1))
        assert result.is_valid
        assert result.has_warnings

    def test_low_turbine_inlet_temp_warns(self):
        result = validate_parameters(reference_parameters().replace(turbine_inlet_temp=600.0))
        assert "turbine_inlet_temp" in [m.parameter for m in result.warnings]

    def test_afterburner_below_tt4_warns(self):
        result = validate_parameters(reference_parameters().replace(afterburner_exit_temp=1600.0))
        assert "afterburner_exit_temp" in [m.parameter for m in result.warnings]

    def test_infeasible_heating_value_warns(self):
        result = validate_parameters(reference_parameters().replace(fuel_heating_value=1.0e6))
        warned = [m.parameter for m in result.warnings]
        assert "turbine_inlet_temp" in warned
        assert "afterburner_exit_temp" in warned

    def test_validate_positive(self):
        result = ValidationResult()
        validate_positive("test", -1, result)
        assert not result.is_valid

    def test_validate_range(self):
        result = ValidationResult()
        validate_range("test", 5, 0, 3, result)
        assert not result.is_valid

    def test_validate_range_warning(self):
        result = ValidationResult()
        validate_range("test", 5, 0, 3, result, Severity.WARNING)
        assert result.is_valid
        assert result.has_warnings

    def test_merge(self):
        a = ValidationResult()
        a.info("x", "note")
        b = ValidationResult()
        b.error("y", "bad")
        a.merge(b)
        assert len(a.messages) == 2
        assert not a.is_valid
