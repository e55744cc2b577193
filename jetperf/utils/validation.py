"""Design rule checking and input validation for JetPerf.

The cycle engines never validate their inputs; degenerate values are
clamped and carried through the pipeline. These checks are for the
front end, to catch inputs that make the formulas meaningless before a
run is reported as a design.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jetperf.core.params import ParameterSet
from jetperf.core.thermo import compression_exit_temperature, stagnation_temperature


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0.0)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(severity, name, f"{name} = {value} is outside [{low}, {high}]", value=value)


_EFFICIENCIES = (
    "eta_inlet",
    "eta_compressor",
    "eta_fan",
    "eta_combustor",
    "eta_turbine",
    "eta_afterburner",
    "eta_nozzle",
)
_LOSS_RATIOS = ("pi_combustor", "pi_afterburner", "pi_mixer")
_PRESSURE_RATIOS = (
    "pressure_ratio_compressor_jet",
    "pressure_ratio_fan",
    "pressure_ratio_compressor_core",
)


def validate_parameters(params: ParameterSet) -> ValidationResult:
    """Run validation checks on a parameter set.

    Errors mark inputs for which the cycle formulas do not evaluate to
    anything meaningful; warnings mark unusual or infeasible designs.
    """
    result = ValidationResult()

    for name in ("gamma_air", "gamma_gas"):
        value = getattr(params, name)
        if value <= 1.0:
            result.error(name, f"{name} must be greater than 1, got {value}", value=value, limit=1.0)

    for name in (
        "cp_air",
        "cp_gas",
        "R_air",
        "fuel_heating_value",
        "ambient_temperature",
        "ambient_pressure",
    ):
        validate_positive(name, getattr(params, name), result)

    if params.mach < 0:
        result.error("mach", f"mach must be non-negative, got {params.mach}", value=params.mach)
    if params.bypass_ratio < 0:
        result.error(
            "bypass_ratio",
            f"bypass_ratio must be non-negative, got {params.bypass_ratio}",
            value=params.bypass_ratio,
        )
    for name in _PRESSURE_RATIOS:
        validate_positive(name, getattr(params, name), result)

    for name in _EFFICIENCIES:
        value = getattr(params, name)
        validate_positive(name, value, result)
        if value > 1.0:
            result.warning(name, f"{name} = {value} is outside (0, 1]", value=value, limit=1.0)

    for name in ("turbine_inlet_temp", "afterburner_exit_temp"):
        validate_positive(name, getattr(params, name), result)

    for name in _LOSS_RATIOS:
        validate_range(name, getattr(params, name), 0.0, 1.0, result, Severity.WARNING)

    if not result.is_valid:
        return result

    # Temperature limits against the upstream compressor exit estimates
    T_t2 = stagnation_temperature(params.ambient_temperature, params.mach, params.gamma_air)
    T_t3_jet = compression_exit_temperature(
        T_t2, params.pressure_ratio_compressor_jet, params.gamma_air, params.eta_compressor
    )
    if params.turbine_inlet_temp <= T_t3_jet:
        result.warning(
            "turbine_inlet_temp",
            f"Tt4 = {params.turbine_inlet_temp:.1f} K does not exceed the turbojet "
            f"compressor exit temperature {T_t3_jet:.1f} K",
            value=params.turbine_inlet_temp,
            limit=T_t3_jet,
        )
    if params.afterburner_exit_temp <= params.turbine_inlet_temp:
        result.warning(
            "afterburner_exit_temp",
            f"Tt7 = {params.afterburner_exit_temp:.1f} K does not exceed "
            f"Tt4 = {params.turbine_inlet_temp:.1f} K",
            value=params.afterburner_exit_temp,
            limit=params.turbine_inlet_temp,
        )

    # Fuel energy must exceed the enthalpy of the products at the limit
    for name, eta_name in (
        ("turbine_inlet_temp", "eta_combustor"),
        ("afterburner_exit_temp", "eta_afterburner"),
    ):
        limit = getattr(params, name)
        available = getattr(params, eta_name) * params.fuel_heating_value
        if available <= params.cp_gas * limit:
            result.warning(
                name,
                f"{name} = {limit:.1f} K cannot be reached: "
                f"{eta_name}·Q_HV = {available:.4g} J/kg ≤ cp_gas·T = {params.cp_gas * limit:.4g} J/kg",
                value=limit,
            )

    return result
