"""Input parameter set for a single cycle analysis.

A ParameterSet is an immutable snapshot of every physical and design
input one engine run needs: gas properties, flight condition, component
efficiencies, pressure-loss ratios, temperature limits and the
engine-specific pressure ratios. It is created once by the caller and
passed explicitly into an engine; nothing is read from global state.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from jetperf.utils import constants as C
from jetperf.utils.units import parse_quantity


class JetPerfError(Exception):
    """Base class for JetPerf errors."""


class InputsNotInitializedError(JetPerfError):
    """Raised when an analysis is requested before all inputs are set."""

    def __init__(self, missing: list[str] | tuple[str, ...]):
        self.missing = tuple(missing)
        super().__init__(
            "Inputs not initialized: missing "
            + ", ".join(self.missing)
            + ". Set all parameters before running an analysis."
        )


@dataclass(frozen=True)
class ParameterSet:
    """All inputs for one turbojet or turbofan analysis. SI units throughout."""

    # Gas properties
    gamma_air: float
    gamma_gas: float
    cp_air: float  # J/(kg·K)
    cp_gas: float  # J/(kg·K)
    R_air: float  # J/(kg·K)
    fuel_heating_value: float  # J/kg

    # Flight condition
    mach: float
    ambient_temperature: float  # K
    ambient_pressure: float  # Pa

    # Component efficiencies (not clamped)
    eta_inlet: float
    eta_compressor: float
    eta_fan: float
    eta_combustor: float
    eta_turbine: float
    eta_afterburner: float
    eta_nozzle: float

    # Retained total-pressure ratios
    pi_combustor: float
    pi_afterburner: float
    pi_mixer: float

    # Design temperature limits
    turbine_inlet_temp: float  # K
    afterburner_exit_temp: float  # K

    # Turbojet
    pressure_ratio_compressor_jet: float

    # Turbofan
    bypass_ratio: float
    pressure_ratio_fan: float
    pressure_ratio_compressor_core: float

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParameterSet:
        """Build a ParameterSet from a plain mapping.

        Values may be numbers or unit-bearing strings ("22.632 kPa",
        "-56.45 degC"); strings are converted to the field's SI unit.

        Raises:
            InputsNotInitializedError: If any field is absent or None.
            ValueError: On unknown keys or unparseable values.
        """
        names = cls.field_names()
        unknown = sorted(set(data) - set(names))
        if unknown:
            raise ValueError(f"Unknown parameter(s): {', '.join(unknown)}")

        missing = [n for n in names if data.get(n) is None]
        if missing:
            raise InputsNotInitializedError(missing)

        return cls(**{n: coerce_value(n, data[n]) for n in names})

    def to_dict(self) -> dict[str, float]:
        """Plain dict of Python floats (numpy scalars are converted)."""
        return {k: v if v is None else float(v) for k, v in dataclasses.asdict(self).items()}

    def replace(self, **changes: Any) -> ParameterSet:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def missing_fields(self, names: tuple[str, ...] | None = None) -> list[str]:
        """Return the names of fields that are None or NaN."""
        missing = []
        for name in names or self.field_names():
            value = getattr(self, name, None)
            if value is None or (isinstance(value, float) and math.isnan(value)):
                missing.append(name)
        return missing


# SI unit each field is expressed in; empty means dimensionless.
FIELD_UNITS: dict[str, str] = {
    "cp_air": "J/(kg*K)",
    "cp_gas": "J/(kg*K)",
    "R_air": "J/(kg*K)",
    "fuel_heating_value": "J/kg",
    "ambient_temperature": "K",
    "ambient_pressure": "Pa",
    "turbine_inlet_temp": "K",
    "afterburner_exit_temp": "K",
}


def coerce_value(name: str, value: Any) -> float:
    """Convert a raw parameter value to a float in the field's SI unit."""
    if isinstance(value, bool):
        raise ValueError(f"{name}: expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return parse_quantity(value, FIELD_UNITS.get(name, "dimensionless"))
    raise ValueError(f"{name}: expected a number or quantity string, got {value!r}")


def reference_parameters() -> ParameterSet:
    """High-subsonic cruise case at 11 km (ISA tropopause).

    Mach 0.85, 216.7 K, 22.632 kPa with Tt4 = 1700 K and an afterburner
    exit temperature of 2000 K.
    """
    return ParameterSet(
        gamma_air=C.GAMMA_AIR,
        gamma_gas=C.GAMMA_GAS,
        cp_air=C.CP_AIR,
        cp_gas=C.CP_GAS,
        R_air=C.R_AIR,
        fuel_heating_value=C.Q_JET_A,
        mach=0.85,
        ambient_temperature=216.7,
        ambient_pressure=22632.0,
        eta_inlet=0.98,
        eta_compressor=0.90,
        eta_fan=0.90,
        eta_combustor=0.99,
        eta_turbine=0.92,
        eta_afterburner=0.97,
        eta_nozzle=0.98,
        pi_combustor=0.96,
        pi_afterburner=0.94,
        pi_mixer=0.98,
        turbine_inlet_temp=1700.0,
        afterburner_exit_temp=2000.0,
        pressure_ratio_compressor_jet=30.0,
        bypass_ratio=1.0,
        pressure_ratio_fan=3.5,
        pressure_ratio_compressor_core=10.0,
    )
