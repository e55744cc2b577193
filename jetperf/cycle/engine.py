"""Base class and result types for jet engine cycle analysis.

A CycleEngine turns one ParameterSet into a CycleAnalysis by running a
fixed, linear pipeline of station computations. Each stage runs exactly
once, in order, and reads only stations written by earlier stages.
Degenerate intermediate values are carried forward (clamped where a
division or power would otherwise fail) rather than aborting the run;
the clamps are reported as Diagnostics on the result.

The inlet, compression, combustor, afterburner and nozzle stages are
shared by all variants; subclasses add their own turbine work balance,
optional fan/mixer stages, and mass-flow bookkeeping.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from jetperf.core import thermo
from jetperf.core.params import InputsNotInitializedError, ParameterSet
from jetperf.cycle.stations import StageTrace, Station, StationState
from jetperf.utils.constants import SPECIFIC_THRUST_FLOOR

logger = logging.getLogger(__name__)


class Diagnostic(Enum):
    """Conditions that were recovered locally but should be surfaced."""

    COMBUSTOR_INFEASIBLE = "combustor_infeasible"
    AFTERBURNER_INFEASIBLE = "afterburner_infeasible"
    NON_POSITIVE_THRUST = "non_positive_thrust"


@dataclass(frozen=True)
class PerformanceResult:
    """Engine performance derived from the station state."""

    flight_velocity: float  # m/s
    exit_velocity: float  # m/s
    combustor_fuel_air_ratio: float
    afterburner_fuel_air_ratio: float
    overall_fuel_air_ratio: float
    specific_thrust: float  # N/(kg/s)
    tsfc: float  # kg/(N·s)
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_feasible(self) -> bool:
        return not self.diagnostics

    @property
    def combustor_infeasible(self) -> bool:
        return Diagnostic.COMBUSTOR_INFEASIBLE in self.diagnostics

    @property
    def afterburner_infeasible(self) -> bool:
        return Diagnostic.AFTERBURNER_INFEASIBLE in self.diagnostics

    @property
    def thrust_non_positive(self) -> bool:
        return Diagnostic.NON_POSITIVE_THRUST in self.diagnostics


@dataclass(frozen=True)
class ShaftWork:
    """Specific shaft work per unit core air flow [J/kg].

    ``fan`` is per unit mass passing the fan; ``fan_flow`` is the fan
    mass flow per unit core flow (1 + BPR, or 0 without a fan).
    """

    compressor: float
    turbine: float
    fan: float = 0.0
    fan_flow: float = 0.0

    @property
    def required(self) -> float:
        """Work the turbine has to supply."""
        return self.fan_flow * self.fan + self.compressor

    @property
    def balance_error(self) -> float:
        return self.turbine - self.required


@dataclass(frozen=True)
class CycleAnalysis:
    """Complete output of one engine run."""

    engine_type: str
    parameters: ParameterSet
    stations: StationState
    performance: PerformanceResult
    work: ShaftWork
    trace: tuple[StageTrace, ...] | None = None


@dataclass
class _Run:
    """Mutable bookkeeping for a single run; discarded afterwards."""

    stations: StationState = field(default_factory=StationState)
    trace: list[StageTrace] | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    flight_velocity: float = 0.0
    exit_velocity: float = 0.0
    f_comb: float = 0.0
    f_ab: float = 0.0
    work_compressor: float = 0.0
    work_fan: float = 0.0
    work_turbine: float = 0.0
    performance: PerformanceResult | None = None


Stage = Callable[[_Run], None]


class CycleEngine(ABC):
    """Abstract steady-state cycle engine.

    Args:
        params: Complete parameter set for the run.
        trace: If True, the result carries one StageTrace per stage.
    """

    engine_type: str = ""

    # Fields every variant reads; subclasses extend this tuple.
    required_parameters: tuple[str, ...] = (
        "gamma_air",
        "gamma_gas",
        "cp_air",
        "cp_gas",
        "R_air",
        "fuel_heating_value",
        "mach",
        "ambient_temperature",
        "ambient_pressure",
        "eta_inlet",
        "eta_compressor",
        "eta_combustor",
        "eta_turbine",
        "eta_afterburner",
        "eta_nozzle",
        "pi_combustor",
        "pi_afterburner",
        "turbine_inlet_temp",
        "afterburner_exit_temp",
    )

    def __init__(self, params: ParameterSet | None, trace: bool = False):
        self.params = params
        self.trace = trace

    # --- Pipeline ---

    @abstractmethod
    def stages(self) -> tuple[Stage, ...]:
        """Stage callables in pipeline order."""
        ...

    def run(self) -> CycleAnalysis:
        """Run every stage once, in order, and collect the results.

        Raises:
            InputsNotInitializedError: If no ParameterSet was given or a
                required field is unset. No stage is executed.
        """
        self._check_inputs()

        run = _Run(trace=[] if self.trace else None)
        for stage in self.stages():
            stage(run)

        if run.performance is None:
            raise RuntimeError(f"{type(self).__name__} pipeline has no performance stage")
        return CycleAnalysis(
            engine_type=self.engine_type,
            parameters=self.params,
            stations=run.stations,
            performance=run.performance,
            work=self._shaft_work(run),
            trace=tuple(run.trace) if run.trace is not None else None,
        )

    def _check_inputs(self) -> None:
        if self.params is None:
            raise InputsNotInitializedError(["parameter set"])
        missing = self.params.missing_fields(self.required_parameters)
        if missing:
            raise InputsNotInitializedError(missing)

    def _shaft_work(self, run: _Run) -> ShaftWork:
        return ShaftWork(compressor=run.work_compressor, turbine=run.work_turbine)

    def _record(self, run: _Run, stage: str, stations: tuple[Station, ...], **values: Any) -> None:
        """Log a stage's outputs and append them to the trace, if enabled."""
        if logger.isEnabledFor(logging.DEBUG):
            parts = [
                f"Tt{int(s)}={run.stations.Tt(s):.2f} Pt{int(s)}={run.stations.Pt(s):.1f}"
                for s in stations
            ]
            parts += [f"{k}={v:.6g}" for k, v in values.items()]
            logger.debug("[%s] %s", stage, " ".join(parts))

        if run.trace is not None:
            run.trace.append(
                StageTrace(
                    stage=stage,
                    stations={s: run.stations[s] for s in stations},
                    values=dict(values),
                )
            )

    # --- Shared stages ---

    def _inlet(self, run: _Run) -> None:
        p = self.params
        run.flight_velocity = thermo.flight_velocity(
            p.mach, p.gamma_air, p.R_air, p.ambient_temperature
        )
        T_t0 = thermo.stagnation_temperature(p.ambient_temperature, p.mach, p.gamma_air)
        P_t0 = thermo.stagnation_pressure(
            p.ambient_pressure, p.ambient_temperature, T_t0, p.gamma_air
        )
        run.stations.set(Station.AMBIENT, T_t0, P_t0)
        # Adiabatic diffuser: temperature unchanged, pressure recovery eta_inlet
        run.stations.set(Station.INLET_EXIT, T_t0, P_t0 * p.eta_inlet)
        self._record(
            run, "Inlet", (Station.AMBIENT, Station.INLET_EXIT), V0=run.flight_velocity
        )

    def _compress(
        self,
        run: _Run,
        stage: str,
        inlet: Station,
        outlet: Station,
        pressure_ratio: float,
        efficiency: float,
    ) -> float:
        """Compress from *inlet* to *outlet*; returns specific work [J/kg]."""
        p = self.params
        T_in = run.stations.Tt(inlet)
        T_out = thermo.compression_exit_temperature(T_in, pressure_ratio, p.gamma_air, efficiency)
        run.stations.set(outlet, T_out, run.stations.Pt(inlet) * pressure_ratio)
        work = p.cp_air * (T_out - T_in)
        self._record(run, stage, (outlet,), work=work)
        return work

    def _combustor(self, run: _Run) -> None:
        p = self.params
        T_t4 = p.turbine_inlet_temp
        run.f_comb, clamped = thermo.fuel_air_ratio(
            p.cp_air,
            run.stations.Tt(Station.COMPRESSOR_EXIT),
            p.cp_gas,
            T_t4,
            p.eta_combustor,
            p.fuel_heating_value,
        )
        if clamped:
            logger.warning(
                "Combustor infeasible: Tt4=%.1f K exceeds what eta_b*Q_HV can deliver; "
                "fuel-air ratio %.3g is not physical",
                T_t4,
                run.f_comb,
            )
            run.diagnostics.append(Diagnostic.COMBUSTOR_INFEASIBLE)
        run.stations.set(
            Station.TURBINE_INLET, T_t4, run.stations.Pt(Station.COMPRESSOR_EXIT) * p.pi_combustor
        )
        self._record(run, "Combustor", (Station.TURBINE_INLET,), f_comb=run.f_comb)

    def _turbine(self, run: _Run, shaft_work: float) -> None:
        """Expand through the turbine to supply *shaft_work* per unit core air."""
        p = self.params
        mass_ratio = 1.0 + run.f_comb
        T_t4 = run.stations.Tt(Station.TURBINE_INLET)
        T_t5, P_t5 = thermo.turbine_expansion(
            T_t4,
            run.stations.Pt(Station.TURBINE_INLET),
            shaft_work,
            mass_ratio,
            p.cp_gas,
            p.gamma_gas,
            p.eta_turbine,
        )
        run.stations.set(Station.TURBINE_EXIT, T_t5, P_t5)
        run.work_turbine = thermo.turbine_specific_work(T_t4, T_t5, mass_ratio, p.cp_gas)
        self._record(run, "Turbine", (Station.TURBINE_EXIT,), work=run.work_turbine)

    @property
    @abstractmethod
    def afterburner_inlet(self) -> Station:
        """Station immediately upstream of the afterburner."""
        ...

    def _afterburner(self, run: _Run) -> None:
        p = self.params
        upstream = self.afterburner_inlet
        T_t7 = p.afterburner_exit_temp
        run.f_ab, clamped = thermo.fuel_air_ratio(
            p.cp_gas,
            run.stations.Tt(upstream),
            p.cp_gas,
            T_t7,
            p.eta_afterburner,
            p.fuel_heating_value,
        )
        if clamped:
            logger.warning(
                "Afterburner infeasible: Tt7=%.1f K exceeds what eta_ab*Q_HV can deliver; "
                "fuel-air ratio %.3g is not physical",
                T_t7,
                run.f_ab,
            )
            run.diagnostics.append(Diagnostic.AFTERBURNER_INFEASIBLE)
        run.stations.set(Station.AFTERBURNER_EXIT, T_t7, run.stations.Pt(upstream) * p.pi_afterburner)
        self._record(run, "Afterburner", (Station.AFTERBURNER_EXIT,), f_ab=run.f_ab)

    def _nozzle(self, run: _Run) -> None:
        p = self.params
        T_t9 = run.stations.Tt(Station.AFTERBURNER_EXIT)
        P_t9, T_9, run.exit_velocity = thermo.nozzle_expansion(
            T_t9,
            run.stations.Pt(Station.AFTERBURNER_EXIT),
            p.ambient_pressure,
            p.cp_gas,
            p.gamma_gas,
            p.eta_nozzle,
        )
        run.stations.set(Station.NOZZLE_EXIT, T_t9, P_t9)
        self._record(run, "Nozzle", (Station.NOZZLE_EXIT,), T9=T_9, V9=run.exit_velocity)

    def _finish(self, run: _Run, overall_fuel_air_ratio: float, specific_thrust: float) -> None:
        """Derive TSFC and store the PerformanceResult."""
        if specific_thrust <= SPECIFIC_THRUST_FLOOR:
            logger.warning(
                "Specific thrust %.4g N/(kg/s) is not positive; TSFC uses a floor of %g",
                specific_thrust,
                SPECIFIC_THRUST_FLOOR,
            )
            run.diagnostics.append(Diagnostic.NON_POSITIVE_THRUST)
        tsfc = overall_fuel_air_ratio / max(specific_thrust, SPECIFIC_THRUST_FLOOR)

        run.performance = PerformanceResult(
            flight_velocity=run.flight_velocity,
            exit_velocity=run.exit_velocity,
            combustor_fuel_air_ratio=run.f_comb,
            afterburner_fuel_air_ratio=run.f_ab,
            overall_fuel_air_ratio=overall_fuel_air_ratio,
            specific_thrust=specific_thrust,
            tsfc=tsfc,
            diagnostics=tuple(run.diagnostics),
        )
        if run.trace is not None:
            run.trace.append(
                StageTrace(
                    stage="Performance",
                    values={
                        "f_total": overall_fuel_air_ratio,
                        "specific_thrust": specific_thrust,
                        "tsfc": tsfc,
                    },
                )
            )
        logger.debug(
            "[Performance] f_total=%.6g specific_thrust=%.4g tsfc=%.6g",
            overall_fuel_air_ratio,
            specific_thrust,
            tsfc,
        )
