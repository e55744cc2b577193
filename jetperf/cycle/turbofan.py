"""Two-stream turbofan with mixed exhaust and afterburner.

Pipeline: inlet → fan → core compressor → combustor → turbine → mixer →
afterburner → nozzle → performance.

Mass-flow bookkeeping is referenced to a core air flow of 1; the fan
and the inlet pass 1 + BPR. Specific thrust and TSFC are normalised to
the total inlet flow (1 + BPR), not to the core flow.
"""

from __future__ import annotations

from jetperf.core import thermo
from jetperf.cycle.engine import CycleEngine, ShaftWork, Stage, _Run
from jetperf.cycle.stations import Station


class TurbofanMixed(CycleEngine):
    """Mixed-exhaust afterburning turbofan.

    The turbine drives the fan (bypass plus core flow) and the core
    compressor:
        (1 + f_b)·cp_gas·(Tt4 - Tt5) = (1 + BPR)·w_fan + w_compressor
    """

    engine_type = "turbofan"
    required_parameters = CycleEngine.required_parameters + (
        "eta_fan",
        "pi_mixer",
        "bypass_ratio",
        "pressure_ratio_fan",
        "pressure_ratio_compressor_core",
    )

    @property
    def afterburner_inlet(self) -> Station:
        return Station.MIXER_EXIT

    def stages(self) -> tuple[Stage, ...]:
        return (
            self._inlet,
            self._fan,
            self._compressor,
            self._combustor,
            self._turbine_stage,
            self._mixer,
            self._afterburner,
            self._nozzle,
            self._performance,
        )

    @property
    def fan_flow(self) -> float:
        return 1.0 + self.params.bypass_ratio

    def _fan(self, run: _Run) -> None:
        p = self.params
        run.work_fan = self._compress(
            run, "Fan", Station.INLET_EXIT, Station.FAN_EXIT, p.pressure_ratio_fan, p.eta_fan
        )
        # Fan exit feeds both the bypass duct and the core compressor
        fan_exit = run.stations[Station.FAN_EXIT]
        run.stations.set(
            Station.COMPRESSOR_INLET, fan_exit.total_temperature, fan_exit.total_pressure
        )

    def _compressor(self, run: _Run) -> None:
        p = self.params
        run.work_compressor = self._compress(
            run,
            "Compressor",
            Station.COMPRESSOR_INLET,
            Station.COMPRESSOR_EXIT,
            p.pressure_ratio_compressor_core,
            p.eta_compressor,
        )

    def _turbine_stage(self, run: _Run) -> None:
        self._turbine(run, self.fan_flow * run.work_fan + run.work_compressor)

    def _mixer(self, run: _Run) -> None:
        p = self.params
        m_bypass = p.bypass_ratio
        m_core = 1.0 + run.f_comb
        T_t6 = thermo.mixed_temperature(
            m_bypass,
            p.cp_air,
            run.stations.Tt(Station.FAN_EXIT),
            m_core,
            p.cp_gas,
            run.stations.Tt(Station.TURBINE_EXIT),
        )
        # Mixed total pressure set by the bypass duct
        P_t6 = run.stations.Pt(Station.FAN_EXIT) * p.pi_mixer
        run.stations.set(Station.MIXER_EXIT, T_t6, P_t6)
        self._record(run, "Mixer", (Station.MIXER_EXIT,), m_mixed=m_bypass + m_core)

    def _performance(self, run: _Run) -> None:
        p = self.params
        m_core = 1.0
        m_bypass = p.bypass_ratio
        m_inlet = m_core + m_bypass
        m_fuel_comb = m_core * run.f_comb
        m_mixed = m_inlet + m_fuel_comb
        m_fuel_ab = m_mixed * run.f_ab
        m_exit = m_mixed + m_fuel_ab

        net_thrust = m_exit * run.exit_velocity - m_inlet * run.flight_velocity
        specific_thrust = net_thrust / m_inlet
        f_overall = (m_fuel_comb + m_fuel_ab) / m_inlet
        self._finish(run, f_overall, specific_thrust)

    def _shaft_work(self, run: _Run) -> ShaftWork:
        return ShaftWork(
            compressor=run.work_compressor,
            turbine=run.work_turbine,
            fan=run.work_fan,
            fan_flow=self.fan_flow,
        )
