"""Single-spool turbojet with afterburner.

Pipeline: inlet → compressor → combustor → turbine → afterburner →
nozzle → performance. All quantities are per unit of inlet air flow.
"""

from __future__ import annotations

from jetperf.cycle.engine import CycleEngine, Stage, _Run
from jetperf.cycle.stations import Station


class Turbojet(CycleEngine):
    """Afterburning turbojet.

    The turbine drives the compressor alone:
        (1 + f_b)·cp_gas·(Tt4 - Tt5) = cp_air·(Tt3 - Tt2)
    """

    engine_type = "turbojet"
    required_parameters = CycleEngine.required_parameters + ("pressure_ratio_compressor_jet",)

    @property
    def afterburner_inlet(self) -> Station:
        return Station.TURBINE_EXIT

    def stages(self) -> tuple[Stage, ...]:
        return (
            self._inlet,
            self._compressor,
            self._combustor,
            self._turbine_stage,
            self._afterburner,
            self._nozzle,
            self._performance,
        )

    def _compressor(self, run: _Run) -> None:
        p = self.params
        run.work_compressor = self._compress(
            run,
            "Compressor",
            Station.INLET_EXIT,
            Station.COMPRESSOR_EXIT,
            p.pressure_ratio_compressor_jet,
            p.eta_compressor,
        )

    def _turbine_stage(self, run: _Run) -> None:
        self._turbine(run, run.work_compressor)

    def _performance(self, run: _Run) -> None:
        # Afterburner fuel is added to the already-fueled core flow
        f_total = run.f_comb + (1.0 + run.f_comb) * run.f_ab
        m_exit = 1.0 + f_total
        specific_thrust = m_exit * run.exit_velocity - run.flight_velocity
        self._finish(run, f_total, specific_thrust)
