"""One-parameter trade studies for JetPerf.

Runs an independent on-design analysis for each value of a single
input parameter, holding all others fixed, and collects the
performance metrics as numpy arrays. Each point is a separate engine
run; nothing is iterated or carried between points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from jetperf.core.params import ParameterSet
from jetperf.cycle.engine import CycleAnalysis
from jetperf.cycle.solver import EngineType, analyze

logger = logging.getLogger(__name__)

METRICS = (
    "exit_velocity",
    "combustor_fuel_air_ratio",
    "afterburner_fuel_air_ratio",
    "overall_fuel_air_ratio",
    "specific_thrust",
    "tsfc",
)


@dataclass
class SweepResult:
    """Performance metrics over a parameter sweep."""

    engine_type: str
    parameter: str
    values: np.ndarray
    metrics: dict[str, np.ndarray] = field(default_factory=dict)
    feasible: np.ndarray = field(default_factory=lambda: np.array([], dtype=bool))
    analyses: list[CycleAnalysis] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, metric: str) -> np.ndarray:
        return self.metrics[metric]

    def best(self, metric: str = "tsfc", minimize: bool = True) -> int:
        """Index of the best feasible point for *metric*.

        Raises:
            ValueError: If no point is feasible.
        """
        if not self.feasible.any():
            raise ValueError("No feasible point in sweep")
        data = np.where(self.feasible, self.metrics[metric], np.inf if minimize else -np.inf)
        return int(np.argmin(data) if minimize else np.argmax(data))


def sweep_parameter(
    params: ParameterSet,
    engine_type: EngineType | str,
    parameter: str,
    values: np.ndarray | list[float],
) -> SweepResult:
    """Analyse *engine_type* at each value of *parameter*.

    Args:
        params: Baseline parameter set.
        engine_type: Engine to model.
        parameter: Name of the ParameterSet field to vary.
        values: Values to assign to *parameter*.

    Returns:
        SweepResult with one entry per value.

    Raises:
        ValueError: If *parameter* is not a ParameterSet field.
    """
    if parameter not in ParameterSet.field_names():
        raise ValueError(f"Unknown parameter: {parameter}")

    values = np.asarray(values, dtype=float)
    engine_type = EngineType(engine_type)
    metrics = {m: np.empty(len(values)) for m in METRICS}
    feasible = np.ones(len(values), dtype=bool)
    analyses: list[CycleAnalysis] = []

    for i, value in enumerate(values):
        analysis = analyze(params.replace(**{parameter: float(value)}), engine_type)
        perf = analysis.performance
        for m in METRICS:
            metrics[m][i] = getattr(perf, m)
        feasible[i] = perf.is_feasible
        analyses.append(analysis)

    n_bad = int((~feasible).sum())
    if n_bad:
        logger.info("%d of %d sweep points flagged infeasible", n_bad, len(values))

    return SweepResult(
        engine_type=engine_type.value,
        parameter=parameter,
        values=values,
        metrics=metrics,
        feasible=feasible,
        analyses=analyses,
    )
