"""Engine selection and single-call analysis entry point.

Supported engine architectures:
- Turbojet: single-stream turbojet with afterburner
- Turbofan: mixed-exhaust turbofan with afterburner
"""

from __future__ import annotations

from enum import Enum

from jetperf.core.params import ParameterSet
from jetperf.cycle.engine import CycleAnalysis, CycleEngine
from jetperf.cycle.turbofan import TurbofanMixed
from jetperf.cycle.turbojet import Turbojet


class EngineType(Enum):
    """Engine architecture."""

    TURBOJET = "turbojet"
    TURBOFAN = "turbofan"


_ENGINES: dict[EngineType, type[CycleEngine]] = {
    EngineType.TURBOJET: Turbojet,
    EngineType.TURBOFAN: TurbofanMixed,
}


def create_engine(
    engine_type: EngineType | str, params: ParameterSet | None, trace: bool = False
) -> CycleEngine:
    """Instantiate the engine model for *engine_type*.

    Raises:
        ValueError: If the engine type is unknown.
    """
    try:
        engine_type = EngineType(engine_type)
    except ValueError:
        raise ValueError(f"Unknown engine type: {engine_type}") from None
    return _ENGINES[engine_type](params, trace=trace)


def analyze(
    params: ParameterSet | None, engine_type: EngineType | str, trace: bool = False
) -> CycleAnalysis:
    """Run a complete on-design analysis.

    Args:
        params: Complete parameter set.
        engine_type: Which engine to model.
        trace: Attach a per-stage station trace to the result.

    Returns:
        CycleAnalysis with station state and performance.

    Raises:
        InputsNotInitializedError: If *params* is missing or incomplete.
        ValueError: If the engine type is unknown.
    """
    return create_engine(engine_type, params, trace=trace).run()
