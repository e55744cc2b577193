"""Jet engine cycle analysis for JetPerf.

Provides the station-by-station cycle engines (afterburning turbojet,
mixed-exhaust afterburning turbofan) and their result types.
"""

from jetperf.cycle.engine import CycleAnalysis, CycleEngine, Diagnostic, PerformanceResult, ShaftWork
from jetperf.cycle.solver import EngineType, analyze, create_engine
from jetperf.cycle.stations import StageTrace, Station, StationNotComputedError, StationState, StationValues
from jetperf.cycle.turbofan import TurbofanMixed
from jetperf.cycle.turbojet import Turbojet

__all__ = [
    "CycleAnalysis",
    "CycleEngine",
    "Diagnostic",
    "EngineType",
    "PerformanceResult",
    "ShaftWork",
    "StageTrace",
    "Station",
    "StationNotComputedError",
    "StationState",
    "StationValues",
    "TurbofanMixed",
    "Turbojet",
    "analyze",
    "create_engine",
]
