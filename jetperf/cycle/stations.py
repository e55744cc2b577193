"""Engine station numbering and per-run station state.

Stations follow the usual gas-turbine numbering: 0 free stream,
2 inlet exit, 13 fan exit, 25 core compressor inlet, 3 compressor
exit, 4 turbine inlet, 5 turbine exit, 6 mixer exit, 7 afterburner
exit, 9 nozzle exit.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Station(IntEnum):
    """Named engine stations."""

    AMBIENT = 0
    INLET_EXIT = 2
    COMPRESSOR_EXIT = 3
    TURBINE_INLET = 4
    TURBINE_EXIT = 5
    MIXER_EXIT = 6
    AFTERBURNER_EXIT = 7
    NOZZLE_EXIT = 9
    FAN_EXIT = 13
    COMPRESSOR_INLET = 25

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class StationValues:
    """Stagnation properties at one station."""

    total_temperature: float  # K
    total_pressure: float  # Pa


class StationNotComputedError(KeyError):
    """Raised when reading a station whose stage has not run yet."""

    def __init__(self, station: Station):
        self.station = station
        super().__init__(f"Station {int(station)} ({station.label}) has not been computed")


class StationState(Mapping):
    """Ordered mapping Station → StationValues, filled in pipeline order.

    A station is defined only once its computing stage has run, and
    each station is written exactly once per run.
    """

    def __init__(self) -> None:
        self._values: dict[Station, StationValues] = {}

    def set(self, station: Station, total_temperature: float, total_pressure: float) -> StationValues:
        if station in self._values:
            raise RuntimeError(f"Station {int(station)} already computed in this run")
        values = StationValues(total_temperature, total_pressure)
        self._values[station] = values
        return values

    def __getitem__(self, station: Station) -> StationValues:
        values = self._values.get(station)
        if values is None:
            try:
                station = Station(station)
            except ValueError:
                raise KeyError(station) from None
            raise StationNotComputedError(station)
        return values

    def __iter__(self) -> Iterator[Station]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def Tt(self, station: Station) -> float:
        return self[station].total_temperature

    def Pt(self, station: Station) -> float:
        return self[station].total_pressure

    def as_dict(self) -> dict[int, dict[str, float]]:
        """Plain-dict view for display and JSON output."""
        return {
            int(s): {"Tt": v.total_temperature, "Pt": v.total_pressure}
            for s, v in self._values.items()
        }

    def __repr__(self) -> str:
        inner = ", ".join(
            f"{int(s)}: ({v.total_temperature:.1f} K, {v.total_pressure:.0f} Pa)"
            for s, v in self._values.items()
        )
        return f"StationState({{{inner}}})"


@dataclass(frozen=True)
class StageTrace:
    """Diagnostic record of one pipeline stage."""

    stage: str
    stations: dict[Station, StationValues] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)
