"""Tests for station numbering and StationState."""

import pytest

from jetperf.cycle.stations import Station, StationNotComputedError, StationState, StationValues


class TestStation:
    def test_numbering(self):
        assert int(Station.AMBIENT) == 0
        assert int(Station.FAN_EXIT) == 13
        assert int(Station.COMPRESSOR_INLET) == 25
        assert int(Station.NOZZLE_EXIT) == 9

    def test_label(self):
        assert Station.TURBINE_INLET.label == "Turbine Inlet"


class TestStationState:
    def test_set_and_get(self):
        state = StationState()
        state.set(Station.INLET_EXIT, 248.0, 35000.0)
        assert state[Station.INLET_EXIT] == StationValues(248.0, 35000.0)
        assert state.Tt(Station.INLET_EXIT) == 248.0
        assert state.Pt(Station.INLET_EXIT) == 35000.0

    def test_int_key_lookup(self):
        state = StationState()
        state.set(Station.COMPRESSOR_EXIT, 700.0, 1e6)
        assert state[3].total_temperature == 700.0

    def test_undefined_station_raises(self):
        state = StationState()
        with pytest.raises(StationNotComputedError, match="Turbine Exit"):
            state[Station.TURBINE_EXIT]

    def test_not_computed_is_key_error(self):
        state = StationState()
        assert Station.MIXER_EXIT not in state
        with pytest.raises(KeyError):
            state.Tt(Station.MIXER_EXIT)

    def test_unknown_station_number(self):
        state = StationState()
        assert 1 not in state
        with pytest.raises(KeyError):
            state[1]

    def test_write_once(self):
        state = StationState()
        state.set(Station.TURBINE_INLET, 1700.0, 1e6)
        with pytest.raises(RuntimeError):
            state.set(Station.TURBINE_INLET, 1800.0, 1e6)

    def test_insertion_order(self):
        state = StationState()
        for s in (Station.AMBIENT, Station.INLET_EXIT, Station.FAN_EXIT, Station.COMPRESSOR_EXIT):
            state.set(s, 300.0, 1e5)
        assert list(state) == [Station.AMBIENT, Station.INLET_EXIT, Station.FAN_EXIT, Station.COMPRESSOR_EXIT]
        assert len(state) == 4

    def test_as_dict(self):
        state = StationState()
        state.set(Station.AMBIENT, 250.0, 36000.0)
        assert state.as_dict() == {0: {"Tt": 250.0, "Pt": 36000.0}}
