"""Integration tests for end-to-end CLI workflows.

Tests the full pipeline: parameter template → analysis → comparison → sweep.
"""

import json
import logging
import os
import tempfile

import pytest
from click.testing import CliRunner

from jetperf.cli.analyze_cmd import turbojet
from jetperf.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def params_file(runner, tmp_dir):
    path = os.path.join(tmp_dir, "params.json")
    result = runner.invoke(cli, ["params", "template", "-o", path])
    assert result.exit_code == 0, result.output
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


class TestParamsCommands:
    def test_template_writes_json(self, params_file):
        with open(params_file) as f:
            data = json.load(f)
        assert data["meta"]["name"] == "Reference cruise"
        assert data["parameters"]["mach"] == 0.85
        assert len(data["parameters"]) == 25

    def test_show(self, runner, params_file):
        result = runner.invoke(cli, ["params", "show", params_file])
        assert result.exit_code == 0, result.output
        assert "Inputs are set" in result.output

    def test_show_incomplete_file(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "partial.json")
        with open(path, "w") as f:
            json.dump({"parameters": {"mach": 0.8}}, f)
        result = runner.invoke(cli, ["params", "show", path])
        assert result.exit_code == 1
        assert "Inputs not initialized" in result.output


class TestAnalysisCommands:
    def test_turbojet(self, runner, params_file):
        result = runner.invoke(cli, ["turbojet", params_file])
        assert result.exit_code == 0, result.output
        assert "Specific Thrust" in result.output
        assert "Stations" in result.output

    def test_turbofan_plain(self, runner, params_file):
        result = runner.invoke(cli, ["turbofan", params_file, "--plain"])
        assert result.exit_code == 0, result.output
        assert "TURBOFAN PERFORMANCE" in result.output
        assert "Mixer Exit" in result.output

    def test_debug_shows_trace(self, runner, params_file):
        result = runner.invoke(cli, ["turbofan", params_file, "--debug"])
        assert result.exit_code == 0, result.output
        assert "Stage Trace" in result.output

    def test_override_with_units(self, runner, params_file):
        result = runner.invoke(
            cli,
            ["turbojet", params_file, "--plain", "--set", "mach=0", "--set", "ambient_pressure=101.325 kPa"],
        )
        assert result.exit_code == 0, result.output
        assert "101.3250 kPa" in result.output

    def test_unknown_override(self, runner, params_file):
        result = runner.invoke(cli, ["turbojet", params_file, "--set", "thrust=5"])
        assert result.exit_code == 1
        assert "Unknown parameter" in result.output

    def test_malformed_override(self, runner, params_file):
        result = runner.invoke(cli, ["turbojet", params_file, "--set", "mach"])
        assert result.exit_code == 1

    def test_validation_error_blocks_run(self, runner, params_file):
        result = runner.invoke(cli, ["turbojet", params_file, "--set", "gamma_air=0.9"])
        assert result.exit_code == 1
        assert "gamma_air" in result.output

    @pytest.mark.parametrize("command", ["turbojet", "turbofan"])
    @pytest.mark.parametrize("override", ["eta_compressor=0", "eta_turbine=0", "turbine_inlet_temp=0"])
    def test_degenerate_input_rejected(self, runner, params_file, command, override):
        result = runner.invoke(cli, [command, params_file, "--set", override])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert override.split("=")[0] in result.output
        assert not isinstance(result.exception, ZeroDivisionError)

    def test_command_runs_without_group(self, runner, params_file):
        result = runner.invoke(turbojet, [params_file, "--plain"])
        assert result.exit_code == 0, result.output
        assert "TURBOJET PERFORMANCE" in result.output

    def test_infeasible_reported(self, runner, params_file):
        result = runner.invoke(cli, ["turbojet", params_file, "--set", "fuel_heating_value=1 MJ/kg"])
        assert result.exit_code == 0, result.output
        assert "combustor exit temperature" in result.output

    def test_tsfc_unit_option(self, runner, params_file):
        result = runner.invoke(cli, ["turbojet", params_file, "--plain", "--tsfc-unit", "kg/(N*h)"])
        assert result.exit_code == 0, result.output
        assert "kg/(N*h)" in result.output

    def test_missing_file(self, runner, tmp_dir):
        result = runner.invoke(cli, ["turbojet", os.path.join(tmp_dir, "nope.json")])
        assert result.exit_code != 0


class TestCompareAndSweep:
    def test_compare(self, runner, params_file):
        result = runner.invoke(cli, ["compare", params_file])
        assert result.exit_code == 0, result.output
        assert "Turbojet" in result.output
        assert "Turbofan" in result.output

    def test_sweep(self, runner, params_file):
        result = runner.invoke(
            cli,
            [
                "sweep", params_file,
                "--engine", "turbofan",
                "--param", "turbine_inlet_temp",
                "--start", "1500", "--stop", "1800", "--num", "4",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Lowest TSFC" in result.output

    def test_sweep_unknown_parameter(self, runner, params_file):
        result = runner.invoke(
            cli, ["sweep", params_file, "--param", "thrust", "--start", "0", "--stop", "1"]
        )
        assert result.exit_code == 2

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "jetperf" in result.output
