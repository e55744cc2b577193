"""CLI commands for single-point engine analysis."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from jetperf.cli.common import configure_logging, load_inputs
from jetperf.cycle.engine import CycleAnalysis
from jetperf.cycle.solver import EngineType, analyze
from jetperf.reports.summary import generate_text_report
from jetperf.utils.units import pressure_from_si, tsfc_from_si

TSFC_UNITS = ["mg/(N*s)", "kg/(N*h)", "lb/(lbf*h)"]


def _analysis_options(f):
    """Options shared by the turbojet and turbofan commands."""
    f = click.option(
        "--plain", is_flag=True, help="Print a plain-text report instead of tables."
    )(f)
    f = click.option(
        "--tsfc-unit",
        type=click.Choice(TSFC_UNITS),
        default="mg/(N*s)",
        show_default=True,
        help="Display unit for TSFC.",
    )(f)
    f = click.option(
        "--debug", is_flag=True, help="Log every stage and show the station trace."
    )(f)
    f = click.option(
        "--set",
        "overrides",
        multiple=True,
        metavar="NAME=VALUE",
        help="Override a parameter, e.g. --set mach=0.9 --set 'ambient_pressure=20 kPa'.",
    )(f)
    f = click.argument("params_file", type=click.Path(exists=True, dir_okay=False))(f)
    return f


def _run(
    ctx: click.Context,
    engine_type: EngineType,
    params_file: str,
    overrides: tuple[str, ...],
    debug: bool,
    tsfc_unit: str,
    plain: bool,
) -> None:
    console: Console = ctx.ensure_object(dict).get("console", Console())
    if debug:
        configure_logging(logging.DEBUG)

    meta, params = load_inputs(console, params_file, overrides)
    result = analyze(params, engine_type, trace=debug)

    if plain:
        click.echo(generate_text_report(result, title=meta.name, tsfc_unit=tsfc_unit))
        return

    console.print(f"\n[bold]JetPerf — {engine_type.value.title()} Analysis[/bold] ({meta.name})\n")
    console.print(station_table(result))
    console.print(performance_table(result, tsfc_unit))
    if debug and result.trace:
        console.print(trace_table(result))
    print_diagnostics(console, result)


@click.command("turbojet")
@_analysis_options
@click.pass_context
def turbojet(
    ctx: click.Context,
    params_file: str,
    overrides: tuple[str, ...],
    debug: bool,
    tsfc_unit: str,
    plain: bool,
) -> None:
    """Analyze an afterburning turbojet."""
    _run(ctx, EngineType.TURBOJET, params_file, overrides, debug, tsfc_unit, plain)


@click.command("turbofan")
@_analysis_options
@click.pass_context
def turbofan(
    ctx: click.Context,
    params_file: str,
    overrides: tuple[str, ...],
    debug: bool,
    tsfc_unit: str,
    plain: bool,
) -> None:
    """Analyze a mixed-exhaust afterburning turbofan."""
    _run(ctx, EngineType.TURBOFAN, params_file, overrides, debug, tsfc_unit, plain)


@click.command("compare")
@click.argument("params_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--set", "overrides", multiple=True, metavar="NAME=VALUE", help="Override a parameter.")
@click.option(
    "--tsfc-unit",
    type=click.Choice(TSFC_UNITS),
    default="mg/(N*s)",
    show_default=True,
    help="Display unit for TSFC.",
)
@click.pass_context
def compare(ctx: click.Context, params_file: str, overrides: tuple[str, ...], tsfc_unit: str) -> None:
    """Run both engines on the same inputs and compare them."""
    console: Console = ctx.ensure_object(dict).get("console", Console())
    meta, params = load_inputs(console, params_file, overrides)

    jet = analyze(params, EngineType.TURBOJET)
    fan = analyze(params, EngineType.TURBOFAN)

    table = Table(title=f"Turbojet vs Turbofan — {meta.name}")
    table.add_column("Parameter", style="cyan")
    table.add_column("Turbojet", style="green", justify="right")
    table.add_column("Turbofan", style="green", justify="right")
    table.add_column("Unit", style="dim")

    for label, unit, get in _performance_rows(tsfc_unit):
        table.add_row(label, get(jet), get(fan), unit)

    console.print(table)
    print_diagnostics(console, jet)
    print_diagnostics(console, fan)


# --- Rendering helpers ---


def _performance_rows(tsfc_unit: str):
    return [
        ("Flight Velocity V0", "m/s", lambda a: f"{a.performance.flight_velocity:.2f}"),
        ("Exit Velocity V9", "m/s", lambda a: f"{a.performance.exit_velocity:.2f}"),
        ("f_comb", "—", lambda a: f"{a.performance.combustor_fuel_air_ratio:.5f}"),
        ("f_ab", "—", lambda a: f"{a.performance.afterburner_fuel_air_ratio:.5f}"),
        ("f_total", "—", lambda a: f"{a.performance.overall_fuel_air_ratio:.5f}"),
        ("Specific Thrust", "N/(kg/s)", lambda a: f"{a.performance.specific_thrust:.2f}"),
        ("TSFC", tsfc_unit, lambda a: f"{tsfc_from_si(a.performance.tsfc, tsfc_unit):.4f}"),
    ]


def performance_table(result: CycleAnalysis, tsfc_unit: str = "mg/(N*s)") -> Table:
    table = Table(title="Performance")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    for label, unit, get in _performance_rows(tsfc_unit):
        table.add_row(label, get(result), unit)
    return table


def station_table(result: CycleAnalysis) -> Table:
    table = Table(title="Stations")
    table.add_column("Stn", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Tt [K]", style="green", justify="right")
    table.add_column("Pt [kPa]", style="green", justify="right")
    for station, values in result.stations.items():
        table.add_row(
            str(int(station)),
            station.label,
            f"{values.total_temperature:.2f}",
            f"{pressure_from_si(values.total_pressure, 'kPa'):.3f}",
        )
    return table


def trace_table(result: CycleAnalysis) -> Table:
    table = Table(title="Stage Trace")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Stage", style="cyan")
    table.add_column("Stations")
    table.add_column("Values")
    for i, step in enumerate(result.trace or (), start=1):
        stations = ", ".join(
            f"{int(s)}: {v.total_temperature:.1f} K / "
            f"{pressure_from_si(v.total_pressure, 'kPa'):.2f} kPa"
            for s, v in step.stations.items()
        )
        values = ", ".join(f"{k}={v:.5g}" for k, v in step.values.items())
        table.add_row(str(i), step.stage, stations, values)
    return table


def print_diagnostics(console: Console, result: CycleAnalysis) -> None:
    perf = result.performance
    if perf.combustor_infeasible:
        console.print(
            f"[red]{result.engine_type}:[/red] combustor exit temperature cannot be reached "
            "with this fuel and efficiency; f_comb is not physical."
        )
    if perf.afterburner_infeasible:
        console.print(
            f"[red]{result.engine_type}:[/red] afterburner exit temperature cannot be reached "
            "with this fuel and efficiency; f_ab is not physical."
        )
    if perf.thrust_non_positive:
        console.print(
            f"[red]{result.engine_type}:[/red] specific thrust is not positive "
            f"({perf.specific_thrust:.3g} N/(kg/s)); TSFC is meaningless."
        )
