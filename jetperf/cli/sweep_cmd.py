"""CLI command for one-parameter trade studies."""

from __future__ import annotations

import click
import numpy as np
from rich.console import Console
from rich.table import Table

from jetperf.cli.common import load_inputs
from jetperf.core.params import ParameterSet
from jetperf.optimization.sweep import sweep_parameter
from jetperf.utils.units import tsfc_from_si


@click.command("sweep")
@click.argument("params_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--engine",
    type=click.Choice(["turbojet", "turbofan"], case_sensitive=False),
    default="turbojet",
    show_default=True,
    help="Engine to analyze.",
)
@click.option(
    "--param",
    "parameter",
    type=click.Choice(ParameterSet.field_names()),
    required=True,
    help="Parameter to vary (SI units).",
)
@click.option("--start", type=float, required=True, help="First value.")
@click.option("--stop", type=float, required=True, help="Last value.")
@click.option("--num", type=click.IntRange(min=2), default=11, show_default=True, help="Number of points.")
@click.option("--set", "overrides", multiple=True, metavar="NAME=VALUE", help="Override a parameter.")
@click.pass_context
def sweep(
    ctx: click.Context,
    params_file: str,
    engine: str,
    parameter: str,
    start: float,
    stop: float,
    num: int,
    overrides: tuple[str, ...],
) -> None:
    """Sweep one parameter and tabulate the performance."""
    console: Console = ctx.ensure_object(dict).get("console", Console())
    meta, params = load_inputs(console, params_file, overrides)

    result = sweep_parameter(params, engine.lower(), parameter, np.linspace(start, stop, num))

    table = Table(title=f"{engine.title()} — {parameter} sweep ({meta.name})")
    table.add_column(parameter, style="cyan", justify="right")
    table.add_column("V9 [m/s]", justify="right")
    table.add_column("f_comb", justify="right")
    table.add_column("f_ab", justify="right")
    table.add_column("F/ṁ [N·s/kg]", justify="right")
    table.add_column("TSFC [mg/(N·s)]", justify="right")
    table.add_column("OK", justify="center")

    for i, value in enumerate(result.values):
        table.add_row(
            f"{value:.4g}",
            f"{result['exit_velocity'][i]:.1f}",
            f"{result['combustor_fuel_air_ratio'][i]:.5f}",
            f"{result['afterburner_fuel_air_ratio'][i]:.5f}",
            f"{result['specific_thrust'][i]:.1f}",
            f"{tsfc_from_si(result['tsfc'][i], 'mg/(N*s)'):.3f}",
            "[green]✓[/green]" if result.feasible[i] else "[red]✗[/red]",
        )
    console.print(table)

    if result.feasible.any():
        best = result.best("tsfc")
        console.print(
            f"Lowest TSFC at {parameter} = {result.values[best]:.4g}: "
            f"{tsfc_from_si(result['tsfc'][best], 'mg/(N*s)'):.3f} mg/(N·s)"
        )
    else:
        console.print("[red]No feasible point in the sweep.[/red]")
