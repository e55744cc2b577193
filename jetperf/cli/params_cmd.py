"""CLI commands for creating and inspecting parameter files."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from jetperf.cli.common import load_inputs
from jetperf.core.config import ProjectMeta, save_parameters_json
from jetperf.core.params import FIELD_UNITS, reference_parameters


@click.group("params")
@click.pass_context
def params(ctx: click.Context) -> None:
    """Create and inspect parameter files."""
    pass


@params.command("template")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="params.json",
    show_default=True,
    help="Output file path (JSON).",
)
@click.option("--name", type=str, default="Reference cruise", show_default=True, help="Project name.")
@click.pass_context
def params_template(ctx: click.Context, output: str, name: str) -> None:
    """Write the reference parameter set to a JSON file."""
    console: Console = ctx.ensure_object(dict).get("console", Console())
    save_parameters_json(reference_parameters(), output, ProjectMeta(name=name))
    console.print(f"[green]Parameter file written:[/green] {output}")


@params.command("show")
@click.argument("params_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def params_show(ctx: click.Context, params_file: str) -> None:
    """Load, validate and display a parameter file."""
    console: Console = ctx.ensure_object(dict).get("console", Console())
    meta, p = load_inputs(console, params_file)

    table = Table(title=meta.name)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    for name, value in p.to_dict().items():
        table.add_row(name, f"{value:.6g}", FIELD_UNITS.get(name, "—"))
    console.print(table)
    console.print("[green]Inputs are set.[/green]")
