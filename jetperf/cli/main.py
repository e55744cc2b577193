"""JetPerf command-line interface.

Entry point for the ``jetperf`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console

from jetperf import __app_name__, __version__
from jetperf.cli.common import configure_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Log progress messages.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """JetPerf — Jet Engine Performance Estimator.

    On-design cycle analysis of an afterburning turbojet and a
    mixed-exhaust afterburning turbofan.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    if verbose:
        configure_logging(logging.INFO)


# Import and register sub-commands
from jetperf.cli.analyze_cmd import compare, turbofan, turbojet  # noqa: E402
from jetperf.cli.params_cmd import params  # noqa: E402
from jetperf.cli.sweep_cmd import sweep  # noqa: E402

cli.add_command(params)
cli.add_command(turbojet)
cli.add_command(turbofan)
cli.add_command(compare)
cli.add_command(sweep)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
