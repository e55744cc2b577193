"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from jetperf.core.config import ProjectMeta, load_project_json
from jetperf.core.params import JetPerfError, ParameterSet, coerce_value
from jetperf.utils.validation import validate_parameters


def configure_logging(level: int) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def apply_overrides(params: ParameterSet, overrides: tuple[str, ...]) -> ParameterSet:
    """Apply ``name=value`` overrides; values may carry units.

    Raises:
        ValueError: On malformed overrides or unknown names.
    """
    changes = {}
    for item in overrides:
        name, sep, value = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Override must look like name=value, got {item!r}")
        if name not in ParameterSet.field_names():
            raise ValueError(f"Unknown parameter: {name}")
        changes[name] = coerce_value(name, value.strip())
    return params.replace(**changes) if changes else params


def load_inputs(
    console: Console, path: str, overrides: tuple[str, ...] = (), check: bool = True
) -> tuple[ProjectMeta, ParameterSet]:
    """Load, override and validate a parameter file.

    Prints any validation findings. Exits with status 1 on load errors
    or validation errors.
    """
    try:
        meta, params = load_project_json(path)
        params = apply_overrides(params, overrides)
    except (JetPerfError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if check:
        result = validate_parameters(params)
        for msg in result.warnings:
            console.print(f"[yellow]Warning:[/yellow] {msg.message}")
        if not result.is_valid:
            for msg in result.errors:
                console.print(f"[red]Error:[/red] {msg.message}")
            raise SystemExit(1)

    return meta, params
