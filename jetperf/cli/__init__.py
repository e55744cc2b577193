"""JetPerf command-line interface package."""

from jetperf.cli.main import cli, main

__all__ = ["cli", "main"]
