"""Command line interface for Gauntlet."""

from gauntlet.cli.main import cli, main

__all__ = ["cli", "main"]
