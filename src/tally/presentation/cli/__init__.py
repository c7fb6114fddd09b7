"""Command-line presentation layer."""

from tally.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
