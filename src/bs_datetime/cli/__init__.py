"""Command line interface for bs-datetime."""

from bs_datetime.cli.main import cli

__all__ = ["cli"]
