"""Command-line interface for monograph."""

from monograph.cli.main import cli

__all__ = ["cli"]
