"""CLI package for labmaint.

This package contains the Typer application and all subcommands.
"""

from labmaint.cli.main import app

__all__ = ["app"]
