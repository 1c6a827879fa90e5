"""CLI commands for labmaint.

This package contains all subcommand implementations.
"""

from labmaint.cli.commands import config, run

__all__ = ["config", "run"]
