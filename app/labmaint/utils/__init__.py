"""Utility modules for labmaint.

This module exports commonly used utility functions.
"""

from labmaint.utils.formatting import (
    console,
    create_settings_table,
    err_console,
    make_console,
    print_error,
    print_success,
)
from labmaint.utils.net import download_file
from labmaint.utils.shell import CommandResult, CommandRunner, command_exists, run_command

__all__ = [
    "CommandResult",
    "CommandRunner",
    "command_exists",
    "console",
    "create_settings_table",
    "download_file",
    "err_console",
    "make_console",
    "print_error",
    "print_success",
    "run_command",
]
