"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.table import Table

from labmaint.core.theme import ThemeColors, get_rich_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


def make_console(colors: ThemeColors | None = None, *, stderr: bool = False) -> Console:
    """Create a themed console.

    Args:
        colors: Theme colors; defaults when None.
        stderr: Write to standard error instead of standard output.

    Returns:
        Configured Rich Console.
    """
    return Console(theme=get_rich_theme(colors), stderr=stderr, color_system=_detect_color_system())


# Shared console instances for CLI messages outside the pipeline
console = make_console()
err_console = make_console(stderr=True)


def create_settings_table(title: str = "Maintenance Settings") -> Table:
    """Create a pre-configured two-column table for settings display.

    Args:
        title: Table title.

    Returns:
        Rich Table with Setting and Value columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="info", no_wrap=True)
    table.add_column("Value", style="text")
    return table


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
