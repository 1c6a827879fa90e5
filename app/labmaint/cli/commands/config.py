"""Config command implementation.

Shows the effective settings and writes them out as a starter file.
"""

from pathlib import Path
from typing import Annotated

import typer

from labmaint.core.config import ConfigError, MaintenanceConfig, resolve_config, save_config
from labmaint.utils.formatting import (
    console,
    create_settings_table,
    print_error,
    print_success,
)

app = typer.Typer(
    help="Show or export the maintenance settings.",
    invoke_without_command=True,
)


def _format_list(items: list[str]) -> str:
    """Format a list setting one item per line."""
    return "\n".join(items) if items else "[muted](none)[/]"


def _show_config(config: MaintenanceConfig) -> None:
    """Display the settings as a table.

    Args:
        config: Settings to display.
    """
    table = create_settings_table()
    table.add_row("Target user", config.target_user)
    table.add_row("Log file", str(config.log_path))
    table.add_row("BleachBit config URL", config.cleanup_config_url)
    table.add_row("BleachBit config dir", str(config.cleanup_config_dir))
    table.add_row("Folders to clear", _format_list(config.effective_folders))
    table.add_row("Flatpaks to remove", _format_list(config.flatpak_apps))
    table.add_row("APT packages to purge", _format_list(config.apt_packages))
    console.print(table)


@app.callback(invoke_without_command=True)
def show_config(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML file overriding the built-in settings.",
        ),
    ] = None,
    write_path: Annotated[
        Path | None,
        typer.Option(
            "--write",
            "-w",
            help="Write the effective settings to this TOML file.",
        ),
    ] = None,
) -> None:
    """Show the effective maintenance settings."""
    try:
        config = resolve_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if write_path is None:
        _show_config(config)
        return

    try:
        saved = save_config(config, write_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
