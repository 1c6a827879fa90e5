"""Run command implementation.

Runs the full maintenance pipeline. Must be invoked as root.
"""

from pathlib import Path
from typing import Annotated

import typer

from labmaint.core.config import ConfigError, resolve_config
from labmaint.core.logger import MaintenanceLogger
from labmaint.core.pipeline import MaintenancePipeline
from labmaint.core.privilege import PrivilegeError, require_root
from labmaint.utils.formatting import err_console, make_console, print_error
from labmaint.utils.shell import CommandRunner

app = typer.Typer(
    help="Run the lab maintenance pipeline.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run_maintenance(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML file overriding the built-in settings.",
        ),
    ] = None,
) -> None:
    """Clean student folders, remove unwanted software and update the system."""
    # Nothing may be touched before the privilege check
    try:
        require_root()
    except PrivilegeError as e:
        err_console.print(f"[error]{e}[/]")
        raise typer.Exit(code=1) from e

    try:
        config = resolve_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    log = MaintenanceLogger(config.log_path, console=make_console(config.colors))
    pipeline = MaintenancePipeline(
        config,
        log,
        CommandRunner(),
        privilege_check=require_root,
    )
    pipeline.run()
