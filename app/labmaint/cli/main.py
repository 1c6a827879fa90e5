"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from labmaint import __version__
from labmaint.cli.commands import config, run
from labmaint.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="labmaint",
    help="Scheduled cleanup and updates for shared school lab computers.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"labmaint version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route diagnostics logging to stderr through Rich.

    Args:
        verbose: Show DEBUG messages instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose diagnostics output.",
        ),
    ] = False,
) -> None:
    """labmaint - Scheduled cleanup and updates for shared school lab computers.

    Clears student folders, removes unwanted applications, runs BleachBit
    and applies system updates, logging every step.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
