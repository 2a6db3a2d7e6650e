"""exebridge CLI entry point.

Provides the Typer CLI interface: ``exebridge <command> [args...]``.
Everything after the command name is passed to the child verbatim.
"""

import logging
import sys
from typing import Optional

import typer

from exebridge import __version__
from exebridge.config import get_log_level
from exebridge.constants import LOG_FORMAT
from exebridge.errors import BridgeError, UsageError
from exebridge.runner import run_command

app = typer.Typer(
    name="exebridge",
    help="Run host executables (.exe, .bat, .cmd) by their bare name",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Display version, then exit."""
    if value:
        print(f"exebridge version {__version__}")
        raise typer.Exit()


def configure_logging() -> None:
    """Send bridge diagnostics to stderr at the configured level."""
    logging.basicConfig(
        level=get_log_level(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
def main(
    ctx: typer.Context,
    command: Optional[str] = typer.Argument(
        None,
        metavar="COMMAND",
        help="Command to run, with or without extension",
        show_default=False,
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Locate COMMAND and run it with the remaining arguments."""
    configure_logging()

    try:
        if command is None:
            raise UsageError(ctx.find_root().info_name or "exebridge")
        exit_code = run_command(command, list(ctx.args))
    except BridgeError as e:
        print(e.diagnostic(), file=sys.stderr)
        raise typer.Exit(e.exit_code)

    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
