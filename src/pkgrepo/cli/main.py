"""pkgrepo CLI entrypoint."""

from __future__ import annotations

from typing import Optional

import typer

app = typer.Typer(
    name="pkgrepo",
    add_completion=False,
    no_args_is_help=True,
    help="Inspect package lists through an in-memory package repository.",
)


@app.callback()
def _callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Defaults to $PKGREPO_LOG_LEVEL or WARNING.",
    ),
) -> None:
    """pkgrepo CLI."""
    from pkgrepo.config import load_settings
    from pkgrepo.logging_config import setup_logging

    level = log_level or load_settings().log_level
    try:
        setup_logging(level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command("version")
def version() -> None:
    """Print the installed pkgrepo version."""
    from pkgrepo import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `pkgrepo --help` is fast.
    """
    from pkgrepo.cli.commands import find as find_cmd
    from pkgrepo.cli.commands import show as show_cmd

    show_cmd.register(app)
    find_cmd.register(app)


_register_commands()
