"""`pkgrepo find` command.

Prints `<pretty name> <pretty version>` for every package matching NAME (and
VERSION when given). Exit code 1 when nothing matches.
"""

from __future__ import annotations

from typing import Optional

import typer

from pkgrepo.cli.commands._repository import open_repository
from pkgrepo.core.version import VersionParseError


def register(app: typer.Typer) -> None:
    @app.command("find")
    def find(
        name: str = typer.Argument(..., help="Package name (case-insensitive)."),
        version: Optional[str] = typer.Argument(None, help="Exact version, eg 1.0 or 1.0.x-dev."),
        file: Optional[str] = typer.Option(None, "--file", help="Package list JSON. Defaults to $PKGREPO_PACKAGES_FILE."),
    ) -> None:
        """Find packages by name and optional version."""
        repo = open_repository(file)
        try:
            matches = repo.find_packages(name, version)
        except VersionParseError as e:
            raise typer.BadParameter(str(e), param_hint="VERSION") from e

        if not matches:
            typer.echo(f"No package matches {name}" + (f" {version}" if version else ""), err=True)
            raise typer.Exit(code=1)

        for package in matches:
            typer.echo(package.pretty_string)
