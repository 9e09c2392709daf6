"""`pkgrepo show` command.

Loads a package list into an `ArrayRepository` and prints its contents as a
table, alias entries included, in repository order.
"""

from __future__ import annotations

from typing import Optional

import typer

from pkgrepo.cli.commands._repository import open_repository
from pkgrepo.core.tables import packages_table


def register(app: typer.Typer) -> None:
    @app.command("show")
    def show(
        file: Optional[str] = typer.Option(None, "--file", help="Package list JSON. Defaults to $PKGREPO_PACKAGES_FILE."),
        name: Optional[str] = typer.Option(None, "--name", help="Only show packages with this name."),
    ) -> None:
        """Show the packages in a package list."""
        repo = open_repository(file)
        packages = repo.find_packages(name) if name else repo.get_packages()

        if not packages:
            typer.echo("No packages.")
            return

        df = packages_table(packages)
        typer.echo(df.to_string(index=False, na_rep="-"))
