"""Shared helper: build a repository from a package list file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from pkgrepo.config import load_settings
from pkgrepo.core.repository import ArrayRepository
from pkgrepo.io.packages import json_loader


def open_repository(file: Optional[str]) -> ArrayRepository:
    """Return an initialized repository for `file` (or the configured default)."""
    path = Path(file or load_settings().packages_file)
    if not path.is_file():
        raise typer.BadParameter(f"package list not found: {path}", param_hint="--file")

    repo = ArrayRepository(loader=json_loader(path))
    try:
        repo.initialize()
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--file") from e
    return repo
