"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import pkgrepo` to fail.

To keep things robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def make_package(
    name: str,
    version: str,
    *,
    alias: str | None = None,
    source_reference: str | None = None,
):
    """Create a `Package` from pretty versions, normalizing like the loader does."""
    from pkgrepo.core.package import Package
    from pkgrepo.core.version import VersionParser

    parser = VersionParser()
    return Package(
        name=name,
        version=parser.normalize(version),
        pretty_version=version,
        alias=parser.normalize(alias) if alias else None,
        pretty_alias=alias,
        source_reference=source_reference,
    )


def write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2, sort_keys=True) + "\n", encoding="utf-8")
