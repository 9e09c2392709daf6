"""pkgrepo I/O helpers.

Package list JSON loading/writing lives in [`packages`](packages.py:1).
"""

from __future__ import annotations

from .packages import json_loader, read_packages_json, write_packages_json

__all__ = [
    "json_loader",
    "read_packages_json",
    "write_packages_json",
]
