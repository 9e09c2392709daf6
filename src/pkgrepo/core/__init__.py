"""pkgrepo core: package records, version normalization and repositories.

This package is intentionally standalone and must not import CLI/io to avoid
circular dependencies.
"""

from __future__ import annotations

from .package import AliasPackage, BasePackage, Package
from .repository import ArrayRepository, RepositoryInterface, default_alias_factory
from .tables import PACKAGE_TABLE_COLUMNS, packages_table
from .version import VersionParseError, VersionParser, normalize_version

__all__ = [
    "AliasPackage",
    "BasePackage",
    "Package",
    "ArrayRepository",
    "RepositoryInterface",
    "default_alias_factory",
    "PACKAGE_TABLE_COLUMNS",
    "packages_table",
    "VersionParseError",
    "VersionParser",
    "normalize_version",
]
