"""pkgrepo: in-memory package repositories.

Packages live in an ordered `ArrayRepository`; packages that declare a version
alias are published a second time under that alias.
"""

from __future__ import annotations

from pkgrepo.core import AliasPackage, ArrayRepository, Package, RepositoryInterface, VersionParseError
from pkgrepo.io import read_packages_json

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AliasPackage",
    "ArrayRepository",
    "Package",
    "RepositoryInterface",
    "VersionParseError",
    "read_packages_json",
]
