"""Tabular view of repository contents.

Packages are rendered as a pandas DataFrame with a fixed column order and
pandas string extension dtypes (missing values stay `<NA>`).

Row order is the order of the input packages. Repository order is meaningful
(first match wins on lookup), so rows are never re-sorted here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from pkgrepo.core.package import AliasPackage, BasePackage

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


PACKAGE_TABLE_SCHEMA: dict[str, str] = {
    "name": "string",
    "pretty_name": "string",
    "version": "string",
    "pretty_version": "string",
    "stability": "string",
    "alias_of": "string",
    "unique_name": "string",
}

PACKAGE_TABLE_COLUMNS: list[str] = list(PACKAGE_TABLE_SCHEMA.keys())


def _package_row(package: BasePackage) -> dict[str, str | None]:
    alias_of = package.alias_of.unique_name if isinstance(package, AliasPackage) else None
    return {
        "name": package.name,
        "pretty_name": package.pretty_name,
        "version": package.version,
        "pretty_version": package.pretty_version,
        "stability": package.stability,
        "alias_of": alias_of,
        "unique_name": package.unique_name,
    }


def packages_table(packages: Iterable[BasePackage]) -> "pd.DataFrame":
    """Return one row per package, in input order.

    Post-conditions:
    - columns are exactly `PACKAGE_TABLE_COLUMNS`, in that order
    - every column has pandas `string` dtype
    - index is a RangeIndex
    """
    import pandas as pd

    rows = []
    for i, package in enumerate(packages):
        if not isinstance(package, BasePackage):
            raise TypeError(f"packages[{i}]: expected BasePackage, got {type(package).__name__}")
        rows.append(_package_row(package))

    df = pd.DataFrame(rows, columns=PACKAGE_TABLE_COLUMNS)
    for col, dtype in PACKAGE_TABLE_SCHEMA.items():
        df[col] = df[col].astype(dtype)
    return df.reset_index(drop=True)


__all__ = [
    "PACKAGE_TABLE_COLUMNS",
    "PACKAGE_TABLE_SCHEMA",
    "packages_table",
]
