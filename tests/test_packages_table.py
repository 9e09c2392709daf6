from __future__ import annotations

import pandas as pd
import pytest

from conftest import make_package
from pkgrepo.core.repository import ArrayRepository
from pkgrepo.core.tables import PACKAGE_TABLE_COLUMNS, packages_table


def test_packages_table_keeps_repository_order_and_marks_aliases() -> None:
    repo = ArrayRepository(
        [
            make_package("zeta", "1.0", alias="1.0.x"),
            make_package("Alpha", "2.0-beta1"),
        ]
    )

    df = packages_table(repo.get_packages())

    assert list(df.columns) == PACKAGE_TABLE_COLUMNS
    assert all(str(dtype) == "string" for dtype in df.dtypes)
    assert list(df["name"]) == ["zeta", "zeta", "alpha"]
    assert list(df["pretty_version"]) == ["1.0", "1.0.x", "2.0-beta1"]
    assert list(df["stability"]) == ["stable", "dev", "beta"]
    assert df.loc[1, "alias_of"] == "zeta-1.0.0.0"
    assert df["alias_of"].isna().tolist() == [True, False, True]
    assert isinstance(df.index, pd.RangeIndex)


def test_packages_table_empty_has_schema_columns() -> None:
    df = packages_table([])
    assert list(df.columns) == PACKAGE_TABLE_COLUMNS
    assert len(df) == 0


def test_packages_table_rejects_non_packages() -> None:
    with pytest.raises(TypeError, match=r"packages\[0\]: expected BasePackage, got str"):
        packages_table(["foo"])  # type: ignore[list-item]
