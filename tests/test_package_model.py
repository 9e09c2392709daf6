from __future__ import annotations

import pytest

from conftest import make_package
from pkgrepo.core.package import AliasPackage, BasePackage, Package


def test_package_lowercases_name_and_keeps_pretty_name() -> None:
    pkg = Package(name=" Acme/Lib ", version="1.0.0.0", pretty_version="1.0")

    assert pkg.name == "acme/lib"
    assert pkg.pretty_name == "Acme/Lib"
    assert pkg.version == "1.0.0.0"
    assert pkg.pretty_version == "1.0"
    assert pkg.type == "library"
    assert pkg.pretty_string == "Acme/Lib 1.0"


def test_package_defaults_pretty_fields() -> None:
    pkg = Package(name="foo", version="1.0.0.0", alias="1.0.9999999.9999999-dev")

    assert pkg.pretty_version == "1.0.0.0"
    assert pkg.pretty_alias == "1.0.9999999.9999999-dev"


@pytest.mark.parametrize(
    ("kwargs", "msg"),
    [
        ({"name": "  ", "version": "1.0.0.0"}, r"Package\.name: must be a non-empty string"),
        ({"name": "foo", "version": ""}, r"Package\.version: must be a non-empty string"),
        ({"name": 3, "version": "1.0.0.0"}, r"Package\.name: expected str, got int"),
        ({"name": "foo", "version": "1.0.0.0", "alias": ""}, r"Package\.alias: must be a non-empty string"),
    ],
)
def test_package_rejects_invalid_fields(kwargs: dict, msg: str) -> None:
    with pytest.raises(ValueError, match=msg):
        Package(**kwargs)


def test_unique_name_includes_source_reference_when_present() -> None:
    assert make_package("foo", "1.0").unique_name == "foo-1.0.0.0"
    assert make_package("foo", "1.0", source_reference="abc123").unique_name == "foo-1.0.0.0-abc123"
    assert str(make_package("Foo", "2.0")) == "foo-2.0.0.0"


def test_stability_is_derived_from_normalized_version() -> None:
    assert make_package("foo", "1.0").stability == "stable"
    assert make_package("foo", "1.0-beta1").stability == "beta"
    assert make_package("foo", "dev-master").stability == "dev"


def test_alias_package_delegates_identity_to_base() -> None:
    base = make_package("Acme/Lib", "1.0", source_reference="abc")
    alias = AliasPackage(base, "1.0.9999999.9999999-dev", "1.0.x-dev")

    assert isinstance(alias, BasePackage)
    assert alias.name == "acme/lib"
    assert alias.pretty_name == "Acme/Lib"
    assert alias.type == base.type
    assert alias.source_reference == "abc"
    assert alias.version == "1.0.9999999.9999999-dev"
    assert alias.pretty_version == "1.0.x-dev"
    assert alias.unique_name == "acme/lib-1.0.9999999.9999999-dev-abc"
    assert alias.stability == "dev"
    assert alias.alias is None
    assert alias.pretty_alias is None


def test_alias_package_pretty_version_defaults_to_version() -> None:
    alias = AliasPackage(make_package("foo", "1.0"), "1.0.9999999.9999999-dev", None)
    assert alias.pretty_version == "1.0.9999999.9999999-dev"


def test_alias_package_requires_a_package_base() -> None:
    with pytest.raises(TypeError, match="expected BasePackage"):
        AliasPackage("foo", "1.0.0.0")  # type: ignore[arg-type]


def test_repository_back_reference_is_single_slot() -> None:
    class Holder:
        pass

    pkg = make_package("foo", "1.0")
    assert pkg.repository is None

    first, second = Holder(), Holder()
    pkg.set_repository(first)  # type: ignore[arg-type]
    assert pkg.repository is first
    pkg.set_repository(second)  # type: ignore[arg-type]
    assert pkg.repository is second
    pkg.set_repository(None)
    assert pkg.repository is None


def test_packages_compare_by_identity() -> None:
    a = make_package("foo", "1.0")
    b = make_package("foo", "1.0")
    assert a != b
    assert a == a
    assert len({a, b}) == 2
