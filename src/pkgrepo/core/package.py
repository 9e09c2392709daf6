"""Package records.

Two record kinds share one identity contract (`BasePackage`):

- `Package`: a concrete named, versioned unit as loaded from a package list.
- `AliasPackage`: wraps a base package and presents an alternate
  version/pretty version (eg `1.0.x-dev` published as `1.0.9999999.9999999-dev`).

Versions stored on records are already normalized; the loaders in
`pkgrepo.io` take care of that. The back-reference to the owning repository is
a weak reference: the repository owns membership, a package never keeps its
repository alive.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pkgrepo.core.version import VersionParser

if TYPE_CHECKING:  # pragma: no cover
    from pkgrepo.core.repository import RepositoryInterface


_STABILITY_PARSER = VersionParser()


def _norm_str(value: Any, *, where: str) -> str:
    """Normalize a required string: strip and reject empty/whitespace."""
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected str, got {type(value).__name__}")
    s = value.strip()
    if not s:
        raise ValueError(f"{where}: must be a non-empty string")
    return s


def _opt_str(value: Any, *, where: str) -> str | None:
    if value is None:
        return None
    return _norm_str(value, where=where)


class BasePackage:
    """Identity accessors shared by every package kind.

    Subclasses provide `name`, `pretty_name`, `version`, `pretty_version`,
    `alias`, `pretty_alias`, `type` and `source_reference`.
    """

    name: str
    pretty_name: str
    version: str
    pretty_version: str
    alias: str | None
    pretty_alias: str | None
    type: str
    source_reference: str | None

    _repository_ref: weakref.ReferenceType[RepositoryInterface] | None = None

    @property
    def unique_name(self) -> str:
        """Identity used for existence checks and removal."""
        if self.source_reference:
            return f"{self.name}-{self.version}-{self.source_reference}"
        return f"{self.name}-{self.version}"

    @property
    def stability(self) -> str:
        return _STABILITY_PARSER.parse_stability(self.version)

    @property
    def pretty_string(self) -> str:
        return f"{self.pretty_name} {self.pretty_version}"

    @property
    def repository(self) -> RepositoryInterface | None:
        """Repository currently holding this package, if it is still alive."""
        ref = self._repository_ref
        return ref() if ref is not None else None

    def set_repository(self, repository: RepositoryInterface | None) -> None:
        self._repository_ref = weakref.ref(repository) if repository is not None else None

    def __str__(self) -> str:
        return self.unique_name


@dataclass(eq=False)
class Package(BasePackage):
    """A concrete package record.

    `name` is lowercased (the original spelling is kept as `pretty_name`).
    `version` must already be normalized; `pretty_version` defaults to it.
    `pretty_alias` defaults to `alias` when only the latter is given.
    """

    name: str
    version: str
    pretty_version: str | None = None
    alias: str | None = None
    pretty_alias: str | None = None
    type: str = "library"
    source_reference: str | None = None
    pretty_name: str = field(init=False)

    def __post_init__(self) -> None:
        self.pretty_name = _norm_str(self.name, where="Package.name")
        self.name = self.pretty_name.lower()
        self.version = _norm_str(self.version, where="Package.version")
        self.pretty_version = _opt_str(self.pretty_version, where="Package.pretty_version") or self.version
        self.alias = _opt_str(self.alias, where="Package.alias")
        self.pretty_alias = _opt_str(self.pretty_alias, where="Package.pretty_alias")
        if self.alias and not self.pretty_alias:
            self.pretty_alias = self.alias
        self.type = _norm_str(self.type, where="Package.type")
        self.source_reference = _opt_str(self.source_reference, where="Package.source_reference")


@dataclass(eq=False)
class AliasPackage(BasePackage):
    """Presents `alias_of` under another version.

    Everything but the version pair delegates to the base package. An alias
    package declares no alias of its own.
    """

    alias_of: BasePackage
    version: str
    pretty_version: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.alias_of, BasePackage):
            raise TypeError(f"AliasPackage.alias_of: expected BasePackage, got {type(self.alias_of).__name__}")
        self.version = _norm_str(self.version, where="AliasPackage.version")
        self.pretty_version = _opt_str(self.pretty_version, where="AliasPackage.pretty_version") or self.version

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.alias_of.name

    @property
    def pretty_name(self) -> str:  # type: ignore[override]
        return self.alias_of.pretty_name

    @property
    def type(self) -> str:  # type: ignore[override]
        return self.alias_of.type

    @property
    def source_reference(self) -> str | None:  # type: ignore[override]
        return self.alias_of.source_reference

    @property
    def alias(self) -> str | None:  # type: ignore[override]
        return None

    @property
    def pretty_alias(self) -> str | None:  # type: ignore[override]
        return None


__all__ = [
    "AliasPackage",
    "BasePackage",
    "Package",
]
