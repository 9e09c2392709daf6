"""Package repositories.

`RepositoryInterface` is the contract every package source satisfies so that
sources are interchangeable: lookup by name/version, existence by unique name,
a full listing, and a count.

`ArrayRepository` keeps packages in an ordered in-memory list:

- insertion never deduplicates; call `has_package()` first if that matters
- inserting a package that declares an alias also inserts an alias package
  wrapping it, right after it
- all reads preserve insertion order; lookups are linear scans and return the
  first match

Alias wrapping and initial population are injected rather than overridden:
pass `alias_factory` to change how alias entries are built and `loader` to
populate the store from an external source on first access.

Not thread-safe. `initialize()` is idempotent but unguarded; call it before
sharing a repository across threads.
"""

from __future__ import annotations

import abc
import logging
from typing import Callable, Iterable, Iterator, Optional

from pkgrepo.core.package import AliasPackage, BasePackage
from pkgrepo.core.version import VersionParser

logger = logging.getLogger(__name__)

AliasFactory = Callable[[BasePackage, Optional[str], Optional[str]], BasePackage]
PackageLoader = Callable[[], Iterable[BasePackage]]


def default_alias_factory(package: BasePackage, alias: str | None, pretty_alias: str | None) -> BasePackage:
    """Wrap `package` in an `AliasPackage` presenting `alias`/`pretty_alias`."""
    if not alias:
        raise ValueError(f"{package.unique_name}: cannot create an alias package without an alias version")
    return AliasPackage(package, alias, pretty_alias)


class RepositoryInterface(abc.ABC):
    """Read contract shared by all package sources."""

    @abc.abstractmethod
    def find_package(self, name: str, version: str) -> BasePackage | None:
        """Return the first package matching `name` and `version`, or None."""

    @abc.abstractmethod
    def find_packages(self, name: str, version: str | None = None) -> list[BasePackage]:
        """Return every package matching `name` (and `version` when given)."""

    @abc.abstractmethod
    def has_package(self, package: BasePackage) -> bool:
        """Whether a package with the same unique name is present."""

    @abc.abstractmethod
    def get_packages(self) -> list[BasePackage]:
        """Return all packages in insertion order."""

    @abc.abstractmethod
    def __len__(self) -> int:
        ...

    def count(self) -> int:
        """Number of stored packages.

        Repositories that populate lazily load on this call: an
        `ArrayRepository` with a loader reads its source here. Without a loader
        an untouched repository counts 0.
        """
        return len(self)


class ArrayRepository(RepositoryInterface):
    """Ordered in-memory package store."""

    def __init__(
        self,
        packages: Iterable[BasePackage] = (),
        *,
        alias_factory: AliasFactory | None = None,
        loader: PackageLoader | None = None,
        version_parser: VersionParser | None = None,
    ) -> None:
        self._packages: list[BasePackage] | None = None
        self._alias_factory: AliasFactory = alias_factory or default_alias_factory
        self._loader = loader
        self._version_parser = version_parser or VersionParser()

        for package in packages:
            self.add_package(package)

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------
    @property
    def is_initialized(self) -> bool:
        return self._packages is not None

    def initialize(self) -> list[BasePackage]:
        """Create the backing list and run the loader, once.

        Runs automatically on first access. Packages from the loader go through
        `add_package()` so aliases are materialized for them too. If the loader
        fails, the repository is left uninitialized and the next access retries.
        """
        if self._packages is not None:
            return self._packages
        packages: list[BasePackage] = []
        # add_package() re-enters _ensure_initialized(), so the list must exist while loading
        self._packages = packages
        if self._loader is None:
            return packages

        logger.debug("initializing %s from loader %r", type(self).__name__, self._loader)
        try:
            for package in self._loader():
                self.add_package(package)
        except BaseException:
            self._packages = None
            raise
        logger.debug("loaded %d package(s)", len(packages))
        return packages

    def _ensure_initialized(self) -> list[BasePackage]:
        if self._packages is None:
            return self.initialize()
        return self._packages

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_package(self, name: str, version: str) -> BasePackage | None:
        version = self._version_parser.normalize(version)
        name = name.lower()

        for package in self.get_packages():
            if package.name == name and package.version == version:
                return package
        return None

    def find_packages(self, name: str, version: str | None = None) -> list[BasePackage]:
        name = name.lower()
        if version is not None:
            version = self._version_parser.normalize(version)

        return [
            package
            for package in self.get_packages()
            if package.name == name and (version is None or package.version == version)
        ]

    def has_package(self, package: BasePackage) -> bool:
        package_id = package.unique_name
        return any(repo_package.unique_name == package_id for repo_package in self.get_packages())

    def get_packages(self) -> list[BasePackage]:
        return self._ensure_initialized()

    def __len__(self) -> int:
        """Number of stored packages; like every read, runs the loader on first use."""
        return len(self.get_packages())

    def __iter__(self) -> Iterator[BasePackage]:
        return iter(self.get_packages())

    def __contains__(self, package: object) -> bool:
        return isinstance(package, BasePackage) and self.has_package(package)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_package(self, package: BasePackage) -> None:
        """Append `package`, followed by its alias package if it declares an alias.

        Alias packages are inserted through this same method. The alias factory
        must eventually return packages without an alias, otherwise insertion
        does not terminate.
        """
        packages = self._ensure_initialized()
        package.set_repository(self)
        packages.append(package)
        logger.debug("added %s", package.unique_name)

        if package.alias:
            alias_package = self.create_alias_package(package)
            logger.debug("materializing alias %s of %s", alias_package.pretty_version, package.unique_name)
            self.add_package(alias_package)

    def create_alias_package(
        self,
        package: BasePackage,
        alias: str | None = None,
        pretty_alias: str | None = None,
    ) -> BasePackage:
        """Build the alias entry for `package`; overrides default to its own alias fields."""
        return self._alias_factory(package, alias or package.alias, pretty_alias or package.pretty_alias)

    def remove_package(self, package: BasePackage) -> None:
        """Remove the first stored package with the same unique name; no-op if absent."""
        package_id = package.unique_name
        packages = self.get_packages()

        for index, repo_package in enumerate(packages):
            if repo_package.unique_name == package_id:
                del packages[index]
                logger.debug("removed %s", package_id)
                return

    def __repr__(self) -> str:
        count = len(self._packages) if self._packages is not None else 0
        return f"{type(self).__name__}(packages={count}, initialized={self.is_initialized})"


__all__ = [
    "AliasFactory",
    "ArrayRepository",
    "PackageLoader",
    "RepositoryInterface",
    "default_alias_factory",
]
