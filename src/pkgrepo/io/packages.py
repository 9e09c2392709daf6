"""Package list JSON I/O.

Accepted layouts:

    [ {"name": "acme/lib", "version": "1.0", ...}, ... ]

or

    {"packages": [ {...}, ... ]}

Per-package fields:
- name (required): str
- version (required): str, pretty form; normalized unless `version_normalized` is given
- version_normalized (optional): str, used verbatim
- alias (optional): str, pretty alias version; normalized for the alias entry
- type (optional): str, default "library"
- source (optional): {"reference": str}

Rules:
- Structural problems hard-error with `ValueError` and a location prefix.
- Malformed versions raise `VersionParseError` (a `ValueError`).
- Writer is stable: UTF-8, `indent=2`, `sort_keys=True`, newline-terminated.
  Alias entries are skipped; they are re-derived from `alias` on load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Iterable

from pkgrepo.core.package import AliasPackage, BasePackage, Package
from pkgrepo.core.version import VersionParser

logger = logging.getLogger(__name__)

_MISSING = object()


def _require_dict(value: Any, *, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected JSON object, got {type(value).__name__}")
    return value


def _require_list(value: Any, *, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected JSON array, got {type(value).__name__}")
    return value


def _norm_str(value: Any, *, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected str, got {type(value).__name__}")
    s = value.strip()
    if not s:
        raise ValueError(f"{where}: must be a non-empty string")
    return s


def _opt_str(data: dict[str, Any], key: str, *, where: str) -> str | None:
    v = data.get(key, _MISSING)
    if v is _MISSING or v is None:
        return None
    return _norm_str(v, where=f"{where}.{key}")


def package_from_dict(data: Any, *, where: str = "package", parser: VersionParser | None = None) -> Package:
    """Build a `Package` from one package-list entry."""
    parser = parser or VersionParser()
    obj = _require_dict(data, where=where)

    name = _norm_str(obj.get("name", None), where=f"{where}.name")
    pretty_version = _norm_str(obj.get("version", None), where=f"{where}.version")

    version = _opt_str(obj, "version_normalized", where=where)
    if version is None:
        version = parser.normalize(pretty_version)

    pretty_alias = _opt_str(obj, "alias", where=where)
    alias = parser.normalize(pretty_alias) if pretty_alias is not None else None

    source_reference = None
    source = obj.get("source", None)
    if source is not None:
        source_obj = _require_dict(source, where=f"{where}.source")
        source_reference = _opt_str(source_obj, "reference", where=f"{where}.source")

    return Package(
        name=name,
        version=version,
        pretty_version=pretty_version,
        alias=alias,
        pretty_alias=pretty_alias,
        type=_opt_str(obj, "type", where=where) or "library",
        source_reference=source_reference,
    )


def _package_entries(data: Any, *, where: str) -> list[Any]:
    if isinstance(data, dict):
        entries = data.get("packages", _MISSING)
        if entries is _MISSING:
            raise ValueError(f"{where}: missing required key 'packages'")
        if entries is None:
            raise ValueError(f"{where}.packages: must be an array; got null")
        return _require_list(entries, where=f"{where}.packages")
    return _require_list(data, where=where)


def read_packages_json(path: str | Path, *, parser: VersionParser | None = None) -> list[Package]:
    """Read a package list JSON file and return `Package` records in file order."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)

    where = p.name
    parser = parser or VersionParser()
    entries = _package_entries(data, where=where)
    packages = [package_from_dict(entry, where=f"{where}[{i}]", parser=parser) for i, entry in enumerate(entries)]
    logger.debug("read %d package(s) from %s", len(packages), p)
    return packages


def package_to_json_dict(package: BasePackage) -> dict[str, Any]:
    """Convert a package record to a JSON-ready dict (inverse of `package_from_dict`)."""
    out: dict[str, Any] = {
        "name": package.pretty_name,
        "version": package.pretty_version,
        "version_normalized": package.version,
    }
    if package.pretty_alias:
        out["alias"] = package.pretty_alias
    if package.type != "library":
        out["type"] = package.type
    if package.source_reference:
        out["source"] = {"reference": package.source_reference}
    return out


def packages_to_json_dict(packages: Iterable[BasePackage]) -> dict[str, Any]:
    return {
        "packages": [package_to_json_dict(p) for p in packages if not isinstance(p, AliasPackage)],
    }


def write_packages_json(packages: Iterable[BasePackage], path: str | Path) -> None:
    """Write a package list JSON file deterministically."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(packages_to_json_dict(packages), indent=2, sort_keys=True)
    if not text.endswith("\n"):
        text += "\n"
    p.write_text(text, encoding="utf-8")


def json_loader(path: str | Path, *, parser: VersionParser | None = None) -> Callable[[], list[Package]]:
    """Return a loader for `ArrayRepository(loader=...)` reading `path` on first access."""
    p = Path(path)

    def _load() -> list[Package]:
        return read_packages_json(p, parser=parser)

    return _load


__all__ = [
    "json_loader",
    "package_from_dict",
    "package_to_json_dict",
    "packages_to_json_dict",
    "read_packages_json",
    "write_packages_json",
]
