"""Version normalization.

Turns human-written version strings into the canonical comparable form stored
on every package record:

- classical versions are padded to four numeric components
  (`1.0` -> `1.0.0.0`, `v2.1.3-beta2` -> `2.1.3.0-beta2`)
- date versions keep their digits, separators become `-` (`2011.10.01` -> `2011-10-01`)
- master-like branches map to `9999999-dev`
- numeric branches replace wildcards with `9999999` (`1.0.x-dev` -> `1.0.9999999.9999999-dev`)
- other branches become `dev-<name>`

Anything else is rejected with `VersionParseError`.
"""

from __future__ import annotations

import re

_MODIFIER = r"[.-]?(?:(beta|RC|alpha|patch|pl|p)(?:[.-]?(\d+))?)?([.-]?dev)?"

_INLINE_ALIAS_RE = re.compile(r"^([^,\s]+) +as +([^,\s]+)$")
_MASTER_RE = re.compile(r"^(?:dev-)?(?:master|trunk|default)$", re.IGNORECASE)
_CLASSICAL_RE = re.compile(r"^v?(\d{1,3})(\.\d+)?(\.\d+)?(\.\d+)?" + _MODIFIER + r"$", re.IGNORECASE)
_DATE_RE = re.compile(r"^v?(\d{4}(?:[.:-]?\d{2}){1,6}(?:[.:-]?\d{1,3})?)" + _MODIFIER + r"$", re.IGNORECASE)
_DEV_SUFFIX_RE = re.compile(r"^(.*?)[.-]?dev$", re.IGNORECASE)
_NUMERIC_BRANCH_RE = re.compile(
    r"^v?(\d+)(\.(?:\d+|[x*]))?(\.(?:\d+|[x*]))?(\.(?:\d+|[x*]))?$",
    re.IGNORECASE,
)
_STABILITY_RE = re.compile(_MODIFIER + r"$", re.IGNORECASE)

MASTER_VERSION = "9999999-dev"
BRANCH_WILDCARD = "9999999"

STABILITIES = ("stable", "RC", "beta", "alpha", "dev")


class VersionParseError(ValueError):
    """Raised when a version string cannot be normalized."""

    def __init__(self, version: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid version string {version!r}")
        self.version = version


def _normalize_modifier(stability: str) -> str:
    s = stability.lower()
    if s in ("p", "pl"):
        return "patch"
    if s == "rc":
        return "RC"
    return s


class VersionParser:
    """Normalizes version strings and classifies their stability."""

    def normalize(self, version: str) -> str:
        if not isinstance(version, str):
            raise VersionParseError(repr(version), f"expected version string, got {type(version).__name__}")

        raw = version
        version = version.strip()

        # "1.0.x-dev as 1.0.0" requires the source side, the alias is informational
        m = _INLINE_ALIAS_RE.match(version)
        if m:
            version = m.group(1)

        if _MASTER_RE.match(version):
            return MASTER_VERSION

        if version[:4].lower() == "dev-":
            return version.lower()

        m = _CLASSICAL_RE.match(version)
        if m:
            normalized = m.group(1) + "".join(g or ".0" for g in m.group(2, 3, 4))
            return normalized + self._format_modifiers(m, 5)

        m = _DATE_RE.match(version)
        if m:
            normalized = re.sub(r"\D", "-", m.group(1))
            return normalized + self._format_modifiers(m, 2)

        m = _DEV_SUFFIX_RE.match(version)
        if m:
            try:
                return self.normalize_branch(m.group(1))
            except VersionParseError:
                pass

        # A bare wildcard ("1.0.x") names the same branch as "1.0.x-dev".
        if _NUMERIC_BRANCH_RE.match(version) and re.search(r"[x*]", version, re.IGNORECASE):
            return self.normalize_branch(version)

        raise VersionParseError(raw)

    @staticmethod
    def _format_modifiers(m: re.Match[str], index: int) -> str:
        suffix = ""
        stability = m.group(index)
        if stability:
            suffix += "-" + _normalize_modifier(stability) + (m.group(index + 1) or "")
        if m.group(index + 2):
            suffix += "-dev"
        return suffix

    def normalize_branch(self, name: str) -> str:
        """Normalize a branch name (`1.0.x`, `2.*`, `master`, `feature-foo`)."""
        name = name.strip()
        if not name:
            raise VersionParseError(name, "branch name must be a non-empty string")

        if name.lower() in ("master", "trunk", "default"):
            return self.normalize(name)

        m = _NUMERIC_BRANCH_RE.match(name)
        if m:
            parts = [m.group(1)]
            for g in m.group(2, 3, 4):
                parts.append(g.replace("*", "x").lower() if g else ".x")
            return "".join(parts).replace("x", BRANCH_WILDCARD) + "-dev"

        return "dev-" + name

    def parse_stability(self, version: str) -> str:
        """Return one of `stable`, `RC`, `beta`, `alpha`, `dev` for `version`."""
        version = re.sub(r"#.+$", "", version)

        if version[:4].lower() == "dev-" or version[-4:].lower() == "-dev":
            return "dev"

        m = _STABILITY_RE.search(version.lower())
        if m is None:
            return "stable"
        if m.group(3):
            return "dev"

        modifier = m.group(1)
        if modifier == "beta":
            return "beta"
        if modifier == "alpha":
            return "alpha"
        if modifier == "rc":
            return "RC"
        return "stable"


_DEFAULT_PARSER = VersionParser()


def normalize_version(version: str) -> str:
    """Normalize `version` with a shared `VersionParser`."""
    return _DEFAULT_PARSER.normalize(version)


__all__ = [
    "BRANCH_WILDCARD",
    "MASTER_VERSION",
    "STABILITIES",
    "VersionParseError",
    "VersionParser",
    "normalize_version",
]
