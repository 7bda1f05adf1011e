"""Core data model for serein.

- Static dependency registry (which names exist, which one is mandatory,
  which ones are data-only) and the vendor pattern used to recognize
  resolvable manifest entries.
- Frozen dataclasses for version coordinates, dependencies, user selections
  and project information.
- Version ordering helpers used to pick the "latest" coordinate.

This module must not import io/project/cli.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

VENDOR_PREFIX = "@minecraft/"

# Substring semantics: any module_name containing the vendor namespace is eligible.
VENDOR_PATTERN = re.compile(r"@minecraft/")

SERVER_PACKAGE = "@minecraft/server"

OPTIONAL_PACKAGES: tuple[str, ...] = (
    "@minecraft/server-ui",
    "@minecraft/server-admin",
    "@minecraft/server-gametest",
    "@minecraft/server-net",
    "@minecraft/server-editor",
)

DATA_PACKAGES: tuple[str, ...] = (
    "@minecraft/vanilla-data",
    "@minecraft/math",
)

# Registry order is the output order of every generated dependency list.
KNOWN_PACKAGES: tuple[str, ...] = (SERVER_PACKAGE, *OPTIONAL_PACKAGES, *DATA_PACKAGES)

Language = Literal["ts", "js"]


def is_data_only(name: str) -> bool:
    """Return True if `name` is published only into the package-registry numbering space."""
    return name in DATA_PACKAGES


def is_eligible(module_name: Any, pattern: re.Pattern[str] = VENDOR_PATTERN) -> bool:
    """Return True if a manifest entry's module_name may be re-resolved against the catalog."""
    return isinstance(module_name, str) and pattern.search(module_name) is not None


def _norm_str(value: Any, *, where: str) -> str:
    """Normalize a required string: strip and reject empty/whitespace."""
    if not isinstance(value, str):
        raise ValueError(f"{where}: expected str, got {type(value).__name__}")
    s = value.strip()
    if not s:
        raise ValueError(f"{where}: must be a non-empty string")
    return s


# ---------------------------------------------------------------------------
# Version ordering
# ---------------------------------------------------------------------------


def _identifier_key(part: str) -> tuple[int, int, str]:
    # Numeric identifiers sort before alphanumeric ones and compare as integers.
    if part.isdigit():
        return (0, int(part), "")
    return (1, 0, part)


def version_key(version: str) -> tuple[Any, ...]:
    """Sort key implementing semantic-version precedence.

    `1.2.0` > `1.2.0-rc.1` > `1.2.0-beta.2` > `1.2.0-beta.1.20.30-preview.20`.
    Build metadata (`+...`) is ignored. Non-numeric release segments fall back
    to lexical comparison so that any string has a total order.
    """
    core = version.split("+", 1)[0]
    release, sep, pre = core.partition("-")
    release_key = tuple(_identifier_key(p) for p in release.split("."))
    if not sep:
        return (release_key, 1, ())
    return (release_key, 0, tuple(_identifier_key(p) for p in pre.split(".")))


def latest_version(versions: Any) -> str:
    """Return the greatest version by `version_key` (raises ValueError if empty)."""
    items = list(versions)
    if not items:
        raise ValueError("latest_version: no versions to choose from")
    return max(items, key=version_key)


def version_array(version: str) -> list[int]:
    """Convert `MAJOR.MINOR.PATCH` into the integer array used by manifests."""
    v = _norm_str(version, where="version")
    parts = v.split(".")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"version: expected MAJOR.MINOR.PATCH of integers, got {version!r}")
    return [int(p) for p in parts]


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VersionCoordinate:
    """A dependency version in both numbering spaces.

    `api` is the content-manifest version; it is None for data-only packages.
    `npm` is the package-registry version.
    """

    npm: str
    api: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "npm", _norm_str(self.npm, where="VersionCoordinate.npm"))
        if self.api is not None:
            object.__setattr__(self, "api", _norm_str(self.api, where="VersionCoordinate.api"))

    @property
    def data_only(self) -> bool:
        return self.api is None


@dataclass(frozen=True)
class Dependency:
    """One known package and whether the project uses it."""

    name: str
    need: bool
    coordinate: VersionCoordinate | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _norm_str(self.name, where="Dependency.name"))
        if self.need and self.coordinate is None:
            raise ValueError(f"Dependency {self.name!r}: needed dependency requires a coordinate")
        if not self.need and self.coordinate is not None:
            raise ValueError(f"Dependency {self.name!r}: unneeded dependency must not carry a coordinate")
        if self.coordinate is not None and self.coordinate.data_only != is_data_only(self.name):
            kind = "data-only" if is_data_only(self.name) else "manifest-linked"
            raise ValueError(f"Dependency {self.name!r}: coordinate shape does not match {kind} package")


@dataclass(frozen=True)
class Selection:
    """A user decision for one dependency.

    A needed selection without explicit versions means "latest".
    """

    need: bool = True
    api: str | None = None
    npm: str | None = None

    @classmethod
    def latest(cls) -> "Selection":
        return cls(need=True)

    @classmethod
    def skip(cls) -> "Selection":
        return cls(need=False)


@dataclass(frozen=True)
class ProjectInfo:
    """Answers collected when creating a project."""

    name: str
    version: str = "1.0.0"
    description: str = ""
    resource_pack: bool = True
    allow_eval: bool = False
    language: Language = "ts"

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _norm_str(self.name, where="ProjectInfo.name"))
        # Validates format; keeps the original string.
        version_array(self.version)
        object.__setattr__(self, "version", self.version.strip())
        if self.language not in ("ts", "js"):
            raise ValueError(f"ProjectInfo.language: expected 'ts' or 'js', got {self.language!r}")

    @property
    def version_array(self) -> list[int]:
        return version_array(self.version)
