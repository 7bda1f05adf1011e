"""Error taxonomy for dependency resolution and artifact handling.

Recovery policy:
- UnknownDependency is absorbed per entry during switch (entry skipped).
- Everything else propagates and aborts before any file is written.
"""

from __future__ import annotations

from pathlib import Path


class SereinError(Exception):
    """Base class for all serein errors."""


class InvalidCoordinate(SereinError, ValueError):
    """Raised when a chosen api/npm pair is not jointly present in the catalog."""

    def __init__(self, name: str, *, api: str | None = None, npm: str | None = None, reason: str = "") -> None:
        self.name = name
        self.api = api
        self.npm = npm

        parts = [f"api={api!r}" if api is not None else None, f"npm={npm!r}" if npm is not None else None]
        coord = ", ".join(p for p in parts if p) or "no versions"
        msg = f"invalid version coordinate for {name!r} ({coord})"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnknownDependency(SereinError, LookupError):
    """Raised when a dependency name is absent from the version catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"dependency {name!r} is not present in the version catalog")


class CatalogUnavailable(SereinError, RuntimeError):
    """Raised when a version catalog (or the build template) cannot be fetched or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"cannot fetch {url}: {reason}")


class CorruptArtifact(SereinError, ValueError):
    """Raised when an existing manifest or package descriptor is unreadable."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


__all__ = [
    "SereinError",
    "InvalidCoordinate",
    "UnknownDependency",
    "CatalogUnavailable",
    "CorruptArtifact",
]
