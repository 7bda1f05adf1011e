"""Immutable version catalog.

Two documents are combined:
  - manifest-linked packages: {name: {api_version: [npm_version, ...]}}
  - data-only packages:       {name: [npm_version, ...]}

Lookups are by exact dependency name. A name missing from the catalog is an
error for the caller (`UnknownDependency`), never a silent skip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from serein.core.errors import UnknownDependency
from serein.core.model import VersionCoordinate, is_data_only, latest_version


def _str_tuple(value: Any, *, where: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected array of version strings, got {type(value).__name__}")
    out: list[str] = []
    for i, v in enumerate(value):
        if not isinstance(v, str) or not v.strip():
            raise ValueError(f"{where}[{i}]: expected non-empty string")
        if v.strip() not in out:
            out.append(v.strip())
    return tuple(out)


def _freeze_linked(obj: Any) -> Mapping[str, Mapping[str, tuple[str, ...]]]:
    if not isinstance(obj, dict):
        raise ValueError(f"linked catalog: expected JSON object, got {type(obj).__name__}")
    out: dict[str, Mapping[str, tuple[str, ...]]] = {}
    for name, by_api in obj.items():
        if not isinstance(by_api, dict):
            raise ValueError(f"linked catalog.{name}: expected object mapping api version -> npm versions")
        out[name] = MappingProxyType(
            {str(api): _str_tuple(npms, where=f"linked catalog.{name}.{api}") for api, npms in by_api.items()}
        )
    return MappingProxyType(out)


def _freeze_data(obj: Any) -> Mapping[str, tuple[str, ...]]:
    if not isinstance(obj, dict):
        raise ValueError(f"data catalog: expected JSON object, got {type(obj).__name__}")
    return MappingProxyType({name: _str_tuple(npms, where=f"data catalog.{name}") for name, npms in obj.items()})


@dataclass(frozen=True)
class VersionCatalog:
    """Read-only mapping from dependency name to available version coordinates."""

    linked: Mapping[str, Mapping[str, tuple[str, ...]]] = field(default_factory=dict)
    data: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.linked, MappingProxyType):
            object.__setattr__(self, "linked", _freeze_linked(_thaw_linked(self.linked)))
        if not isinstance(self.data, MappingProxyType):
            object.__setattr__(self, "data", _freeze_data({k: list(v) for k, v in self.data.items()}))

    @classmethod
    def from_documents(cls, linked: Any, data: Any | None = None) -> "VersionCatalog":
        """Build a catalog from decoded JSON documents, validating their shapes."""
        return cls(linked=_freeze_linked(linked), data=_freeze_data({} if data is None else data))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        if is_data_only(name):
            return name in self.data
        return name in self.linked

    def api_versions(self, name: str) -> tuple[str, ...]:
        """Api versions for a manifest-linked package, in catalog order."""
        if is_data_only(name) or name not in self.linked:
            raise UnknownDependency(name)
        return tuple(self.linked[name].keys())

    def npm_versions(self, name: str, api: str | None = None) -> tuple[str, ...]:
        """Npm versions mapped from `api` (linked) or all npm versions (data-only)."""
        if is_data_only(name):
            if name not in self.data:
                raise UnknownDependency(name)
            return self.data[name]
        if name not in self.linked:
            raise UnknownDependency(name)
        if api is None:
            raise ValueError(f"npm_versions: {name!r} is manifest-linked; an api version is required")
        return self.linked[name].get(api, ())

    def has_pair(self, name: str, api: str, npm: str) -> bool:
        by_api = self.linked.get(name)
        return by_api is not None and npm in by_api.get(api, ())

    def latest(self, name: str) -> VersionCoordinate:
        """Return the greatest available coordinate for `name`.

        Linked: greatest api version, then greatest npm version mapped from it.
        Data-only: greatest npm version.
        """
        if is_data_only(name):
            npms = self.npm_versions(name)
            if not npms:
                raise UnknownDependency(name)
            return VersionCoordinate(npm=latest_version(npms))

        by_api = self.linked.get(name)
        if not by_api:
            raise UnknownDependency(name)
        # An api key with no npm builds cannot be selected.
        candidates = [api for api, npms in by_api.items() if npms]
        if not candidates:
            raise UnknownDependency(name)
        api = latest_version(candidates)
        return VersionCoordinate(api=api, npm=latest_version(by_api[api]))


def _thaw_linked(linked: Mapping[str, Mapping[str, Any]]) -> dict[str, dict[str, list[str]]]:
    return {name: {api: list(npms) for api, npms in by_api.items()} for name, by_api in linked.items()}


__all__ = ["VersionCatalog"]
