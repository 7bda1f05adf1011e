"""Dependency selection: user decisions -> resolved `Dependency` records.

`resolve_coordinate()` is the single place where a requested api/npm pair is
checked against the catalog. Project creation and switch both go through it.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from serein.core.catalog import VersionCatalog
from serein.core.errors import InvalidCoordinate, UnknownDependency
from serein.core.model import (
    KNOWN_PACKAGES,
    SERVER_PACKAGE,
    Dependency,
    Selection,
    VersionCoordinate,
    is_data_only,
    latest_version,
)


def resolve_coordinate(
    catalog: VersionCatalog,
    name: str,
    *,
    api: str | None = None,
    npm: str | None = None,
) -> VersionCoordinate:
    """Resolve a requested coordinate for `name` against `catalog`.

    Missing versions mean "latest": no versions -> latest pair; api only ->
    latest npm mapped from that api.

    Raises:
        UnknownDependency: `name` is not in the catalog.
        InvalidCoordinate: the requested versions are not jointly present.
    """
    if name not in catalog:
        raise UnknownDependency(name)

    if is_data_only(name):
        if api is not None:
            raise InvalidCoordinate(name, api=api, npm=npm, reason="data-only package has no api version")
        if npm is None:
            return catalog.latest(name)
        if npm not in catalog.npm_versions(name):
            raise InvalidCoordinate(name, npm=npm, reason="npm version not in catalog")
        return VersionCoordinate(npm=npm)

    if api is None:
        if npm is not None:
            raise InvalidCoordinate(name, npm=npm, reason="an api version is required for a manifest-linked package")
        return catalog.latest(name)

    npms = catalog.npm_versions(name, api)
    if not npms:
        raise InvalidCoordinate(name, api=api, npm=npm, reason="api version not in catalog")
    if npm is None:
        return VersionCoordinate(api=api, npm=latest_version(npms))
    if not catalog.has_pair(name, api, npm):
        raise InvalidCoordinate(name, api=api, npm=npm, reason=f"npm version not published for api {api}")
    return VersionCoordinate(api=api, npm=npm)


def select_dependencies(
    catalog: VersionCatalog,
    selections: Mapping[str, Selection] | None = None,
    *,
    packages: Iterable[str] = KNOWN_PACKAGES,
) -> dict[str, Dependency]:
    """Turn per-package decisions into an ordered mapping of `Dependency` records.

    Packages without a selection are not needed, except the server package,
    which is always needed and resolves to the latest coordinate unless an
    explicit one was chosen. Output order follows `packages`.
    """
    selections = dict(selections or {})
    names = list(packages)

    unknown = sorted(set(selections) - set(names))
    if unknown:
        raise ValueError(f"select_dependencies: selections for unknown packages: {unknown!r}")

    out: dict[str, Dependency] = {}
    for name in names:
        sel = selections.get(name)
        if name == SERVER_PACKAGE:
            if sel is not None and not sel.need:
                raise ValueError(f"{SERVER_PACKAGE} is mandatory and cannot be deselected")
            sel = sel or Selection.latest()
        if sel is None or not sel.need:
            out[name] = Dependency(name=name, need=False)
            continue
        coord = resolve_coordinate(catalog, name, api=sel.api, npm=sel.npm)
        out[name] = Dependency(name=name, need=True, coordinate=coord)
    return out


def default_dependencies(catalog: VersionCatalog, *, packages: Iterable[str] = KNOWN_PACKAGES) -> dict[str, Dependency]:
    """No-questions mode: only the server package, at its latest coordinate."""
    return select_dependencies(catalog, {}, packages=packages)


__all__ = ["resolve_coordinate", "select_dependencies", "default_dependencies"]
