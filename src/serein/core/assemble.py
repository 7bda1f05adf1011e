"""Build the two generated dependency lists from resolved dependencies.

- behavior manifest: ordered list of `{uuid, version}` / `{module_name, version}`
- package descriptor: `{name: npm_version}`

The resource-pack entry (if any) is listed first and references the resource
pack by a freshly generated uuid; that same uuid must become the resource
pack's own header uuid.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from serein.core.model import Dependency


@dataclass(frozen=True)
class AssembledDependencies:
    manifest_dependencies: list[dict[str, Any]]
    package_dependencies: dict[str, str]
    resource_pack_uuid: str | None = None


def _new_uuid() -> str:
    return str(uuid.uuid4())


def assemble_dependencies(
    dependencies: Mapping[str, Dependency],
    *,
    project_version: Sequence[int],
    include_resource_pack: bool,
    uuid_factory: Callable[[], str] = _new_uuid,
) -> AssembledDependencies:
    """Assemble manifest and package dependency lists (in `dependencies` order).

    Data-only packages go to the package descriptor only.
    """
    manifest_deps: list[dict[str, Any]] = []
    package_deps: dict[str, str] = {}

    res_uuid: str | None = None
    if include_resource_pack:
        res_uuid = uuid_factory()
        manifest_deps.append({"uuid": res_uuid, "version": list(project_version)})

    for name, dep in dependencies.items():
        coord = dep.coordinate
        if not dep.need or coord is None:
            continue
        if not coord.data_only:
            manifest_deps.append({"module_name": name, "version": coord.api})
        package_deps[name] = coord.npm

    return AssembledDependencies(
        manifest_dependencies=manifest_deps,
        package_dependencies=package_deps,
        resource_pack_uuid=res_uuid,
    )


__all__ = ["AssembledDependencies", "assemble_dependencies"]
