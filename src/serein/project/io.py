"""Project save/load.

A project root contains:
- .serein.json
- package.json
- behavior_packs/manifest.json
- behavior_packs/scripts/
- resource_packs/manifest.json   (only with a resource pack)
- scripts/main.ts | scripts/main.js (+ tsconfig.json for TypeScript)
- gulpfile.js                    (fetched template, byte-exact)
- .mcattributes

`plan_project()` computes every file in memory; `write_project()` persists a
finished plan. Nothing is written until the plan is complete.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from serein.core.assemble import AssembledDependencies
from serein.core.errors import CorruptArtifact
from serein.core.model import ProjectInfo
from serein.io.artifacts import read_json_object, write_bytes, write_json, write_text_exact

from .manifest import (
    DEFAULT_CODE,
    MCATTRIBUTES,
    TSCONFIG,
    build_behavior_manifest,
    build_package_descriptor,
    build_project_config,
    build_resource_manifest,
    new_uuid,
)

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(".serein.json")
PACKAGE_PATH = Path("package.json")
BEHAVIOR_MANIFEST_PATH = Path("behavior_packs") / "manifest.json"
RESOURCE_MANIFEST_PATH = Path("resource_packs") / "manifest.json"
BUILD_SCRIPT_PATH = Path("gulpfile.js")

_EMPTY_DIRS = (Path("behavior_packs") / "scripts", Path("scripts"))


@dataclass
class ProjectPlan:
    """Every file of a new project, keyed by path relative to the project root."""

    json_files: dict[Path, dict[str, Any]] = field(default_factory=dict)
    text_files: dict[Path, str] = field(default_factory=dict)
    binary_files: dict[Path, bytes] = field(default_factory=dict)
    directories: list[Path] = field(default_factory=list)

    @property
    def behavior_manifest(self) -> dict[str, Any]:
        return self.json_files[BEHAVIOR_MANIFEST_PATH]

    @property
    def resource_manifest(self) -> dict[str, Any] | None:
        return self.json_files.get(RESOURCE_MANIFEST_PATH)

    @property
    def package(self) -> dict[str, Any]:
        return self.json_files[PACKAGE_PATH]


@dataclass
class ProjectArtifacts:
    """Descriptors loaded from an existing project for switch."""

    root: Path
    manifest: dict[str, Any]
    package: dict[str, Any]


def plan_project(
    info: ProjectInfo,
    assembled: AssembledDependencies,
    build_template: bytes,
    *,
    uuid_factory: Callable[[], str] = new_uuid,
) -> ProjectPlan:
    plan = ProjectPlan(directories=list(_EMPTY_DIRS))

    plan.json_files[CONFIG_PATH] = build_project_config(info)
    plan.json_files[BEHAVIOR_MANIFEST_PATH] = build_behavior_manifest(info, assembled, uuid_factory=uuid_factory)

    if info.resource_pack:
        if assembled.resource_pack_uuid is None:
            raise ValueError("plan_project: resource pack requested but dependencies were assembled without one")
        plan.json_files[RESOURCE_MANIFEST_PATH] = build_resource_manifest(
            info, assembled.resource_pack_uuid, uuid_factory=uuid_factory
        )

    if info.language == "ts":
        plan.json_files[Path("tsconfig.json")] = TSCONFIG
        plan.text_files[Path("scripts") / "main.ts"] = DEFAULT_CODE
    else:
        plan.text_files[Path("scripts") / "main.js"] = DEFAULT_CODE

    plan.json_files[PACKAGE_PATH] = build_package_descriptor(info, assembled)
    plan.text_files[Path(".mcattributes")] = MCATTRIBUTES
    plan.binary_files[BUILD_SCRIPT_PATH] = bytes(build_template)
    return plan


def write_project(root: Path, plan: ProjectPlan) -> list[Path]:
    """Persist a complete plan under `root`; returns written file paths."""
    root = Path(root)
    for d in plan.directories:
        (root / d).mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for rel, obj in plan.json_files.items():
        write_json(root / rel, obj)
        written.append(root / rel)
    for rel, text in plan.text_files.items():
        write_text_exact(root / rel, text)
        written.append(root / rel)
    for rel, data in plan.binary_files.items():
        write_bytes(root / rel, data)
        written.append(root / rel)

    logger.info("wrote %d files under %s", len(written), root)
    return written


def load_project(root: Path) -> ProjectArtifacts:
    """Load the behavior manifest and package descriptor of an existing project.

    Raises:
        CorruptArtifact: a file is missing/unparsable or its dependency
            section has the wrong shape. No repair is attempted.
    """
    root = Path(root)
    manifest_path = root / BEHAVIOR_MANIFEST_PATH
    package_path = root / PACKAGE_PATH

    manifest = read_json_object(manifest_path)
    package = read_json_object(package_path)

    deps = manifest.get("dependencies", [])
    if not isinstance(deps, list):
        raise CorruptArtifact(manifest_path, "dependencies must be an array")
    for i, entry in enumerate(deps):
        if not isinstance(entry, dict):
            raise CorruptArtifact(manifest_path, f"dependencies[{i}] must be an object")

    pkg_deps = package.get("dependencies")
    if pkg_deps is not None and not isinstance(pkg_deps, dict):
        raise CorruptArtifact(package_path, "dependencies must be an object")

    return ProjectArtifacts(root=root, manifest=manifest, package=package)


def save_descriptors(artifacts: ProjectArtifacts) -> list[Path]:
    """Rewrite the behavior manifest and package descriptor after switch."""
    paths = [artifacts.root / BEHAVIOR_MANIFEST_PATH, artifacts.root / PACKAGE_PATH]
    write_json(paths[0], artifacts.manifest)
    write_json(paths[1], artifacts.package)
    return paths


__all__ = [
    "BEHAVIOR_MANIFEST_PATH",
    "BUILD_SCRIPT_PATH",
    "CONFIG_PATH",
    "PACKAGE_PATH",
    "RESOURCE_MANIFEST_PATH",
    "ProjectArtifacts",
    "ProjectPlan",
    "load_project",
    "plan_project",
    "save_descriptors",
    "write_project",
]
