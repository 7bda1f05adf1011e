"""Builders for the files generated at project creation.

Pure functions: they return dicts/strings and never touch the filesystem.
"""

from __future__ import annotations

import uuid
from typing import Any, Callable

from serein.core.assemble import AssembledDependencies
from serein.core.model import ProjectInfo

MIN_ENGINE_VERSION = [1, 19, 20]

BUILD_TOOLING: dict[str, str] = {
    "del": "7.0.0",
    "gulp": "^4.0.2",
    "gulp-cli": "^2.3.0",
    "gulp-esbuild": "^0.11.0",
    "gulp-typescript": "^6.0.0-alpha.1",
    "gulp-zip": "^5.1.0",
}

MCATTRIBUTES = "diagnostic.disable.minecraft.manifest.module.missing=true"

DEFAULT_CODE = "\n".join(
    [
        "/*",
        " _____________________ ",
        "< do things u want... >",
        "--------------------- ",
        "      \\   ^__^",
        "       \\  (oo)_______",
        "          (__)\\       )\\/\\",
        "              ||----w |",
        "              ||     ||",
        "*/",
    ]
)

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "es2020",
        "moduleResolution": "node",
        "module": "es2020",
        "noLib": False,
        "emitDecoratorMetadata": True,
        "experimentalDecorators": True,
        "pretty": True,
        "allowUnreachableCode": True,
        "allowUnusedLabels": True,
        "noImplicitAny": True,
        "rootDir": ".",
        "listFiles": False,
        "noEmitHelpers": True,
    },
    "include": ["scripts/**/*"],
    "compileOnSave": False,
}


def new_uuid() -> str:
    return str(uuid.uuid4())


def build_behavior_manifest(
    info: ProjectInfo,
    assembled: AssembledDependencies,
    *,
    uuid_factory: Callable[[], str] = new_uuid,
) -> dict[str, Any]:
    version = info.version_array
    return {
        "format_version": 2,
        "header": {
            "name": info.name,
            "description": info.description,
            "uuid": uuid_factory(),
            "version": version,
            "min_engine_version": list(MIN_ENGINE_VERSION),
        },
        "modules": [
            {
                "description": "Script resources",
                "language": "javascript",
                "type": "script",
                "uuid": uuid_factory(),
                "version": list(version),
                "entry": "scripts/main.js",
            }
        ],
        "dependencies": [dict(d) for d in assembled.manifest_dependencies],
        "capabilities": ["script_eval"] if info.allow_eval else [],
    }


def build_resource_manifest(
    info: ProjectInfo,
    resource_pack_uuid: str,
    *,
    uuid_factory: Callable[[], str] = new_uuid,
) -> dict[str, Any]:
    """Resource pack manifest; its header uuid is the one the behavior pack depends on."""
    version = info.version_array
    return {
        "format_version": 2,
        "header": {
            "description": info.description,
            "name": info.name,
            "uuid": resource_pack_uuid,
            "version": version,
            "min_engine_version": list(MIN_ENGINE_VERSION),
        },
        "modules": [
            {
                "description": info.description,
                "type": "resources",
                "uuid": uuid_factory(),
                "version": list(version),
            }
        ],
    }


def build_package_descriptor(info: ProjectInfo, assembled: AssembledDependencies) -> dict[str, Any]:
    return {
        "name": info.name,
        "version": info.version,
        "type": "module",
        "description": info.description,
        "dependencies": {**assembled.package_dependencies, **BUILD_TOOLING},
    }


def build_project_config(info: ProjectInfo) -> dict[str, Any]:
    """Local `.serein.json` settings (written once, never read back by resolution)."""
    return {
        "type": info.language,
        "res": info.resource_pack,
        "name": info.name,
        "mc_preview": False,
        "bds": False,
        "bds_path": "~/bds/",
        "output": "build",
        "mc_dir": None,
    }


__all__ = [
    "BUILD_TOOLING",
    "DEFAULT_CODE",
    "MCATTRIBUTES",
    "MIN_ENGINE_VERSION",
    "TSCONFIG",
    "build_behavior_manifest",
    "build_package_descriptor",
    "build_project_config",
    "build_resource_manifest",
    "new_uuid",
]
