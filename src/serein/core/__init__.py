"""serein core: dependency model, catalog and resolution logic.

This package is intentionally standalone and must not import io/project/cli
to avoid circular dependencies.
"""

from __future__ import annotations

from .assemble import AssembledDependencies, assemble_dependencies
from .catalog import VersionCatalog
from .errors import CatalogUnavailable, CorruptArtifact, InvalidCoordinate, SereinError, UnknownDependency
from .model import (
    DATA_PACKAGES,
    KNOWN_PACKAGES,
    OPTIONAL_PACKAGES,
    SERVER_PACKAGE,
    VENDOR_PATTERN,
    Dependency,
    ProjectInfo,
    Selection,
    VersionCoordinate,
    is_data_only,
    is_eligible,
    latest_version,
    version_array,
    version_key,
)
from .select import default_dependencies, resolve_coordinate, select_dependencies
from .switch import EntryOutcome, EntryState, SwitchReport, switch_dependencies

__all__ = [
    "AssembledDependencies",
    "assemble_dependencies",
    "VersionCatalog",
    "SereinError",
    "InvalidCoordinate",
    "UnknownDependency",
    "CatalogUnavailable",
    "CorruptArtifact",
    "DATA_PACKAGES",
    "KNOWN_PACKAGES",
    "OPTIONAL_PACKAGES",
    "SERVER_PACKAGE",
    "VENDOR_PATTERN",
    "Dependency",
    "ProjectInfo",
    "Selection",
    "VersionCoordinate",
    "is_data_only",
    "is_eligible",
    "latest_version",
    "version_array",
    "version_key",
    "default_dependencies",
    "resolve_coordinate",
    "select_dependencies",
    "EntryOutcome",
    "EntryState",
    "SwitchReport",
    "switch_dependencies",
]
