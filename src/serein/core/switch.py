"""Selective re-resolution of an existing project's dependencies.

Each manifest dependency entry moves through:

    UNEXAMINED -> ELIGIBLE -> SKIPPED | RESOLVED

Only entries whose `module_name` matches the vendor pattern become eligible;
everything else (including the resource-pack uuid entry) is never touched.
Entries are never deleted or reordered, and package descriptor keys that do
not belong to a resolved entry are preserved.

All choices are resolved first and applied afterwards, so an
`InvalidCoordinate` leaves both artifacts exactly as they were.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from serein.core.catalog import VersionCatalog
from serein.core.errors import UnknownDependency
from serein.core.model import VENDOR_PATTERN, Selection, VersionCoordinate, is_eligible
from serein.core.select import resolve_coordinate

logger = logging.getLogger(__name__)

# Called once per eligible entry; returns None to skip it, or a Selection
# (without versions for "latest").
Chooser = Callable[[str, VersionCatalog], Optional[Selection]]


class EntryState(str, Enum):
    UNEXAMINED = "unexamined"
    ELIGIBLE = "eligible"
    SKIPPED = "skipped"
    RESOLVED = "resolved"


@dataclass
class EntryOutcome:
    index: int
    module_name: str | None
    state: EntryState = EntryState.UNEXAMINED
    previous: Any = None
    coordinate: VersionCoordinate | None = None
    error: UnknownDependency | None = None


@dataclass
class SwitchReport:
    outcomes: list[EntryOutcome]

    @property
    def resolved(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.state is EntryState.RESOLVED]

    @property
    def skipped(self) -> list[EntryOutcome]:
        return [o for o in self.outcomes if o.state is EntryState.SKIPPED]

    @property
    def failures(self) -> list[UnknownDependency]:
        return [o.error for o in self.outcomes if o.error is not None]


def _manifest_entries(manifest: dict[str, Any]) -> list[Any]:
    deps = manifest.get("dependencies", [])
    if not isinstance(deps, list):
        raise ValueError("manifest: dependencies must be an array")
    return deps


def switch_dependencies(
    manifest: dict[str, Any],
    package: dict[str, Any],
    catalog: VersionCatalog,
    choose: Chooser | None = None,
    *,
    pattern: re.Pattern[str] = VENDOR_PATTERN,
    fail_fast: bool = False,
) -> SwitchReport:
    """Re-resolve eligible manifest entries in place.

    Args:
        manifest: loaded behavior pack manifest (mutated in place).
        package: loaded package descriptor (mutated in place).
        catalog: freshly fetched version catalog.
        choose: per-entry decision callback. None means default mode: every
            eligible entry is updated to its latest coordinate.
        pattern: eligibility pattern applied to `module_name`.
        fail_fast: re-raise the first UnknownDependency instead of skipping it.

    Returns:
        SwitchReport with one outcome per manifest entry, in manifest order.

    Raises:
        InvalidCoordinate: a chosen api/npm pair is not in the catalog.
        UnknownDependency: only with fail_fast=True.
    """
    entries = _manifest_entries(manifest)
    pkg_deps = package.get("dependencies")
    if pkg_deps is not None and not isinstance(pkg_deps, dict):
        raise ValueError("package: dependencies must be an object")

    outcomes: list[EntryOutcome] = []
    for i, entry in enumerate(entries):
        name = entry.get("module_name") if isinstance(entry, dict) else None
        outcome = EntryOutcome(index=i, module_name=name if isinstance(name, str) else None)
        outcomes.append(outcome)

        if not is_eligible(name, pattern):
            continue
        outcome.state = EntryState.ELIGIBLE
        outcome.previous = entry.get("version")

        try:
            if name not in catalog:
                raise UnknownDependency(name)
            sel = Selection.latest() if choose is None else choose(name, catalog)
            if sel is None or not sel.need:
                outcome.state = EntryState.SKIPPED
                continue
            # A name listed with no usable versions fails here, not above.
            outcome.coordinate = resolve_coordinate(catalog, name, api=sel.api, npm=sel.npm)
        except UnknownDependency as err:
            if fail_fast:
                raise
            logger.warning("skipping %s: %s", name, err)
            outcome.error = err
            outcome.state = EntryState.SKIPPED

    # Apply only after every choice resolved cleanly.
    for outcome in outcomes:
        if outcome.coordinate is None:
            continue
        if outcome.coordinate.api is not None:
            entries[outcome.index]["version"] = outcome.coordinate.api
        if pkg_deps is None:
            pkg_deps = package.setdefault("dependencies", {})
        pkg_deps[outcome.module_name] = outcome.coordinate.npm
        outcome.state = EntryState.RESOLVED
        logger.info(
            "switched %s: %s -> %s (npm %s)",
            outcome.module_name,
            outcome.previous,
            outcome.coordinate.api,
            outcome.coordinate.npm,
        )

    return SwitchReport(outcomes=outcomes)


__all__ = ["Chooser", "EntryState", "EntryOutcome", "SwitchReport", "switch_dependencies"]
