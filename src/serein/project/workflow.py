"""Init and switch pipelines.

Both are strictly sequential: fetch -> resolve -> assemble -> write -> install.
Nothing is written to disk until resolution has completed, so an error or an
interrupt at any earlier step leaves the project untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from serein.config import Settings
from serein.core.assemble import AssembledDependencies, assemble_dependencies
from serein.core.catalog import VersionCatalog
from serein.core.model import Dependency, ProjectInfo, Selection
from serein.core.select import default_dependencies, select_dependencies
from serein.core.switch import Chooser, SwitchReport, switch_dependencies
from serein.io.remote import fetch_build_template, load_catalog

from .install import invalidate_install_cache, run_install
from .io import ProjectPlan, load_project, plan_project, save_descriptors, write_project

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    dependencies: dict[str, Dependency]
    assembled: AssembledDependencies
    plan: ProjectPlan
    written: list[Path]


def init_project(
    root: Path,
    settings: Settings,
    info: ProjectInfo,
    *,
    selections: Mapping[str, Selection] | None = None,
    catalog: VersionCatalog | None = None,
    build_template: bytes | None = None,
) -> InitResult:
    """Create a new project under `root`.

    `selections=None` is the no-questions mode (server package at its latest
    coordinate, nothing else). Catalog and template are fetched from the
    mirror when not supplied.
    """
    root = Path(root)
    if catalog is None:
        catalog = load_catalog(settings)
    if build_template is None:
        build_template = fetch_build_template(settings)

    if selections is None:
        deps = default_dependencies(catalog)
    else:
        deps = select_dependencies(catalog, selections)

    assembled = assemble_dependencies(
        deps,
        project_version=info.version_array,
        include_resource_pack=info.resource_pack,
    )
    plan = plan_project(info, assembled, build_template)

    written = write_project(root, plan)
    if settings.install:
        run_install(root, settings.package_manager)
    return InitResult(dependencies=deps, assembled=assembled, plan=plan, written=written)


def switch_project(
    root: Path,
    settings: Settings,
    *,
    choose: Chooser | None = None,
    catalog: VersionCatalog | None = None,
) -> SwitchReport:
    """Re-resolve the dependencies of the project under `root`.

    Order: load descriptors, fetch catalog, resolve, rewrite descriptors,
    then invalidate the install cache and reinstall. A failure while
    cleaning the cache leaves stale files next to already-correct descriptors.
    """
    root = Path(root)
    artifacts = load_project(root)
    if catalog is None:
        catalog = load_catalog(settings)

    report = switch_dependencies(artifacts.manifest, artifacts.package, catalog, choose)
    if not report.resolved:
        logger.info("no dependency switched; leaving %s untouched", root)
        return report

    save_descriptors(artifacts)

    try:
        invalidate_install_cache(root, settings.package_manager)
    except OSError as e:
        logger.warning("could not clear install cache under %s: %s", root, e)

    if settings.install:
        run_install(root, settings.package_manager)
    return report


__all__ = ["InitResult", "init_project", "switch_project"]
