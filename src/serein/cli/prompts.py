"""Interactive questions for `serein init` / `serein switch`.

Prompts only offer combinations present in the catalog; the core still
validates whatever comes back.
"""

from __future__ import annotations

from pathlib import Path

import click
import typer

from serein.core.catalog import VersionCatalog
from serein.core.errors import UnknownDependency
from serein.core.model import (
    DATA_PACKAGES,
    OPTIONAL_PACKAGES,
    SERVER_PACKAGE,
    ProjectInfo,
    Selection,
    is_data_only,
    version_array,
    version_key,
)


def _newest_first(versions: tuple[str, ...] | list[str]) -> list[str]:
    return sorted(versions, key=version_key, reverse=True)


def _choose(message: str, choices: list[str]) -> str:
    return typer.prompt(message, type=click.Choice(choices), default=choices[0], show_choices=True)


def ask_version(catalog: VersionCatalog, name: str) -> Selection:
    """Ask for an explicit coordinate of `name`, newest versions first.

    Raises UnknownDependency before prompting when the catalog lists no
    selectable version for `name`.
    """
    label = typer.style(name, fg=typer.colors.MAGENTA)
    if is_data_only(name):
        npms = _newest_first(catalog.npm_versions(name))
        if not npms:
            raise UnknownDependency(name)
        npm = _choose(f"Select your {label} version in npm", npms)
        return Selection(need=True, npm=npm)

    apis = [a for a in _newest_first(catalog.api_versions(name)) if catalog.npm_versions(name, a)]
    if not apis:
        raise UnknownDependency(name)
    api = _choose(f"Select your {label} version in manifest", apis)
    npm = _choose(f"Select your {label} version in npm", _newest_first(catalog.npm_versions(name, api)))
    return Selection(need=True, api=api, npm=npm)


def _ask_project_version() -> str:
    while True:
        version = typer.prompt("version", default="1.0.0")
        try:
            version_array(version)
        except ValueError as e:
            typer.echo(str(e), err=True)
            continue
        return version


def ask_project_info(root: Path) -> ProjectInfo:
    default_name = Path(root).resolve().name
    typer.echo("This utility will walk you through creating a project.")
    typer.echo("Press ^C at any time to quit.")
    name = typer.prompt("project name", default=default_name)
    version = _ask_project_version()
    description = typer.prompt("description", default="", show_default=False)
    resource_pack = typer.confirm(f"Create {typer.style('resource_packs', fg=typer.colors.MAGENTA)}?", default=True)
    allow_eval = typer.confirm("Allow eval and new Function?", default=False)
    language = _choose("Language", ["ts", "js"])
    return ProjectInfo(
        name=name,
        version=version,
        description=description,
        resource_pack=resource_pack,
        allow_eval=allow_eval,
        language=language,  # type: ignore[arg-type]
    )


def ask_selections(catalog: VersionCatalog) -> dict[str, Selection]:
    """Ask which packages to use and at which versions."""
    selections: dict[str, Selection] = {SERVER_PACKAGE: ask_version(catalog, SERVER_PACKAGE)}
    for name in (*OPTIONAL_PACKAGES, *DATA_PACKAGES):
        if name not in catalog:
            continue
        try:
            catalog.latest(name)
        except UnknownDependency:
            continue
        if typer.confirm(f"Use {typer.style(name, fg=typer.colors.MAGENTA)}?", default=False):
            selections[name] = ask_version(catalog, name)
    return selections


def ask_switch(name: str, catalog: VersionCatalog) -> Selection | None:
    """Switch chooser: None skips the entry."""
    label = typer.style(name, fg=typer.colors.MAGENTA)
    if not typer.confirm(f"Do you want to switch versions dependent on {label}?", default=False):
        return None
    return ask_version(catalog, name)


__all__ = ["ask_project_info", "ask_selections", "ask_switch", "ask_version"]
