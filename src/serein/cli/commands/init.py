"""`serein init` command.

Creates a project in `--path` (default: current directory):
- fetches the version catalog and build template
- asks for project info and dependencies (or uses defaults with `--yes`)
- writes manifests, package.json and scaffolding, then runs the install
"""

from __future__ import annotations

from typing import Optional

import typer

from serein.cli.common import build_settings, project_root, reported_errors
from serein.cli.prompts import ask_project_info, ask_selections
from serein.core.model import ProjectInfo
from serein.io.remote import fetch_build_template, load_catalog
from serein.project.workflow import init_project


def register(app: typer.Typer) -> None:
    def init(
        yes: bool = typer.Option(False, "--yes", "-y", help="Use default config without asking any questions."),
        path: str = typer.Option(".", "--path", help="Project directory."),
        mirror: Optional[str] = typer.Option(None, "--mirror", help="Base URL of the version catalog mirror."),
        package_manager: Optional[str] = typer.Option(
            None, "--package-manager", help="npm|yarn|pnpm (default: detected from lock files)."
        ),
        install: bool = typer.Option(True, "--install/--no-install", help="Run the package install afterwards."),
    ) -> None:
        """Init a project."""
        root = project_root(path)
        settings = build_settings(root, mirror=mirror, package_manager=package_manager, install=install)

        with reported_errors():
            typer.echo("Getting the latest dependency versions...")
            catalog = load_catalog(settings)
            template = fetch_build_template(settings)

            if yes:
                info = ProjectInfo(name=root.resolve().name)
                selections = None
            else:
                info = ask_project_info(root)
                selections = ask_selections(catalog)

            typer.echo("Creating project...")
            result = init_project(
                root,
                settings,
                info,
                selections=selections,
                catalog=catalog,
                build_template=template,
            )

        for name, dep in result.dependencies.items():
            if dep.need and dep.coordinate is not None:
                api = dep.coordinate.api or "-"
                typer.echo(f"  {name}  manifest {api}  npm {dep.coordinate.npm}")
        typer.echo(str(root))

    app.command("init")(init)
    app.command("i", hidden=True)(init)
