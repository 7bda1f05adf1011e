"""`serein switch` command.

Re-resolves `@minecraft/*` dependencies of an existing project, rewrites
`behavior_packs/manifest.json` and `package.json`, clears the install cache
and reinstalls.

Exit codes:
- 0: done
- 1: some entries were skipped because the catalog does not know them
- 2: fatal error (corrupt descriptors, catalog unavailable, invalid choice)
"""

from __future__ import annotations

from typing import Optional

import typer

from serein.cli.common import build_settings, project_root, reported_errors
from serein.cli.prompts import ask_switch
from serein.project.workflow import switch_project


def register(app: typer.Typer) -> None:
    def switch(
        yes: bool = typer.Option(False, "--yes", "-y", help="Switch to the latest versions directly."),
        path: str = typer.Option(".", "--path", help="Project directory."),
        mirror: Optional[str] = typer.Option(None, "--mirror", help="Base URL of the version catalog mirror."),
        package_manager: Optional[str] = typer.Option(
            None, "--package-manager", help="npm|yarn|pnpm (default: detected from lock files)."
        ),
        install: bool = typer.Option(True, "--install/--no-install", help="Run the package install afterwards."),
    ) -> None:
        """Switch requirement versions."""
        root = project_root(path)
        settings = build_settings(root, mirror=mirror, package_manager=package_manager, install=install)

        with reported_errors():
            report = switch_project(root, settings, choose=None if yes else ask_switch)

        for outcome in report.resolved:
            coord = outcome.coordinate
            if coord is None:
                continue
            version = typer.style(str(coord.api or coord.npm), fg=typer.colors.GREEN)
            typer.echo(f"Dependency {outcome.module_name} update to {version}")

        for err in report.failures:
            typer.echo(f"warning: {err}", err=True)
        if report.failures:
            raise typer.Exit(code=1)

    app.command("switch")(switch)
    app.command("s", hidden=True)(switch)
