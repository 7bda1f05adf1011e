"""`serein build|deploy|pack|watch` commands: thin wrappers over gulp tasks."""

from __future__ import annotations

import typer

from serein.cli.common import project_root, reported_errors
from serein.project.install import run_task

_COMMANDS = (
    ("build", "b", "Build scripts for production environment."),
    ("deploy", "d", "Deploy project to game."),
    ("pack", "p", "Build the .mcpack for the current project."),
    ("watch", "w", "Listen for file changes and deploy project automatically."),
)


def _make_command(task: str, help_text: str):
    def command(path: str = typer.Option(".", "--path", help="Project directory.")) -> None:
        root = project_root(path)
        with reported_errors():
            run_task(root, task)

    command.__doc__ = help_text
    command.__name__ = task
    return command


def register(app: typer.Typer) -> None:
    for task, alias, help_text in _COMMANDS:
        cmd = _make_command(task, help_text)
        app.command(task)(cmd)
        app.command(alias, hidden=True)(cmd)
