"""Helpers shared by project commands: option parsing and error reporting."""

from __future__ import annotations

import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from serein.config import PackageManager, Settings, detect_package_manager
from serein.core.errors import SereinError


def project_root(path: str) -> Path:
    root = Path(path)
    if root.exists() and not root.is_dir():
        raise typer.BadParameter(f"{path} is not a directory", param_hint="--path")
    return root


def build_settings(
    root: Path,
    *,
    mirror: Optional[str],
    package_manager: Optional[str],
    install: bool,
) -> Settings:
    """Settings from environment + command line; package manager detected from lock files if not given."""
    if package_manager is None:
        pm = detect_package_manager(root)
    else:
        try:
            pm = PackageManager(package_manager)
        except ValueError as e:
            choices = ", ".join(p.value for p in PackageManager)
            raise typer.BadParameter(f"expected one of: {choices}", param_hint="--package-manager") from e
    try:
        return Settings.from_env(mirror_url=mirror, package_manager=pm, install=install)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn serein/subprocess failures into a message and a non-zero exit."""
    try:
        yield
    except SereinError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2) from e
    except subprocess.CalledProcessError as e:
        typer.echo(f"error: command {e.cmd!r} exited with {e.returncode}", err=True)
        raise typer.Exit(code=e.returncode or 1) from e
    except FileNotFoundError as e:
        # executable (npm/gulp) not installed
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=127) from e
