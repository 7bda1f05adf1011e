"""External commands run against a generated project.

- dependency install (`<package manager> install`)
- install cache invalidation before a reinstall on switch
- gulp tasks (build / deploy / pack / watch)
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from serein.config import PackageManager

logger = logging.getLogger(__name__)

GULP_TASKS: dict[str, tuple[str, ...]] = {
    "build": ("gulp", "build"),
    "deploy": ("gulp",),
    "pack": ("gulp", "bundle"),
    "watch": ("gulp", "watch"),
}


def run_command(argv: Sequence[str], *, cwd: Path) -> None:
    """Run `argv` in `cwd`; raises CalledProcessError on a non-zero exit."""
    logger.info("running %s in %s", " ".join(argv), cwd)
    subprocess.run(list(argv), cwd=str(cwd), check=True)


def run_install(root: Path, package_manager: PackageManager) -> None:
    run_command([package_manager.value, "install"], cwd=Path(root))


def run_task(root: Path, task: str) -> None:
    if task not in GULP_TASKS:
        raise ValueError(f"unknown task {task!r}; expected one of {sorted(GULP_TASKS)}")
    run_command(GULP_TASKS[task], cwd=Path(root))


def invalidate_install_cache(root: Path, package_manager: PackageManager) -> list[Path]:
    """Delete `node_modules/` and the package manager's lock file.

    Destructive. Must only run after the new descriptors are written; missing
    paths are ignored. Returns the paths that were removed.
    """
    root = Path(root)
    removed: list[Path] = []

    modules = root / "node_modules"
    if modules.is_dir():
        shutil.rmtree(modules)
        removed.append(modules)

    lock = root / package_manager.lock_file
    if lock.exists():
        lock.unlink()
        removed.append(lock)

    for p in removed:
        logger.info("removed %s", p)
    return removed


__all__ = ["GULP_TASKS", "invalidate_install_cache", "run_command", "run_install", "run_task"]
