"""Runtime settings passed explicitly through every pipeline.

Environment:
- SEREIN_MIRROR: base URL serving the catalog documents and build template
- SEREIN_TIMEOUT: network timeout in seconds
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Mapping

DEFAULT_MIRROR = "https://serein.shannon.science"
DEFAULT_TIMEOUT = 30.0


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def lock_file(self) -> str:
        return _LOCK_FILES[self]


_LOCK_FILES = {
    PackageManager.NPM: "package-lock.json",
    PackageManager.YARN: "yarn.lock",
    PackageManager.PNPM: "pnpm-lock.yaml",
}


def detect_package_manager(root: Path) -> PackageManager:
    """Pick the package manager whose lock file exists under `root` (npm otherwise)."""
    root = Path(root)
    for pm in (PackageManager.PNPM, PackageManager.YARN):
        if (root / pm.lock_file).exists():
            return pm
    return PackageManager.NPM


@dataclass(frozen=True)
class Settings:
    mirror_url: str = DEFAULT_MIRROR
    package_manager: PackageManager = PackageManager.NPM
    timeout: float = DEFAULT_TIMEOUT
    install: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "mirror_url", self.mirror_url.rstrip("/"))
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout!r}")

    def url(self, name: str) -> str:
        return f"{self.mirror_url}/{name}"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides: object) -> "Settings":
        """Build settings from environment variables; non-None overrides win."""
        env = os.environ if env is None else env
        base = cls(
            mirror_url=env.get("SEREIN_MIRROR", DEFAULT_MIRROR),
            timeout=float(env.get("SEREIN_TIMEOUT", DEFAULT_TIMEOUT)),
        )
        return replace(base, **{k: v for k, v in overrides.items() if v is not None})
