"""serein — Minecraft: Bedrock Edition script project manager.

Scaffolds projects and keeps the behavior pack manifest and package.json
dependency lists consistent with the remote version catalog.
"""

from __future__ import annotations

__version__ = "1.2.1"

from serein.core import ProjectInfo, Selection, VersionCatalog  # noqa: E402

__all__ = [
    "__version__",
    "ProjectInfo",
    "Selection",
    "VersionCatalog",
]
