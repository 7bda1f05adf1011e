"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import serein` to fail.

To keep the suite robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import itertools
import json
import sys
from pathlib import Path
from typing import Any, Callable

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def make_linked_doc() -> dict[str, Any]:
    """Manifest-linked catalog document (api -> npm builds), deliberately unsorted."""
    return {
        "@minecraft/server": {
            "1.2.0": ["1.2.0-beta.1.19.60-stable", "1.2.0-beta"],
            "1.10.0-beta": ["1.10.0-beta.1.20.70-preview.20"],
            "1.9.0": ["1.9.0", "1.9.0-rc.1.20.60-preview.26"],
        },
        "@minecraft/server-ui": {
            "1.1.0": ["1.1.0", "1.1.0-beta.1.20.50-stable"],
            "1.0.0": ["1.0.0"],
        },
        "@minecraft/server-net": {
            "1.0.0-beta": ["1.0.0-beta.1.20.60-stable"],
        },
    }


def make_data_doc() -> dict[str, Any]:
    return {
        "@minecraft/vanilla-data": ["1.20.60", "1.20.80", "1.20.70"],
    }


def write_json(path: Path, obj: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2) + "\n", encoding="utf-8")


GULPFILE = b"// gulpfile template\r\nexport default function () {}\n"


@pytest.fixture
def catalog():
    from serein.core.catalog import VersionCatalog

    return VersionCatalog.from_documents(make_linked_doc(), make_data_doc())


@pytest.fixture
def mirror(tmp_path: Path) -> str:
    """A file:// mirror serving both catalog documents and the build template."""
    root = tmp_path / "mirror"
    write_json(root / "manifest_versions.json", make_linked_doc())
    write_json(root / "data_versions.json", make_data_doc())
    (root / "gulpfile.js").write_bytes(GULPFILE)
    return root.resolve().as_uri()


@pytest.fixture
def uuid_factory() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"00000000-0000-4000-8000-{next(counter):012d}"
