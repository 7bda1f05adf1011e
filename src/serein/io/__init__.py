"""serein I/O helpers: local JSON artifacts and remote catalog fetch."""

from __future__ import annotations

from .artifacts import read_json_object, write_json
from .remote import fetch_build_template, load_catalog

__all__ = [
    "fetch_build_template",
    "load_catalog",
    "read_json_object",
    "write_json",
]
