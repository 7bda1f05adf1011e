from __future__ import annotations

from pathlib import Path

import pytest

from conftest import GULPFILE
from serein.config import Settings
from serein.core.errors import CatalogUnavailable
from serein.core.model import VersionCoordinate
from serein.io.remote import fetch_build_template, fetch_json, load_catalog


def test_load_catalog_from_file_mirror(mirror: str) -> None:
    catalog = load_catalog(Settings(mirror_url=mirror))
    assert catalog.latest("@minecraft/server-ui") == VersionCoordinate(api="1.1.0", npm="1.1.0")
    assert catalog.latest("@minecraft/vanilla-data") == VersionCoordinate(npm="1.20.80")


def test_fetch_build_template_is_verbatim(mirror: str) -> None:
    assert fetch_build_template(Settings(mirror_url=mirror)) == GULPFILE


def test_missing_document_is_catalog_unavailable(tmp_path: Path) -> None:
    settings = Settings(mirror_url=(tmp_path / "nowhere").resolve().as_uri())
    with pytest.raises(CatalogUnavailable) as e:
        load_catalog(settings)
    assert e.value.url.endswith("manifest_versions.json")


def test_invalid_json_is_catalog_unavailable(tmp_path: Path) -> None:
    p = tmp_path / "bad.json"
    p.write_text("<html>", encoding="utf-8")
    with pytest.raises(CatalogUnavailable, match="invalid JSON"):
        fetch_json(p.resolve().as_uri(), timeout=1.0)


def test_malformed_catalog_is_catalog_unavailable(tmp_path: Path) -> None:
    (tmp_path / "manifest_versions.json").write_text('{"@minecraft/server": ["1.0.0"]}', encoding="utf-8")
    (tmp_path / "data_versions.json").write_text("{}", encoding="utf-8")
    with pytest.raises(CatalogUnavailable, match="malformed catalog"):
        load_catalog(Settings(mirror_url=tmp_path.resolve().as_uri()))


def test_unsupported_scheme_rejected() -> None:
    with pytest.raises(CatalogUnavailable, match="unsupported scheme"):
        fetch_json("ftp://example.invalid/manifest_versions.json", timeout=1.0)
