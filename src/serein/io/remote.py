"""Fetch the version catalog and the build-script template from the mirror.

Documents are fetched fresh on every invocation and never written to disk.
Any failure (network, HTTP status, undecodable or malformed JSON) is reported
as `CatalogUnavailable` so callers abort before writing anything.
"""

from __future__ import annotations

import json
import logging
import ssl
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import urlparse

from serein import __version__
from serein.config import Settings
from serein.core.catalog import VersionCatalog
from serein.core.errors import CatalogUnavailable

logger = logging.getLogger(__name__)

LINKED_CATALOG = "manifest_versions.json"
DATA_CATALOG = "data_versions.json"
BUILD_TEMPLATE = "gulpfile.js"

_SUPPORTED_SCHEMES = frozenset({"https", "http", "file"})


def fetch_bytes(url: str, *, timeout: float) -> bytes:
    """Return the body at `url` (https/http/file only)."""
    parsed = urlparse(url)
    if parsed.scheme.lower() not in _SUPPORTED_SCHEMES:
        raise CatalogUnavailable(url, f"unsupported scheme {parsed.scheme!r}")

    request = urllib.request.Request(url, headers={"User-Agent": f"serein/{__version__}"})
    opener = urllib.request.build_opener(urllib.request.HTTPSHandler(context=ssl.create_default_context()))
    logger.debug("GET %s", url)
    try:
        with opener.open(request, timeout=timeout) as response:
            return response.read()
    except (urllib.error.URLError, OSError, ValueError) as e:
        raise CatalogUnavailable(url, str(getattr(e, "reason", e))) from e


def fetch_json(url: str, *, timeout: float) -> Any:
    body = fetch_bytes(url, timeout=timeout)
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogUnavailable(url, f"invalid JSON: {e}") from e


def load_catalog(settings: Settings) -> VersionCatalog:
    """Fetch both catalog documents and combine them."""
    linked_url = settings.url(LINKED_CATALOG)
    data_url = settings.url(DATA_CATALOG)
    linked = fetch_json(linked_url, timeout=settings.timeout)
    data = fetch_json(data_url, timeout=settings.timeout)
    try:
        catalog = VersionCatalog.from_documents(linked, data)
    except ValueError as e:
        raise CatalogUnavailable(settings.mirror_url, f"malformed catalog: {e}") from e
    logger.debug("catalog: %d linked, %d data-only packages", len(catalog.linked), len(catalog.data))
    return catalog


def fetch_build_template(settings: Settings) -> bytes:
    """Fetch the build script template; returned bytes are written verbatim."""
    return fetch_bytes(settings.url(BUILD_TEMPLATE), timeout=settings.timeout)


__all__ = [
    "BUILD_TEMPLATE",
    "DATA_CATALOG",
    "LINKED_CATALOG",
    "fetch_build_template",
    "fetch_bytes",
    "fetch_json",
    "load_catalog",
]
