from __future__ import annotations

import pytest
import typer

from serein.cli import prompts
from serein.core.catalog import VersionCatalog
from serein.core.errors import UnknownDependency
from serein.core.model import Selection


@pytest.fixture
def no_prompt(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("prompted for a version the catalog cannot provide")

    monkeypatch.setattr(typer, "prompt", fail)


@pytest.mark.parametrize(
    "linked, data, name",
    [
        ({"@minecraft/server-ui": {"1.0.0": []}}, {}, "@minecraft/server-ui"),
        ({"@minecraft/server-ui": {}}, {}, "@minecraft/server-ui"),
        ({}, {"@minecraft/vanilla-data": []}, "@minecraft/vanilla-data"),
    ],
)
def test_ask_version_without_choices_raises_before_prompting(linked, data, name, no_prompt) -> None:
    catalog = VersionCatalog.from_documents(linked, data)
    with pytest.raises(UnknownDependency) as ei:
        prompts.ask_version(catalog, name)
    assert ei.value.name == name


def test_ask_version_offers_newest_first(catalog: VersionCatalog, monkeypatch: pytest.MonkeyPatch) -> None:
    offered: list[tuple[str, ...]] = []

    def pick_default(message, *, type, default, show_choices):
        offered.append(tuple(type.choices))
        return default

    monkeypatch.setattr(typer, "prompt", pick_default)

    sel = prompts.ask_version(catalog, "@minecraft/server")

    assert offered[0] == ("1.10.0-beta", "1.9.0", "1.2.0")
    assert sel == Selection(need=True, api="1.10.0-beta", npm="1.10.0-beta.1.20.70-preview.20")


def test_ask_selections_skips_packages_without_versions(monkeypatch: pytest.MonkeyPatch) -> None:
    catalog = VersionCatalog.from_documents(
        {"@minecraft/server": {"1.2.0": ["1.2.0"]}, "@minecraft/server-ui": {"1.0.0": []}},
        {"@minecraft/vanilla-data": []},
    )
    asked: list[str] = []

    def confirm(message, default):
        asked.append(message)
        return True

    monkeypatch.setattr(typer, "prompt", lambda message, *, type, default, show_choices: default)
    monkeypatch.setattr(typer, "confirm", confirm)

    selections = prompts.ask_selections(catalog)

    assert selections == {"@minecraft/server": Selection(need=True, api="1.2.0", npm="1.2.0")}
    assert asked == []
