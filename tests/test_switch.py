from __future__ import annotations

import copy
from typing import Any

import pytest

from serein.core.catalog import VersionCatalog
from serein.core.errors import InvalidCoordinate, UnknownDependency
from serein.core.model import Selection
from serein.core.switch import EntryState, switch_dependencies

RES_UUID = "5f0c1a8e-0000-4000-8000-000000000001"


def _manifest() -> dict[str, Any]:
    return {
        "format_version": 2,
        "header": {"name": "demo", "uuid": "hdr", "version": [1, 0, 0]},
        "modules": [{"type": "script", "uuid": "mod", "version": [1, 0, 0]}],
        "dependencies": [
            {"uuid": RES_UUID, "version": [1, 0, 0]},
            {"module_name": "@minecraft/server", "version": "1.2.0"},
            {"module_name": "custom-lib", "version": "0.1.0"},
            {"module_name": "@minecraft/server-ui", "version": "1.0.0"},
            {"module_name": "@minecraft/server-net", "version": "1.0.0-beta"},
        ],
        "capabilities": [],
    }


def _package() -> dict[str, Any]:
    return {
        "name": "demo",
        "version": "1.0.0",
        "dependencies": {
            "@minecraft/server": "1.2.0-beta",
            "@minecraft/server-ui": "1.0.0",
            "@minecraft/server-net": "1.0.0-beta.1.20.60-stable",
            "custom-lib": "0.1.0",
            "gulp": "^4.0.2",
        },
    }


def test_default_mode_updates_only_vendor_entries(catalog: VersionCatalog) -> None:
    manifest, package = _manifest(), _package()
    before_manifest = copy.deepcopy(manifest)

    report = switch_dependencies(manifest, package, catalog)

    deps = manifest["dependencies"]
    assert deps[0] == before_manifest["dependencies"][0]
    assert deps[1] == {"module_name": "@minecraft/server", "version": "1.10.0-beta"}
    assert deps[2] == {"module_name": "custom-lib", "version": "0.1.0"}
    assert deps[3] == {"module_name": "@minecraft/server-ui", "version": "1.1.0"}
    assert deps[4] == {"module_name": "@minecraft/server-net", "version": "1.0.0-beta"}

    # every other manifest field is untouched
    for key in ("format_version", "header", "modules", "capabilities"):
        assert manifest[key] == before_manifest[key]

    assert package["dependencies"] == {
        "@minecraft/server": "1.10.0-beta.1.20.70-preview.20",
        "@minecraft/server-ui": "1.1.0",
        "@minecraft/server-net": "1.0.0-beta.1.20.60-stable",
        "custom-lib": "0.1.0",
        "gulp": "^4.0.2",
    }

    states = [o.state for o in report.outcomes]
    assert states == [
        EntryState.UNEXAMINED,
        EntryState.RESOLVED,
        EntryState.UNEXAMINED,
        EntryState.RESOLVED,
        EntryState.RESOLVED,
    ]
    assert report.failures == []


def test_chooser_skip_and_explicit_pair(catalog: VersionCatalog) -> None:
    manifest, package = _manifest(), _package()
    asked: list[str] = []

    def choose(name: str, cat: VersionCatalog) -> Selection | None:
        asked.append(name)
        if name == "@minecraft/server":
            return Selection(api="1.9.0", npm="1.9.0-rc.1.20.60-preview.26")
        return None

    report = switch_dependencies(manifest, package, catalog, choose)

    assert asked == ["@minecraft/server", "@minecraft/server-ui", "@minecraft/server-net"]
    assert manifest["dependencies"][1]["version"] == "1.9.0"
    assert package["dependencies"]["@minecraft/server"] == "1.9.0-rc.1.20.60-preview.26"
    assert manifest["dependencies"][3]["version"] == "1.0.0"
    assert package["dependencies"]["@minecraft/server-ui"] == "1.0.0"
    assert [o.module_name for o in report.skipped] == ["@minecraft/server-ui", "@minecraft/server-net"]
    assert [o.module_name for o in report.resolved] == ["@minecraft/server"]


def test_unknown_dependency_is_reported_and_others_continue(catalog: VersionCatalog) -> None:
    manifest, package = _manifest(), _package()
    manifest["dependencies"].insert(1, {"module_name": "@minecraft/server-admin", "version": "1.0.0-beta"})

    report = switch_dependencies(manifest, package, catalog)

    assert len(report.failures) == 1
    assert isinstance(report.failures[0], UnknownDependency)
    assert report.failures[0].name == "@minecraft/server-admin"
    assert manifest["dependencies"][1] == {"module_name": "@minecraft/server-admin", "version": "1.0.0-beta"}
    assert "@minecraft/server-admin" not in package["dependencies"]
    assert manifest["dependencies"][2]["version"] == "1.10.0-beta"
    assert len(report.resolved) == 3


@pytest.mark.parametrize("listing", [{}, {"1.0.0": []}])
def test_listed_name_without_versions_is_reported_and_others_continue(listing: dict) -> None:
    catalog = VersionCatalog.from_documents(
        {"@minecraft/server": {"1.2.0": ["1.2.0"]}, "@minecraft/server-ui": listing}
    )
    manifest = {
        "dependencies": [
            {"module_name": "@minecraft/server-ui", "version": "1.0.0"},
            {"module_name": "@minecraft/server", "version": "1.0.0"},
        ]
    }
    package = {"dependencies": {"@minecraft/server-ui": "1.0.0", "@minecraft/server": "1.0.0"}}

    report = switch_dependencies(manifest, package, catalog)

    assert [e.name for e in report.failures] == ["@minecraft/server-ui"]
    assert report.outcomes[0].state is EntryState.SKIPPED
    assert [o.module_name for o in report.resolved] == ["@minecraft/server"]
    assert manifest["dependencies"] == [
        {"module_name": "@minecraft/server-ui", "version": "1.0.0"},
        {"module_name": "@minecraft/server", "version": "1.2.0"},
    ]
    assert package["dependencies"] == {"@minecraft/server-ui": "1.0.0", "@minecraft/server": "1.2.0"}


def test_listed_name_without_versions_fail_fast() -> None:
    catalog = VersionCatalog.from_documents({"@minecraft/server": {"1.2.0": ["1.2.0"]}, "@minecraft/server-ui": {}})
    manifest = {"dependencies": [{"module_name": "@minecraft/server-ui", "version": "1.0.0"}]}
    with pytest.raises(UnknownDependency):
        switch_dependencies(manifest, {}, catalog, fail_fast=True)


def test_unknown_dependency_fail_fast(catalog: VersionCatalog) -> None:
    manifest, package = _manifest(), _package()
    manifest["dependencies"].append({"module_name": "@minecraft/server-admin", "version": "1.0.0-beta"})
    with pytest.raises(UnknownDependency):
        switch_dependencies(manifest, package, catalog, fail_fast=True)


def test_invalid_choice_leaves_artifacts_untouched(catalog: VersionCatalog) -> None:
    manifest, package = _manifest(), _package()
    before = (copy.deepcopy(manifest), copy.deepcopy(package))

    def choose(name: str, cat: VersionCatalog) -> Selection | None:
        if name == "@minecraft/server-ui":
            return Selection(api="1.0.0", npm="9.9.9")
        return Selection.latest()

    with pytest.raises(InvalidCoordinate):
        switch_dependencies(manifest, package, catalog, choose)

    assert (manifest, package) == before


def test_default_mode_twice_is_stable(catalog: VersionCatalog) -> None:
    manifest, package = _manifest(), _package()
    switch_dependencies(manifest, package, catalog)
    once = (copy.deepcopy(manifest), copy.deepcopy(package))
    switch_dependencies(manifest, package, catalog)
    assert (manifest, package) == once


def test_missing_package_dependencies_section_is_created(catalog: VersionCatalog) -> None:
    manifest = {"dependencies": [{"module_name": "@minecraft/server", "version": "1.2.0"}]}
    package: dict[str, Any] = {"name": "demo"}

    switch_dependencies(manifest, package, catalog)

    assert package["dependencies"] == {"@minecraft/server": "1.10.0-beta.1.20.70-preview.20"}


def test_non_list_dependencies_rejected(catalog: VersionCatalog) -> None:
    with pytest.raises(ValueError):
        switch_dependencies({"dependencies": {}}, {}, catalog)
