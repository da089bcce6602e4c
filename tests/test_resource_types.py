from __future__ import annotations

import pytest

from config_panel.resource_types import (
    RESOURCE_TYPES,
    ConfigManifestEntry,
    ResourceType,
    category_at,
    parse_manifest,
    resolve_category,
    singular,
)


def test_resource_types_are_ordered() -> None:
    assert [rt.key for rt in RESOURCE_TYPES] == [
        "ClassPlans",
        "TimeLayouts",
        "SubjectsSource",
        "DefaultSettingsSource",
        "PolicySource",
    ]
    assert all(rt.label for rt in RESOURCE_TYPES)


def test_singular_strips_last_character_only() -> None:
    assert singular("ClassPlans") == "ClassPlan"
    assert singular("TimeLayouts") == "TimeLayout"
    # Not real pluralization: the backend routes on the stripped key.
    assert ResourceType.SUBJECTS_SOURCE.singular_key == "SubjectsSourc"
    assert ResourceType.POLICY_SOURCE.singular_key == "PolicySourc"


def test_resolve_category_accepts_keys_and_members() -> None:
    assert resolve_category("TimeLayouts") is ResourceType.TIME_LAYOUTS
    assert resolve_category(ResourceType.CLASS_PLANS) is ResourceType.CLASS_PLANS
    with pytest.raises(ValueError):
        resolve_category("Unknown")


def test_category_at_bounds() -> None:
    assert category_at(0) is ResourceType.CLASS_PLANS
    assert category_at(4) is ResourceType.POLICY_SOURCE
    with pytest.raises(IndexError):
        category_at(5)
    with pytest.raises(IndexError):
        category_at(-1)


def test_parse_manifest_skips_malformed_entries() -> None:
    manifest = parse_manifest({
        "default": {"Value": "default", "Version": 3},
        "broken": "not an object",
        "bad_version": {"Value": "x", "Version": "three"},
    })
    assert manifest == {"default": ConfigManifestEntry(value="default", version=3)}
    assert parse_manifest(["not", "a", "dict"]) == {}
