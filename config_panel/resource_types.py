"""Resource categories managed by the configuration panel.

Each category has a machine key, used verbatim in backend paths, and a
display label for the category selector. The order of ``RESOURCE_TYPES`` is
the order of the selector and is fixed at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


class ResourceType(Enum):
    """A configuration category."""

    CLASS_PLANS = ("ClassPlans", "Class Plans")
    TIME_LAYOUTS = ("TimeLayouts", "Time Layouts")
    SUBJECTS_SOURCE = ("SubjectsSource", "Subjects")
    DEFAULT_SETTINGS_SOURCE = ("DefaultSettingsSource", "Default Settings")
    POLICY_SOURCE = ("PolicySource", "Policy")

    def __init__(self, key: str, label: str) -> None:
        self.key = key
        self.label = label

    @property
    def singular_key(self) -> str:
        return singular(self.key)

    @classmethod
    def from_key(cls, key: str) -> "ResourceType":
        for member in cls:
            if member.key == key:
                return member
        raise ValueError(f"Unknown resource type: {key!r}")


RESOURCE_TYPES: tuple[ResourceType, ...] = tuple(ResourceType)

CategoryLike = Union[ResourceType, str]


def singular(key: str) -> str:
    """Drop the final character of a category key.

    The content endpoint is addressed by this form (``ClassPlans`` ->
    ``ClassPlan``). It is a plain strip, so ``SubjectsSource`` becomes
    ``SubjectsSourc``; the backend routes on exactly that string.
    """
    return key[:-1]


def resolve_category(category: CategoryLike) -> ResourceType:
    if isinstance(category, ResourceType):
        return category
    return ResourceType.from_key(category)


def category_at(index: int) -> ResourceType:
    """Return the category shown at ``index`` in the selector."""
    if not 0 <= index < len(RESOURCE_TYPES):
        raise IndexError(f"Category index out of range: {index}")
    return RESOURCE_TYPES[index]


@dataclass(frozen=True)
class ConfigManifestEntry:
    """One entry of a backend configuration manifest.

    Only a typed model of the payload. The panel never reads manifests, and
    ``version`` is not used for conflict handling.
    """

    value: str
    version: int

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ConfigManifestEntry":
        return cls(value=str(payload.get("Value", "")), version=int(payload.get("Version", 0)))


def parse_manifest(payload: Any) -> Dict[str, ConfigManifestEntry]:
    """Parse a ``{name: {"Value": ..., "Version": ...}}`` manifest.

    Entries that are not objects are skipped. A payload that is not an object
    yields an empty manifest.
    """
    if not isinstance(payload, dict):
        return {}
    manifest: Dict[str, ConfigManifestEntry] = {}
    for name, entry in payload.items():
        if not isinstance(entry, dict):
            continue
        try:
            manifest[str(name)] = ConfigManifestEntry.from_payload(entry)
        except (TypeError, ValueError):
            continue
    return manifest

