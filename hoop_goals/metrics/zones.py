"""Court zone catalog loaded from the packaged zones.yaml."""
from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Tuple

import yaml

UNKNOWN_ZONE = "unknown"


@lru_cache(maxsize=1)
def load_zones() -> Tuple[Mapping[str, Any], ...]:
    """
    Return the court zones as read-only mappings with keys id, label and
    is_three, in file order. Rows without an id are dropped.
    """
    raw = files(__package__).joinpath("zones.yaml").read_text(encoding="utf-8")
    doc = yaml.safe_load(raw) or {}

    zones = []
    for row in doc.get("zones") or []:
        if not isinstance(row, dict) or not row.get("id"):
            continue
        zones.append(
            MappingProxyType(
                {
                    "id": str(row["id"]),
                    "label": str(row.get("label") or row.get("name") or row["id"]),
                    "is_three": bool(row.get("is_three", False)),
                }
            )
        )
    return tuple(zones)


@lru_cache(maxsize=1)
def free_throw_zone_ids() -> FrozenSet[str]:
    """Zone ids that represent free throws (by id, or by a 'free throw' label)."""
    return frozenset(
        z["id"]
        for z in load_zones()
        if z["id"] == "free_throw" or "free throw" in z["label"].lower()
    )


@lru_cache(maxsize=1)
def _zone_lookup() -> Mapping[str, Mapping[str, Any]]:
    return MappingProxyType({z["id"]: z for z in load_zones()})


def zone_is_three(zone_id: Any) -> bool:
    if not isinstance(zone_id, str):
        return False
    zone = _zone_lookup().get(zone_id)
    return bool(zone and zone["is_three"])


def zone_label(zone_id: Any) -> str:
    if not zone_id or zone_id == UNKNOWN_ZONE:
        return "Unknown"
    zone_id = str(zone_id)
    zone = _zone_lookup().get(zone_id)
    return zone["label"] if zone else zone_id


__all__ = [
    "UNKNOWN_ZONE",
    "load_zones",
    "free_throw_zone_ids",
    "zone_is_three",
    "zone_label",
]
