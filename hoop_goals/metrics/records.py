"""
Normalization of raw game events and practice entries.

Upstream rows come from several writers and disagree on field names and
types (shot_type vs shotType, makes vs made + attempts, numeric strings,
NaN from DataFrame rows). Everything downstream reads the canonical dicts
produced here instead of probing raw fields.
"""
from __future__ import annotations

import math
import re
from typing import Any, Dict, Mapping, Optional

import numpy as np
import pandas as pd

from .zones import UNKNOWN_ZONE, free_throw_zone_ids, zone_is_three

OFF_DRIBBLE_PATTERN = re.compile(r"dribble|pull[- ]?up", re.IGNORECASE)
FREE_THROW_PATTERN = re.compile(r"free.?throw|^ft$", re.IGNORECASE)


def _is_missing(val: Any) -> bool:
    if val is None:
        return True
    if isinstance(val, (float, np.floating)):
        return bool(np.isnan(val))
    return val is pd.NA or val is pd.NaT


def _truthy(val: Any) -> bool:
    """bool() that treats None / NaN / pd.NA as False."""
    if _is_missing(val):
        return False
    try:
        return bool(val)
    except (TypeError, ValueError):
        return False


def _is_true(val: Any) -> bool:
    """Strict flag check: only a real boolean True counts."""
    return isinstance(val, (bool, np.bool_)) and bool(val)


def _text(val: Any) -> str:
    if _is_missing(val):
        return ""
    return str(val).strip().lower()


def _number(val: Any) -> Optional[float]:
    """Numbers and numeric strings -> float; anything else -> None."""
    if _is_missing(val) or isinstance(val, (bool, np.bool_)):
        return None
    if isinstance(val, str) and not val.strip():
        return None
    try:
        num = float(pd.to_numeric(val, errors="coerce"))
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(num):
        return None
    return num


def _whole(num: float) -> float | int:
    return int(num) if float(num).is_integer() else num


def shot_type_text(row: Mapping[str, Any]) -> str:
    """Lower-cased shot type, preferring shot_type over shotType."""
    raw = row.get("shot_type")
    if _is_missing(raw) or raw == "":
        raw = row.get("shotType")
    return _text(raw)


def zone_id_of(row: Mapping[str, Any]) -> str:
    raw = row.get("zone_id")
    if not _truthy(raw):
        return UNKNOWN_ZONE
    return str(raw)


def is_off_dribble(shot_type: str) -> bool:
    return bool(shot_type) and OFF_DRIBBLE_PATTERN.search(shot_type) is not None


def is_free_throw_text(shot_type: str) -> bool:
    return bool(shot_type) and FREE_THROW_PATTERN.search(shot_type) is not None


def normalize_game_event(row: Any) -> Optional[Dict[str, Any]]:
    """Canonical view of a game event, or None for non-mapping rows."""
    if not isinstance(row, Mapping):
        return None
    shot_type = shot_type_text(row)
    etype = row.get("type")
    return {
        "type": etype if isinstance(etype, str) else "",
        "made": _truthy(row.get("made")),
        "is_three": _truthy(row.get("is_three")),
        "zone_id": zone_id_of(row),
        "off_dribble": is_off_dribble(shot_type),
        "pressured": _is_true(row.get("pressured")),
    }


def normalize_practice_entry(row: Any) -> Optional[Dict[str, Any]]:
    """
    Canonical view of a practice entry.

    Returns None when the row is unusable: not a mapping, or attempts that do
    not coerce to a positive number. ``makes`` falls back to ``attempts`` when
    only a truthy ``made`` flag is present; ``attempts`` defaults to 1 when
    absent. Makes above attempts are clamped and flagged via ``clamped``.
    """
    if not isinstance(row, Mapping):
        return None

    raw_attempts = row.get("attempts")
    if _is_missing(raw_attempts) or raw_attempts == "":
        attempts = 1.0
    else:
        attempts = _number(raw_attempts)
    if attempts is None or attempts <= 0:
        return None

    makes = _number(row.get("makes"))
    if makes is None:
        makes = attempts if _truthy(row.get("made")) else 0.0

    clamped = makes > attempts or makes < 0
    makes = min(max(makes, 0.0), attempts)

    zone_id = zone_id_of(row)
    shot_type = shot_type_text(row)
    is_ft = (
        zone_id in free_throw_zone_ids()
        or _text(row.get("type")) == "freethrow"
        or is_free_throw_text(shot_type)
    )

    return {
        "makes": _whole(makes),
        "attempts": _whole(attempts),
        "zone_id": zone_id,
        "is_free_throw": is_ft,
        "is_three": _truthy(row.get("is_three")) or zone_is_three(zone_id),
        "off_dribble": is_off_dribble(shot_type),
        "pressured": _truthy(row.get("pressured")),
        "clamped": clamped,
    }


__all__ = [
    "OFF_DRIBBLE_PATTERN",
    "FREE_THROW_PATTERN",
    "shot_type_text",
    "zone_id_of",
    "is_off_dribble",
    "is_free_throw_text",
    "normalize_game_event",
    "normalize_practice_entry",
]
