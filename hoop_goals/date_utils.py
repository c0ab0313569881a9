"""Shared helpers for timestamp handling, date-range filtering and time-range presets."""
from __future__ import annotations

import numbers
import warnings
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

TIME_RANGES: Tuple[Mapping[str, Any], ...] = tuple(
    MappingProxyType(r)
    for r in (
        {"id": "30d", "label": "30D", "days": 30},
        {"id": "60d", "label": "60D", "days": 60},
        {"id": "180d", "label": "180D", "days": 180},
        # All-time: no lower bound.
        {"id": "all", "label": "All", "days": None},
    )
)

# Relative words pandas resolves against the wall clock.
_RELATIVE_WORDS = {"now", "today", "tomorrow", "yesterday"}


def as_records(records: Any) -> List[Any]:
    """
    Normalize an input collection to a new list of records.

    Accepts None (-> []), a DataFrame (one mapping per row) or any iterable.
    A lone mapping or string is not a collection of records and yields [].
    """
    if records is None:
        return []
    if isinstance(records, pd.DataFrame):
        return records.to_dict("records")
    if isinstance(records, (Mapping, str, bytes)):
        return []
    try:
        return list(records)
    except TypeError:
        return []


def to_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """
    Coerce a datetime-like value to a naive UTC Timestamp.

    Handles datetime/date/Timestamp objects, ISO strings and epoch
    milliseconds. Anything missing or unparseable -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not value.strip() or value.strip().lower() in _RELATIVE_WORDS:
            return None

    try:
        if isinstance(value, numbers.Number):
            ts = pd.to_datetime(value, unit="ms", errors="coerce")
        else:
            ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None

    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def _bound_supplied(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    try:
        return not bool(pd.isna(value))
    except (TypeError, ValueError):
        return True


def _resolve_bound(value: Any, name: str) -> Optional[pd.Timestamp]:
    ts = to_timestamp(value)
    if ts is None:
        warnings.warn(
            f"Ignoring unparseable {name} {value!r}; treating the bound as open.",
            RuntimeWarning,
        )
    return ts


def _record_ts(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get("ts")
    return None


def filter_events_by_date(
    records: Iterable[Any] | pd.DataFrame | None,
    start_date: Any = None,
    end_date: Any = None,
) -> List[Any]:
    """
    Keep records whose ``ts`` falls within [start_date, end_date] (inclusive).

    With no bound supplied this is a plain shallow copy: nothing is validated
    and records without a timestamp pass through. Once any bound is supplied,
    records with a missing or unparseable ``ts`` are dropped, even if the
    other bound is open. A supplied bound that cannot be parsed is treated as
    open (a RuntimeWarning is emitted). Order is preserved.
    """
    rows = as_records(records)

    has_start = _bound_supplied(start_date)
    has_end = _bound_supplied(end_date)
    if not has_start and not has_end:
        return rows

    start = _resolve_bound(start_date, "start_date") if has_start else None
    end = _resolve_bound(end_date, "end_date") if has_end else None

    kept = []
    for rec in rows:
        t = to_timestamp(_record_ts(rec))
        if t is None:
            continue
        if start is not None and t < start:
            continue
        if end is not None and t > end:
            continue
        kept.append(rec)
    return kept


def get_range_by_id(range_id: Any) -> Mapping[str, Any]:
    """Look up a time-range preset; unknown ids fall back to the first preset."""
    for r in TIME_RANGES:
        if r["id"] == range_id:
            return r
    return TIME_RANGES[0]


def range_start_date(range_id: Any, now: Any = None) -> Optional[pd.Timestamp]:
    """
    Start of the lookback window for a time-range preset: midnight ``days``
    days before ``now`` (defaults to the current UTC time). None for all-time.
    """
    days = get_range_by_id(range_id)["days"]
    if days is None:
        return None
    anchor = to_timestamp(now) if now is not None else None
    if anchor is None:
        anchor = pd.Timestamp.now(tz="UTC").tz_localize(None)
    return (anchor - pd.Timedelta(days=days)).normalize()


__all__ = [
    "TIME_RANGES",
    "as_records",
    "to_timestamp",
    "filter_events_by_date",
    "get_range_by_id",
    "range_start_date",
]
