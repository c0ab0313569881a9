from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from ..date_utils import range_start_date, to_timestamp
from .catalog import format_metric_value, metric_label
from .game import compute_game_metric_value
from .practice import compute_practice_metric_value

CONTEXTS = ("game", "practice")


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        val = record.get(key)
        if val is not None and not (isinstance(val, float) and math.isnan(val)):
            return val
    return None


def _coerce_target(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        num = pd.to_numeric(value, errors="coerce")
    except (TypeError, ValueError):
        return None
    if pd.isna(num):
        return None
    return float(num)


class Goal:
    """
    One goal from a goal set: a metric, an optional zone, an optional date
    window and a target. The goal set type decides whether values come from
    game events or practice entries.
    """

    def __init__(
        self,
        metric_id: str,
        target_value: Any = None,
        zone_id: Optional[str] = None,
        start_date: Any = None,
        end_date: Any = None,
        time_range: Optional[str] = None,
        context: str = "game",
        name: Optional[str] = None,
    ):
        context_norm = str(context or "").strip().lower()
        if context_norm not in CONTEXTS:
            raise ValueError(
                f"Goal context must be one of {CONTEXTS}, got {context!r}"
            )
        self.metric_id = metric_id
        self.target_value = _coerce_target(target_value)
        self.zone_id = zone_id or None
        self.start_date = start_date
        self.end_date = end_date
        self.time_range = time_range
        self.context = context_norm
        self.name = name

    @classmethod
    def from_record(cls, record: Mapping[str, Any], context: Optional[str] = None) -> "Goal":
        """
        Build a Goal from a stored goal row. Both snake_case and camelCase
        field names are accepted; ``context`` overrides the row's own
        context/type (e.g. when the caller knows the parent set's type).
        """
        row_context = _first_present(record, "context", "set_type", "type")
        return cls(
            metric_id=_first_present(record, "metric_id", "metricId", "metric"),
            target_value=_first_present(record, "target_value", "targetValue", "target"),
            zone_id=_first_present(record, "zone_id", "zoneId"),
            start_date=_first_present(record, "start_date", "startDate"),
            end_date=_first_present(record, "end_date", "endDate"),
            time_range=_first_present(record, "time_range", "timeRange"),
            context=context or row_context or "game",
            name=_first_present(record, "name"),
        )

    @property
    def label(self) -> str:
        return self.name or metric_label(self.metric_id)

    def resolved_start(self, now: Any = None) -> Optional[pd.Timestamp]:
        # An explicit start date wins over the time-range preset.
        if self.start_date is not None:
            return to_timestamp(self.start_date)
        if self.time_range:
            return range_start_date(self.time_range, now=now)
        return None

    def current_value(self, records: Iterable[Any] | pd.DataFrame | None, now: Any = None) -> float:
        compute = (
            compute_game_metric_value if self.context == "game" else compute_practice_metric_value
        )
        # Pass an explicit start through untouched so the date filter applies
        # its own handling of unparseable bounds.
        start = self.start_date if self.start_date is not None else self.resolved_start(now=now)
        return compute(
            self.metric_id,
            records,
            start_date=start,
            end_date=self.end_date,
            zone_id=self.zone_id,
        )

    def display_value(self, records: Iterable[Any] | pd.DataFrame | None, now: Any = None) -> str:
        return format_metric_value(self.metric_id, self.current_value(records, now=now))

    def progress(self, records: Iterable[Any] | pd.DataFrame | None, now: Any = None) -> int:
        """Percent of target reached, rounded half-up and kept within [0, 100]."""
        target = self.target_value
        if not target or target <= 0:
            return 0
        current = self.current_value(records, now=now)
        ratio = current / target * 100
        if not math.isfinite(ratio):
            return 100 if ratio > 0 else 0
        return max(0, min(100, int(math.floor(ratio + 0.5))))

    def __repr__(self) -> str:
        return (
            f"Goal(metric_id={self.metric_id!r}, target_value={self.target_value!r}, "
            f"zone_id={self.zone_id!r}, context={self.context!r})"
        )


__all__ = ["CONTEXTS", "Goal"]
