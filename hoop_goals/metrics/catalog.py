from __future__ import annotations

import math
from functools import lru_cache
from importlib.resources import files
from types import MappingProxyType
from typing import Any, Mapping, Tuple

import pandas as pd

# Options available to both game and practice goal sets.
BASE_METRIC_OPTIONS: Tuple[Mapping[str, str], ...] = tuple(
    MappingProxyType(opt)
    for opt in (
        {"value": "efg_overall", "label": "eFG% (overall)"},
        {"value": "three_pct_overall", "label": "3P% (overall)"},
        {"value": "ft_pct", "label": "FT%"},
        {"value": "fg_pct_zone", "label": "FG% (by zone)"},
        {"value": "attempts_zone", "label": "Attempts (by zone)"},
        {"value": "off_dribble_fg", "label": "Off-Dribble FG%"},
        {"value": "pressured_fg", "label": "Pressured FG%"},
        {"value": "makes", "label": "Makes (count)"},
        {"value": "attempts", "label": "Attempts (count)"},
    )
)

# Only tracked in games; always 0 in a practice context.
GAME_ONLY_METRIC_OPTIONS: Tuple[Mapping[str, str], ...] = tuple(
    MappingProxyType(opt)
    for opt in (
        {"value": "points_total", "label": "Total Points (Game)"},
        {"value": "steals_total", "label": "Steals (Game)"},
        {"value": "assists_total", "label": "Assists (Game)"},
        {"value": "rebounds_total", "label": "Rebounds (Game)"},
    )
)

PERCENT_METRICS = frozenset(
    {
        "efg_overall",
        "three_pct_overall",
        "ft_pct",
        "fg_pct_zone",
        "off_dribble_fg",
        "pressured_fg",
    }
)

COUNT_METRICS = frozenset(
    {
        "makes",
        "attempts",
        "attempts_zone",
        "points_total",
        "steals_total",
        "assists_total",
        "rebounds_total",
    }
)

GAME_ONLY_METRICS = frozenset(opt["value"] for opt in GAME_ONLY_METRIC_OPTIONS)

_LABELS = MappingProxyType(
    {opt["value"]: opt["label"] for opt in BASE_METRIC_OPTIONS + GAME_ONLY_METRIC_OPTIONS}
)


def metric_is_percent(metric_id: Any) -> bool:
    return isinstance(metric_id, str) and metric_id in PERCENT_METRICS


def metric_is_count(metric_id: Any) -> bool:
    return isinstance(metric_id, str) and metric_id in COUNT_METRICS


def metric_label(metric_id: Any) -> str:
    """Display label for a metric id; unknown ids are returned as-is."""
    if metric_id is None:
        return ""
    if not isinstance(metric_id, str):
        return str(metric_id)
    return _LABELS.get(metric_id, metric_id)


@lru_cache(maxsize=1)
def _read_metric_glossary() -> pd.DataFrame:
    csv_path = files(__package__).joinpath("metric_glossary.csv")
    return pd.read_csv(csv_path, encoding="utf-8")


def load_metric_glossary() -> pd.DataFrame:
    """
    Load the metric glossary shipped with the package (metric_glossary.csv).

    Returns
    -------
    DataFrame
        Columns:
          - Metric: metric id as used by the evaluators
          - Label: display label (matches the option lists)
          - Kind: 'percent' or 'count'
          - Context: 'both' or 'game'
          - Definition / Notes: human-readable formula
    """
    # Cached frame is shared; hand out copies so callers can mutate freely.
    return _read_metric_glossary().copy()


def _round_half_up(value: float, ndigits: int = 0) -> float:
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def format_metric_value(metric_id: Any, value: Any) -> str:
    """
    Render a raw metric value for display.

    Percent metrics come back as e.g. "50.6%" (one decimal, half-up, whole
    numbers without a decimal part); counts and unknown metrics as a rounded
    integer string. Missing, NaN or non-numeric values render as a bare "0"
    regardless of the metric kind.
    """
    if value is None or isinstance(value, bool):
        return "0"
    try:
        if pd.isna(value):
            return "0"
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        return "0"
    if not math.isfinite(num):
        return "0"

    is_percent = metric_is_percent(metric_id)
    try:
        rounded = _round_half_up(num, 1 if is_percent else 0)
    except OverflowError:
        return "0"

    if is_percent:
        if rounded.is_integer():
            return f"{int(rounded)}%"
        return f"{rounded}%"

    return str(int(rounded))


__all__ = [
    "BASE_METRIC_OPTIONS",
    "GAME_ONLY_METRIC_OPTIONS",
    "PERCENT_METRICS",
    "COUNT_METRICS",
    "GAME_ONLY_METRICS",
    "metric_is_percent",
    "metric_is_count",
    "metric_label",
    "load_metric_glossary",
    "format_metric_value",
]
