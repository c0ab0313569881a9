from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd

from ..date_utils import as_records, filter_events_by_date
from .dispatch import pct, select_metric
from .records import normalize_game_event
from .zones import zone_label

GAME_COUNTERS = (
    "assists",
    "rebounds",
    "steals",
    "fgm",
    "fga",
    "threes_made",
    "threes_att",
    "ft_makes",
    "ft_att",
    "off_dribble_makes",
    "off_dribble_att",
    "pressured_makes",
    "pressured_att",
    "total_points",
)

_SIMPLE_COUNTS = {"assist": "assists", "rebound": "rebounds", "steal": "steals"}


def _increment_count(counter: Dict[str, int], key: str, value: int = 1) -> None:
    counter[key] += value


def finalize_summary(counts: Dict[str, Any], zone_fgm: Dict[str, Any], zone_fga: Dict[str, Any]) -> Dict[str, Any]:
    """Attach derived percentages and zone maps to raw counters."""
    summary: Dict[str, Any] = {key: counts.get(key, 0) for key in GAME_COUNTERS}

    fga = summary["fga"]
    summary["fg_pct"] = pct(summary["fgm"], fga)
    summary["efg_pct"] = pct(summary["fgm"] + 0.5 * summary["threes_made"], fga)
    summary["three_pct"] = pct(summary["threes_made"], summary["threes_att"])
    summary["ft_pct"] = pct(summary["ft_makes"], summary["ft_att"])

    summary["zone_fgm"] = dict(zone_fgm)
    summary["zone_fga"] = dict(zone_fga)
    return summary


def aggregate_game_events(events: Iterable[Any] | pd.DataFrame | None) -> Dict[str, Any]:
    """
    Reduce discrete game events to a stat summary.

    Counts assists/rebounds/steals, field goals (with threes, per-zone,
    off-dribble and pressured splits), free throws and points in one pass,
    then derives FG%, eFG%, 3P% and FT% (0 when the denominator is 0, not
    rounded). Unknown event types and non-mapping rows are ignored.
    """
    counts: Dict[str, int] = defaultdict(int)
    zone_fgm: Dict[str, int] = defaultdict(int)
    zone_fga: Dict[str, int] = defaultdict(int)

    for raw in as_records(events):
        ev = normalize_game_event(raw)
        if ev is None:
            continue
        etype = ev["type"]

        if etype in _SIMPLE_COUNTS:
            _increment_count(counts, _SIMPLE_COUNTS[etype])

        elif etype == "freethrow":
            _increment_count(counts, "ft_att")
            if ev["made"]:
                _increment_count(counts, "ft_makes")
                _increment_count(counts, "total_points", 1)

        elif etype == "shot":
            made = ev["made"]
            is_three = ev["is_three"]
            zone = ev["zone_id"]

            _increment_count(counts, "fga")
            if is_three:
                _increment_count(counts, "threes_att")
            if made:
                _increment_count(counts, "fgm")
                _increment_count(counts, "total_points", 3 if is_three else 2)
                if is_three:
                    _increment_count(counts, "threes_made")

            _increment_count(zone_fga, zone)
            if made:
                _increment_count(zone_fgm, zone)

            if ev["off_dribble"]:
                _increment_count(counts, "off_dribble_att")
                if made:
                    _increment_count(counts, "off_dribble_makes")

            if ev["pressured"]:
                _increment_count(counts, "pressured_att")
                if made:
                    _increment_count(counts, "pressured_makes")

    return finalize_summary(counts, zone_fgm, zone_fga)


def compute_game_metric_value(
    metric_id: Any,
    events: Iterable[Any] | pd.DataFrame | None,
    start_date: Any = None,
    end_date: Any = None,
    zone_id: Any = None,
) -> float:
    """
    Raw numeric value of ``metric_id`` over game events.

    - start_date / end_date: optional inclusive date range on each event's ts
    - zone_id: scopes fg_pct_zone / attempts_zone (fg_pct_zone falls back to
      overall FG% without it)

    Unknown metric ids evaluate to 0.
    """
    filtered = filter_events_by_date(events, start_date=start_date, end_date=end_date)
    stats = aggregate_game_events(filtered)
    return select_metric(metric_id, stats, zone_id, game=True)


def zone_breakdown(events: Iterable[Any] | pd.DataFrame | None) -> pd.DataFrame:
    """
    Per-zone shooting table for game events.

    One row per zone with at least one attempt: zone_id, label, FGM, FGA and
    FG_pct (0-100), ordered by FGA descending, then zone_id.
    """
    stats = aggregate_game_events(events)
    columns = ["zone_id", "label", "FGM", "FGA", "FG_pct"]
    if not stats["zone_fga"]:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(
        {
            "zone_id": list(stats["zone_fga"].keys()),
            "FGA": list(stats["zone_fga"].values()),
        }
    )
    df["FGM"] = df["zone_id"].map(stats["zone_fgm"]).fillna(0).astype(int)
    df["FGA"] = df["FGA"].astype(int)
    df["label"] = df["zone_id"].map(zone_label)
    df["FG_pct"] = np.where(df["FGA"] > 0, df["FGM"] / df["FGA"] * 100.0, 0.0)

    df = df.sort_values(["FGA", "zone_id"], ascending=[False, True], kind="mergesort")
    return df[columns].reset_index(drop=True)


__all__ = [
    "GAME_COUNTERS",
    "aggregate_game_events",
    "compute_game_metric_value",
    "finalize_summary",
    "zone_breakdown",
]
