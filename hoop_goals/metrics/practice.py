from __future__ import annotations

import warnings
from collections import defaultdict
from typing import Any, Dict, Iterable

import pandas as pd

from ..date_utils import filter_events_by_date
from .dispatch import select_metric
from .game import finalize_summary
from .records import normalize_practice_entry


def _accumulate_practice(entries: Iterable[Any]) -> Dict[str, Any]:
    """
    Sum pre-aggregated practice rows into the same summary shape the game
    aggregator produces (game-only counters stay at 0).

    Free-throw rows feed only the FT counters; every other row is a field
    goal attempt bucket. Rows with no usable attempts are skipped.
    """
    counts: Dict[str, float] = defaultdict(int)
    zone_fgm: Dict[str, float] = defaultdict(int)
    zone_fga: Dict[str, float] = defaultdict(int)
    n_clamped = 0

    for raw in entries:
        entry = normalize_practice_entry(raw)
        if entry is None:
            continue
        if entry["clamped"]:
            n_clamped += 1

        makes = entry["makes"]
        attempts = entry["attempts"]

        if entry["is_free_throw"]:
            counts["ft_att"] += attempts
            counts["ft_makes"] += makes
            continue

        counts["fga"] += attempts
        counts["fgm"] += makes

        if entry["is_three"]:
            counts["threes_att"] += attempts
            counts["threes_made"] += makes

        zone = entry["zone_id"]
        zone_fga[zone] += attempts
        if makes:
            zone_fgm[zone] += makes

        if entry["off_dribble"]:
            counts["off_dribble_att"] += attempts
            counts["off_dribble_makes"] += makes

        if entry["pressured"]:
            counts["pressured_att"] += attempts
            counts["pressured_makes"] += makes

    if n_clamped:
        warnings.warn(
            f"{n_clamped} practice entr{'y' if n_clamped == 1 else 'ies'} had makes "
            "outside [0, attempts]; makes were clamped to the attempts range.",
            RuntimeWarning,
        )

    return finalize_summary(counts, zone_fgm, zone_fga)


def compute_practice_metric_value(
    metric_id: Any,
    entries: Iterable[Any] | pd.DataFrame | None,
    start_date: Any = None,
    end_date: Any = None,
    zone_id: Any = None,
) -> float:
    """
    Raw numeric value of ``metric_id`` over practice entries.

    Formulas match compute_game_metric_value; only the input shape differs.
    Free throws (free-throw zone, type "freethrow", or a "free throw"/"ft"
    shot type) count only toward ft_pct. Game-only metrics are always 0.
    """
    filtered = filter_events_by_date(entries, start_date=start_date, end_date=end_date)
    stats = _accumulate_practice(filtered)
    return select_metric(metric_id, stats, zone_id, game=False)


__all__ = ["compute_practice_metric_value"]
