from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from .catalog import GAME_ONLY_METRICS

Summary = Mapping[str, Any]


def pct(makes: float, attempts: float) -> float:
    """makes / attempts * 100, or 0.0 when there are no attempts."""
    if not attempts:
        return 0.0
    return makes / attempts * 100.0


def _zone_key(zone_id: Any) -> str | None:
    if zone_id is None or zone_id == "":
        return None
    return str(zone_id)


def _fg_pct_zone(stats: Summary, zone_id: Any) -> float:
    key = _zone_key(zone_id)
    if key is None:
        return stats["fg_pct"]
    return pct(stats["zone_fgm"].get(key, 0), stats["zone_fga"].get(key, 0))


def _attempts_zone(stats: Summary, zone_id: Any) -> float:
    key = _zone_key(zone_id)
    if key is None:
        return 0
    return stats["zone_fga"].get(key, 0)


_METRICS: Dict[str, Callable[[Summary, Any], float]] = {
    "efg_overall": lambda s, _z: s["efg_pct"],
    "three_pct_overall": lambda s, _z: s["three_pct"],
    "ft_pct": lambda s, _z: s["ft_pct"],
    "fg_pct_zone": _fg_pct_zone,
    "attempts_zone": _attempts_zone,
    "off_dribble_fg": lambda s, _z: pct(s["off_dribble_makes"], s["off_dribble_att"]),
    "pressured_fg": lambda s, _z: pct(s["pressured_makes"], s["pressured_att"]),
    "makes": lambda s, _z: s["fgm"],
    "attempts": lambda s, _z: s["fga"],
    "points_total": lambda s, _z: s["total_points"],
    "steals_total": lambda s, _z: s["steals"],
    "assists_total": lambda s, _z: s["assists"],
    "rebounds_total": lambda s, _z: s["rebounds"],
}


def select_metric(
    metric_id: Any,
    stats: Summary,
    zone_id: Any = None,
    *,
    game: bool = True,
) -> float:
    """
    Pick one metric out of an aggregated summary.

    Unknown ids evaluate to 0. With ``game=False`` the game-only metrics
    (points, steals, assists, rebounds) evaluate to 0 as well.
    """
    if not isinstance(metric_id, str):
        return 0
    if not game and metric_id in GAME_ONLY_METRICS:
        return 0
    fn = _METRICS.get(metric_id)
    if fn is None:
        return 0
    return fn(stats, zone_id) or 0


__all__ = ["pct", "select_metric"]
