from .date_utils import TIME_RANGES, filter_events_by_date, get_range_by_id, range_start_date
from .metrics import (
    BASE_METRIC_OPTIONS,
    GAME_ONLY_METRIC_OPTIONS,
    Goal,
    aggregate_game_events,
    compute_game_metric_value,
    compute_practice_metric_value,
    format_metric_value,
    metric_is_count,
    metric_is_percent,
)

__all__ = [
    "TIME_RANGES",
    "filter_events_by_date",
    "get_range_by_id",
    "range_start_date",
    "BASE_METRIC_OPTIONS",
    "GAME_ONLY_METRIC_OPTIONS",
    "Goal",
    "aggregate_game_events",
    "compute_game_metric_value",
    "compute_practice_metric_value",
    "format_metric_value",
    "metric_is_count",
    "metric_is_percent",
]
