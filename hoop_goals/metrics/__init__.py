from .catalog import (
    BASE_METRIC_OPTIONS,
    GAME_ONLY_METRIC_OPTIONS,
    format_metric_value,
    load_metric_glossary,
    metric_is_count,
    metric_is_percent,
    metric_label,
)
from .game import aggregate_game_events, compute_game_metric_value, zone_breakdown
from .goal import Goal
from .practice import compute_practice_metric_value
from .zones import free_throw_zone_ids, load_zones, zone_is_three, zone_label

__all__ = [
    "BASE_METRIC_OPTIONS",
    "GAME_ONLY_METRIC_OPTIONS",
    "format_metric_value",
    "load_metric_glossary",
    "metric_is_count",
    "metric_is_percent",
    "metric_label",
    "aggregate_game_events",
    "compute_game_metric_value",
    "zone_breakdown",
    "Goal",
    "compute_practice_metric_value",
    "free_throw_zone_ids",
    "load_zones",
    "zone_is_three",
    "zone_label",
]
