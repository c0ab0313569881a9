from __future__ import annotations

from typing import Any, Callable, Dict, List

import pandas as pd
import pytest

GAME_TS = "2024-01-15T10:00:00"
PRACTICE_TS = "2024-01-15T10:00:00"


@pytest.fixture(scope="session")
def make_shot() -> Callable[..., Dict[str, Any]]:
    def _shot(made: bool, is_three: bool, **extra: Any) -> Dict[str, Any]:
        row = {"type": "shot", "made": made, "is_three": is_three, "ts": GAME_TS}
        row.update(extra)
        return row

    return _shot


@pytest.fixture(scope="session")
def make_entry() -> Callable[..., Dict[str, Any]]:
    def _entry(makes: Any, attempts: Any, **extra: Any) -> Dict[str, Any]:
        row = {"makes": makes, "attempts": attempts, "ts": PRACTICE_TS}
        row.update(extra)
        return row

    return _entry


@pytest.fixture
def game_events() -> List[Dict[str, Any]]:
    """A short game: two corner threes (one made), a made pull-up two, a made FT,
    and one each of assist / rebound / steal."""
    return [
        {
            "type": "shot",
            "zone_id": "left_corner_3",
            "is_three": True,
            "made": True,
            "shot_type": "pull-up jumper",
            "pressured": True,
            "ts": "2026-02-05T10:00:00Z",
        },
        {
            "type": "shot",
            "zone_id": "left_corner_3",
            "is_three": True,
            "made": False,
            "shot_type": "catch",
            "ts": "2026-02-05T10:01:00Z",
        },
        {
            "type": "shot",
            "zone_id": "center_mid",
            "is_three": False,
            "made": True,
            "shot_type": "dribble pull-up",
            "ts": "2026-02-05T10:02:00Z",
        },
        {"type": "freethrow", "made": True, "ts": "2026-02-05T10:03:00Z"},
        {"type": "assist", "ts": "2026-02-05T10:04:00Z"},
        {"type": "rebound", "ts": "2026-02-05T10:05:00Z"},
        {"type": "steal", "ts": "2026-02-05T10:06:00Z"},
    ]


@pytest.fixture
def practice_entries() -> List[Dict[str, Any]]:
    """Corner-three pull-ups under pressure, a mid-range catch drill and a FT set."""
    return [
        {
            "makes": 2,
            "attempts": 4,
            "zone_id": "left_corner_3",
            "is_three": True,
            "shot_type": "pull-up jumper",
            "pressured": True,
            "ts": "2026-02-05T10:00:00Z",
        },
        {
            "makes": 1,
            "attempts": 2,
            "zone_id": "center_mid",
            "is_three": False,
            "shot_type": "catch",
            "pressured": False,
            "ts": "2026-02-05T10:05:00Z",
        },
        {
            "makes": 3,
            "attempts": 4,
            "zone_id": "free_throw",
            "shot_type": "Free Throw",
            "ts": "2026-02-05T10:06:00Z",
        },
    ]


@pytest.fixture
def game_events_df(game_events) -> pd.DataFrame:
    return pd.DataFrame(game_events)
