import math

import pandas as pd
import pytest

from hoop_goals.metrics import aggregate_game_events
from hoop_goals.metrics.game import GAME_COUNTERS


@pytest.mark.parametrize("events", [[], None])
def test_empty_input_is_all_zero(events):
    stats = aggregate_game_events(events)

    for key in GAME_COUNTERS:
        assert stats[key] == 0, key
    for key in ("fg_pct", "efg_pct", "three_pct", "ft_pct"):
        assert stats[key] == 0
        assert not math.isnan(stats[key])
    assert stats["zone_fgm"] == {}
    assert stats["zone_fga"] == {}


def test_counts_assists_rebounds_steals():
    events = [
        {"type": "assist"},
        {"type": "assist"},
        {"type": "rebound"},
        {"type": "rebound"},
        {"type": "rebound"},
        {"type": "steal"},
    ]

    stats = aggregate_game_events(events)

    assert (stats["assists"], stats["rebounds"], stats["steals"]) == (2, 3, 1)
    assert stats["fga"] == 0


def test_field_goals_and_fg_pct(make_shot):
    events = [make_shot(True, False), make_shot(False, False), make_shot(True, False)]

    stats = aggregate_game_events(events)

    assert stats["fgm"] == 2
    assert stats["fga"] == 3
    assert stats["fg_pct"] == pytest.approx(66.6667, abs=1e-3)


def test_three_point_split(make_shot):
    events = [make_shot(True, True), make_shot(False, True), make_shot(True, True), make_shot(False, True)]

    stats = aggregate_game_events(events)

    assert stats["threes_made"] == 2
    assert stats["threes_att"] == 4
    assert stats["three_pct"] == 50


def test_efg_weights_threes(make_shot):
    """(2 + 0.5 * 1) / 3 -> 83.33%."""
    events = [make_shot(True, False), make_shot(True, True), make_shot(False, False)]

    stats = aggregate_game_events(events)

    assert stats["efg_pct"] == pytest.approx(250 / 3)


def test_free_throws_kept_out_of_field_goals(make_shot):
    events = [
        make_shot(True, False),
        make_shot(False, False),
        {"type": "freethrow", "made": True},
        {"type": "freethrow", "made": True},
        {"type": "freethrow", "made": False},
    ]

    stats = aggregate_game_events(events)

    assert (stats["fgm"], stats["fga"]) == (1, 2)
    assert (stats["ft_makes"], stats["ft_att"]) == (2, 3)
    assert stats["ft_pct"] == pytest.approx(200 / 3)


def test_total_points(make_shot):
    events = [
        make_shot(True, False),
        make_shot(True, True),
        make_shot(False, False),
        {"type": "freethrow", "made": True},
        {"type": "freethrow", "made": False},
        {"type": "freethrow", "made": True},
    ]

    assert aggregate_game_events(events)["total_points"] == 7


def test_zone_buckets(make_shot):
    events = [
        make_shot(True, False, zone_id="left_wing_mid"),
        make_shot(False, False, zone_id="left_wing_mid"),
        make_shot(True, True, zone_id="left_corner_3"),
        make_shot(False, False, zone_id="nail"),
    ]

    stats = aggregate_game_events(events)

    assert stats["zone_fga"] == {"left_wing_mid": 2, "left_corner_3": 1, "nail": 1}
    # Zones without a make are absent rather than zero.
    assert stats["zone_fgm"] == {"left_wing_mid": 1, "left_corner_3": 1}


def test_missing_zone_goes_to_unknown(make_shot):
    stats = aggregate_game_events([make_shot(True, False), make_shot(False, False, zone_id="")])

    assert stats["zone_fgm"] == {"unknown": 1}
    assert stats["zone_fga"] == {"unknown": 2}


@pytest.mark.parametrize(
    "shot_type, counted",
    [
        ("Off-Dribble", True),
        ("off dribble", True),
        ("Pull-Up", True),
        ("pull up three", True),
        ("dribble pull-up", True),
        ("Catch & Shoot", False),
        ("Layup", False),
        ("", False),
        (None, False),
    ],
)
def test_off_dribble_detection(make_shot, shot_type, counted):
    stats = aggregate_game_events([make_shot(True, False, shot_type=shot_type)])

    assert stats["off_dribble_att"] == int(counted)
    assert stats["off_dribble_makes"] == int(counted)


def test_shot_type_camel_case_fallback(make_shot):
    stats = aggregate_game_events([make_shot(True, False, shotType="pull-up jumper")])

    assert stats["off_dribble_makes"] == 1
    assert stats["off_dribble_att"] == 1


def test_pressured_requires_true_flag(make_shot):
    events = [
        make_shot(True, False, pressured=True),
        make_shot(False, False, pressured=True),
        make_shot(True, False, pressured=True),
        make_shot(True, False, pressured=False),
        make_shot(True, False, pressured="yes"),
        make_shot(True, False),
    ]

    stats = aggregate_game_events(events)

    assert stats["pressured_makes"] == 2
    assert stats["pressured_att"] == 3


def test_mixed_event_log(game_events):
    stats = aggregate_game_events(game_events)

    assert (stats["fgm"], stats["fga"]) == (2, 3)
    assert (stats["threes_made"], stats["threes_att"]) == (1, 2)
    assert (stats["ft_makes"], stats["ft_att"]) == (1, 1)
    assert (stats["assists"], stats["rebounds"], stats["steals"]) == (1, 1, 1)
    assert stats["total_points"] == 6
    assert (stats["off_dribble_makes"], stats["off_dribble_att"]) == (2, 2)
    assert (stats["pressured_makes"], stats["pressured_att"]) == (1, 1)


def test_malformed_rows_are_ignored(make_shot):
    events = [
        None,
        "shot",
        {"type": "block"},
        {"type": None},
        {},
        {"type": "shot"},  # no made flag -> a miss
        make_shot(True, False),
    ]

    stats = aggregate_game_events(events)

    assert stats["fga"] == 2
    assert stats["fgm"] == 1
    assert stats["total_points"] == 2


def test_makes_never_exceed_attempts_and_pcts_in_range(game_events):
    stats = aggregate_game_events(game_events)

    for made, att in [
        ("fgm", "fga"),
        ("threes_made", "threes_att"),
        ("ft_makes", "ft_att"),
        ("off_dribble_makes", "off_dribble_att"),
        ("pressured_makes", "pressured_att"),
    ]:
        assert stats[made] <= stats[att]
    for key in ("fg_pct", "efg_pct", "three_pct", "ft_pct"):
        assert 0 <= stats[key] <= 100


def test_input_not_mutated(game_events):
    snapshot = [dict(e) for e in game_events]

    aggregate_game_events(game_events)

    assert game_events == snapshot


def test_dataframe_input_matches_list_input(game_events, game_events_df):
    """NaN cells from missing columns behave like absent fields."""
    from_list = aggregate_game_events(game_events)
    from_df = aggregate_game_events(game_events_df)

    assert from_df == from_list


def test_dataframe_input_with_nan_made_column():
    df = pd.DataFrame(
        [
            {"type": "shot", "made": True, "is_three": True},
            {"type": "shot", "made": float("nan"), "is_three": float("nan")},
        ]
    )

    stats = aggregate_game_events(df)

    assert (stats["fgm"], stats["fga"], stats["threes_att"]) == (1, 2, 1)
