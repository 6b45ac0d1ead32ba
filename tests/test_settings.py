"""Tests for gameplay settings loading and validation."""

from __future__ import annotations

import json

import pytest

from grid_invaders.settings import ConfigError, GameSettings


def test_defaults_describe_the_classic_board():
    s = GameSettings()
    assert (s.board_width, s.board_height) == (80, 24)
    assert s.initial_enemies == 30
    assert s.enemy_rows * s.enemy_cols == 30
    assert s.max_enemies == 55
    assert s.player_start == (39, 22)
    assert s.game_over_row == 22
    assert s.max_level == 10
    assert not s.legacy_narrow_shields


def test_from_dict_overrides_and_ignores_none():
    s = GameSettings.from_dict({"initial_lives": 5, "max_level": None})
    assert s.initial_lives == 5
    assert s.max_level == 10


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigError, match="bogus"):
        GameSettings.from_dict({"bogus": 1})


@pytest.mark.parametrize(
    "overrides",
    [
        {"initial_enemies": 60},
        {"board_width": 0},
        {"max_projectiles": 0},
        {"initial_lives": -1},
        {"enemy_cadence_base": 3},
        {"player_width": 81},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ConfigError):
        GameSettings.from_dict(overrides)


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


def test_from_file_reads_json_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"shield_count": 2, "legacy_narrow_shields": True}))

    s = GameSettings.from_file(path)
    assert s.shield_count == 2
    assert s.legacy_narrow_shields


def test_from_file_rejects_non_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ConfigError):
        GameSettings.from_file(path)


def test_from_file_rejects_broken_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        GameSettings.from_file(path)


def test_to_dict_round_trips_through_from_dict():
    s = GameSettings(initial_lives=7)
    assert GameSettings.from_dict(s.to_dict()) == s


def test_with_overrides_validates():
    assert GameSettings().with_overrides(max_level=3).max_level == 3
    with pytest.raises(ConfigError):
        GameSettings().with_overrides(enemy_rows=0)
