"""
Gameplay settings for Grid Invaders.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping


class ConfigError(ValueError):
    """Raised when settings cannot produce a playable world."""


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class GameSettings:
    """
    Every tunable constant of the simulation.

    Sizes and positions are measured in board cells. The defaults describe
    an 80x24 board with a 5x6 squad of 30 invaders.
    """

    # board
    board_width: int = 80
    board_height: int = 24

    # player
    player_width: int = 3
    player_height: int = 1
    player_speed: int = 2
    initial_lives: int = 3

    # enemies
    enemy_width: int = 3
    enemy_height: int = 1
    enemy_health: int = 1
    max_enemies: int = 55
    initial_enemies: int = 30
    enemy_rows: int = 5
    enemy_cols: int = 6
    enemy_start_x: int = 2
    enemy_start_y: int = 2
    enemy_spacing_x: int = 12
    enemy_spacing_y: int = 3
    enemy_move_down: int = 1

    # enemy march cadence
    enemy_base_speed: int = 1
    enemy_speed_increase_threshold: int = 10
    enemy_fastest_threshold: int = 5
    enemy_cadence_base: int = 10

    # projectiles
    max_projectiles: int = 100
    max_enemy_projectiles: int = 30
    enemy_projectile_speed: int = 1
    enemy_fire_rate: int = 50
    enemy_fire_attempts: int = 5

    # shields
    shield_count: int = 4
    shield_width: int = 4
    shield_height: int = 1
    shield_health: int = 3
    shield_hit_width: int = 6
    shield_hit_height: int = 2
    shield_base_offset: int = 15
    shield_row_jitter: int = 4
    legacy_narrow_shields: bool = False

    # scoring and progression
    points_per_enemy: int = 10
    points_level_bonus: int = 100
    initial_level: int = 1
    max_level: int = 10

    @property
    def player_start(self) -> tuple[int, int]:
        """Top-left cell of a freshly spawned ship."""
        return (
            self.board_width // 2 - self.player_width // 2,
            self.board_height - 2,
        )

    @property
    def game_over_row(self) -> int:
        """Row an invader must reach for the player to lose."""
        return self.board_height - 2

    @property
    def fastest_speed(self) -> int:
        return self.enemy_base_speed + 2

    def validate(self) -> "GameSettings":
        """
        Check that a world can be built from these settings.

        :return: The same settings, for chaining.
        :rtype: GameSettings

        :raises ConfigError: If any value is out of range.
        """
        positive = (
            "board_width",
            "board_height",
            "player_width",
            "player_height",
            "enemy_width",
            "enemy_height",
            "enemy_health",
            "max_enemies",
            "enemy_rows",
            "enemy_cols",
            "enemy_cadence_base",
            "max_projectiles",
            "max_enemy_projectiles",
            "enemy_projectile_speed",
            "enemy_fire_rate",
            "enemy_fire_attempts",
            "shield_width",
            "shield_height",
            "shield_health",
            "initial_level",
            "max_level",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

        non_negative = (
            "player_speed",
            "initial_lives",
            "initial_enemies",
            "enemy_move_down",
            "enemy_base_speed",
            "shield_count",
            "shield_row_jitter",
            "points_per_enemy",
            "points_level_bonus",
        )
        for name in non_negative:
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")

        if self.initial_enemies > self.max_enemies:
            raise ConfigError(
                f"initial_enemies ({self.initial_enemies}) exceeds "
                f"max_enemies ({self.max_enemies})"
            )
        if self.fastest_speed >= self.enemy_cadence_base:
            raise ConfigError(
                "enemy_cadence_base must be larger than the fastest speed tier"
            )
        if self.player_width > self.board_width:
            raise ConfigError("player_width is wider than the board")
        if self.shield_width > self.board_width:
            raise ConfigError("shield_width is wider than the board")
        if self.board_height < 3:
            raise ConfigError("board_height must leave room for the ship row")
        return self

    def with_overrides(self, **overrides: Any) -> "GameSettings":
        """Return a validated copy with some fields replaced."""
        return replace(self, **overrides).validate()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameSettings":
        """
        Build settings from a flat mapping of field names.

        Keys mapped to ``None`` keep their default.

        :param data: Field overrides.
        :type data: Mapping[str, Any]

        :return: Validated settings.
        :rtype: GameSettings

        :raises ConfigError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")

        values = {k: v for k, v in data.items() if v is not None}
        return cls(**values).validate()

    @classmethod
    def from_file(cls, path: str | Path) -> "GameSettings":
        """
        Load settings from a JSON object stored in *path*.

        :raises ConfigError: If the file is not a JSON object or holds bad values.
        """
        try:
            with open(path, "r", encoding="utf-8") as fp:
                data = json.load(fp)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a JSON object")
        return cls.from_dict(data)


DEFAULT_SETTINGS = GameSettings()
