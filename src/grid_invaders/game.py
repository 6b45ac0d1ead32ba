"""
Grid Invaders game: the public face of the simulation.
"""

from __future__ import annotations

import random

from mini_arcade_core.utils import logger

from grid_invaders.settings import DEFAULT_SETTINGS, GameSettings
from grid_invaders.snapshot import GameSnapshot
from grid_invaders.systems import advance_level, build_pipeline, jump_to_level
from grid_invaders.utils import clamp
from grid_invaders.world import (
    InvadersTickContext,
    InvadersWorld,
    fire_projectile,
    new_world,
)


class InvadersGame:
    """
    Owns one world and advances it.

    Commands (move, shoot, pause) may be applied any number of times
    between two calls to :meth:`update`, which advances exactly one frame.
    """

    def __init__(
        self,
        settings: GameSettings = DEFAULT_SETTINGS,
        rng: random.Random | None = None,
    ):
        """
        :param settings: Gameplay settings.
        :type settings: GameSettings

        :param rng: Random source for shield placement and shooter choice.
        :type rng: random.Random | None

        :raises ConfigError: If the settings cannot produce a world.
        """
        self.settings = settings
        self.rng = rng or random.Random()
        self.world: InvadersWorld = new_world(settings, self.rng)
        self._pipeline = build_pipeline()
        logger.debug(
            f"Initialized game: {self.world.enemy_count} enemies, "
            f"{len(self.world.shields)} shields"
        )

    def initialize(self, level: int | None = None):
        """
        Replace the world with a fresh one: full lives, zero score, new
        squad and shields.

        :param level: Level number to record, defaults to
            ``settings.initial_level``. No bonus is awarded.
        :type level: int | None
        """
        self.world = new_world(self.settings, self.rng)
        if level is not None:
            self.world.level = level

    def reset(self):
        """Start over from the initial level with fresh lives and score."""
        self.initialize()
        logger.info("Game reset")

    def _playable(self) -> bool:
        return not (self.world.paused or self.world.game_over)

    def move_left(self):
        if not self._playable():
            return
        player = self.world.player
        player.x = clamp(
            player.x - self.settings.player_speed,
            0,
            self.settings.board_width - self.settings.player_width,
        )

    def move_right(self):
        if not self._playable():
            return
        player = self.world.player
        player.x = clamp(
            player.x + self.settings.player_speed,
            0,
            self.settings.board_width - self.settings.player_width,
        )

    def shoot(self):
        """Fire from the ship's muzzle if the player pool has room."""
        if not self._playable():
            return

        s = self.settings
        player = self.world.player
        proj = fire_projectile(
            self.world.projectiles,
            s.max_projectiles,
            player.x + s.player_width // 2,
            player.y - 1,
        )
        if proj is None:
            logger.debug("Player projectile pool full, shot dropped")
            return
        logger.debug(f"Player shot from ({proj.x},{proj.y})")

    def toggle_pause(self):
        if self.world.game_over:
            return
        self.world.paused = not self.world.paused
        logger.debug(f"Paused: {self.world.paused}")

    def update(self):
        """Advance the simulation by one frame."""
        if not self._playable():
            return
        self._pipeline.step(InvadersTickContext(world=self.world, rng=self.rng))

    def next_level(self):
        advance_level(self.world, self.rng)

    def set_level(self, level: int):
        """
        Start at *level* instead of level one. Meant for game start only.

        :param level: 1-based level number.
        :type level: int

        :raises ValueError: If *level* is lower than 1.
        """
        jump_to_level(self.world, level, self.rng)

    def is_over(self) -> bool:
        return self.world.game_over or self.world.player.health <= 0

    def is_won(self) -> bool:
        return self.world.player_won

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.of(self.world)
