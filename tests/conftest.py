"""Shared fixtures for Grid Invaders tests."""

from __future__ import annotations

import random

import pytest

from grid_invaders.game import InvadersGame
from grid_invaders.settings import GameSettings
from grid_invaders.world import InvadersTickContext


class FixedRandom(random.Random):
    """Random source whose single-argument ``randrange`` always answers ``slot``."""

    def __init__(self, slot: int = 0, seed: int = 0):
        super().__init__(seed)
        self.slot = slot

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            return self.slot
        return super().randrange(start, stop, step)


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings()


@pytest.fixture
def quiet_settings() -> GameSettings:
    """Invaders that neither march nor shoot within a test's lifetime."""
    return GameSettings(enemy_cadence_base=10_000, enemy_fire_rate=10_000)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def game(settings, rng) -> InvadersGame:
    return InvadersGame(settings, rng)


@pytest.fixture
def quiet_game(quiet_settings, rng) -> InvadersGame:
    g = InvadersGame(quiet_settings, rng)
    g.world.shields = []
    return g


def tick_context(game: InvadersGame) -> InvadersTickContext:
    return InvadersTickContext(world=game.world, rng=game.rng)


def kill(world, *indices: int):
    """Deactivate enemies by slot, keeping the alive counter honest."""
    for i in indices:
        if world.enemies[i].active:
            world.enemies[i].active = False
            world.alive_enemy_count -= 1
