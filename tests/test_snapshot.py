"""Tests for the read-only snapshot handed to views."""

from __future__ import annotations

import dataclasses

import pytest

from grid_invaders.snapshot import GameSnapshot


def test_snapshot_mirrors_the_world(game):
    game.shoot()
    snap = game.snapshot()
    world = game.world

    assert (snap.board_width, snap.board_height) == (80, 24)
    assert (snap.player.x, snap.player.y) == (world.player.x, world.player.y)
    assert snap.lives == 3
    assert snap.score == 0
    assert snap.level == 1
    assert len(snap.enemies) == 30
    assert snap.alive_enemy_count == 30
    assert len(snap.projectiles) == 1
    assert len(snap.shields) == 4
    assert all(len(blocks) == 4 for blocks in snap.shields)
    assert not (snap.paused or snap.game_over or snap.player_won)


def test_snapshot_is_frozen(game):
    snap = game.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 99
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.player.x = 0


def test_snapshot_does_not_follow_later_changes(game):
    snap = game.snapshot()

    game.move_right()
    game.world.enemies[0].active = False
    game.world.shields[0].blocks[0].health = 0
    game.world.paused = True

    assert snap.player.x == 39
    assert snap.enemies[0].active
    assert snap.shields[0][0].health == 3
    assert not snap.paused


def test_snapshot_of_matches_game_snapshot(game):
    assert GameSnapshot.of(game.world) == game.snapshot()
