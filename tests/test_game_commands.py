"""Tests for player commands: move, shoot, pause."""

from __future__ import annotations


def test_move_left_clamps_at_zero(game):
    game.world.player.x = 0
    for _ in range(10):
        game.move_left()
    assert game.world.player.x == 0


def test_move_left_from_one_stops_at_zero(game):
    game.world.player.x = 1
    game.move_left()
    assert game.world.player.x == 0


def test_move_right_clamps_at_board_edge(game):
    for _ in range(100):
        game.move_right()
    assert game.world.player.x == game.settings.board_width - game.settings.player_width


def test_moves_by_player_speed(game):
    start = game.world.player.x
    game.move_right()
    assert game.world.player.x == start + 2
    game.move_left()
    game.move_left()
    assert game.world.player.x == start - 2


def test_moves_ignored_while_paused_or_over(game):
    start = game.world.player.x
    game.toggle_pause()
    game.move_left()
    game.move_right()
    assert game.world.player.x == start

    game.toggle_pause()
    game.world.game_over = True
    game.move_left()
    assert game.world.player.x == start


def test_shoot_spawns_at_muzzle(game):
    game.shoot()
    (proj,) = game.world.projectiles
    assert (proj.x, proj.y) == (game.world.player.x + 1, game.world.player.y - 1)
    assert proj.active


def test_shoot_at_capacity_is_dropped(game):
    for _ in range(game.settings.max_projectiles + 5):
        game.shoot()
    assert game.world.projectile_count == game.settings.max_projectiles


def test_shoot_ignored_while_paused(game):
    game.toggle_pause()
    game.shoot()
    assert game.world.projectiles == []


def test_toggle_pause_flips_and_freezes_update(game):
    game.toggle_pause()
    assert game.world.paused
    game.update()
    assert game.world.frame_count == 0

    game.toggle_pause()
    assert not game.world.paused
    game.update()
    assert game.world.frame_count == 1


def test_toggle_pause_ignored_after_game_over(game):
    game.world.game_over = True
    game.toggle_pause()
    assert not game.world.paused


def test_is_over_checks_flag_and_lives(game):
    assert not game.is_over()

    game.world.player.health = 0
    assert not game.world.game_over
    assert game.is_over()

    game.world.player.health = 3
    game.world.game_over = True
    assert game.is_over()
    assert not game.is_won()
