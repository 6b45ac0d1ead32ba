"""Tests for projectile advance, expiry and pool compaction."""

from __future__ import annotations

from grid_invaders.entities import Enemy, Projectile
from grid_invaders.game import InvadersGame
from grid_invaders.settings import GameSettings
from grid_invaders.systems import compact


def test_player_projectile_climbs_one_row_per_frame(quiet_game):
    quiet_game.shoot()
    proj = quiet_game.world.projectiles[0]
    start_y = proj.y

    quiet_game.update()
    assert proj.y == start_y - 1
    quiet_game.update()
    assert proj.y == start_y - 2


def test_player_projectile_leaving_top_is_removed(quiet_game):
    world = quiet_game.world
    world.enemies = [Enemy(x=70, y=20)]
    world.alive_enemy_count = 1
    world.projectiles = [Projectile(x=0, y=0), Projectile(x=1, y=5)]

    quiet_game.update()

    assert [(p.x, p.y) for p in world.projectiles] == [(1, 4)]


def test_enemy_projectile_falls_and_expires_at_bottom(quiet_game):
    world = quiet_game.world
    world.enemy_projectiles = [Projectile(x=0, y=10), Projectile(x=1, y=23)]

    quiet_game.update()

    assert [(p.x, p.y) for p in world.enemy_projectiles] == [(0, 11)]


def test_enemy_projectile_speed_is_configurable(rng):
    g = InvadersGame(
        GameSettings(enemy_projectile_speed=3, enemy_cadence_base=10_000, enemy_fire_rate=10_000),
        rng,
    )
    g.world.shields = []
    g.world.enemy_projectiles = [Projectile(x=0, y=2)]
    g.update()
    assert g.world.enemy_projectiles[0].y == 5


def test_compaction_is_a_stable_filter():
    a, b, c, d = (Projectile(x=i, y=i) for i in range(4))
    b.active = False
    d.active = False

    kept = compact([a, b, c, d])

    assert kept == [a, c]
    assert kept[0] is a and kept[1] is c


def test_compaction_never_grows_the_pool():
    pool = [Projectile(x=i, y=i, active=i % 3 != 0) for i in range(10)]
    assert len(compact(pool)) <= len(pool)
    assert compact([]) == []


def test_pools_stay_within_capacity_over_many_frames(rng):
    g = InvadersGame(GameSettings(enemy_fire_rate=1, max_projectiles=5, max_enemy_projectiles=4), rng)
    for _ in range(200):
        g.shoot()
        g.shoot()
        g.update()
        if g.is_over():
            break
        assert g.world.projectile_count <= 5
        assert g.world.enemy_projectile_count <= 4
        assert g.world.alive_enemy_count == sum(e.active for e in g.world.enemies)
