"""Tests for the frame system order."""

from __future__ import annotations

from grid_invaders.entities import Faction
from grid_invaders.systems import (
    EnemyFireSystem,
    EnemyMarchSystem,
    LevelCompleteSystem,
    ProjectileEnemyCollisionSystem,
    ProjectileShieldCollisionSystem,
    build_pipeline,
)


def test_systems_run_in_frame_order():
    systems = build_pipeline().systems
    orders = [s.order for s in systems]

    assert orders == sorted(orders)
    assert len({s.name for s in systems}) == len(systems)
    assert isinstance(systems[1], EnemyMarchSystem)
    assert isinstance(systems[2], EnemyFireSystem)
    assert isinstance(systems[-1], LevelCompleteSystem)


def test_invader_kills_resolve_before_shield_hits():
    systems = build_pipeline().systems
    kinds = [type(s) for s in systems]
    shield_passes = [s for s in systems if isinstance(s, ProjectileShieldCollisionSystem)]

    assert kinds.index(ProjectileEnemyCollisionSystem) < systems.index(shield_passes[0])
    assert [s.faction for s in shield_passes] == [Faction.PLAYER, Faction.ENEMY]
