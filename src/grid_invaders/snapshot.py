"""
Read-only view of the world handed to renderers.
"""

from __future__ import annotations

from dataclasses import dataclass

from grid_invaders.world import InvadersWorld


@dataclass(frozen=True)
class EntityView:
    x: int
    y: int
    active: bool = True


@dataclass(frozen=True)
class BlockView:
    x: int
    y: int
    health: int


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable copy of everything a renderer may draw.

    Taken between frames, so it never observes a half-applied update.
    """

    board_width: int
    board_height: int
    player_width: int
    player_height: int
    enemy_width: int
    enemy_height: int

    player: EntityView
    lives: int
    score: int
    level: int
    enemies: tuple[EntityView, ...]
    alive_enemy_count: int
    projectiles: tuple[EntityView, ...]
    enemy_projectiles: tuple[EntityView, ...]
    shields: tuple[tuple[BlockView, ...], ...]

    paused: bool
    game_over: bool
    player_won: bool

    @classmethod
    def of(cls, world: InvadersWorld) -> "GameSnapshot":
        s = world.settings
        return cls(
            board_width=s.board_width,
            board_height=s.board_height,
            player_width=s.player_width,
            player_height=s.player_height,
            enemy_width=s.enemy_width,
            enemy_height=s.enemy_height,
            player=EntityView(world.player.x, world.player.y),
            lives=world.player.health,
            score=world.player.score,
            level=world.level,
            enemies=tuple(EntityView(e.x, e.y, e.active) for e in world.enemies),
            alive_enemy_count=world.alive_enemy_count,
            projectiles=tuple(EntityView(p.x, p.y, p.active) for p in world.projectiles),
            enemy_projectiles=tuple(
                EntityView(p.x, p.y, p.active) for p in world.enemy_projectiles
            ),
            shields=tuple(
                tuple(BlockView(b.x, b.y, b.health) for b in shield.blocks)
                for shield in world.shields
            ),
            paused=world.paused,
            game_over=world.game_over,
            player_won=world.player_won,
        )
