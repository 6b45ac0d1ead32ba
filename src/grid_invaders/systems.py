"""
Grid Invaders per-frame systems.

Each system is a small dataclass with a ``name``, an ``order`` and a
``step(ctx)`` method. ``build_pipeline`` wires them into a
``SystemPipeline`` that runs them in ascending ``order`` once per frame:

  10  frame counter
  20  enemy march (speed tier, cadence, edge bounce, descent)
  25  enemy fire (fire timer, random shooter probe)
  30  player projectile advance + compaction
  35  enemy projectile advance + compaction
  40  player projectile x enemy
  41  player projectile x shield
  42  enemy projectile x player
  43  enemy projectile x shield
  50  level completion
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.scenes.systems.phases import SystemPhase
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline
from mini_arcade_core.utils import logger

from grid_invaders.entities import Faction, Projectile
from grid_invaders.utils import overlaps
from grid_invaders.world import (
    InvadersTickContext,
    InvadersWorld,
    fire_projectile,
    reset_battlefield,
)


def compact(pool: list[Projectile]) -> list[Projectile]:
    """Drop inactive projectiles, keeping the survivors in order."""
    return [p for p in pool if p.active]


def enemy_speed_tier(world: InvadersWorld) -> int:
    """
    Speed tier for the current squad size; fewer survivors march faster.
    """
    s = world.settings
    speed = s.enemy_base_speed
    if world.alive_enemy_count <= s.enemy_speed_increase_threshold:
        speed = s.enemy_base_speed + 1
    if world.alive_enemy_count <= s.enemy_fastest_threshold:
        speed = s.enemy_base_speed + 2
    return speed


def advance_level(world: InvadersWorld, rng: random.Random):
    """
    Move on to the next level, awarding the level bonus.

    Going past the last level wins the game and leaves the board as is.

    :param world: World to advance.
    :type world: InvadersWorld

    :param rng: Random source for the new shield layout.
    :type rng: random.Random
    """
    s = world.settings
    world.level += 1
    world.player.score += s.points_level_bonus

    if world.level > s.max_level:
        world.player_won = True
        world.game_over = True
        logger.info(f"All {s.max_level} levels cleared, final score {world.player.score}")
        return

    reset_battlefield(world, rng)
    logger.info(f"Level {world.level} started, score {world.player.score}")


def jump_to_level(world: InvadersWorld, level: int, rng: random.Random):
    """
    Start directly at *level*, crediting the bonus for every skipped level.

    :raises ValueError: If *level* is lower than 1.
    """
    if level < 1:
        raise ValueError(f"level must be at least 1, got {level}")

    world.level = level
    world.player.score += world.settings.points_level_bonus * (level - 1)
    reset_battlefield(world, rng)
    logger.info(f"Jumped to level {level}, score {world.player.score}")


@dataclass
class FrameCounterSystem:
    name: str = "grid_invaders_frame_counter"
    phase: int = SystemPhase.SIMULATION
    order: int = 10

    def step(self, ctx: InvadersTickContext):
        ctx.world.frame_count += 1


@dataclass
class EnemyMarchSystem:
    """
    Move the squad as a formation:
    - step sideways every ``cadence_base - speed_tier`` frames
    - if any invader touches a wall -> reverse direction and drop down
    - an invader reaching the ship row ends the game
    """

    name: str = "grid_invaders_enemy_march"
    phase: int = SystemPhase.SIMULATION
    order: int = 20

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        s = w.settings

        w.enemy_move_counter += 1
        if w.enemy_move_counter < s.enemy_cadence_base - enemy_speed_tier(w):
            return
        w.enemy_move_counter = 0

        hit_edge = False
        for e in w.active_enemies:
            e.x += w.enemy_direction
            if e.x <= 0 or e.x + s.enemy_width >= s.board_width:
                hit_edge = True

        if not hit_edge:
            return

        w.enemy_direction *= -1
        for e in w.active_enemies:
            e.y += s.enemy_move_down
            if e.y >= s.game_over_row and not w.game_over:
                w.game_over = True
                logger.info(f"Invaders reached row {e.y}, game over")


@dataclass
class EnemyFireSystem:
    """
    Every ``enemy_fire_rate`` frames a random live invader shoots.

    The shooter is found by probing forward from a random slot, wrapping
    around, for at most ``enemy_fire_attempts`` slots.
    """

    name: str = "grid_invaders_enemy_fire"
    phase: int = SystemPhase.SIMULATION
    order: int = 25

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        s = w.settings

        w.enemy_fire_timer += 1
        if w.enemy_fire_timer < s.enemy_fire_rate:
            return
        w.enemy_fire_timer = 0

        if w.alive_enemy_count <= 0 or not w.enemies:
            return

        start = ctx.rng.randrange(w.enemy_count)
        for attempt in range(s.enemy_fire_attempts):
            shooter = w.enemies[(start + attempt) % w.enemy_count]
            if not shooter.active:
                continue

            proj = fire_projectile(
                w.enemy_projectiles,
                s.max_enemy_projectiles,
                shooter.x + s.enemy_width // 2,
                shooter.y + 1,
            )
            if proj is None:
                logger.debug("Enemy projectile pool full, shot dropped")
            else:
                logger.debug(
                    f"Enemy at ({shooter.x},{shooter.y}) fired from ({proj.x},{proj.y})"
                )
            return

        logger.debug(f"No shooter found from slot {start}")


@dataclass
class PlayerProjectileMoveSystem:
    """Player shots climb one row per frame so they never skip an invader."""

    name: str = "grid_invaders_player_projectile_move"
    phase: int = SystemPhase.SIMULATION
    order: int = 30

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        for p in w.projectiles:
            if not p.active:
                continue
            p.y -= 1
            if p.y < 0:
                p.active = False
        w.projectiles = compact(w.projectiles)


@dataclass
class EnemyProjectileMoveSystem:
    name: str = "grid_invaders_enemy_projectile_move"
    phase: int = SystemPhase.SIMULATION
    order: int = 35

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        s = w.settings
        for p in w.enemy_projectiles:
            if not p.active:
                continue
            p.y += s.enemy_projectile_speed
            if p.y >= s.board_height:
                p.active = False
        w.enemy_projectiles = compact(w.enemy_projectiles)


@dataclass
class ProjectileEnemyCollisionSystem:
    """Kills invaders hit by player shots and scores them."""

    name: str = "grid_invaders_projectile_enemy_collision"
    phase: int = SystemPhase.SIMULATION
    order: int = 40

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        s = w.settings

        for p in w.projectiles:
            if not p.active:
                continue

            for e in w.enemies:
                if not e.active:
                    continue

                if overlaps(p.x, p.y, 1, 1, e.x, e.y, s.enemy_width, s.enemy_height):
                    p.active = False
                    e.active = False
                    w.alive_enemy_count -= 1
                    w.player.score += s.points_per_enemy
                    logger.debug(f"Hit! Projectile ({p.x},{p.y}) killed enemy ({e.x},{e.y})")
                    break


@dataclass
class ProjectileShieldCollisionSystem:
    """
    Chips shield blocks hit by either faction's shots.

    Blocks use a hit-box wider than the block itself. A shot chips every
    live block whose hit-box it overlaps, then is spent.
    """

    faction: Faction = Faction.PLAYER
    name: str = "grid_invaders_projectile_shield_collision"
    phase: int = SystemPhase.SIMULATION
    order: int = 41

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        s = w.settings
        pool = w.projectiles if self.faction is Faction.PLAYER else w.enemy_projectiles

        for p in pool:
            if not p.active:
                continue

            for block in (b for shield in w.shields for b in shield.alive_blocks):
                if overlaps(
                    p.x,
                    p.y,
                    1,
                    1,
                    block.x,
                    block.y,
                    s.shield_hit_width,
                    s.shield_hit_height,
                ):
                    p.active = False
                    block.health -= 1
                    logger.debug(
                        f"{self.faction.value} shot hit shield block "
                        f"({block.x},{block.y}), health {block.health}"
                    )


@dataclass
class EnemyProjectilePlayerCollisionSystem:
    name: str = "grid_invaders_enemy_projectile_player_collision"
    phase: int = SystemPhase.SIMULATION
    order: int = 42

    def step(self, ctx: InvadersTickContext):
        w = ctx.world
        s = w.settings
        player = w.player

        for p in w.enemy_projectiles:
            if not p.active:
                continue

            if overlaps(p.x, p.y, 1, 1, player.x, player.y, s.player_width, s.player_height):
                p.active = False
                player.health = max(0, player.health - 1)
                logger.debug(f"Player hit at ({player.x},{player.y}), lives left {player.health}")

                if player.health <= 0 and not w.game_over:
                    w.game_over = True
                    logger.info(f"Out of lives, final score {player.score}")


@dataclass
class LevelCompleteSystem:
    name: str = "grid_invaders_level_complete"
    phase: int = SystemPhase.SIMULATION
    order: int = 50

    def step(self, ctx: InvadersTickContext):
        if ctx.world.alive_enemy_count <= 0:
            advance_level(ctx.world, ctx.rng)


def build_pipeline() -> SystemPipeline[InvadersTickContext]:
    """Wire every frame system into a pipeline sorted by ``order``."""
    pipeline: SystemPipeline[InvadersTickContext] = SystemPipeline()
    pipeline.extend(
        [
            FrameCounterSystem(),
            EnemyMarchSystem(),
            EnemyFireSystem(),
            PlayerProjectileMoveSystem(),
            EnemyProjectileMoveSystem(),
            ProjectileEnemyCollisionSystem(),
            ProjectileShieldCollisionSystem(faction=Faction.PLAYER, order=41),
            EnemyProjectilePlayerCollisionSystem(),
            ProjectileShieldCollisionSystem(
                faction=Faction.ENEMY,
                name="grid_invaders_enemy_projectile_shield_collision",
                order=43,
            ),
            LevelCompleteSystem(),
        ]
    )
    return pipeline
