"""
Grid Invaders world state and the builders that populate it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from mini_arcade_core.utils import logger

from grid_invaders.entities import Enemy, Player, Projectile, Shield, ShieldBlock
from grid_invaders.settings import DEFAULT_SETTINGS, GameSettings

LEGACY_SHIELD_BLOCKS = 2


# pylint: disable=too-many-instance-attributes
@dataclass
class InvadersWorld:
    """
    Grid Invaders World

    Owns every entity plus the progress counters. Holds no behaviour
    beyond a few derived counts; systems mutate it.
    """

    settings: GameSettings
    player: Player
    enemies: list[Enemy] = field(default_factory=list)
    alive_enemy_count: int = 0
    projectiles: list[Projectile] = field(default_factory=list)
    enemy_projectiles: list[Projectile] = field(default_factory=list)
    shields: list[Shield] = field(default_factory=list)

    level: int = 1
    frame_count: int = 0
    enemy_fire_timer: int = 0
    enemy_move_counter: int = 0
    enemy_direction: int = 1  # 1 for right, -1 for left

    paused: bool = False
    game_over: bool = False
    player_won: bool = False

    @property
    def enemy_count(self) -> int:
        return len(self.enemies)

    @property
    def projectile_count(self) -> int:
        return len(self.projectiles)

    @property
    def enemy_projectile_count(self) -> int:
        return len(self.enemy_projectiles)

    @property
    def active_enemies(self) -> list[Enemy]:
        return [e for e in self.enemies if e.active]


@dataclass
class InvadersTickContext:
    """
    Per-frame context handed to every system.
    """

    world: InvadersWorld
    rng: random.Random

    @property
    def settings(self) -> GameSettings:
        return self.world.settings


def spawn_player(settings: GameSettings) -> Player:
    x, y = settings.player_start
    return Player(x=x, y=y, health=settings.initial_lives, score=0)


def spawn_enemies(world: InvadersWorld):
    """
    Fill the squad grid left-to-right, top-to-bottom until the grid or the
    initial enemy cap runs out.
    """
    s = world.settings
    cap = min(s.initial_enemies, s.max_enemies)

    enemies: list[Enemy] = []
    for row in range(s.enemy_rows):
        for col in range(s.enemy_cols):
            if len(enemies) >= cap:
                break
            enemies.append(
                Enemy(
                    x=s.enemy_start_x + col * s.enemy_spacing_x,
                    y=s.enemy_start_y + row * s.enemy_spacing_y,
                    active=True,
                    health=s.enemy_health,
                )
            )

    world.enemies = enemies
    world.alive_enemy_count = len(enemies)
    world.enemy_direction = 1
    world.enemy_move_counter = 0
    logger.debug(f"Spawned {len(enemies)} enemies for level {world.level}")


def spawn_shields(world: InvadersWorld, rng: random.Random):
    """
    Drop shields at random columns a little above the ship row.

    :param world: World to populate.
    :type world: InvadersWorld

    :param rng: Random source used for shield columns and rows.
    :type rng: random.Random
    """
    s = world.settings
    block_total = s.shield_width * s.shield_height
    if s.legacy_narrow_shields:
        block_total = min(block_total, LEGACY_SHIELD_BLOCKS)

    shields: list[Shield] = []
    for _ in range(s.shield_count):
        left = rng.randint(0, s.board_width - s.shield_width)
        top = s.board_height - s.shield_base_offset - rng.randint(0, s.shield_row_jitter)

        blocks = [
            ShieldBlock(
                x=left + j % s.shield_width,
                y=top + j // s.shield_width,
                health=s.shield_health,
            )
            for j in range(block_total)
        ]
        shields.append(Shield(blocks=blocks))

    world.shields = shields


def reset_battlefield(world: InvadersWorld, rng: random.Random):
    """Clear both pools and rebuild the squad and shields in place."""
    world.projectiles = []
    world.enemy_projectiles = []
    spawn_enemies(world)
    spawn_shields(world, rng)


def new_world(
    settings: GameSettings = DEFAULT_SETTINGS,
    rng: random.Random | None = None,
) -> InvadersWorld:
    """
    Build a level-one world.

    :param settings: Settings to build from. Validated here.
    :type settings: GameSettings

    :param rng: Random source for shield placement.
    :type rng: random.Random | None

    :return: A freshly populated world.
    :rtype: InvadersWorld

    :raises ConfigError: If the settings cannot produce a world.
    """
    settings.validate()
    rng = rng or random.Random()

    world = InvadersWorld(
        settings=settings,
        player=spawn_player(settings),
        level=settings.initial_level,
    )
    reset_battlefield(world, rng)
    return world


def fire_projectile(
    pool: list[Projectile], capacity: int, x: int, y: int
) -> Projectile | None:
    """
    Append an active projectile unless the pool is full.

    :return: The new projectile, or None when the request was dropped.
    :rtype: Projectile | None
    """
    if len(pool) >= capacity:
        return None
    proj = Projectile(x=x, y=y, active=True)
    pool.append(proj)
    return proj
