"""
Grid Invaders entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Faction(str, Enum):
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass
class Player:
    """
    Player ship.

    ``health`` counts remaining lives.
    """

    x: int
    y: int
    health: int
    score: int = 0


@dataclass
class Enemy:
    """
    Invader slot.

    Destroyed invaders stay in place with ``active`` cleared so indices
    remain stable for the rest of the frame.
    """

    x: int
    y: int
    active: bool = True
    health: int = 1


@dataclass
class Projectile:
    x: int
    y: int
    active: bool = True


@dataclass
class ShieldBlock:
    x: int
    y: int
    health: int  # 0 = destroyed

    @property
    def alive(self) -> bool:
        return self.health > 0


@dataclass
class Shield:
    """
    A small field of shield blocks.
    """

    blocks: list[ShieldBlock] = field(default_factory=list)

    @property
    def alive_blocks(self) -> list[ShieldBlock]:
        return [b for b in self.blocks if b.alive]


__all__ = [
    "Enemy",
    "Faction",
    "Player",
    "Projectile",
    "Shield",
    "ShieldBlock",
]
