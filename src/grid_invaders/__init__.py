"""
Grid Invaders: a fixed-timestep invaders simulation on a cell grid.
"""

from __future__ import annotations

from grid_invaders.commands import Command, Controller
from grid_invaders.game import InvadersGame
from grid_invaders.settings import ConfigError, GameSettings
from grid_invaders.snapshot import GameSnapshot

__all__ = [
    "Command",
    "ConfigError",
    "Controller",
    "GameSettings",
    "GameSnapshot",
    "InvadersGame",
]
