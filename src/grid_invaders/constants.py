"""
Constants for the game process.
"""

from __future__ import annotations

FPS = 60
FRAME_TIME = 1.0 / FPS

IDLE_SLEEP = 0.005
GAME_OVER_POLL = 0.05

SCORES_FILE = "scores.txt"
LOG_FILE = "grid_invaders.log"
START_LEVEL_ENV = "START_LEVEL"

MIN_TERM_SIZE = (100, 25)
CELL_SIZE = 24

CHAR_PLAYER = "^"
CHAR_ENEMY = "#"
CHAR_PROJECTILE = "|"
CHAR_ENEMY_PROJECTILE = "v"
CHAR_SHIELD = "#"
