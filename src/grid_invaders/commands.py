"""
Player commands and the controller that applies them.
"""

from __future__ import annotations

from enum import Enum

from mini_arcade_core.utils import logger

from grid_invaders.game import InvadersGame


class Command(str, Enum):
    NONE = "none"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SHOOT = "shoot"
    PAUSE = "pause"
    QUIT = "quit"


class Controller:
    """
    Applies commands to a game and tracks whether the loop should keep going.
    """

    def __init__(self, game: InvadersGame):
        self.game = game
        self.running = True

    def execute(self, command: Command) -> bool:
        """
        Apply *command* to the game.

        :param command: Command to apply.
        :type command: Command

        :return: True if the command was recognised, False for NONE.
        :rtype: bool
        """
        if command is Command.MOVE_LEFT:
            self.game.move_left()
        elif command is Command.MOVE_RIGHT:
            self.game.move_right()
        elif command is Command.SHOOT:
            self.game.shoot()
        elif command is Command.PAUSE:
            self.game.toggle_pause()
        elif command is Command.QUIT:
            logger.debug("Quit requested")
            self.running = False
        else:
            return False
        return True

    def update(self):
        self.game.update()
