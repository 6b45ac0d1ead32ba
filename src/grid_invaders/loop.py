"""
Fixed-timestep game loop.
"""

from __future__ import annotations

import time
from typing import Callable

from mini_arcade_core.utils import logger

from grid_invaders.commands import Command, Controller
from grid_invaders.constants import FRAME_TIME, GAME_OVER_POLL, IDLE_SLEEP
from grid_invaders.views import View


class GameLoop:
    """
    Drives a controller at a fixed rate and draws between frames.

    Real time is accumulated into a lag budget; every whole frame in the
    budget reads one command, applies it and advances the game once.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        controller: Controller,
        view: View,
        frame_time: float = FRAME_TIME,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.controller = controller
        self.view = view
        self.frame_time = frame_time
        self._clock = clock
        self._sleep = sleep
        self.frames = 0

    @property
    def game(self):
        return self.controller.game

    def run(self) -> int:
        """
        Run until a QUIT command arrives.

        :return: Number of frames advanced.
        :rtype: int
        """
        logger.debug("Running the game loop")
        last = self._clock()
        lag = 0.0

        while self.controller.running:
            now = self._clock()
            lag += now - last
            last = now

            while lag >= self.frame_time:
                command = self.view.read_command()
                self.controller.execute(command)
                if command is Command.QUIT:
                    break
                self.controller.update()
                self.frames += 1
                lag -= self.frame_time

            snapshot = self.game.snapshot()
            self.view.render(snapshot)
            if snapshot.paused:
                self.view.show_pause()

            if self.game.is_over():
                self.view.show_game_over(snapshot)
                self._wait_for_quit()

            self._sleep(IDLE_SLEEP)

        logger.debug(f"Loop stopped after {self.frames} frames")
        return self.frames

    def _wait_for_quit(self):
        while self.controller.running:
            command = self.view.read_command()
            if command is Command.QUIT:
                self.controller.execute(command)
                return
            self._sleep(GAME_OVER_POLL)
