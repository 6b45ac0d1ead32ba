"""
Pygame pixel view: every board cell is drawn as a CELL_SIZE square.
"""

from __future__ import annotations

import os
from collections import deque

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# pylint: disable=wrong-import-position
import pygame

from mini_arcade_core.utils import logger

from grid_invaders.commands import Command
from grid_invaders.constants import CELL_SIZE, FPS
from grid_invaders.settings import GameSettings
from grid_invaders.snapshot import GameSnapshot
from grid_invaders.views import MenuState, ViewError

# pylint: enable=wrong-import-position

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
CYAN = (0, 255, 255)
YELLOW = (255, 255, 0)
MAGENTA = (255, 0, 255)

HUD_HEIGHT = 2  # rows reserved above the board

_KEYDOWN_COMMANDS = {
    pygame.K_SPACE: Command.SHOOT,
    pygame.K_p: Command.PAUSE,
    pygame.K_q: Command.QUIT,
    pygame.K_ESCAPE: Command.QUIT,
}

_HELD_COMMANDS = (
    (pygame.K_LEFT, Command.MOVE_LEFT),
    (pygame.K_a, Command.MOVE_LEFT),
    (pygame.K_RIGHT, Command.MOVE_RIGHT),
    (pygame.K_d, Command.MOVE_RIGHT),
)


def command_for_keydown(key: int) -> Command:
    """Map a one-shot key press to a command."""
    return _KEYDOWN_COMMANDS.get(key, Command.NONE)


class PygameView:
    """
    Pygame front end.

    Movement keys act while held, every other command on key press.
    """

    def __init__(self, settings: GameSettings, cell_size: int = CELL_SIZE):
        self.settings = settings
        self.cell_size = cell_size
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None
        self._clock = pygame.time.Clock()
        self._pending: deque[Command] = deque()

    def open(self):
        """
        :raises ViewError: If no display can be opened.
        """
        try:
            pygame.init()
            width = self.settings.board_width * self.cell_size
            height = (self.settings.board_height + HUD_HEIGHT) * self.cell_size
            self._screen = pygame.display.set_mode((width, height))
        except pygame.error as e:
            pygame.quit()
            raise ViewError(f"Could not open a pygame window: {e}") from e

        pygame.display.set_caption("Grid Invaders")
        self._font = pygame.font.Font(None, self.cell_size)
        logger.debug(f"Pygame view opened at {width}x{height}")

    def close(self):
        if self._screen is None:
            return
        pygame.quit()
        self._screen = None

    def _cell_rect(self, x: int, y: int, w: int = 1, h: int = 1) -> pygame.Rect:
        c = self.cell_size
        return pygame.Rect(x * c, (y + HUD_HEIGHT) * c, w * c, h * c)

    def _text(self, text: str, center_y: int, color=WHITE):
        surface = self._font.render(text, True, color)
        rect = surface.get_rect(center=(self._screen.get_width() // 2, center_y))
        self._screen.blit(surface, rect)

    def render(self, snapshot: GameSnapshot):
        screen = self._screen
        screen.fill(BLACK)

        p = snapshot.player
        pygame.draw.rect(screen, GREEN, self._cell_rect(p.x, p.y, snapshot.player_width, snapshot.player_height))

        for e in snapshot.enemies:
            if e.active:
                pygame.draw.rect(
                    screen, RED, self._cell_rect(e.x, e.y, snapshot.enemy_width, snapshot.enemy_height)
                )

        for proj in snapshot.projectiles:
            if proj.active:
                pygame.draw.rect(screen, CYAN, self._cell_rect(proj.x, proj.y))

        for proj in snapshot.enemy_projectiles:
            if proj.active:
                pygame.draw.rect(screen, MAGENTA, self._cell_rect(proj.x, proj.y))

        for shield in snapshot.shields:
            for block in shield:
                if block.health > 0:
                    pygame.draw.rect(screen, YELLOW, self._cell_rect(block.x, block.y))

        pygame.draw.line(
            screen,
            WHITE,
            (0, HUD_HEIGHT * self.cell_size - 1),
            (screen.get_width(), HUD_HEIGHT * self.cell_size - 1),
        )
        hud = self._font.render(
            f"LEVEL: {snapshot.level}   SCORE: {snapshot.score}   "
            f"LIVES: {snapshot.lives}   ENEMIES: {snapshot.alive_enemy_count}",
            True,
            WHITE,
        )
        screen.blit(hud, (self.cell_size // 2, self.cell_size // 2))

        pygame.display.flip()

    def read_command(self) -> Command:
        """
        Return one command per call.

        Key presses are queued so several presses in one poll come out on
        consecutive calls. Held movement keys are read only when the queue
        is empty.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._pending.clear()
                return Command.QUIT
            if event.type == pygame.KEYDOWN:
                command = command_for_keydown(event.key)
                if command is not Command.NONE:
                    self._pending.append(command)

        if self._pending:
            return self._pending.popleft()

        keys = pygame.key.get_pressed()
        for key, held in _HELD_COMMANDS:
            if keys[key]:
                return held
        return Command.NONE

    def show_pause(self):
        mid = self._screen.get_height() // 2
        self._text("*** PAUSED ***", mid - self.cell_size)
        self._text("Press P to resume, Q to quit", mid + self.cell_size)
        pygame.display.flip()

    def show_game_over(self, snapshot: GameSnapshot):
        mid = self._screen.get_height() // 2
        title = "*** YOU WIN ***" if snapshot.player_won else "*** GAME OVER ***"
        self._text(title, mid - 2 * self.cell_size, RED)
        self._text(f"Final Score: {snapshot.score}", mid)
        self._text("Press Q to quit", mid + 2 * self.cell_size)
        pygame.display.flip()

    def show_menu(self, menu: MenuState) -> MenuState:
        """
        Show controls and let the player pick a start level.

        :param menu: Initial menu state.
        :type menu: MenuState

        :return: The chosen state; ``quit`` is set if the player backed out.
        :rtype: MenuState
        """
        mid = self._screen.get_height() // 2
        c = self.cell_size
        while True:
            self._screen.fill(BLACK)
            self._text("GRID INVADERS", mid - 5 * c, GREEN)
            self._text("A/LEFT - Move Left    D/RIGHT - Move Right", mid - 2 * c)
            self._text("SPACE - Shoot    P - Pause    Q/ESC - Quit", mid - c)
            self._text(f"Start Level: [{menu.level:2d}]  (Use LEFT/RIGHT)", mid + c)
            if menu.best_score:
                self._text(f"Best Score: {menu.best_score}", mid + 3 * c)
            self._text("LEFT/RIGHT to change level, SPACE to start", self._screen.get_height() - c, CYAN)
            pygame.display.flip()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return MenuState(level=menu.level, best_score=menu.best_score, quit=True)
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key in (pygame.K_LEFT, pygame.K_a):
                    menu = menu.step_level(-1)
                elif event.key in (pygame.K_RIGHT, pygame.K_d):
                    menu = menu.step_level(+1)
                elif event.key == pygame.K_SPACE:
                    return menu
                elif command_for_keydown(event.key) is Command.QUIT:
                    return MenuState(level=menu.level, best_score=menu.best_score, quit=True)

            self._clock.tick(FPS)
