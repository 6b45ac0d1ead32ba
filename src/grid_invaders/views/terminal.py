"""
Curses text view.
"""

from __future__ import annotations

import curses
import time

from mini_arcade_core.utils import logger

from grid_invaders.commands import Command
from grid_invaders.constants import (
    CHAR_ENEMY,
    CHAR_ENEMY_PROJECTILE,
    CHAR_PLAYER,
    CHAR_PROJECTILE,
    CHAR_SHIELD,
    MIN_TERM_SIZE,
)
from grid_invaders.settings import GameSettings
from grid_invaders.snapshot import GameSnapshot
from grid_invaders.views import MenuState, ViewError

ESCAPE = 27

PAIR_PLAYER = 1
PAIR_ENEMY = 2
PAIR_PROJECTILE = 3
PAIR_SHIELD = 4
PAIR_TEXT = 5

_KEYMAP = {
    ord("a"): Command.MOVE_LEFT,
    ord("A"): Command.MOVE_LEFT,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    ord("d"): Command.MOVE_RIGHT,
    ord("D"): Command.MOVE_RIGHT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord(" "): Command.SHOOT,
    ord("p"): Command.PAUSE,
    ord("P"): Command.PAUSE,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
    ESCAPE: Command.QUIT,
}


def command_for_key(key: int) -> Command:
    """Map a curses key code to a command."""
    return _KEYMAP.get(key, Command.NONE)


class TerminalView:
    """
    Draws the board in a bordered curses window with a HUD line above it.
    """

    def __init__(self, settings: GameSettings, min_size: tuple[int, int] = MIN_TERM_SIZE):
        self.settings = settings
        self.min_size = min_size
        self._screen = None
        self._board = None
        self._colors = False

    def open(self):
        """
        :raises ViewError: If curses cannot start or the terminal is smaller
            than the minimum size.
        """
        try:
            self._screen = curses.initscr()
            curses.cbreak()
            curses.noecho()
            self._screen.nodelay(True)
            self._screen.keypad(True)
        except curses.error as e:
            self._abandon_screen()
            raise ViewError(f"Could not start the terminal view: {e}") from e

        try:
            curses.curs_set(0)
        except curses.error:
            pass

        height, width = self._screen.getmaxyx()
        min_w, min_h = self.min_size
        if width < min_w or height < min_h:
            self.close()
            raise ViewError(
                f"Terminal too small. Minimum: {min_w}x{min_h}, Current: {width}x{height}"
            )

        self._board = curses.newwin(
            self.settings.board_height + 2, self.settings.board_width + 2, 1, 1
        )

        if curses.has_colors():
            curses.start_color()
            curses.init_pair(PAIR_PLAYER, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(PAIR_ENEMY, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(PAIR_PROJECTILE, curses.COLOR_CYAN, curses.COLOR_BLACK)
            curses.init_pair(PAIR_SHIELD, curses.COLOR_YELLOW, curses.COLOR_BLACK)
            curses.init_pair(PAIR_TEXT, curses.COLOR_WHITE, curses.COLOR_BLACK)
            self._colors = True
        logger.debug(f"Terminal view opened at {width}x{height}")

    def _abandon_screen(self):
        if self._screen is not None:
            try:
                curses.endwin()
            except curses.error:
                pass
        self._screen = None

    def close(self):
        if self._screen is None:
            return
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        self._screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self._screen = None
        self._board = None

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self._colors else curses.A_NORMAL

    def _put(self, win, y: int, x: int, text: str, pair: int = PAIR_TEXT):
        # writing into the last cell of a window raises even though it draws
        try:
            win.addstr(y, x, text, self._attr(pair))
        except curses.error:
            pass

    def _centered(self, row_offset: int, text: str, pair: int = PAIR_TEXT):
        height, width = self._screen.getmaxyx()
        self._put(self._screen, height // 2 + row_offset, max(0, (width - len(text)) // 2), text, pair)

    def render(self, snapshot: GameSnapshot):
        board = self._board
        board.erase()
        board.attron(self._attr(PAIR_TEXT))
        board.box()
        board.attroff(self._attr(PAIR_TEXT))

        # board cells are offset by one for the border
        p = snapshot.player
        self._put(board, p.y + 1, p.x + 1, CHAR_PLAYER * snapshot.player_width, PAIR_PLAYER)

        for e in snapshot.enemies:
            if e.active:
                self._put(board, e.y + 1, e.x + 1, CHAR_ENEMY * snapshot.enemy_width, PAIR_ENEMY)

        for proj in snapshot.projectiles:
            if proj.active:
                self._put(board, proj.y + 1, proj.x + 1, CHAR_PROJECTILE, PAIR_PROJECTILE)

        for proj in snapshot.enemy_projectiles:
            if proj.active:
                self._put(board, proj.y + 1, proj.x + 1, CHAR_ENEMY_PROJECTILE, PAIR_PROJECTILE)

        for shield in snapshot.shields:
            for block in shield:
                if block.health > 0:
                    self._put(board, block.y + 1, block.x + 1, CHAR_SHIELD, PAIR_SHIELD)

        board.noutrefresh()

        self._screen.move(0, 0)
        self._screen.clrtoeol()
        self._put(
            self._screen,
            0,
            2,
            f"LEVEL: {snapshot.level} | SCORE: {snapshot.score} | "
            f"LIVES: {snapshot.lives} | ENEMIES: {snapshot.alive_enemy_count}",
        )
        self._screen.noutrefresh()
        curses.doupdate()

    def read_command(self) -> Command:
        return command_for_key(self._screen.getch())

    def show_pause(self):
        self._centered(-1, "*** PAUSED ***")
        self._centered(1, "Press P to resume, Q to quit")
        self._screen.refresh()

    def show_game_over(self, snapshot: GameSnapshot):
        title = "*** YOU WIN ***" if snapshot.player_won else "*** GAME OVER ***"
        self._centered(-2, title, PAIR_ENEMY)
        self._centered(0, f"Final Score: {snapshot.score}")
        self._centered(2, "Press Q to quit")
        self._screen.refresh()

    def show_menu(self, menu: MenuState) -> MenuState:
        """
        Show controls and let the player pick a start level.

        :param menu: Initial menu state.
        :type menu: MenuState

        :return: The chosen state; ``quit`` is set if the player backed out.
        :rtype: MenuState
        """
        self._screen.clear()
        self._centered(-4, "  GRID INVADERS  ", PAIR_PLAYER)
        self._centered(-1, "Controls:")
        self._centered(0, "A/LEFT  - Move Left ")
        self._centered(1, "D/RIGHT - Move Right")
        self._centered(2, "SPACE   - Shoot     ")
        self._centered(3, "P       - Pause     ")
        self._centered(4, "Q/ESC   - Quit      ")
        if menu.best_score:
            self._centered(8, f"Best Score: {menu.best_score}")

        height, _ = self._screen.getmaxyx()
        while True:
            self._centered(6, f"Start Level: [{menu.level:2d}]  (Use LEFT/RIGHT)")
            self._centered(height // 2 - 2, "LEFT/RIGHT to change level, SPACE to start", PAIR_PROJECTILE)
            self._screen.refresh()

            command = command_for_key(self._screen.getch())
            if command is Command.MOVE_LEFT:
                menu = menu.step_level(-1)
            elif command is Command.MOVE_RIGHT:
                menu = menu.step_level(+1)
            elif command is Command.SHOOT:
                return menu
            elif command is Command.QUIT:
                return MenuState(level=menu.level, best_score=menu.best_score, quit=True)
            time.sleep(0.05)
