"""
Front ends that draw a snapshot and turn key presses into commands.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from grid_invaders.commands import Command
from grid_invaders.settings import DEFAULT_SETTINGS, GameSettings
from grid_invaders.snapshot import GameSnapshot

VIEW_NAMES = ("terminal", "pygame")


class ViewError(RuntimeError):
    """Raised when a view cannot start."""


@dataclass(frozen=True)
class MenuState:
    """
    Start menu state, passed into the menu and handed back by it.
    """

    level: int = 1
    best_score: int = 0
    quit: bool = False

    def step_level(self, delta: int) -> "MenuState":
        return replace(self, level=max(1, self.level + delta))


class View(Protocol):
    def open(self):
        """Acquire the screen or window."""

    def close(self):
        """Release the screen or window."""

    def render(self, snapshot: GameSnapshot):
        """Draw one frame."""

    def read_command(self) -> Command:
        """Return the next pending command without blocking."""

    def show_pause(self):
        """Overlay the pause banner."""

    def show_game_over(self, snapshot: GameSnapshot):
        """Overlay the game over banner."""

    def show_menu(self, menu: MenuState) -> MenuState:
        """Run the start menu until the player starts or quits."""


def create_view(name: str, settings: GameSettings = DEFAULT_SETTINGS) -> View:
    """
    Build the view called *name*.

    Backends are imported on demand so the terminal view never needs a
    display and the pygame view never needs curses.

    :raises ViewError: If *name* is unknown.
    """
    # Justification: optional backends are only imported when selected.
    # pylint: disable=import-outside-toplevel
    if name == "terminal":
        from grid_invaders.views.terminal import TerminalView

        return TerminalView(settings)
    if name == "pygame":
        from grid_invaders.views.pygame_view import PygameView

        return PygameView(settings)
    # pylint: enable=import-outside-toplevel
    raise ViewError(f"Unknown view {name!r}, expected one of {', '.join(VIEW_NAMES)}")
