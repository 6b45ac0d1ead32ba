"""Tests for view selection, the start menu state and key bindings."""

from __future__ import annotations

from collections import defaultdict

import pytest

from grid_invaders.commands import Command
from grid_invaders.settings import DEFAULT_SETTINGS
from grid_invaders.views import MenuState, ViewError, create_view


def test_unknown_view_is_rejected():
    with pytest.raises(ViewError):
        create_view("teletype")


def test_menu_level_never_drops_below_one():
    menu = MenuState(level=2, best_score=40)
    assert menu.step_level(1).level == 3
    assert menu.step_level(-1).step_level(-1).level == 1
    assert menu.step_level(-5).best_score == 40


def test_terminal_key_bindings():
    curses = pytest.importorskip("curses")
    from grid_invaders.views.terminal import command_for_key

    assert command_for_key(ord("a")) is Command.MOVE_LEFT
    assert command_for_key(ord("A")) is Command.MOVE_LEFT
    assert command_for_key(curses.KEY_LEFT) is Command.MOVE_LEFT
    assert command_for_key(ord("d")) is Command.MOVE_RIGHT
    assert command_for_key(curses.KEY_RIGHT) is Command.MOVE_RIGHT
    assert command_for_key(ord(" ")) is Command.SHOOT
    assert command_for_key(ord("p")) is Command.PAUSE
    assert command_for_key(ord("Q")) is Command.QUIT
    assert command_for_key(27) is Command.QUIT
    assert command_for_key(ord("x")) is Command.NONE
    assert command_for_key(-1) is Command.NONE


def test_terminal_view_is_created_by_name():
    pytest.importorskip("curses")
    from grid_invaders.views.terminal import TerminalView

    assert isinstance(create_view("terminal"), TerminalView)


def test_pygame_key_bindings():
    pygame = pytest.importorskip("pygame")
    from grid_invaders.views.pygame_view import command_for_keydown

    assert command_for_keydown(pygame.K_SPACE) is Command.SHOOT
    assert command_for_keydown(pygame.K_p) is Command.PAUSE
    assert command_for_keydown(pygame.K_ESCAPE) is Command.QUIT
    assert command_for_keydown(pygame.K_q) is Command.QUIT
    assert command_for_keydown(pygame.K_z) is Command.NONE


def test_terminal_view_reports_unknown_terminal(monkeypatch):
    pytest.importorskip("curses")
    monkeypatch.setenv("TERM", "no-such-terminal")

    with pytest.raises(ViewError):
        create_view("terminal").open()


def test_terminal_view_wraps_curses_start_failures(monkeypatch):
    curses = pytest.importorskip("curses")
    from grid_invaders.views import terminal

    def no_screen():
        raise curses.error("no screen")

    monkeypatch.setattr(terminal.curses, "initscr", no_screen)
    view = create_view("terminal")

    with pytest.raises(ViewError, match="no screen"):
        view.open()
    view.close()


def _pygame_view_with_events(monkeypatch, pygame, events):
    from grid_invaders.views.pygame_view import PygameView

    batches = [events]
    monkeypatch.setattr(pygame.event, "get", lambda: batches.pop() if batches else [])
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: defaultdict(bool))
    return PygameView(DEFAULT_SETTINGS)


def test_pygame_keeps_every_press_from_one_poll(monkeypatch):
    pygame = pytest.importorskip("pygame")
    view = _pygame_view_with_events(
        monkeypatch,
        pygame,
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p),
        ],
    )

    assert view.read_command() is Command.SHOOT
    assert view.read_command() is Command.PAUSE
    assert view.read_command() is Command.NONE


def test_pygame_window_close_quits_at_once(monkeypatch):
    pygame = pytest.importorskip("pygame")
    view = _pygame_view_with_events(
        monkeypatch,
        pygame,
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE),
            pygame.event.Event(pygame.QUIT),
        ],
    )

    assert view.read_command() is Command.QUIT
    assert view.read_command() is Command.NONE
