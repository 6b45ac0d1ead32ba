"""
Command line entry point for Grid Invaders.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import Mapping, Sequence

from mini_arcade_core.utils import logger

from grid_invaders.commands import Controller
from grid_invaders.constants import LOG_FILE, SCORES_FILE, START_LEVEL_ENV
from grid_invaders.game import InvadersGame
from grid_invaders.highscores import best_score, save_score
from grid_invaders.loop import GameLoop
from grid_invaders.settings import ConfigError, GameSettings
from grid_invaders.views import VIEW_NAMES, MenuState, ViewError, create_view


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a level >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-invaders",
        description="Defend the bottom row against descending invaders.",
    )
    parser.add_argument(
        "--view",
        choices=VIEW_NAMES,
        default="terminal",
        help="front end to use (default: terminal)",
    )
    parser.add_argument(
        "--level",
        "-L",
        type=_positive_int,
        default=1,
        help=f"start at level N (or set {START_LEVEL_ENV})",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--config", default=None, help="JSON file with gameplay settings")
    parser.add_argument("--scores", default=SCORES_FILE, help="high score file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    parser.add_argument(
        "--log-file",
        default=LOG_FILE,
        help="log destination while the terminal view owns the screen",
    )
    return parser


def resolve_start_level(cli_level: int, environ: Mapping[str, str] = os.environ) -> int:
    """
    Pick the start level from the command line and the environment.

    A positive integer in ``START_LEVEL`` takes precedence over the CLI
    value; anything else in the variable is ignored.

    :param cli_level: Level given on the command line.
    :type cli_level: int

    :param environ: Environment to read ``START_LEVEL`` from.
    :type environ: Mapping[str, str]

    :return: The level to offer in the start menu.
    :rtype: int
    """
    raw = environ.get(START_LEVEL_ENV)
    if raw is None:
        return cli_level
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric {START_LEVEL_ENV}={raw!r}")
        return cli_level
    return value if value > 0 else cli_level


def route_logs_to_file(path: str):
    """Swap console log handlers for a file handler."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        stream = getattr(handler, "stream", None)
        if stream in (sys.stdout, sys.stderr):
            root.removeHandler(handler)

    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)-8.8s] %(module)s.%(funcName)s: %(message)s")
    )
    root.addHandler(file_handler)


def _best_score(path: str) -> int:
    try:
        return best_score(path)
    except OSError as e:
        logger.warning(f"Could not read scores from {path}: {e}")
        return 0


def load_settings(path: str | None) -> GameSettings:
    if path is None:
        return GameSettings().validate()
    return GameSettings.from_file(path)


def run(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for Grid Invaders.

    - Loads settings and builds the game.
    - Opens the selected view and shows the start menu.
    - Applies the chosen start level once, then runs the loop.
    - Appends the final score to the score file.

    :return: Process exit code.
    :rtype: int
    """
    args = build_parser().parse_args(argv)

    logging.getLogger().setLevel(args.log_level)
    logger.setLevel(args.log_level)
    if args.view == "terminal":
        route_logs_to_file(args.log_file)

    try:
        settings = load_settings(args.config)
    except (ConfigError, OSError) as e:
        logger.error(f"Failed to load settings: {e}")
        return 1

    game = InvadersGame(settings, random.Random(args.seed))
    start_level = resolve_start_level(args.level)
    logger.info(f"Starting Grid Invaders: view={args.view} level={start_level} seed={args.seed}")

    try:
        view = create_view(args.view, settings)
        view.open()
    except ViewError as e:
        logger.error(f"Failed to start view: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        menu = view.show_menu(MenuState(level=start_level, best_score=_best_score(args.scores)))
        if menu.quit:
            return 0

        if menu.level > 1:
            game.set_level(menu.level)

        GameLoop(Controller(game), view).run()
    finally:
        view.close()

    score = game.world.player.score
    try:
        save_score(args.scores, score)
    except OSError as e:
        logger.error(f"Could not save score {score} to {args.scores}: {e}")
    print(f"Final score: {score}")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
