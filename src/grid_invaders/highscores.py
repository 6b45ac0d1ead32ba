"""
High score file: one integer score per line, appended on exit.
"""

from __future__ import annotations

from pathlib import Path

from mini_arcade_core.utils import logger


def save_score(path: str | Path, score: int) -> bool:
    """
    Append *score* to the score file.

    Zero and negative scores are not recorded.

    :param path: Score file path.
    :type path: str | Path

    :param score: Final score.
    :type score: int

    :return: True if a line was written.
    :rtype: bool
    """
    if score <= 0:
        return False

    with open(path, "a", encoding="utf-8") as fp:
        fp.write(f"{score}\n")
    logger.info(f"Saved score {score} to {path}")
    return True


def load_scores(path: str | Path) -> list[int]:
    """
    Read every recorded score, skipping lines that are not integers.

    :return: Scores in file order; empty if the file does not exist.
    :rtype: list[int]
    """
    path = Path(path)
    if not path.exists():
        return []

    scores: list[int] = []
    with open(path, "r", encoding="utf-8") as fp:
        for lineno, line in enumerate(fp, start=1):
            text = line.strip()
            if not text:
                continue
            try:
                scores.append(int(text))
            except ValueError:
                logger.warning(f"Ignoring malformed score on line {lineno} of {path}: {text!r}")
    return scores


def best_score(path: str | Path) -> int:
    return max(load_scores(path), default=0)
