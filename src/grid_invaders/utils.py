"""
Grid Invaders utils
"""

from __future__ import annotations

from mini_arcade_core.spaces.collision.intersections import rect_rect


def clamp(value: int, low: int, high: int) -> int:
    """Clamp *value* into ``[low, high]``."""
    return max(low, min(high, value))


# pylint: disable=too-many-arguments
def overlaps(
    x1: int, y1: int, w1: int, h1: int, x2: int, y2: int, w2: int, h2: int
) -> bool:
    """
    True when two cell rectangles share area.

    Rectangles that only touch along an edge do not overlap.

    :return: Whether the rectangles overlap.
    :rtype: bool
    """
    return rect_rect(
        ax=x1,
        ay=y1,
        aw=w1,
        ah=h1,
        bx=x2,
        by=y2,
        bw=w2,
        bh=h2,
        inclusive=False,
    )
