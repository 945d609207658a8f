# core/gestures.py
from __future__ import annotations
from typing import Optional
from .interfaces import Heading

MIN_SWIPE_PX = 24


def heading_from_swipe(dx: float, dy: float, current: Heading,
                       min_distance: float = MIN_SWIPE_PX) -> Optional[Heading]:
    """
    Map a drag vector to a heading. The dominant axis wins (ties go vertical);
    drags shorter than `min_distance` and reversals of `current` return None.
    """
    if max(abs(dx), abs(dy)) < min_distance:
        return None
    if abs(dx) > abs(dy):
        new = Heading.RIGHT if dx > 0 else Heading.LEFT
    else:
        new = Heading.DOWN if dy > 0 else Heading.UP
    if new == current.reverse:
        return None
    return new
