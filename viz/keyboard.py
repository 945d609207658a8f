# viz/keyboard.py
from __future__ import annotations
from typing import Callable, List, Optional, Tuple, Union
import pygame as pg
from core.gestures import heading_from_swipe
from core.interfaces import Heading

Command = Union[str, Heading, None]

KEYMAP = {
    pg.K_UP: Heading.UP, pg.K_w: Heading.UP,
    pg.K_RIGHT: Heading.RIGHT, pg.K_d: Heading.RIGHT,
    pg.K_DOWN: Heading.DOWN, pg.K_s: Heading.DOWN,
    pg.K_LEFT: Heading.LEFT, pg.K_a: Heading.LEFT,
}


class Keyboard:
    """
    Turns pygame events into host commands: "quit", "restart",
    "toggle_music", ("resize", (w, h)), or a Heading. Mouse drags act as swipes.
    """
    def __init__(self, current_heading: Callable[[], Heading]):
        self.current_heading = current_heading
        self._drag_start: Optional[Tuple[int, int]] = None

    def poll(self) -> List[Command]:
        return [c for c in (self.handle(e) for e in pg.event.get()) if c is not None]

    def handle(self, e: pg.event.Event):
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.VIDEORESIZE:
            return ("resize", (e.w, e.h))
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE: return "quit"
            if e.key == pg.K_r: return "restart"
            if e.key == pg.K_m: return "toggle_music"
            return KEYMAP.get(e.key)
        if e.type == pg.MOUSEBUTTONDOWN and e.button == 1:
            self._drag_start = e.pos
            return None
        if e.type == pg.MOUSEBUTTONUP and e.button == 1 and self._drag_start is not None:
            sx, sy = self._drag_start
            self._drag_start = None
            return heading_from_swipe(e.pos[0] - sx, e.pos[1] - sy, self.current_heading())
        return None
