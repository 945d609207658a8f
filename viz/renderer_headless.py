# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.interfaces import BODY, EMPTY, FOOD, HEAD, Frame
from viz.render_iface import Renderer

GLYPHS = {EMPTY: ".", BODY: "o", HEAD: "H", FOOD: "F"}


def frame_to_text(f: Frame) -> List[str]:
    grid = f.snapshot.occupancy()
    return ["".join(GLYPHS[int(v)] for v in row) for row in grid]


class HeadlessRenderer(Renderer):
    """Keeps the last `keep` frames as text rows instead of drawing."""
    def __init__(self, keep: Optional[int] = 1):
        self.keep = keep
        self.frames: List[List[str]] = []

    def open(self, cfg: AppConfig, width: int, height: int) -> None:
        self.cfg = cfg
        self.frames.clear()

    def draw(self, frame: Frame) -> None:
        self.frames.append(frame_to_text(frame))
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[:-self.keep]

    def tick(self, interval_ms: int) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def last(self) -> Optional[List[str]]:
        return self.frames[-1] if self.frames else None
