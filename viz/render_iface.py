# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from config import AppConfig
from core.interfaces import Frame

class Renderer(Protocol):
    def open(self, cfg: AppConfig, width: int, height: int) -> None: ...
    def draw(self, frame: Frame) -> None: ...
    def tick(self, interval_ms: int) -> None: ...
    def close(self) -> None: ...
