# viz/renderer_pygame.py
from __future__ import annotations
import os
from pathlib import Path
import pygame as pg
from typing import Dict, Optional, Tuple, Union
from config import AppConfig
from core.interfaces import Frame, Heading
import viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]


def eye_positions(x: int, y: int, heading: Heading, cell: int) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Pixel centres of the two eyes on a head cell, pushed towards the heading."""
    px, py = -heading.dy, heading.dx  # perpendicular
    cx = x + 0.5 + 0.2 * heading.dx
    cy = y + 0.5 + 0.2 * heading.dy
    return (
        ((cx + 0.2 * px) * cell, (cy + 0.2 * py) * cell),
        ((cx - 0.2 * px) * cell, (cy - 0.2 * py) * cell),
    )


class PygameRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._fonts: Dict[int, pg.font.Font] = {}

    def open(self, cfg: AppConfig, width: int, height: int) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        pg.init()
        pg.display.set_caption(cfg.render_title)
        flags = pg.RESIZABLE if cfg.resizable else 0
        self.surf = pg.display.set_mode((width, height), flags)
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, cfg: AppConfig, surface: pg.Surface) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.surf = surface
        self.clock = None  # embedding surface controls timing
        self._auto_flip = False

    def resize(self, width: int, height: int) -> None:
        if self._auto_flip and self.cfg is not None:
            flags = pg.RESIZABLE if self.cfg.resizable else 0
            self.surf = pg.display.set_mode((width, height), flags)

    def _font(self, size: int) -> pg.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pg.font.SysFont(None, size)
        return self._fonts[size]

    def draw(self, f: Frame) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        s = f.snapshot
        c = f.cell_px

        surf.fill(theme.background(f.background_blue))

        if f.message:
            font = self._font(48)
            col = f.special_color or (theme.GAME_OVER if f.game_over else theme.TEXT)
            txt = font.render(f.message, True, col)
            surf.blit(txt, txt.get_rect(center=(surf.get_width() // 2, surf.get_height() // 2 - 200)))

        for i, (x, y) in enumerate(s.snake):
            rect = pg.Rect(x * c, y * c, c, c)
            if i == 0:
                pg.draw.rect(surf, f.special_color or theme.HEAD, rect)
                for ex, ey in eye_positions(x, y, s.heading, c):
                    pg.draw.circle(surf, theme.EYE, (ex, ey), max(1, c // 5))
            else:
                col = f.special_color or (theme.BODY if i % 2 == 0 else theme.BODY_ALT)
                pg.draw.rect(surf, col, rect)

        self._draw_food(f)

        if self.cfg.render_show_hud:
            font = self._font(36)
            surf.blit(font.render(f"{f.player_name}: {f.score}", True, theme.TEXT), (20, 20))
            best = font.render(f"Best: {f.high_score}", True, theme.TEXT)
            surf.blit(best, best.get_rect(topright=(surf.get_width() - 20, 20)))

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def _draw_food(self, f: Frame) -> None:
        c = f.cell_px
        fx, fy = f.snapshot.food
        center = (fx * c + c // 2, fy * c + c // 2)
        pulse = (pg.time.get_ticks() % 1000) / 1000.0
        pg.draw.circle(self.surf, theme.FOOD, center, c / 2 + (c / 10) * pulse)
        if f.player_name:
            font = self._font(max(8, int(c * 0.8)))
            letter = font.render(f.player_name[0].upper(), True, theme.FOOD_TEXT)
            self.surf.blit(letter, letter.get_rect(center=center))

    def tick(self, interval_ms: int) -> None:
        if self.clock:
            self.clock.tick(1000.0 / max(1, interval_ms))

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._fonts.clear()

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = Path(os.fsdecode(rec_dir)) / f"frame_{self._frame_idx:06d}.png"
        pg.image.save(self.surf, str(fname))
        self._frame_idx += 1
