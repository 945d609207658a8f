# core/snake_state.py  (pure rules, no pygame)
from __future__ import annotations
from collections import deque
from typing import Iterable, Optional, Tuple
import logging
import random

from config import AppConfig
from .interfaces import Coord, Heading, Snapshot, StepOutcome

log = logging.getLogger(__name__)


def cell_size_for(width: int, height: int, cfg: AppConfig) -> int:
    """Pixel size of one grid cell: `cells_across` cells over the narrower side, clamped."""
    cell = min(width, height) // cfg.cells_across
    return max(cfg.min_cell_px, min(cfg.max_cell_px, cell))


class SnakeState:
    """Grid, body, heading and food of one game. Mutated in place once per tick."""

    def __init__(
        self,
        cfg: AppConfig,
        grid_w: int = 30,
        grid_h: int = 30,
        body: Optional[Iterable[Coord]] = None,
        heading: Heading = Heading.RIGHT,
        food: Optional[Coord] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.grid_w = max(1, int(grid_w))
        self.grid_h = max(1, int(grid_h))
        self.cell_px = cfg.min_cell_px

        segments = [tuple(p) for p in body] if body is not None else []
        if not segments:
            segments = list(cfg.start_body) or [(0, 0)]
        self.snake: deque[Coord] = deque(self._clamp(p) for p in segments)
        self.heading = heading
        self.step_count = 0
        self.terminated = False
        self.reason: Optional[str] = None

        food = (int(food[0]), int(food[1])) if food is not None else None
        if food is not None and self.in_bounds(food) and food not in self.snake:
            self.food: Coord = food
        else:
            self.food = self.spawn_food()

    @classmethod
    def from_pixels(cls, cfg: AppConfig, width: int, height: int, **kwargs) -> "SnakeState":
        st = cls(cfg, **kwargs)
        st.set_bounds(width, height)
        return st

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    # ---- geometry ----
    def in_bounds(self, p: Coord) -> bool:
        return 0 <= p[0] < self.grid_w and 0 <= p[1] < self.grid_h

    def _clamp(self, p: Coord) -> Coord:
        return (min(max(int(p[0]), 0), self.grid_w - 1),
                min(max(int(p[1]), 0), self.grid_h - 1))

    def set_bounds(self, width: int, height: int) -> None:
        # layout can report 0x0 before the view is measured
        if width <= 0 or height <= 0:
            log.debug("ignoring non-positive viewport %dx%d", width, height)
            return
        self.cell_px = cell_size_for(width, height, self.cfg)
        grid_w = max(1, width // self.cell_px)
        grid_h = max(1, height // self.cell_px)
        if (grid_w, grid_h) == (self.grid_w, self.grid_h):
            return
        self.grid_w, self.grid_h = grid_w, grid_h

        if not all(self.in_bounds(p) for p in self.snake):
            log.warning("grid shrank to %dx%d, clamping snake into range", grid_w, grid_h)
            self.snake = deque(self._clamp(p) for p in self.snake)
        if not self.in_bounds(self.food):
            self.food = self.spawn_food()

    # ---- tick ----
    def set_heading(self, new: Heading) -> bool:
        """Accept `new` unless it would turn the head back onto the neck segment."""
        # compare with the neck; several turns may arrive before one step
        if len(self.snake) > 1 and new.offset(self.snake[0]) == self.snake[1]:
            return False
        self.heading = new
        return True

    def step(self) -> StepOutcome:
        if self.terminated:
            return StepOutcome.COLLIDED

        new_head = self.heading.offset(self.snake[0])

        if not self.in_bounds(new_head):
            return self._collide("wall")
        # the tail is vacated this tick, so only the other segments block
        for i, seg in enumerate(self.snake):
            if i == len(self.snake) - 1:
                break
            if seg == new_head:
                return self._collide("self")

        self.snake.appendleft(new_head)
        self.snake.pop()
        self.step_count += 1
        return StepOutcome.CONTINUE

    def _collide(self, reason: str) -> StepOutcome:
        self.terminated, self.reason = True, reason
        return StepOutcome.COLLIDED

    def check_food_eaten(self) -> bool:
        return self.snake[0] == self.food

    def grow(self) -> None:
        self.snake.append(self.snake[-1])

    # ---- food ----
    def spawn_food(self) -> Coord:
        occ = set(self.snake)
        for _ in range(self.cfg.spawn_retries):
            p = (self.rng.randrange(self.grid_w), self.rng.randrange(self.grid_h))
            if p not in occ:
                self.food = p
                return p
        self.food = self._fallback_food(occ)
        log.debug("food placement fell back to %s", self.food)
        return self.food

    def _fallback_food(self, occ: set) -> Coord:
        # row-major scan starting just after the head
        hx, hy = self.snake[0]
        n = self.grid_w * self.grid_h
        start = hy * self.grid_w + hx
        for k in range(1, n + 1):
            i = (start + k) % n
            p = (i % self.grid_w, i // self.grid_w)
            if p not in occ:
                return p
        return self._clamp(self.heading.offset(self.snake[0]))

    # ---- views ----
    @property
    def head(self) -> Coord:
        return self.snake[0]

    @property
    def body(self) -> Tuple[Coord, ...]:
        return tuple(self.snake)

    def __len__(self) -> int:
        return len(self.snake)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            heading=self.heading,
            grid_w=self.grid_w,
            grid_h=self.grid_h,
            step_count=self.step_count,
            terminated=self.terminated,
            reason=self.reason,
        )
