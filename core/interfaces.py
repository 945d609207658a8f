# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple
import numpy as np

Coord = Tuple[int, int]

EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


class Heading(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def reverse(self) -> "Heading":
        return Heading((-self.dx, -self.dy))

    def offset(self, p: Coord) -> Coord:
        return (p[0] + self.dx, p[1] + self.dy)


class StepOutcome(Enum):
    CONTINUE = "continue"
    COLLIDED = "collided"


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Coord, ...]   # head first
    food: Coord
    heading: Heading
    grid_w: int
    grid_h: int
    step_count: int = 0
    terminated: bool = False
    reason: Optional[str] = None

    @property
    def head(self) -> Coord:
        return self.snake[0]

    def occupancy(self) -> np.ndarray:
        """(grid_h, grid_w) uint8 grid: 0 empty, 1 body, 2 head, 3 food."""
        grid = np.zeros((self.grid_h, self.grid_w), dtype=np.uint8)
        fx, fy = self.food
        if 0 <= fx < self.grid_w and 0 <= fy < self.grid_h:
            grid[fy, fx] = FOOD
        for (x, y) in self.snake[1:]:
            grid[y, x] = BODY
        hx, hy = self.snake[0]
        grid[hy, hx] = HEAD
        return grid


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one tick."""
    snapshot: Snapshot
    score: int
    high_score: int
    player_name: str
    message: Optional[str] = None
    special_color: Optional[Tuple[int, int, int]] = None
    game_over: bool = False
    background_blue: int = 0
    cell_px: int = 24


class HeadingPolicy(Protocol):
    def act(self, snap: Snapshot) -> Heading: ...
