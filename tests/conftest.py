# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from config import AppConfig


@pytest.fixture
def cfg(tmp_path):
    return AppConfig(
        seed=1234,
        prefs_path=str(tmp_path / "prefs.json"),
        results_path=str(tmp_path / "results.csv"),
    )


@pytest.fixture
def state_factory(cfg):
    from core.snake_state import SnakeState
    def make(grid=(10, 10), body=((5, 5), (4, 5), (3, 5)), **kwargs):
        kwargs.setdefault("rng", random.Random(7))
        return SnakeState(cfg, grid_w=grid[0], grid_h=grid[1], body=body, **kwargs)
    return make


@pytest.fixture
def pygame_session():
    pg.init()
    yield
    pg.quit()


@pytest.fixture
def screen(pygame_session):
    # Plain Surface is fine for draw tests (no need for display mode)
    return pg.Surface((300, 300), pg.SRCALPHA)
