# tests/test_snake_state.py
import random

import pytest

from core.interfaces import Heading, StepOutcome
from core.snake_state import SnakeState, cell_size_for


def test_step_moves_head_one_cell_right(state_factory):
    st = state_factory(food=(0, 0))
    assert st.step() is StepOutcome.CONTINUE
    assert st.body == ((6, 5), (5, 5), (4, 5))


def test_wall_collision_leaves_state_unchanged(state_factory):
    st = state_factory(body=((9, 5), (8, 5), (7, 5)), food=(0, 0))
    before = st.body
    assert st.step() is StepOutcome.COLLIDED
    assert st.body == before
    assert st.terminated and st.reason == "wall"


def test_collides_with_second_segment(state_factory):
    # head (5,5) heading left onto (4,5), which is not the tail
    st = state_factory(body=((5, 5), (4, 5), (4, 4), (5, 4), (6, 4)), food=(0, 0))
    st.heading = Heading.LEFT
    before = st.body
    assert st.step() is StepOutcome.COLLIDED
    assert st.reason == "self"
    assert st.body == before


def test_moving_into_vacated_tail_is_allowed(state_factory):
    # square loop: head follows the tail around
    st = state_factory(body=((5, 5), (5, 4), (4, 4), (4, 5)), food=(0, 0))
    st.heading = Heading.LEFT
    assert st.step() is StepOutcome.CONTINUE
    assert st.head == (4, 5)
    assert len(st) == 4


def test_grown_tail_is_not_vacated(state_factory):
    st = state_factory(body=((5, 5), (5, 4), (4, 4), (4, 5)), food=(0, 0))
    st.grow()
    st.heading = Heading.LEFT
    assert st.step() is StepOutcome.COLLIDED


@pytest.mark.parametrize("heading", list(Heading))
def test_continue_keeps_length_and_moves_one_unit(state_factory, heading):
    st = state_factory(body=((5, 5),), food=(0, 0))
    st.heading = heading
    old = st.head
    assert st.step() is StepOutcome.CONTINUE
    assert len(st) == 1
    assert st.head == (old[0] + heading.dx, old[1] + heading.dy)


def test_grow_then_step_adds_one_segment(state_factory):
    st = state_factory(food=(0, 0))
    st.grow()
    assert len(st) == 4
    assert st.step() is StepOutcome.CONTINUE
    assert len(st) == 4
    assert st.body == ((6, 5), (5, 5), (4, 5), (3, 5))
    st.step()
    assert len(st) == 4


def test_terminated_state_stays_terminated(state_factory):
    st = state_factory(body=((9, 5), (8, 5)), food=(0, 0))
    assert st.step() is StepOutcome.COLLIDED
    st.heading = Heading.UP
    assert st.step() is StepOutcome.COLLIDED
    assert st.body == ((9, 5), (8, 5))


def test_check_food_eaten(state_factory):
    st = state_factory(food=(6, 5))
    assert not st.check_food_eaten()
    st.step()
    assert st.check_food_eaten()


def test_set_heading_rejects_reverse(state_factory):
    st = state_factory(food=(0, 0))
    assert not st.set_heading(Heading.LEFT)
    assert st.heading is Heading.RIGHT
    assert st.set_heading(Heading.UP)
    assert st.heading is Heading.UP


def test_two_turns_before_a_tick_cannot_fold_back(state_factory):
    st = state_factory(food=(0, 0))
    assert st.set_heading(Heading.UP)
    assert not st.set_heading(Heading.LEFT)
    assert st.heading is Heading.UP
    assert st.step() is StepOutcome.CONTINUE
    assert st.head == (5, 4)
    # after the move the neck is below, so LEFT is a real turn now
    assert st.set_heading(Heading.LEFT)


def test_single_segment_may_reverse(state_factory):
    st = state_factory(body=((5, 5),), food=(0, 0))
    assert st.set_heading(Heading.LEFT)


def test_spawn_food_avoids_body(state_factory):
    st = state_factory(grid=(4, 4), body=((1, 1), (0, 1), (0, 0)))
    for _ in range(200):
        p = st.spawn_food()
        assert p not in st.body
        assert st.in_bounds(p)


def test_spawn_food_fallback_scans_after_head(cfg):
    # no retries: deterministic scan from the cell after the head
    st = SnakeState(cfg.with_(spawn_retries=0), grid_w=3, grid_h=3,
                    body=[(1, 1), (0, 1), (0, 0)], rng=random.Random(0))
    assert st.food == (2, 1)
    st.snake.appendleft((2, 1))
    assert st.spawn_food() == (0, 2)


def test_spawn_food_full_grid_stays_in_bounds(cfg):
    body = [(1, 0), (0, 0), (0, 1), (1, 1)]
    st = SnakeState(cfg.with_(spawn_retries=3), grid_w=2, grid_h=2, body=body,
                    rng=random.Random(0))
    assert st.in_bounds(st.food)


def test_set_bounds_ignores_non_positive(state_factory):
    st = state_factory(food=(0, 0))
    st.set_bounds(0, 800)
    st.set_bounds(600, -1)
    assert (st.grid_w, st.grid_h) == (10, 10)


def test_set_bounds_computes_grid_from_pixels(state_factory, cfg):
    st = state_factory(food=(0, 0))
    st.set_bounds(720, 1080)
    assert st.cell_px == cell_size_for(720, 1080, cfg) == 24
    assert (st.grid_w, st.grid_h) == (30, 45)
    st.set_bounds(720, 1080)
    assert (st.grid_w, st.grid_h) == (30, 45)


def test_cell_size_is_clamped(cfg):
    assert cell_size_for(60, 60, cfg) == cfg.min_cell_px
    assert cell_size_for(10000, 10000, cfg) == cfg.max_cell_px


def test_set_bounds_shrink_clamps_body_and_respawns_food(state_factory):
    st = state_factory(grid=(30, 30), body=((20, 5), (19, 5), (18, 5)), food=(25, 25))
    st.set_bounds(80, 80)  # 8px cells -> 10x10
    assert (st.grid_w, st.grid_h) == (10, 10)
    assert all(st.in_bounds(p) for p in st.body)
    assert st.in_bounds(st.food)


def test_constructor_food_on_body_is_respawned(state_factory):
    st = state_factory(food=(4, 5))
    assert st.food not in st.body
    assert st.in_bounds(st.food)


def test_constructor_replaces_empty_body(cfg):
    st = SnakeState(cfg, grid_w=10, grid_h=10, body=[])
    assert st.body == cfg.start_body
    assert st.food not in st.body


def test_constructor_clamps_grid_and_body(cfg):
    st = SnakeState(cfg, grid_w=0, grid_h=-3, body=[(5, 5)])
    assert (st.grid_w, st.grid_h) == (1, 1)
    assert st.body == ((0, 0),)


def test_snapshot_occupancy(state_factory):
    st = state_factory(food=(1, 1))
    grid = st.snapshot().occupancy()
    assert grid.shape == (10, 10)
    assert grid[5, 5] == 2 and grid[5, 4] == 1 and grid[5, 3] == 1
    assert grid[1, 1] == 3
    assert int((grid > 0).sum()) == 4
