# tests/test_renderer.py
import pygame as pg
import pytest

from config import AppConfig
from core.interfaces import Frame, Heading, Snapshot
from viz.keyboard import Keyboard
from viz.renderer_headless import frame_to_text
from viz.renderer_pygame import PygameRenderer, eye_positions
import viz.renderer_colors as theme


def _frame(**kwargs):
    snap = Snapshot(snake=((5, 5), (4, 5), (3, 5)), food=(1, 1), heading=Heading.RIGHT,
                    grid_w=10, grid_h=10)
    base = dict(snapshot=snap, score=0, high_score=3, player_name="Aditya", cell_px=30)
    base.update(kwargs)
    return Frame(**base)


def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)


@pytest.mark.parametrize("heading,expected", [
    (Heading.RIGHT, {(21.0, 9.0), (21.0, 21.0)}),
    (Heading.LEFT, {(9.0, 9.0), (9.0, 21.0)}),
    (Heading.UP, {(9.0, 9.0), (21.0, 9.0)}),
    (Heading.DOWN, {(9.0, 21.0), (21.0, 21.0)}),
])
def test_eye_positions_follow_heading(heading, expected):
    eyes = eye_positions(0, 0, heading, 30)
    assert {(round(x, 6), round(y, 6)) for x, y in eyes} == expected


def test_draw_paints_snake_and_background(screen):
    rend = PygameRenderer()
    rend.attach_surface(AppConfig(render_show_hud=False), screen)
    rend.draw(_frame())
    # body segment, away from the eyes
    assert _rgb(screen.get_at((4 * 30 + 2, 5 * 30 + 2))) == theme.BODY_ALT
    assert _rgb(screen.get_at((5 * 30 + 2, 5 * 30 + 2))) == theme.HEAD
    assert _rgb(screen.get_at((299, 299))) == theme.background(0)


def test_special_color_overrides_snake(screen):
    rend = PygameRenderer()
    rend.attach_surface(AppConfig(render_show_hud=False), screen)
    rend.draw(_frame(special_color=(255, 0, 255), background_blue=20))
    assert _rgb(screen.get_at((3 * 30 + 2, 5 * 30 + 2))) == (255, 0, 255)
    assert _rgb(screen.get_at((299, 299))) == theme.background(20)


def test_draw_without_open_fails():
    with pytest.raises(AssertionError):
        PygameRenderer().draw(_frame())


def test_open_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig, 100, 100)


def test_frame_to_text():
    rows = frame_to_text(_frame())
    assert rows[5] == "...ooH...."
    assert rows[1][1] == "F"


def test_keyboard_maps_keys_and_swipes(pygame_session):
    kbd = Keyboard(current_heading=lambda: Heading.RIGHT)
    key = lambda k: pg.event.Event(pg.KEYDOWN, key=k)
    assert kbd.handle(key(pg.K_UP)) is Heading.UP
    assert kbd.handle(key(pg.K_a)) is Heading.LEFT
    assert kbd.handle(key(pg.K_ESCAPE)) == "quit"
    assert kbd.handle(key(pg.K_r)) == "restart"
    assert kbd.handle(key(pg.K_m)) == "toggle_music"
    assert kbd.handle(pg.event.Event(pg.QUIT)) == "quit"
    assert kbd.handle(pg.event.Event(pg.MOUSEBUTTONDOWN, button=1, pos=(100, 100))) is None
    assert kbd.handle(pg.event.Event(pg.MOUSEBUTTONUP, button=1, pos=(110, 190))) is Heading.DOWN
    # reversal swipe is dropped
    kbd.handle(pg.event.Event(pg.MOUSEBUTTONDOWN, button=1, pos=(100, 100)))
    assert kbd.handle(pg.event.Event(pg.MOUSEBUTTONUP, button=1, pos=(10, 100))) is None
