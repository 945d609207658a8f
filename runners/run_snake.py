# runners/run_snake.py
from __future__ import annotations
from typing import Optional
from config import AppConfig
from core.game_session import GameSession
from core.interfaces import Heading
from core.preferences import Preferences
from core.results_log import ResultsLog
from viz.keyboard import Keyboard
from viz.renderer_pygame import PygameRenderer


def main(cfg: Optional[AppConfig] = None) -> None:
    cfg = (cfg or AppConfig()).validate()

    prefs = Preferences(cfg.prefs_path).load()
    results = ResultsLog(cfg.results_path) if cfg.results_path else None
    session = GameSession(cfg, prefs=prefs, results=results)

    rend = PygameRenderer()
    rend.open(cfg, cfg.screen_w, cfg.screen_h)
    session.resize(cfg.screen_w, cfg.screen_h)
    kbd = Keyboard(current_heading=lambda: session.state.heading)

    print(f"[snake] {session.welcome_message()}")
    print(f"[snake] high score: {prefs.high_score}  music: {'on' if prefs.music_enabled else 'off'}")

    running = True
    try:
        while running:
            for cmd in kbd.poll():
                if cmd == "quit":
                    running = False
                elif cmd == "restart":
                    session.restart()
                elif cmd == "toggle_music":
                    on = prefs.toggle_music()
                    print(f"[snake] music {'on' if on else 'off'}")
                elif isinstance(cmd, Heading):
                    session.turn(cmd)
                elif isinstance(cmd, tuple) and cmd[0] == "resize":
                    w, h = cmd[1]
                    rend.resize(w, h)
                    session.resize(w, h)
            if not running:
                break

            if not session.game_over:
                ev = session.tick()
                if session.game_over:
                    print(f"[snake] game {session.games_played}  score={ev.score}  "
                          f"reason={session.state.reason}  new_record={ev.new_record}")
            rend.draw(session.frame())
            rend.tick(session.tick_interval_ms())
    finally:
        rend.close()
        if results is not None:
            results.close()
