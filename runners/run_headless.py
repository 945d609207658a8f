# runners/run_headless.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from config import AppConfig
from core.game_session import GameSession
from core.interfaces import HeadingPolicy
from core.preferences import Preferences
from core.results_log import ResultsLog
from policy.autopilot import Autopilot
from viz.renderer_headless import HeadlessRenderer


@dataclass(frozen=True)
class GameSummary:
    game: int
    score: int
    length: int
    ticks: int
    reason: Optional[str]
    new_record: bool


def play_game(session: GameSession, policy: HeadingPolicy, max_ticks: int,
              renderer: Optional[HeadlessRenderer] = None) -> GameSummary:
    """Drive one game to its end (or `max_ticks`) with `policy` choosing headings."""
    ticks = 0
    while not session.game_over and ticks < max_ticks:
        session.turn(policy.act(session.state.snapshot()))
        session.tick()
        ticks += 1
        if renderer is not None:
            renderer.draw(session.frame())
    st = session.state
    return GameSummary(
        game=session.games_played,
        score=session.score,
        length=len(st),
        ticks=st.step_count,
        reason=st.reason if session.game_over else "max_ticks",
        new_record=session.new_record,
    )


def main(cfg: Optional[AppConfig] = None, games: Optional[int] = None) -> List[GameSummary]:
    cfg = (cfg or AppConfig()).validate()
    games = cfg.headless_games if games is None else games

    prefs = Preferences(cfg.prefs_path).load()
    results = ResultsLog(cfg.results_path) if cfg.results_path else None
    session = GameSession(cfg, prefs=prefs, results=results)
    session.resize(cfg.screen_w, cfg.screen_h)
    policy = Autopilot(consider_tail_free=True)
    renderer = HeadlessRenderer(keep=1)
    renderer.open(cfg, cfg.screen_w, cfg.screen_h)

    st = session.state
    print("=== Snake headless ===")
    print(f"grid: {st.grid_w}x{st.grid_h}  cell: {st.cell_px}px  games: {games}")

    out: List[GameSummary] = []
    try:
        for g in range(games):
            if g > 0:
                session.restart()
            s = play_game(session, policy, cfg.headless_max_ticks, renderer)
            out.append(s)
            print(f"[headless] game {g:03d}  score={s.score}  len={s.length}  "
                  f"ticks={s.ticks}  reason={s.reason}")
    finally:
        renderer.close()
        if results is not None:
            results.close()

    best = max((s.score for s in out), default=0)
    print(f"[headless] best score: {best}  high score: {prefs.high_score}")
    return out
