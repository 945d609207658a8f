# core/game_session.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import random

from config import AppConfig
from .interfaces import Frame, Heading, StepOutcome
from .preferences import Preferences
from .results_log import ResultsLog
from .snake_state import SnakeState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickEvent:
    outcome: StepOutcome
    ate: bool = False
    score: int = 0
    new_record: bool = False


class GameSession:
    """
    Host-side per-tick logic around a SnakeState: score, tick interval,
    celebration effects, game over and restart.
    """

    def __init__(
        self,
        cfg: AppConfig,
        prefs: Optional[Preferences] = None,
        results: Optional[ResultsLog] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.prefs = prefs
        self.results = results
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.games_played = 0
        self._viewport: Optional[tuple[int, int]] = None
        self._reset()

    def _reset(self) -> None:
        self.state = SnakeState(self.cfg, rng=self.rng)
        if self._viewport is not None:
            self.state.set_bounds(*self._viewport)
            # the constructor placed food on the default grid
            self.state.spawn_food()
        self.score = 0
        self.game_over = False
        self.new_record = False
        self.message: Optional[str] = None
        self.message_timer = 0
        self.color_index = 0
        self.color_timer = 0

    def restart(self) -> None:
        self._reset()

    @property
    def high_score(self) -> int:
        return self.prefs.high_score if self.prefs is not None else 0

    @property
    def player_name(self) -> str:
        return self.cfg.player_name

    def welcome_message(self) -> str:
        return f"Let's go {self.player_name}! Ready to beat your high score?"

    # ---- host events ----
    def resize(self, width: int, height: int) -> None:
        if width > 0 and height > 0:
            self._viewport = (width, height)
        self.state.set_bounds(width, height)

    def turn(self, heading: Heading) -> bool:
        if self.game_over:
            return False
        return self.state.set_heading(heading)

    def tick(self) -> TickEvent:
        if self.game_over:
            return TickEvent(StepOutcome.COLLIDED, score=self.score)

        outcome = self.state.step()
        if outcome is StepOutcome.COLLIDED:
            return self._end_game()

        ate = self.state.check_food_eaten()
        if ate:
            self.score += 1
            self.state.grow()
            self.state.spawn_food()
            self._celebrate()
        self._tick_timers()
        return TickEvent(outcome, ate=ate, score=self.score)

    def tick_interval_ms(self) -> int:
        c = self.cfg
        return max(c.min_tick_ms, c.base_tick_ms - self.score * c.tick_step_ms)

    # ---- effects ----
    def _celebrate(self) -> None:
        if self.score % self.cfg.message_every == 0:
            self.message = self.rng.choice(self.cfg.messages).format(name=self.player_name)
            self.message_timer = self.cfg.message_ticks
        if self.score % self.cfg.color_every == 0:
            self.color_index = (self.color_index + 1) % len(self.cfg.special_colors)
            self.color_timer = self.cfg.color_ticks

    def _tick_timers(self) -> None:
        if self.message_timer > 0:
            self.message_timer -= 1
            if self.message_timer == 0:
                self.message = None
        if self.color_timer > 0:
            self.color_timer -= 1

    def game_over_message(self) -> str:
        if self.score > self.cfg.big_score:
            return f"Amazing, {self.player_name}! Score: {self.score}"
        return f"Good try, {self.player_name}! Score: {self.score}"

    def _end_game(self) -> TickEvent:
        self.game_over = True
        self.games_played += 1
        self.message = self.game_over_message()
        self.message_timer = 0
        self.color_timer = 0
        if self.prefs is not None:
            self.new_record = self.prefs.record_score(self.score)
        if self.new_record:
            log.info("new high score %d", self.score)
        if self.results is not None:
            self.results.log({
                "game": self.games_played,
                "score": self.score,
                "length": len(self.state),
                "ticks": self.state.step_count,
                "reason": self.state.reason,
                "new_record": int(self.new_record),
            })
        log.debug("game %d over: score=%d reason=%s", self.games_played, self.score, self.state.reason)
        return TickEvent(StepOutcome.COLLIDED, score=self.score, new_record=self.new_record)

    # ---- view ----
    def frame(self) -> Frame:
        special = None
        if self.color_timer > 0:
            special = self.cfg.special_colors[self.color_index]
        return Frame(
            snapshot=self.state.snapshot(),
            score=self.score,
            high_score=self.high_score,
            player_name=self.player_name,
            message=self.message,
            special_color=special,
            game_over=self.game_over,
            background_blue=min(self.score * 2, 50),
            cell_px=self.state.cell_px,
        )
