# config.py
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

DEFAULT_MESSAGES = (
    "Great job {name}!",
    "{name} is awesome!",
    "Super snake skills, {name}!",
    "{name} the Snake Master!",
    "Keep going, {name}!",
)

# yellow, cyan, magenta, green, white
DEFAULT_SPECIAL_COLORS = (
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
    (0, 255, 0),
    (255, 255, 255),
)

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    player_name: str = "Aditya"
    seed: Optional[int] = None

    # grid
    screen_w: int = 720
    screen_h: int = 1080
    cells_across: int = 30
    min_cell_px: int = 8
    max_cell_px: int = 64
    start_body: Tuple[Tuple[int, int], ...] = ((5, 5), (4, 5), (3, 5))
    spawn_retries: int = 64

    # tick timing (ms)
    base_tick_ms: int = 150
    tick_step_ms: int = 3
    min_tick_ms: int = 50

    # effects
    message_every: int = 5
    message_ticks: int = 30
    color_every: int = 3
    color_ticks: int = 20
    big_score: int = 10
    messages: Tuple[str, ...] = DEFAULT_MESSAGES
    special_colors: Tuple[Tuple[int, int, int], ...] = field(default=DEFAULT_SPECIAL_COLORS)

    # render
    render_title: str = "Snaditya"
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None
    resizable: bool = True

    # persistence / logs
    prefs_path: str = "runs/prefs.json"
    results_path: Optional[str] = "runs/results.csv"
    log_level: str = "INFO"

    # headless
    headless_games: int = 5
    headless_max_ticks: int = 5000

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        if self.cells_across < 1:
            raise ValueError(f"cells_across must be >= 1, got {self.cells_across}")
        if not (1 <= self.min_cell_px <= self.max_cell_px):
            raise ValueError(f"bad cell px range [{self.min_cell_px}, {self.max_cell_px}]")
        if self.min_tick_ms < 0 or self.base_tick_ms < self.min_tick_ms:
            raise ValueError("tick timing must satisfy 0 <= min_tick_ms <= base_tick_ms")
        if self.spawn_retries < 0:
            raise ValueError("spawn_retries must be >= 0")
        if self.message_every < 1 or self.color_every < 1:
            raise ValueError("effect cadences must be >= 1")
        if not self.messages or not self.special_colors:
            raise ValueError("messages and special_colors must be non-empty")
        return self
