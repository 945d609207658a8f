from __future__ import annotations
import json, logging, os
from typing import Any, Dict

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {"high_score": 0, "music_enabled": True}


class Preferences:
    """Small JSON-backed key/value store for the high score and the music toggle."""
    def __init__(self, path: str):
        self.path = path
        self.high_score = 0
        self.music_enabled = True

    def get_state(self) -> Dict[str, Any]:
        return {"high_score": self.high_score, "music_enabled": self.music_enabled}

    def set_state(self, state: Dict[str, Any]) -> None:
        self.high_score = max(0, int(state.get("high_score", DEFAULTS["high_score"])))
        self.music_enabled = bool(state.get("music_enabled", DEFAULTS["music_enabled"]))

    def load(self) -> "Preferences":
        try:
            with open(self.path, "r") as f:
                state = json.load(f)
        except FileNotFoundError:
            state = dict(DEFAULTS)
        except (json.JSONDecodeError, OSError) as e:
            log.warning("could not read preferences %s (%s); using defaults", self.path, e)
            state = dict(DEFAULTS)
        if not isinstance(state, dict):
            log.warning("preferences %s is not an object; using defaults", self.path)
            state = dict(DEFAULTS)
        try:
            self.set_state(state)
        except (TypeError, ValueError) as e:
            log.warning("bad preference values in %s (%s); using defaults", self.path, e)
            self.set_state(DEFAULTS)
        return self

    def save(self) -> None:
        d = os.path.dirname(self.path)
        if d:
            os.makedirs(d, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w") as f:
            json.dump(self.get_state(), f)
        os.replace(tmp, self.path)

    def record_score(self, score: int) -> bool:
        """Persist `score` if it beats the stored high score. Returns True on a new record."""
        if score <= self.high_score:
            return False
        self.high_score = score
        try:
            self.save()
        except OSError as e:
            log.warning("could not save high score to %s (%s)", self.path, e)
        return True

    def toggle_music(self) -> bool:
        self.music_enabled = not self.music_enabled
        try:
            self.save()
        except OSError as e:
            log.warning("could not save music setting to %s (%s)", self.path, e)
        return self.music_enabled
