from __future__ import annotations
import csv, os
from typing import Any, Dict, Optional

FIELDS = ["game", "score", "length", "ticks", "reason", "new_record"]


class ResultsLog:
    """Append-only CSV of finished games."""
    def __init__(self, path: str, fieldnames: Optional[list[str]] = None):
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames or list(FIELDS)
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(
            self._file,
            fieldnames=self._fieldnames,
            extrasaction="ignore",
        )
        if self._file.tell() == 0:
            self._writer.writeheader()

    def log(self, row: Dict[str, Any]) -> None:
        self._writer.writerow(row)
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "ResultsLog":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def read_results(path: str) -> list[Dict[str, str]]:
    with open(path, newline="") as f:
        return list(csv.DictReader(f))
