"""
Best-score persistence.

The game session only needs a capability that can read and write one
non-negative integer. Two backends are provided:
  - MemoryScoreStore: keeps the value in process (tests, headless runs).
  - FileScoreStore: a small YAML file with an expiry timestamp, so a stale
    best score disappears after max_age seconds (one year by default).
"""

from __future__ import annotations

import pathlib
import time
from typing import Protocol

import yaml

# One year, matching the lifetime of the browser cookie the score used to live in.
DEFAULT_MAX_AGE = 31_536_000


class ScoreStore(Protocol):
    """Anything that can read and write a best score."""

    def read(self) -> int:
        ...

    def write(self, score: int) -> None:
        ...


def _check_score(score: int) -> int:
    score = int(score)
    if score < 0:
        raise ValueError(f"Score must be non-negative, got {score}")
    return score


class MemoryScoreStore:
    """In-process score store."""

    def __init__(self, initial: int = 0) -> None:
        self._value = _check_score(initial)

    def read(self) -> int:
        return self._value

    def write(self, score: int) -> None:
        self._value = _check_score(score)


class FileScoreStore:
    """YAML-file score store with an expiry policy.

    File format::

        best_score: 1200
        expires_at: 1767225600.0

    A missing, expired or malformed file reads as 0.

    Attributes:
        path: Location of the YAML file.
        max_age: Seconds a written score stays valid.
    """

    def __init__(
        self,
        path: str | pathlib.Path,
        max_age: float = DEFAULT_MAX_AGE,
        clock=time.time,
    ) -> None:
        self.path = pathlib.Path(path).expanduser()
        self.max_age = max_age
        self._clock = clock

    def read(self) -> int:
        """Return the stored best score, or 0 if there is none."""
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Ignoring unreadable score file {self.path}: {e}")
            return 0

        if not isinstance(data, dict):
            return 0
        score = data.get("best_score")
        expires_at = data.get("expires_at")
        if not isinstance(score, int) or score < 0:
            return 0
        if isinstance(expires_at, (int, float)) and expires_at <= self._clock():
            return 0
        return score

    def write(self, score: int) -> None:
        """Persist a score and push its expiry max_age seconds into the future."""
        score = _check_score(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                {"best_score": score, "expires_at": float(self._clock() + self.max_age)},
                f,
            )
