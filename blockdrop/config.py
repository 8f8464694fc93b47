"""Configuration loading (YAML file -> GameConfig)."""

from __future__ import annotations

import dataclasses
import pathlib
from dataclasses import dataclass
from typing import Any

import yaml

from blockdrop.game.board import COLS, ROWS
from blockdrop.game.session import TICK_MS


@dataclass
class GameConfig:
    rows: int = ROWS
    cols: int = COLS
    tick_ms: int = TICK_MS
    cell_size: int = 28
    fps: int = 60
    dark_mode: bool = True
    score_file: str = "~/.blockdrop_score.yaml"
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("rows", "cols", "tick_ms", "cell_size", "fps"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> GameConfig:
        """Build a config from a plain dict, ignoring unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


def load_config(config_path: str | pathlib.Path) -> GameConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        A validated GameConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If a value is out of range.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return GameConfig.from_dict(yaml.safe_load(f))
