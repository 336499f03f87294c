"""Board configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.cell import Cell, Direction
from grid_snake.food import DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardConfig:
    """Dimensions and rules for one game session.

    Supports JSON serialization so a session can be reproduced.
    """

    # Grid
    columns: int = 20
    rows: int = 20
    square_size: int = 20  # pixels per cell, for renderers

    # Rules
    food_reward: int = 10
    initial_direction: str = "down"
    start: tuple[int, int] | None = None  # (column, row); centre when None

    # Food placement
    max_spawn_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("columns and rows must each be at least 1.")
        if self.square_size < 1:
            raise ValueError("square_size must be at least 1.")
        if self.food_reward < 1:
            raise ValueError("food_reward must be at least 1.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")
        Direction.from_name(self.initial_direction)
        if self.start is not None:
            column, row = self.start
            if not (0 <= column < self.columns and 0 <= row < self.rows):
                raise ValueError("start must lie inside the grid.")

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    @property
    def start_cell(self) -> Cell:
        """Configured start cell, or the grid centre."""
        if self.start is not None:
            return Cell(*self.start)
        return Cell(self.columns // 2, self.rows // 2)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> BoardConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if raw.get("start") is not None:
            raw["start"] = tuple(raw["start"])
        return cls(**raw)
