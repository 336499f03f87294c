"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.cell import Cell

if TYPE_CHECKING:
    from grid_snake.body import Body
    from grid_snake.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


class FoodSpawner:
    """Places the single food cell on a free square.

    Draws uniformly random cells from a seeded NumPy RNG and retries while
    the draw lands on the body. After ``max_attempts`` draws it falls back
    to a uniform choice among the grid's empty cells, so a nearly full
    board still terminates.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, body: Body) -> Cell | None:
        """Return a random cell not occupied by *body*.

        Returns ``None`` when the body covers every cell of the grid.
        """
        for _ in range(self.max_attempts):
            cell = Cell(
                int(self.rng.integers(self.grid.columns)),
                int(self.rng.integers(self.grid.rows)),
            )
            if not body.contains(cell):
                return cell

        self.grid.paint(body)
        empty = self.grid.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food spawning.")
            return None
        logger.debug(
            "Random placement gave up after %d attempts; %d cells free.",
            self.max_attempts, len(empty),
        )
        return empty[int(self.rng.integers(len(empty)))]
