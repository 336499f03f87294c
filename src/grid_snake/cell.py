"""Grid coordinates and movement directions."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Direction(enum.Enum):
    """Cardinal movement directions with (column_delta, row_delta) values.

    Row 0 is the top row, so ``UP`` decreases the row index.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITES[direction]


class Cell(NamedTuple):
    """One grid square, addressed as (column, row)."""

    column: int
    row: int

    def step(self, direction: Direction) -> Cell:
        """Return the neighbouring cell in *direction*."""
        dc, dr = direction.value
        return Cell(self.column + dc, self.row + dr)
