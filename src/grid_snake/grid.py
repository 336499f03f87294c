"""Grid bounds and occupancy snapshot for the board."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from grid_snake.cell import Cell

# Text rendering symbols, one per cell type.
_SYMBOLS = {0: "-", 1: "S", 2: "F"}


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed occupancy grid with fixed dimensions.

    The array is indexed ``[row, column]`` to match NumPy conventions,
    while the public API takes :class:`Cell` values in (column, row) order.
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.columns = columns
        self.rows = rows
        self.cells = np.zeros((rows, columns), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, cell: Cell | tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the grid."""
        column, row = cell
        return 0 <= column < self.columns and 0 <= row < self.rows

    def get(self, cell: Cell | tuple[int, int]) -> CellType:
        """Return the cell type at the given coordinate."""
        column, row = cell
        return CellType(self.cells[row, column])

    def set(self, cell: Cell | tuple[int, int], cell_type: CellType) -> None:
        column, row = cell
        self.cells[row, column] = cell_type

    def paint(
        self,
        body: Iterable[Cell],
        food: Cell | None = None,
    ) -> None:
        """Rebuild the occupancy array from a body and an optional food cell.

        Segments outside the grid (a head that just left it) are skipped.
        """
        self.clear()
        for seg in body:
            if self.in_bounds(seg):
                self.set(seg, CellType.SNAKE)
        if food is not None:
            self.set(food, CellType.FOOD)

    def empty_cells(self) -> list[Cell]:
        """Return all empty cells in row-major order."""
        rows, cols = np.where(self.cells == CellType.EMPTY)
        return [Cell(c, r) for r, c in zip(rows.tolist(), cols.tolist(), strict=True)]

    def render_text(self) -> str:
        """Render one line per row: ``S`` body, ``F`` food, ``-`` empty."""
        lines = []
        for row in self.cells.tolist():
            lines.append("".join(f"{_SYMBOLS[v]} " for v in row))
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "columns": self.columns,
            "rows": self.rows,
            "cells": self.cells.tolist(),
        }
