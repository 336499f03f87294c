"""Snake body representation and movement logic."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from grid_snake.cell import Cell, Direction


class Body:
    """A snake represented as an ordered deque of :class:`Cell` segments.

    The head is ``segments()[0]``; the tail is ``segments()[-1]``.
    Growth is deferred: :meth:`grow` makes the next move keep its tail
    instead of dropping it.
    """

    def __init__(
        self,
        start: Cell | tuple[int, int],
        length: int = 1,
        direction: Direction = Direction.DOWN,
    ) -> None:
        if length < 1:
            raise ValueError("Body length must be at least 1.")
        head = Cell(*start)
        dc, dr = direction.value
        self._segments: deque[Cell] = deque(
            Cell(head.column - dc * i, head.row - dr * i) for i in range(length)
        )
        self._grow_pending = 0

    @classmethod
    def from_cells(cls, cells: Iterable[Cell | tuple[int, int]]) -> Body:
        """Build a body from explicit head-first coordinates."""
        segments = [Cell(*c) for c in cells]
        if not segments:
            raise ValueError("Body needs at least one cell.")
        body = cls(segments[0])
        body._segments = deque(segments)
        return body

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self._segments[0]

    @property
    def tail(self) -> Cell:
        """Return the tail coordinate."""
        return self._segments[-1]

    @property
    def pending_growth(self) -> int:
        return self._grow_pending

    def size(self) -> int:
        """Committed length: occupied segments plus pending growth."""
        return len(self._segments) + self._grow_pending

    def contains(self, cell: Cell | tuple[int, int]) -> bool:
        """Check whether any segment occupies *cell*."""
        return Cell(*cell) in self._segments

    def grow(self, segments: int = 1) -> None:
        """Keep the tail in place for the next *segments* moves."""
        if segments < 1:
            raise ValueError("segments must be at least 1.")
        self._grow_pending += segments

    def move(self, direction: Direction) -> bool:
        """Shift the body one cell in *direction*.

        Returns ``False`` if the new head lands on another segment. The
        cell vacated by the tail in the same step is a legal target unless
        growth is pending. The shift is applied either way.
        """
        new_head = self.head.step(direction)
        if self._grow_pending > 0:
            self._grow_pending -= 1
        else:
            self._segments.pop()
        collided = new_head in self._segments
        self._segments.appendleft(new_head)
        return not collided

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def move_up(self) -> bool:
        return self.move(Direction.UP)

    def move_down(self) -> bool:
        return self.move(Direction.DOWN)

    def segments(self) -> tuple[Cell, ...]:
        """Return a head-to-tail snapshot of the occupied cells."""
        return tuple(self._segments)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.segments())

    def __len__(self) -> int:
        return len(self._segments)

    def __contains__(self, cell: object) -> bool:
        return cell in self._segments

    def __repr__(self) -> str:
        return f"Body({list(self._segments)!r}, pending_growth={self._grow_pending})"

    def to_dict(self) -> dict:
        """Serialize body state to a dictionary."""
        return {
            "segments": [list(seg) for seg in self._segments],
            "pending_growth": self._grow_pending,
        }
