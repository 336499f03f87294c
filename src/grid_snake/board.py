"""Tick-based board composing the body, grid, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from grid_snake.body import Body
from grid_snake.cell import Cell, Direction, opposite
from grid_snake.config import BoardConfig
from grid_snake.errors import GameAlreadyOverError
from grid_snake.food import FoodSpawner
from grid_snake.grid import Grid

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameOverReason(enum.Enum):
    """Why a session ended."""

    SELF_COLLISION = "self_collision"
    OUT_OF_BOUNDS = "out_of_bounds"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class TickResult:
    """Outcome of one :meth:`Board.update` call."""

    status: GameStatus
    score: int
    tick: int
    reason: GameOverReason | None = None

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER


class Board:
    """Single-snake, tick-based game board.

    The board owns the body, the food cell, the score, and the direction
    state. Each call to :meth:`update` advances the game by one tick.
    Direction requests are latched until the next tick; a request for the
    exact reverse of the last executed move is ignored while the body is
    longer than one segment. Once the game is over every further tick or
    direction request raises :class:`GameAlreadyOverError`.
    """

    def __init__(
        self,
        config: BoardConfig | None = None,
        *,
        body: Body | None = None,
        food: Cell | tuple[int, int] | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else BoardConfig()
        self.grid = Grid(self.config.columns, self.config.rows)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self._body = body if body is not None else Body(self.config.start_cell)
        if not all(self.grid.in_bounds(seg) for seg in self._body):
            raise ValueError("Body must lie inside the grid.")

        self._direction = self.config.direction
        self._pending_direction = self._direction

        self.score = 0
        self.tick = 0
        self.status = GameStatus.RUNNING
        self.reason: GameOverReason | None = None

        self.food_spawner = FoodSpawner(
            self.grid, rng=self.rng, max_attempts=self.config.max_spawn_attempts,
        )
        self.food: Cell | None
        if food is not None:
            food = Cell(*food)
            if not self.grid.in_bounds(food) or self._body.contains(food):
                raise ValueError("Food must be an in-bounds cell off the body.")
            self.food = food
        else:
            self.food = self.food_spawner.spawn(self._body)
            if self.food is None:
                self._end(GameOverReason.BOARD_FULL)

    # --- queries ---

    @property
    def body(self) -> Body:
        return self._body

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def square_size(self) -> int:
        return self.config.square_size

    @property
    def pending_direction(self) -> Direction:
        """Direction the next tick will execute."""
        return self._pending_direction

    @property
    def last_direction(self) -> Direction:
        """Direction executed on the most recent tick."""
        return self._direction

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def segments(self) -> tuple[Cell, ...]:
        """Head-to-tail snapshot of the body for renderers."""
        return self._body.segments()

    # --- direction requests ---

    def request_direction(self, direction: Direction) -> bool:
        """Latch *direction* for the next tick.

        Returns ``False`` when the request reverses the last executed move
        of a body longer than one segment; the pending direction is then
        left unchanged.
        """
        self._ensure_running()
        if direction is opposite(self._direction) and self._body.size() > 1:
            return False
        self._pending_direction = direction
        return True

    def direction_left(self) -> None:
        self.request_direction(Direction.LEFT)

    def direction_right(self) -> None:
        self.request_direction(Direction.RIGHT)

    def direction_up(self) -> None:
        self.request_direction(Direction.UP)

    def direction_down(self) -> None:
        self.request_direction(Direction.DOWN)

    # --- tick ---

    def update(self) -> TickResult:
        """Advance the game by one tick and report the outcome."""
        self._ensure_running()

        direction = self._pending_direction
        if not self._body.move(direction):
            return self._end(GameOverReason.SELF_COLLISION)

        head = self._body.head
        if not self.grid.in_bounds(head):
            return self._end(GameOverReason.OUT_OF_BOUNDS)

        self._direction = direction

        if head == self.food:
            self._body.grow()
            self.score += self.config.food_reward
            logger.debug("Food eaten at %s; score %d.", head, self.score)
            # The body has grown into every cell: nothing left to eat.
            if self._body.size() >= self.columns * self.rows:
                self.food = None
                return self._end(GameOverReason.BOARD_FULL)
            self.food = self.food_spawner.spawn(self._body)

        self.tick += 1
        return self.result()

    def result(self) -> TickResult:
        """Return the current status as a :class:`TickResult`."""
        return TickResult(
            status=self.status, score=self.score, tick=self.tick, reason=self.reason,
        )

    def to_dict(self) -> dict:
        """Return the full, serializable board state."""
        self.grid.paint(self._body, self.food)
        return {
            "tick": self.tick,
            "score": self.score,
            "status": self.status.value,
            "reason": self.reason.value if self.reason is not None else None,
            "direction": self._direction.name.lower(),
            "pending_direction": self._pending_direction.name.lower(),
            "food": list(self.food) if self.food is not None else None,
            "body": self._body.to_dict(),
            "grid": self.grid.to_dict(),
        }

    def __str__(self) -> str:
        self.grid.paint(self._body, self.food)
        return self.grid.render_text()

    def _ensure_running(self) -> None:
        if self.status is GameStatus.GAME_OVER:
            raise GameAlreadyOverError(self.score)

    def _end(self, reason: GameOverReason) -> TickResult:
        """Mark the session finished and report the final score."""
        self.status = GameStatus.GAME_OVER
        self.reason = reason
        self.tick += 1
        logger.info(
            "Game over at tick %d (%s) with score %d.",
            self.tick, reason.value, self.score,
        )
        return self.result()
