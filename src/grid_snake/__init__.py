"""Grid Snake — movement, collision, and growth core."""

from grid_snake.board import Board, GameOverReason, GameStatus, TickResult
from grid_snake.body import Body
from grid_snake.cell import Cell, Direction, opposite
from grid_snake.config import BoardConfig
from grid_snake.errors import GameAlreadyOverError, SnakeError
from grid_snake.food import FoodSpawner
from grid_snake.grid import CellType, Grid

__all__ = [
    "Board",
    "BoardConfig",
    "Body",
    "Cell",
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameAlreadyOverError",
    "GameOverReason",
    "GameStatus",
    "Grid",
    "SnakeError",
    "TickResult",
    "opposite",
]
