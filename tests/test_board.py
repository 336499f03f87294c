"""Tests for the Board module."""

import json

import numpy as np
import pytest

from grid_snake.board import Board, GameOverReason, GameStatus
from grid_snake.body import Body
from grid_snake.cell import Cell, Direction, opposite
from grid_snake.config import BoardConfig
from grid_snake.errors import GameAlreadyOverError, SnakeError


def _board(
    columns: int = 10,
    rows: int = 10,
    *,
    cells: list[tuple[int, int]] | None = None,
    direction: str = "down",
    food: tuple[int, int] | None = None,
    seed: int = 0,
) -> Board:
    config = BoardConfig(columns=columns, rows=rows, initial_direction=direction)
    body = Body.from_cells(cells) if cells is not None else None
    return Board(config, body=body, food=food, rng=np.random.default_rng(seed))


def _place_food_ahead(board: Board) -> bool:
    """Put the food directly in front of the head, if that cell is free."""
    ahead = board.body.head.step(board.pending_direction)
    if not board.grid.in_bounds(ahead) or board.body.contains(ahead):
        return False
    board.food = ahead
    return True


class TestBoardInit:
    def test_default_init(self):
        board = Board(rng=np.random.default_rng(0))
        assert board.score == 0
        assert board.tick == 0
        assert board.status is GameStatus.RUNNING
        assert board.reason is None
        assert board.body.size() == 1
        assert board.body.head == Cell(10, 10)
        assert board.last_direction is Direction.DOWN
        assert board.pending_direction is Direction.DOWN

    def test_dimensions_come_from_config(self):
        board = Board(BoardConfig(columns=12, rows=7, square_size=16, seed=1))
        assert board.columns == 12
        assert board.rows == 7
        assert board.square_size == 16

    def test_food_spawned_on_init(self):
        board = _board()
        assert board.food is not None
        assert board.grid.in_bounds(board.food)
        assert not board.body.contains(board.food)

    def test_explicit_food_is_validated(self):
        with pytest.raises(ValueError, match="off the body"):
            _board(cells=[(5, 5)], food=(5, 5))
        with pytest.raises(ValueError, match="off the body"):
            _board(cells=[(5, 5)], food=(10, 0))

    def test_body_outside_grid_rejected(self):
        with pytest.raises(ValueError, match="inside the grid"):
            _board(cells=[(10, 5)])

    def test_single_cell_board_is_immediately_full(self):
        board = Board(BoardConfig(columns=1, rows=1), rng=np.random.default_rng(0))
        assert board.game_over
        assert board.reason is GameOverReason.BOARD_FULL
        assert board.food is None


class TestBoardDirection:
    @pytest.mark.parametrize("last", list(Direction))
    @pytest.mark.parametrize("requested", list(Direction))
    def test_single_segment_accepts_any_turn(self, last, requested):
        board = _board(cells=[(5, 5)], direction=last.name, food=(0, 0))
        assert board.request_direction(requested)
        assert board.pending_direction is requested

    @pytest.mark.parametrize("last", list(Direction))
    def test_long_body_rejects_reversal(self, last):
        head = Cell(5, 5)
        neck = head.step(opposite(last))
        board = _board(cells=[head, neck], direction=last.name, food=(0, 0))
        assert not board.request_direction(opposite(last))
        assert board.pending_direction is last

    def test_named_requests(self):
        board = _board(cells=[(5, 5), (4, 5), (3, 5)], direction="right", food=(0, 0))
        board.direction_left()
        assert board.pending_direction is Direction.RIGHT
        board.direction_up()
        assert board.pending_direction is Direction.UP
        board.direction_down()
        assert board.pending_direction is Direction.DOWN
        board.direction_right()
        assert board.pending_direction is Direction.RIGHT

    def test_latest_accepted_request_wins(self):
        board = _board(cells=[(5, 5), (4, 5), (3, 5)], direction="right", food=(0, 0))
        board.direction_up()
        board.direction_down()
        board.update()
        assert board.body.head == Cell(5, 6)
        assert board.last_direction is Direction.DOWN

    def test_reversal_checked_against_last_executed_move(self):
        board = _board(cells=[(5, 5), (4, 5), (3, 5)], direction="right", food=(0, 0))
        board.direction_up()
        # LEFT reverses the last executed move (RIGHT), not the pending UP.
        board.direction_left()
        assert board.pending_direction is Direction.UP

    def test_reversal_rejected_right_after_eating(self):
        board = _board(cells=[(5, 5)], direction="down", food=(5, 6))
        board.update()
        assert len(board.body) == 1
        assert not board.request_direction(Direction.UP)


class TestBoardMovement:
    def test_move_without_food_preserves_size(self):
        board = _board(cells=[(5, 5), (4, 5), (3, 5)], direction="right", food=(0, 0))
        for turn in (Direction.RIGHT, Direction.DOWN, Direction.LEFT):
            board.request_direction(turn)
            result = board.update()
            assert not result.game_over
            assert board.body.size() == 3
        assert board.tick == 3

    def test_update_reports_running_result(self):
        board = _board(cells=[(5, 5)], food=(0, 0))
        result = board.update()
        assert result.status is GameStatus.RUNNING
        assert result.reason is None
        assert result.score == 0
        assert result.tick == 1


class TestBoardFood:
    def test_eating_scenario(self):
        board = _board(cells=[(5, 5)], direction="down", food=(5, 6))
        result = board.update()
        assert board.segments() == (Cell(5, 6),)
        assert result.score == 10
        assert board.score == 10
        assert board.body.size() == 2
        assert board.food is not None
        assert not board.body.contains(board.food)
        assert board.food != Cell(5, 6)

    def test_growth_shows_up_on_next_move(self):
        board = _board(cells=[(5, 5)], direction="down", food=(5, 6))
        board.update()
        if board.food == Cell(5, 7):
            board.food = Cell(0, 0)
        board.update()
        assert board.segments() == (Cell(5, 7), Cell(5, 6))

    @pytest.mark.parametrize("seed", range(5))
    def test_eating_grows_by_one_and_scores_ten(self, seed):
        board = _board(20, 20, cells=[(10, 10)], direction="right", seed=seed)
        rng = np.random.default_rng(seed)
        directions = list(Direction)
        for _ in range(30):
            board.request_direction(directions[int(rng.integers(4))])
            if not _place_food_ahead(board):
                break
            size, score = board.body.size(), board.score
            result = board.update()
            if result.game_over:
                break
            assert board.body.size() == size + 1
            assert board.score == score + 10
            assert board.food is not None
            assert not board.body.contains(board.food)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_food_never_spawns_on_body(self, seed):
        rng = np.random.default_rng(seed)
        directions = list(Direction)
        board = Board(BoardConfig(columns=6, rows=6), rng=rng)
        for _ in range(300):
            if board.game_over:
                break
            assert board.food is not None
            assert not board.body.contains(board.food)
            # Steer toward the food often enough to eat and grow.
            if rng.random() < 0.7:
                _place_food_ahead(board)
            else:
                board.request_direction(directions[int(rng.integers(4))])
            board.update()
        assert board.score % 10 == 0

    def test_board_full_ends_game(self):
        board = _board(3, 1, cells=[(1, 0), (0, 0)], direction="right", food=(2, 0))
        result = board.update()
        assert result.game_over
        assert result.reason is GameOverReason.BOARD_FULL
        assert result.score == 10
        assert board.food is None


class TestBoardGameOver:
    def test_out_of_bounds_scenario(self):
        board = _board(cells=[(0, 5), (1, 5)], direction="left", food=(9, 9))
        result = board.update()
        assert board.body.head == Cell(-1, 5)
        assert result.game_over
        assert result.reason is GameOverReason.OUT_OF_BOUNDS
        assert result.score == 0

    @pytest.mark.parametrize(
        ("start", "direction"),
        [((9, 0), "right"), ((0, 0), "up"), ((0, 9), "down"), ((0, 0), "left")],
    )
    def test_every_edge_is_fatal(self, start, direction):
        board = _board(cells=[start], direction=direction, food=(5, 5))
        assert board.update().reason is GameOverReason.OUT_OF_BOUNDS

    def test_self_collision_scenario(self):
        # Head (3,4) facing right onto (4,4), an existing segment.
        board = _board(
            cells=[(3, 4), (4, 4), (4, 3), (3, 3)], direction="right", food=(0, 0),
        )
        result = board.update()
        assert result.game_over
        assert result.reason is GameOverReason.SELF_COLLISION
        assert board.status is GameStatus.GAME_OVER

    def test_following_own_tail_is_legal(self):
        board = _board(
            cells=[(3, 4), (3, 3), (4, 3), (4, 4)], direction="right", food=(0, 0),
        )
        assert not board.update().game_over

    def test_no_mutation_after_game_over(self):
        board = _board(cells=[(0, 5), (1, 5)], direction="left", food=(9, 9))
        board.update()
        snapshot = board.to_dict()
        with pytest.raises(GameAlreadyOverError, match="already over"):
            board.update()
        with pytest.raises(GameAlreadyOverError):
            board.direction_up()
        assert board.to_dict() == snapshot

    def test_game_already_over_is_snake_error(self):
        board = _board(cells=[(0, 5)], direction="left", food=(9, 9))
        board.update()
        with pytest.raises(SnakeError) as excinfo:
            board.update()
        assert excinfo.value.score == 0

    def test_score_survives_game_over(self):
        board = _board(cells=[(0, 1)], direction="up", food=(0, 0))
        board.update()
        assert board.score == 10
        board.request_direction(Direction.UP)
        result = board.update()
        assert result.reason is GameOverReason.OUT_OF_BOUNDS
        assert result.score == 10


class TestBoardRendering:
    def test_text_rendering(self):
        board = _board(4, 3, cells=[(1, 1), (0, 1)], direction="right", food=(3, 2))
        assert str(board) == "- - - - \nS S - - \n- - - F \n"

    def test_state_is_json_serializable(self):
        board = _board(seed=42)
        board.update()
        state = board.to_dict()
        assert isinstance(json.dumps(state), str)

    def test_state_structure(self):
        board = _board(cells=[(5, 5)], food=(0, 0))
        state = board.to_dict()
        assert state["status"] == "running"
        assert state["reason"] is None
        assert state["food"] == [0, 0]
        assert state["direction"] == "down"
        assert state["body"]["segments"] == [[5, 5]]


class TestBoardDeterminism:
    def test_same_seed_same_outcome(self):
        actions = [
            Direction.RIGHT, Direction.RIGHT, Direction.DOWN,
            Direction.DOWN, Direction.LEFT,
        ]
        assert self._run_game(123, actions) == self._run_game(123, actions)

    @staticmethod
    def _run_game(seed: int, actions: list[Direction]) -> dict:
        board = Board(BoardConfig(columns=20, rows=20, seed=seed))
        for action in actions:
            board.request_direction(action)
            board.update()
        return board.to_dict()
