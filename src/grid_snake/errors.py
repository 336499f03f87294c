"""Exceptions raised by the game core."""

from __future__ import annotations


class SnakeError(Exception):
    """Base class for game core errors."""


class GameAlreadyOverError(SnakeError):
    """Raised when a finished game receives another tick or turn request."""

    def __init__(self, score: int) -> None:
        super().__init__(f"Game is already over (final score {score}).")
        self.score = score
