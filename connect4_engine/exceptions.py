"""Exceptions raised by the Connect Four engine."""

from typing import Any, Optional


class Connect4Error(Exception):
    """Base exception for all engine errors."""

    pass


class InvalidMove(Connect4Error):
    """
    Raised when a move cannot be applied.

    The engine checks every precondition before touching the board, so
    the game state is exactly as it was before the call.
    """

    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    COLUMN_FULL = "column_full"

    def __init__(self, column: Any, reason: str, message: Optional[str] = None):
        self.column = column
        self.reason = reason

        if message is None:
            if reason == self.GAME_OVER:
                message = "The game is over; reset to play again."
            elif reason == self.COLUMN_FULL:
                message = f"Column {column} is full."
            else:
                message = f"Column {column!r} is out of range."

        super().__init__(message)


class InvalidConfiguration(Connect4Error):
    """Raised when a board is configured with unusable dimensions."""

    def __init__(self, rows: Any, cols: Any, message: Optional[str] = None):
        self.rows = rows
        self.cols = cols

        if message is None:
            message = (
                f"Invalid board size {rows!r}x{cols!r}: "
                f"rows and columns must be integers of at least 4."
            )

        super().__init__(message)
