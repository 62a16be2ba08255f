"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the standard board dimensions, the player/cell and
game-outcome enumerations, the direction vectors used by the win scan,
and ASCII rendering shared by the board, the environment and the CLI.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def label(self) -> str:
        """Human-facing name, e.g. 'Player 1'."""
        if self == Player.EMPTY:
            return "Nobody"
        return f"Player {self.value}"

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or a running game."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def for_winner(cls, player: Player) -> 'GameResult':
        """Map a player to its winning result."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player!r} cannot win a game")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: 2D array of cell values (any shape)

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    result = [border]
    for row in range(rows):
        cells = [str(Player(int(grid[row, col]))) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap after 9 so wide boards stay aligned
    result.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(result)
