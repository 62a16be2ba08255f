"""
board.py - Board representation for the Connect Four engine

This module implements the Board class, which owns the grid and performs
gravity drops, and BoardSnapshot, the read-only view handed to callers.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.utils import ROWS, COLS, Player, GameResult, render_board_ascii


@dataclass(frozen=True, eq=False)
class BoardSnapshot:
    """
    Read-only copy of the board plus the turn and outcome it was taken at.

    The grid is a private copy with the writeable flag cleared, so
    mutating it raises instead of changing the game.
    """
    grid: np.ndarray
    active_player: Player
    outcome: GameResult

    @property
    def rows(self) -> int:
        return self.grid.shape[0]

    @property
    def cols(self) -> int:
        return self.grid.shape[1]

    def cell(self, row: int, col: int) -> Player:
        """Get the state of a single cell."""
        return Player(int(self.grid[row, col]))

    def to_list(self) -> List[List[int]]:
        """The grid as nested lists of cell values."""
        return self.grid.tolist()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardSnapshot):
            return NotImplemented
        return (self.active_player == other.active_player
                and self.outcome == other.outcome
                and np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return self.render()


class Board:
    """
    Represents a Connect Four grid.

    Row 0 is the top of the board; discs settle toward the highest row index.
    The board knows nothing about turns or outcomes, which the GameEngine owns.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """Initialize an empty board of the given size."""
        debug.trace(f"Initializing new {rows}x{cols} Board", "board")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    def clear(self):
        """Empty every cell."""
        debug.trace("Clearing board", "board")
        self.grid.fill(Player.EMPTY.value)

    def is_valid_column(self, column) -> bool:
        """Check that column is an integer index inside the board."""
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.cols

    def is_column_full(self, column: int) -> bool:
        """A column is full once its top cell is occupied."""
        return self.grid[0, column] != Player.EMPTY.value

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not np.any(self.grid == Player.EMPTY.value)

    def occupied_count(self) -> int:
        """Number of discs on the board."""
        return int(np.count_nonzero(self.grid))

    def drop(self, column: int, player: Player) -> int:
        """
        Drop a disc for player into column.

        The caller must have checked the column; dropping into a full
        column raises ValueError.

        Returns:
            The row the disc landed in
        """
        # Find the lowest empty row in the column
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                self.grid[row, column] = player.value
                debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
                return row

        raise ValueError(f"column {column} is full")

    def snapshot(self, active_player: Player, outcome: GameResult) -> BoardSnapshot:
        """Take a read-only copy of the board."""
        grid = self.grid.copy()
        grid.flags.writeable = False
        return BoardSnapshot(grid=grid, active_player=active_player, outcome=outcome)

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
