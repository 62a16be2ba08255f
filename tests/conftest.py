"""Shared fixtures for the Connect Four engine tests."""

from typing import Iterable, List

import numpy as np
import pytest

from connect4_engine.game.engine import GameEngine, MoveResult
from connect4_engine.utils import ROWS, COLS, Player

# Column order that fills a 6x7 board without anyone connecting four.
# Columns start (bottom cell) with X X O O X X O and alternate upwards.
DRAW_SEQUENCE_6X7 = (
    [0, 2, 2, 0, 0, 2, 2, 0, 0, 2, 2, 0]
    + [1, 3, 3, 1, 1, 3, 3, 1, 1, 3, 3, 1]
    + [4, 6, 6, 4, 4, 6, 6, 4, 4, 6, 6, 4]
    + [5, 5, 5, 5, 5, 5]
)

# Fills a 4x4 board; the sixteenth move completes Player TWO's column 3
WIN_ON_FILL_SEQUENCE_4X4 = [0, 2, 0, 3, 1, 1, 1, 0, 0, 3, 2, 3, 2, 2, 1, 3]


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def play():
    """Apply a sequence of columns to an engine and return the last MoveResult."""
    def _play(engine: GameEngine, columns: Iterable[int]) -> MoveResult:
        result = None
        for column in columns:
            result = engine.apply_move(column)
        return result
    return _play


@pytest.fixture
def empty_grid():
    """Build an empty int8 grid; defaults to the standard size."""
    def _empty_grid(rows: int = ROWS, cols: int = COLS) -> np.ndarray:
        return np.zeros((rows, cols), dtype=np.int8)
    return _empty_grid


@pytest.fixture
def place():
    """Set the given (row, col) cells of a grid to player."""
    def _place(grid: np.ndarray, cells: List[tuple], player: Player) -> np.ndarray:
        for row, col in cells:
            grid[row, col] = player.value
        return grid
    return _place
