"""
engine.py - Game state management for Connect Four

This module implements GameEngine, which owns the board, the turn and the
game outcome. Presentation layers call apply_move and reset, and read back
BoardSnapshot copies; they never touch the engine's grid directly.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from connect4_engine.config import BoardConfig
from connect4_engine.debug import debug
from connect4_engine.exceptions import InvalidMove
from connect4_engine.game.board import Board, BoardSnapshot
from connect4_engine.game import rules
from connect4_engine.utils import ROWS, COLS, Player, GameResult


@dataclass(frozen=True)
class MoveResult:
    """Outcome of an accepted move."""
    row: int
    col: int
    outcome: GameResult
    next_player: Player


class GameEngine:
    """
    Connect Four rules engine.

    The game starts with an empty board, Player.ONE to move and the outcome
    IN_PROGRESS. Each accepted move fills one cell, then the outcome is
    re-evaluated (a win takes priority over a draw) and, if the game goes
    on, the turn passes to the other player. Once the game is won or drawn
    the turn is frozen and further moves are rejected until reset().
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Create an engine for a rows x cols board.

        Raises:
            InvalidConfiguration: if either dimension is smaller than 4
        """
        self.config = BoardConfig(rows, cols).validate()
        debug.debug(f"Initializing GameEngine ({rows}x{cols})", "engine")
        self._board = Board(rows, cols)
        self.initialize()

    @classmethod
    def from_config(cls, config: BoardConfig) -> 'GameEngine':
        return cls(config.rows, config.cols)

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def cols(self) -> int:
        return self._board.cols

    def initialize(self) -> BoardSnapshot:
        """
        Put the engine in its initial state.

        Returns:
            Snapshot of the empty board with Player.ONE to move
        """
        self._board.clear()
        self._active_player = Player.ONE
        self._outcome = GameResult.IN_PROGRESS
        self._move_count = 0
        self._last_move: Optional[Tuple[int, int]] = None
        return self.get_board()

    def reset(self) -> BoardSnapshot:
        """Discard the current game and start over."""
        debug.debug("Resetting game", "engine")
        return self.initialize()

    def _validate_move(self, column) -> None:
        """Raise InvalidMove unless column can be played right now."""
        if self._outcome.is_game_over():
            raise InvalidMove(column, InvalidMove.GAME_OVER)

        if not self._board.is_valid_column(column):
            raise InvalidMove(column, InvalidMove.OUT_OF_RANGE)

        if self._board.is_column_full(column):
            raise InvalidMove(column, InvalidMove.COLUMN_FULL)

    def apply_move(self, column: int) -> MoveResult:
        """
        Drop the active player's disc into column.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            MoveResult with the filled cell, the new outcome and the player to move next

        Raises:
            InvalidMove: if the game is over, the column is out of range or
                the column is full. The game state is left untouched.
        """
        mover = self._active_player
        debug.debug(f"Attempting move in column {column} for {mover.label}", "engine")

        try:
            self._validate_move(column)
        except InvalidMove as e:
            debug.debug(f"Rejected move: {e}", "engine")
            raise

        column = int(column)
        row = self._board.drop(column, mover)
        self._move_count += 1
        self._last_move = (row, column)

        debug.start_timer("win_check")
        if self.check_win(mover):
            self._outcome = GameResult.for_winner(mover)
            debug.info(f"{mover.label} wins after move at {self._last_move}", "engine")
        elif self.check_draw():
            self._outcome = GameResult.DRAW
            debug.info("Game ends in a draw", "engine")
        else:
            self._active_player = mover.other()
        debug.end_timer("win_check", "engine")

        return MoveResult(row=row, col=column, outcome=self._outcome,
                          next_player=self._active_player)

    def check_win(self, player: Player) -> bool:
        """True iff player has four in a row anywhere on the board."""
        return rules.check_win(self._board.grid, player)

    def check_draw(self) -> bool:
        """True iff the board has no empty cell left."""
        return rules.check_draw(self._board.grid)

    def get_board(self) -> BoardSnapshot:
        """Read-only copy of the current board."""
        return self._board.snapshot(self._active_player, self._outcome)

    def get_outcome(self) -> GameResult:
        return self._outcome

    def get_active_player(self) -> Player:
        """The player to move; after a terminal outcome, the player who moved last."""
        return self._active_player

    def is_game_over(self) -> bool:
        return self._outcome.is_game_over()

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self._last_move

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that can be played.

        Returns:
            List of valid column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return [col for col in range(self.cols) if not self._board.is_column_full(col)]

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the positions of the winning line if the game is won.

        Returns:
            List of (row, col) positions forming the winning line, or empty list if no win
        """
        winner = self._outcome.winner
        if winner is None:
            return []
        return rules.find_winning_line(self._board.grid, winner)

    def render(self) -> str:
        return self._board.render()

    def __str__(self) -> str:
        return self.render()
