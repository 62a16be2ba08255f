"""
config.py - Board configuration for the Connect Four engine

The standard game is played on 6 rows by 7 columns. The engine accepts any
board of at least 4x4; BoardConfig validates dimensions up front so a bad
size is rejected before any game state exists.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from connect4_engine.exceptions import InvalidConfiguration
from connect4_engine.utils import ROWS, COLS, MIN_DIMENSION

# Environment variables read by BoardConfig.from_env and the CLI
ENV_ROWS = "CONNECT4_ROWS"
ENV_COLS = "CONNECT4_COLS"
ENV_DEBUG_LEVEL = "CONNECT4_DEBUG_LEVEL"


def _is_dimension(value) -> bool:
    # bool is an int subclass but never a board size
    return isinstance(value, int) and not isinstance(value, bool) and value >= MIN_DIMENSION


@dataclass(frozen=True)
class BoardConfig:
    """Dimensions of a Connect Four board."""
    rows: int = ROWS
    cols: int = COLS

    def validate(self) -> 'BoardConfig':
        """
        Check that both dimensions are usable.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidConfiguration: if either dimension is not an int >= 4
        """
        if not (_is_dimension(self.rows) and _is_dimension(self.cols)):
            raise InvalidConfiguration(self.rows, self.cols)
        return self

    @property
    def cells(self) -> int:
        return self.rows * self.cols

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'BoardConfig':
        """
        Build a validated config from CONNECT4_ROWS / CONNECT4_COLS.

        Unset variables fall back to the standard 6x7 size.
        """
        if environ is None:
            environ = os.environ

        raw_rows = environ.get(ENV_ROWS, str(ROWS))
        raw_cols = environ.get(ENV_COLS, str(COLS))
        try:
            rows, cols = int(raw_rows), int(raw_cols)
        except ValueError:
            raise InvalidConfiguration(raw_rows, raw_cols) from None

        return cls(rows=rows, cols=cols).validate()
