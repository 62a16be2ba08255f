"""
env.py - Gymnasium adapter for the Connect Four engine

ConnectFourEnv exposes a GameEngine through the Gymnasium interface so any
Gymnasium-aware front end can drive a game. Both players act through step();
there is no built-in opponent.
"""

from typing import Any, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_engine.debug import debug
from connect4_engine.exceptions import InvalidMove
from connect4_engine.game.engine import GameEngine
from connect4_engine.utils import ROWS, COLS, GameResult


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Rewards are given from the point of view of the player who just moved.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, render_mode: Optional[str] = None, rows: int = ROWS, cols: int = COLS):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            rows: Board height
            cols: Board width
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.engine = GameEngine(rows, cols)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(cols)
        # Observation: rows x cols board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8)

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment to initial state.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Take a step in the environment by making a move for the active player.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        try:
            result = self.engine.apply_move(action)
        except InvalidMove as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['invalid_reason'] = e.reason
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = result.outcome.is_game_over()
        if result.outcome == GameResult.DRAW:
            reward = self.reward_draw
        elif terminated:
            reward = self.reward_win

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            The ASCII board in "ascii" mode, otherwise None
        """
        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())

        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_board().grid.copy()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.engine.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.get_active_player().value,
            'game_result': self.engine.get_outcome().name,
            'moves_made': self.engine.move_count,
            'winning_line': self.engine.get_winning_line(),
            'last_move': self.engine.last_move,
        }
