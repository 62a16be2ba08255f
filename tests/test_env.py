"""Tests for the Gymnasium adapter."""

import numpy as np
import pytest

from connect4_engine.game.env import ConnectFourEnv
from connect4_engine.utils import GameResult, Player


@pytest.fixture
def env():
    env = ConnectFourEnv()
    env.reset(seed=0)
    yield env
    env.close()


def test_reset_returns_empty_observation(env):
    observation, info = env.reset()

    assert observation.shape == (6, 7)
    assert observation.dtype == np.int8
    assert env.observation_space.contains(observation)
    assert not observation.any()
    assert info['current_player'] == Player.ONE.value
    assert info['valid_moves'] == list(range(7))
    assert info['game_result'] == GameResult.IN_PROGRESS.name


def test_step_places_disc_for_active_player(env):
    observation, reward, terminated, truncated, info = env.step(3)

    assert observation[5, 3] == Player.ONE.value
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == Player.TWO.value
    assert info['last_move'] == (5, 3)
    assert info['moves_made'] == 1


def test_winning_step_terminates(env):
    for action in [0, 6, 0, 6, 0, 6]:
        env.step(action)

    _, reward, terminated, truncated, info = env.step(0)

    assert terminated and not truncated
    assert reward == env.reward_win
    assert info['game_result'] == GameResult.PLAYER_ONE_WIN.name
    assert len(info['winning_line']) == 4
    assert info['valid_moves'] == []


def test_invalid_step_leaves_board_unchanged(env):
    for _ in range(6):
        env.step(1)
    before = env.engine.get_board()

    observation, reward, terminated, truncated, info = env.step(1)

    assert reward == env.reward_invalid_move
    assert truncated and not terminated
    assert info['invalid_move'] is True
    assert info['invalid_reason'] == 'column_full'
    assert np.array_equal(observation, before.grid)
    assert env.engine.get_board() == before


def test_observation_is_a_copy(env):
    observation, *_ = env.step(2)
    observation[0, 0] = Player.TWO.value

    assert env.engine.get_board().cell(0, 0) == Player.EMPTY


def test_ascii_render():
    env = ConnectFourEnv(render_mode="ascii")
    env.reset()
    env.step(0)

    rendered = env.render()

    assert rendered.splitlines()[6] == "|X            |"


def test_unknown_render_mode_is_rejected():
    with pytest.raises(ValueError):
        ConnectFourEnv(render_mode="rgb_array")
