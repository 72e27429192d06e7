import numpy as np

from memory_match.gym import MemoryEnv
from memory_match.typings import Cell

from tests.helpers import pair_cells


def test_reset_shapes_and_mask():
  env = MemoryEnv(seed=123)
  try:
    obs, info = env.reset()
    assert obs.shape == (4, 4)
    assert obs.dtype == np.int32
    assert not obs.any()
    assert env.observation_space.contains(obs)
    mask = info['action_mask']
    assert mask.shape == (16,)
    assert mask.dtype == np.int8
    assert mask.all()
    assert info['move_count'] == 0
  finally:
    env.close()


def test_deterministic_reset_with_seed():
  env1 = MemoryEnv(seed=7)
  env2 = MemoryEnv(seed=7)
  env1.reset()
  env2.reset()
  assert env1.engine.board == env2.engine.board


def test_perfect_play_rewards_and_terminates():
  env = MemoryEnv(seed=1)
  env.reset()
  total = 0.0
  terminated = False
  for a, b in pair_cells(env.engine.board).values():
    _, r1, terminated, _, _ = env.step(a.index)
    obs, r2, terminated, truncated, info = env.step(b.index)
    total += r1 + r2
    assert info['match_result'] == 'match'
    assert not truncated
  assert terminated
  assert total == 8.0
  assert obs.all()
  assert info['move_count'] == 8


def test_mismatch_visible_then_hidden_and_illegal_penalty():
  env = MemoryEnv(seed=2)
  env.reset()
  pairs = list(pair_cells(env.engine.board).values())
  a, b = pairs[0][0], pairs[1][0]
  env.step(a.index)
  obs, reward, *_ , info = env.step(b.index)
  assert reward == 0.0
  assert info['match_result'] == 'no_match'
  assert obs[a.row, a.col] > 0 and obs[b.row, b.col] > 0
  # cards of the pending mismatch are pickable again
  assert info['action_mask'][a.index] == 1

  # the pair is hidden before the next pick is applied
  c = pairs[2][0]
  obs, *_ = env.step(c.index)
  assert obs[a.row, a.col] == 0 and obs[b.row, b.col] == 0

  # picking the same card again is illegal and changes nothing
  before = env.engine.get_state()
  obs, reward, terminated, _, info = env.step(c.index)
  assert reward == -0.1
  assert not terminated
  assert 'match_result' not in info
  assert env.engine.get_state() is before
  assert Cell.from_index(c.index) == c
