"""Gymnasium environment around the round engine.

One step is one pick. The observation is the board as the player sees it:
0 for a face-down card and 1..8 for a face-up symbol. A mismatched pair is
left visible for one observation and hidden at the start of the next step.
"""
from __future__ import annotations

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from ..consts import BOARD_COLS, BOARD_ROWS, PAIR_COUNT, SYMBOLS
from ..engine import RoundEngine
from ..errors import InvalidPickError
from ..state import RoundState
from ..typings import ALL_CELLS, Cell, MatchResult, Phase
from ._common import NDArray1D, NDArray2D

SYMBOL_INDEX = {s: i + 1 for i, s in enumerate(SYMBOLS)}
MATCH_REWARD = 1.0
INVALID_PICK_PENALTY = -0.1


def make_obs(state: RoundState) -> NDArray2D[np.int32]:
  obs = np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int32)
  for cell in ALL_CELLS:
    face = state.visible_face(cell)
    if face is not None:
      obs[cell.row, cell.col] = SYMBOL_INDEX[face]
  return obs


def action_mask(state: RoundState) -> NDArray1D[np.int8]:
  """1 for every cell that is a legal pick on the next step."""
  mask = np.zeros(BOARD_ROWS * BOARD_COLS, dtype=np.int8)
  pending = set(state.pending_mismatch or ())
  for cell in ALL_CELLS:
    if not state.is_revealed(cell) or cell in pending:
      mask[cell.index] = 1
  return mask


class MemoryEnv(gym.Env):
  metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

  def __init__(self, seed: int | None = None, render_mode: str | None = None):
    super().__init__()
    self._base_seed = seed
    self._rng = np.random.default_rng(seed)
    self._engine: RoundEngine | None = None
    self.render_mode = render_mode
    self.observation_space = spaces.Box(low=0, high=PAIR_COUNT, shape=(BOARD_ROWS, BOARD_COLS), dtype=np.int32)
    self.action_space = spaces.Discrete(BOARD_ROWS * BOARD_COLS)

  @property
  def engine(self) -> RoundEngine:
    if self._engine is None:
      raise RuntimeError("Environment not reset")
    return self._engine

  def reset(self, *, seed: int | None = None, options: dict | None = None):
    super().reset(seed=seed)
    if seed is not None:
      self._base_seed = seed
      self._rng = np.random.default_rng(seed)
    round_seed = int(self._rng.integers(0, 2**31 - 1))
    self._engine = RoundEngine.new(seed=round_seed)
    state = self._engine.get_state()
    return make_obs(state), self._info(state)

  def step(self, action: int):
    engine = self.engine
    if engine.is_complete():
      raise RuntimeError("Episode already finished, call reset()")
    if engine.phase == Phase.RESOLVING:
      engine.clear_unmatched()
    reward = 0.0
    try:
      result = engine.pick(Cell.from_index(int(action)))
    except InvalidPickError:
      result = None
      reward = INVALID_PICK_PENALTY
    if result == MatchResult.MATCH:
      reward = MATCH_REWARD
    state = engine.get_state()
    terminated = engine.is_complete()
    info = self._info(state)
    if result is not None:
      info['match_result'] = result.value
    return make_obs(state), reward, terminated, False, info

  def render(self):  # pragma: no cover - printing side-effect
    if self._engine is None:
      return None
    text = self._engine.get_state().to_text()
    if self.render_mode == "ansi":
      return text
    print(text)
    return None

  def close(self):  # pragma: no cover - trivial
    self._engine = None

  def _info(self, state: RoundState) -> dict:
    return {
      'action_mask': action_mask(state),
      'move_count': state.move_count,
      'match_count': state.match_count,
    }


__all__ = ["MemoryEnv", "make_obs", "action_mask"]
