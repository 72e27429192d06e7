"""RandomAgent: picks uniformly from the legal cells using its own RNG."""
from collections.abc import Sequence

from .core import Agent
from ..state import RoundState
from ..typings import Cell


class RandomAgent(Agent):
  def act(self, state: RoundState, legal_picks: Sequence[Cell]) -> Cell:
    if not legal_picks:
      raise ValueError("No legal picks available")
    return self.rng.choice(list(legal_picks))


__all__ = ["RandomAgent"]
