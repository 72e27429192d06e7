"""MemoryAgent: never forgets a face it has seen.

Strategy per turn:
- first pick: complete a pair it already knows, otherwise flip an unseen card
- second pick: take the known partner of the first card if there is one,
  otherwise flip another unseen card (falling back to any legal cell)
"""
from collections.abc import Sequence

from .core import Agent
from ..state import RoundState
from ..typings import ALL_CELLS, Cell, Phase


class MemoryAgent(Agent):
  _known: dict[Cell, str]

  def __init__(self, *, seed: int | None = None, name: str | None = None) -> None:
    super().__init__(seed=seed, name=name)
    self._known = {}

  def _reset(self) -> None:
    self._known = {}

  def observe(self, state: RoundState) -> None:
    for cell in ALL_CELLS:
      face = state.visible_face(cell)
      if face is not None:
        self._known[cell] = face

  def _known_pair(self, legal: set[Cell]) -> Cell | None:
    seen: dict[str, Cell] = {}
    for cell in ALL_CELLS:
      if cell not in legal or cell not in self._known:
        continue
      face = self._known[cell]
      if face in seen:
        return seen[face]
      seen[face] = cell
    return None

  def _explore(self, legal_picks: Sequence[Cell]) -> Cell:
    unseen = [c for c in legal_picks if c not in self._known]
    return self.rng.choice(unseen or list(legal_picks))

  def act(self, state: RoundState, legal_picks: Sequence[Cell]) -> Cell:
    if not legal_picks:
      raise ValueError("No legal picks available")
    legal = set(legal_picks)
    if state.phase == Phase.AWAITING_SECOND_PICK and state.first_pick is not None:
      face = state.board[state.first_pick]
      for cell in legal_picks:
        if self._known.get(cell) == face:
          return cell
      return self._explore(legal_picks)
    known = self._known_pair(legal)
    if known is not None:
      return known
    return self._explore(legal_picks)

  def _metadata(self) -> dict:
    return {"known": len(self._known)}


__all__ = ["MemoryAgent"]
