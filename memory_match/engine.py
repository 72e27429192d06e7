"""Round engine: the state machine behind a single memory match round.

A round alternates between a first and a second pick. A matching pair stays
face-up; a mismatch parks the round in `RESOLVING` with both cards visible
until the driver calls `clear_unmatched()` after its own display pause. The
engine keeps no timers and no retry loops: invalid picks raise a typed error
and leave the current `RoundState` untouched.
"""
import logging
import random
from typing import Any

from pydantic import BaseModel, Field

from .board import generate_board
from .consts import PAIR_COUNT, SCORE_MAX, SCORE_MIN, SCORE_PENALTY_PER_MOVE
from .errors import AlreadyRevealedError, OutOfRangeError, RoundPhaseError, SameAsFirstError
from .state import RoundState
from .typings import Board, Cell, MatchResult, Phase

logger = logging.getLogger(__name__)


def compute_score(move_count: int) -> int:
  """Score for finishing in `move_count` moves, floored at SCORE_MIN."""
  return max(SCORE_MAX - move_count * SCORE_PENALTY_PER_MOVE, SCORE_MIN)


class RoundEngine:
  """Stateful wrapper that owns the `RoundState` of one round.

  - `reveal_first` / `reveal_second` drive a turn
  - `clear_unmatched` hides a mismatched pair again
  - `compute_score` turns the move count into points
  """

  _state: RoundState
  _seed: int | None
  _pick_history: list[Cell]

  def __init__(
      self,
      *,
      board: Board,
      state: RoundState | None = None,
      seed: int | None = None,
      pick_history: list[Cell] | None = None,
  ) -> None:
    self._state = state if state is not None else RoundState(board=board)
    if self._state.board != board:
      raise ValueError("state belongs to a different board")
    self._seed = seed
    self._pick_history = list(pick_history or [])

  @staticmethod
  def new(seed: int | None = None) -> "RoundEngine":
    """Deal a fresh board and return an engine waiting for the first pick.

    When no seed is given one is drawn so the round can still be replayed.
    """
    if seed is None:
      seed = random.Random().randint(0, 2**31 - 1)
    board = generate_board(random.Random(seed))
    logger.debug("new round seed=%s", seed)
    return RoundEngine(board=board, seed=seed)

  def get_state(self) -> RoundState:
    """Return the current (immutable) RoundState."""
    return self._state

  @property
  def board(self) -> Board:
    return self._state.board

  @property
  def phase(self) -> Phase:
    return self._state.phase

  @property
  def move_count(self) -> int:
    return self._state.move_count

  @property
  def match_count(self) -> int:
    return self._state.match_count

  @property
  def seed(self) -> int | None:
    return self._seed

  def _require_phase(self, expected: Phase, operation: str) -> None:
    if self._state.phase != expected:
      raise RoundPhaseError(f"{operation} is not allowed while {self._state.phase}")

  def _check_pick(self, row: int, col: int, *, second: bool = False) -> Cell:
    """Validate a pick against the board; phase is checked afterwards."""
    cell = Cell(row, col)
    if not cell.in_bounds():
      raise OutOfRangeError(row, col)
    state = self._state
    # the first pick is face-up as well; a second pick on it is its own error
    if second and cell == state.first_pick:
      raise SameAsFirstError(row, col)
    if state.is_revealed(cell):
      raise AlreadyRevealedError(row, col)
    return cell

  def reveal_first(self, row: int, col: int) -> None:
    """Turn the first card of a turn face-up."""
    cell = self._check_pick(row, col)
    self._require_phase(Phase.AWAITING_FIRST_PICK, "reveal_first")
    state = self._state
    self._state = RoundState(
      board=state.board,
      revealed=state.with_revealed([cell]),
      move_count=state.move_count,
      match_count=state.match_count,
      phase=Phase.AWAITING_SECOND_PICK,
      first_pick=cell,
    )
    self._pick_history.append(cell)
    logger.debug("first pick %s=%s", cell, state.board[cell])

  def reveal_second(self, row: int, col: int) -> MatchResult:
    """Turn the second card face-up, count the move and compare both cards."""
    cell = self._check_pick(row, col, second=True)
    self._require_phase(Phase.AWAITING_SECOND_PICK, "reveal_second")
    state = self._state
    first = state.first_pick
    assert first is not None

    move_count = state.move_count + 1
    revealed = state.with_revealed([cell])
    if state.board[first] == state.board[cell]:
      match_count = state.match_count + 1
      phase = Phase.COMPLETE if match_count == PAIR_COUNT else Phase.AWAITING_FIRST_PICK
      result = MatchResult.MATCH
      pending = None
    else:
      match_count = state.match_count
      phase = Phase.RESOLVING
      result = MatchResult.NO_MATCH
      pending = (first, cell)
    self._state = RoundState(
      board=state.board,
      revealed=revealed,
      move_count=move_count,
      match_count=match_count,
      phase=phase,
      pending_mismatch=pending,
    )
    self._pick_history.append(cell)
    logger.debug("second pick %s=%s -> %s (moves=%d matches=%d)",
                 cell, state.board[cell], result, move_count, match_count)
    return result

  def clear_unmatched(self) -> None:
    """Hide the two cards of the last mismatch and wait for a new turn."""
    self._require_phase(Phase.RESOLVING, "clear_unmatched")
    state = self._state
    assert state.pending_mismatch is not None
    self._state = RoundState(
      board=state.board,
      revealed=state.with_revealed(state.pending_mismatch, False),
      move_count=state.move_count,
      match_count=state.match_count,
      phase=Phase.AWAITING_FIRST_PICK,
    )
    logger.debug("cleared mismatch %s", ", ".join(str(c) for c in state.pending_mismatch))

  def pick(self, cell: Cell) -> MatchResult | None:
    """Apply `cell` as whichever pick the current phase expects.

    Returns the match result for a second pick and None for a first pick.
    """
    if self._state.phase == Phase.AWAITING_SECOND_PICK:
      return self.reveal_second(cell.row, cell.col)
    self.reveal_first(cell.row, cell.col)
    return None

  def legal_picks(self) -> list[Cell]:
    """Return the cells that can be picked right now (none while resolving)."""
    if self._state.phase in (Phase.AWAITING_FIRST_PICK, Phase.AWAITING_SECOND_PICK):
      return self._state.hidden_cells()
    return []

  def is_complete(self) -> bool:
    return self._state.is_complete()

  def compute_score(self) -> int:
    return compute_score(self._state.move_count)

  def export(self) -> "RoundReplay":
    """Export this round's board and pick history as a RoundReplay."""
    return RoundReplay(
      board=self._state.board,
      picks=list(self._pick_history),
      metadata={'seed': self._seed},
    )


class RoundReplay(BaseModel):
  board: Board
  picks: list[Cell]
  metadata: dict[str, Any] = Field(default_factory=dict)

  def replay(self) -> tuple[list[RoundState], RoundEngine]:
    """Re-apply the recorded picks, returning the state after every pick.

    A pending mismatch is cleared right before the next first pick, the way
    the interactive driver does after its pause.
    """
    engine = RoundEngine(board=self.board, seed=self.metadata.get('seed'))
    states = [engine.get_state()]
    for cell in self.picks:
      if engine.phase == Phase.RESOLVING:
        engine.clear_unmatched()
      engine.pick(cell)
      states.append(engine.get_state())
    return states, engine


__all__ = ["RoundEngine", "RoundReplay", "compute_score"]
