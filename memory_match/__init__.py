"""Top-level package exports for the memory match game.

Expose a small, stable API so callers can `from memory_match import RoundEngine, merge`.
"""

from .board import generate_board
from .engine import RoundEngine, RoundReplay, compute_score
from .leaderboard import clear, make_record, merge
from .typings import Board, Cell, MatchResult, Phase, ScoreRecord

__all__ = [
  "Board",
  "Cell",
  "MatchResult",
  "Phase",
  "RoundEngine",
  "RoundReplay",
  "ScoreRecord",
  "clear",
  "compute_score",
  "generate_board",
  "make_record",
  "merge",
]
