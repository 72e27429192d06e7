from collections import Counter
from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .consts import BOARD_COLS, BOARD_ROWS, CARD_FACES, SYMBOLS


class Phase(Enum):
  """Where a round currently is in its turn cycle."""
  AWAITING_FIRST_PICK = "awaiting_first_pick"
  AWAITING_SECOND_PICK = "awaiting_second_pick"
  RESOLVING = "resolving"
  COMPLETE = "complete"

  def __str__(self) -> str:
    return self.value


class MatchResult(Enum):
  MATCH = "match"
  NO_MATCH = "no_match"

  def __str__(self) -> str:
    return self.value


@pydantic_dataclass(frozen=True)
class Cell:
  """A 0-based (row, col) board coordinate.

  Range is not enforced here; the engine reports out-of-range picks with a
  dedicated error so the player can be asked again.
  """
  row: int
  col: int

  @classmethod
  def from_index(cls, index: int) -> 'Cell':
    """Build a cell from a row-major index in [0, 16)."""
    return cls(index // BOARD_COLS, index % BOARD_COLS)

  @property
  def index(self) -> int:
    return self.row * BOARD_COLS + self.col

  def in_bounds(self) -> bool:
    return 0 <= self.row < BOARD_ROWS and 0 <= self.col < BOARD_COLS

  def __str__(self) -> str:
    # player facing coordinates are 1-based
    return f"{self.row + 1},{self.col + 1}"


ALL_CELLS = tuple(Cell(r, c) for r in range(BOARD_ROWS) for c in range(BOARD_COLS))


@pydantic_dataclass(frozen=True)
class Board:
  """Immutable 4x4 grid of card faces, each symbol appearing exactly twice."""
  rows: tuple[tuple[str, ...], ...]

  @field_validator('rows', mode='after')
  @classmethod
  def validate_rows(cls, rows: tuple[tuple[str, ...], ...]):
    if len(rows) != BOARD_ROWS or any(len(r) != BOARD_COLS for r in rows):
      raise ValueError(f"board must be {BOARD_ROWS}x{BOARD_COLS}")
    counts = Counter(s for r in rows for s in r)
    if counts != Counter(CARD_FACES):
      raise ValueError(f"board must hold each of {''.join(SYMBOLS)} exactly twice, got {dict(counts)}")
    return rows

  @classmethod
  def from_sequence(cls, faces) -> 'Board':
    """Lay a flat sequence of 16 faces into the grid row-major."""
    faces = list(faces)
    return cls(tuple(tuple(faces[i * BOARD_COLS:(i + 1) * BOARD_COLS]) for i in range(BOARD_ROWS)))

  def __getitem__(self, cell: Cell) -> str:
    return self.rows[cell.row][cell.col]

  def __iter__(self) -> Iterator[tuple[str, ...]]:
    return iter(self.rows)

  def flatten(self) -> list[str]:
    return [s for r in self.rows for s in r]

  def __str__(self) -> str:  # pragma: no cover - convenience
    return "\n".join(" ".join(r) for r in self.rows)


class ScoreRecord(BaseModel):
  """One leaderboard entry. Stored on disk with the timestamp under `date`."""
  model_config = ConfigDict(frozen=True, populate_by_name=True)

  name: str
  score: int = Field(ge=0)
  timestamp: str = Field(alias='date')

  def to_dict(self) -> dict:
    return self.model_dump(by_alias=True)

  @classmethod
  def from_dict(cls, d: dict) -> 'ScoreRecord':
    return cls.model_validate(d)

  def __str__(self) -> str:
    return f"{self.name} - {self.score} points ({self.timestamp})"


LeaderboardList = list[ScoreRecord]
