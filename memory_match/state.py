from dataclasses import dataclass, field
from collections.abc import Iterable

from .consts import BOARD_COLS, BOARD_ROWS, PAIR_COUNT
from .typings import ALL_CELLS, Board, Cell, Phase
from .utils import _replace_grid

RevealMask = tuple[tuple[bool, ...], ...]
HIDDEN_FACE = "*"


def empty_mask() -> RevealMask:
  return tuple(tuple(False for _ in range(BOARD_COLS)) for _ in range(BOARD_ROWS))


@dataclass(frozen=True)
class RoundState:
  """A read-only snapshot of one round.

  The engine never mutates a snapshot; every successful transition builds a
  new one, so a rejected pick cannot leave half-applied changes behind.
  `pending_mismatch` holds the two face-up cards of a failed turn until the
  driver hides them again.
  """
  board: Board
  revealed: RevealMask = field(default_factory=empty_mask)
  move_count: int = 0
  match_count: int = 0
  phase: Phase = Phase.AWAITING_FIRST_PICK
  first_pick: Cell | None = None
  pending_mismatch: tuple[Cell, Cell] | None = None

  def __post_init__(self):
    object.__setattr__(self, 'revealed', tuple(tuple(bool(v) for v in r) for r in self.revealed))
    if self.move_count < 0:
      raise ValueError(f"move_count must be non-negative, got {self.move_count}")
    if not 0 <= self.match_count <= PAIR_COUNT:
      raise ValueError(f"match_count must be within [0, {PAIR_COUNT}], got {self.match_count}")

  def is_revealed(self, cell: Cell) -> bool:
    return self.revealed[cell.row][cell.col]

  def with_revealed(self, cells: Iterable[Cell], value: bool = True) -> RevealMask:
    """Return a copy of the reveal mask with `cells` set to `value`."""
    mask = self.revealed
    for c in cells:
      mask = _replace_grid(mask, c.row, c.col, value)
    return mask

  def hidden_cells(self) -> list[Cell]:
    return [c for c in ALL_CELLS if not self.is_revealed(c)]

  def visible_face(self, cell: Cell) -> str | None:
    """Return the symbol at `cell` if it is face-up, else None."""
    return self.board[cell] if self.is_revealed(cell) else None

  def is_complete(self) -> bool:
    return self.match_count == PAIR_COUNT

  def to_text(self) -> str:
    """Plain-text board with 1-based headers and `*` for hidden cards."""
    lines = ["  " + " ".join(str(c + 1) for c in range(BOARD_COLS))]
    for r in range(BOARD_ROWS):
      faces = [self.board.rows[r][c] if self.revealed[r][c] else HIDDEN_FACE for c in range(BOARD_COLS)]
      lines.append(f"{r + 1} " + " ".join(faces))
    return "\n".join(lines)

  def print_summary(self) -> None:  # pragma: no cover - printing side-effect
    print(f"Phase: {self.phase} Moves: {self.move_count} Matches: {self.match_count}/{PAIR_COUNT}")
    print(self.to_text())
