"""rich renderables for the board and the leaderboard."""
from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from .consts import BOARD_COLS, BOARD_ROWS
from .state import HIDDEN_FACE, RoundState
from .typings import ScoreRecord


def board_table(state: RoundState) -> Table:
  """Grid with 1-based row/column headers; hidden cards show as `*`."""
  table = Table(show_header=True, show_edge=False, box=None, header_style="blue", pad_edge=False)
  table.add_column("", style="blue", justify="right")
  for c in range(BOARD_COLS):
    table.add_column(str(c + 1), justify="center")
  pending = state.pending_mismatch or ()
  for r in range(BOARD_ROWS):
    cells = []
    for c in range(BOARD_COLS):
      if not state.revealed[r][c]:
        cells.append(Text(HIDDEN_FACE, style="grey50"))
        continue
      face = state.board.rows[r][c]
      mismatched = any(p.row == r and p.col == c for p in pending)
      cells.append(Text(face, style="bold red" if mismatched else "bold green"))
    table.add_row(str(r + 1), *cells)
  return table


def leaderboard_lines(records: Sequence[ScoreRecord]) -> list[str]:
  return [f"{i}. {record}" for i, record in enumerate(records, start=1)]
