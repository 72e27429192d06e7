from memory_match.typings import Board, Cell

# rows: A A B B / C C D D / E E F F / G G H H
ORDERED_BOARD = Board.from_sequence("AABBCCDDEEFFGGHH")


def pair_cells(board: Board) -> dict[str, list[Cell]]:
  """Map every symbol to its two cells."""
  cells: dict[str, list[Cell]] = {}
  for r, row in enumerate(board):
    for c, face in enumerate(row):
      cells.setdefault(face, []).append(Cell(r, c))
  return cells
