from typing import TypeVar

T = TypeVar('T')


def _replace_tuple(v: tuple[T, ...], i: int, d: T) -> tuple[T, ...]:
  """Return a new tuple where index `i` is replaced with `d`.

  Keeps updates of a single element of an immutable tuple concise and avoids
  the `lst = list(t); lst[i] = d; t = tuple(lst)` dance.
  """
  if not (0 <= i < len(v)):
    raise IndexError("index out of range")
  return v[:i] + (d,) + v[i+1:]


def _replace_grid(grid: tuple[tuple[T, ...], ...], row: int, col: int, d: T) -> tuple[tuple[T, ...], ...]:
  """Return a new 2D tuple with `grid[row][col]` replaced by `d`."""
  return _replace_tuple(grid, row, _replace_tuple(grid[row], col, d))
