import re

from .errors import InputFormatError
from .typings import Cell

_COORD_RE = re.compile(r"^([1-4]),([1-4])$")


def parse_coordinates(text: str) -> Cell:
  """Parse player input such as `1,2` (row, column, 1-based) into a 0-based Cell."""
  m = _COORD_RE.match(text.strip())
  if m is None:
    raise InputFormatError(text)
  return Cell(int(m.group(1)) - 1, int(m.group(2)) - 1)
