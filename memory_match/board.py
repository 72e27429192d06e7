"""Board generation: a uniformly shuffled layout of the eight symbol pairs."""
import random
from typing import TypeVar

from .consts import CARD_FACES
from .typings import Board

T = TypeVar('T')


def shuffle(items: list[T], rng: random.Random) -> list[T]:
  """Fisher-Yates shuffle `items` in place and return it.

  Walks from the last index down to 1 and swaps each slot with a uniformly
  chosen index in [0, i].
  """
  for i in range(len(items) - 1, 0, -1):
    j = rng.randint(0, i)
    items[i], items[j] = items[j], items[i]
  return items


def generate_board(rng: random.Random | int | None = None) -> Board:
  """Return a freshly shuffled board.

  `rng` may be a `random.Random`, an int seed or None for an unseeded RNG.
  """
  if not isinstance(rng, random.Random):
    rng = random.Random(rng)
  return Board.from_sequence(shuffle(list(CARD_FACES), rng))


__all__ = ["generate_board", "shuffle"]
