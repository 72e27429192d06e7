"""Exception hierarchy for the memory match game.

Pick errors are recoverable: the driver shows the message and asks again.
None of them leave a round in a partially updated state.
"""


class MemoryMatchError(Exception):
  """Base class for every error raised by this package."""


class InvalidPickError(MemoryMatchError, ValueError):
  """A pick the player has to re-enter."""


class InputFormatError(InvalidPickError):
  def __init__(self, text: str = "") -> None:
    super().__init__("Invalid format. Use coordinates (e.g., 1,2).")
    self.text = text


class OutOfRangeError(InvalidPickError):
  def __init__(self, row: int, col: int) -> None:
    super().__init__(f"Coordinates ({row}, {col}) are outside the board.")
    self.row = row
    self.col = col


class AlreadyRevealedError(InvalidPickError):
  def __init__(self, row: int, col: int) -> None:
    super().__init__("Card already revealed!")
    self.row = row
    self.col = col


class SameAsFirstError(InvalidPickError):
  def __init__(self, row: int, col: int) -> None:
    super().__init__("That is the card you just picked, choose another one.")
    self.row = row
    self.col = col


class RoundPhaseError(MemoryMatchError, RuntimeError):
  """The round engine was driven out of order."""


class PersistenceReadError(MemoryMatchError):
  """The persisted leaderboard could not be read or decoded."""


class PersistenceWriteError(MemoryMatchError):
  """The leaderboard could not be written; the previous file is intact."""


__all__ = [
  "MemoryMatchError",
  "InvalidPickError",
  "InputFormatError",
  "OutOfRangeError",
  "AlreadyRevealedError",
  "SameAsFirstError",
  "RoundPhaseError",
  "PersistenceReadError",
  "PersistenceWriteError",
]
