"""Leaderboard persistence.

The JSON file is a plain array of `{name, score, date}` objects. Reading is
forgiving (anything unusable is an empty leaderboard); writing goes through a
temporary file that replaces the target in one step so a failed save never
truncates the previous file.
"""
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from .consts import LEADERBOARD_SIZE
from .errors import PersistenceReadError, PersistenceWriteError
from .typings import LeaderboardList, ScoreRecord

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[ScoreRecord])


class LeaderboardStore(Protocol):
  def load(self) -> LeaderboardList: ...

  def save(self, records: Sequence[ScoreRecord]) -> None: ...


def decode_records(data: str | bytes) -> LeaderboardList:
  """Parse a serialized leaderboard, raising PersistenceReadError on bad content."""
  try:
    return _RECORDS.validate_json(data)
  except ValidationError as e:
    raise PersistenceReadError(f"malformed leaderboard: {e.error_count()} error(s)") from e


def encode_records(records: Sequence[ScoreRecord]) -> bytes:
  return _RECORDS.dump_json(list(records), by_alias=True, indent=2)


class JsonLeaderboardStore:
  def __init__(self, path: str | Path) -> None:
    self.path = Path(path)

  def load(self) -> LeaderboardList:
    """Return the stored records, best first and at most LEADERBOARD_SIZE of them."""
    if not self.path.exists():
      return []
    try:
      records = decode_records(self.path.read_bytes())
    except (OSError, PersistenceReadError) as e:
      logger.warning("ignoring unreadable leaderboard %s: %s", self.path, e)
      return []
    if len(records) > LEADERBOARD_SIZE:
      logger.warning("leaderboard %s holds %d records, keeping the best %d",
                     self.path, len(records), LEADERBOARD_SIZE)
    # hand-edited files may be unsorted or oversized
    records.sort(key=lambda r: r.score, reverse=True)
    return records[:LEADERBOARD_SIZE]

  def save(self, records: Sequence[ScoreRecord]) -> None:
    payload = encode_records(records)
    tmp_name = None
    try:
      self.path.parent.mkdir(parents=True, exist_ok=True)
      with tempfile.NamedTemporaryFile("wb", dir=self.path.parent, prefix=f".{self.path.name}.",
                                       suffix=".tmp", delete=False) as f:
        tmp_name = f.name
        f.write(payload)
        f.flush()
        os.fsync(f.fileno())
      os.replace(tmp_name, self.path)
    except OSError as e:
      logger.error("failed to write leaderboard %s: %s", self.path, e)
      if tmp_name is not None and os.path.exists(tmp_name):
        os.unlink(tmp_name)
      raise PersistenceWriteError(f"could not write {self.path}: {e}") from e
    logger.debug("saved %d leaderboard record(s) to %s", len(records), self.path)


class MemoryLeaderboardStore:
  """In-process store, handy for tests and simulations."""

  def __init__(self, records: Sequence[ScoreRecord] = ()) -> None:
    self._records = list(records)

  def load(self) -> LeaderboardList:
    return list(self._records)

  def save(self, records: Sequence[ScoreRecord]) -> None:
    self._records = list(records)


__all__ = ["LeaderboardStore", "JsonLeaderboardStore", "MemoryLeaderboardStore", "decode_records", "encode_records"]
