"""Pure leaderboard helpers: merge, sort and trim to the top entries.

Nothing here touches the filesystem; callers load and persist the list
through a `LeaderboardStore`.
"""
from collections.abc import Sequence
from datetime import datetime, timezone

from .consts import DEFAULT_PLAYER_NAME, LEADERBOARD_SIZE
from .typings import LeaderboardList, ScoreRecord


def now_iso(now: datetime | None = None) -> str:
  """UTC timestamp in ISO-8601 with millisecond precision, e.g. `2024-05-01T12:00:00.000Z`."""
  now = now or datetime.now(timezone.utc)
  return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def make_record(name: str, score: int, now: datetime | None = None) -> ScoreRecord:
  name = name.strip() or DEFAULT_PLAYER_NAME
  return ScoreRecord(name=name, score=score, timestamp=now_iso(now))


def merge(existing: Sequence[ScoreRecord], entry: ScoreRecord) -> LeaderboardList:
  """Return a new list with `entry` added, best score first, trimmed to the top 5.

  The sort is stable: among equal scores earlier entries stay ahead, so a new
  entry ties behind the records already on the board.
  """
  merged = list(existing) + [entry]
  merged.sort(key=lambda r: r.score, reverse=True)
  return merged[:LEADERBOARD_SIZE]


def clear() -> LeaderboardList:
  return []


__all__ = ["merge", "clear", "make_record", "now_iso"]
