from datetime import datetime, timezone

from memory_match.leaderboard import clear, make_record, merge, now_iso
from memory_match.typings import ScoreRecord


def rec(name: str, score: int) -> ScoreRecord:
  return ScoreRecord(name=name, score=score, timestamp="2024-01-01T00:00:00.000Z")


def test_merge_drops_lowest_when_full():
  existing = [rec(n, s) for n, s in zip("abcde", [90, 80, 70, 60, 50])]
  merged = merge(existing, rec("new", 75))
  assert [r.score for r in merged] == [90, 80, 75, 70, 60]
  assert [r.name for r in merged] == ["a", "b", "new", "c", "d"]


def test_merge_does_not_mutate_input():
  existing = [rec("a", 10)]
  merged = merge(existing, rec("b", 20))
  assert len(existing) == 1
  assert [r.name for r in merged] == ["b", "a"]


def test_merge_keeps_order_among_ties():
  existing = [rec("first", 50), rec("second", 50)]
  merged = merge(existing, rec("third", 50))
  assert [r.name for r in merged] == ["first", "second", "third"]


def test_merge_low_score_into_full_board_is_dropped():
  existing = [rec(str(i), 100 - i) for i in range(5)]
  merged = merge(existing, rec("late", 10))
  assert "late" not in [r.name for r in merged]
  assert len(merged) == 5


def test_merge_never_exceeds_five_and_stays_sorted():
  board: list[ScoreRecord] = []
  for i, score in enumerate([30, 100, 10, 55, 55, 80, 20, 95, 60, 10]):
    board = merge(board, rec(f"p{i}", score))
    assert len(board) <= 5
    scores = [r.score for r in board]
    assert scores == sorted(scores, reverse=True)
  assert [r.score for r in board] == [100, 95, 80, 60, 55]


def test_merge_trims_oversized_input():
  existing = [rec(str(i), 50) for i in range(8)]
  assert len(merge(existing, rec("x", 1))) == 5


def test_clear_is_empty():
  assert clear() == []


def test_make_record_stamps_utc_time():
  when = datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
  r = make_record("  Ada ", 60, now=when)
  assert r.name == "Ada"
  assert r.score == 60
  assert r.timestamp == "2024-05-01T12:30:15.250Z"


def test_make_record_blank_name_defaults():
  assert make_record("   ", 10).name == "Player"


def test_now_iso_format():
  stamp = now_iso()
  assert stamp.endswith("Z")
  assert datetime.fromisoformat(stamp.replace("Z", "+00:00")).tzinfo is not None
