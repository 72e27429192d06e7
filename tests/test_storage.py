import json
import os

import pytest

from memory_match.errors import PersistenceReadError, PersistenceWriteError
from memory_match.storage import JsonLeaderboardStore, MemoryLeaderboardStore, decode_records
from memory_match.typings import ScoreRecord


def sample() -> list[ScoreRecord]:
  return [
    ScoreRecord(name="Ada", score=80, timestamp="2024-05-01T12:00:00.000Z"),
    ScoreRecord(name="Bob", score=45, timestamp="2024-05-02T08:15:30.500Z"),
  ]


def test_missing_file_is_empty(tmp_path):
  assert JsonLeaderboardStore(tmp_path / "nope.json").load() == []


def test_save_then_load_roundtrip(tmp_path):
  store = JsonLeaderboardStore(tmp_path / "scores.json")
  store.save(sample())
  loaded = store.load()
  assert loaded == sample()
  for a, b in zip(loaded, sample()):
    assert (a.name, a.score, a.timestamp) == (b.name, b.score, b.timestamp)


def test_file_format_uses_date_field(tmp_path):
  path = tmp_path / "scores.json"
  JsonLeaderboardStore(path).save(sample())
  data = json.loads(path.read_text(encoding="utf-8"))
  assert data[0] == {"name": "Ada", "score": 80, "date": "2024-05-01T12:00:00.000Z"}


def test_reads_files_written_by_hand(tmp_path):
  path = tmp_path / "scores.json"
  path.write_text('[{"name": "Zed", "score": 95, "date": "2023-12-31T23:59:59.999Z"}]', encoding="utf-8")
  [r] = JsonLeaderboardStore(path).load()
  assert r.name == "Zed" and r.score == 95 and r.timestamp == "2023-12-31T23:59:59.999Z"


@pytest.mark.parametrize("content", [
  "not json at all",
  "{\"name\": \"x\"}",
  "[{\"name\": \"x\", \"score\": \"lots\", \"date\": \"d\"}]",
  "[{\"name\": \"x\", \"score\": -5, \"date\": \"d\"}]",
  "",
])
def test_malformed_file_is_empty(tmp_path, content):
  path = tmp_path / "scores.json"
  path.write_text(content, encoding="utf-8")
  assert JsonLeaderboardStore(path).load() == []


def test_decode_records_raises_read_error():
  with pytest.raises(PersistenceReadError):
    decode_records("[1, 2, 3]")


def test_save_creates_parent_dirs(tmp_path):
  path = tmp_path / "a" / "b" / "scores.json"
  JsonLeaderboardStore(path).save(sample())
  assert path.exists()


def test_save_empty_list(tmp_path):
  store = JsonLeaderboardStore(tmp_path / "scores.json")
  store.save(sample())
  store.save([])
  assert store.load() == []
  assert json.loads((tmp_path / "scores.json").read_text(encoding="utf-8")) == []


def test_failed_write_keeps_previous_file(tmp_path, monkeypatch):
  path = tmp_path / "scores.json"
  store = JsonLeaderboardStore(path)
  store.save(sample())
  before = path.read_bytes()

  def boom(src, dst):
    raise OSError("disk full")

  monkeypatch.setattr(os, "replace", boom)
  with pytest.raises(PersistenceWriteError):
    store.save([])
  assert path.read_bytes() == before
  # no temporary files left behind
  assert [p.name for p in tmp_path.iterdir()] == ["scores.json"]


def test_write_to_unwritable_location_raises(tmp_path):
  blocker = tmp_path / "file"
  blocker.write_text("x", encoding="utf-8")
  store = JsonLeaderboardStore(blocker / "scores.json")
  with pytest.raises(PersistenceWriteError):
    store.save(sample())


def test_oversized_file_keeps_the_best_five(tmp_path):
  path = tmp_path / "scores.json"
  scores = [30, 90, 10, 70, 50, 100, 20, 60]
  path.write_text(json.dumps([
    {"name": f"p{i}", "score": s, "date": "2024-01-01T00:00:00.000Z"} for i, s in enumerate(scores)
  ]), encoding="utf-8")
  loaded = JsonLeaderboardStore(path).load()
  assert [r.score for r in loaded] == [100, 90, 70, 60, 50]
  assert [r.name for r in loaded] == ["p5", "p1", "p3", "p7", "p4"]


def test_memory_store_copies():
  store = MemoryLeaderboardStore()
  records = sample()
  store.save(records)
  records.clear()
  assert len(store.load()) == 2
