from pathlib import Path

import pytest

from memory_match.consts import DEFAULT_HIGHSCORE_FILE, Settings


def test_defaults():
  s = Settings()
  assert s.highscore_path == DEFAULT_HIGHSCORE_FILE
  assert s.mismatch_pause == 1.0
  assert s.log_level == "WARNING"


def test_load_from_toml_with_overrides(tmp_path):
  cfg = tmp_path / "memory.toml"
  cfg.write_text(
    '[memory_match]\nhighscore_path = "scores.json"\nmismatch_pause = 0.25\nlog_level = "info"\n',
    encoding="utf-8",
  )
  s = Settings.load(cfg)
  assert s.highscore_path == Path("scores.json")
  assert s.mismatch_pause == 0.25
  assert s.log_level == "INFO"

  s2 = Settings.load(cfg, highscore_path=str(tmp_path / "other.json"), log_level=None)
  assert s2.highscore_path == tmp_path / "other.json"
  assert s2.log_level == "INFO"


def test_load_without_file_uses_defaults():
  assert Settings.load(None) == Settings()


def test_invalid_values_raise():
  with pytest.raises(ValueError):
    Settings(mismatch_pause=-1)
  with pytest.raises(ValueError):
    Settings(log_level="LOUD")


def test_serialize_roundtrip():
  s = Settings(mismatch_pause=0.0, log_level="debug")
  assert Settings.deserialize(s.serialize()) == s
