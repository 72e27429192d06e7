from dataclasses import asdict
from pathlib import Path
import tomllib

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

BOARD_ROWS = 4
BOARD_COLS = 4
PAIR_COUNT = 8
# canonical multiset of the 16 card faces, each symbol twice
SYMBOLS = ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H')
CARD_FACES = tuple(s for s in SYMBOLS for _ in range(2))

SCORE_MAX = 100
SCORE_PENALTY_PER_MOVE = 5
SCORE_MIN = 10

LEADERBOARD_SIZE = 5
DEFAULT_PLAYER_NAME = "Player"
DEFAULT_HIGHSCORE_FILE = Path.home() / ".memory_highscores.json"
DEFAULT_MISMATCH_PAUSE = 1.0
SETTINGS_SECTION = "memory_match"


@pydantic_dataclass(frozen=True)
class Settings:
  """Validated runtime settings for the interactive game.

  Only I/O related knobs live here; the board shape, pair count and the
  scoring constants are fixed module constants.
  """
  highscore_path: Path = DEFAULT_HIGHSCORE_FILE
  mismatch_pause: float = Field(default=DEFAULT_MISMATCH_PAUSE, ge=0)
  log_level: str = "WARNING"

  def __post_init__(self):
    level = self.log_level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
      raise ValueError(f'unknown log level {self.log_level!r}')
    object.__setattr__(self, 'log_level', level)
    object.__setattr__(self, 'highscore_path', self.highscore_path.expanduser())

  def serialize(self) -> dict:
    return asdict(self)

  @classmethod
  def deserialize(cls, data: dict) -> 'Settings':
    return cls(**data)

  @classmethod
  def load(cls, path: str | Path | None = None, **overrides) -> 'Settings':
    """Read settings from the `[memory_match]` table of a TOML file.

    Keyword overrides whose value is None are ignored so CLI flags that were
    not given fall through to the file (or the defaults).
    """
    data: dict = {}
    if path is not None:
      with open(path, "rb") as f:
        data = dict(tomllib.load(f).get(SETTINGS_SECTION, {}))
    data.update({k: v for k, v in overrides.items() if v is not None})
    return cls.deserialize(data)
