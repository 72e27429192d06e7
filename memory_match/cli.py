"""Command line front end: `play`, `highscore` and `reset`.

The `Game` driver owns everything interactive (prompts, colors, the pause
after a mismatch) and keeps the engine and the leaderboard free of I/O.
"""
import argparse
import logging
import time
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.text import Text

from .consts import DEFAULT_PLAYER_NAME, Settings
from .coords import parse_coordinates
from .engine import RoundEngine
from .errors import InvalidPickError, PersistenceWriteError
from .leaderboard import clear, make_record, merge
from .logging_config import setup_logging
from .render import board_table, leaderboard_lines
from .storage import JsonLeaderboardStore, LeaderboardStore
from .typings import MatchResult, ScoreRecord

logger = logging.getLogger(__name__)

AskFn = Callable[[str, str | None], str]


class Game:
  """Interactive driver for one player at a terminal."""

  def __init__(
      self,
      *,
      store: LeaderboardStore,
      console: Console | None = None,
      ask: AskFn | None = None,
      sleep: Callable[[float], None] = time.sleep,
      mismatch_pause: float = 1.0,
  ) -> None:
    self.store = store
    self.console = console or Console()
    self._ask = ask or self._prompt
    self._sleep = sleep
    self.mismatch_pause = mismatch_pause

  def _prompt(self, message: str, default: str | None = None) -> str:
    if default is None:
      return Prompt.ask(message, console=self.console)
    return Prompt.ask(message, console=self.console, default=default)

  def show_board(self, engine: RoundEngine) -> None:
    self.console.print(board_table(engine.get_state()))

  def _pick(self, engine: RoundEngine, which: str, example: str) -> MatchResult | None:
    # re-prompt until the engine accepts the pick
    while True:
      text = self._ask(f"Enter {which} card coordinates (e.g., {example}):", None)
      try:
        return engine.pick(parse_coordinates(text))
      except InvalidPickError as e:
        self.console.print(f"[red]{escape(str(e))}[/red]")

  def play(self, seed: int | None = None) -> ScoreRecord:
    """Run a full round, then record the score on the leaderboard."""
    engine = RoundEngine.new(seed)
    self.console.print("[cyan]Welcome to Memory Match![/cyan]")
    self.console.print("[cyan]Match pairs of symbols by selecting two cards (e.g., 1,1 and 2,3).[/cyan]")

    while not engine.is_complete():
      self.show_board(engine)
      self._pick(engine, "first", "1,2")
      self.show_board(engine)
      result = self._pick(engine, "second", "2,3")
      self.show_board(engine)
      if result == MatchResult.MATCH:
        self.console.print("[green]Match found![/green]")
      else:
        self.console.print("[red]No match! Cards will be hidden.[/red]")
      self._sleep(self.mismatch_pause)
      if result == MatchResult.NO_MATCH:
        engine.clear_unmatched()

    self.show_board(engine)
    score = engine.compute_score()
    self.console.print(f"[green]Congratulations! You cleared the board in {engine.move_count} moves![/green]")
    self.console.print(f"[green]Your score: {score}[/green]")
    name = self._ask("Enter your name to save your score:", DEFAULT_PLAYER_NAME)
    record = make_record(name, score)
    self.save_score(record)
    return record

  def save_score(self, record: ScoreRecord) -> bool:
    try:
      self.store.save(merge(self.store.load(), record))
    except PersistenceWriteError as e:
      self.console.print(f"[red]Could not save your score: {escape(str(e))}[/red]")
      return False
    logger.info("saved score %s for %s", record.score, record.name)
    return True

  def show_highscores(self) -> None:
    records = self.store.load()
    if not records:
      self.console.print("[yellow]No high scores yet.[/yellow]")
      return
    self.console.print("[blue]High Scores:[/blue]")
    for line in leaderboard_lines(records):
      self.console.print(Text(line), highlight=False)

  def reset_highscores(self) -> bool:
    try:
      self.store.save(clear())
    except PersistenceWriteError as e:
      self.console.print(f"[red]Could not clear high scores: {escape(str(e))}[/red]")
      return False
    self.console.print("[green]High scores cleared![/green]")
    return True


def build_parser() -> argparse.ArgumentParser:
  p = argparse.ArgumentParser(prog="memory-match", description="Terminal memory matching game.")
  p.add_argument("--config", type=str, default=None, help="TOML settings file ([memory_match] table).")
  p.add_argument("--highscore-file", type=str, default=None, help="Where high scores are stored.")
  p.add_argument("--log-level", type=str, default=None, help="Logging level (default: WARNING).")
  sub = p.add_subparsers(dest="command")
  play = sub.add_parser("play", help="Start a new game")
  play.add_argument("--seed", type=int, default=None, help="Seed for a reproducible board.")
  sub.add_parser("highscore", help="View high scores")
  sub.add_parser("reset", help="Clear high scores")
  return p


def main(argv: Sequence[str] | None = None, *, console: Console | None = None,
         ask: AskFn | None = None, sleep: Callable[[float], None] = time.sleep) -> int:
  parser = build_parser()
  args = parser.parse_args(argv)
  console = console or Console()

  try:
    settings = Settings.load(args.config, highscore_path=args.highscore_file, log_level=args.log_level)
  except (OSError, ValueError) as e:
    parser.error(f"invalid settings: {e}")
  setup_logging(settings.log_level)

  if args.command is None:
    parser.print_help()
    console.print('[cyan]Use the "play" command to start the game![/cyan]')
    return 0

  game = Game(
    store=JsonLeaderboardStore(settings.highscore_path),
    console=console,
    ask=ask,
    sleep=sleep,
    mismatch_pause=settings.mismatch_pause,
  )
  if args.command == "highscore":
    game.show_highscores()
  elif args.command == "reset":
    game.reset_highscores()
  else:
    try:
      game.play(seed=args.seed)
    except (KeyboardInterrupt, EOFError):
      console.print("\n[yellow]Game aborted.[/yellow]")
  return 0


__all__ = ["Game", "build_parser", "main"]
