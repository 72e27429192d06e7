"""Logging configuration for memory match."""
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
  """Configure the root logger to write through rich on stderr.

  Args:
    level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    console: Optional console to log to; defaults to a stderr console so
      log lines never mix with the game board on stdout.
  """
  numeric_level = getattr(logging, level.upper(), logging.WARNING)
  handler = RichHandler(
    console=console or Console(stderr=True),
    show_path=numeric_level <= logging.DEBUG,
    rich_tracebacks=True,
  )
  logging.basicConfig(
    level=numeric_level,
    format="%(name)s: %(message)s",
    datefmt="[%X]",
    handlers=[handler],
    force=True,
  )
