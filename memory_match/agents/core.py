"""Core agent base class for automated memory match players.

An agent is asked for one pick at a time and may observe the round after
every pick; that is the only way it learns card faces.
"""
import random
from collections.abc import Sequence
from typing import ClassVar, TypeVar

from ..state import RoundState
from ..typings import Cell


def AGENT_SEED_GENERATOR(): return random.Random().randint(0, 2**31 - 1)


class Agent:
  name: str

  agent_name_to_cls: ClassVar[dict[str, type["Agent"]]] = {}

  def __init__(self, *, seed: int | None = None, name: str | None = None) -> None:
    self.name = name if name is not None else self.__class__.__name__
    # local RNG so runs are reproducible per agent
    if seed is None:
      seed = AGENT_SEED_GENERATOR()
    self._seed = seed
    self.rng = random.Random(seed)

  @classmethod
  def __init_subclass__(cls):
    # register subclasses so simulations can build agents by name
    cls.agent_name_to_cls[cls.__name__] = cls
    super().__init_subclass__()

  @classmethod
  def from_name(cls, name: str, **kwargs) -> "Agent":
    agent_cls = cls.agent_name_to_cls.get(name)
    if agent_cls is None:
      raise ValueError(f"Unknown agent class name: {name}")
    return agent_cls(**kwargs)

  def reset(self, seed: int | None = None) -> None:
    if seed is None:
      seed = AGENT_SEED_GENERATOR()
    self._seed = seed
    self.rng.seed(seed)
    self._reset()

  def _reset(self) -> None:
    """Internal reset hook called before each round. Default is a no-op."""
    pass

  def observe(self, state: RoundState) -> None:
    """Optional hook: called with the round state after every pick."""
    pass

  def act(self, state: RoundState, legal_picks: Sequence[Cell]) -> Cell:
    """Return one element of `legal_picks`."""
    raise NotImplementedError()

  def metadata(self) -> dict:
    """Return metadata recorded alongside simulation results."""
    metadata = {
        "type": self.__class__.__name__,
        "name": self.name,
        "seed": self._seed,
    }
    if (extra := self._metadata()):
      metadata.update(extra)
    return metadata

  def _metadata(self) -> dict:
    return {}


BaseAgent = TypeVar('BaseAgent', bound=Agent)


__all__ = ["Agent", "BaseAgent"]
