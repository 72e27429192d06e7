"""Headless rounds played by agents, plus JSON-lines replay storage."""
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from tqdm import tqdm

from .agents.core import Agent
from .engine import RoundEngine, RoundReplay
from .state import RoundState
from .typings import Phase

PathLike: TypeAlias = str | Path


@dataclass
class SimulationResult:
  states: list[RoundState]
  engine: RoundEngine
  replay: RoundReplay
  agent_metadata: dict

  @property
  def move_count(self) -> int:
    return self.engine.move_count

  @property
  def score(self) -> int:
    return self.engine.compute_score()


def play_round(engine: RoundEngine, agent: Agent, max_picks: int = 10_000) -> list[RoundState]:
  """Let `agent` play `engine` to completion and return the state after each pick.

  The mismatch pause of the interactive game is skipped: the agent observes
  both cards, then the pair is hidden before the next pick.
  """
  states = [engine.get_state()]
  for _ in range(max_picks):
    if engine.is_complete():
      return states
    if engine.phase == Phase.RESOLVING:
      engine.clear_unmatched()
    cell = agent.act(engine.get_state(), engine.legal_picks())
    engine.pick(cell)
    state = engine.get_state()
    agent.observe(state)
    states.append(state)
  raise RuntimeError(f"round did not finish within {max_picks} picks")


def run_simulations(n: int, agent: Agent, *, seed: int = 1234, progress: bool = True) -> list[SimulationResult]:
  """Play `n` independent rounds with `agent`; round i uses seed `seed + i`."""
  results: list[SimulationResult] = []
  for i in tqdm(range(n), desc=f"Running {agent.name}", disable=not progress):
    agent.reset(seed=seed + i)
    engine = RoundEngine.new(seed=seed + i)
    states = play_round(engine, agent)
    replay = engine.export()
    replay.metadata["agent"] = agent.metadata()
    results.append(SimulationResult(
        states=states,
        engine=engine,
        replay=replay,
        agent_metadata=agent.metadata(),
    ))
  return results


def save_replays(replays: list[RoundReplay], output_file: PathLike, mode="a") -> None:
  output_file = Path(output_file)
  output_file.parent.mkdir(parents=True, exist_ok=True)
  with open(output_file, mode, encoding="utf-8") as f:
    for r in replays:
      f.write(f"{r.model_dump_json()}\n")


def load_replays(input_file: PathLike, start: int | None = None, end: int | None = None) -> list[RoundReplay]:
  with open(input_file, "r", encoding="utf-8") as f:
    lines = [line for line in f if line.strip()]
  if end is not None:
    lines = lines[:end]
  if start is not None:
    lines = lines[start:]
  return [RoundReplay.model_validate_json(line) for line in lines]


__all__ = ["SimulationResult", "play_round", "run_simulations", "save_replays", "load_replays"]
