# %%
from _common import RES_DIR

from memory_match.agents import Agent, MemoryAgent, RandomAgent
from memory_match.simulation import load_replays, run_simulations, save_replays
from plot import plot_average_scores, plot_moves

Simulation_Dir = RES_DIR / "simulations"
Output_Dir = RES_DIR / "output"

CANDIDATES = [RandomAgent, MemoryAgent]
SIMULATION_NUM = 200

# %%


def play(agent: Agent, count: int = SIMULATION_NUM):
  output_file = Simulation_Dir / f"run_[{agent.name}].jsonl"
  if output_file.exists():
    print(f"{output_file.name} exists, skip.")
    return output_file
  results = run_simulations(count, agent)
  save_replays([r.replay for r in results], output_file)
  return output_file


files = [play(cls(seed=0)) for cls in CANDIDATES]

# %%
move_counts: list[list[int]] = []
average_scores: dict[str, float] = {}
for cls, file in zip(CANDIDATES, files):
  rounds = [replay.replay()[1] for replay in load_replays(file)]
  moves = [engine.move_count for engine in rounds]
  move_counts.append(moves)
  average_scores[cls.__name__] = sum(e.compute_score() for e in rounds) / len(rounds)
  print(f"{cls.__name__}: {len(rounds)} rounds, average moves {sum(moves) / len(moves):.1f}")

Output_Dir.mkdir(parents=True, exist_ok=True)
plot_moves(move_counts, labels=[cls.__name__ for cls in CANDIDATES]).savefig(Output_Dir / "moves.png")
plot_average_scores(average_scores).savefig(Output_Dir / "average_scores.png")
