"""Small runner that lets an agent clear one board, for development.

Use the `memory-match` command (or `python -m memory_match`) to play.
"""

from memory_match.agents import MemoryAgent
from memory_match.engine import RoundEngine
from memory_match.simulation import play_round
from memory_match.typings import Phase


if __name__ == "__main__":
  # deterministic board and agent so runs are comparable
  engine = RoundEngine.new(seed=0)
  agent = MemoryAgent(seed=0)

  states = play_round(engine, agent)
  for state in states:
    if state.phase == Phase.RESOLVING:
      print(f"move {state.move_count}: no match")
    elif state.phase != Phase.AWAITING_SECOND_PICK and state.move_count:
      print(f"move {state.move_count}: match ({state.match_count} found)")
  engine.get_state().print_summary()
  print(f"Cleared in {engine.move_count} moves, score={engine.compute_score()}")
