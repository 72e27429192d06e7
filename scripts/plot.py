# %%
from matplotlib import pyplot as plt
from matplotlib.figure import Figure


def plot_moves(move_counts: list[list[int]], labels: list[str] | None = None) -> Figure:
  """Histogram of moves needed to clear the board, one series per agent.
  - move_counts: list of move-count samples (one list per agent)
  """
  if not labels:
    labels = [f"Agent {i + 1}" for i in range(len(move_counts))]
  if len(labels) != len(move_counts):
    raise ValueError("Length of labels must match length of move_counts")

  fig = plt.figure()
  ax = fig.add_subplot(111)
  upper = max(max(m) for m in move_counts if m) + 2
  for moves, label in zip(move_counts, labels):
    ax.hist(moves, bins=range(0, upper, 1), alpha=0.6, label=label)
  ax.set_xlabel("Moves to clear the board")
  ax.set_ylabel("Number of rounds")
  ax.set_title("Distribution of moves per round")
  ax.legend(loc="upper right")
  ax.grid(True, linestyle="--", alpha=0.4)
  return fig


def plot_average_scores(scores: dict[str, float]) -> Figure:
  fig = plt.figure()
  ax = fig.add_subplot(111)
  names = list(scores)
  ax.bar(names, [scores[n] for n in names])
  ax.set_ylabel("Average score")
  ax.set_title("Average score per agent")
  return fig
