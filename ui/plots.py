# ui/plots.py
from pathlib import Path

import numpy as np
from matplotlib.figure import Figure

from ml.errors import InvalidArgument


def plot_training_history(history, path, title=None):
    """
    Save a bar chart of errors per training iteration.
    history: list of (iteration, errors) pairs, e.g. Perceptron.history
    Uses the Figure object API so no GUI backend is required.
    """
    if len(history) == 0:
        raise InvalidArgument("Nothing to plot: training history is empty")
    data = np.asarray(history, dtype=float)
    iterations, errors = data[:, 0], data[:, 1]

    fig = Figure(figsize=(6, 3))
    ax = fig.add_subplot(111)
    ax.bar(iterations, errors, alpha=0.6, label='errors')
    ax.plot(iterations, errors, marker='o', linestyle='-', markersize=3)
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Errors found')
    ax.set_ylim(bottom=0)
    ax.set_title(title or 'Errors per training iteration')
    ax.legend()
    fig.tight_layout()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    return path
