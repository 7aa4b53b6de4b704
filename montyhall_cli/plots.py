"""
Plot helpers for CLI Simulator.
"""

from pathlib import Path
from typing import Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from montyhall_core.results import SimulationResults


COLORS = {"stay": "#4C78A8", "switch": "#F58518"}


def create_convergence_plot(
    results: SimulationResults,
    title: str = "Monty Hall: running win rate",
    figsize: Tuple[float, float] = (10, 5)
) -> Figure:
    """
    Plot the running win rate of each strategy against the number of trials.

    Reference lines mark the theoretical values 1/3 (stay) and 2/3 (switch).

    Args:
        results: Simulation results
        title: Figure title
        figsize: Figure size

    Returns:
        Matplotlib figure
    """
    running = results.compute_running_win_rates()

    fig, ax = plt.subplots(figsize=figsize)

    for strategy in running.columns:
        ax.plot(
            running.index,
            running[strategy],
            label=strategy,
            color=COLORS.get(strategy),
            linewidth=1.5,
        )

    for value, label in ((1 / 3, "1/3"), (2 / 3, "2/3")):
        ax.axhline(value, color="gray", linestyle="--", linewidth=1)
        ax.annotate(label, xy=(0, value), xycoords=("axes fraction", "data"),
                    xytext=(4, 4), textcoords="offset points", color="gray")

    ax.set_xlabel("Trials")
    ax.set_ylabel("Win rate")
    ax.set_ylim(0.0, 1.0)
    ax.set_title(title)
    if len(running.columns) > 0 and len(running) > 0:
        ax.legend()
    ax.grid(axis='y', alpha=0.3)
    fig.tight_layout()

    return fig


def save_convergence_plot(results: SimulationResults, output_path: str) -> Path:
    """Save the running win rate plot as an image file."""
    path = Path(output_path)
    fig = create_convergence_plot(results)
    try:
        fig.savefig(path)
    finally:
        plt.close(fig)

    print(f"Plot saved to: {path.absolute()}")
    return path
