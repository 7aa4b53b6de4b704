"""
Runner for executing a simulation with console progress.
"""

from typing import Callable, Optional

from montyhall_core.config import SimulationConfig
from montyhall_core.random_source import RandomSource
from montyhall_core.results import SimulationResults
from montyhall_core.simulation import SimulationEngine
from montyhall_core.strategies import get_strategy


# Number of progress bar redraws over a whole run
PROGRESS_STEPS = 100


def make_progress_printer(bar_len: int = 30) -> Callable[[int, int], None]:
    """
    Create a progress callback that draws a text progress bar.

    Redraws are throttled to about PROGRESS_STEPS per run.
    """
    def trial_progress(current: int, n_trials: int) -> None:
        if n_trials <= 0:
            return
        step = max(1, n_trials // PROGRESS_STEPS)
        if current % step != 0 and current != n_trials:
            return
        pct = current / n_trials * 100
        filled = int(bar_len * current / n_trials)
        bar = "=" * filled + "-" * (bar_len - filled)
        print(f"\r  Progress: [{bar}] {pct:5.1f}% ({current}/{n_trials})", end="", flush=True)

    return trial_progress


def run_with_progress(
    config: SimulationConfig,
    show_progress: bool = True,
    verbose: bool = False,
    random_source: Optional[RandomSource] = None,
) -> SimulationResults:
    """
    Run the simulation, optionally drawing a progress bar.

    Args:
        config: Simulation configuration
        show_progress: Whether to show progress output
        verbose: Whether to show detailed output
        random_source: Optional random source (defaults to a seeded numpy generator)

    Returns:
        Simulation results
    """
    if show_progress:
        print(f"\nRunning {config.n_trials:,} trials...", flush=True)

    engine = SimulationEngine(
        config,
        progress_callback=make_progress_printer() if show_progress else None,
        random_source=random_source,
    )
    results = engine.run()

    if show_progress:
        print()  # New line after progress bar

    if verbose:
        counts = results.count_outcomes()
        for strategy, outcome_counts in counts.items():
            name = get_strategy(strategy).name
            print(f"  -> {name}: WIN {outcome_counts['WIN']:,}, "
                  f"LOSE {outcome_counts['LOSE']:,}")

    return results
