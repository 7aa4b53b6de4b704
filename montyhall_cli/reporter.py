"""
Reporter for displaying and exporting simulation results.
"""

import csv
from pathlib import Path
from typing import Optional

from montyhall_core.config import Outcome, SimulationConfig, Strategy
from montyhall_core.results import SimulationResults


SEPARATOR = "=" * 60
THIN_SEPARATOR = "-" * 60


def print_header() -> None:
    """Print report header."""
    print(SEPARATOR)
    print("          Monty Hall Simulator - Strategy Comparison")
    print(SEPARATOR)


def print_configuration(config: SimulationConfig) -> None:
    """Print configuration summary."""
    print("Configuration:")
    print(f"  Trials: {config.n_trials:,}")
    print(f"  Records: {config.n_records:,}")

    if config.random_seed is not None:
        print(f"  Random Seed: {config.random_seed}")

    print(THIN_SEPARATOR)


def format_proportion(value: Optional[float], decimals: int) -> str:
    """Format a proportion, or 'n/a' when there is no data."""
    if value is None:
        return "n/a"
    return f"{value:.{decimals}f}"


def format_table_row(
    strategy_name: str,
    lose: Optional[float],
    win: Optional[float],
    decimals: int = 2
) -> str:
    """Format a single table row."""
    return (
        f"{strategy_name:<10} | {format_proportion(lose, decimals):>6} | "
        f"{format_proportion(win, decimals):>6} |"
    )


def print_proportion_table(results: SimulationResults, decimals: int = 2) -> None:
    """Print row-normalized outcome proportions per strategy."""
    proportions = results.compute_proportions(decimals)

    print("\nOutcome proportions (per strategy):")
    print(THIN_SEPARATOR)
    print(f"{'strategy':<10} | {Outcome.LOSE.value:>6} | {Outcome.WIN.value:>6} |")
    print(THIN_SEPARATOR)

    for strategy in Strategy:
        values = proportions[strategy.value]
        print(format_table_row(
            strategy.value,
            values[Outcome.LOSE.value],
            values[Outcome.WIN.value],
            decimals,
        ))

    print(THIN_SEPARATOR)


def print_best_strategy(results: SimulationResults, decimals: int = 2) -> None:
    """Print the strategy with the highest win rate."""
    best = results.best_strategy()

    if best is None:
        print("\nNo trials were run; no strategy to compare.")
    else:
        rate = results.win_rates(decimals)[best.value]
        print(f"\nBest Strategy: {best.value} (Win rate: {rate:.{decimals}f})")

    print(SEPARATOR)


def print_full_report(results: SimulationResults, config: SimulationConfig) -> None:
    """Print the full comparison report."""
    print_header()
    print_configuration(config)
    print_proportion_table(results, config.decimals)
    print_best_strategy(results, config.decimals)


def export_to_csv(
    results: SimulationResults,
    output_path: str,
    decimals: int = 2
) -> Path:
    """
    Export per-strategy summary to CSV file.

    Args:
        results: Simulation results
        output_path: Path to output CSV file
        decimals: Rounding of the proportions

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    counts = results.count_outcomes()
    proportions = results.compute_proportions(decimals)

    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        # Header
        writer.writerow([
            'strategy', 'n', 'wins', 'losses', 'win_rate', 'lose_rate'
        ])

        # Data rows
        for strategy in Strategy:
            c = counts[strategy.value]
            p = proportions[strategy.value]
            writer.writerow([
                strategy.value,
                c['WIN'] + c['LOSE'],
                c['WIN'],
                c['LOSE'],
                '' if p['WIN'] is None else f"{p['WIN']:.{decimals}f}",
                '' if p['LOSE'] is None else f"{p['LOSE']:.{decimals}f}",
            ])

    print(f"\nResults exported to: {path.absolute()}")
    return path


def export_detailed_csv(results: SimulationResults, output_path: str) -> Path:
    """
    Export every outcome record to CSV.

    The file is written next to output_path as "<stem>_detailed<ext>".

    Args:
        results: Simulation results
        output_path: Path of the summary CSV file

    Returns:
        Path of the written file
    """
    path = Path(output_path)
    detailed_path = path.parent / f"{path.stem}_detailed{path.suffix}"

    results.to_csv(str(detailed_path))

    print(f"Detailed results exported to: {detailed_path.absolute()}")
    return detailed_path
