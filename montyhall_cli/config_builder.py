"""
Configuration builder for CLI Simulator.

Converts command-line arguments to SimulationConfig.
"""

from argparse import Namespace

from montyhall_core.config import SimulationConfig, Strategy


def build_config(args: Namespace) -> SimulationConfig:
    """
    Build a SimulationConfig from command-line arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        SimulationConfig with all parameters set

    Raises:
        ConfigurationError: If a value is out of range (e.g. negative trials)
    """
    return SimulationConfig(
        n_trials=args.trials,
        random_seed=args.seed,
        decimals=getattr(args, "decimals", 2),
    )


def format_config_summary(config: SimulationConfig) -> str:
    """
    Format configuration summary for display.

    Args:
        config: SimulationConfig to summarize

    Returns:
        Formatted string summary
    """
    strategies = ", ".join(s.value for s in Strategy)

    lines = [
        "  Doors: 3 (1 car, 2 goats)",
        f"  Trials: {config.n_trials:,}",
        f"  Strategies: {strategies}",
        f"  Decimals: {config.decimals}",
    ]

    if config.random_seed is not None:
        lines.append(f"  Random Seed: {config.random_seed}")

    return "\n".join(lines)
