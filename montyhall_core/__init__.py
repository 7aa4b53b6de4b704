"""
Monty Hall Simulator Core Package

モンティ・ホール問題（3枚のドア、car 1台・goat 2頭）のシミュレーターのコアモジュール
"""

from .config import SimulationConfig, Strategy, Outcome, Prize, DOORS
from .arrangement import PrizeArrangement, create_game, validate_door
from .game import select_door, open_goat_door, change_door, determine_winner
from .random_source import RandomSource, NumpyRandomSource, ScriptedRandomSource
from .results import OutcomeRecord, SimulationResults
from .simulation import SimulationEngine, play_game, run_one_trial, run_simulation
from .exceptions import (
    MontyHallError,
    InvalidArgumentError,
    InvalidArrangementError,
    InvalidDoorError,
    RandomSourceExhaustedError,
    ConfigurationError,
    InvalidTrialCountError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "SimulationConfig",
    "Strategy",
    "Outcome",
    "Prize",
    "DOORS",
    # Game
    "PrizeArrangement",
    "create_game",
    "validate_door",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    # Random
    "RandomSource",
    "NumpyRandomSource",
    "ScriptedRandomSource",
    # Core
    "OutcomeRecord",
    "SimulationResults",
    "SimulationEngine",
    "play_game",
    "run_one_trial",
    "run_simulation",
    # Exceptions
    "MontyHallError",
    "InvalidArgumentError",
    "InvalidArrangementError",
    "InvalidDoorError",
    "RandomSourceExhaustedError",
    "ConfigurationError",
    "InvalidTrialCountError",
]
