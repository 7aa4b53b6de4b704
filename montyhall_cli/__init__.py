"""
CLI Simulator for the Monty Hall game

This module provides a command-line interface for running simulations
and comparing the stay and switch strategies.
"""

__version__ = "0.1.0"
