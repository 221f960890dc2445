"""Batch module for running strategy sets over puzzle collections."""

from .runner import BatchRunner, BatchResult, DEFAULT_STRATEGY_SETS
from .visualizer import Visualizer

__all__ = ["BatchRunner", "BatchResult", "DEFAULT_STRATEGY_SETS", "Visualizer"]
