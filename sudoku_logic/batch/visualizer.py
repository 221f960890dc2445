"""Visualization utilities for batch results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .runner import BatchResult


class Visualizer:
    """
    Chart generator for batch results.

    Compares strategy sets by solve rate, by how far they fill each puzzle,
    and by time spent.
    """

    COLORS = {
        "peer": "#3498db",          # Blue
        "peer+hidden": "#2ecc71",   # Green
    }
    DEFAULT_COLOR = "#95a5a6"

    def __init__(self, results: List[BatchResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of batch results. Results for malformed puzzles
                     are left out of every chart.
            output_dir: Directory to save generated charts.
        """
        self.results = [r for r in results if r.error is None]
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _strategy_sets(self) -> List[str]:
        return list(dict.fromkeys(r.strategy_set for r in self.results))

    def _puzzles(self) -> List[str]:
        return list(dict.fromkeys(r.puzzle for r in self.results))

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_solve_rate(),
            self.plot_fill_progress(),
            self.plot_time_comparison(),
        ]

    def plot_solve_rate(self) -> str:
        """Bar chart of the share of puzzles each strategy set solved."""
        fig, ax = plt.subplots(figsize=(8, 6))

        sets = self._strategy_sets()
        rates = []
        for name in sets:
            set_results = [r for r in self.results if r.strategy_set == name]
            solved = sum(1 for r in set_results if r.solved)
            rates.append(solved / len(set_results) * 100 if set_results else 0)

        bars = ax.bar(sets, rates,
                      color=[self.COLORS.get(s, self.DEFAULT_COLOR) for s in sets],
                      edgecolor='black', linewidth=0.5)

        for bar, rate in zip(bars, rates):
            ax.annotate(f'{rate:.0f}%',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Strategy Set', fontsize=12)
        ax.set_ylabel('Solved (%)', fontsize=12)
        ax.set_title('Solve Rate by Strategy Set', fontsize=14, fontweight='bold')
        ax.set_ylim(0, 115)
        ax.axhline(y=100, color='gray', linestyle='--', alpha=0.3)

        return self._save("solve_rate.png")

    def plot_fill_progress(self) -> str:
        """Grouped bars of filled cells per puzzle, against the given clues."""
        fig, ax = plt.subplots(figsize=(12, 6))

        sets = self._strategy_sets()
        puzzles = self._puzzles()

        x = np.arange(len(puzzles))
        width = 0.8 / max(len(sets), 1)

        for i, name in enumerate(sets):
            filled = []
            for puzzle in puzzles:
                match = [r.filled for r in self.results
                         if r.strategy_set == name and r.puzzle == puzzle]
                filled.append(match[0] if match else 0)

            offset = (i - len(sets) / 2 + 0.5) * width
            ax.bar(x + offset, filled, width,
                   label=name,
                   color=self.COLORS.get(name, self.DEFAULT_COLOR),
                   edgecolor='black', linewidth=0.5)

        clues = []
        for puzzle in puzzles:
            clues.append(next(r.clues for r in self.results if r.puzzle == puzzle))
        ax.scatter(x, clues, marker='_', s=400, color='black', zorder=3, label='Clues')

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Filled Cells', fontsize=12)
        ax.set_title('Cells Filled by Strategy Set', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels(puzzles, rotation=30, ha='right')
        ax.set_ylim(0, 90)
        ax.axhline(y=81, color='gray', linestyle='--', alpha=0.3)
        ax.legend(title='Strategy Set', bbox_to_anchor=(1.05, 1), loc='upper left')

        return self._save("fill_progress.png")

    def plot_time_comparison(self) -> str:
        """Box plot of solve times per strategy set."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sets = self._strategy_sets()
        data = [[r.time_seconds * 1000 for r in self.results if r.strategy_set == name]
                for name in sets]

        bp = ax.boxplot(data, patch_artist=True)
        ax.set_xticks(range(1, len(sets) + 1))
        ax.set_xticklabels(sets)
        for patch, name in zip(bp['boxes'], sets):
            patch.set_facecolor(self.COLORS.get(name, self.DEFAULT_COLOR))
            patch.set_alpha(0.7)

        ax.set_xlabel('Strategy Set', fontsize=12)
        ax.set_ylabel('Time (ms)', fontsize=12)
        ax.set_title('Solve Time by Strategy Set', fontsize=14, fontweight='bold')

        return self._save("time_comparison.png")
