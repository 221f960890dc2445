"""Tests for batch runs and their charts."""

import json
import os

import pytest
from sudoku_logic.batch import BatchRunner, BatchResult, DEFAULT_STRATEGY_SETS, Visualizer
from sudoku_logic.puzzles import BUILTIN_PUZZLES


@pytest.fixture
def runner():
    return BatchRunner(BUILTIN_PUZZLES)


class TestBatchRunner:
    """Tests for BatchRunner."""

    def test_run_covers_every_pair(self, runner):
        results = runner.run(show_progress=False)
        assert len(results) == len(BUILTIN_PUZZLES) * len(DEFAULT_STRATEGY_SETS)
        assert all(isinstance(r, BatchResult) for r in results)
        assert all(r.valid for r in results)

    def test_outcomes(self, runner):
        runner.run(show_progress=False)
        by_key = {(r.puzzle, r.strategy_set): r for r in runner.results}

        assert by_key[("simple", "peer")].solved
        assert by_key[("simple", "peer")].assignments == 43
        assert not by_key[("no_singles", "peer")].solved
        assert by_key[("no_singles", "peer")].filled == by_key[("no_singles", "peer")].clues
        assert by_key[("no_singles", "peer+hidden")].solved
        assert by_key[("stalls_midway", "peer")].filled == 47
        assert by_key[("stalls_midway", "peer+hidden")].filled == 51

    def test_summary(self, runner):
        runner.run(show_progress=False)
        summary = runner.get_summary()

        assert summary["total_puzzles"] == 4
        peer = summary["results_by_strategy_set"]["peer"]
        assert peer["total_solved"] == 2
        assert peer["total_tested"] == 4
        assert peer["solve_rate"] == 50.0
        assert peer["all_valid"]
        assert summary["results_by_strategy_set"]["peer+hidden"]["total_solved"] == 3
        assert summary["results_by_puzzle"]["no_singles"] == {
            "peer": {"solved": False, "filled": 25},
            "peer+hidden": {"solved": True, "filled": 81},
        }

    def test_malformed_puzzle_recorded(self):
        runner = BatchRunner({"short": "-" * 80}, {"peer": ("peer",)})
        results = runner.run(show_progress=False)
        assert len(results) == 1
        assert not results[0].solved
        assert "found 80" in results[0].error

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            BatchRunner(BUILTIN_PUZZLES, {"bad": ("peer", "swordfish")})

    def test_save_results(self, runner, tmp_path):
        runner.run(show_progress=False)
        runner.save_results(str(tmp_path))

        with open(tmp_path / "batch_results.json") as f:
            results = json.load(f)
        assert len(results) == 8
        assert results[0]["puzzle"] == "simple"

        with open(tmp_path / "batch_summary.json") as f:
            summary = json.load(f)
        assert "results_by_strategy_set" in summary

        board_file = tmp_path / "boards" / "peer_hidden" / "no_singles.txt"
        assert board_file.read_text().startswith("5 3 1 7 6 2 8 4 9")


class TestVisualizer:
    """Tests for chart generation."""

    def test_generate_all(self, runner, tmp_path):
        results = runner.run(show_progress=False)
        charts = Visualizer(results, str(tmp_path)).generate_all()

        assert [os.path.basename(c) for c in charts] == [
            "solve_rate.png", "fill_progress.png", "time_comparison.png"
        ]
        for chart in charts:
            assert os.path.getsize(chart) > 0

    def test_skips_malformed_results(self, tmp_path):
        runner = BatchRunner({"short": "-" * 80, "simple": BUILTIN_PUZZLES["simple"]})
        results = runner.run(show_progress=False)
        visualizer = Visualizer(results, str(tmp_path))
        assert all(r.puzzle == "simple" for r in visualizer.results)
        assert os.path.exists(visualizer.plot_fill_progress())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
