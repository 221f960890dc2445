"""Tests for the command-line interface."""

import io

import pytest
from sudoku_logic.cli import main, EXIT_FAILURE, EXIT_SUCCESS
from sudoku_logic.puzzles import BUILTIN_PUZZLES


SIMPLE_PUZZLE = (
    "9--83-157/5-31-628-/1--74--9-/----5-83-/3-1--4672/"
    "2---13--9/--2-7--1-/-------6-/-34-6-92-"
)

# The solved simple puzzle with its first cell cleared
NEARLY_SOLVED = (
    "-46832157/573196284/128745396/469257831/351984672/"
    "287613549/692378415/815429763/734561928"
)


class TestSolveCommand:
    """Tests for `solve`."""

    def test_solves_inline_puzzle(self, capsys):
        assert main(["solve", "--puzzle", SIMPLE_PUZZLE]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Solved" in out
        assert "Assignments: 43" in out
        assert out.rstrip().endswith("7 3 4 5 6 1 9 2 8")

    def test_reports_stuck_puzzle(self, capsys):
        assert main(["solve", "--puzzle", BUILTIN_PUZZLES["no_singles"]]) == EXIT_FAILURE
        assert "Stuck with 56 cells unfilled" in capsys.readouterr().out

    def test_strategy_option(self, capsys):
        args = ["solve", "--puzzle", BUILTIN_PUZZLES["no_singles"],
                "--strategy", "peer", "--strategy", "hidden"]
        assert main(args) == EXIT_SUCCESS
        assert "Solving with peer, hidden" in capsys.readouterr().out

    def test_pretty(self, capsys):
        main(["solve", "--puzzle", SIMPLE_PUZZLE, "--pretty"])
        assert "| 9 . . | 8 3 . | 1 5 7 |" in capsys.readouterr().out

    def test_malformed_puzzle(self, capsys):
        assert main(["solve", "--puzzle=" + "-" * 82]) == EXIT_FAILURE
        assert "Error parsing puzzle" in capsys.readouterr().out

    def test_puzzle_starting_with_empty_cell(self, capsys):
        """Text beginning with '-' is accepted in the attached form."""
        assert main(["solve", f"--puzzle={NEARLY_SOLVED}"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Assignments: 1" in out
        assert out.rstrip().endswith("7 3 4 5 6 1 9 2 8")

    def test_puzzle_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(SIMPLE_PUZZLE))
        assert main(["solve", "--puzzle", "-"]) == EXIT_SUCCESS
        assert "Assignments: 43" in capsys.readouterr().out

    def test_malformed_puzzle_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(NEARLY_SOLVED[:-1]))
        assert main(["solve", "--puzzle", "-"]) == EXIT_FAILURE
        assert "found 80" in capsys.readouterr().out

    def test_from_file(self, tmp_path, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text("# classic\n" + BUILTIN_PUZZLES["classic"])
        assert main(["solve", "--file", str(path)]) == EXIT_SUCCESS

    def test_missing_file(self, tmp_path, capsys):
        assert main(["solve", "--file", str(tmp_path / "nope.txt")]) == EXIT_FAILURE
        assert "Error parsing puzzle" in capsys.readouterr().out

    def test_unknown_strategy(self):
        with pytest.raises(SystemExit):
            main(["solve", "--puzzle", SIMPLE_PUZZLE, "--strategy", "guess"])


class TestOtherCommands:
    """Tests for `examples`, `batch` and the bare invocation."""

    def test_examples(self, capsys):
        assert main(["examples"]) == EXIT_FAILURE
        out = capsys.readouterr().out
        assert "Solving simple..." in out
        assert "Ok!" in out
        assert "Failed to solve no_singles" in out

    def test_examples_with_hidden_singles(self, capsys):
        assert main(["examples", "-s", "peer", "-s", "hidden"]) == EXIT_FAILURE
        assert "Failed to solve stalls_midway" in capsys.readouterr().out

    def test_batch(self, tmp_path, capsys):
        out_dir = tmp_path / "results"
        args = ["batch", "--output", str(out_dir), "--no-progress", "--no-charts"]
        assert main(args) == EXIT_SUCCESS
        assert (out_dir / "batch_summary.json").exists()
        assert "peer+hidden:" in capsys.readouterr().out

    def test_batch_duplicate_names(self, tmp_path, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text("# easy\n" + SIMPLE_PUZZLE + "\n\n# easy\n" + NEARLY_SOLVED)
        args = ["batch", "--file", str(path), "--output", str(tmp_path / "out"), "--no-progress"]
        assert main(args) == EXIT_FAILURE
        assert "Duplicate puzzle name: easy" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == EXIT_FAILURE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
