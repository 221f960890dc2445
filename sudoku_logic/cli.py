"""Command-line interface for the Sudoku elimination solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .core.board import Board
from .puzzles import BUILTIN_PUZZLES, load_puzzle_file
from .solvers import DEFAULT_STRATEGY_NAMES, STRATEGIES, EliminationSolver, resolve_strategies

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using logical candidate elimination",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle given inline ('-' for empty cells, other characters ignored)
  sudoku-logic solve --puzzle "9--83-157/5-31-628-/1--74--9-/..."

  # Puzzle text starting with '-' must be attached with '='
  sudoku-logic solve --puzzle="--9748---/7--------/..."

  # Read the puzzle from standard input
  cat puzzle.txt | sudoku-logic solve --puzzle -

  # Solve the first puzzle in a file with hidden singles enabled
  sudoku-logic solve --file puzzles.txt --strategy peer --strategy hidden

  # Solve every built-in puzzle
  sudoku-logic examples

  # Compare strategy sets over a puzzle file
  sudoku-logic batch --file puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log every assignment the solver makes"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle text (81 cells, '-' for empty), or '-' to read stdin"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="Puzzle file; the first puzzle in it is solved"
    )
    _add_strategy_argument(solve_parser)
    solve_parser.add_argument(
        "--pretty", action="store_true",
        help="Draw section borders around the boards"
    )

    # Examples command
    examples_parser = subparsers.add_parser("examples", help="Solve the built-in puzzles")
    _add_strategy_argument(examples_parser)

    # Batch command
    batch_parser = subparsers.add_parser(
        "batch", help="Compare strategy sets over a collection of puzzles"
    )
    batch_parser.add_argument(
        "--file", "-f", type=str, default=None,
        help="Puzzle file (default: the built-in puzzles)"
    )
    batch_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    batch_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    batch_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return EXIT_FAILURE

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "examples":
        return cmd_examples(args)
    elif args.command == "batch":
        return cmd_batch(args)
    return EXIT_FAILURE


def _add_strategy_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strategy", "-s", action="append", choices=sorted(STRATEGIES),
        default=None, dest="strategies",
        help="Strategy to apply, in order; repeat for more "
             f"(default: {', '.join(DEFAULT_STRATEGY_NAMES)})"
    )


def _make_solver(args) -> EliminationSolver:
    return EliminationSolver(resolve_strategies(args.strategies or DEFAULT_STRATEGY_NAMES))


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        if args.file:
            text = next(iter(load_puzzle_file(args.file).values()))
        elif args.puzzle == "-":
            text = sys.stdin.read()
        else:
            text = args.puzzle
        board = Board.from_text(text)
    except (OSError, ValueError) as e:
        print(f"Error parsing puzzle: {e}")
        return EXIT_FAILURE

    render = Board.pretty if args.pretty else Board.__str__

    print("Input puzzle:")
    print(render(board))
    print()

    solver = _make_solver(args)
    print(f"Solving with {', '.join(s.name for s in solver.strategies)}...")
    solved = solver.solve(board)
    stats = solver.stats

    if solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
    else:
        print(f"✗ Stuck with {board.count_empty()} cells unfilled")
    print(f"  Assignments: {len(stats.assignments)}")
    print(f"  Passes: {stats.passes}")
    print(f"  Cells evaluated: {stats.cells_evaluated:,}")
    print(render(board))

    return EXIT_SUCCESS if solved else EXIT_FAILURE


def cmd_examples(args) -> int:
    """Handle the examples command."""
    solver = _make_solver(args)
    all_solved = True

    for name, text in BUILTIN_PUZZLES.items():
        board = Board.from_text(text)
        print(f"Solving {name}...")
        if solver.solve(board):
            print(f"Ok!\n{board}")
        else:
            all_solved = False
            print(f"Failed to solve {name}")
        print()

    return EXIT_SUCCESS if all_solved else EXIT_FAILURE


def cmd_batch(args) -> int:
    """Handle the batch command."""
    # Imported here so the solve path does not pull in matplotlib
    from .batch import BatchRunner, Visualizer

    if args.file:
        try:
            puzzles = load_puzzle_file(args.file)
        except (OSError, ValueError) as e:
            print(f"Error reading puzzles: {e}")
            return EXIT_FAILURE
    else:
        puzzles = BUILTIN_PUZZLES

    runner = BatchRunner(puzzles)

    print("=" * 60)
    print("SUDOKU ELIMINATION BATCH")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Strategy sets: {', '.join(runner.strategy_sets)}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = runner.run(show_progress=not args.no_progress)
    summary = runner.get_summary()

    print("\nBy Strategy Set:")
    print("-" * 50)
    for name, stats in summary["results_by_strategy_set"].items():
        print(f"\n{name}:")
        print(f"  Solved: {stats['solve_rate']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Assignments: {stats['avg_assignments']:.1f}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")

    for result in results:
        if result.error:
            print(f"\nSkipped {result.puzzle}: {result.error}")

    runner.save_results(args.output)
    print(f"\nResults saved to {args.output}")

    if not args.no_charts:
        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        for chart in charts:
            print(f"  - {chart}")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
