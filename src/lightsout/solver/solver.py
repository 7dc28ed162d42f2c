"""Main solver module for Lights Out puzzles."""

import sys
from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from lightsout.board import Position
from lightsout.display import format_display
from lightsout.puzzle_config import PuzzleConfig
from lightsout.solver.config import config as solver_config
from lightsout.solver.search import SolverStats, solve
from lightsout.solver.utils import TIMESTAMP_FMT, int_comma, time_str, verify_solution


def run(config: PuzzleConfig) -> list[Position] | None:
    """Run the solver on the given configuration.

    Args:
        config (PuzzleConfig): The configuration for the puzzle to solve.

    Returns:
        The solution found, or None if the puzzle has no solution.
    """
    print(f"config: {config}")

    logfile = Path(solver_config.log_dir) / f"{config.name}-{config.dims[0]}x{config.dims[1]}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            solution = solve_one(config, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    if solution is None:
        print("No solution found.")
    else:
        print(f"Solution found ({len(solution)} moves):")
        print(format_display(config.to_board(), solution))
    print()
    return solution


def solve_one(puzzle_config: PuzzleConfig, *, logf: TextIO) -> list[Position] | None:
    """Attempt to solve a Lights Out puzzle given a starting configuration.

    Args:
        puzzle_config (PuzzleConfig): The configuration for the puzzle to solve.
        logf: File object to log the solving process.

    Returns:
        The solution found, or None if the puzzle has no solution.

    Raises:
        RuntimeError: If solution verification is enabled and the solution does not complete
            the board.
    """
    board = puzzle_config.to_board()

    print(f"Selected puzzle: {puzzle_config.name}", file=logf, flush=True)
    print(f"Dimensions: {puzzle_config.dims}", file=logf, flush=True)
    print("Initial grid:", file=logf, flush=True)
    print("", file=logf, flush=True)
    board.print(out=logf, hole_char=solver_config.hole_char)
    print("", file=logf, flush=True)
    print(f"Number of holes: {sum(1 for _ in board.holes())}", file=logf, flush=True)
    print(f"Number of OFF cells: {board.off_count}", file=logf, flush=True)
    print(f"Pruning: {'on' if solver_config.use_pruning else 'off'}", file=logf, flush=True)

    stats = SolverStats()
    start_time_str = datetime.fromtimestamp(stats.start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    solution = solve(board, stats=stats, out=logf)
    elapsed = time() - stats.start_time

    print(f"Time taken: {time_str(elapsed)}", file=logf, flush=True)
    print(f"Nodes visited: {int_comma(stats.nodes_visited)}", file=logf, flush=True)
    print(f"Branches pruned: {int_comma(stats.branches_pruned)}", file=logf, flush=True)
    print(f"Backtracks: {int_comma(stats.backtracks)}", file=logf, flush=True)

    if solution is None:
        print("No solution found.", file=logf, flush=True)
        return None

    if solver_config.verify_solutions and not verify_solution(board, solution):
        raise RuntimeError(f"Solution {solution} does not complete puzzle {puzzle_config.name}.")

    print(f"Solution found ({len(solution)} moves):", file=logf, flush=True)
    print(", ".join(f"({row}, {col})" for row, col in solution), file=logf, flush=True)
    print("", file=logf, flush=True)
    print(format_display(board, solution), file=logf, flush=True)
    return solution
