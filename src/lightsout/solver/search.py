"""Backtracking search for Lights Out boards with holes.

Every non-hole cell is a candidate move.  Moves are ordered by layer, where the layer of
`(row, col)` is `min(row, col)`, then row-major within a layer.  A move at layer L only touches
cells in its own row and column, so it can never change the top-left L-by-L square.  Once the
search reaches the first move of a layer, that square is final for the current branch: if it
still has an OFF cell, the whole branch is abandoned.
"""

from dataclasses import dataclass, field
from time import time
from typing import TextIO

from bitarray import bitarray
from bitarray.util import zeros
from sortedcontainers import SortedList

from lightsout.board import Board, Position
from lightsout.solver.config import config as solver_config
from lightsout.solver.utils import int_comma, time_str


@dataclass
class SolverStats:
    """Statistics collected during solving."""

    nodes_visited: int = 0
    """Number of search nodes (board states) visited."""

    branches_pruned: int = 0
    """Number of branches abandoned at a layer boundary."""

    backtracks: int = 0
    """Number of included moves that were undone."""

    max_depth_reached: int = 0
    """Deepest step index reached in the move list."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""


def layer(pos: Position) -> int:
    """Return the layer of a position, `min(row, col)`."""
    return min(pos)


def move_sort_key(pos: Position) -> tuple[int, int, int]:
    """Key function ordering moves by layer, then row-major within a layer."""
    row, col = pos
    return (min(row, col), row, col)


def get_candidate_moves(board: Board) -> list[Position]:
    """Get all non-hole positions of the board, sorted by `move_sort_key`."""
    return list(SortedList(board.positions(), key=move_sort_key))


def get_break_points(moves: list[Position]) -> list[int]:
    """Get the indices in `moves` at which a new layer starts.

    Scanning the sorted moves, an index is recorded whenever the layer of the move exceeds
    the number of break points recorded so far.  When an entire layer consists of holes, more
    than one index may be recorded inside the following layer.

    Args:
        moves: Moves sorted by `move_sort_key`.

    Returns:
        Break point indices in increasing order.
    """
    break_points: list[int] = []
    for idx, move in enumerate(moves):
        if layer(move) > len(break_points):
            break_points.append(idx)
    return break_points


def _break_mask(n_moves: int, break_points: list[int]) -> bitarray:
    """Bitarray where bit `i` is set if step `i` is a break point."""
    mask = zeros(n_moves)
    for idx in break_points:
        mask[idx] = 1
    return mask


def solve(
    board: Board,
    *,
    prune: bool | None = None,
    stats: SolverStats | None = None,
    out: TextIO | None = None,
) -> list[Position] | None:
    """Find a sequence of activations that turns every non-hole cell ON.

    Each candidate move is either included or excluded, in candidate order, trying inclusion
    first.  The first solution found is returned; it is not necessarily the shortest.

    The search works on a private copy of the board, toggled in place and undone by toggling
    again, and uses an explicit loop rather than recursion.  The caller's board is not modified.

    Args:
        board: The board to solve.
        prune: Whether to apply layer-boundary pruning.  Defaults to
            `solver_config.use_pruning`.  Without pruning the search is plain exhaustive
            backtracking, and returns the same result.
        stats: Optional statistics object, updated in place.
        out: Optional text stream for progress reports.

    Returns:
        The activated positions in the order they were chosen, or None if no sequence of
        activations completes the board.
    """
    if prune is None:
        prune = solver_config.use_pruning
    if stats is None:
        stats = SolverStats()

    moves = get_candidate_moves(board)
    break_points = get_break_points(moves)
    history = _backtrack(board.copy(), moves, break_points, prune=prune, stats=stats, out=out)
    if history is None:
        return None
    return [moves[step] for step in history]


def _backtrack(
    work: Board,
    moves: list[Position],
    break_points: list[int],
    *,
    prune: bool,
    stats: SolverStats,
    out: TextIO | None,
) -> list[int] | None:
    """Run the include/exclude search over `moves`, mutating `work`.

    `history` holds the steps whose move is currently applied to `work`.  Each of them has had
    its inclusion branch explored but not its exclusion branch, so backtracking pops the most
    recent one, undoes it, and continues with the step after it excluded.

    Returns:
        The list of included step indices, or None if the search is exhausted.
    """
    n_moves = len(moves)
    is_break = _break_mask(n_moves, break_points)
    report_interval = solver_config.report_interval
    history: list[int] = []
    step = 0

    while True:
        stats.nodes_visited += 1
        if step > stats.max_depth_reached:
            stats.max_depth_reached = step
        if out is not None and report_interval and stats.nodes_visited % report_interval == 0:
            print(
                f"Visited {int_comma(stats.nodes_visited)} nodes, step {step}/{n_moves}, "
                f"{len(history)} moves applied, "
                f"elapsed {time_str(time() - stats.start_time)}",
                file=out,
                flush=True,
            )

        if work.is_complete():
            return history

        if step < n_moves:
            move = moves[step]
            if prune and is_break[step] and not work.is_minor_complete(layer(move)):
                # Nothing at this layer or beyond can fix the minor square: drop both branches.
                stats.branches_pruned += 1
            else:
                # Include the move; the exclusion branch is taken when we backtrack to it.
                work.toggle(move)
                history.append(step)
                step += 1
                continue

        if not history:
            return None
        last = history.pop()
        work.toggle(moves[last])
        stats.backtracks += 1
        step = last + 1
