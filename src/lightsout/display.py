"""Presentation of solved boards."""

from collections.abc import Iterable
from enum import IntEnum

import numpy as np

from lightsout.board import Board, Cell, Position
from lightsout.solver.config import config as solver_config


class Glyph(IntEnum):
    """Display states of a cell."""

    UNVISITED = 0
    VISITED = 1
    HOLE = 2


def display_grid(board: Board, solution: Iterable[Position]) -> np.ndarray:
    """Mark the activated positions of a solution on the board.

    Args:
        board: The board the solution was computed for.
        solution: Positions activated by the solution.

    Returns:
        An integer array of shape `(n_rows, n_cols)` holding Glyph values.  Holes stay holes
        even if listed in `solution`.
    """
    cells = np.array(board.data, dtype=np.uint8).reshape(board.n_rows, board.n_cols)
    grid = np.full(cells.shape, Glyph.UNVISITED, dtype=np.uint8)
    for row, col in solution:
        grid[row, col] = Glyph.VISITED
    grid[cells == Cell.HOLE] = Glyph.HOLE
    return grid


def format_display(
    board: Board,
    solution: Iterable[Position],
    glyphs: tuple[str, str, str] | None = None,
) -> str:
    """Render `display_grid` as text, one line per row.

    Args:
        board: The board the solution was computed for.
        solution: Positions activated by the solution.
        glyphs: Characters for (unvisited, visited, hole) cells.  Defaults to the configured
            glyphs.
    """
    if glyphs is None:
        glyphs = (
            solver_config.glyph_unvisited,
            solver_config.glyph_visited,
            solver_config.glyph_hole,
        )
    chars = np.array(glyphs)[display_grid(board, solution)]
    return "\n".join("".join(row) for row in chars)
