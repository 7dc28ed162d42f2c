"""Utility functions for the Lights Out solver."""

from collections.abc import Iterable

from lightsout.board import Board, Position

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def replay(board: Board, solution: Iterable[Position]) -> Board:
    """Apply each activation in `solution` in order, returning the resulting board.

    The input board is not modified.

    Raises:
        InvalidActivation: If a position in `solution` is a hole.
    """
    result = board.copy()
    for pos in solution:
        result.toggle(pos)
    return result


def verify_solution(board: Board, solution: list[Position]) -> bool:
    """Whether `solution` has no repeated positions and leaves no OFF cells when replayed."""
    if len(set(solution)) != len(solution):
        return False
    return replay(board, solution).is_complete()
