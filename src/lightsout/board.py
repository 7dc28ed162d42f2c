"""Classes and functions for representing the game board."""

from array import array
from collections.abc import Iterator
from enum import IntEnum
from typing import TextIO, TypeAlias

Position: TypeAlias = tuple[int, int]
"""A `(row, col)` coordinate on the board."""


class Cell(IntEnum):
    """Possible cell states."""

    OFF = 0
    ON = 1
    HOLE = 9


class EncodingError(ValueError):
    """Raised when a board encoding is malformed."""


class InvalidActivation(RuntimeError):
    """Raised when a hole is activated."""


# Ray directions: up, down, left, right
_DIRECTIONS: tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Board:
    """Store a 2D grid of cells as a 1D array.

    Contains support for both 1D and 2D indexing.  The hole layout and the dimensions are
    fixed at construction; only `toggle` changes cell states.
    """

    def __init__(self, data: array | list[int], rows: int, cols: int) -> None:
        self.data: array = array("B", data)
        """Cell values in row-major order."""

        self.n_rows: int = rows
        """Number of rows in the board."""

        self.n_cols: int = cols
        """Number of columns in the board."""

        self.off_count: int = self.data.count(Cell.OFF)
        """Number of OFF cells, kept up to date by `toggle`."""

    @classmethod
    def from_encoding(cls, symbols: str, rows: int, cols: int, hole_char: str = "x") -> "Board":
        """Build a board from a row-major string of cell symbols.

        Args:
            symbols: One symbol per cell, left-to-right then top-to-bottom.  '0' is OFF,
                '1' is ON and `hole_char` is a hole.
            rows: Number of rows.
            cols: Number of columns.
            hole_char: The hole marker.

        Returns:
            A new Board.

        Raises:
            EncodingError: If the dimensions are not positive, the symbol count does not
                match `rows * cols`, or a symbol is not recognized.
        """
        if rows <= 0 or cols <= 0:
            raise EncodingError(f"Board dimensions must be positive, got {rows}x{cols}.")
        if len(symbols) != rows * cols:
            raise EncodingError(
                f"Expected {rows * cols} symbols for a {rows}x{cols} board, got {len(symbols)}."
            )

        symbol_map = {"0": Cell.OFF, "1": Cell.ON, hole_char: Cell.HOLE}
        data = array("B")
        for idx, ch in enumerate(symbols):
            cell = symbol_map.get(ch)
            if cell is None:
                row, col = divmod(idx, cols)
                raise EncodingError(f"Unrecognized symbol {ch!r} at ({row}, {col}).")
            data.append(cell)
        return cls(data, rows, cols)

    def to_encoding(self, hole_char: str = "x") -> str:
        """Inverse of `from_encoding`."""
        return "".join(hole_char if cell == Cell.HOLE else str(cell) for cell in self.data)

    def copy(self) -> "Board":
        """Generate a copy of the board."""
        return Board(self.data.__copy__(), self.n_rows, self.n_cols)

    def __str__(self) -> str:
        """Returns the row-major encoding of the board."""
        return self.to_encoding()

    def __repr__(self) -> str:
        return f"Board({self.to_encoding()!r}, {self.n_rows}, {self.n_cols})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.n_rows == other.n_rows
            and self.n_cols == other.n_cols
            and self.data == other.data
        )

    def __hash__(self) -> int:
        return hash((self.n_rows, self.n_cols, self.data.tobytes()))

    def print(self, out: TextIO | None = None, hole_char: str = "x") -> None:
        """Print the board, one line per row."""
        encoded = self.to_encoding(hole_char)
        for start in range(0, len(encoded), self.n_cols):
            print(encoded[start : start + self.n_cols], file=out)

    def __getitem__(self, idx: int | Position) -> Cell:
        """Get cell content by 1D (row-major order) or 2D index."""
        if isinstance(idx, int):
            return Cell(self.data[idx])
        if isinstance(idx, tuple) and len(idx) == 2:
            return Cell(self.data[self.get_1d_idx(*idx)])
        raise IndexError("Invalid index type for Board.")

    def get_2d_idx(self, one_d_idx: int) -> Position:
        """Convert a 1D index to a (row, col) tuple."""
        return divmod(one_d_idx, self.n_cols)

    def get_1d_idx(self, row: int, col: int) -> int:
        """Convert a (row, col) tuple to a 1D index."""
        if not (0 <= row < self.n_rows and 0 <= col < self.n_cols):
            raise IndexError(
                f"Position ({row}, {col}) is outside the {self.n_rows}x{self.n_cols} board."
            )
        return row * self.n_cols + col

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Return the board as a tuple of rows."""
        return tuple(
            tuple(Cell(v) for v in self.data[start : start + self.n_cols])
            for start in range(0, len(self.data), self.n_cols)
        )

    def positions(self) -> Iterator[Position]:
        """Yield every non-hole position in row-major order."""
        for idx, cell in enumerate(self.data):
            if cell != Cell.HOLE:
                yield self.get_2d_idx(idx)

    def holes(self) -> Iterator[Position]:
        """Yield every hole position in row-major order."""
        for idx, cell in enumerate(self.data):
            if cell == Cell.HOLE:
                yield self.get_2d_idx(idx)

    def toggle(self, pos: Position) -> None:
        """Activate `pos` in place.

        The target cell is flipped, then each of the four rays (up, down, left, right) flips
        cells one step at a time until it reaches a hole or the edge of the board.  Holes are
        never flipped.  Applying the same toggle twice restores the board exactly.

        Raises:
            InvalidActivation: If `pos` is a hole.
        """
        row, col = pos
        idx = self.get_1d_idx(row, col)
        data = self.data
        if data[idx] == Cell.HOLE:
            raise InvalidActivation(f"Cannot activate the hole at {pos}.")

        delta = 0
        data[idx] ^= 1
        delta += 1 if data[idx] == Cell.OFF else -1
        for delta_r, delta_c in _DIRECTIONS:
            r, c = row + delta_r, col + delta_c
            while 0 <= r < self.n_rows and 0 <= c < self.n_cols:
                ray_idx = r * self.n_cols + c
                if data[ray_idx] == Cell.HOLE:
                    break
                data[ray_idx] ^= 1
                delta += 1 if data[ray_idx] == Cell.OFF else -1
                r += delta_r
                c += delta_c
        self.off_count += delta

    def activate(self, pos: Position) -> "Board":
        """Return a new board with `pos` activated.  This board is unchanged.

        Raises:
            InvalidActivation: If `pos` is a hole.
        """
        new_board = self.copy()
        new_board.toggle(pos)
        return new_board

    def is_complete(self) -> bool:
        """Whether no cell on the board is OFF."""
        return self.off_count == 0

    def is_minor_complete(self, k: int) -> bool:
        """Whether no cell in the top-left k-by-k square is OFF.

        Holes inside the square are fine.  Always True for k = 0.
        """
        for row in range(min(k, self.n_rows)):
            start = row * self.n_cols
            if Cell.OFF in self.data[start : start + min(k, self.n_cols)]:
                return False
        return True
