"""Loader for puzzle files."""

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from lightsout.board import Board, EncodingError
from lightsout.solver.config import config as solver_config


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    name: str
    """A name identifying the puzzle, used for log file names."""

    dims: tuple[int, int]
    """The height and width of the puzzle grid."""

    board_str: str
    """The initial state of the puzzle board, in row-major order.

    OFF cells are '0', ON cells are '1', and holes are represented by the configured hole
    character ('x' by default).
    """

    def __post_init__(self) -> None:
        """Validate the board."""
        height, width = self.dims
        if height <= 0 or width <= 0:
            raise EncodingError(f"Board dimensions must be positive, got {self.dims}.")

        # Ensure the board shape matches the specified dimensions
        if len(self.board_str) != height * width:
            raise EncodingError(
                f"Board string length {len(self.board_str)} does not match dimensions {self.dims}."
            )

        # Ensure the board contains only valid characters (0, 1, hole)
        valid_chars = {"0", "1", solver_config.hole_char}
        board_chars = set(self.board_str)
        if not board_chars <= valid_chars:
            raise EncodingError(
                f"Board contains invalid characters: {''.join(sorted(board_chars - valid_chars))}"
            )

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        return f"{self.name} ({self.dims[0]}x{self.dims[1]}):\n{self.board_str}"

    def to_board(self) -> Board:
        """Build the Board described by this configuration."""
        return Board.from_encoding(self.board_str, *self.dims, hole_char=solver_config.hole_char)

    def to_dict(self) -> dict:
        """Return a dictionary representation of the PuzzleConfig for serialization."""
        return {
            "name": self.name,
            "dims": self.dims,
            "board": self.board_str,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PuzzleConfig":
        """Create a PuzzleConfig instance from a dictionary representation."""
        return cls(
            name=data["name"],
            dims=tuple(data["dims"]),
            board_str=data["board"],
        )


def clean(board_str: str) -> str:
    """Clean the board string by removing all whitespace."""
    return "".join(board_str.split())


def load_configs(configs_path: PathLike | str) -> list[PuzzleConfig]:
    """Load puzzle configurations from the given path.

    The first line holds the dimensions ("rows cols"), followed by a blank line and one or
    more boards separated by blank lines.  Whitespace within a board is ignored, so cells may
    be written space-separated.

    Args:
        configs_path: Path to the puzzle file.

    Raises:
        ValueError: If the dimensions line or the layout of the file is malformed.
        EncodingError: If a board does not match the dimensions or has invalid symbols.
    """
    configs = []

    path = Path(configs_path).resolve()
    with open(path, "r", encoding="utf-8") as f:
        # Get dimensions from first line
        first_line = f.readline().strip()
        try:
            height, width = map(int, first_line.split())
        except ValueError:
            # Covers both incorrect number of values and non-integer values
            raise ValueError(f"Invalid dimensions line: '{first_line}'") from None

        # Skip first blank line
        if f.readline().strip() != "":
            raise ValueError(f"Expected a blank line after the dimensions in {path}.")

        # Read the board lines, each board is separated by a blank line
        while True:
            board_lines = []
            while True:
                line = f.readline()
                if not line or line.strip() == "":
                    break
                board_lines.append(line.strip())

            if not board_lines:
                break  # No more boards to read

            configs.append(
                PuzzleConfig(
                    name=f"{path.stem}-{len(configs) + 1}",
                    dims=(height, width),
                    board_str=clean("\n".join(board_lines)),
                )
            )

    return configs
