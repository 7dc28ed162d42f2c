"""Lights Out Puzzle Solver.

Finds a set of cell activations that turns every cell of a Lights Out board ON.  Activating
a cell flips it and every cell in its row and column up to the nearest hole (denoted by 'x')
or the edge of the board.  Uses backtracking, pruned layer by layer from the top-left corner.
"""

import argparse
from sys import exit

from lightsout.board import EncodingError
from lightsout.puzzle_config import PuzzleConfig, clean, load_configs
from lightsout.solver import solver


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Lights Out solver."""
    parser = argparse.ArgumentParser(description="Lights Out (with holes) puzzle solver")
    parser.add_argument("configs", nargs="*", help="Path(s) to puzzle files")
    parser.add_argument("--rows", type=int, help="Board height")
    parser.add_argument("--cols", type=int, help="Board width")
    parser.add_argument(
        "--board",
        type=str,
        help="Board as a single string, left-to-right then top-to-bottom "
        "(1 = on, 0 = off, x = hole)",
    )
    parser.add_argument("--name", type=str, default="inline", help="Puzzle name for the log file")
    args = parser.parse_args(argv)

    inline = (args.rows, args.cols, args.board)
    n_inline = sum(value is not None for value in inline)
    if 0 < n_inline < len(inline):
        parser.error("--rows, --cols and --board must be given together")
    if not args.configs and args.board is None:
        parser.error("give either puzzle files or --rows, --cols and --board")

    try:
        configs: list[PuzzleConfig] = []
        for path in args.configs:
            configs.extend(load_configs(path))
        if args.board is not None:
            configs.append(
                PuzzleConfig(
                    name=args.name,
                    dims=(args.rows, args.cols),
                    board_str=clean(args.board),
                )
            )
    except (OSError, ValueError) as e:
        # EncodingError is a ValueError
        print(f"Error: {e}")
        exit(1)

    for config in configs:
        solver.run(config)


__all__ = ["EncodingError", "main"]
