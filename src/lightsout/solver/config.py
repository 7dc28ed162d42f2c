"""Lights Out solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Lights Out solver."""

    hole_char: str = "x"
    """Symbol marking a hole in board encodings. Default: 'x'."""

    glyph_hole: str = "x"
    """Glyph used for holes when printing a solved board. Default: 'x'."""

    glyph_visited: str = "O"
    """Glyph used for activated cells when printing a solved board. Default: 'O'."""

    glyph_unvisited: str = "."
    """Glyph used for cells that are not activated. Default: '.'."""

    log_dir: str = "logs"
    """Directory for per-puzzle log files. Default: 'logs'."""

    report_interval: int = 100_000
    """Interval (in number of visited search nodes) at which to report progress.

    Set to 0 to disable progress reports. Default: 100,000.
    """

    use_pruning: bool = True
    """Whether to abandon branches whose top-left minor square can no longer be completed.

    Disabling this turns the search into plain exhaustive backtracking. Default: True.
    """

    verify_solutions: bool = True
    """Whether to replay every solution found and check that it completes the board."""

    model_config = SettingsConfigDict(
        env_prefix="LIGHTSOUT_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
