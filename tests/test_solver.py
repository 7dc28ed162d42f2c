import pytest

from lightsout import main
from lightsout.puzzle_config import PuzzleConfig
from lightsout.solver import solver
from lightsout.solver.config import config as solver_config


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(solver_config, "log_dir", str(tmp_path / "logs"))
    return tmp_path / "logs"


def test_run_solvable(log_dir, capsys):
    config = PuzzleConfig(name="c", dims=(3, 4), board_str="1100010x10x0")
    solution = solver.run(config)
    assert solution == [(0, 0), (0, 1), (0, 3), (2, 0), (1, 1), (2, 3)]

    out = capsys.readouterr().out
    assert "Solution found (6 moves):" in out
    assert "OO.O\n.O.x\nO.xO" in out

    log = (log_dir / "c-3x4.log").read_text(encoding="utf-8")
    assert "Selected puzzle: c" in log
    assert "Nodes visited:" in log
    assert "(0, 0), (0, 1), (0, 3), (2, 0), (1, 1), (2, 3)" in log


def test_run_unsolvable(log_dir, capsys):
    config = PuzzleConfig(name="b", dims=(4, 4), board_str="1100010x00x010x1")
    assert solver.run(config) is None
    assert "No solution found." in capsys.readouterr().out
    assert "No solution found." in (log_dir / "b-4x4.log").read_text(encoding="utf-8")


def test_run_without_pruning(monkeypatch, capsys):
    monkeypatch.setattr(solver_config, "use_pruning", False)
    config = PuzzleConfig(name="a", dims=(4, 4), board_str="1100010x00x0x001")
    assert solver.run(config) == [(0, 0), (0, 2), (0, 3), (1, 0), (1, 1), (2, 1), (3, 1), (2, 3)]


def test_main_inline(log_dir, capsys):
    main(["--rows", "3", "--cols", "4", "--board", "1100 010x 10x0", "--name", "inline-c"])
    assert "Solution found (6 moves):" in capsys.readouterr().out
    assert (log_dir / "inline-c-3x4.log").is_file()


def test_main_files(tmp_path, log_dir, capsys):
    path = tmp_path / "puzzles.txt"
    path.write_text("4 4\n\n1100\n010x\n00x0\nx001\n\n1100\n010x\n00x0\n10x1\n", encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Solution found (8 moves):" in out
    assert "No solution found." in out
    assert (log_dir / "puzzles-1-4x4.log").is_file()
    assert (log_dir / "puzzles-2-4x4.log").is_file()


def test_main_bad_board(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--rows", "2", "--cols", "2", "--board", "01"])
    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1


@pytest.mark.parametrize("argv", [[], ["--rows", "3"], ["--rows", "3", "--cols", "4"]])
def test_main_usage_errors(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
