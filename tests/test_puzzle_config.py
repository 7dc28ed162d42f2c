import pytest

from lightsout.board import EncodingError
from lightsout.puzzle_config import PuzzleConfig, clean, load_configs


def test_clean():
    assert clean(" 1 1 0\n0 x 1\n") == "1100x1"


def test_load_configs(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("3 4\n\n1 1 0 0\n0 1 0 x\n1 0 x 0\n\n1111\n1111\n1111\n", encoding="utf-8")

    configs = load_configs(path)
    assert [c.name for c in configs] == ["samples-1", "samples-2"]
    assert configs[0].dims == (3, 4)
    assert configs[0].board_str == "1100010x10x0"
    assert configs[1].to_board().is_complete()


def test_load_configs_bad_dimensions(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("3 four\n\n000\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid dimensions line"):
        load_configs(path)


def test_load_configs_missing_blank_line(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 3\n000\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_configs(path)


def test_load_configs_wrong_board_size(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("2 2\n\n01\n1\n", encoding="utf-8")
    with pytest.raises(EncodingError):
        load_configs(path)


@pytest.mark.parametrize(
    "dims, board_str",
    [
        ((2, 2), "010"),
        ((2, 2), "01a0"),
        ((0, 2), ""),
    ],
)
def test_puzzle_config_validation(dims, board_str):
    with pytest.raises(EncodingError):
        PuzzleConfig(name="bad", dims=dims, board_str=board_str)


def test_dict_round_trip():
    config = PuzzleConfig(name="c", dims=(3, 4), board_str="1100010x10x0")
    assert PuzzleConfig.from_dict(config.to_dict()) == config


def test_str():
    config = PuzzleConfig(name="c", dims=(1, 2), board_str="1x")
    assert str(config) == "c (1x2):\n1x"
