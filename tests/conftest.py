import pytest

from lightsout.board import Board

SCENARIO_A = "1100010x00x0x001"
SCENARIO_B = "1100010x00x010x1"
SCENARIO_C = "1100010x10x0"


@pytest.fixture
def board_a() -> Board:
    return Board.from_encoding(SCENARIO_A, 4, 4)


@pytest.fixture
def board_b() -> Board:
    return Board.from_encoding(SCENARIO_B, 4, 4)


@pytest.fixture
def board_c() -> Board:
    return Board.from_encoding(SCENARIO_C, 3, 4)
