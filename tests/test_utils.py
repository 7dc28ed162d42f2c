from lightsout.board import Board
from lightsout.solver.utils import int_comma, replay, time_str, verify_solution


def test_time_str():
    assert time_str(0) == "00:00:00.00"
    assert time_str(3723.5) == "01:02:03.50"


def test_int_comma():
    assert int_comma(1234567) == "1,234,567"


def test_replay_leaves_input_alone():
    board = Board.from_encoding("000", 1, 3)
    assert replay(board, [(0, 0)]).to_encoding() == "111"
    assert board.to_encoding() == "000"


def test_verify_solution(board_c):
    assert verify_solution(board_c, [(0, 0), (0, 1), (0, 3), (2, 0), (1, 1), (2, 3)])
    # Order does not matter
    assert verify_solution(board_c, [(2, 3), (1, 1), (2, 0), (0, 3), (0, 1), (0, 0)])
    assert not verify_solution(board_c, [(0, 0)])
    # Repeated positions are rejected even though they cancel out
    assert not verify_solution(
        board_c, [(0, 0), (0, 1), (0, 3), (2, 0), (1, 1), (2, 3), (1, 2), (1, 2)]
    )
