import pytest

from xiangqi.chesspiece import ChessPiece, check_available
from xiangqi.globaldata import ChessFlag, ChessId


def test_chariot_straight_lines():
    assert check_available((1, 10), (1, 5), ChessId.CHARIOT_R_L)
    assert check_available((1, 10), (6, 10), ChessId.CHARIOT_B_R)


def test_chariot_diagonal_rejected():
    assert not check_available((1, 10), (2, 9), ChessId.CHARIOT_R_L)


def test_cannon_follows_line_rule():
    assert check_available((2, 8), (2, 3), ChessId.CANNON_R_L)
    assert not check_available((2, 8), (3, 3), ChessId.CANNON_B_R)


def test_knight_l_shape():
    assert check_available((2, 10), (3, 8), ChessId.KNIGHT_R_L)
    assert check_available((2, 10), (4, 9), ChessId.KNIGHT_B_L)
    assert not check_available((2, 10), (2, 8), ChessId.KNIGHT_R_R)


def test_elephant_two_diagonal():
    assert check_available((3, 10), (5, 8), ChessId.ELEPHANT_R_L)
    assert not check_available((3, 10), (4, 9), ChessId.ELEPHANT_R_R)


def test_single_step_pieces():
    for chess_id in (ChessId.GUARD_R_L, ChessId.GENERAL_B, ChessId.PAWN_R_2):
        assert check_available((5, 9), (4, 8), chess_id)
        assert not check_available((5, 9), (5, 8), chess_id)


def test_off_board_rejected():
    assert not check_available((0, 5), (1, 5), ChessId.CHARIOT_R_L)
    assert not check_available((1, 5), (1, 11), ChessId.CHARIOT_R_L)
    assert not check_available((10, 5), (9, 5), ChessId.CHARIOT_R_L)


def test_piece_method_matches_function():
    piece = ChessPiece(ChessFlag.RED, ChessId.KNIGHT_R_L, (2, 10), True, 4)
    for target in [(3, 8), (1, 8), (2, 9), (4, 9)]:
        assert piece.check_available((2, 10), target) == check_available(
            (2, 10), target, ChessId.KNIGHT_R_L
        )


def test_piece_fields():
    piece = ChessPiece(ChessFlag.BLACK, ChessId.GENERAL_B, (5, 1), True, 20)
    assert piece.flag == ChessFlag.BLACK
    assert piece.chess_id == ChessId.GENERAL_B
    assert piece.position == (5, 1)
    assert piece.alive
    assert piece.weight == 20


def test_piece_coerces_ints_to_enums():
    piece = ChessPiece(1, 24)
    assert piece.flag is ChessFlag.BLACK
    assert piece.chess_id is ChessId.GENERAL_B


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        ChessPiece(ChessFlag.RED, ChessId.PAWN_R_0, (1, 7), True, -1)


def test_negative_position_rejected():
    with pytest.raises(ValueError):
        ChessPiece(ChessFlag.RED, ChessId.PAWN_R_0, (-1, 7))


def test_unknown_id_rejected():
    with pytest.raises(ValueError):
        ChessPiece(ChessFlag.RED, 99)