import pytest

from xiangqi.gameentity import GameEntity
from xiangqi.globaldata import ChessId, ModuleId


def test_new_entity_has_initialised_board():
    entity = GameEntity()
    assert (entity.board.width, entity.board.height) == (9, 10)
    assert entity.board.chess_num == 32
    assert entity.mode == ModuleId.NONE


def test_flush_game_sets_mode_and_pieces():
    entity = GameEntity()
    board = entity.flush_game("surface", ModuleId.SINGLE)
    assert board is entity.board
    assert entity.mode == ModuleId.SINGLE
    assert entity.view == "surface"
    assert len(board.pieces) == 32
    assert board.pieces[0].chess_id == ChessId.CHARIOT_R_L


def test_flush_game_accepts_plain_int_mode():
    entity = GameEntity()
    entity.flush_game(None, 3)
    assert entity.mode is ModuleId.INTERNET


def test_flush_game_rejects_unknown_mode():
    entity = GameEntity()
    with pytest.raises(ValueError):
        entity.flush_game(None, 99)