import pytest

from xiangqi.app import WINDOW_SIZE, Navigator
from xiangqi.gameentity import GameEntity
from xiangqi.globaldata import AiLevel, ChessFlag, GlobalData, ModuleId, ViewId


@pytest.fixture
def state():
    return GlobalData()


@pytest.fixture
def nav(state):
    return Navigator(game=GameEntity(), state=state, screen_size=(1920, 1080))


def test_starts_on_init_view(nav, state):
    assert nav.view is ViewId.INIT
    assert state.view_id == ViewId.INIT
    assert nav.mode is ModuleId.NONE
    assert nav.ai_level is AiLevel.EASY


def test_show_switches_view_and_records_it(nav, state):
    assert nav.show(ViewId.SETTING) is ViewId.SETTING
    assert nav.view is ViewId.SETTING
    assert state.view_id == ViewId.SETTING


def test_show_rejects_unknown_view(nav):
    with pytest.raises(ValueError):
        nav.show(99)


def test_back_to_init(nav, state):
    nav.show(ViewId.LOCAL)
    assert nav.back_to_init() is ViewId.INIT
    assert state.view_id == ViewId.INIT


@pytest.mark.parametrize(
    "mode", [ModuleId.SINGLE, ModuleId.LOCAL, ModuleId.INTERNET]
)
def test_start_game_enters_game_view_with_fresh_board(nav, state, mode):
    board = nav.start_game(mode)
    assert nav.view is ViewId.GAME
    assert nav.mode is mode
    assert state.module_id == mode
    assert nav.game.mode is mode
    assert len(board.pieces) == board.chess_num
    assert board.pieces[0].flag is ChessFlag.RED


def test_start_game_needs_a_mode(nav):
    with pytest.raises(ValueError):
        nav.start_game(ModuleId.NONE)
    assert nav.view is ViewId.INIT


def test_toggle_show_mode_round_trip(nav):
    assert nav.window_size == WINDOW_SIZE
    assert nav.toggle_show_mode() == (1920, 1080)
    assert nav.fullscreen is True
    assert nav.toggle_show_mode() == WINDOW_SIZE
    assert nav.fullscreen is False


def test_default_window_is_800_by_600(state):
    assert Navigator(game=GameEntity(), state=state).window_size == (800, 600)


def test_select_ai_level(nav):
    assert nav.select_ai_level(AiLevel.MASTER) is AiLevel.MASTER
    assert nav.ai_level is AiLevel.MASTER


def test_cancelled_level_choice_keeps_current(nav):
    nav.select_ai_level(AiLevel.NORMAL)
    assert nav.select_ai_level(None) is AiLevel.NORMAL


def test_select_ai_level_rejects_unknown(nav):
    with pytest.raises(ValueError):
        nav.select_ai_level(7)
    assert nav.ai_level is AiLevel.EASY