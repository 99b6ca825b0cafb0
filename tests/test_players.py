import pytest

from xiangqi.globaldata import PlayerId, PlayerStatus
from xiangqi.players import AIPlayer, PeoplePlayer, Player


def test_ai_player_defaults():
    player = AIPlayer()
    assert player.status == PlayerStatus.READY
    assert player.player_id == PlayerId.AI


def test_people_player_defaults():
    player = PeoplePlayer()
    assert player.status == PlayerStatus.READY
    assert player.player_id == PlayerId.PEOPLE


def test_status_changes():
    player = AIPlayer()
    player.status = PlayerStatus.MOVE
    assert player.status == PlayerStatus.MOVE
    player.status = PlayerStatus.FINISH
    assert player.status == PlayerStatus.FINISH


def test_player_id_changes():
    player = PeoplePlayer()
    player.player_id = PlayerId.AI
    assert player.player_id == PlayerId.AI


def test_base_cannot_be_created():
    with pytest.raises(TypeError):
        Player(PlayerStatus.READY, PlayerId.AI)


def test_ints_coerced_to_enums():
    player = AIPlayer(status=1)
    assert player.status is PlayerStatus.WAIT


def test_invalid_status_rejected():
    with pytest.raises(ValueError):
        PeoplePlayer(status=42)


def test_subclasses_are_players():
    players = [AIPlayer(), PeoplePlayer()]
    assert all(isinstance(p, Player) for p in players)
    assert [p.player_id for p in players] == [PlayerId.AI, PlayerId.PEOPLE]