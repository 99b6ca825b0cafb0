"""Players taking part in a game."""

from __future__ import annotations

from dataclasses import dataclass

from xiangqi.globaldata import PlayerId, PlayerStatus


@dataclass
class Player:
    """Base for all players; holds the turn status and the player kind."""

    status: PlayerStatus
    player_id: PlayerId

    def __post_init__(self) -> None:
        if type(self) is Player:
            raise TypeError("Player is abstract; use AIPlayer or PeoplePlayer")
        self.status = PlayerStatus(self.status)
        self.player_id = PlayerId(self.player_id)


@dataclass
class AIPlayer(Player):
    """A computer-controlled player."""

    status: PlayerStatus = PlayerStatus.READY
    player_id: PlayerId = PlayerId.AI


@dataclass
class PeoplePlayer(Player):
    """A human player."""

    status: PlayerStatus = PlayerStatus.READY
    player_id: PlayerId = PlayerId.PEOPLE