"""A running game: the board and the mode it is played in."""

from __future__ import annotations

from typing import Any, Optional

from xiangqi.chessboard import ChessBoard
from xiangqi.globaldata import ChessFlag, ModuleId


class GameEntity:
    """Owns the board and restarts it when a game begins."""

    def __init__(self) -> None:
        self.board = ChessBoard()
        self.board.init_board()
        self.mode = ModuleId.NONE
        self.view: Optional[Any] = None

    def flush_game(self, view: Any, mode: int) -> ChessBoard:
        """Start a game in ``mode`` on ``view`` and return the reset board."""
        self.mode = ModuleId(mode)
        self.view = view
        self.board.flush(ChessFlag.RED)
        return self.board