"""A single piece and the geometric move rules for each piece kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from xiangqi.globaldata import ChessFlag, ChessId

Position = Tuple[int, int]

_COLUMNS = range(1, 10)
_ROWS = range(1, 11)


def _on_board(pos: Position) -> bool:
    x, y = pos
    return x in _COLUMNS and y in _ROWS


def _kind(chess_id: ChessId) -> str:
    return ChessId(chess_id).name.split("_", 1)[0]


def check_available(source: Position, target: Position, chess_id: ChessId) -> bool:
    """Return whether moving piece ``chess_id`` from source to target fits its rule."""
    if not (_on_board(source) and _on_board(target)):
        return False
    (sx, sy), (tx, ty) = source, target
    dx, dy = sx - tx, sy - ty
    kind = _kind(chess_id)
    if kind in ("CHARIOT", "CANNON"):
        return sx == tx or sy == ty
    if kind == "KNIGHT":
        return dx * dx + dy * dy == 5
    if kind == "ELEPHANT":
        return dx * dx + dy * dy == 8
    # guards, generals and pawns
    return dx == 1 and dy == 1


@dataclass
class ChessPiece:
    """A piece on the board with its side, identity, place, liveness and value."""

    flag: ChessFlag
    chess_id: ChessId
    position: Position = (0, 0)
    alive: bool = True
    weight: int = 0

    def __post_init__(self) -> None:
        self.flag = ChessFlag(self.flag)
        self.chess_id = ChessId(self.chess_id)
        x, y = self.position
        if x < 0 or y < 0:
            raise ValueError("position coordinates must not be negative")
        self.position = (x, y)
        if self.weight < 0:
            raise ValueError("weight must not be negative")

    def check_available(self, source: Position, target: Position) -> bool:
        """Return whether this piece may move from source to target."""
        return check_available(source, target, self.chess_id)