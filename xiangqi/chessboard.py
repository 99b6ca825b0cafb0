"""The board: its dimensions and the starting arrangement of the pieces."""

from __future__ import annotations

from typing import List, Tuple

from xiangqi.chesspiece import ChessPiece
from xiangqi.globaldata import ChessFlag, ChessId

BOARD_COLUMNS = 9
BOARD_ROWS = 10
PIECE_COUNT = 32

# (id template, column, row for the side at the bottom, weight), in id order.
_SIDE_LAYOUT: Tuple[Tuple[str, int, int, int], ...] = (
    ("CHARIOT_{s}_L", 1, 10, 8),
    ("CHARIOT_{s}_R", 9, 10, 8),
    ("KNIGHT_{s}_L", 2, 10, 4),
    ("KNIGHT_{s}_R", 8, 10, 4),
    ("ELEPHANT_{s}_L", 3, 10, 2),
    ("ELEPHANT_{s}_R", 7, 10, 2),
    ("GUARD_{s}_L", 4, 10, 1),
    ("GUARD_{s}_R", 6, 10, 1),
    ("GENERAL_{s}", 5, 10, 20),
    ("CANNON_{s}_L", 2, 8, 5),
    ("CANNON_{s}_R", 8, 8, 5),
    ("PAWN_{s}_0", 1, 7, 1),
    ("PAWN_{s}_1", 3, 7, 1),
    ("PAWN_{s}_2", 5, 7, 1),
    ("PAWN_{s}_3", 7, 7, 1),
    ("PAWN_{s}_4", 9, 7, 1),
)

_SIDE_LETTER = {ChessFlag.RED: "R", ChessFlag.BLACK: "B"}


def _side_pieces(flag: ChessFlag, at_bottom: bool) -> List[ChessPiece]:
    letter = _SIDE_LETTER[flag]
    pieces = []
    for template, column, row, weight in _SIDE_LAYOUT:
        if not at_bottom:
            row = BOARD_ROWS + 1 - row
        pieces.append(
            ChessPiece(
                flag=flag,
                chess_id=ChessId[template.format(s=letter)],
                position=(column, row),
                alive=True,
                weight=weight,
            )
        )
    return pieces


def starting_layout(flag: ChessFlag) -> List[ChessPiece]:
    """Return the 32 pieces in their opening places, with ``flag``'s side at the bottom.

    The bottom side's pieces come first, then the opponent's.
    """
    own = ChessFlag(flag)
    other = ChessFlag.BLACK if own is ChessFlag.RED else ChessFlag.RED
    return _side_pieces(own, at_bottom=True) + _side_pieces(other, at_bottom=False)


class ChessBoard:
    """A board with a background image, its dimensions and the pieces on it."""

    def __init__(self) -> None:
        self._url = ""
        self._chess_num = 0
        self._width = 0
        self._height = 0
        self._pieces: List[ChessPiece] = []

    def init_board(self) -> None:
        """Set the standard piece count and board dimensions."""
        self.chess_num = PIECE_COUNT
        self.width = BOARD_COLUMNS
        self.height = BOARD_ROWS

    def flush(self, flag: ChessFlag) -> Tuple[ChessPiece, ...]:
        """Replace the pieces with the opening layout and return them."""
        self._pieces = starting_layout(flag)
        return self.pieces

    @property
    def pieces(self) -> Tuple[ChessPiece, ...]:
        return tuple(self._pieces)

    @property
    def url(self) -> str:
        """Location of the board background image."""
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        if not value:
            raise ValueError("url must not be empty")
        self._url = value

    @property
    def chess_num(self) -> int:
        """Total number of pieces."""
        return self._chess_num

    @chess_num.setter
    def chess_num(self, value: int) -> None:
        self._chess_num = _non_negative("chess_num", value)

    @property
    def width(self) -> int:
        """Number of vertical lines."""
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = _non_negative("width", value)

    @property
    def height(self) -> int:
        """Number of horizontal lines."""
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = _non_negative("height", value)


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value