"""Shared enumerations, the wire packet and process-wide game state."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional

PAYLOAD_SIZE = 64
_PACKET_FORMAT = f"<i{PAYLOAD_SIZE}s"
PACKET_SIZE = struct.calcsize(_PACKET_FORMAT)


class ViewId(IntEnum):
    """Screens of the application."""

    NONE = 0
    INIT = 1
    SINGLE = 2
    LOCAL = 3
    INTERNET = 4
    HALL = 5
    GAME = 6
    RESULT = 7
    SETTING = 8


class ModuleId(IntEnum):
    """Game modes."""

    NONE = 0
    SINGLE = 1
    LOCAL = 2
    INTERNET = 3


class ChessId(IntEnum):
    """Identity of each of the 32 pieces."""

    CHARIOT_R_L = 0
    CHARIOT_R_R = 1
    KNIGHT_R_L = 2
    KNIGHT_R_R = 3
    ELEPHANT_R_L = 4
    ELEPHANT_R_R = 5
    GUARD_R_L = 6
    GUARD_R_R = 7
    GENERAL_R = 8
    CANNON_R_L = 9
    CANNON_R_R = 10
    PAWN_R_0 = 11
    PAWN_R_1 = 12
    PAWN_R_2 = 13
    PAWN_R_3 = 14
    PAWN_R_4 = 15
    CHARIOT_B_L = 16
    CHARIOT_B_R = 17
    KNIGHT_B_L = 18
    KNIGHT_B_R = 19
    ELEPHANT_B_L = 20
    ELEPHANT_B_R = 21
    GUARD_B_L = 22
    GUARD_B_R = 23
    GENERAL_B = 24
    CANNON_B_L = 25
    CANNON_B_R = 26
    PAWN_B_0 = 27
    PAWN_B_1 = 28
    PAWN_B_2 = 29
    PAWN_B_3 = 30
    PAWN_B_4 = 31


class ChessFlag(IntEnum):
    """Side a piece belongs to."""

    RED = 0
    BLACK = 1


class PlayerId(IntEnum):
    """Kind of player."""

    PEOPLE = 0
    AI = 1


class PlayerStatus(IntEnum):
    """Turn state of a player."""

    READY = 0
    WAIT = 1
    MOVE = 2
    FINISH = 3


class AiLevel(IntEnum):
    """Strength of the computer opponent."""

    EASY = 0
    NORMAL = 1
    MASTER = 2


class HomeStatus(IntEnum):
    """Occupancy of a game room."""

    NO_PEOPLE = 0
    ONE_PEOPLE = 1
    TWO_PEOPLE = 2


class DataId(IntEnum):
    """Message kinds on the wire."""

    NONE_MSG = 0
    HOME_MSG = 1


@dataclass(frozen=True)
class DataPacket:
    """A message: a 32-bit id followed by a 64-byte NUL-padded text field."""

    data_id: DataId
    payload: str = ""

    def encode(self) -> bytes:
        """Serialise the packet to its fixed-size wire form."""
        raw = self.payload.encode("utf-8")
        if len(raw) > PAYLOAD_SIZE:
            raise ValueError(
                f"payload is {len(raw)} bytes, at most {PAYLOAD_SIZE} allowed"
            )
        return struct.pack(_PACKET_FORMAT, int(self.data_id), raw)

    @classmethod
    def decode(cls, data: bytes) -> "DataPacket":
        """Parse a packet; the text ends at the first NUL byte."""
        if len(data) < 4:
            raise ValueError("packet too short to hold a message id")
        data_id = DataId(int.from_bytes(data[:4], "little", signed=True))
        raw = data[4 : 4 + PAYLOAD_SIZE].split(b"\0", 1)[0]
        return cls(data_id, raw.decode("utf-8", errors="replace"))


class GlobalData:
    """Process-wide state: current view, chosen mode and user name."""

    _shared: ClassVar[Optional["GlobalData"]] = None

    def __init__(self) -> None:
        self.reset()

    @classmethod
    def instance(cls) -> "GlobalData":
        """Return the shared instance, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def reset(self) -> None:
        """Restore every value to its default."""
        self._view_id: int = ViewId.NONE
        self._module_id: int = ModuleId.NONE
        self._user_name: Optional[str] = None

    @property
    def view_id(self) -> int:
        return self._view_id

    @view_id.setter
    def view_id(self, value: int) -> None:
        if value < 0:
            raise ValueError("view id must not be negative")
        self._view_id = value

    @property
    def module_id(self) -> int:
        return self._module_id

    @module_id.setter
    def module_id(self, value: int) -> None:
        if value < 0:
            raise ValueError("module id must not be negative")
        self._module_id = value

    @property
    def user_name(self) -> Optional[str]:
        return self._user_name

    @user_name.setter
    def user_name(self, value: str) -> None:
        if value is None:
            raise ValueError("user name must not be None")
        self._user_name = value