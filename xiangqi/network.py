"""Room-occupancy updates received over TCP (internet) and UDP broadcast (LAN)."""

from __future__ import annotations

import logging
import socket
import threading
from typing import Iterator, List, Optional, Tuple

from xiangqi.globaldata import PACKET_SIZE, DataId, DataPacket, HomeStatus

ROOM_COUNT = 100
INTERNET_HOST = "127.0.0.1"
INTERNET_PORT = 60000
LOCAL_PORT = 60030
BROADCAST_ADDRESS = "255.255.255.255"

_MAX_DATAGRAM = 65535

log = logging.getLogger(__name__)


def parse_home_payload(text: str) -> Tuple[int, int]:
    """Split a ``"room:status"`` payload into its two integers."""
    parts = text.split(":")
    if len(parts) < 2:
        raise ValueError(f"room payload {text!r} has no ':' separator")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"room payload {text!r} is not two integers") from exc


class HomeTable:
    """Occupancy of every game room, all empty at first."""

    def __init__(self, size: int = ROOM_COUNT) -> None:
        if size < 0:
            raise ValueError("room count must not be negative")
        self._rooms: List[HomeStatus] = [HomeStatus.NO_PEOPLE] * size
        self._lock = threading.Lock()

    def apply(self, packet: DataPacket) -> bool:
        """Apply a room message; return whether a room was updated.

        Messages of other kinds and unknown status values are ignored.
        """
        if packet.data_id != DataId.HOME_MSG:
            return False
        room, value = parse_home_payload(packet.payload)
        if not 0 <= room < len(self._rooms):
            raise IndexError(f"room {room} out of range 0..{len(self._rooms) - 1}")
        try:
            status = HomeStatus(value)
        except ValueError:
            return False
        with self._lock:
            self._rooms[room] = status
        return True

    def __getitem__(self, index: int) -> HomeStatus:
        with self._lock:
            return self._rooms[index]

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[HomeStatus]:
        with self._lock:
            return iter(list(self._rooms))


class _Worker:
    """Shared start/stop handling for the background receivers."""

    def __init__(self, timeout: float) -> None:
        self.homes = HomeTable()
        self._timeout = timeout
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _launch(self, target, name: str) -> None:
        if self.running:
            raise RuntimeError(f"{type(self).__name__} is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(target=target, name=name, daemon=True)
        self._thread.start()

    def _halt(self) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(self._timeout * 4 + 1.0)
            self._thread = None

    def _handle_safely(self, data: bytes) -> None:
        try:
            self._dispatch(data)
        except (ValueError, IndexError) as exc:
            log.warning("discarding bad message: %s", exc)

    def _dispatch(self, data: bytes) -> None:
        raise NotImplementedError

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()


class ChessInternet(_Worker):
    """Client of the game server; keeps the room table up to date."""

    def __init__(
        self,
        host: str = INTERNET_HOST,
        port: int = INTERNET_PORT,
        *,
        timeout: float = 0.5,
    ) -> None:
        super().__init__(timeout)
        self.host = host
        self.port = port
        self.error: Optional[OSError] = None

    def start(self) -> None:
        """Connect and receive in the background; a failure is kept in ``error``."""
        self.error = None
        self._launch(self._run, "chess-internet")

    def stop(self) -> None:
        """Close the connection and wait for the receiver to finish."""
        self._halt()

    def handle_data(self, data: bytes) -> bool:
        """Process one received packet; return whether a room was updated."""
        return self.homes.apply(DataPacket.decode(data))

    def _dispatch(self, data: bytes) -> None:
        self.handle_data(data)

    def _run(self) -> None:
        try:
            with socket.create_connection(
                (self.host, self.port), timeout=self._timeout
            ) as sock:
                sock.settimeout(self._timeout)
                buffer = b""
                while not self._stop_event.is_set():
                    try:
                        chunk = sock.recv(4096)
                    except socket.timeout:
                        continue
                    if not chunk:
                        break
                    buffer += chunk
                    while len(buffer) >= PACKET_SIZE:
                        packet, buffer = buffer[:PACKET_SIZE], buffer[PACKET_SIZE:]
                        self._handle_safely(packet)
        except OSError as exc:
            self.error = exc
            log.info("server connection failed: %s", exc)


class ChessLocal(_Worker):
    """LAN peer: listens for room broadcasts and can broadcast its own."""

    def __init__(
        self,
        port: int = LOCAL_PORT,
        *,
        bind_host: str = "",
        broadcast_address: str = BROADCAST_ADDRESS,
        timeout: float = 0.5,
    ) -> None:
        super().__init__(timeout)
        self.port = port
        self.bind_host = bind_host
        self.broadcast_address = broadcast_address
        self._receiver: Optional[socket.socket] = None
        self._sender: Optional[socket.socket] = None

    @property
    def address(self) -> Optional[Tuple[str, int]]:
        """Address the listener is bound to, or None when not running."""
        if self._receiver is None:
            return None
        return self._receiver.getsockname()

    def start(self) -> None:
        """Bind the shared listening port and receive in the background."""
        if self.running:
            raise RuntimeError("ChessLocal is already running")
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.bind_host, self.port))
            sock.settimeout(self._timeout)
        except OSError:
            sock.close()
            raise
        self._receiver = sock
        self._launch(self._run, "chess-local")

    def stop(self) -> None:
        """Stop listening and close both sockets."""
        self._halt()
        for sock in (self._receiver, self._sender):
            if sock is not None:
                sock.close()
        self._receiver = None
        self._sender = None

    def handle_datagram(self, data: bytes) -> bool:
        """Process one datagram; return whether a room was updated."""
        return self.homes.apply(DataPacket.decode(data))

    def send_broadcast(self, data: bytes) -> int:
        """Broadcast ``data`` to the LAN port; return the number of bytes sent."""
        if self._sender is None:
            sender = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            sender.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            self._sender = sender
        return self._sender.sendto(bytes(data), (self.broadcast_address, self.port))

    def _dispatch(self, data: bytes) -> None:
        self.handle_datagram(data)

    def _run(self) -> None:
        sock = self._receiver
        while sock is not None and not self._stop_event.is_set():
            try:
                data, _ = sock.recvfrom(_MAX_DATAGRAM)
            except socket.timeout:
                continue
            except OSError:
                break
            self._handle_safely(data)