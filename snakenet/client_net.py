"""The client side of the multiplayer protocol over UDP."""

from __future__ import annotations

import logging
import socket
from typing import Callable, Dict, Optional, Tuple

log = logging.getLogger(__name__)

Address = Tuple[str, int]
ResponseHandler = Callable[[str], None]

MAX_DATAGRAM = 65535


class ResponseRouter:
    """Sends each server message to the handler for its first word.

    The handler receives the rest of the message, trimmed.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, ResponseHandler] = {}

    def register(self, kind: str, handler: ResponseHandler) -> None:
        self._handlers[kind] = handler

    def route(self, data: bytes) -> bool:
        """Dispatch ``data``; return False when its type has no handler."""
        message = data.decode("utf-8", errors="replace").strip()
        kind, _, payload = message.partition(" ")
        kind = kind.strip()
        handler = self._handlers.get(kind)
        if handler is None:
            log.debug("unknown request type: %r", kind)
            return False
        handler(payload.strip())
        return True


class ClientNetworkManager:
    """Talks to the game server and reports its answers through callbacks."""

    def __init__(
        self,
        on_registered: Optional[Callable[[], None]] = None,
        on_room_created: Optional[Callable[[], None]] = None,
    ) -> None:
        self.on_registered = on_registered
        self.on_room_created = on_room_created
        self.server_address: Optional[Address] = None
        self.username: Optional[str] = None
        self._socket: Optional[socket.socket] = None
        self.router = ResponseRouter()
        self.router.register("REGISTER_SUCCESS", self._registered)
        self.router.register("ROOM_CREATED", self._room_created)

    @property
    def local_address(self) -> Optional[Address]:
        """The address the client socket is bound to, or None when closed."""
        if self._socket is None:
            return None
        return self._socket.getsockname()[:2]

    def connect(self, host: str, port: int, username: str) -> bool:
        """Bind a fresh socket and ask the server to register ``username``.

        Returns False when the socket cannot be bound.
        """
        self.server_address = (host, port)
        self.username = username
        self.close()
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind(("", 0))
        except OSError as exc:
            log.warning("failed to bind udp socket: %s", exc)
            sock.close()
            return False
        sock.setblocking(False)
        self._socket = sock
        sock.sendto(f"REGISTER_PLAYER: {username}".encode("utf-8"), self.server_address)
        return True

    def send(self, message: bytes) -> None:
        """Send ``message`` to the server; raises RuntimeError before ``connect``."""
        if self._socket is None or self.server_address is None or self.server_address[1] == 0:
            raise RuntimeError("server address or port is not set")
        self._socket.sendto(message, self.server_address)
        log.debug("message sent to server: %r", message)

    def poll(self) -> int:
        """Handle every datagram waiting on the socket; return how many there were."""
        if self._socket is None:
            return 0
        handled = 0
        while True:
            try:
                data, sender = self._socket.recvfrom(MAX_DATAGRAM)
            except (BlockingIOError, InterruptedError):
                break
            log.debug("message received from %s", sender)
            self.handle_message(data)
            handled += 1
        return handled

    def handle_message(self, data: bytes) -> bool:
        """Route one server message; return whether a handler took it."""
        return self.router.route(data)

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> "ClientNetworkManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _registered(self, payload: str) -> None:
        if self.on_registered is not None:
            self.on_registered()

    def _room_created(self, payload: str) -> None:
        log.debug("room created")
        if self.on_room_created is not None:
            self.on_room_created()