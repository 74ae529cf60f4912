"""The UDP game server: player registry, request routing and the serving loop."""

from __future__ import annotations

import argparse
import logging
import re
import select
import socket
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from snakenet.session import TICK_INTERVAL, Session, SessionManager

log = logging.getLogger(__name__)

Address = Tuple[str, int]
Handler = Callable[[str, Address], None]
Transport = Callable[[bytes, Address], object]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 12345
MAX_DATAGRAM = 65535

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Player:
    """Where a registered player receives datagrams."""

    host: str
    port: int

    @property
    def address(self) -> Address:
        return (self.host, self.port)


class RequestRouter:
    """Sends each request to the handler registered for its type.

    The type is the text before the first ``:``; the handler receives the
    whole message together with the sender's address.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, Handler] = {}

    def register(self, kind: str, handler: Handler) -> None:
        self._handlers[kind] = handler

    def route(self, data: bytes, sender: Address) -> bool:
        """Dispatch ``data``; return False when no handler knows its type."""
        message = data.decode("utf-8", errors="replace")
        kind = message.split(":", 1)[0].strip()
        handler = self._handlers.get(kind)
        if handler is None:
            log.debug("unknown request type: %r", kind)
            return False
        handler(message, sender)
        return True


def _parse_int(text: str, what: str) -> int:
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise ValueError(f"invalid {what} value: {text!r}")
    return int(stripped)


class SnakeServer:
    """Protocol logic of the server; datagrams go out through ``send``."""

    def __init__(self, send: Transport) -> None:
        self._send = send
        self._players: Dict[str, Player] = {}
        self.sessions = SessionManager(self._broadcast_state)
        self.router = RequestRouter()
        self.router.register("INVITE_PLAYER", self.handle_invite)
        self.router.register("CREATE_SESSION", self.handle_create_session)
        self.router.register("REGISTER_PLAYER", self.handle_register)

    @property
    def players(self) -> Dict[str, Player]:
        return dict(self._players)

    def send_to_player(self, name: str, message: bytes) -> bool:
        """Send ``message`` to a registered player; False if ``name`` is unknown."""
        player = self._players.get(name)
        if player is None:
            log.debug("player not found: %s", name)
            return False
        self._send(message, player.address)
        log.debug("message sent to %s: %r", name, message)
        return True

    def add_player(self, name: str, address: Address) -> bool:
        """Register ``name`` at ``address``; False if the name is taken."""
        if name in self._players:
            log.debug("player already exists: %s", name)
            return False
        host, port = address[0], address[1]
        self._players[name] = Player(host, port)
        log.debug("player added: %s at %s:%d", name, host, port)
        return True

    def remove_player(self, name: str) -> bool:
        """Forget ``name``; False if it was not registered."""
        if self._players.pop(name, None) is None:
            log.debug("player not found: %s", name)
            return False
        log.debug("player removed: %s", name)
        return True

    def handle_datagram(self, data: bytes, sender: Address) -> bool:
        """Process one incoming datagram; return whether it was handled."""
        try:
            return self.router.route(data, sender)
        except (ValueError, LookupError) as exc:
            log.warning("rejected request from %s: %s", sender, exc)
            return False

    def handle_create_session(self, data: str, sender: Address) -> None:
        """``CREATE_SESSION:<leader>:<player count>:<field size>``."""
        cleaned = data.strip()
        if not cleaned.startswith("CREATE_SESSION:"):
            raise ValueError(f"invalid command type for CREATE_SESSION: {cleaned!r}")
        parts = cleaned.split(":")
        if len(parts) < 4:
            raise ValueError(f"invalid CREATE_SESSION format: {data!r}")
        leader = parts[1]
        player_limit = _parse_int(parts[2], "countOfPlayers")
        field_size = _parse_int(parts[3], "fieldSize")
        self.sessions.create_session(leader, player_limit, field_size)
        self.send_to_player(leader, b"ROOM_CREATED")

    def handle_invite(self, data: str, sender: Address) -> None:
        """``INVITE_PLAYER <inviter> <invitee>``, words separated by single spaces."""
        parts = data.split(" ")
        if len(parts) < 3:
            raise ValueError("invalid INVITE_PLAYER command format")
        inviter, invitee = parts[1], parts[2]
        if invitee not in self._players:
            raise LookupError(f"invitee not found: {invitee}")
        self.send_to_player(invitee, f"INVITE from {inviter}".encode("utf-8"))
        self.send_to_player(inviter, b"SUCCESS Invitation sent")

    def handle_register(self, data: str, sender: Address) -> None:
        """``REGISTER_PLAYER: <name>``; registers the sender under that name."""
        parts = data.split(" ")
        if len(parts) < 2:
            raise ValueError("invalid REGISTER_PLAYER command format")
        name = parts[1]
        if name in self._players:
            self.send_to_player(name, b"ERROR Player already registered")
            return
        self.add_player(name, sender)
        self.send_to_player(name, b"REGISTER_SUCCESS")

    def _broadcast_state(self, session: Session, state: bytes) -> None:
        for name in session.players:
            self.send_to_player(name, state)


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve on a UDP socket until interrupted, ticking sessions as they run."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        server = SnakeServer(lambda message, address: sock.sendto(message, address))
        log.info("serving on %s:%d", host, port)
        next_tick = time.monotonic() + TICK_INTERVAL
        while True:
            timeout = max(0.0, next_tick - time.monotonic())
            ready, _, _ = select.select([sock], [], [], timeout)
            if ready:
                try:
                    data, sender = sock.recvfrom(MAX_DATAGRAM)
                except OSError as exc:
                    log.warning("receive failed: %s", exc)
                else:
                    log.debug("received %r from %s", data, sender)
                    server.handle_datagram(data, sender)
            now = time.monotonic()
            if now >= next_tick:
                server.sessions.tick_all()
                next_tick = now + TICK_INTERVAL


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="snakenet-server", description="Run the snake game server.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="UDP port to bind")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every request")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        pass
    return 0


__all__: List[str] = ["Player", "RequestRouter", "SnakeServer", "serve", "main"]