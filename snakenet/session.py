"""Game sessions on the server and the registry that keeps them."""

from __future__ import annotations

import json
from typing import Callable, Dict, List, Optional

from snakenet.field import GameField
from snakenet.server_game import MultiplayerGame
from snakenet.server_snake import PlayerSnake
from snakenet.snake import Point

TICK_INTERVAL = 0.5
"""Seconds between two ticks of a running session."""

StateListener = Callable[["Session", bytes], None]


class Session:
    """A room of up to ``player_limit`` snakes sharing one field.

    The game starts by itself once the room is full.
    """

    def __init__(self, player_limit: int = 2, field_size: int = 16) -> None:
        self.player_limit = player_limit
        self.field = GameField(field_size)
        self.game = MultiplayerGame(self)
        self.running = False
        self.listeners: List[Callable[[Session], None]] = []
        self._snakes: Dict[str, PlayerSnake] = {}

    @property
    def players(self) -> List[str]:
        return list(self._snakes)

    @property
    def snakes(self) -> Dict[str, PlayerSnake]:
        return dict(self._snakes)

    def start_game(self) -> bool:
        """Start the game if the room is full; return whether it started."""
        if len(self._snakes) != self.player_limit:
            return False
        self.game.start(self.field, self._snakes)
        self.running = True
        return True

    def stop_game(self) -> None:
        self.running = False

    def add_player(self, name: str) -> None:
        """Give ``name`` a snake on the first free cell while there is room."""
        if len(self._snakes) < self.player_limit:
            snake = PlayerSnake(self.field)
            snake.spawn(self.spawn_position())
            self._snakes[name] = snake
        self.start_game()

    def remove_player(self, name: str) -> None:
        self._snakes.pop(name, None)

    def has_player(self, name: str) -> bool:
        return name in self._snakes

    def snake(self, name: str) -> PlayerSnake:
        """Raises KeyError for a player not in the session."""
        return self._snakes[name]

    def spawn_position(self) -> Point:
        """The first free cell scanning row by row, or (0, 0) if there is none."""
        size = self.field.size
        for y in range(size):
            for x in range(size):
                if self.is_position_free((x, y)):
                    return (x, y)
        return (0, 0)

    def is_position_free(self, position: Point) -> bool:
        if any(snake.body and snake.head == position for snake in self._snakes.values()):
            return False
        cell = self.field.cell(*position)
        return cell is not None and cell.is_empty

    def serialize_state(self) -> bytes:
        """The snakes' bodies as indented JSON: ``{"snakes": {name: [{x, y}...]}}``."""
        state = {
            "snakes": {
                name: [{"x": x, "y": y} for x, y in snake.body]
                for name, snake in self._snakes.items()
            }
        }
        text = json.dumps(state, indent=4, sort_keys=True, ensure_ascii=False)
        return (text + "\n").encode("utf-8")

    def tick(self) -> None:
        """Advance the game one step and tell the listeners."""
        self.game.update()
        for listener in list(self.listeners):
            listener(self)


class SessionManager:
    """Keeps the sessions by leader name and passes their state on each tick."""

    def __init__(self, on_state: Optional[StateListener] = None) -> None:
        self.on_state = on_state
        self.sessions: Dict[str, Session] = {}

    def create_session(self, leader: str, player_limit: int, field_size: int) -> Session:
        session = Session(player_limit, field_size)
        self.sessions[leader] = session
        session.add_player(leader)
        session.listeners.append(self._publish)
        return session

    def _publish(self, session: Session) -> None:
        if self.on_state is not None:
            self.on_state(session, session.serialize_state())

    def add_player_to_session(self, leader: str, player: str) -> None:
        """Raises KeyError when ``leader`` leads no session."""
        self.sessions[leader].add_player(player)

    def session_for(self, name: str) -> Optional[Session]:
        return next(
            (session for session in self.sessions.values() if session.has_player(name)),
            None,
        )

    def tick_all(self) -> List[Session]:
        """Tick every running session; return those that were ticked."""
        ticked = [session for session in self.sessions.values() if session.running]
        for session in ticked:
            session.tick()
        return ticked