"""One multiplayer round: snakes move, eat and drop out."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Mapping, Optional

from snakenet.field import CellContent, GameField
from snakenet.server_rules import MultiplayerRules
from snakenet.server_snake import PlayerSnake
from snakenet.snake import Point

if TYPE_CHECKING:
    from snakenet.session import Session


class MultiplayerGame:
    """Advances every snake of a session once per ``update``."""

    def __init__(self, session: "Session", rng: Optional[random.Random] = None) -> None:
        self.session = session
        self.rng = rng if rng is not None else random.Random()
        self.field: Optional[GameField] = None
        self.rules: Optional[MultiplayerRules] = None
        self.foods: List[Point] = []
        self.started = False

    def start(self, field: GameField, snakes: Mapping[str, PlayerSnake]) -> None:
        """Set up the rules for these snakes and put out the first fruit."""
        self.field = field
        self.rules = MultiplayerRules(field, snakes)
        self.foods = []
        self.started = True
        self.spawn_food()

    def update(self) -> None:
        """Move every player; drop those that collide and stop when none are left."""
        if self.rules is None:
            raise RuntimeError("game has not been started")
        for name in self.session.players:
            snake = self.session.snake(name)
            head = snake.next_head()
            if self.rules.check_collision(name, head):
                self.session.remove_player(name)
                continue
            for food in self.foods:
                if self.rules.hits_food(head, food):
                    self.foods.remove(food)
                    snake.grow()
                    self.spawn_food()
                    break
            snake.move()
        if not self.session.players:
            self.started = False
            self.session.stop_game()

    def spawn_food(self) -> Optional[Point]:
        """Put a fruit on a random empty cell; return it, or None if none is free."""
        if self.field is None:
            raise RuntimeError("game has not been started")
        free = [(cell.x, cell.y) for cell in self.field if cell.is_empty]
        if not free:
            return None
        position = self.rng.choice(free)
        self.field.cell(*position).content = CellContent.FRUIT
        self.foods.append(position)
        return position