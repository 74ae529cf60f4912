"""Collision rules for a game with several snakes on one field."""

from __future__ import annotations

from typing import Dict, Mapping

from snakenet.field import GameField
from snakenet.server_snake import PlayerSnake
from snakenet.snake import Point


class MultiplayerRules:
    """Decides what a player's new head runs into.

    The rules keep their own copy of the player-to-snake mapping taken
    when they are created.
    """

    def __init__(self, field: GameField, snakes: Mapping[str, PlayerSnake]) -> None:
        self.field = field
        self.snakes: Dict[str, PlayerSnake] = dict(snakes)

    def check_collision(self, player: str, head: Point) -> bool:
        """True when the head hits its own snake, a wall or another snake."""
        return (
            self.hits_self(player, head)
            or self.hits_wall(head)
            or self.hits_other(player, head)
        )

    def hits_self(self, player: str, head: Point) -> bool:
        """Raises KeyError for a player the rules do not know."""
        return head in self.snakes[player].body

    def hits_wall(self, head: Point) -> bool:
        x, y = head
        size = self.field.size
        return not (0 <= x < size and 0 <= y < size)

    def hits_food(self, head: Point, food: Point) -> bool:
        return head == food

    def hits_other(self, player: str, head: Point) -> bool:
        return any(
            head in snake.body
            for name, snake in self.snakes.items()
            if name != player
        )