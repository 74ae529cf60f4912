"""Collision rules for the single-player game."""

from __future__ import annotations

from snakenet.field import GameField
from snakenet.snake import Point, Snake


class GameRules:
    """Decides what a new head position runs into."""

    def __init__(self, field: GameField, snake: Snake) -> None:
        self.field = field
        self.snake = snake

    def check_collision(self, head: Point) -> bool:
        """True when the head hits the snake itself or a wall."""
        return self.hits_self(head) or self.hits_wall(head)

    def hits_self(self, head: Point) -> bool:
        return head in self.snake.body

    def hits_wall(self, head: Point) -> bool:
        x, y = head
        size = self.field.size
        return not (0 <= x < size and 0 <= y < size)

    def hits_food(self, head: Point, food: Point) -> bool:
        return head == food