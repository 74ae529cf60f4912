"""Single-player game loop: one snake, one fruit."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from snakenet.field import CellContent, GameField
from snakenet.rules import GameRules
from snakenet.snake import Point, Snake

TICK_INTERVAL = 0.1
"""Seconds between two ticks of a running game."""


class GameResult(Enum):
    """How a game ended, valued by the message shown to the player."""

    WON = "You won!"
    LOST = "You lost!"


class Game:
    """Drives a snake over a field; call ``tick`` every ``TICK_INTERVAL``."""

    def __init__(self, field: GameField, rng: Optional[random.Random] = None) -> None:
        self.field = field
        self._rng = rng if rng is not None else random.Random()
        self.snake = Snake(field)
        self.rules = GameRules(field, self.snake)
        self.food: Optional[Point] = None
        self.started = False
        self.over = False
        self.spawn_food()

    def start(self) -> bool:
        """Start the game; return False if it was already started."""
        if self.started:
            return False
        self.started = True
        return True

    def restart(self) -> None:
        self.started = False
        self.over = False
        self.field.clear()
        self.snake.reset()
        self.spawn_food()

    def tick(self) -> Optional[GameResult]:
        """Advance one step; return the result when this step ends the game."""
        if not self.started or self.over:
            return None
        self.snake.move()
        head = self.snake.next_head()
        if self.rules.check_collision(head):
            self.over = True
            return self.result()
        self.snake.set_head(head)
        if self.food is not None and self.rules.hits_food(head, self.food):
            self.field.cell(*self.food).content = CellContent.SNAKE
            self.spawn_food()
            self.snake.grow()
        return None

    def spawn_food(self) -> Optional[Point]:
        """Put a fruit on a random cell the snake does not occupy.

        Returns its position, or None when no cell is left.
        """
        occupied = set(self.snake.body)
        size = self.field.size
        free = [
            (x, y) for x in range(size) for y in range(size) if (x, y) not in occupied
        ]
        if not free:
            self.food = None
            return None
        position = self._rng.choice(free)
        self.field.cell(*position).content = CellContent.FRUIT
        self.food = position
        return position

    def result(self) -> GameResult:
        size = self.field.size
        if len(self.snake.body) - 1 == size * size:
            return GameResult.WON
        return GameResult.LOST