"""The snake a player steers in a multiplayer session."""

from __future__ import annotations

from typing import List, Tuple

from snakenet.field import CellContent, GameField
from snakenet.snake import Direction, Point


class PlayerSnake:
    """A snake that appears where it is spawned and moves one whole step at a time."""

    def __init__(self, field: GameField) -> None:
        self._field = field
        self._body: List[Point] = []
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    @property
    def head(self) -> Point:
        """The first segment; raises IndexError while the snake has no body."""
        return self._body[0]

    @property
    def body(self) -> Tuple[Point, ...]:
        return tuple(self._body)

    def _mark(self, position: Point, content: CellContent) -> None:
        cell = self._field.cell(*position)
        if cell is not None:
            cell.content = content

    def spawn(self, position: Point) -> None:
        """Replace the body with a single segment at ``position``."""
        self._body = [position]
        self._mark(position, CellContent.SNAKE)

    def move(self) -> None:
        """Take up the pending direction and advance head and tail by one cell."""
        self._direction = self._pending
        new_head = self.next_head()
        self._mark(self._body.pop(), CellContent.EMPTY)
        self._body.insert(0, new_head)
        self._mark(new_head, CellContent.SNAKE)

    def next_head(self) -> Point:
        """Where the head goes one step along the current direction."""
        x, y = self.head
        dx, dy = self._direction.value
        return (x + dx, y + dy)

    def set_head(self, head: Point) -> None:
        self._body[0] = head
        self._mark(head, CellContent.SNAKE)

    def grow(self) -> None:
        """Lengthen the snake by repeating its last segment."""
        self._body.append(self._body[-1])

    def change_direction(self, direction: Direction) -> None:
        """Queue a turn, unless it reverses the current heading."""
        if direction is not self._direction.opposite:
            self._pending = direction

    def reset(self) -> None:
        """Drop the body and face right again."""
        self._body.clear()
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT