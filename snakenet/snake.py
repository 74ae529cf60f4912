"""The single-player snake that crawls over a field."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from snakenet.field import CellContent, GameField

Point = Tuple[int, int]


class Direction(Enum):
    """A heading, valued by its ``(dx, dy)`` step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Snake:
    """A snake starting in the middle of the field, heading right."""

    def __init__(self, field: GameField) -> None:
        self._field = field
        centre = field.size // 2
        self._start: Point = (centre, centre)
        self.initial_length = max(3, field.size // 5)
        self._body: List[Point] = []
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT
        self._create_body()

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    @property
    def head(self) -> Point:
        return self._body[0]

    @property
    def body(self) -> Tuple[Point, ...]:
        return tuple(self._body)

    def _create_body(self) -> None:
        sx, sy = self._start
        self._body.extend((sx - i, sy) for i in range(self.initial_length))
        for x, y in self._body:
            self._mark(x, y, CellContent.SNAKE)

    def _mark(self, x: int, y: int, content: CellContent) -> None:
        cell = self._field.cell(x, y)
        if cell is not None:
            cell.content = content

    def move(self) -> None:
        """Take up the pending direction, free the tail and shift the body.

        The head keeps its place until ``set_head`` gives it a new one.
        """
        self._direction = self._pending
        self._mark(*self._body[-1], CellContent.EMPTY)
        self._body[1:] = self._body[:-1]

    def next_head(self) -> Point:
        """Where the head goes one step along the current direction."""
        x, y = self.head
        dx, dy = self._direction.value
        return (x + dx, y + dy)

    def set_head(self, head: Point) -> None:
        self._body[0] = head
        self._mark(*head, CellContent.SNAKE)

    def grow(self) -> None:
        """Lengthen the snake by repeating its last segment."""
        self._body.append(self._body[-1])

    def change_direction(self, direction: Direction) -> None:
        """Queue a turn, unless it reverses the current heading."""
        if direction is not self._direction.opposite:
            self._pending = direction

    def reset(self) -> None:
        self._body.clear()
        self._direction = Direction.RIGHT
        self._pending = Direction.RIGHT
        self._create_body()