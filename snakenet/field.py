"""The playing field: a square grid of cells that remember what they hold."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, List, Optional

ChangeListener = Callable[[int, int, "CellContent"], None]


class CellContent(Enum):
    """What occupies a cell."""

    EMPTY = "empty"
    FRUIT = "fruit"
    SNAKE = "snake"


class Cell:
    """One square of the field. Changing its content notifies ``on_change``."""

    __slots__ = ("x", "y", "_content", "_on_change")

    def __init__(
        self, x: int = 0, y: int = 0, on_change: Optional[ChangeListener] = None
    ) -> None:
        self.x = x
        self.y = y
        self._content = CellContent.EMPTY
        self._on_change = on_change

    @property
    def content(self) -> CellContent:
        return self._content

    @content.setter
    def content(self, value: CellContent) -> None:
        self._content = value
        if self._on_change is not None:
            self._on_change(self.x, self.y, value)

    @property
    def is_empty(self) -> bool:
        return self._content is CellContent.EMPTY

    def clear(self) -> None:
        """Make the cell empty again."""
        self.content = CellContent.EMPTY

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, content={self._content.name})"


class GameField:
    """A ``size`` x ``size`` grid of cells addressed by ``(x, y)``."""

    def __init__(self, size: int = 16) -> None:
        if size < 1:
            raise ValueError(f"field size must be positive, got {size}")
        self._size = size
        self._listeners: List[ChangeListener] = []
        self._cells = [
            [Cell(x, y, self._notify) for y in range(size)] for x in range(size)
        ]

    @property
    def size(self) -> int:
        return self._size

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at ``(x, y)``, or None when it lies outside the field."""
        if 0 <= x < self._size and 0 <= y < self._size:
            return self._cells[x][y]
        return None

    def clear(self) -> None:
        """Empty every cell."""
        for cell in self:
            cell.clear()

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call ``listener(x, y, content)`` on every cell change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __iter__(self) -> Iterator[Cell]:
        for column in self._cells:
            yield from column

    def _notify(self, x: int, y: int, content: CellContent) -> None:
        for listener in list(self._listeners):
            listener(x, y, content)