"""Keyboard controls for the single-player snake."""

from __future__ import annotations

from snakenet.snake import Direction, Snake

_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def handle_key(key: str, snake: Snake) -> bool:
    """Turn the snake for a W/A/S/D key; return whether the key steers."""
    direction = _KEY_DIRECTIONS.get(key.lower())
    if direction is None:
        return False
    if snake.direction is not direction.opposite:
        snake.change_direction(direction)
    return True