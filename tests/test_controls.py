import pytest

from snakenet.controls import handle_key
from snakenet.field import GameField
from snakenet.snake import Direction, Snake


@pytest.fixture
def snake():
    return Snake(GameField(10))


@pytest.mark.parametrize(
    "key, direction",
    [("w", Direction.UP), ("s", Direction.DOWN), ("d", Direction.RIGHT)],
)
def test_keys_turn_snake(snake, key, direction):
    assert handle_key(key, snake) is True
    assert snake.pending_direction is direction


def test_uppercase_keys_work(snake):
    assert handle_key("W", snake) is True
    assert snake.pending_direction is Direction.UP


def test_reverse_key_is_ignored(snake):
    assert handle_key("a", snake) is True
    assert snake.pending_direction is Direction.RIGHT


def test_other_keys_do_not_steer(snake):
    assert handle_key("x", snake) is False
    assert handle_key("space", snake) is False
    assert snake.pending_direction is Direction.RIGHT


def test_left_allowed_after_turning(snake):
    handle_key("w", snake)
    snake.move()
    assert handle_key("a", snake) is True
    assert snake.pending_direction is Direction.LEFT