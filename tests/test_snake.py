import pytest

from snakenet.field import CellContent, GameField
from snakenet.snake import Direction, Snake


def test_initial_body_is_horizontal_from_centre():
    field = GameField(16)
    snake = Snake(field)
    centre = field.size // 2
    assert snake.head == (centre, centre)
    assert len(snake.body) == snake.initial_length == 3
    xs = [x for x, _ in snake.body]
    assert xs == sorted(xs, reverse=True)
    assert {y for _, y in snake.body} == {centre}


def test_initial_length_grows_with_field():
    assert Snake(GameField(20)).initial_length == 4


def test_body_cells_are_marked():
    field = GameField(10)
    snake = Snake(field)
    for x, y in snake.body:
        assert field.cell(x, y).content is CellContent.SNAKE
    marked = [c for c in field if c.content is CellContent.SNAKE]
    assert len(marked) == len(snake.body)


def test_starts_heading_right():
    snake = Snake(GameField(10))
    assert snake.direction is Direction.RIGHT
    assert snake.pending_direction is Direction.RIGHT


def test_move_and_set_head_advance_one_step():
    field = GameField(10)
    snake = Snake(field)
    before = snake.body
    snake.move()
    head = snake.next_head()
    snake.set_head(head)
    assert snake.body == (head,) + before[:-1]
    assert field.cell(*before[-1]).is_empty
    assert field.cell(*head).content is CellContent.SNAKE


def test_next_head_follows_direction():
    snake = Snake(GameField(10))
    hx, hy = snake.head
    snake.change_direction(Direction.DOWN)
    snake.move()
    assert snake.direction is Direction.DOWN
    assert snake.next_head() == (hx, hy + 1)


def test_reverse_turn_is_ignored():
    snake = Snake(GameField(10))
    snake.change_direction(Direction.LEFT)
    assert snake.pending_direction is Direction.RIGHT
    snake.change_direction(Direction.UP)
    assert snake.pending_direction is Direction.UP


def test_grow_repeats_tail():
    snake = Snake(GameField(10))
    tail = snake.body[-1]
    length = len(snake.body)
    snake.grow()
    assert len(snake.body) == length + 1
    assert snake.body[-2:] == (tail, tail)


def test_reset_restores_start():
    field = GameField(10)
    snake = Snake(field)
    start = snake.body
    snake.change_direction(Direction.UP)
    snake.move()
    snake.set_head(snake.next_head())
    snake.grow()
    snake.reset()
    assert snake.body == start
    assert snake.direction is Direction.RIGHT
    assert snake.pending_direction is Direction.RIGHT


@pytest.mark.parametrize(
    "path",
    [
        [Direction.UP],
        [Direction.DOWN],
        [Direction.RIGHT],
        [Direction.UP, Direction.LEFT],
    ],
)
def test_turn_to_opposite_is_ignored(path):
    snake = Snake(GameField(10))
    for direction in path:
        snake.change_direction(direction)
        snake.move()
        snake.set_head(snake.next_head())
    current = path[-1]
    assert snake.direction is current
    assert current.opposite.opposite is current
    snake.change_direction(current.opposite)
    assert snake.pending_direction is current