import pytest

from snakenet.field import CellContent, GameField
from snakenet.server_snake import PlayerSnake
from snakenet.snake import Direction


@pytest.fixture
def field():
    return GameField(8)


@pytest.fixture
def snake(field):
    s = PlayerSnake(field)
    s.spawn((3, 3))
    return s


def test_spawn_sets_single_segment_and_marks_cell(field, snake):
    assert snake.body == ((3, 3),)
    assert snake.head == (3, 3)
    assert field.cell(3, 3).content is CellContent.SNAKE


def test_spawn_replaces_previous_body(field, snake):
    snake.spawn((1, 2))
    assert snake.body == ((1, 2),)


def test_spawn_outside_field_keeps_body(field):
    s = PlayerSnake(field)
    s.spawn((20, 20))
    assert s.head == (20, 20)
    assert all(cell.is_empty for cell in field)


@pytest.mark.parametrize("direction", list(Direction))
def test_next_head_follows_direction_after_move(field, direction):
    s = PlayerSnake(field)
    s.spawn((4, 4))
    if direction is Direction.LEFT:
        s.change_direction(Direction.UP)
        s.move()
    start = s.head
    s.change_direction(direction)
    s.move()
    dx, dy = direction.value
    assert s.head == (start[0] + dx, start[1] + dy)
    assert s.direction is direction


def test_move_frees_old_cell_and_keeps_length(field, snake):
    target = snake.next_head()
    snake.move()
    assert snake.head == target
    assert len(snake.body) == 1
    assert field.cell(3, 3).is_empty
    assert field.cell(*target).content is CellContent.SNAKE


def test_grow_then_move_keeps_old_position(field, snake):
    snake.grow()
    assert len(snake.body) == 2
    snake.move()
    assert len(snake.body) == 2
    assert (3, 3) in snake.body
    assert snake.body[-1] == (3, 3)


def test_reverse_turn_is_ignored(snake):
    snake.change_direction(Direction.LEFT)
    assert snake.pending_direction is Direction.RIGHT


def test_turn_waits_for_move(snake):
    snake.change_direction(Direction.UP)
    assert snake.pending_direction is Direction.UP
    assert snake.direction is Direction.RIGHT
    snake.move()
    assert snake.direction is Direction.UP


def test_set_head_replaces_first_segment(field, snake):
    snake.set_head((5, 6))
    assert snake.head == (5, 6)
    assert field.cell(5, 6).content is CellContent.SNAKE


def test_reset_empties_body(snake):
    snake.change_direction(Direction.DOWN)
    snake.move()
    snake.reset()
    assert snake.body == ()
    assert snake.direction is Direction.RIGHT
    assert snake.pending_direction is Direction.RIGHT
    with pytest.raises(IndexError):
        snake.head