import pytest

from snakenet.field import GameField
from snakenet.rules import GameRules
from snakenet.snake import Snake


@pytest.fixture
def rules():
    field = GameField(8)
    return GameRules(field, Snake(field))


@pytest.mark.parametrize("head", [(-1, 0), (0, -1), (8, 3), (3, 8)])
def test_outside_is_wall(rules, head):
    assert rules.hits_wall(head)
    assert rules.check_collision(head)


@pytest.mark.parametrize("head", [(0, 0), (7, 7), (0, 7)])
def test_inside_is_not_wall(rules, head):
    assert not rules.hits_wall(head)


def test_body_segment_is_self_hit(rules):
    for segment in rules.snake.body:
        assert rules.hits_self(segment)
        assert rules.check_collision(segment)


def test_free_cell_is_no_collision(rules):
    head = rules.snake.next_head()
    assert not rules.hits_self(head)
    assert not rules.check_collision(head)


def test_food_hit_only_on_same_point(rules):
    assert rules.hits_food((2, 3), (2, 3))
    assert not rules.hits_food((2, 3), (3, 2))