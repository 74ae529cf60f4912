import pytest

from snakenet.field import GameField
from snakenet.server_rules import MultiplayerRules
from snakenet.server_snake import PlayerSnake


@pytest.fixture
def field():
    return GameField(5)


@pytest.fixture
def snakes(field):
    ann = PlayerSnake(field)
    ann.spawn((0, 0))
    ann.grow()
    bob = PlayerSnake(field)
    bob.spawn((2, 2))
    return {"ann": ann, "bob": bob}


@pytest.fixture
def rules(field, snakes):
    return MultiplayerRules(field, snakes)


@pytest.mark.parametrize("head", [(-1, 0), (0, -1), (5, 0), (0, 5), (5, 5)])
def test_outside_field_hits_wall(rules, head):
    assert rules.hits_wall(head) is True


@pytest.mark.parametrize("head", [(0, 0), (4, 4), (0, 4)])
def test_inside_field_is_clear_of_walls(rules, head):
    assert rules.hits_wall(head) is False


def test_hits_self(rules):
    assert rules.hits_self("ann", (0, 0)) is True
    assert rules.hits_self("ann", (2, 2)) is False


def test_hits_other_ignores_own_body(rules):
    assert rules.hits_other("ann", (2, 2)) is True
    assert rules.hits_other("bob", (2, 2)) is False
    assert rules.hits_other("bob", (0, 0)) is True


def test_check_collision_combines_rules(rules):
    assert rules.check_collision("ann", (0, 0)) is True
    assert rules.check_collision("ann", (2, 2)) is True
    assert rules.check_collision("ann", (-1, 3)) is True
    assert rules.check_collision("ann", (1, 0)) is False


def test_unknown_player_raises(rules):
    with pytest.raises(KeyError):
        rules.check_collision("carol", (1, 1))


def test_hits_food(rules):
    assert rules.hits_food((1, 1), (1, 1)) is True
    assert rules.hits_food((1, 1), (1, 2)) is False


def test_rules_keep_their_own_mapping(field, snakes):
    rules = MultiplayerRules(field, snakes)
    del snakes["bob"]
    assert rules.hits_other("ann", (2, 2)) is True
    assert set(rules.snakes) == {"ann", "bob"}