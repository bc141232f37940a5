import pytest

from evolution.entities import Finish, Monster, Tool
from evolution.geometry import CELL_SIZE, MAP_WIDTH, NUM_TOOLS, WINDOW_HEIGHT
from evolution.role import Role


def test_finish_collision_detection():
    finish = Finish()
    role = Role()

    role.set_position(100, 100)
    assert finish.collide(role) is False
    assert role.finished is False

    role.set_position(MAP_WIDTH * CELL_SIZE - CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE)
    assert finish.collide(role) is True
    assert role.finished is True
    assert (role.x, role.y) == (0.0, 0.0)


def test_tool_collection():
    tool = Tool()
    role = Role()
    tool.create()

    role.set_position(0, 0)
    assert tool.collide(role) is False

    role.set_position(10 * CELL_SIZE, WINDOW_HEIGHT - 8 * CELL_SIZE)
    assert tool.collide(role) is True

    role.set_position(8 * CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE)
    assert tool.collide(role) is True


def test_tool_create_lays_out_two_rows():
    tool = Tool()
    tool.create()
    assert len(tool.tiles) == 2 * NUM_TOOLS
    assert {tile.top for tile in tool.tiles} == {
        WINDOW_HEIGHT - 8 * CELL_SIZE,
        WINDOW_HEIGHT - 3 * CELL_SIZE,
    }


def test_tool_is_removed_once_picked_up():
    tool = Tool()
    tool.create()
    role = Role()
    role.set_position(10 * CELL_SIZE, WINDOW_HEIGHT - 8 * CELL_SIZE)
    assert tool.collide(role) is True
    assert len(tool.tiles) == 2 * NUM_TOOLS - 1
    assert tool.collide(role) is False


def test_tool_create_resets_items():
    tool = Tool()
    tool.create()
    tool.tiles.clear()
    tool.create()
    assert len(tool.tiles) == 2 * NUM_TOOLS


def test_monster_resets_player():
    monster = Monster("resources/bee.png")
    monster.create()
    role = Role()

    role.set_position(0, 0)
    assert monster.collide(role) is False

    role.set_position(15 * CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE)
    assert monster.collide(role) is True
    assert role.x == pytest.approx(0.0)
    assert role.y == pytest.approx(0.0)


def test_monster_move_drifts_left():
    monster = Monster("resources/bee.png")
    monster.create()
    before = list(monster.tiles)
    monster.move(1.0)
    for old, new in zip(before, monster.tiles):
        assert new.left == pytest.approx(old.left + Monster.SPEED[0])
        assert new.top == pytest.approx(old.top)


def test_monster_without_create_never_collides():
    monster = Monster()
    role = Role()
    role.set_position(15 * CELL_SIZE, WINDOW_HEIGHT - 3 * CELL_SIZE)
    assert monster.collide(role) is False
    assert role.x == 15 * CELL_SIZE