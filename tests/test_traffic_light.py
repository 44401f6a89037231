import pytest

from trafsim.traffic_light import SHAPE_SIZE, LightColor, TrafficLight
from trafsim.vector_math import Vec2

TILE = 120.0


def _light(direction=Vec2(1, 0), green_time=5.0):
    return TrafficLight(Vec2(0, 0), direction, TILE, 7, green_time)


def test_initial_state_is_red():
    light = _light()
    assert light.color is LightColor.RED
    assert light.fill_color == (153, 0, 50)
    assert not light.activated
    assert not light.can_drive
    assert light.handler_id == 7


def test_activate_starts_yellow():
    light = _light()
    light.activate()
    assert light.color is LightColor.YELLOW
    assert light.activated
    assert light.activated_for == 0


def test_full_cycle():
    light = _light(green_time=5.0)
    light.activate()
    light.update(1.5)
    assert light.color is LightColor.GREEN
    assert light.can_drive
    light.update(3.0)
    assert light.color is LightColor.YELLOW
    assert not light.can_drive
    assert light.activated
    light.update(1.0)
    assert light.color is LightColor.RED
    assert not light.activated


def test_stays_yellow_before_yellow_time():
    light = _light()
    light.activate()
    light.update(0.5)
    assert light.color is LightColor.YELLOW
    assert not light.can_drive


def test_blocker_at_right_edge_for_rightward_road():
    light = _light(Vec2(1, 0))
    bounds = light.blocker_bounds
    assert bounds.contains(Vec2(TILE - 1, TILE / 2))
    assert not bounds.contains(Vec2(TILE / 2, TILE / 2))
    assert bounds.height == TILE
    assert light.pos == Vec2(TILE - SHAPE_SIZE.x, TILE - SHAPE_SIZE.y)


def test_blocker_at_left_edge_for_leftward_road():
    light = _light(Vec2(-1, 0))
    assert light.blocker_bounds.contains(Vec2(1, TILE / 2))
    assert not light.blocker_bounds.contains(Vec2(TILE - 1, TILE / 2))
    assert light.shape_rotation == 180


@pytest.mark.parametrize(
    "direction, inside",
    [(Vec2(0, 1), Vec2(TILE / 2, 1)), (Vec2(0, -1), Vec2(TILE / 2, TILE - 1))],
)
def test_vertical_blocker_is_horizontal_bar(direction, inside):
    light = _light(direction)
    bounds = light.blocker_bounds
    assert bounds.width == TILE
    assert bounds.height == light.blocker_size.x
    assert bounds.contains(inside)


def test_init_pos_moves_blocker_when_rotated():
    light = _light(Vec2(1, 0))
    light.init_pos(Vec2(0, 0), Vec2(0, -1), TILE)
    assert light.blocker_rotation == 270
    assert light.blocker_bounds.contains(Vec2(TILE / 2, TILE - 1))