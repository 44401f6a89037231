from trafsim.traffic_light import LightColor, TrafficLight
from trafsim.traffic_light_network import TrafficLightNetwork
from trafsim.vector_math import Vec2


def make_light(x: float, handler_id: int = 0) -> TrafficLight:
    return TrafficLight(Vec2(x, 0.0), Vec2(1.0, 0.0), 120.0, handler_id, 5.0)


def test_add_light_records_light_and_vertex():
    net = TrafficLightNetwork(3)
    light = make_light(0.0)
    net.add_light(light)
    assert net.light_count == 1
    assert net.lights == (light,)
    assert net.vertices == (light.pos,)
    assert net.active_index == 0
    assert net.handler_id == 3


def test_remove_light_by_identity_and_position():
    net = TrafficLightNetwork(0)
    a, b = make_light(0.0), make_light(240.0)
    net.add_light(a)
    net.add_light(b)
    net.remove_light(a, a.pos)
    assert net.lights == (b,)
    assert net.vertices == (b.pos,)


def test_update_without_lights_keeps_state():
    net = TrafficLightNetwork(0)
    net.update(1.0)
    assert net.light_count == 0
    assert net.active_index is None


def test_lights_take_turns():
    net = TrafficLightNetwork(0)
    a, b = make_light(0.0), make_light(240.0)
    net.add_light(a)
    net.add_light(b)

    net.update(0.1)
    assert net.active_index == 1
    assert b.activated and b.color == LightColor.YELLOW
    assert a.color == LightColor.RED

    net.update(1.5)
    assert b.color == LightColor.GREEN
    assert b.can_drive

    net.update(3.0)
    assert b.color == LightColor.YELLOW
    assert not b.can_drive

    net.update(1.0)
    assert b.color == LightColor.RED
    assert not b.activated
    assert net.active_index == 0
    assert a.activated and a.color == LightColor.YELLOW


def test_single_light_reactivates_itself():
    net = TrafficLightNetwork(0)
    light = make_light(0.0)
    net.add_light(light)
    net.update(0.1)
    assert net.active_index == 0
    assert light.activated