import pytest

from trafsim.node import (
    SAMPLE_WINDOW,
    SAMPLES,
    SECONDS_PER_DAY,
    Node,
    search_astar,
    search_dfs,
)
from trafsim.vector_math import Vec2


def test_connect_and_disconnect():
    a, b, c = Node(Vec2(0, 0)), Node(Vec2(1, 0)), Node(Vec2(2, 0))
    a.connect(b)
    a.connect(c)
    a.connect(b)
    a.disconnect(b)
    assert a.neighbors == [c]
    a.disconnect_all()
    assert a.neighbors == []


def test_new_node_is_unblocked_with_empty_counters():
    n = Node(Vec2(3, 4))
    assert n.blocked is False
    assert n.cars_passed == [0] * SAMPLES


def test_increment_counter_uses_sample_window():
    n = Node(Vec2(0, 0))
    n.increment_counter(0)
    n.increment_counter(SAMPLE_WINDOW * 3 + 1)
    n.increment_counter(SAMPLE_WINDOW * 3)
    assert n.cars_passed[0] == 1
    assert n.cars_passed[3] == 2
    assert sum(n.cars_passed) == 3


def test_increment_counter_outside_day_raises():
    n = Node(Vec2(0, 0))
    with pytest.raises(IndexError):
        n.increment_counter(SECONDS_PER_DAY)


def test_counter_wraps_like_sixteen_bit():
    n = Node(Vec2(0, 0))
    n.cars_passed[0] = 0xFFFF
    n.increment_counter(0)
    assert n.cars_passed[0] == 0


def test_reset_counter():
    n = Node(Vec2(0, 0))
    n.increment_counter(SAMPLE_WINDOW * 5)
    n.reset_counter()
    assert n.cars_passed == [0] * SAMPLES


def test_str_format():
    n = Node(Vec2(1, 2))
    n.connect(Node(Vec2(0, 0)))
    assert str(n) == "Node at: (1, 2) has 1 neighbors."


def _chain():
    a, b, c = Node(Vec2(0, 0)), Node(Vec2(1, 0)), Node(Vec2(2, 0))
    a.connect(b)
    b.connect(c)
    return a, b, c


@pytest.mark.parametrize("search", [search_dfs, search_astar])
def test_search_along_chain(search):
    a, b, c = _chain()
    assert search(a, c) == [a, b, c]


@pytest.mark.parametrize("search", [search_dfs, search_astar])
def test_search_unreachable_gives_empty(search):
    a, b, c = _chain()
    assert search(c, a) == []


@pytest.mark.parametrize("search", [search_dfs, search_astar])
def test_search_start_is_dest(search):
    a, _, _ = _chain()
    assert search(a, a) == [a]


def _diamond():
    start = Node(Vec2(0, 0))
    far = Node(Vec2(0, -50))
    near = Node(Vec2(5, 0))
    dest = Node(Vec2(10, 0))
    start.connect(far)
    start.connect(near)
    far.connect(dest)
    near.connect(dest)
    return start, far, near, dest


def test_dfs_follows_connection_order():
    start, far, near, dest = _diamond()
    assert search_dfs(start, dest) == [start, far, dest]


def test_astar_tries_closest_neighbor_first():
    start, far, near, dest = _diamond()
    path = search_astar(start, dest)
    assert path[:3] == [start, near, dest]
    assert start.neighbors[0] is near


def test_search_handles_long_chain():
    nodes = [Node(Vec2(i, 0)) for i in range(3000)]
    for a, b in zip(nodes, nodes[1:]):
        a.connect(b)
    assert search_dfs(nodes[0], nodes[-1]) == nodes