"""Road graph nodes with per-day traffic counters and route search."""

from __future__ import annotations

from typing import Callable, Iterator

from .vector_math import Vec2, distance

SAMPLES = 96
SECONDS_PER_DAY = 24 * 60 * 60
SAMPLE_WINDOW = SECONDS_PER_DAY // SAMPLES
_COUNTER_MASK = 0xFFFF


class Node:
    """A point in the road graph with one-way connections to other nodes."""

    def __init__(self, pos: Vec2) -> None:
        self.pos = pos
        self.neighbors: list[Node] = []
        self.cars_passed: list[int] = [0] * SAMPLES
        self.blocked = False

    def connect(self, another: Node) -> None:
        """Add a one-way connection to `another`."""
        self.neighbors.append(another)

    def disconnect(self, node: Node) -> None:
        """Remove every connection to `node`."""
        self.neighbors[:] = [n for n in self.neighbors if n is not node]

    def disconnect_all(self) -> None:
        self.neighbors.clear()

    def increment_counter(self, game_time: float) -> None:
        """Count a passing car in the sample window holding `game_time` seconds."""
        index = int(game_time / SAMPLE_WINDOW)
        if not 0 <= index < SAMPLES:
            raise IndexError(f"game time {game_time} is outside the day")
        self.cars_passed[index] = (self.cars_passed[index] + 1) & _COUNTER_MASK

    def reset_counter(self) -> None:
        self.cars_passed = [0] * SAMPLES

    def __str__(self) -> str:
        return (
            f"Node at: ({self.pos.x:g}, {self.pos.y:g}) "
            f"has {len(self.neighbors)} neighbors."
        )


def _search(
    start: Node, dest: Node, order: Callable[[Node], None] | None, stop_when_found: bool
) -> list[Node]:
    visited: set[Node] = set()
    path: list[Node] = []

    def enter(node: Node) -> Iterator[Node] | None:
        if node in visited:
            return None
        visited.add(node)
        path.append(node)
        if node is dest:
            return None
        if order is not None:
            order(node)
        return iter(list(node.neighbors))

    stack: list[Iterator[Node]] = []
    first = enter(start)
    if first is not None:
        stack.append(first)
    while stack:
        nxt = next(stack[-1], None)
        if nxt is None:
            stack.pop()
            if dest not in visited:
                path.pop()
            continue
        if stop_when_found and dest in visited:
            continue
        child = enter(nxt)
        if child is not None:
            stack.append(child)
    return path


def search_astar(start: Node, dest: Node) -> list[Node]:
    """Depth-first search trying the neighbour closest to `dest` first.

    Each visited node's neighbour list is sorted in place by that estimate.
    Nodes explored after `dest` is reached stay at the end of the path.
    Returns an empty list when `dest` cannot be reached.
    """

    def order(cur: Node) -> None:
        cur.neighbors.sort(
            key=lambda n: distance(cur.pos, n.pos) + distance(n.pos, dest.pos)
        )

    return _search(start, dest, order, stop_when_found=False)


def search_dfs(start: Node, dest: Node) -> list[Node]:
    """Plain depth-first search in connection order; empty list if unreachable."""
    return _search(start, dest, None, stop_when_found=True)