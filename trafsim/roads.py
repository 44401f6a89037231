"""Road tiles: the common base, straight roads, home roads and turns."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .tile import NeighborIndex, RoadType, Tile, TileCategory
from .traffic_light import TrafficLight
from .vector_math import Vec2

WHITE = (255, 255, 255, 255)

Neighbors = Sequence["Tile | None"]


def _facing(direction: Vec2) -> NeighborIndex | None:
    """Side a road points to; up is (0, 1), right (1, 0), down (0, -1), left (-1, 0)."""
    if direction.y == 1:
        return NeighborIndex.UP
    if direction.x == 1:
        return NeighborIndex.RIGHT
    if direction.y == -1:
        return NeighborIndex.DOWN
    if direction.x == -1:
        return NeighborIndex.LEFT
    return None


def _opposite(side: NeighborIndex) -> NeighborIndex:
    return NeighborIndex((side + 2) % 4)


def _road(tile: Tile | None) -> RoadTile | None:
    if tile is not None and tile.category == TileCategory.ROAD:
        return tile  # type: ignore[return-value]
    return None


class RoadTile(Tile, ABC):
    """A tile carrying a road that leads cars towards `direction`."""

    category = TileCategory.ROAD
    road_type: RoadType

    def __init__(self, tile: Tile) -> None:
        super().__init__(tile.pos, tile.size, tile.index)
        self.direction = Vec2(1.0, 0.0)
        self.right_turn = True
        self.light: TrafficLight | None = None
        self.rotation = 0.0
        self.color = WHITE

    @property
    def flipped(self) -> bool:
        return self.right_turn

    def rotate(self) -> None:
        """Turn the road a quarter clockwise."""
        d = self.direction
        self.direction = Vec2(d.y, -d.x)
        self.rotation = (self.rotation + 90) % 360
        if self.light is not None:
            self.light.init_pos(self.pos, self.direction, self.size)

    def flip(self) -> None:
        self.rotate()
        self.rotate()

    def add_light(self, handler_id: int, green_time: float) -> None:
        self.light = TrafficLight(
            self.pos, self.direction, self.size, handler_id, green_time
        )

    def remove_light(self) -> int | None:
        """Drop the light and return its network id, or None if there was none."""
        handler_id = self.light.handler_id if self.light is not None else None
        self.light = None
        return handler_id

    def auto_rotate(self, neighbors: Neighbors) -> None:
        """Turn to continue a neighbouring road that leads into this tile."""
        left = _road(neighbors[NeighborIndex.LEFT])
        if left is not None and left.can_connect_to(NeighborIndex.RIGHT):
            return
        up = _road(neighbors[NeighborIndex.UP])
        if up is not None and up.can_connect_to(NeighborIndex.DOWN):
            self.rotate()
            return
        right = _road(neighbors[NeighborIndex.RIGHT])
        if right is not None and right.can_connect_to(NeighborIndex.LEFT):
            self.flip()
            return
        down = _road(neighbors[NeighborIndex.DOWN])
        if down is not None and down.can_connect_to(NeighborIndex.UP):
            self.rotate()
            self.flip()

    def _connect_to(self, another: Tile | None, side: NeighborIndex) -> None:
        """Link this node to `another` if it accepts cars arriving from `side`."""
        road = _road(another)
        if road is not None and road.connectable_from(side):
            self.node.connect(road.node)

    def _connect_forward(self, neighbors: Neighbors) -> None:
        side = _facing(self.direction)
        if side is not None:
            self._connect_to(neighbors[side], _opposite(side))

    @abstractmethod
    def connect(self, neighbors: Neighbors) -> None:
        """Link this road's node to the neighbouring roads it leads into."""

    @abstractmethod
    def connectable_from(self, n_index: NeighborIndex) -> bool:
        """Whether cars may enter this road from side `n_index`."""

    @abstractmethod
    def can_connect_to(self, n_index: NeighborIndex) -> bool:
        """Whether this road leads out towards side `n_index`."""


class _OneWayRoad(RoadTile):
    def connect(self, neighbors: Neighbors) -> None:
        self._connect_forward(neighbors)

    def can_connect_to(self, n_index: NeighborIndex) -> bool:
        return _facing(self.direction) == n_index

    def connectable_from(self, n_index: NeighborIndex) -> bool:
        return _facing(self.direction) == _opposite(NeighborIndex(n_index))


class StraightRoad(_OneWayRoad):
    road_type = RoadType.STRAIGHT


class HomeRoad(_OneWayRoad):
    road_type = RoadType.HOME


class RoadTurn(RoadTile):
    """A quarter turn; right turns enter from the side counter-clockwise of the exit."""

    road_type = RoadType.TURN

    def auto_rotate(self, neighbors: Neighbors) -> None:
        down = _road(neighbors[NeighborIndex.DOWN])
        if down is not None and down.can_connect_to(NeighborIndex.UP):
            return
        up = _road(neighbors[NeighborIndex.UP])
        if up is not None and up.can_connect_to(NeighborIndex.DOWN):
            self.rotate()
            self.rotate()
            return
        right = _road(neighbors[NeighborIndex.RIGHT])
        if right is not None and right.can_connect_to(NeighborIndex.LEFT):
            self.rotate()
            self.rotate()
            self.rotate()
            return
        left = _road(neighbors[NeighborIndex.LEFT])
        if left is not None and left.can_connect_to(NeighborIndex.RIGHT):
            self.rotate()

    def connect(self, neighbors: Neighbors) -> None:
        self._connect_forward(neighbors)

    def can_connect_to(self, n_index: NeighborIndex) -> bool:
        return _facing(self.direction) == n_index

    def connectable_from(self, n_index: NeighborIndex) -> bool:
        step = -1 if self.right_turn else 1
        return _facing(self.direction) == NeighborIndex((int(n_index) + step) % 4)

    def flip(self) -> None:
        self.direction = -self.direction
        self.right_turn = not self.right_turn