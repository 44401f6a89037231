"""The square grid of tiles that makes up the map."""

from __future__ import annotations

from typing import Iterator

from .tile import Tile
from .vector_math import Vec2

SIDE_COUNT = 50


class Grid:
    """A side_count x side_count array of tiles, indexed row by row."""

    def __init__(self, tile_size: float, side_count: int = SIDE_COUNT) -> None:
        self.tile_size = tile_size
        self.side_count = side_count
        self._tiles: list[Tile] = []
        self.reset()

    @property
    def total_tile_count(self) -> int:
        return self.side_count * self.side_count

    def __len__(self) -> int:
        return self.total_tile_count

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self._tiles))

    def reset(self) -> None:
        """Replace every tile with a fresh empty one."""
        n, s = self.side_count, self.tile_size
        self._tiles = [
            Tile(Vec2(j * s, i * s), s, i * n + j) for i in range(n) for j in range(n)
        ]

    def tile(self, index: int) -> Tile | None:
        """Tile at `index`, or None when out of range."""
        if 0 <= index < self.total_tile_count:
            return self._tiles[index]
        return None

    def tile_at(self, pos: Vec2) -> Tile | None:
        """Tile covering map position `pos`, or None outside the map."""
        extent = self.side_count * self.tile_size
        if pos.x < 0 or pos.y < 0 or pos.x > extent or pos.y > extent:
            return None
        s = self.tile_size
        j = int((pos.x + s) / s - 1)
        i = int((pos.y + s) / s - 1)
        return self.tile(i * self.side_count + j)

    def up_neighbor(self, index: int) -> Tile | None:
        if index < self.side_count:
            return None
        return self.tile(index - self.side_count)

    def right_neighbor(self, index: int) -> Tile | None:
        if index == 0 or (self.side_count - 1) % index == 0:
            return None
        return self.tile(index + 1)

    def down_neighbor(self, index: int) -> Tile | None:
        if index + self.side_count >= self.total_tile_count:
            return None
        return self.tile(index + self.side_count)

    def left_neighbor(self, index: int) -> Tile | None:
        if index == 0 or self.side_count % index == 0:
            return None
        return self.tile(index - 1)

    def neighbors(self, index: int) -> tuple[Tile | None, Tile | None, Tile | None, Tile | None]:
        """Neighbours in NeighborIndex order: up, right, down, left."""
        return (
            self.up_neighbor(index),
            self.right_neighbor(index),
            self.down_neighbor(index),
            self.left_neighbor(index),
        )

    def swap_tile(self, tile: Tile) -> Tile:
        """Put `tile` at its own index and return the tile it replaced."""
        if not 0 <= tile.index < self.total_tile_count:
            raise IndexError(f"tile index {tile.index} is outside the grid")
        old = self._tiles[tile.index]
        self._tiles[tile.index] = tile
        return old