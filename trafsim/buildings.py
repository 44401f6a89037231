"""Building tiles: homes and offices."""

from __future__ import annotations

from abc import ABC
from enum import IntEnum

from .tile import Tile, TileCategory
from .vector_math import Vec2

WHITE = (255, 255, 255, 255)


class BuildingType(IntEnum):
    HOME = 0
    OFFICE = 1


class BuildingTile(Tile, ABC):
    """A tile holding a building; concrete kinds set `building_type`."""

    category = TileCategory.BUILDING
    building_type: BuildingType

    def __init__(self, tile: Tile) -> None:
        if not hasattr(type(self), "building_type"):
            raise TypeError(f"{type(self).__name__} has no building type")
        super().__init__(tile.pos, tile.size, tile.index)
        # Up: (0, 1), Right: (1, 0), Down: (0, -1), Left: (-1, 0)
        self.direction = Vec2(1.0, 0.0)
        self.id: int | None = None
        self.color = WHITE


class HomeBuilding(BuildingTile):
    building_type = BuildingType.HOME


class OfficeBuilding(BuildingTile):
    building_type = BuildingType.OFFICE


_BUILDINGS: dict[BuildingType, type[BuildingTile]] = {
    BuildingType.HOME: HomeBuilding,
    BuildingType.OFFICE: OfficeBuilding,
}


def create_building(building_type: BuildingType | int, tile: Tile) -> BuildingTile:
    """Build a building of `building_type` in place of `tile`."""
    try:
        cls = _BUILDINGS[BuildingType(building_type)]
    except ValueError as exc:
        raise ValueError(f"unknown building type {building_type!r}") from exc
    return cls(tile)