import pytest

from trafsim.buildings import (
    BuildingTile,
    BuildingType,
    HomeBuilding,
    OfficeBuilding,
    create_building,
)
from trafsim.tile import Tile, TileCategory
from trafsim.vector_math import Vec2


@pytest.fixture
def tile():
    return Tile(Vec2(240.0, 120.0), 120.0, 52)


def test_create_home(tile):
    building = create_building(BuildingType.HOME, tile)
    assert isinstance(building, HomeBuilding)
    assert building.building_type == BuildingType.HOME
    assert building.category == TileCategory.BUILDING


def test_create_office_from_int(tile):
    building = create_building(1, tile)
    assert isinstance(building, OfficeBuilding)
    assert building.building_type == BuildingType.OFFICE


def test_building_copies_tile_geometry(tile):
    building = HomeBuilding(tile)
    assert building.pos == tile.pos
    assert building.size == tile.size
    assert building.index == tile.index
    assert building.center == tile.center
    assert building.direction == Vec2(1.0, 0.0)
    assert building.id is None


def test_building_is_white_and_highlightable(tile):
    building = OfficeBuilding(tile)
    assert building.color == (255, 255, 255, 255)
    building.hover()
    assert building.alpha == 220
    building.unselect()
    assert building.alpha == 255


def test_unknown_type_rejected(tile):
    with pytest.raises(ValueError):
        create_building(7, tile)


def test_base_class_cannot_be_built(tile):
    with pytest.raises(TypeError):
        BuildingTile(tile)