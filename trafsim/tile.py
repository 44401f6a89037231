"""Grid tiles and the enumerations shared by roads and buildings."""

from __future__ import annotations

from enum import IntEnum

from .node import Node
from .vector_math import Vec2


class TileCategory(IntEnum):
    ROAD = 0
    BUILDING = 1
    EMPTY = 2


class NeighborIndex(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class RoadType(IntEnum):
    STRAIGHT = 0
    TURN = 1
    INTERSECTION = 2
    TRISECTION = 3
    JUNCTION = 4
    HOME = 5


GRASS_COLOR = (119, 160, 93, 255)

_SELECTED_ALPHA = 100
_HOVERED_ALPHA = 220
_OPAQUE = 255


class Tile:
    """A square map cell; empty unless a subclass says otherwise."""

    category = TileCategory.EMPTY

    def __init__(self, pos: Vec2, size: float, index: int) -> None:
        self.pos = pos
        self.size = size
        self.index = index
        self.color: tuple[int, int, int, int] = GRASS_COLOR
        self.node = Node(self.center)

    @property
    def center(self) -> Vec2:
        return self.pos + Vec2(self.size / 2, self.size / 2)

    @property
    def alpha(self) -> int:
        return self.color[3]

    def _set_alpha(self, alpha: int) -> None:
        r, g, b, _ = self.color
        self.color = (r, g, b, alpha)

    def select(self) -> None:
        """Highlight as the selected tile."""
        self._set_alpha(_SELECTED_ALPHA)

    def hover(self) -> None:
        """Highlight as the tile under the cursor."""
        self._set_alpha(_HOVERED_ALPHA)

    def unselect(self) -> None:
        """Remove any highlight."""
        self._set_alpha(_OPAQUE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index}, pos={self.pos})"