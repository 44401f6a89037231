"""A single traffic light with its car-blocking bar."""

from __future__ import annotations

from enum import IntEnum

from .vector_math import Rect, Vec2, rotated_bounds


class LightColor(IntEnum):
    RED = 0
    YELLOW = 1
    GREEN = 2


LIGHT_FILL = {
    LightColor.RED: (153, 0, 50),
    LightColor.YELLOW: (234, 224, 25),
    LightColor.GREEN: (52, 183, 40),
}

SHAPE_SIZE = Vec2(50.0, 20.0)
BLOCKER_THICKNESS = 10.0


class TrafficLight:
    """A light cycling yellow, green, yellow, red while its network activates it."""

    def __init__(
        self,
        pos: Vec2,
        direction: Vec2,
        tile_size: float,
        handler_id: int,
        green_time: float,
    ) -> None:
        self.handler_id = handler_id
        self.green_time = green_time
        self.yellow_time = 1.0
        self.activated_for = 0.0
        self.color = LightColor.RED
        self.activated = False
        self.can_drive = False
        self.blocker_size = Vec2(BLOCKER_THICKNESS, tile_size)
        self.blocker_pos = Vec2()
        self.blocker_rotation = 0.0
        self.pos = Vec2()
        self.shape_rotation = 0.0
        self.init_pos(pos, direction, tile_size)

    @property
    def fill_color(self) -> tuple[int, int, int]:
        return LIGHT_FILL[self.color]

    @property
    def blocker_bounds(self) -> Rect:
        """Area in which a car's front must stop while the light forbids driving."""
        return rotated_bounds(self.blocker_pos, self.blocker_size, self.blocker_rotation)

    def init_pos(self, pos: Vec2, direction: Vec2, tile_size: float) -> None:
        """Place the light and its blocker on a tile at `pos` facing `direction`."""
        center = pos + Vec2(tile_size * 0.5, tile_size * 0.5)
        half = tile_size * 0.5
        half_bar = self.blocker_size.x * 0.5
        w, h = SHAPE_SIZE.x, SHAPE_SIZE.y
        if direction.x == 1:
            self.blocker_rotation = 0
            self.blocker_pos = Vec2(center.x + half - half_bar, center.y)
            self.pos = pos + Vec2(tile_size - w, tile_size - h)
            self.shape_rotation = 0
        elif direction.x == -1:
            self.blocker_rotation = 0
            self.blocker_pos = Vec2(center.x - half + half_bar, center.y)
            self.pos = pos + Vec2(w, h)
            self.shape_rotation = 180
        elif direction.y == 1:
            self.blocker_rotation = 90
            self.blocker_pos = Vec2(center.x, center.y - half + half_bar)
            self.pos = pos + Vec2(tile_size - h, w)
            self.shape_rotation = 270
        elif direction.y == -1:
            self.blocker_rotation = 270
            self.blocker_pos = Vec2(center.x, center.y + half - half_bar)
            self.pos = pos + Vec2(h, tile_size - w)
            self.shape_rotation = 90

    def update(self, delta_time: float) -> None:
        """Advance the active phase by `delta_time` seconds."""
        self.activated_for += delta_time
        t = self.activated_for
        if self.color == LightColor.YELLOW and self.yellow_time < t < self.green_time:
            self.color = LightColor.GREEN
            self.can_drive = True
        if self.color == LightColor.GREEN and t > self.green_time - self.yellow_time:
            self.can_drive = False
            self.color = LightColor.YELLOW
        elif t > self.green_time:
            self._deactivate()

    def activate(self) -> None:
        """Start a new phase, beginning on yellow."""
        self.activated_for = 0.0
        self.activated = True
        self.color = LightColor.YELLOW

    def _deactivate(self) -> None:
        self.activated = False
        self.color = LightColor.RED