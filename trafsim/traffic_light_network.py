"""A group of traffic lights that take turns being active."""

from __future__ import annotations

from .traffic_light import TrafficLight
from .vector_math import Vec2


class TrafficLightNetwork:
    """Cycles its lights one at a time in the order they were added."""

    def __init__(self, handler_id: int) -> None:
        self.handler_id = handler_id
        self.active_index: int | None = None
        self._lights: list[TrafficLight] = []
        self._vertices: list[Vec2] = []

    @property
    def lights(self) -> tuple[TrafficLight, ...]:
        return tuple(self._lights)

    @property
    def vertices(self) -> tuple[Vec2, ...]:
        """Light positions, used to draw the connections between lights."""
        return tuple(self._vertices)

    @property
    def light_count(self) -> int:
        return len(self._lights)

    def add_light(self, light: TrafficLight) -> None:
        self._lights.append(light)
        self.active_index = 0
        self._vertices.append(light.pos)

    def remove_light(self, light: TrafficLight, pos: Vec2) -> None:
        """Drop `light` and every connection vertex at `pos`."""
        self._lights = [other for other in self._lights if other is not light]
        self._vertices = [v for v in self._vertices if v != pos]

    def update(self, delta_time: float) -> None:
        """Advance the active light, handing over to the next one when it finishes."""
        if not self._lights:
            return
        if self.active_index is None or self.active_index >= len(self._lights):
            self.active_index = 0
        current = self._lights[self.active_index]
        current.update(delta_time)
        if current.activated:
            return
        self.active_index = (self.active_index + 1) % len(self._lights)
        self._lights[self.active_index].activate()