"""Cars that follow a route through the road graph."""

from __future__ import annotations

import random
import time
from collections import deque
from typing import Callable, ClassVar, Iterable, Mapping

from .node import Node, search_astar
from .rando import Rando
from .traffic_light_network import TrafficLightNetwork
from .vector_math import Rect, Vec2, distance, dot, normalize, rotated_bounds

CAR_SIZE = Vec2(50.0, 100.0)
MAX_SPEED = 200.0
ACCELERATION = 200.0
WAIT_SECONDS = 2.0
NEXT_NODE_CLEARANCE = 80.0
RIGHT_OF_WAY_RANGE = 400.0
ACCIDENT_SCALE = 1.5


def direction_to_index(direction: Vec2) -> int:
    """0 for right, 1 for down, 2 for left, 3 for up, -1 for anything else."""
    x, y = direction.x, direction.y
    if abs(x - 1) < 0.5 and abs(y) < 0.5:
        return 0
    if abs(y - 1) < 0.5 and abs(x) < 0.5:
        return 1
    if abs(x + 1) < 0.5 and abs(y) < 0.5:
        return 2
    if abs(y + 1) < 0.5 and abs(x) < 0.5:
        return 3
    return -1


def _unit(v: Vec2) -> Vec2 | None:
    if v.x == 0 and v.y == 0:
        return None
    return normalize(v)


class Car:
    """A car driving from `start` to `dest` along a searched route."""

    textures: ClassVar[list[object]] = []
    accident_count: ClassVar[int] = 0

    def __init__(
        self,
        start: Node,
        dest: Node,
        size: Vec2 = CAR_SIZE,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.start = start
        self.dest = dest
        self.prev = start
        self.size = size
        self.speed = MAX_SPEED
        self.acceleration = ACCELERATION
        self.position = start.pos
        self.rotation = 0.0
        self.direction = Vec2()
        self.finished = False
        self.in_accident = False
        self.accident_size = Vec2()
        self.accident_position = Vec2()
        self.route: deque[Node] = deque()
        self._clock = clock
        self._wait_start = clock()
        self.texture: object | None = None
        if self.textures:
            pick = Rando(len(self.textures), rng=rng).uniroll()
            self.texture = self.textures[pick - 1]
        self._find_route()

    @classmethod
    def add_texture(cls, texture: object) -> None:
        cls.textures.append(texture)

    @property
    def bounds(self) -> Rect:
        """Axis-aligned bounds of the car's body."""
        return rotated_bounds(self.position, self.size, self.rotation)

    def _find_route(self) -> None:
        self.route.extend(search_astar(self.start, self.dest))

    def update(
        self,
        game_time: float,
        delta_time: float,
        cars: Iterable[Car],
        light_networks: Mapping[int, TrafficLightNetwork],
    ) -> None:
        """Move the car for one frame of `delta_time` seconds."""
        cars = list(cars)
        if not self.route:
            self.finished = True
            return

        if not self.in_accident and self._check_accident(cars):
            self._handle_accident()

        blocked = any(
            not self.has_right_of_way(other) for other in cars if other is not self
        )
        if blocked:
            if self._clock() - self._wait_start < WAIT_SECONDS:
                return
        self._wait_start = self._clock()

        delta_step = delta_time * self.speed
        if distance(self.position, self.route[0].pos) < delta_step:
            self.prev.increment_counter(game_time)
            self.position = self.route[0].pos
            self.prev = self.route.popleft()
            if not self.route or distance(self.dest.pos, self.route[0].pos) < delta_step:
                self.finished = True
                return
            heading = _unit(self.route[0].pos - self.prev.pos)
            if heading is not None:
                self.direction = heading
            d = self.direction
            if d.x == 1:
                self.rotation = 90
            elif d.x == -1:
                self.rotation = 270
            elif d.y == -1:
                self.rotation = 0
            elif d.y == 1:
                self.rotation = 180

        self._calculate_velocity(delta_time, cars, light_networks)
        self.position = self.position + self.direction * (delta_time * self.speed)

    def _front_hits(self, rect: Rect) -> bool:
        reach = self.direction * self.size.y
        return rect.contains(self.position + reach) or rect.contains(
            self.position + reach * 0.51
        )

    def _red_light_ahead(self, light_networks: Mapping[int, TrafficLightNetwork]) -> bool:
        return any(
            not light.can_drive and self._front_hits(light.blocker_bounds)
            for network in light_networks.values()
            for light in network.lights
        )

    def _obstacle_ahead(
        self, cars: list[Car], light_networks: Mapping[int, TrafficLightNetwork]
    ) -> bool:
        return any(self._front_hits(car.bounds) for car in cars) or self._red_light_ahead(
            light_networks
        )

    def _accelerate(self, delta_time: float) -> None:
        self.speed = min(self.speed + self.acceleration * delta_time, MAX_SPEED)

    def _calculate_velocity(
        self,
        delta_time: float,
        cars: list[Car],
        light_networks: Mapping[int, TrafficLightNetwork],
    ) -> None:
        if self._obstacle_ahead(cars, light_networks):
            self.speed = 0.0
            return
        self._accelerate(delta_time)

        others = [car for car in cars if car is not self]
        if self.route:
            target = self.route[0].pos
            for car in others:
                if car.route and distance(car.position, target) < NEXT_NODE_CLEARANCE:
                    self.speed = max(
                        self.speed - self.acceleration * delta_time * 1.5, 0.0
                    )
                    return

        if any(not self.has_right_of_way(car) for car in others):
            self.speed = max(self.speed - self.acceleration * delta_time, 0.0)
            return

        if self.route:
            my_next = self.route[0]
            for car in others:
                if car.route and car.route[0] is my_next:
                    if distance(car.position, my_next.pos) < NEXT_NODE_CLEARANCE:
                        self.speed = 0.0
                        return

        if self._obstacle_ahead(cars, light_networks):
            self.speed = 0.0
            return
        self._accelerate(delta_time)

    def _check_accident(self, cars: list[Car]) -> bool:
        min_safe = self.size.y * 0.05
        return any(
            car is not self
            and distance(self.position, car.position) < min_safe
            and dot(self.direction, car.direction) > 0.8
            for car in cars
        )

    def _handle_accident(self) -> None:
        self.in_accident = True
        self.speed = 0.0
        Car.accident_count += 1
        self.accident_size = self.size * ACCIDENT_SCALE
        self.accident_position = self.position
        if self.route:
            self.prev.blocked = True
            self.route[0].blocked = True
            self._find_route()

    def has_right_of_way(self, other: Car) -> bool:
        """Whether this car may go on rather than yield to `other` at a shared node."""
        if not self.route or not other.route:
            return True
        my_next = self.route[0]
        other_next = other.route[0]
        if my_next is not other_next:
            return True

        my_dist = distance(self.position, my_next.pos)
        other_dist = distance(other.position, other_next.pos)
        if my_dist > RIGHT_OF_WAY_RANGE or other_dist > RIGHT_OF_WAY_RANGE:
            return True
        if my_dist < other_dist:
            return True

        my_dir = _unit(my_next.pos - self.position)
        other_dir = _unit(other_next.pos - other.position)
        if my_dir is None or other_dir is None:
            return True
        mine = direction_to_index(my_dir)
        theirs = direction_to_index(other_dir)
        if mine == -1 or theirs == -1:
            return True
        if (mine + 1) % 4 == theirs:
            return False
        if (theirs + 1) % 4 == mine:
            return False
        return True