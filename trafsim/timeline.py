"""Game clock running over one simulated day."""

from __future__ import annotations

from typing import Protocol

SECONDS_PER_DAY = 24 * 60 * 60
MORNING = 7 * 60 * 60
AFTERNOON = 15 * 60 * 60


class _DayMap(Protocol):
    def init_day(self) -> None: ...

    def remove_cars(self) -> None: ...


class TimeLine:
    """Keeps game time in seconds and starts a new day on the map when it runs out."""

    def __init__(self, traffic_map: _DayMap) -> None:
        self.map = traffic_map
        self.game_time = 0.0
        self.multiplier = 1.0

    def update(self, elapsed: float, simulating: bool) -> None:
        """Advance game time by `elapsed` real seconds while simulating."""
        if simulating:
            self.game_time += elapsed * self.multiplier
            if self.game_time > SECONDS_PER_DAY:
                self.restart()

    def restart(self) -> None:
        """Go back to midnight and start a new day on the map."""
        self.game_time = 0.0
        self.map.init_day()

    def _wrap(self) -> None:
        if self.game_time > SECONDS_PER_DAY:
            self.restart()

    def time_to_string(self) -> str:
        seconds = self.game_time
        hours = int(seconds / 60 / 60) % 60
        minutes = int(seconds / 60) % 60
        secs = int(seconds) % 60
        return f"{hours}:{minutes}:{secs}"

    def set_hours(self, hours: float) -> None:
        """Jump forward to `hours`; earlier times are ignored."""
        if hours * 60 * 60 > self.game_time:
            self.game_time = hours * 60 * 60
        self._wrap()

    def morning(self) -> None:
        if MORNING > self.game_time:
            self.restart()
        self.game_time = float(MORNING)

    def afternoon(self) -> None:
        if AFTERNOON > self.game_time:
            self.restart()
        self.game_time = float(AFTERNOON)
        self.map.remove_cars()
        self._wrap()

    def hop(self, minutes: float) -> None:
        """Skip ahead `minutes`, clearing the cars on the road."""
        self.game_time += minutes * 60
        self.map.remove_cars()
        self._wrap()