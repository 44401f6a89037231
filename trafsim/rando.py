"""Random numbers drawn from a normal or a uniform distribution."""

from __future__ import annotations

import random


class Rando:
    """Random source around a single number `max_roll`.

    `roll` draws from a normal distribution with mean `max_roll` and the given
    standard deviation; `uniroll` draws uniformly from 1..max_roll.
    """

    def __init__(
        self, max_roll: float, std: float = 1.5, rng: random.Random | None = None
    ) -> None:
        if std <= 0:
            raise ValueError("standard deviation must be positive")
        self.max_roll = max_roll
        self.std = std
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        """Normally distributed value, truncated toward zero."""
        return int(self._rng.gauss(self.max_roll, self.std))

    def uniroll(self) -> int:
        """Uniformly distributed integer in 1..max_roll."""
        upper = int(self.max_roll)
        if upper < 1:
            raise ValueError("uniform range needs max_roll of at least 1")
        return self._rng.randint(1, upper)