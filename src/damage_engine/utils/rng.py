"""
Injectable random sources

Every random decision the engine makes (accuracy, critical hit, damage roll, protect
success) goes through a RandomSource. Sources are owned by the caller, so parallel
resolutions never share one unless the caller chooses to.
"""

import random as _random
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform draw in [0, 1)"""
        ...

    def choice_index(self, count: int) -> int:
        """Uniform index in [0, count)"""
        ...


class LcgRandom:
    """32-bit linear congruential generator, the same one the cartridge games use.

    seed = (seed * 1664525 + 1013904223) mod 2^32, with draws taken from the upper 16 bits.
    Seeding it identically replays a battle exactly.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def rand16(self) -> int:
        """Advance and return the upper 16 bits (0..65535)."""
        self.advance()
        return (self.seed >> 16) & 0xFFFF

    def random(self) -> float:
        return self.rand16() / 0x10000

    def choice_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return self.rand16() % count


class PythonRandom:
    """Mersenne Twister backed source for Monte Carlo exploration"""

    def __init__(self, seed: int | None = None):
        self._rng = _random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def choice_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return self._rng.randrange(count)


class FixedRandom:
    """Always returns the same value.

    FixedRandom(0.0) makes every probabilistic check succeed and picks the lowest roll;
    FixedRandom(0.999) fails every check below certainty and picks the highest roll.
    """

    def __init__(self, value: float = 0.0):
        if not 0.0 <= value < 1.0:
            raise ValueError(f"value must be in [0, 1), got {value}")
        self.value = value

    def random(self) -> float:
        return self.value

    def choice_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return min(count - 1, int(self.value * count))


class ScriptedRandom:
    """Replays a fixed sequence of uniform draws and records how many were taken"""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self.values):
            raise IndexError(f"scripted random source exhausted after {self.calls} draws")
        value = self.values[self.calls]
        self.calls += 1
        return value

    def choice_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return min(count - 1, int(self.random() * count))


def chance(rng: RandomSource, probability) -> bool:
    """Draw against a probability in [0, 1]. Certain outcomes do not consume a draw."""
    if probability <= 0:
        return False
    if probability >= 1:
        return True
    return rng.random() < probability
