"""Injectable randomness for list lengths, default scalars and type picks."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniform draws used by every generated mock value."""

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer N such that low <= N <= high."""
        ...

    def uniform(self, low: float, high: float) -> float:
        """Return a float N such that low <= N <= high."""
        ...


class PseudoRandomSource:
    """RandomSource backed by a private ``random.Random`` instance.

    Args:
        seed: Optional seed; equal seeds yield equal draw sequences.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._random = random.Random(seed)

    def uniform_int(self, low: int, high: int) -> int:
        return self._random.randint(low, high)

    def uniform(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)


def choice(source: RandomSource, items: Sequence[T]) -> T:
    """Pick one element of ``items`` uniformly."""
    if not items:
        raise IndexError("Cannot choose from an empty sequence")
    return items[source.uniform_int(0, len(items) - 1)]
