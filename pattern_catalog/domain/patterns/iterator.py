"""Iterator pattern: an endless Fibonacci iterator and a finite random collection."""
import random
from typing import Iterator, Optional, Tuple


class FibonacciSequence:
    """Endless iterator over the Fibonacci numbers, starting at 1."""

    def __init__(self) -> None:
        self.values: Tuple[int, int] = (0, 1)

    def __iter__(self) -> "FibonacciSequence":
        return self

    def __next__(self) -> int:
        self.values = (self.values[1], self.values[0] + self.values[1])
        return self.values[0]


class RandomGenerator:
    """Iterable of random integers in ``[0, upper)``.

    The counter is decremented before every draw and iteration stops once it
    reaches zero, so a generator built with ``count=n`` yields ``n - 1`` values.
    Each call to ``iter()`` starts from the initial counter again.
    """

    def __init__(self, count: int = 10, upper: int = 200, seed: Optional[int] = None) -> None:
        self.count = count
        self.upper = upper
        self._random = random.Random(seed)

    def __iter__(self) -> Iterator[int]:
        remaining = self.count
        while True:
            remaining -= 1
            if remaining <= 0:
                return
            yield self._random.randrange(self.upper)
