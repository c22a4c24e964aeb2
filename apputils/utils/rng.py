"""Seeded random number generator for reproducible UI randomness."""

import math
from typing import List, MutableSequence, Optional, Sequence

import numpy as np

from ..domain.arc4 import ARC4Generator
from ..domain.sampling import weighted_random_element
from ..domain.types import DEFAULT_DROP, UINT64_MAX, RNGConfig, T, WeightOf


def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & UINT64_MAX
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & UINT64_MAX
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & UINT64_MAX
    return x ^ (x >> 31)


def derive_seed(seed: int, stream_index: int) -> int:
    """
    Derive the seed of an independent stream from a base seed.

    Use one stream per thread or subsystem instead of sharing a generator.
    """
    if stream_index < 0:
        raise ValueError(f"Stream index must be non-negative, got {stream_index}")
    return _splitmix64(_splitmix64(seed & UINT64_MAX) ^ (stream_index & UINT64_MAX))


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: int, drop: int = DEFAULT_DROP):
        self._drop = drop
        self._rng = ARC4Generator(seed, drop)

    @classmethod
    def from_config(cls, config: RNGConfig) -> "SeededRNG":
        """Create a generator from a validated configuration."""
        return cls(config.seed, config.drop)

    @property
    def seed(self) -> int:
        """Get the current seed."""
        return self._rng.seed

    def set_seed(self, seed: int):
        """Set a new seed, restarting the stream."""
        self._rng = ARC4Generator(seed, self._drop)

    def spawn(self, count: int) -> List["SeededRNG"]:
        """Create `count` independent child generators without drawing from this one."""
        return [SeededRNG(derive_seed(self.seed, index), self._drop) for index in range(count)]

    def next_uint64(self) -> int:
        """Generate the next unsigned 64-bit value."""
        return self._rng.next_uint64()

    def uniform_int(self, low: int, high: int, inclusive: bool = False) -> int:
        """Generate a random integer in [low, high) or [low, high]."""
        return self._rng.uniform_int(low, high, inclusive)

    def uniform_float(self, low: float, high: float, inclusive: bool = False) -> float:
        """Generate a random float in [low, high) or [low, high]."""
        return self._rng.uniform_float(low, high, inclusive)

    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Generate a random integer N such that a <= N <= b."""
        return self._rng.uniform_int(a, b, inclusive=True)

    def uniform(self, a: float, b: float) -> float:
        """Generate a random float N such that a <= N <= b."""
        return self._rng.uniform_float(a, b, inclusive=True)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if len(seq) == 0:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._rng.uniform_int(0, len(seq))]

    def shuffle(self, seq: MutableSequence) -> None:
        """Shuffle the sequence in place."""
        for i in range(len(seq) - 1, 0, -1):
            j = self._rng.uniform_int(0, i, inclusive=True)
            seq[i], seq[j] = seq[j], seq[i]

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        """Choose k unique random elements from the population."""
        n = len(population)
        if not (0 <= k <= n):
            raise ValueError(f"Sample size must be between 0 and {n}, got {k}")

        pool = list(population)
        # Partial Fisher-Yates: the first k slots end up holding the sample
        for i in range(k):
            j = self._rng.uniform_int(i, n)
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:k]

    def gauss(self, mu: float, sigma: float) -> float:
        """Generate a random float with Gaussian distribution."""
        # Box-Muller; 1 - u keeps the log argument in (0, 1]
        u1 = 1.0 - self._rng.random()
        u2 = self._rng.random()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mu + sigma * z

    def random_array(self, size: int) -> np.ndarray:
        """Generate `size` floats in [0.0, 1.0) as a numpy array."""
        if size < 0:
            raise ValueError(f"Array size must be non-negative, got {size}")
        return np.fromiter((self._rng.random() for _ in range(size)), dtype=np.float64, count=size)

    def weighted_choice(self, elements: Sequence[T], weight_of: WeightOf[T]) -> Optional[T]:
        """Choose an element by weight, or None if nothing can be chosen."""
        return weighted_random_element(self, elements, weight_of)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self.seed}, drop={self._drop})"
