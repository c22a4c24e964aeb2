"""Core type definitions shared by the generator and its consumers."""

from dataclasses import dataclass
from typing import Callable, Literal, Protocol, Tuple, TypeVar

T = TypeVar("T")

# Maps an element to its (non-negative) selection weight
WeightOf = Callable[[T], int]

# Rectangle edges, in the order they are drawn from
Edge = Literal["top", "leading", "bottom", "trailing"]
EDGES: Tuple[Edge, ...] = ("top", "leading", "bottom", "trailing")

UINT64_MAX = (1 << 64) - 1

# Initial keystream bytes thrown away after key scheduling
DEFAULT_DROP = 768


class RandomSource(Protocol):
    """Anything that can hand out seeded draws."""

    def next_uint64(self) -> int: ...

    def uniform_int(self, low: int, high: int, inclusive: bool = False) -> int: ...

    def uniform_float(self, low: float, high: float, inclusive: bool = False) -> float: ...


@dataclass
class RNGConfig:
    """Configuration for a seeded generator."""
    seed: int = 0
    drop: int = DEFAULT_DROP  # Keystream bytes discarded before the first draw

    def __post_init__(self):
        """Validate seed and drop count."""
        if not (0 <= self.seed <= UINT64_MAX):
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got {self.seed}")
        if self.drop < 0:
            raise ValueError(f"Drop count must be non-negative, got {self.drop}")
