"""Seeded ARC4 stream generator for reproducible randomness."""

import math
import numbers

from .types import DEFAULT_DROP, UINT64_MAX

# 2**-53, the spacing of doubles in [0.5, 1)
_FLOAT_STEP = 1.0 / (1 << 53)


class ARC4Generator:
    """
    Deterministic random number generator built on the ARC4 keystream.

    The key schedule is keyed with the seed's 8 little-endian bytes, so the whole
    output sequence is a function of the seed alone. Not for cryptographic use.
    """

    def __init__(self, seed: int, drop: int = DEFAULT_DROP):
        if not (0 <= seed <= UINT64_MAX):
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got {seed}")
        if drop < 0:
            raise ValueError(f"Drop count must be non-negative, got {drop}")

        self._seed = seed
        self._drop = drop

        key = seed.to_bytes(8, "little")
        state = list(range(256))
        j = 0
        for i in range(256):
            j = (j + state[i] + key[i % len(key)]) & 0xFF
            state[i], state[j] = state[j], state[i]

        self._state = state
        self._i = 0
        self._j = 0

        # Skip the leading keystream
        self.next_bytes(drop)

    @property
    def seed(self) -> int:
        """Get the seed this generator was built from."""
        return self._seed

    @property
    def drop(self) -> int:
        """Get the number of keystream bytes discarded at construction."""
        return self._drop

    def next_bytes(self, count: int) -> bytes:
        """Return the next `count` keystream bytes."""
        state = self._state
        i, j = self._i, self._j
        out = bytearray(count)

        for n in range(count):
            i = (i + 1) & 0xFF
            j = (j + state[i]) & 0xFF
            state[i], state[j] = state[j], state[i]
            out[n] = state[(state[i] + state[j]) & 0xFF]

        self._i, self._j = i, j
        return bytes(out)

    def next_uint64(self) -> int:
        """Advance the stream and return the next unsigned 64-bit value."""
        return int.from_bytes(self.next_bytes(8), "little")

    def uniform_int(self, low: int, high: int, inclusive: bool = False) -> int:
        """
        Draw an integer uniformly from [low, high) or [low, high].

        Args:
            low: Lower bound (always included)
            high: Upper bound (included only if `inclusive`)
            inclusive: Whether `high` itself can be drawn

        Returns:
            A uniformly distributed integer within the bounds

        Raises:
            ValueError: If a bound is not an integer or the range is empty
        """
        if not (isinstance(low, numbers.Integral) and isinstance(high, numbers.Integral)):
            raise ValueError(f"Range bounds must be integers, got [{low!r}, {high!r}]")
        low, high = int(low), int(high)

        span = high - low + (1 if inclusive else 0)
        if span <= 0:
            bracket = "]" if inclusive else ")"
            raise ValueError(f"Cannot draw from empty range [{low}, {high}{bracket}")
        if span == 1:
            return low

        # Concatenate enough 64-bit words to cover the span, then reject the
        # biased tail so every residue is equally likely.
        words = ((span - 1).bit_length() + 63) // 64
        bound = 1 << (64 * words)
        limit = bound - (bound % span)

        while True:
            value = 0
            for _ in range(words):
                value = (value << 64) | self.next_uint64()
            if value < limit:
                return low + value % span

    def uniform_float(self, low: float, high: float, inclusive: bool = False) -> float:
        """
        Draw a float uniformly from [low, high) or [low, high].

        Raises:
            ValueError: If the range is empty or a bound is not finite
        """
        if not (math.isfinite(low) and math.isfinite(high)):
            raise ValueError(f"Range bounds must be finite, got [{low}, {high}]")
        if high < low or (high == low and not inclusive):
            bracket = "]" if inclusive else ")"
            raise ValueError(f"Cannot draw from empty range [{low}, {high}{bracket}")

        bits = self.next_uint64() >> 11
        unit = bits / ((1 << 53) - 1) if inclusive else bits * _FLOAT_STEP

        width = high - low
        if math.isfinite(width):
            result = low + width * unit
        else:
            # Span wider than the largest double
            result = low * (1.0 - unit) + high * unit
        result = max(result, low)

        if inclusive:
            return min(result, high)
        # Rounding can land exactly on the open upper bound
        if result >= high:
            result = math.nextafter(high, low)
        return result

    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self.uniform_float(0.0, 1.0)

    def __repr__(self) -> str:
        return f"ARC4Generator(seed={self._seed}, drop={self._drop})"
