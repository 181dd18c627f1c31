"""
Reproducible (NOT cryptographic) random source: numpy PCG64 plus the seed that started it.
Log `seed` and replay a run with Seed.from_value(seed).
"""
import copy
import logging
import math
import threading
import time
from numbers import Real

import numpy as np

from ..errors import ClockError, EmptyRangeError

logger = logging.getLogger(__name__)

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

# Last clock-derived seed handed out in this process (guards against coarse clocks)
_last_auto_seed: int | None = None
_auto_seed_lock = threading.Lock()


def _clock_seed() -> int:
    """Nanoseconds since the Unix epoch, truncated to 64 bits; strictly increasing per process."""
    global _last_auto_seed
    ns = time.time_ns()
    if ns < 0:
        raise ClockError(f"System clock is before the Unix epoch ({ns} ns); cannot derive a seed")
    seed = ns & U64_MAX
    with _auto_seed_lock:
        if _last_auto_seed is not None and seed <= _last_auto_seed:
            seed = (_last_auto_seed + 1) & U64_MAX
        _last_auto_seed = seed
    return seed


def _is_int(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))


class Seed:
    """
    Seeded generator. Seed() seeds from the wall clock; Seed.from_value(n) replays n.
    Not safe for concurrent use: give each thread its own instance.
    """

    def __init__(self, value: int | None = None):
        if value is None:
            value = _clock_seed()
            source = "clock"
        else:
            value = self._check_value(value)
            source = "explicit"
        self._seed = value
        self._rng = np.random.Generator(np.random.PCG64(value))
        logger.debug("Seeded generator with %d (%s)", value, source)

    @classmethod
    def from_value(cls, value: int) -> "Seed":
        """Generator seeded with `value` (0 <= value < 2**64); same value → same sequence."""
        if value is None:
            raise TypeError("Seed value must be an integer, not None")
        return cls(value)

    @staticmethod
    def _check_value(value) -> int:
        if not _is_int(value):
            raise TypeError(f"Seed value must be an integer, not {type(value).__name__}")
        value = int(value)
        if not 0 <= value <= U64_MAX:
            raise ValueError(f"Seed value {value} outside [0, 2**64)")
        return value

    @property
    def seed(self) -> int:
        """The seed this generator started from."""
        return self._seed

    @property
    def rng(self) -> np.random.Generator:
        """Underlying numpy Generator, for anything beyond the helpers below (normal, shuffle, ...)."""
        return self._rng

    def next_u32(self) -> int:
        """Uniform int in [0, 2**32)."""
        return int(self._rng.integers(0, U32_MAX, dtype=np.uint64, endpoint=True))

    def next_u64(self) -> int:
        """Uniform int in [0, 2**64)."""
        return int(self._rng.integers(0, U64_MAX, dtype=np.uint64, endpoint=True))

    def gen_range(self, low, high=None, *, inclusive: bool = False):
        """
        Uniform value from [low, high), or [low, high] when inclusive=True.
        Int bounds give an int, any float bound gives a float.
        A step-1 `range` object may be passed instead of the two bounds.
        Raises EmptyRangeError (before consuming any state) if the range has no values.
        """
        if isinstance(low, range):
            if high is not None:
                raise TypeError("gen_range() takes either a range object or two bounds, not both")
            if low.step != 1:
                raise ValueError(f"gen_range() needs a contiguous range (step 1), got step {low.step}")
            low, high = low.start, low.stop
        elif high is None:
            raise TypeError("gen_range() missing upper bound")

        if _is_int(low) and _is_int(high):
            return self._gen_int(int(low), int(high), inclusive)
        for bound in (low, high):
            if isinstance(bound, (bool, np.bool_)) or not isinstance(bound, Real):
                raise TypeError(f"gen_range() bounds must be numbers, not {type(bound).__name__}")
        return self._gen_float(float(low), float(high), inclusive)

    def _gen_int(self, low: int, high: int, inclusive: bool) -> int:
        last = high if inclusive else high - 1
        if last < low:
            raise EmptyRangeError(low, high, inclusive)
        # Draw an offset so bounds anywhere in Python's int range work, not just int64
        span = last - low
        if span > U64_MAX:
            raise ValueError(f"gen_range() span {span + 1} exceeds 2**64 values")
        return low + int(self._rng.integers(0, span, dtype=np.uint64, endpoint=True))

    def _gen_float(self, low: float, high: float, inclusive: bool) -> float:
        if not (math.isfinite(low) and math.isfinite(high)):
            raise ValueError(f"gen_range() bounds must be finite, got [{low}, {high}]")
        if inclusive:
            if low > high:
                raise EmptyRangeError(low, high, inclusive)
            if low == high:
                return low
            upper = float(np.nextafter(high, math.inf))
            if not math.isfinite(upper - low):
                raise ValueError(f"gen_range() span of [{low}, {high}] overflows a float")
            return min(float(self._rng.uniform(low, upper)), high)
        if not low < high:
            raise EmptyRangeError(low, high, inclusive)
        if not math.isfinite(high - low):
            raise ValueError(f"gen_range() span of [{low}, {high}) overflows a float")
        v = float(self._rng.uniform(low, high))
        # low + (high - low) * u can round up to high
        return v if v < high else float(np.nextafter(high, -math.inf))

    def copy(self) -> "Seed":
        """Independent generator with the same seed and current state."""
        clone = Seed.__new__(Seed)
        clone._seed = self._seed
        clone._rng = copy.deepcopy(self._rng)
        return clone

    def __copy__(self) -> "Seed":
        return self.copy()

    def __repr__(self) -> str:
        return f"Seed(seed={self._seed})"
