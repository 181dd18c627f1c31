"""
Palette selection: table row (by index or random draw) → normalized float32 RGBA pair.
Alpha is supplied by the caller and passed through unclamped.
"""
import logging
import operator
import random as _random
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from ..errors import PaletteIndexError
from .data.palettes import PALETTE_LENGTH, PALETTES

logger = logging.getLogger(__name__)

_CHANNEL_MAX = np.float32(255.0)


@runtime_checkable
class UniformRangeSampler(Protocol):
    """Anything that can draw a uniform int from the half-open range [low, high)."""

    def gen_range(self, low: int, high: int) -> int:
        ...


def normalize(color: int, alpha: float) -> "np.ndarray":
    """
    Unpack 0xRRGGBB into a read-only float32 [r, g, b, alpha].
    Each channel is masked to 8 bits and divided by 255 in single precision.
    """
    color = operator.index(color)
    rgb = np.array(
        [(color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF],
        dtype=np.float32,
    )
    out = np.empty(4, dtype=np.float32)
    out[:3] = rgb / _CHANNEL_MAX
    out[3] = alpha
    out.flags.writeable = False
    return out


def _check_index(index) -> int:
    # bool is an int subclass; True would silently select row 1
    if isinstance(index, (bool, np.bool_)):
        raise TypeError("Palette index must be an integer, not bool")
    try:
        i = operator.index(index)
    except TypeError:
        raise TypeError(f"Palette index must be an integer, not {type(index).__name__}") from None
    # No negative wraparound: -1 is an error, not the last row
    if not 0 <= i < PALETTE_LENGTH:
        raise PaletteIndexError(i, PALETTE_LENGTH)
    return i


def _draw_index(rng, n: int) -> int:
    """Consume exactly one ranged draw from rng."""
    if isinstance(rng, UniformRangeSampler):
        return rng.gen_range(0, n)
    if isinstance(rng, np.random.Generator):
        return int(rng.integers(0, n))
    if isinstance(rng, _random.Random):
        return rng.randrange(0, n)
    raise TypeError(
        f"Palette.random needs a uniform range sampler (gen_range), numpy Generator or random.Random; "
        f"got {type(rng).__name__}"
    )


@dataclass(frozen=True, eq=False)
class Palette:
    """
    Foreground/background color pair from the fixed table.
    fg and bg are read-only float32 arrays [r, g, b, a]; r/g/b in [0, 1], a as given.
    Build with Palette.pick or Palette.random.
    """

    index: int
    fg: "np.ndarray"
    bg: "np.ndarray"

    def __post_init__(self):
        object.__setattr__(self, "index", _check_index(self.index))
        for name in ("fg", "bg"):
            arr = getattr(self, name)
            if not isinstance(arr, np.ndarray) or arr.dtype != np.float32 or arr.shape != (4,):
                raise ValueError(f"Palette.{name} must be a float32 array of shape (4,); use Palette.pick")
            if arr.flags.writeable:
                raise ValueError(f"Palette.{name} must be read-only; use Palette.pick")

    @classmethod
    def pick(cls, index: int, fg_alpha: float = 1.0, bg_alpha: float = 1.0) -> "Palette":
        """Return table row `index` (0 <= index < 6) with the given alphas."""
        i = _check_index(index)
        fg, bg = PALETTES[i]
        return cls(index=i, fg=normalize(fg, fg_alpha), bg=normalize(bg, bg_alpha))

    @classmethod
    def random(cls, rng, fg_alpha: float = 1.0, bg_alpha: float = 1.0) -> "Palette":
        """Draw one uniform row index from rng, then behave like pick."""
        index = _draw_index(rng, PALETTE_LENGTH)
        logger.debug("Drew palette index %s", index)
        return cls.pick(index, fg_alpha, bg_alpha)

    def as_tuples(self) -> tuple[tuple[float, ...], tuple[float, ...]]:
        """(fg, bg) as plain Python floats, for callers that don't use numpy."""
        return tuple(float(c) for c in self.fg), tuple(float(c) for c in self.bg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return (
            self.index == other.index
            and np.array_equal(self.fg, other.fg)
            and np.array_equal(self.bg, other.bg)
        )

    def __hash__(self) -> int:
        return hash((self.index, self.fg.tobytes(), self.bg.tobytes()))

    def __repr__(self) -> str:
        return f"Palette(index={self.index}, fg={self.fg.tolist()}, bg={self.bg.tolist()})"
