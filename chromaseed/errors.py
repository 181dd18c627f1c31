"""
Exception types. Every error raised on purpose by chromaseed derives from ChromaseedError,
and also from the builtin a caller would naturally catch (IndexError, ValueError, ...).
"""


class ChromaseedError(Exception):
    """Base class for chromaseed errors."""


class PaletteIndexError(ChromaseedError, IndexError):
    """Palette index outside the fixed table."""
    def __init__(self, index: int, length: int):
        super().__init__(f"Palette index {index} out of range (expected 0 <= index < {length})")
        self.index = index
        self.length = length


class EmptyRangeError(ChromaseedError, ValueError):
    """Sampling range contains no values."""
    def __init__(self, low, high, inclusive: bool = False):
        bracket = "]" if inclusive else ")"
        super().__init__(f"Cannot sample from empty range [{low}, {high}{bracket}")
        self.low = low
        self.high = high
        self.inclusive = inclusive


class ClockError(ChromaseedError, RuntimeError):
    """System clock unusable for seeding (e.g. reads before the Unix epoch)."""


class ConfigError(ChromaseedError, ValueError):
    """Config value has the wrong type or is out of range."""
