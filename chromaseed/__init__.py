"""
chromaseed: fixed foreground/background palettes and a seeded, reproducible random source
for generative graphics.
"""
from .colors import PALETTES, PALETTE_LENGTH, Palette, UniformRangeSampler, normalize
from .config import load_config, make_seed, palette_alphas
from .errors import ChromaseedError, ClockError, ConfigError, EmptyRangeError, PaletteIndexError
from .seed import Seed

__version__ = "0.1.0"

__all__ = [
    "PALETTES",
    "PALETTE_LENGTH",
    "Palette",
    "UniformRangeSampler",
    "normalize",
    "Seed",
    "load_config",
    "make_seed",
    "palette_alphas",
    "ChromaseedError",
    "ClockError",
    "ConfigError",
    "EmptyRangeError",
    "PaletteIndexError",
]
