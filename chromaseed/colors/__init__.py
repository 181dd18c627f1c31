"""
Colors: fixed foreground/background palette table and selection.
"""
from .data.palettes import PALETTES, PALETTE_LENGTH
from .palette import Palette, UniformRangeSampler, normalize

__all__ = ["PALETTES", "PALETTE_LENGTH", "Palette", "UniformRangeSampler", "normalize"]
