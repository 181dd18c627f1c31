"""
Seeded, reproducible (non-cryptographic) random number generation.
"""
from .generator import Seed

__all__ = ["Seed"]
