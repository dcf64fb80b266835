"""Shared utilities for time and randomness."""

from .randomness import shuffled
from .time import age_of, utcnow

__all__ = [
    "age_of",
    "shuffled",
    "utcnow",
]
