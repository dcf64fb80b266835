"""
Randomness helpers. Every stage takes a random.Random so tests can seed it.
"""

import random
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random) -> List[T]:
    """Uniform random permutation of items as a new list."""
    out = list(items)
    rng.shuffle(out)
    return out
