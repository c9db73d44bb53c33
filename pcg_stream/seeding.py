"""Seed sources for the generator.

Seeding is deliberately coarse: a wall-clock seeded ``random.Random`` supplies
four 16-bit chunks per 64-bit word. The result only has to decorrelate the two
seed words from each other and across runs; any zero-argument callable that
returns an int can stand in for it.
"""

import random
import secrets
import time
from typing import Callable, Optional

SeedSource = Callable[[], int]

CHUNK_BITS = 16
CHUNK_RANGE = 1 << CHUNK_BITS
FALLBACK_SEED = 0


def pack_chunks(a: int, b: int, c: int, d: int) -> int:
    """Pack four 16-bit chunks into one 64-bit word, ``a`` lowest."""
    packed = 0
    for index, chunk in enumerate((a, b, c, d)):
        packed |= (chunk % CHUNK_RANGE) << (CHUNK_BITS * index)
    return packed


def _clock_seed() -> int:
    try:
        return time.time_ns()
    except (OSError, OverflowError):
        return FALLBACK_SEED


class TimeSeededSource:
    """Low quality 64-bit seeds from a clock-seeded ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = _clock_seed() if seed is None else seed
        self._random = random.Random(self.seed)

    def draw_chunk(self) -> int:
        return self._random.randrange(CHUNK_RANGE)

    def __call__(self) -> int:
        # chunks are drawn in bit order: a, then b, c, d
        a = self.draw_chunk()
        b = self.draw_chunk()
        c = self.draw_chunk()
        d = self.draw_chunk()
        return pack_chunks(a, b, c, d)


def entropy_seed_source() -> int:
    """64 bits straight from the operating system CSPRNG."""
    return secrets.randbits(64)
