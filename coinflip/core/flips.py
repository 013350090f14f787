from __future__ import annotations

import numpy as np

from .setup import logger
from .types import FlipSequence


def generate(n: int, rng: np.random.Generator) -> FlipSequence:
    """Flip a fair coin ``n`` times.

    Each position is an independent uniform bit (0 = HEADS, 1 = TAILS).
    A ``MemoryError`` from the allocation is left to the caller, which treats
    it as fatal.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    codes = rng.integers(0, 2, size=n, dtype=np.int8)
    logger.info(f"Generated {n} coin flips")
    return FlipSequence(codes)


__all__ = ["generate"]
