from __future__ import annotations

import time
from typing import Optional

import numpy as np

from .setup import logger


def wall_clock_seed() -> int:
    """Return a seed derived from the current wall-clock time (nanoseconds)."""
    return time.time_ns()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy PCG64 generator, seeded from the wall clock by default."""
    if seed is None:
        seed = wall_clock_seed()
    logger.debug(f"Seeding PCG64 generator with {seed}")
    return np.random.Generator(np.random.PCG64(seed))


__all__ = ["make_rng", "wall_clock_seed"]
