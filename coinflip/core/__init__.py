"""Core pieces of the coin flip simulator: generation, outcome types and streak statistics."""

from . import flips, rng, streaks, types

__all__ = ["flips", "rng", "streaks", "types"]
