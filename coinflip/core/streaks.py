from __future__ import annotations

from dataclasses import dataclass

from .setup import logger
from .types import FlipSequence, Outcome

DEFAULT_SEQUENCE_LENGTH = 5


def _percent(part: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return part / total * 100


@dataclass(frozen=True)
class FlipStats:
    total: int = 0
    total_heads: int = 0
    total_tails: int = 0
    heads_sequences: int = 0
    tails_sequences: int = 0
    sequence_length: int = DEFAULT_SEQUENCE_LENGTH

    @property
    def heads_percent(self) -> float:
        return _percent(self.total_heads, self.total)

    @property
    def tails_percent(self) -> float:
        return _percent(self.total_tails, self.total)

    @property
    def total_sequences(self) -> int:
        return self.heads_sequences + self.tails_sequences


def compute_stats(
    sequence: FlipSequence, sequence_length: int = DEFAULT_SEQUENCE_LENGTH
) -> FlipStats:
    """Single pass over ``sequence`` counting outcomes and streaks.

    A streak is credited once, at the flip where it reaches exactly
    ``sequence_length``; growing past that length does not count again.
    """
    if sequence_length < 1:
        raise ValueError("sequence_length must be at least 1.")

    heads = tails = 0
    heads_streak = tails_streak = 0
    heads_sequences = tails_sequences = 0

    for code in sequence.to_list():
        if code == Outcome.HEADS:
            heads += 1
            heads_streak += 1
            tails_streak = 0
            if heads_streak == sequence_length:
                heads_sequences += 1
        else:
            tails += 1
            tails_streak += 1
            heads_streak = 0
            if tails_streak == sequence_length:
                tails_sequences += 1

    stats = FlipStats(
        total=heads + tails,
        total_heads=heads,
        total_tails=tails,
        heads_sequences=heads_sequences,
        tails_sequences=tails_sequences,
        sequence_length=sequence_length,
    )
    logger.debug(f"Computed statistics: {stats}")
    return stats


__all__ = ["DEFAULT_SEQUENCE_LENGTH", "FlipStats", "compute_stats"]
