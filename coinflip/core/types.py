from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator

import numpy as np

UNKNOWN_LABEL = "UNKNOWN"


class Outcome(IntEnum):
    """Result of a single coin flip."""

    HEADS = 0
    TAILS = 1


def outcome_label(code: int) -> str:
    """Human readable label for a raw outcome code."""
    try:
        return Outcome(int(code)).name
    except ValueError:
        return UNKNOWN_LABEL


def _empty_codes() -> np.ndarray:
    return np.empty(0, dtype=np.int8)


@dataclass(frozen=True, eq=False)
class FlipSequence:
    """Ordered outcomes of one generation request.

    ``codes`` holds the raw 0/1 values; replacing a sequence means assigning
    a new instance, the old array is dropped with it.
    """

    codes: np.ndarray = field(default_factory=_empty_codes)

    @classmethod
    def empty(cls) -> "FlipSequence":
        return cls()

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[int]) -> "FlipSequence":
        codes = np.fromiter((int(Outcome(o)) for o in outcomes), dtype=np.int8)
        return cls(codes)

    def __len__(self) -> int:
        return int(self.codes.size)

    def __iter__(self) -> Iterator[Outcome]:
        for code in self.codes.tolist():
            yield Outcome(code)

    def __bool__(self) -> bool:
        return self.codes.size > 0

    def to_list(self) -> list[int]:
        return self.codes.tolist()


__all__ = ["FlipSequence", "Outcome", "UNKNOWN_LABEL", "outcome_label"]
