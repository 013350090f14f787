from __future__ import annotations

from coinflip.console import Console
from coinflip.core.setup import logger
from coinflip.core.streaks import DEFAULT_SEQUENCE_LENGTH, FlipStats, compute_stats
from coinflip.core.types import FlipSequence, outcome_label

DEFAULT_PAGE_SIZE = 20
NO_FLIPS_MESSAGE = "No flips have been generated yet."


def format_row(index: int, code: int) -> str:
    return f"{index:>6}  |   {code}   | {outcome_label(code)}"


def list_flips(console: Console, sequence: FlipSequence, page_size: int = DEFAULT_PAGE_SIZE) -> None:
    """Print every flip, pausing after each full page except the last row."""
    if not sequence:
        console.write(NO_FLIPS_MESSAGE)
        return

    codes = sequence.to_list()
    total = len(codes)
    for i, code in enumerate(codes):
        console.write(format_row(i + 1, code))
        if (i + 1) % page_size == 0 and i < total - 1:
            console.pause()

    console.write("========================")
    console.write(f"Total flips displayed: {total}")
    logger.debug(f"Listed {total} flips")


def format_stats(stats: FlipStats) -> list[str]:
    n = stats.sequence_length
    return [
        "FLIP DISTRIBUTION:",
        "==================",
        f"Total Heads: {stats.total_heads} ({stats.heads_percent:.1f}%)",
        f"Total Tails: {stats.total_tails} ({stats.tails_percent:.1f}%)",
        "",
        "CONSECUTIVE SEQUENCE ANALYSIS:",
        "==============================",
        f"Sequences of {n} consecutive HEADS: {stats.heads_sequences}",
        f"Sequences of {n} consecutive TAILS: {stats.tails_sequences}",
        f"Total consecutive sequences found: {stats.total_sequences}",
    ]


def show_stats(
    console: Console,
    sequence: FlipSequence,
    sequence_length: int = DEFAULT_SEQUENCE_LENGTH,
) -> FlipStats | None:
    if not sequence:
        console.write(NO_FLIPS_MESSAGE)
        console.write("Please use option 1 to generate flips first.")
        return None

    stats = compute_stats(sequence, sequence_length)
    for line in format_stats(stats):
        console.write(line)
    return stats


__all__ = ["DEFAULT_PAGE_SIZE", "NO_FLIPS_MESSAGE", "format_row", "format_stats", "list_flips", "show_stats"]
