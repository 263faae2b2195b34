from __future__ import annotations

from typing import Iterable

# Returned instead of a handicap when a player has too few rounds.
# Callers compare against it directly.
NO_HANDICAP: float = 55.0

MIN_ROUNDS_FOR_HANDICAP = 3
COUNTED_ROUNDS = 5


def calculate_handicap(scores: Iterable[int]) -> float:
    """Mean of the lowest ``COUNTED_ROUNDS`` scores, or ``NO_HANDICAP``."""

    ordered = sorted(scores)
    if len(ordered) < MIN_ROUNDS_FOR_HANDICAP:
        return NO_HANDICAP

    best = ordered[: min(len(ordered), COUNTED_ROUNDS)]
    return sum(best) / len(best)


def is_no_handicap(value: float) -> bool:
    return value == NO_HANDICAP


def format_handicap(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_score(score: int) -> str:
    if score > 0:
        return f"+{score}"
    return str(score)


__all__ = [
    "COUNTED_ROUNDS",
    "MIN_ROUNDS_FOR_HANDICAP",
    "NO_HANDICAP",
    "calculate_handicap",
    "format_handicap",
    "format_score",
    "is_no_handicap",
]
