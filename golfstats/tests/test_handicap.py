import re

import pytest

from golfstats.rounds.handicap import (
    NO_HANDICAP,
    calculate_handicap,
    format_handicap,
    format_score,
    is_no_handicap,
)


@pytest.mark.parametrize("scores", [[], [4], [4, -2]])
def test_too_few_rounds_returns_sentinel(scores: list[int]) -> None:
    assert calculate_handicap(scores) == 55.0
    assert is_no_handicap(calculate_handicap(scores))


def test_three_rounds_uses_all() -> None:
    assert calculate_handicap([3, 1, 2]) == pytest.approx(2.0)


def test_uses_lowest_five_only() -> None:
    assert calculate_handicap([10, 5, 1, 4, 9, 2, 3]) == pytest.approx(3.0)


def test_negative_scores_mean() -> None:
    assert calculate_handicap([-3, -1, 0]) == pytest.approx(-4 / 3)


def test_input_is_not_mutated() -> None:
    scores = [5, 1, 3]
    calculate_handicap(scores)
    assert scores == [5, 1, 3]


def test_sentinel_value() -> None:
    assert NO_HANDICAP == 55.0


@pytest.mark.parametrize(
    "value, expected",
    [(4.0, "4"), (0.0, "0"), (-2.0, "-2"), (10 / 3, "3.3"), (-2.5, "-2.5")],
)
def test_format_handicap(value: float, expected: str) -> None:
    assert format_handicap(value) == expected


def test_format_handicap_non_integer_has_one_decimal() -> None:
    assert re.fullmatch(r"4\.[23]", format_handicap(4.25))


@pytest.mark.parametrize("score, expected", [(5, "+5"), (0, "0"), (-3, "-3")])
def test_format_score(score: int, expected: str) -> None:
    assert format_score(score) == expected
