"""Plain-text rendering of query results, one output line per list item."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .handicap import format_handicap, format_score
from .models import Round
from .service import ComparisonReport, PlayerReport, PlayerStanding

CLUB_MARKER = "--"


def render_places(places: Iterable[Tuple[str, Sequence[str]]]) -> List[str]:
    lines: List[str] = []
    for location, clubs in places:
        lines.append(location)
        lines.extend(render_clubs(clubs))
    return lines


def render_clubs(clubs: Iterable[str]) -> List[str]:
    return [f"{CLUB_MARKER}{club}" for club in clubs]


def render_rounds(rounds: Iterable[Round]) -> List[str]:
    return [f"{r.player} : {format_score(r.score)}" for r in rounds]


def render_played(report: PlayerReport) -> List[str]:
    if report.has_handicap:
        header = (
            f"{report.player} has a HCP of {format_handicap(report.handicap)}"
            " with following results:"
        )
    else:
        header = f"{report.player} has too few rounds for a handicap:"

    lines = [header]
    lines.extend(
        f"{r.location} : {r.club} : {format_score(r.score)}" for r in report.rounds
    )
    return lines


def _render_standing(standing: PlayerStanding) -> str:
    if standing.rounds_count == 0:
        return f"{standing.player} has played no rounds of golf"
    if not standing.has_handicap:
        return (
            f"{standing.player} has played {standing.rounds_count} rounds of golf,"
            " but hasn't played enough for a handicap"
        )
    return (
        f"{standing.player} has played {standing.rounds_count} rounds of golf,"
        f" with HCP of {format_handicap(standing.handicap)}"
    )


def render_comparison(report: ComparisonReport) -> List[str]:
    lines = [_render_standing(report.first), _render_standing(report.second)]
    if report.outcome == "neither":
        lines.append("Either hasn't played enough golf")
    elif report.outcome == "tie":
        lines.append("Both have played as good golf")
    else:
        lines.append(f"{report.winner} has played better golf")
    return lines


__all__ = [
    "render_clubs",
    "render_comparison",
    "render_places",
    "render_played",
    "render_rounds",
]
