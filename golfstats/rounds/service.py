from __future__ import annotations

import logging
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from golfstats.errors import GolfStatsError

from .handicap import calculate_handicap, is_no_handicap
from .models import GolfIndex, PlayerRound, Round

logger = logging.getLogger(__name__)


class NotFoundError(GolfStatsError):
    message = "Not found!"

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


class LocationNotFound(NotFoundError):
    message = "The given location not found!"


class ClubNotFound(NotFoundError):
    message = "The given club not found!"


class PlayerNotFound(NotFoundError):
    message = "The player hasn't played any rounds!"


class PlayerReport(BaseModel):
    player: str
    handicap: float
    rounds: List[PlayerRound]

    model_config = ConfigDict(frozen=True)

    @property
    def has_handicap(self) -> bool:
        return not is_no_handicap(self.handicap)


class PlayerStanding(BaseModel):
    player: str
    rounds_count: int
    handicap: float

    model_config = ConfigDict(frozen=True)

    @property
    def has_handicap(self) -> bool:
        return not is_no_handicap(self.handicap)


class ComparisonReport(BaseModel):
    first: PlayerStanding
    second: PlayerStanding
    outcome: Literal["neither", "winner", "tie"]
    winner: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class GolfQueryService:
    """Read-only queries over a loaded :class:`GolfIndex`."""

    def __init__(self, index: GolfIndex):
        self._index = index

    @property
    def index(self) -> GolfIndex:
        return self._index

    def places(self) -> List[Tuple[str, List[str]]]:
        return [
            (location, self._index.clubs(location))
            for location in self._index.locations()
        ]

    def clubs(self, location: str) -> List[str]:
        if location not in self._index:
            raise LocationNotFound(location)
        return self._index.clubs(location)

    def rounds(self, club: str) -> List[Round]:
        location = self._index.find_club(club)
        if location is None:
            raise ClubNotFound(club)
        # sorted() is stable, so equal scores keep file order.
        return sorted(
            self._index.rounds_at(location, club), key=lambda r: r.score
        )

    def played(self, player: str) -> PlayerReport:
        found = [
            PlayerRound(location=location, club=club, score=round_.score)
            for location, club, round_ in self._index.iter_rounds()
            if round_.player == player
        ]
        if not found:
            raise PlayerNotFound(player)

        found.sort(key=lambda r: (r.score, r.club))
        handicap = calculate_handicap(r.score for r in found)
        logger.debug("Player %s: %d rounds, hcp=%s", player, len(found), handicap)
        return PlayerReport(player=player, handicap=handicap, rounds=found)

    def compare(self, player1: str, player2: str) -> ComparisonReport:
        first = self._standing(player1)
        second = self._standing(player2)

        if not first.has_handicap and not second.has_handicap:
            return ComparisonReport(first=first, second=second, outcome="neither")
        if not first.has_handicap:
            winner = second.player
        elif not second.has_handicap:
            winner = first.player
        elif first.handicap < second.handicap:
            winner = first.player
        elif second.handicap < first.handicap:
            winner = second.player
        else:
            return ComparisonReport(first=first, second=second, outcome="tie")
        return ComparisonReport(
            first=first, second=second, outcome="winner", winner=winner
        )

    def _scores_for(self, player: str) -> List[int]:
        return [
            round_.score
            for _, _, round_ in self._index.iter_rounds()
            if round_.player == player
        ]

    def _standing(self, player: str) -> PlayerStanding:
        scores = self._scores_for(player)
        return PlayerStanding(
            player=player,
            rounds_count=len(scores),
            handicap=calculate_handicap(scores),
        )


__all__ = [
    "ClubNotFound",
    "ComparisonReport",
    "GolfQueryService",
    "LocationNotFound",
    "NotFoundError",
    "PlayerNotFound",
    "PlayerReport",
    "PlayerStanding",
]
