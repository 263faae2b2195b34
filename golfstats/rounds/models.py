from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Round(BaseModel):
    player: str = Field(min_length=1)
    score: int

    model_config = ConfigDict(frozen=True)


class PlayerRound(BaseModel):
    location: str
    club: str
    score: int

    model_config = ConfigDict(frozen=True)


class GolfIndex:
    """Rounds grouped by location, then by club, in file order.

    Every traversal walks keys in sorted order. Club names are only unique
    within a location; :meth:`find_club` returns the first location that
    holds the name.
    """

    def __init__(self) -> None:
        self._locations: Dict[str, Dict[str, List[Round]]] = {}
        self._round_count = 0

    def add_round(self, location: str, club: str, round_: Round) -> None:
        clubs = self._locations.setdefault(location, {})
        clubs.setdefault(club, []).append(round_)
        self._round_count += 1

    # Queries
    def locations(self) -> List[str]:
        return sorted(self._locations)

    def clubs(self, location: str) -> List[str]:
        return sorted(self._locations[location])

    def rounds_at(self, location: str, club: str) -> Tuple[Round, ...]:
        return tuple(self._locations[location][club])

    def find_club(self, club: str) -> Optional[str]:
        for location in self.locations():
            if club in self._locations[location]:
                return location
        return None

    def iter_rounds(self) -> Iterator[Tuple[str, str, Round]]:
        for location in self.locations():
            for club in self.clubs(location):
                for round_ in self._locations[location][club]:
                    yield location, club, round_

    @property
    def round_count(self) -> int:
        return self._round_count

    def __contains__(self, location: object) -> bool:
        return location in self._locations

    def __len__(self) -> int:
        return len(self._locations)


__all__ = ["GolfIndex", "PlayerRound", "Round"]
