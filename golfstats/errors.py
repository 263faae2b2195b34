from __future__ import annotations


class GolfStatsError(Exception):
    """Base class for every error reported to the command-line user."""

    message = "golfstats error"

    def __str__(self) -> str:
        return self.message


__all__ = ["GolfStatsError"]
