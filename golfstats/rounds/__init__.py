from .handicap import NO_HANDICAP, calculate_handicap, format_handicap, format_score
from .loader import (
    EmptyFieldError,
    FileUnreadableError,
    InvalidScoreError,
    LoadError,
    StructuralError,
    load_file,
    load_lines,
)
from .models import GolfIndex, PlayerRound, Round
from .service import (
    ClubNotFound,
    ComparisonReport,
    GolfQueryService,
    LocationNotFound,
    NotFoundError,
    PlayerNotFound,
    PlayerReport,
    PlayerStanding,
)

__all__ = [
    "NO_HANDICAP",
    "ClubNotFound",
    "ComparisonReport",
    "EmptyFieldError",
    "FileUnreadableError",
    "GolfIndex",
    "GolfQueryService",
    "InvalidScoreError",
    "LoadError",
    "LocationNotFound",
    "NotFoundError",
    "PlayerNotFound",
    "PlayerReport",
    "PlayerRound",
    "PlayerStanding",
    "Round",
    "StructuralError",
    "calculate_handicap",
    "format_handicap",
    "format_score",
    "load_file",
    "load_lines",
]
