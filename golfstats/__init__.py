"""Interactive queries over golf round records."""

from .errors import GolfStatsError

__version__ = "0.1.0"

__all__ = ["GolfStatsError", "__version__"]
