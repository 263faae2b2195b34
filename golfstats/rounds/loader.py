from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from golfstats.errors import GolfStatsError
from golfstats.tokenizer import split

from .models import GolfIndex, Round

logger = logging.getLogger(__name__)

RECORD_DELIMITER = ";"
RECORD_FIELDS = 4

SCORE_RE = re.compile(r"[+-]?[0-9]+")


class LoadError(GolfStatsError):
    """Loading aborted; no index is available."""

    message = "The specified file could not be loaded!"

    def __init__(self, line_number: int | None = None, line: str | None = None):
        super().__init__(line_number, line)
        self.line_number = line_number
        self.line = line


class FileUnreadableError(LoadError):
    message = "The specified file cannot be opened!"


class StructuralError(LoadError):
    message = "The specified file has an erroneous line!"


class EmptyFieldError(LoadError):
    message = "A line has an empty value!"


class InvalidScoreError(LoadError):
    message = "A line has an invalid score!"


def _parse_record(line_number: int, line: str) -> tuple[str, str, Round]:
    fields = split(line, RECORD_DELIMITER)
    if len(fields) != RECORD_FIELDS:
        raise StructuralError(line_number, line)
    if any(not field for field in fields):
        raise EmptyFieldError(line_number, line)

    location, club, player, score_text = fields
    if not SCORE_RE.fullmatch(score_text):
        raise InvalidScoreError(line_number, line)
    return location, club, Round(player=player, score=int(score_text))


def load_lines(lines: Iterable[str]) -> GolfIndex:
    """Build a :class:`GolfIndex` from raw record lines.

    The first invalid line aborts the whole load.
    """

    index = GolfIndex()
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            location, club, round_ = _parse_record(line_number, line)
        except LoadError as exc:
            logger.warning(
                "Rejected line %d (%s): %r", line_number, type(exc).__name__, line
            )
            raise
        index.add_round(location, club, round_)

    logger.debug(
        "Loaded %d rounds across %d locations", index.round_count, len(index)
    )
    return index


def load_file(path: Path | str) -> GolfIndex:
    source = Path(path).expanduser()
    try:
        # Records end at "\n" only; a stray "\r" stays inside the record.
        with source.open("r", encoding="utf-8-sig", newline="\n") as handle:
            index = load_lines(handle)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", source, exc)
        raise FileUnreadableError() from exc
    logger.debug("Finished loading %s", source)
    return index


__all__ = [
    "EmptyFieldError",
    "FileUnreadableError",
    "InvalidScoreError",
    "LoadError",
    "StructuralError",
    "load_file",
    "load_lines",
]
