from __future__ import annotations

from typing import Callable, Dict, List, NamedTuple, Sequence

from golfstats.errors import GolfStatsError
from golfstats.rounds import report
from golfstats.rounds.service import GolfQueryService
from golfstats.tokenizer import split

COMMAND_DELIMITER = " "
QUIT_COMMAND = "quit"

Handler = Callable[[GolfQueryService, Sequence[str]], List[str]]


class UsageError(GolfStatsError):
    def __init__(self, command: str):
        super().__init__(command)
        self.command = command

    def __str__(self) -> str:
        return f"In command: {self.command}"


class UnknownCommandError(UsageError):
    def __str__(self) -> str:
        return f"Unknown command: {self.command}"


class CommandSpec(NamedTuple):
    name: str
    arity: int
    handler: Handler


def _places(service: GolfQueryService, args: Sequence[str]) -> List[str]:
    return report.render_places(service.places())


def _clubs(service: GolfQueryService, args: Sequence[str]) -> List[str]:
    return report.render_clubs(service.clubs(args[0]))


def _rounds(service: GolfQueryService, args: Sequence[str]) -> List[str]:
    return report.render_rounds(service.rounds(args[0]))


def _played(service: GolfQueryService, args: Sequence[str]) -> List[str]:
    return report.render_played(service.played(args[0]))


def _compare(service: GolfQueryService, args: Sequence[str]) -> List[str]:
    return report.render_comparison(service.compare(args[0], args[1]))


COMMANDS: Dict[str, CommandSpec] = {
    spec.name: spec
    for spec in (
        CommandSpec("places", 0, _places),
        CommandSpec("clubs", 1, _clubs),
        CommandSpec("rounds", 1, _rounds),
        CommandSpec("played", 1, _played),
        CommandSpec("compare", 2, _compare),
    )
}


def tokenize(command_line: str) -> List[str]:
    return split(command_line, COMMAND_DELIMITER)


def dispatch(tokens: Sequence[str], service: GolfQueryService) -> List[str]:
    """Run the command named by ``tokens[0]`` and return its output lines.

    Raises :class:`UsageError` for an unknown command or a wrong number of
    arguments; query errors from the service propagate unchanged.
    """

    if not tokens:
        raise UnknownCommandError("")
    name, args = tokens[0], tokens[1:]
    spec = COMMANDS.get(name)
    if spec is None:
        raise UnknownCommandError(name)
    if len(args) != spec.arity:
        raise UsageError(name)
    return spec.handler(service, args)


__all__ = [
    "COMMANDS",
    "QUIT_COMMAND",
    "CommandSpec",
    "UnknownCommandError",
    "UsageError",
    "dispatch",
    "tokenize",
]
