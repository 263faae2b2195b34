from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from golfstats.commands import QUIT_COMMAND, UsageError, dispatch, tokenize
from golfstats.config import get_settings
from golfstats.rounds.loader import FileUnreadableError, LoadError, load_file
from golfstats.rounds.service import GolfQueryService, NotFoundError

LOGGER = logging.getLogger("golfstats.cli")

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

FILE_PROMPT = "Input file: "


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="golfstats", description="Query golf rounds from a ';'-separated file"
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        help="Rounds file (location;club;player;score per line)",
    )
    parser.add_argument(
        "--log-level", dest="log_level", default=None, help="Logging level"
    )
    return parser.parse_args(argv)


def _read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str | None:
    stdout.write(prompt)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def run_session(
    service: GolfQueryService,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    prompt: str = "> ",
) -> None:
    """Read commands until ``quit`` or end of input.

    Blank lines are skipped without prompting again.
    """

    prompt_pending = True
    while True:
        if prompt_pending:
            stdout.write(prompt)
            stdout.flush()
        raw = stdin.readline()
        if not raw:
            stdout.write("\n")
            break
        line = raw.rstrip("\r\n").lstrip()
        prompt_pending = bool(line)
        if not line:
            continue
        if line == QUIT_COMMAND:
            break

        try:
            output = dispatch(tokenize(line), service)
        except (UsageError, NotFoundError) as exc:
            LOGGER.debug("Command %r failed: %r", line, exc)
            print(f"Error: {exc}", file=stderr)
            continue
        for out_line in output:
            print(out_line, file=stdout)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    settings = get_settings()
    args = parse_args(sys.argv[1:] if argv is None else argv)
    log_level = args.log_level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.WARNING)
    )

    data_file = args.data_file or settings.data_file
    if not data_file:
        data_file = _read_line(FILE_PROMPT, stdin, stdout)
        if not data_file:
            print(f"Error: {FileUnreadableError()}", file=stderr)
            return EXIT_FAILURE
        data_file = data_file.strip()

    try:
        index = load_file(data_file)
    except LoadError as exc:
        print(f"Error: {exc}", file=stderr)
        return EXIT_FAILURE

    LOGGER.info("Loaded %d rounds from %s", index.round_count, data_file)
    run_session(GolfQueryService(index), stdin, stdout, stderr, settings.prompt)
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
