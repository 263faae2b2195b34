from __future__ import annotations

QUOTE = '"'


def split(line: str, delimiter: str) -> list[str]:
    """Split ``line`` on ``delimiter`` while honouring double-quoted spans.

    Quote characters toggle the quoted state and are dropped from the
    output. A delimiter inside quotes is kept as a literal character. The
    trailing field is always emitted, so the result is never empty.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    fields.append("".join(current))
    return fields


__all__ = ["split"]
