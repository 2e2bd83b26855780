"""Split SVG path data into commands and numbers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .constants import COMMAND_SET, NUMBER_PATTERN, SEPARATOR_PATTERN
from .errors import MalformedNumericLiteral

if TYPE_CHECKING:
    from collections.abc import Iterator


def _to_float(literal: str) -> float:
    """Convert a matched literal, rejecting values that overflow to infinity."""
    value = float(literal)
    if not math.isfinite(value):
        raise MalformedNumericLiteral(literal)
    return value


def iter_numbers(text: str | None) -> Iterator[float]:
    """Lazily yield the numbers found in the arguments of a command.

    Commas and whitespace between numbers are skipped. Scanning stops at the
    first character that cannot start a number. Literals that overflow
    to infinity raise `MalformedNumericLiteral`.

    Examples:
        >>> list(iter_numbers("10,-2.5 .5.5"))
        [10.0, -2.5, 0.5, 0.5]
        >>> list(iter_numbers("1 2 x 3"))
        [1.0, 2.0]
    """
    if text is None:
        return

    pos = 0
    while True:
        pos = SEPARATOR_PATTERN.match(text, pos).end()  # type: ignore[union-attr]
        match = NUMBER_PATTERN.match(text, pos)
        if match is None:
            return
        yield _to_float(match.group())
        pos = match.end()


def parse_number(text: str) -> float:
    """Parse a single required number, ignoring surrounding whitespace.

    Raises:
        MalformedNumericLiteral: If the text is not exactly one number.

    Examples:
        >>> parse_number(" -1.5 ")
        -1.5
    """
    match = NUMBER_PATTERN.fullmatch(text.strip())
    if match is None:
        raise MalformedNumericLiteral(text)
    return _to_float(match.group())


def tokenize(d: str) -> Iterator[tuple[str, str]]:
    """Split path data into `(command, arguments)` pairs in source order.

    Text before the first command letter is ignored. Every command letter
    starts a new pair, also when several letters follow each other.

    Examples:
        >>> list(tokenize("M0,0 L10,0 10,10 Z"))
        [('M', '0,0 '), ('L', '10,0 10,10 '), ('Z', '')]
        >>> list(tokenize("zM1 1"))
        [('z', ''), ('M', '1 1')]
    """
    command: str | None = None
    start = 0

    for ix, char in enumerate(d):
        if char not in COMMAND_SET:
            continue
        if command is not None:
            yield command, d[start:ix]
        command = char
        start = ix + 1

    if command is not None:
        yield command, d[start:]
