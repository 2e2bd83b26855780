"""Constants for the SVG path interpreter."""

from __future__ import annotations

import re
from typing import Literal, TypeAlias

COMMANDS = "MmLlCcVvHhSsQqTtAaZz"
"""A string containing all the recognized SVG path commands."""

COMMAND_SET = frozenset(COMMANDS)
"""A set containing all the recognized SVG path commands."""

SUPPORTED_COMMANDS = frozenset("MLCVHSZ")
"""Upper case commands that emit drawing operations. Others are skipped."""

SupportedCommand: TypeAlias = Literal["M", "L", "C", "V", "H", "S", "Z"]
"""A type alias for the upper case commands the interpreter dispatches."""

ARITY: dict[SupportedCommand, int] = {
    "M": 2,
    "L": 2,
    "C": 6,
    "V": 1,
    "H": 1,
    "S": 4,
    "Z": 0,
}
"""The number of values consumed by one repetition of each command."""

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
"""A regex pattern to match a single numeric literal."""

SEPARATOR_PATTERN = re.compile(r"[,\s]*")
"""A regex pattern to match a (possibly empty) run of separators."""
