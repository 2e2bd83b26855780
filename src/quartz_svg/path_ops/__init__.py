"""Interpret SVG path data and shapes as absolute drawing operations."""

from __future__ import annotations

from .errors import (
    ArityMismatch,
    EmptyPolygon,
    MalformedNumericLiteral,
    MissingRequiredAttribute,
    PathConversionError,
    UnsupportedCommand,
)
from .interpreter import CommandKind, PathInterpreter, interpret_path
from .scanner import iter_numbers, parse_number, tokenize
from .shapes import lower_polygon, lower_rect

__all__ = [
    "ArityMismatch",
    "CommandKind",
    "EmptyPolygon",
    "MalformedNumericLiteral",
    "MissingRequiredAttribute",
    "PathConversionError",
    "PathInterpreter",
    "UnsupportedCommand",
    "interpret_path",
    "iter_numbers",
    "lower_polygon",
    "lower_rect",
    "parse_number",
    "tokenize",
]
