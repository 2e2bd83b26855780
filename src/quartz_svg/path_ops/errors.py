"""Errors raised while converting paths and shapes into drawing operations."""

from __future__ import annotations

from dataclasses import dataclass


class PathConversionError(ValueError):
    """Base class for errors that abort the conversion of one element."""


class MalformedNumericLiteral(PathConversionError):
    """No valid numeric literal was found where one is required."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Expected a number, found {text!r}")


class ArityMismatch(PathConversionError):
    """A command received a number of values it cannot consume."""

    def __init__(self, command: str, expected: int, received: int) -> None:
        self.command = command
        self.expected = expected
        self.received = received
        super().__init__(
            f"Command {command!r} expects a multiple of {expected} values "
            f"(at least {expected}), got {received}"
        )


class MissingRequiredAttribute(PathConversionError):
    """A shape lacks a required attribute or holds a non-numeric value."""

    def __init__(self, attribute: str, value: str | None = None) -> None:
        self.attribute = attribute
        self.value = value
        if value is None:
            message = f"Missing required attribute {attribute!r}"
        else:
            message = f"Attribute {attribute!r} is not numeric: {value!r}"
        super().__init__(message)


class EmptyPolygon(PathConversionError):
    """A polygon without any points."""

    def __init__(self) -> None:
        super().__init__("Polygon has no points")


@dataclass(frozen=True)
class UnsupportedCommand:
    """Diagnostic for a recognized command that produces no operation."""

    command: str
    arguments: str

    def __str__(self) -> str:
        return f"Unsupported path command {self.command!r} ignored"
