"""Points and the drawing operations emitted for paths and shapes.

Operations are frozen dataclasses. A sequence of operations must be replayed
in emission order to reconstruct the drawing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from typing_extensions import Self, override


class Point(complex):
    """A point in 2D space. Wrapper for complex numbers."""

    @override
    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    @property
    def x(self) -> float:
        """The x coordinate."""
        return self.real

    @property
    def y(self) -> float:
        """The y coordinate."""
        return self.imag

    @override
    def __rmul__(self, other: complex) -> Self:
        return self.__class__(super().__rmul__(other))

    @override
    def __add__(self, other: complex) -> Self:
        return self.__class__(super().__add__(other))

    @override
    def __sub__(self, other: complex) -> Self:
        return self.__class__(super().__sub__(other))

    def reflect(self, center: complex) -> Self:
        """Reflect the point through `center`."""
        return self.__class__(2 * center - self)

    def with_x(self, x: float) -> Self:
        """A copy of the point with another x coordinate."""
        return self.__class__(x, self.imag)

    def with_y(self, y: float) -> Self:
        """A copy of the point with another y coordinate."""
        return self.__class__(self.real, y)


ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class Initialize:
    """Start drawing a new element."""


@dataclass(frozen=True)
class Fill:
    """Finish the element and fill the drawn path."""


@dataclass(frozen=True)
class MoveTo:
    """Start a new subpath at `point`."""

    point: Point


@dataclass(frozen=True)
class LineTo:
    """Straight line from the current point to `point`."""

    point: Point


@dataclass(frozen=True)
class CubicCurveTo:
    """Cubic Bezier curve from the current point to `end`."""

    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class ClosePath:
    """Close the current subpath."""


@dataclass(frozen=True)
class Rectangle:
    """Axis aligned rectangle with its upper left corner at `origin`."""

    origin: Point
    size: Point


DrawingOperation: TypeAlias = (
    Initialize | Fill | MoveTo | LineTo | CubicCurveTo | ClosePath | Rectangle
)
"""All operations a sink can receive."""
