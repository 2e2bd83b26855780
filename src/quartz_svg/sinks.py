"""Consumers of drawing operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from quartz_svg.operations import (
    ClosePath,
    CubicCurveTo,
    Fill,
    Initialize,
    LineTo,
    MoveTo,
    Rectangle,
)

if TYPE_CHECKING:
    from quartz_svg.operations import DrawingOperation, Point


class DrawingSink(Protocol):
    """Receive drawing operations in emission order.

    A sink holds no geometry of its own. Current point and control points
    are tracked by the interpreter feeding it.
    """

    def emit(self, operation: DrawingOperation) -> None:
        """Consume one operation."""


class OperationRecorder:
    """Record the operations in a list."""

    def __init__(self) -> None:
        self.operations: list[DrawingOperation] = []

    def emit(self, operation: DrawingOperation) -> None:
        """Append the operation."""
        self.operations.append(operation)


def format_number(value: float, precision: int = 5) -> str:
    """Format a coordinate for source code.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(-0.000001)
        '0'
        >>> format_number(2.123456789, precision=3)
        '2.123'
    """
    rounded = round(value, precision)
    if rounded == 0:
        # avoid "-0"
        rounded = 0.0
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


class QuartzCodeRenderer:
    """Translate operations into Swift CoreGraphics statements.

    Each operation becomes one line in `lines`. The rendered statements draw
    into a `CGMutablePath` named by `path_name` and fill it in `context_name`.
    """

    def __init__(
        self,
        precision: int = 5,
        path_name: str = "path",
        context_name: str = "context",
    ) -> None:
        self.precision = precision
        self.path_name = path_name
        self.context_name = context_name
        self.lines: list[str] = []

    def _point(self, point: Point) -> str:
        x = format_number(point.x, self.precision)
        y = format_number(point.y, self.precision)
        return f"CGPoint(x: {x}, y: {y})"

    def _statement(self, operation: DrawingOperation) -> str:
        path = self.path_name
        match operation:
            case Initialize():
                return f"let {path} = CGMutablePath()"
            case MoveTo(point):
                return f"{path}.move(to: {self._point(point)})"
            case LineTo(point):
                return f"{path}.addLine(to: {self._point(point)})"
            case CubicCurveTo(control1, control2, end):
                return (
                    f"{path}.addCurve(to: {self._point(end)}, "
                    f"control1: {self._point(control1)}, "
                    f"control2: {self._point(control2)})"
                )
            case ClosePath():
                return f"{path}.closeSubpath()"
            case Rectangle(origin, size):
                x, y, width, height = (
                    format_number(v, self.precision)
                    for v in (origin.x, origin.y, size.x, size.y)
                )
                return (
                    f"{path}.addRect(CGRect(x: {x}, y: {y}, "
                    f"width: {width}, height: {height}))"
                )
            case Fill():
                context = self.context_name
                return f"{context}.addPath({path}); {context}.fillPath()"

        raise TypeError(f"Unknown drawing operation {operation!r}")

    def emit(self, operation: DrawingOperation) -> None:
        """Render the operation as one statement."""
        self.lines.append(self._statement(operation))

    @property
    def text(self) -> str:
        """The rendered statements, one per line."""
        return "\n".join(self.lines)
