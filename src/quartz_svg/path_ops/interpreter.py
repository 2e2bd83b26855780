"""Interpret SVG path data as a stream of absolute drawing operations."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING

from quartz_svg.operations import (
    ORIGIN,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Point,
)
from quartz_svg.sinks import OperationRecorder

from .constants import ARITY, SUPPORTED_COMMANDS, SupportedCommand
from .errors import ArityMismatch, MalformedNumericLiteral, UnsupportedCommand
from .scanner import iter_numbers, tokenize

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from quartz_svg.operations import DrawingOperation
    from quartz_svg.sinks import DrawingSink

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    """Kind of the last operation emitted by an interpreter."""

    NONE = auto()
    MOVE = auto()
    LINE = auto()
    CUBIC = auto()
    CLOSE = auto()


def _pairs(values: Sequence[float]) -> list[Point]:
    return [Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def _groups(values: Sequence[float], size: int) -> list[Sequence[float]]:
    return [values[i : i + size] for i in range(0, len(values), size)]


class PathInterpreter:
    """Stateful interpreter for one path.

    The interpreter tracks the current point and the last cubic control
    point, resolves relative coordinates and the smooth cubic shorthand and
    emits one absolute operation per drawn segment to `sink`.

    Use a new interpreter for every path.

    Example:
        >>> recorder = OperationRecorder()
        >>> PathInterpreter(recorder).run("m 10 10 h 5")
        >>> recorder.operations
        [MoveTo(point=Point(x=10.0, y=10.0)), LineTo(point=Point(x=15.0, y=10.0))]
    """

    def __init__(self, sink: DrawingSink) -> None:
        self.sink = sink
        self.diagnostics: list[UnsupportedCommand] = []
        self._current = ORIGIN
        self._last_command = CommandKind.NONE
        self._last_control = ORIGIN

        self._handlers: dict[
            SupportedCommand, Callable[[Sequence[float], bool], None]
        ] = {
            "M": self._move,
            "L": self._line,
            "H": self._horizontal,
            "V": self._vertical,
            "C": self._cubic,
            "S": self._smooth_cubic,
            "Z": self._close,
        }

    @property
    def current_point(self) -> Point:
        """The endpoint of the last move, line or curve."""
        return self._current

    @property
    def last_command(self) -> CommandKind:
        """The kind of the last emitted operation."""
        return self._last_command

    @property
    def previous_control(self) -> Point:
        """The control point a smooth cubic reflects.

        The second control point of the last curve if the last operation was
        a cubic, else the current point.
        """
        if self._last_command is CommandKind.CUBIC:
            return self._last_control
        return self._current

    # absolute primitives

    def move_to(self, point: Point) -> None:
        """Start a new subpath."""
        self._current = point
        self._last_command = CommandKind.MOVE
        self.sink.emit(MoveTo(point))

    def line_to(self, point: Point) -> None:
        """Draw a line to `point`."""
        self._current = point
        self._last_command = CommandKind.LINE
        self.sink.emit(LineTo(point))

    def curve_to(self, control1: Point, control2: Point, end: Point) -> None:
        """Draw a cubic Bezier curve to `end`."""
        self._current = end
        self._last_control = control2
        self._last_command = CommandKind.CUBIC
        self.sink.emit(CubicCurveTo(control1, control2, end))

    def close_path(self) -> None:
        """Close the subpath. The current point is left where it is."""
        self._last_command = CommandKind.CLOSE
        self.sink.emit(ClosePath())

    # derived operations

    def horizontal_to(self, x: float) -> None:
        """Draw a line to `x`, keeping the current y coordinate."""
        self.line_to(self._current.with_x(x))

    def vertical_to(self, y: float) -> None:
        """Draw a line to `y`, keeping the current x coordinate."""
        self.line_to(self._current.with_y(y))

    def smooth_curve_to(self, control2: Point, end: Point) -> None:
        """Draw a cubic curve whose first control point is inferred."""
        control1 = self.previous_control.reflect(self._current)
        self.curve_to(control1, control2, end)

    # command handlers

    def _base(self, is_rel: bool) -> Point:
        return self._current if is_rel else ORIGIN

    def _move(self, values: Sequence[float], is_rel: bool) -> None:
        first, *rest = _pairs(values)
        self.move_to(self._base(is_rel) + first)
        # further pairs are implicit line commands
        for point in rest:
            self.line_to(self._base(is_rel) + point)

    def _line(self, values: Sequence[float], is_rel: bool) -> None:
        for point in _pairs(values):
            self.line_to(self._base(is_rel) + point)

    def _horizontal(self, values: Sequence[float], is_rel: bool) -> None:
        for x in values:
            self.horizontal_to(self._current.x + x if is_rel else x)

    def _vertical(self, values: Sequence[float], is_rel: bool) -> None:
        for y in values:
            self.vertical_to(self._current.y + y if is_rel else y)

    def _cubic(self, values: Sequence[float], is_rel: bool) -> None:
        for group in _groups(values, 6):
            base = self._base(is_rel)
            control1, control2, end = (base + p for p in _pairs(group))
            self.curve_to(control1, control2, end)

    def _smooth_cubic(self, values: Sequence[float], is_rel: bool) -> None:
        for group in _groups(values, 4):
            base = self._base(is_rel)
            control2, end = (base + p for p in _pairs(group))
            self.smooth_curve_to(control2, end)

    def _close(self, values: Sequence[float], is_rel: bool) -> None:
        del values, is_rel  # close takes no arguments
        self.close_path()

    def _values(self, command: str, arguments: str) -> list[float]:
        """Parse and validate the arguments before any state changes."""
        arity = ARITY[command.upper()]  # type: ignore[index]
        if arity == 0:
            return []

        values = list(iter_numbers(arguments))
        text = arguments.replace(",", " ").strip()
        if not values and text:
            raise MalformedNumericLiteral(text)

        if len(values) < arity or len(values) % arity:
            raise ArityMismatch(command, arity, len(values))

        return values

    def execute(self, command: str, arguments: str = "") -> None:
        """Execute a single command with its raw argument text.

        Raises:
            MalformedNumericLiteral: If the arguments do not start with a number.
            ArityMismatch: If the number of values does not fit the command.
        """
        upper = command.upper()
        if upper not in SUPPORTED_COMMANDS:
            diagnostic = UnsupportedCommand(command, arguments.strip())
            logger.warning(f"{diagnostic} (arguments: {diagnostic.arguments!r})")
            self.diagnostics.append(diagnostic)
            return

        values = self._values(command, arguments)
        self._handlers[upper](values, command.islower())  # type: ignore[index]

    def run(self, d: str) -> None:
        """Execute all commands of the path data in order."""
        for command, arguments in tokenize(d):
            self.execute(command, arguments)


def interpret_path(d: str) -> list[DrawingOperation]:
    """Convert path data into a list of absolute drawing operations.

    Example:
        >>> interpret_path("M0,0 L10,0 10,10 Z")  # doctest: +NORMALIZE_WHITESPACE
        [MoveTo(point=Point(x=0.0, y=0.0)),
         LineTo(point=Point(x=10.0, y=0.0)),
         LineTo(point=Point(x=10.0, y=10.0)),
         ClosePath()]
    """
    recorder = OperationRecorder()
    PathInterpreter(recorder).run(d)
    return recorder.operations
