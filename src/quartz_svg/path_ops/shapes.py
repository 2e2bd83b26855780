"""Lower rectangles and polygons into drawing operations."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from quartz_svg.operations import Point, Rectangle

from .errors import EmptyPolygon, MalformedNumericLiteral, MissingRequiredAttribute
from .interpreter import PathInterpreter
from .scanner import parse_number

if TYPE_CHECKING:
    from collections.abc import Mapping

    from quartz_svg.sinks import DrawingSink

POINTS_PATTERN = re.compile(r"\s+")
"""A regex pattern to split the points of a polygon."""


def numeric_attribute(attrs: Mapping[str, str], name: str) -> float:
    """Get a required numeric attribute without the 'px' suffix.

    Raises:
        MissingRequiredAttribute: If the attribute is missing or not numeric.
    """
    if name not in attrs:
        raise MissingRequiredAttribute(name)

    try:
        return parse_number(attrs[name].strip().removesuffix("px"))
    except MalformedNumericLiteral as err:
        raise MissingRequiredAttribute(name, attrs[name]) from err


def parse_points(text: str) -> list[Point]:
    """Parse the `points` of a polygon, a whitespace separated list of `x,y`.

    Raises:
        MissingRequiredAttribute: If a pair is not two comma separated numbers.

    Examples:
        >>> parse_points("0,0 10,0  10,10")
        [Point(x=0.0, y=0.0), Point(x=10.0, y=0.0), Point(x=10.0, y=10.0)]
    """
    points: list[Point] = []
    for pair in POINTS_PATTERN.split(text.strip()):
        if not pair:
            continue

        coords = pair.split(",")
        if len(coords) != 2:  # noqa: PLR2004
            raise MissingRequiredAttribute("points", pair)

        try:
            x, y = (parse_number(c) for c in coords)
        except MalformedNumericLiteral as err:
            raise MissingRequiredAttribute("points", pair) from err

        points.append(Point(x, y))

    return points


def lower_rect(attrs: Mapping[str, str], sink: DrawingSink) -> None:
    """Emit a rectangle from its `x`, `y`, `width` and `height` attributes."""
    x, y, width, height = (
        numeric_attribute(attrs, name) for name in ("x", "y", "width", "height")
    )
    sink.emit(Rectangle(Point(x, y), Point(width, height)))


def lower_polygon(attrs: Mapping[str, str], sink: DrawingSink) -> None:
    """Emit a move to the first point and a line to every further point.

    The polygon is not closed.

    Raises:
        MissingRequiredAttribute: If `points` is missing or malformed.
        EmptyPolygon: If `points` holds no point.
    """
    if "points" not in attrs:
        raise MissingRequiredAttribute("points")

    points = parse_points(attrs["points"])
    if not points:
        raise EmptyPolygon

    first, *rest = points
    interpreter = PathInterpreter(sink)
    interpreter.move_to(first)
    for point in rest:
        interpreter.line_to(point)
