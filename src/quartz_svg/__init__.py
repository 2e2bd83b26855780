"""Convert SVG paths and shapes into absolute drawing operations."""

from __future__ import annotations

from quartz_svg.operations import (
    ClosePath,
    CubicCurveTo,
    DrawingOperation,
    Fill,
    Initialize,
    LineTo,
    MoveTo,
    Point,
    Rectangle,
)
from quartz_svg.path_ops import PathInterpreter, interpret_path
from quartz_svg.render import render_quartz
from quartz_svg.sinks import DrawingSink, OperationRecorder, QuartzCodeRenderer
from quartz_svg.utils import ConvertedElement, convert_document, convert_tree

__all__ = [
    "ClosePath",
    "ConvertedElement",
    "CubicCurveTo",
    "DrawingOperation",
    "DrawingSink",
    "Fill",
    "Initialize",
    "LineTo",
    "MoveTo",
    "OperationRecorder",
    "PathInterpreter",
    "Point",
    "QuartzCodeRenderer",
    "Rectangle",
    "convert_document",
    "convert_tree",
    "interpret_path",
    "render_quartz",
]
