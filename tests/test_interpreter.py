"""Tests the path interpreter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pytest
import svgpathtools

from quartz_svg.operations import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Point,
)
from quartz_svg.path_ops import (
    ArityMismatch,
    CommandKind,
    MalformedNumericLiteral,
    PathInterpreter,
    UnsupportedCommand,
    interpret_path,
)
from quartz_svg.sinks import OperationRecorder

if TYPE_CHECKING:
    from quartz_svg.operations import DrawingOperation


def _run(d: str) -> tuple[PathInterpreter, list[DrawingOperation]]:
    recorder = OperationRecorder()
    interpreter = PathInterpreter(recorder)
    interpreter.run(d)
    return interpreter, recorder.operations


def _compare_with_svgpathtools(d: str) -> None:
    """Compare the emitted segments with the segments of svgpathtools."""
    operations = [op for op in interpret_path(d) if not isinstance(op, MoveTo)]
    segments = svgpathtools.parse_path(d)

    assert len(operations) == len(segments)

    calc: list[complex] = []
    expected: list[complex] = []
    for operation, segment in zip(operations, segments, strict=True):
        if isinstance(operation, LineTo):
            assert isinstance(segment, svgpathtools.Line)
            calc.append(operation.point)
            expected.append(segment.end)
        else:
            assert isinstance(operation, CubicCurveTo)
            assert isinstance(segment, svgpathtools.CubicBezier)
            calc.extend((operation.control1, operation.control2, operation.end))
            expected.extend((segment.control1, segment.control2, segment.end))

    np.testing.assert_almost_equal(
        np.array(calc, dtype=complex), np.array(expected, dtype=complex), decimal=9
    )


lines = [
    "M 10 10 L 20 20 L 10 30",
    "M 10 10 L 20 20 10 30 40 40",
    "m 10 350 l 40 0 l 20 50",
    "m 10 500 l 50 0 20 -50 20 50 50 0",
    "M 10 10 20 20 30 10",
    "m 10 10 20 20 30 10",
]

vertical_horizontal = [
    "M 10 10 H 50",
    "M 10 10 h 40",
    "M 10 10 V 50",
    "M 10 10 v 40",
    "M 10 10 H 50 V 50 H 10 V 10",
    "M 10 10 h 40 v 40 h -40 v -40",
    "M 10 10 h 10 20 30",
]

cubics = [
    "M 10 10 C 20 20, 40 20, 50 10",
    "M 130 110 C 120 140, 180 140, 170 110",
    "m 10 10 c 10 10, 30 10, 40 0",
    "M 10 10 C 20 20 40 20 50 10 60 0 80 0 90 10",
    "m 10 10 c 10 10 30 10 40 0 10 -10 30 -10 40 0",
]

smooth_curves = [
    "M 10 180 C 40 100, 65 100, 95 180 S 150 260, 180 180",
    "M 10 380 C 40 300, 65 300, 95 380 S 150 460 180 380 S 265 300 295 380",
    "m 10 380 c 30 -80, 55 -80, 85 0 s 55 80 85 0 s 85 -80 115 0",
    "M 10 10 S 20 20 30 10",
    "M 10 10 L 20 10 S 30 20 40 10",
    "M 10 10 C 20 0 30 0 40 10 L 50 20 s 10 10 20 0",
]


@pytest.mark.parametrize(
    "test_input", lines + vertical_horizontal + cubics + smooth_curves
)
def test_matches_svgpathtools(test_input: str) -> None:
    _compare_with_svgpathtools(test_input)


def test_lines_and_close() -> None:
    assert interpret_path("M0,0 L10,0 10,10 Z") == [
        MoveTo(Point(0, 0)),
        LineTo(Point(10, 0)),
        LineTo(Point(10, 10)),
        ClosePath(),
    ]


def test_relative_lines_are_sequential() -> None:
    assert interpret_path("m1,1 l1,0 1,0 0,1") == [
        MoveTo(Point(1, 1)),
        LineTo(Point(2, 1)),
        LineTo(Point(3, 1)),
        LineTo(Point(3, 2)),
    ]


def test_initial_relative_move_starts_at_origin() -> None:
    assert interpret_path("m5 6") == [MoveTo(Point(5, 6))]


@pytest.mark.parametrize(
    ("prefix", "relative", "absolute"),
    [
        ("M 3 4", "l 2 5", "L 5 9"),
        ("M 3 4", "h 2", "H 5"),
        ("M 3 4", "v -2", "V 2"),
        ("M 3 4", "m 1 1", "M 4 5"),
        ("M 3 4", "c 1 1 2 2 3 3", "C 4 5 5 6 6 7"),
        ("M 3 4 C 0 0 1 1 2 2", "s 1 1 2 2", "S 3 3 4 4"),
    ],
)
def test_relative_equals_absolute(prefix: str, relative: str, absolute: str) -> None:
    assert interpret_path(f"{prefix} {relative}") == interpret_path(
        f"{prefix} {absolute}"
    )


def test_smooth_cubic_reflects_previous_control() -> None:
    interpreter, operations = _run("M 0 0 C 1 1 4 2 5 0 S 9 1 10 0")

    # current point (5, 0), previous control (4, 2)
    assert operations[-1] == CubicCurveTo(Point(6, -2), Point(9, 1), Point(10, 0))
    assert interpreter.last_command is CommandKind.CUBIC


def test_smooth_cubic_chain_reflects_smooth_control() -> None:
    operations = interpret_path("M 0 0 C 1 1 4 2 5 0 S 9 1 10 0 S 14 1 15 0")

    assert operations[-1] == CubicCurveTo(Point(11, -1), Point(14, 1), Point(15, 0))


@pytest.mark.parametrize(
    "prefix", ["M 5 5", "M 0 0 L 5 5", "M 0 0 C 1 1 2 2 5 5 Z M 5 5"]
)
def test_smooth_cubic_without_previous_cubic(prefix: str) -> None:
    operations = interpret_path(f"{prefix} S 8 8 10 10")

    assert operations[-1] == CubicCurveTo(Point(5, 5), Point(8, 8), Point(10, 10))


@pytest.mark.parametrize(
    ("d", "expected"),
    [
        ("M 1 2", Point(1, 2)),
        ("M 1 2 L 3 4", Point(3, 4)),
        ("M 1 2 H 7", Point(7, 2)),
        ("M 1 2 v 7", Point(1, 9)),
        ("M 1 2 C 0 0 0 0 8 9", Point(8, 9)),
        ("M 1 2 L 3 4 Z", Point(3, 4)),
        ("M 1 2 L 3 4 A 5 5 0 0 1 10 10", Point(3, 4)),
        ("M 1 2 L 3 4 Q 5 5 6 6 T 7 7", Point(3, 4)),
    ],
)
def test_current_point(d: str, expected: Point) -> None:
    interpreter, _ = _run(d)
    assert interpreter.current_point == expected


def test_close_keeps_current_point() -> None:
    # relative commands after a close continue from the point before it
    operations = interpret_path("M 10 10 L 20 10 L 20 20 Z l 5 0")

    assert operations[-2:] == [ClosePath(), LineTo(Point(25, 20))]


def test_close_sets_command_kind() -> None:
    interpreter, _ = _run("M 0 0 C 1 1 2 2 3 3 z")
    assert interpreter.last_command is CommandKind.CLOSE
    assert interpreter.previous_control == interpreter.current_point


def test_close_without_separator() -> None:
    assert interpret_path("M0 0L1 1zM2 2") == [
        MoveTo(Point(0, 0)),
        LineTo(Point(1, 1)),
        ClosePath(),
        MoveTo(Point(2, 2)),
    ]


def test_unsupported_command(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        interpreter, operations = _run("M0,0 A5,5 0 0 1 10,10")

    assert operations == [MoveTo(Point(0, 0))]
    assert interpreter.diagnostics == [UnsupportedCommand("A", "5,5 0 0 1 10,10")]
    assert interpreter.current_point == Point(0, 0)
    assert "Unsupported path command 'A'" in caplog.text


def test_unsupported_commands_continue() -> None:
    interpreter, operations = _run("M 0 0 Q 1 1 2 2 t 3 3 a 1 L 5 5")

    assert operations == [MoveTo(Point(0, 0)), LineTo(Point(5, 5))]
    assert [d.command for d in interpreter.diagnostics] == ["Q", "t", "a"]


def test_unsupported_command_keeps_command_kind() -> None:
    operations = interpret_path("M 0 0 C 1 1 4 2 5 0 Q 1 1 2 2 S 9 1 10 0")

    assert operations[-1] == CubicCurveTo(Point(6, -2), Point(9, 1), Point(10, 0))


@pytest.mark.parametrize(
    ("d", "command", "received"),
    [
        ("M 0 0 H", "H", 0),
        ("M 0 0 v", "v", 0),
        ("M", "M", 0),
        ("M 1", "M", 1),
        ("M 0 0 L 1 2 3", "L", 3),
        ("M 0 0 C 1 2 3 4 5", "C", 5),
        ("M 0 0 S 1 2 3", "S", 3),
        ("M 0 0 c 1 2 3 4 5 6 7", "c", 7),
        # letters in the arguments start new commands
        ("M 0 0 L abc", "L", 0),
    ],
)
def test_arity_mismatch(d: str, command: str, received: int) -> None:
    with pytest.raises(ArityMismatch) as exc_info:
        interpret_path(d)

    assert exc_info.value.command == command
    assert exc_info.value.received == received


def test_arity_mismatch_before_state_changes() -> None:
    recorder = OperationRecorder()
    interpreter = PathInterpreter(recorder)
    interpreter.run("M 1 1")

    with pytest.raises(ArityMismatch):
        interpreter.execute("L", "2 2 3")

    assert interpreter.current_point == Point(1, 1)
    assert recorder.operations == [MoveTo(Point(1, 1))]


@pytest.mark.parametrize(
    "d",
    ["M x", "M 0 0 L ?x", "M 0 0 H ?1", "M 1e400 0", "M 0 0 S 1e400 1 2 2"],
)
def test_malformed_numeric_literal(d: str) -> None:
    with pytest.raises(MalformedNumericLiteral):
        interpret_path(d)


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError, match="expects a multiple of 1 values"):
        interpret_path("M 0 0 H")


def test_close_ignores_arguments() -> None:
    assert interpret_path("M 0 0 Z 5") == [MoveTo(Point(0, 0)), ClosePath()]


def test_fresh_interpreter_per_path() -> None:
    interpret_path("M 10 10 C 1 1 2 2 3 3")

    assert interpret_path("l 1 1") == [LineTo(Point(1, 1))]
