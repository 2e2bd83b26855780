"""Functions for reading SVG trees and converting their elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias
from xml.etree import ElementTree as ET

from defusedxml.ElementTree import fromstring

import quartz_svg.wrappers as svg_classes
from quartz_svg.operations import Fill, Initialize
from quartz_svg.path_ops import PathConversionError
from quartz_svg.sinks import OperationRecorder
from quartz_svg.wrappers import ElemSpan, filtered_tag

if TYPE_CHECKING:
    from collections.abc import Iterator

    from quartz_svg.operations import DrawingOperation
    from quartz_svg.path_ops import UnsupportedCommand

logger = logging.getLogger(__name__)

ErrorPolicy: TypeAlias = Literal["raise", "skip"]

SVG_PROVIDER = "{http://www.w3.org/2000/svg}"

WRAPPED_CLASSES: dict[str, type[ElemSpan]] = {
    "rect": svg_classes.Rect,
    "polygon": svg_classes.Polygon,
    "path": svg_classes.Path,
}
"""Tags that are converted into drawing operations."""

UNDRAWN_CONTAINERS = {"defs", "clipPath", "marker", "symbol", "mask", "pattern"}
"""Tags whose children are never drawn directly."""


@dataclass
class ConvertedElement:
    """The drawing operations of one element."""

    tag: str
    element_id: str | None
    operations: list[DrawingOperation]
    diagnostics: list[UnsupportedCommand] = field(default_factory=list)


def save_parse(data: str) -> ET.Element:
    """Save and parse an SVG string."""
    return fromstring(data)  # type: ignore[no-any-return]


def read_tree(data: str | Path) -> ET.Element:
    """Read an SVG tree from a string or a file."""
    if isinstance(data, Path):
        data = data.read_text("utf-8")

    return save_parse(data)


def get_class(elem: ET.Element) -> type[ElemSpan] | None:
    """Get the wrapper class for the element or None if it is not drawn."""
    if elem.tag.startswith("{") and not elem.tag.startswith(SVG_PROVIDER):
        return None

    return WRAPPED_CLASSES.get(filtered_tag(elem.tag))


def iter_drawable(tree: ET.Element) -> Iterator[ElemSpan]:
    """Iterate over the drawable elements in document order.

    Children of `defs`, `clipPath`, `marker` and similar containers as well
    as hidden elements are skipped.
    """
    for child in tree:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue

        if filtered_tag(child.tag) in UNDRAWN_CONTAINERS:
            continue

        cls = get_class(child)
        if cls is not None:
            obj = cls(child)
            if obj.hidden:
                logger.debug(f"Skipping hidden element {obj!r}")
                continue
            yield obj

        yield from iter_drawable(child)


def convert_element(obj: ElemSpan) -> ConvertedElement:
    """Convert one element, wrapped in `Initialize` and `Fill`.

    Raises:
        PathConversionError: If the element cannot be converted.
    """
    recorder = OperationRecorder()
    recorder.emit(Initialize())
    obj.lower(recorder)
    recorder.emit(Fill())

    logger.debug(f"Converted {obj!r} into {len(recorder.operations)} operations")

    return ConvertedElement(
        obj.tag, obj.element_id, recorder.operations, list(obj.diagnostics)
    )


def convert_tree(
    tree: ET.Element, on_error: ErrorPolicy = "raise"
) -> list[ConvertedElement]:
    """Convert all drawable elements of an SVG tree.

    Args:
        tree: The root of the SVG tree.
        on_error: `"raise"` to abort on the first element that cannot be
            converted, `"skip"` to log and leave out such elements.

    Returns:
        The converted elements in document order.
    """
    if on_error not in {"raise", "skip"}:
        raise ValueError(f"Invalid error policy {on_error!r}")

    converted: list[ConvertedElement] = []

    for obj in iter_drawable(tree):
        try:
            converted.append(convert_element(obj))
        except PathConversionError as err:
            if on_error == "raise":
                raise
            logger.warning(f"Skipping {obj!r}: {err}")

    return converted


def convert_document(
    data: str | Path, on_error: ErrorPolicy = "raise"
) -> list[ConvertedElement]:
    """Read an SVG document and convert its drawable elements."""
    return convert_tree(read_tree(data), on_error)
