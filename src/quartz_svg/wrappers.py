"""Wrapper for drawable SVG elements."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from typing_extensions import override

from quartz_svg.path_ops import PathInterpreter, lower_polygon, lower_rect
from quartz_svg.path_ops.errors import MissingRequiredAttribute

if TYPE_CHECKING:
    from xml.etree import ElementTree as ET

    from quartz_svg.path_ops import UnsupportedCommand
    from quartz_svg.sinks import DrawingSink


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}circle")
        'circle'
        >>> filtered_tag("circle")
        'circle'
    """
    return re.sub(r"\{.*\}", "", tag)


class ElemSpan(ABC):
    """Abstract base class for drawable SVG elements."""

    def __init__(self, elem: ET.Element) -> None:
        """Initialize the element.

        Args:
            elem: The element to wrap. Its `style` attribute is split into
                separate attributes.
        """
        self.elem = elem
        self.attr = dict(elem.attrib)
        self.diagnostics: list[UnsupportedCommand] = []
        self.fix_style()

    def fix_style(self) -> None:
        """Split the style attribute into separate attributes."""
        if "style" not in self.attr:
            return

        style = self.attr.pop("style")
        styles = [x.strip() for x in style.split(";") if x.strip()]
        for item in styles:
            key, _, value = item.partition(":")
            self.attr[key.strip()] = value.strip()

    @override
    def __repr__(self) -> str:
        elem_id = self.element_id
        id_suffix = f" ({elem_id})" if elem_id else ""
        return f"{self.tag}{id_suffix}"

    @property
    def tag(self) -> str:
        """The tag of the element without the provider."""
        return filtered_tag(self.elem.tag)

    @property
    def element_id(self) -> str | None:
        """The `id` attribute of the element."""
        return self.attr.get("id")

    @property
    def hidden(self) -> bool:
        """If the element is not displayed."""
        return self.attr.get("display", "inline") == "none"

    @abstractmethod
    def lower(self, sink: DrawingSink) -> None:
        """Emit the drawing operations of the element."""


class Rect(ElemSpan):
    """Rectangle class."""

    @override
    def lower(self, sink: DrawingSink) -> None:
        lower_rect(self.attr, sink)


class Polygon(ElemSpan):
    """Polygon class."""

    @override
    def lower(self, sink: DrawingSink) -> None:
        lower_polygon(self.attr, sink)


class Path(ElemSpan):
    """Path class."""

    @override
    def lower(self, sink: DrawingSink) -> None:
        if "d" not in self.attr:
            raise MissingRequiredAttribute("d")

        interpreter = PathInterpreter(sink)
        interpreter.run(self.attr["d"])
        self.diagnostics.extend(interpreter.diagnostics)
