"""Render SVG documents as Swift CoreGraphics drawing code."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from quartz_svg.sinks import QuartzCodeRenderer
from quartz_svg.utils import convert_document

if TYPE_CHECKING:
    from quartz_svg.utils import ConvertedElement, ErrorPolicy

logger = logging.getLogger(__name__)

INDENT = "    "


def swift_identifier(name: str) -> str:
    """Turn a file or icon name into an upper camel case identifier.

    Examples:
        >>> swift_identifier("arrow-left_small")
        'ArrowLeftSmall'
        >>> swift_identifier("2up")
        'Icon2up'
    """
    words = [w for w in re.split(r"[^0-9A-Za-z]+", name) if w]
    identifier = "".join(w[0].upper() + w[1:] for w in words)
    if not identifier or identifier[0].isdigit():
        identifier = "Icon" + identifier
    return identifier


def render_element(element: ConvertedElement, precision: int = 5) -> list[str]:
    """Render the operations of one element as a Swift `do` block."""
    renderer = QuartzCodeRenderer(precision)
    for operation in element.operations:
        renderer.emit(operation)

    label = element.tag if element.element_id is None else element.element_id
    return [f"// {label}", "do {", *(INDENT + line for line in renderer.lines), "}"]


def render_quartz(
    data: str | Path,
    name: str | None = None,
    precision: int = 5,
    on_error: ErrorPolicy = "raise",
) -> str:
    """Render an SVG document as a Swift function drawing into a `CGContext`.

    Args:
        data: The SVG string or the path to an SVG file.
        name: The name of the icon. Defaults to the file name or `Icon`.
        precision: The number of decimal places of the coordinates.
        on_error: Passed on to :func:`quartz_svg.utils.convert_tree`.
    """
    if name is None:
        name = data.stem if isinstance(data, Path) else "Icon"

    elements = convert_document(data, on_error)

    body: list[str] = []
    for element in elements:
        body.extend(render_element(element, precision))

    return "\n".join(
        [
            "import CoreGraphics",
            "",
            f"func draw{swift_identifier(name)}(in context: CGContext) {{",
            *(INDENT + line for line in body),
            "}",
            "",
        ]
    )


def render_framework_index(framework_name: str, icons: dict[str, str]) -> str:
    """Render the enum listing the draw functions of all icons.

    Args:
        framework_name: The name of the generated enum.
        icons: Icon names mapped to their Swift identifiers.
    """
    entries = [
        f'{INDENT * 2}"{name}": draw{identifier}(in:),'
        for name, identifier in icons.items()
    ]
    if not entries:
        entries = [f"{INDENT * 2}:"]

    return "\n".join(
        [
            "import CoreGraphics",
            "",
            f"public enum {swift_identifier(framework_name)} {{",
            f"{INDENT}public static let icons: [String: (CGContext) -> Void] = [",
            *entries,
            f"{INDENT}]",
            "}",
            "",
        ]
    )


def render_icon_folder(
    icon_folder: Path,
    framework_name: str,
    output_dir: Path,
    precision: int = 5,
    on_error: ErrorPolicy = "raise",
) -> list[Path]:
    """Render every `*.svg` file of a folder into a Swift source file.

    One `<Icon>.swift` file is written per icon and a `<Framework>.swift`
    file lists all icons. Icons whose identifier is already taken are
    skipped.

    Returns:
        The written files, the index file last.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    icons: dict[str, str] = {}
    written: list[Path] = []

    for file in sorted(icon_folder.glob("*.svg")):
        identifier = swift_identifier(file.stem)
        if identifier in icons.values():
            logger.warning(f"Skipping {file.name}: draw{identifier} already exists")
            continue

        code = render_quartz(file, precision=precision, on_error=on_error)
        target = output_dir / f"{identifier}.swift"
        target.write_text(code, "utf-8")
        logger.debug(f"Rendered {file.name} into {target}")

        icons[file.stem] = identifier
        written.append(target)

    index = output_dir / f"{swift_identifier(framework_name)}.swift"
    index.write_text(render_framework_index(framework_name, icons), "utf-8")
    written.append(index)

    logger.info(f"Rendered {len(icons)} icons into {output_dir}")

    return written
