"""Command line entry point: render a folder of SVG icons as Swift code."""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from quartz_svg.path_ops import PathConversionError
from quartz_svg.render import render_icon_folder

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class Exit(IntEnum):
    """Exit codes of the command line tool."""

    SUCCESS = 0
    INVALID_ARGUMENTS = 1
    CONVERSION_FAILED = 2


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with `Exit.INVALID_ARGUMENTS`."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(Exit.INVALID_ARGUMENTS, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="quartz-svg",
        description="Render a folder of SVG icons as Swift CoreGraphics code.",
    )
    parser.add_argument("icon_folder", type=Path, help="Folder with *.svg icons.")
    parser.add_argument(
        "framework_name", help="Name of the enum listing all icons."
    )
    parser.add_argument(
        "output_dir", type=Path, help="Folder the Swift files are written to."
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=5,
        help="Decimal places of the coordinates (default: 5)",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Leave out elements that cannot be converted instead of failing.",
    )
    parser.add_argument(
        "--loglevel",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.loglevel.upper(), logging.WARNING)
    logging.getLogger().setLevel(log_level)

    if not args.icon_folder.is_dir():
        parser.error(f"{args.icon_folder} is not a folder")

    try:
        render_icon_folder(
            args.icon_folder,
            args.framework_name,
            args.output_dir,
            precision=args.precision,
            on_error="skip" if args.skip_errors else "raise",
        )
    except PathConversionError as err:
        logger.error(f"Conversion failed: {err}")
        return Exit.CONVERSION_FAILED

    return Exit.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
