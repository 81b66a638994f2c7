"""
Module: cli

Purpose:
    Command line entry point. Reads an ordered item list exported by the
    catalog service and prints the separator page layout as JSON, or a
    short per-page summary.

Key Functions:
    - main(): Parse arguments, build, print

Dependencies:
    - argparse (std)
    - builder: build_separators, SeparatorConfig
    - core.utils.serialization: load_items_json

Usage:
    separator-toolkit cards.json --double-sided --flip-edge short
    python -m separator_toolkit cards.json --summary
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from separator_toolkit import __version__
from separator_toolkit.builder import BuildError, BuildResult, SeparatorConfig, build_separators
from separator_toolkit.builder.layout import FlipEdge
from separator_toolkit.common.page_sizes import CardDimensions, PageDimensions, PageSize, DEFAULT_CARD_DIMENSIONS
from separator_toolkit.core.schemas.validator import ValidationError
from separator_toolkit.core.utils.serialization import load_items_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="separator-toolkit",
        description="Lay out double-sided card separators for printing",
    )
    parser.add_argument("items", type=Path, help="JSON file with the ordered item records")
    parser.add_argument("--set-id", default="OP-01", help="Set identifier (default: OP-01)")
    parser.add_argument("--double-sided", action="store_true", help="Emit flipped back pages")
    parser.add_argument(
        "--flip-edge",
        choices=[e.value for e in FlipEdge],
        default=FlipEdge.LONG.value,
        help="Edge the sheet is flipped along (default: long)",
    )
    parser.add_argument(
        "--page-size",
        choices=[s.value for s in PageSize],
        default=PageSize.A4.value,
        help="Paper size (default: a4)",
    )
    parser.add_argument("--page-width", type=float, help="Custom page width in mm")
    parser.add_argument("--page-height", type=float, help="Custom page height in mm")
    parser.add_argument("--card-width", type=float, default=DEFAULT_CARD_DIMENSIONS.width)
    parser.add_argument("--card-height", type=float, default=DEFAULT_CARD_DIMENSIONS.height)
    parser.add_argument("--tab-height", type=float, default=DEFAULT_CARD_DIMENSIONS.tab_height)
    parser.add_argument("--strict", action="store_true", help="Validate records against the JSON schema")
    parser.add_argument("--summary", action="store_true", help="Print a per-page summary instead of JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> SeparatorConfig:
    """
    Build a SeparatorConfig from parsed arguments.

    Raises:
        ValueError: If the dimensions or page size are inconsistent
    """
    custom_page = None
    if args.page_width is not None or args.page_height is not None:
        if args.page_width is None or args.page_height is None:
            raise ValueError("--page-width and --page-height must be given together")
        custom_page = PageDimensions(args.page_width, args.page_height)

    page_size = PageSize.parse(args.page_size)
    if custom_page is not None and page_size is not PageSize.CUSTOM:
        logger.info("Custom page dimensions given; using page size 'custom'")
        page_size = PageSize.CUSTOM

    return SeparatorConfig(
        set_id=args.set_id,
        double_sided=args.double_sided,
        flip_edge=FlipEdge.parse(args.flip_edge),
        page_size=page_size,
        custom_page_size=custom_page,
        card_dimensions=CardDimensions(args.card_width, args.card_height, args.tab_height),
    )


def format_summary(result: BuildResult) -> str:
    """Render a compact text view: one block per page, one line per row."""
    cells_per_row = result.grid.cells_per_row
    lines: List[str] = [
        f"{result.metadata['set_id']}: {result.metadata['item_count']} items, "
        f"{result.metadata['separator_count']} separators, "
        f"{result.page_count} pages on {result.layout.sheet_count} sheets",
    ]
    for page in result.layout.pages:
        lines.append(f"Page {page.index + 1} ({page.kind.value}, sheet {page.sheet + 1})")
        for row in page.rows(cells_per_row):
            lines.append("  | " + " | ".join(cell.name for cell in row) + " |")
    for warning in result.warnings:
        lines.append(f"warning: {warning}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = config_from_args(args)
        items = load_items_json(args.items, strict=args.strict)
        result = build_separators(items, config)
    except FileNotFoundError as e:
        logger.error(str(e))
        return EXIT_INVALID
    except ValidationError as e:
        location = f" at {e.path}" if e.path else ""
        logger.error(f"Invalid item data{location}: {e}")
        return EXIT_INVALID
    except (BuildError, ValueError) as e:
        logger.error(str(e))
        return EXIT_INVALID

    if args.summary:
        print(format_summary(result))
    else:
        print(json.dumps(result.to_dict(), indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
