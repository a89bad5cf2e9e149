"""
Entry point for the stylegrid demo.
"""

import sys
import argparse
import logging
from typing import List, Optional

from .core.grid import Grid, Style
from .core.syntax import SyntaxHighlighter
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="stylegrid - paint text into a grid of styled cells and dump it"
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        help="Files to paint; without files a small demo grid is printed"
    )
    parser.add_argument(
        "--language",
        type=str,
        default=None,
        help="Pygments language alias, overrides detection"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log records to this file"
    )
    return parser.parse_args(argv)


def build_demo_grid() -> Grid:
    """Build the small grid printed when no files are given."""

    grid = Grid()
    grid.put_char(1, 1, '*', Style.KEYWORD)
    grid.put_string(2, 2, "void", Style.KEYWORD)
    grid.insert_char(1, 1, '@', Style.SYMBOL)
    return grid


def paint_file(filename: str, language: Optional[str] = None) -> Grid:
    """Read a file and paint its highlighted lines into a new grid."""

    with open(filename, 'r', encoding='utf-8', errors='replace') as f:
        content = f.read()

    highlighter = SyntaxHighlighter()
    if language:
        highlighter.set_language(language)
    else:
        highlighter.detect_language(filename, content)

    grid = Grid()
    count = highlighter.paint_text(grid, content)
    logger.info("Painted %d line(s) of %s as %s", count, filename,
                highlighter.get_language_name() or "plain text")
    return grid


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING, args.log_file)

    if not args.files:
        print(repr(build_demo_grid()))
        return 0

    for filename in args.files:
        try:
            grid = paint_file(filename, args.language)
        except (OSError, ValueError) as e:
            print(f"Error loading {filename}: {e}", file=sys.stderr)
            return 1

        print(f"{filename}:")
        print(repr(grid))

    return 0


if __name__ == "__main__":
    sys.exit(main())
