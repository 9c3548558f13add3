"""Command-line entry point: remove tags from a fragment and print the result."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from fragedit.config import DEFAULT_LOG_LEVEL, FRAGEDIT_LOG_LEVEL
from fragedit.editor import DEMO_FRAGMENT, EditOptions, edit_fragment
from fragedit.exceptions import FragmentEditorError
from fragedit.fetch import load_html

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fragedit",
        description="Remove elements by tag name from an HTML fragment and print the markup.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="URL to fetch the fragment from")
    source.add_argument("--file", help="Local HTML file path")
    parser.add_argument(
        "--remove",
        action="append",
        metavar="TAG",
        help="Tag name to remove (repeatable). Defaults to 'i' for the built-in demo.",
    )
    parser.add_argument(
        "--log-level",
        default=FRAGEDIT_LOG_LEVEL if FRAGEDIT_LOG_LEVEL in LOG_LEVELS else DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    remove_tags = args.remove
    try:
        if args.url or args.file:
            html = asyncio.run(load_html(url=args.url, file_path=args.file))
        else:
            logger.info("No input given, running the built-in demo fragment")
            html = DEMO_FRAGMENT
            remove_tags = remove_tags or ["i"]
        result = edit_fragment(html, EditOptions(remove_tags=remove_tags or []))
    except (FragmentEditorError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result.html)
    return 0
