"""Command line interface for Merchant's Guide.

    merchants-guide notes.txt
    merchants-guide --json < notes.txt
    merchants-guide                      # interactive, 'exit' to quit
"""

import argparse
import logging
import sys
from typing import Iterator, Optional, Sequence

from merchants_guide.session import GuideSession, SessionConfig, run_lines

logger = logging.getLogger(__name__)


def _interactive_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merchants-guide",
        description="Answer questions about galactic numerals and Credits.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="file with one statement or question per line (default: stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print one JSON transcript record per input line",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level for stderr (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = SessionConfig()
    session = GuideSession(config)

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                run_lines(f, sys.stdout, session, json_output=args.json)
        except OSError as e:
            logger.error("Cannot read %s: %s", args.file, e)
            return 1
    elif sys.stdin.isatty():
        run_lines(_interactive_lines(config.prompt), sys.stdout, session, json_output=args.json)
    else:
        run_lines(sys.stdin, sys.stdout, session, json_output=args.json)

    return 0
