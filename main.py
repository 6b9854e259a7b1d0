"""CLI entrypoint for the ``.puz`` crossword decoder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from puzparse.core.constants import DEFAULT_ENCODING
from puzparse.core.exceptions import PuzError
from puzparse.engine.parser import ParserConfig, PuzParser
from puzparse.utils.logger import configure_logging, get_logger
from puzparse.utils.pretty import print_puzzle_stats


LOGGER = get_logger("puzparse.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decode an Across Lite .puz crossword into JSON",
    )
    parser.add_argument("puz_file", type=Path, help="Path to the .puz file")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--encoding",
        type=str,
        default=DEFAULT_ENCODING,
        help=f"Single-byte charset of the text sections (default {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--metadata",
        action="store_true",
        help="Include copyright, notes and raw header fields in the JSON",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid, numbering and clues instead of JSON",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the file holds more clue texts than the grid numbers",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    config = ParserConfig(encoding=args.encoding, strict_clue_count=args.strict)
    try:
        puzzle = PuzParser(config).parse_file(args.puz_file)
    except PuzError as exc:
        LOGGER.error("Failed to decode %s: %s", args.puz_file, exc)
        return 1

    if args.pretty:
        print_puzzle_stats(puzzle)
        return 0

    payload: Dict[str, Any] = puzzle.to_jsonable(include_metadata=args.metadata)
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
