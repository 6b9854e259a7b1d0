"""Decoder for Across Lite ``.puz`` crossword files.

This package exposes the public API surface via:

- ``puzparse.engine.parser.PuzParser``: decodes bytes or files into a puzzle.
- ``puzparse.engine.parser.parse_puz`` / ``parse_puz_file``: one-shot helpers.
- ``puzparse.core.models.Puzzle``: the decoded result, with ``to_jsonable``.
"""

from .core.exceptions import PuzError
from .core.models import Puzzle
from .engine.parser import ParserConfig, PuzParser, parse_puz, parse_puz_file

__all__ = [
    "PuzParser",
    "ParserConfig",
    "Puzzle",
    "PuzError",
    "parse_puz",
    "parse_puz_file",
]

__version__ = "0.1.0"
