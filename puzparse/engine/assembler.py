"""Combine the decoded pieces into the final :class:`Puzzle`."""

from __future__ import annotations

import re
from typing import Tuple

from ..core.constants import DEFAULT_ENCODING
from ..core.models import Board, ClueEntry, NumberingResult, Puzzle, PuzHeader, StringSections
from ..io.strings import decode_text

NON_WHITESPACE_RE = re.compile(rb"\S")


def format_clue(entry: ClueEntry, encoding: str = DEFAULT_ENCODING) -> str:
    """Render ``"{number}. {text}"``, decoding only after the number is prefixed."""

    prefixed = f"{entry.number}. ".encode("ascii") + entry.text
    return decode_text(prefixed, encoding)


def grid_characters(board: Board, encoding: str = DEFAULT_ENCODING) -> Tuple[str, ...]:
    """Solution cells in row-major order with whitespace bytes dropped."""

    return tuple(decode_text(cell, encoding) for cell in NON_WHITESPACE_RE.findall(board.solution))


def assemble_puzzle(
    header: PuzHeader,
    board: Board,
    sections: StringSections,
    numbering: NumberingResult,
    encoding: str = DEFAULT_ENCODING,
) -> Puzzle:
    return Puzzle(
        title=sections.title,
        author=sections.author,
        across=tuple(format_clue(entry, encoding) for entry in numbering.across),
        down=tuple(format_clue(entry, encoding) for entry in numbering.down),
        grid=grid_characters(board, encoding),
        grid_nums=numbering.grid_nums,
        columns=board.width,
        rows=board.height,
        copyright=sections.copyright,
        notes=sections.notes,
        header=header,
    )
