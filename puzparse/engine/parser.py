"""Parser facade: raw bytes or a file path in, :class:`Puzzle` out."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.constants import DEFAULT_ENCODING
from ..core.exceptions import MalformedStringSectionError, PuzFileNotFoundError
from ..core.models import Puzzle
from ..io.board import read_boards
from ..io.header import read_header
from ..io.strings import read_string_sections
from ..utils.logger import get_logger
from .assembler import assemble_puzzle
from .numbering import number_board


LOGGER = get_logger(__name__)


@dataclass
class ParserConfig:
    """Options controlling how puzzle files are decoded."""

    encoding: str = DEFAULT_ENCODING
    # Treat clue texts left over after numbering as a malformed file.
    strict_clue_count: bool = False


class PuzParser:
    """Decodes ``.puz`` data in one pass."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()

    def parse_file(self, path: Path | str) -> Puzzle:
        path = Path(path)
        if not path.is_file():
            raise PuzFileNotFoundError(f"File not found: {path}")
        LOGGER.debug("Reading %s", path)
        return self.parse_bytes(path.read_bytes())

    def parse_bytes(self, data: bytes) -> Puzzle:
        encoding = self.config.encoding
        header = read_header(data)
        board = read_boards(data, header.width, header.height)
        sections = read_string_sections(data, header, encoding)
        numbering = number_board(board, sections.clues)
        self._check_leftover_clues(numbering.clues_consumed, len(sections.clues))

        puzzle = assemble_puzzle(header, board, sections, numbering, encoding)
        LOGGER.info(
            "Decoded '%s' (%sx%s): %s across, %s down",
            puzzle.title,
            puzzle.columns,
            puzzle.rows,
            len(puzzle.across),
            len(puzzle.down),
        )
        return puzzle

    def _check_leftover_clues(self, consumed: int, available: int) -> None:
        if consumed == available:
            return
        if self.config.strict_clue_count:
            raise MalformedStringSectionError(
                f"Numbering used {consumed} of {available} clue texts"
            )
        LOGGER.warning("Numbering used %s of %s clue texts", consumed, available)


def parse_puz(data: bytes, config: Optional[ParserConfig] = None) -> Puzzle:
    return PuzParser(config).parse_bytes(data)


def parse_puz_file(path: Path | str, config: Optional[ParserConfig] = None) -> Puzzle:
    return PuzParser(config).parse_file(path)
