"""Shared constants and enumerations for the puzzle decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CellType(str, Enum):
    """Cell kinds found on a decoded board."""

    BLACK = "BLACK"
    PLAYABLE = "PLAYABLE"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"


# Header layout, all multi-byte integers little-endian.
HEADER_SIZE = 0x34
CHECKSUM_OFFSET = 0x00
MAGIC_OFFSET = 0x02
MAGIC_LENGTH = 0x0C
CIB_CHECKSUM_OFFSET = 0x0E
MASKED_LOW_OFFSET = 0x10
MASKED_HIGH_OFFSET = 0x14
MASKED_LENGTH = 0x04
VERSION_OFFSET = 0x18
VERSION_LENGTH = 0x04
RESERVED_1C_OFFSET = 0x1C
RESERVED_1C_LENGTH = 0x02
SCRAMBLED_CHECKSUM_OFFSET = 0x1E
RESERVED_20_OFFSET = 0x20
RESERVED_20_LENGTH = 0x0C
WIDTH_OFFSET = 0x2C
HEIGHT_OFFSET = 0x2D
NUM_CLUES_OFFSET = 0x2E
UNKNOWN_BITMASK_OFFSET = 0x30
SCRAMBLED_TAG_OFFSET = 0x32

BOARD_OFFSET = HEADER_SIZE

EXPECTED_MAGIC = b"ACROSS&DOWN\x00"

BLACK_CELL = ord(".")

# Strings stored before and after the clue texts in the string section.
SECTIONS_BEFORE_CLUES = ("title", "author", "copyright")
SECTIONS_AFTER_CLUES = ("notes",)

DEFAULT_ENCODING = "ISO-8859-1"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
