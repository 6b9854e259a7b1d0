"""Data models produced while decoding a puzzle file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import BLACK_CELL, EXPECTED_MAGIC, Bounds, CellType, Direction


@dataclass(frozen=True)
class PuzHeader:
    """Scalar fields read from the fixed-size file header."""

    checksum: int
    magic: bytes
    cib_checksum: int
    masked_low_checksums: bytes
    masked_high_checksums: bytes
    version_string: bytes
    reserved_1c: bytes
    scrambled_checksum: int
    reserved_20: bytes
    width: int
    height: int
    num_clues: int
    unknown_bitmask: int
    scrambled_tag: int

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def has_expected_magic(self) -> bool:
        return self.magic == EXPECTED_MAGIC

    @property
    def is_scrambled(self) -> bool:
        return self.scrambled_tag != 0

    @property
    def version(self) -> str:
        return self.version_string.split(b"\x00", 1)[0].decode("ascii", errors="replace")

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "checksum": self.checksum,
            "magic": self.magic.hex(),
            "cibChecksum": self.cib_checksum,
            "maskedLowChecksums": self.masked_low_checksums.hex(),
            "maskedHighChecksums": self.masked_high_checksums.hex(),
            "version": self.version,
            "scrambledChecksum": self.scrambled_checksum,
            "width": self.width,
            "height": self.height,
            "numClues": self.num_clues,
            "unknownBitmask": self.unknown_bitmask,
            "scrambledTag": self.scrambled_tag,
        }


@dataclass(frozen=True)
class Board:
    """Solution and player boards, each ``width * height`` cell codes in row-major order."""

    width: int
    height: int
    solution: bytes
    player: bytes

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def location(self, idx: int) -> Tuple[int, int]:
        """Return the ``(x, y)`` coordinates of a flattened cell index."""

        return idx % self.width, idx // self.width

    def cell(self, x: int, y: int) -> int:
        return self.solution[self.index(x, y)]

    def cell_type(self, x: int, y: int) -> CellType:
        return CellType.BLACK if self.is_black(x, y) else CellType.PLAYABLE

    def is_black(self, x: int, y: int) -> bool:
        # Cells beyond the edge behave as walls.
        if not self.bounds.contains(y, x):
            return True
        return self.cell(x, y) == BLACK_CELL


@dataclass(frozen=True)
class StringSections:
    """The NUL-terminated strings that follow the two boards."""

    title: str
    author: str
    copyright: str
    clues: Tuple[bytes, ...]
    notes: str
    trailing: int = 0


@dataclass(frozen=True)
class ClueEntry:
    """A numbered clue. ``text`` keeps the raw bytes from the string section."""

    number: int
    direction: Direction
    text: bytes


@dataclass(frozen=True)
class NumberingResult:
    grid_nums: Tuple[int, ...]
    across: Tuple[ClueEntry, ...]
    down: Tuple[ClueEntry, ...]
    clues_consumed: int


@dataclass(frozen=True)
class Puzzle:
    """The decoded puzzle in its final, directly usable form."""

    title: str
    author: str
    across: Tuple[str, ...]
    down: Tuple[str, ...]
    grid: Tuple[str, ...]
    grid_nums: Tuple[int, ...]
    columns: int
    rows: int
    copyright: str = ""
    notes: str = ""
    header: Optional[PuzHeader] = None

    def to_jsonable(self, include_metadata: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "title": self.title,
            "author": self.author,
            "clues": {"across": list(self.across), "down": list(self.down)},
            "grid": list(self.grid),
            "gridNums": list(self.grid_nums),
            "gridSize": {"columns": self.columns, "rows": self.rows},
        }
        if include_metadata:
            payload["copyright"] = self.copyright
            payload["notes"] = self.notes
            payload["header"] = self.header.to_jsonable() if self.header else None
        return payload
