"""Board extraction: the solution and player copies that follow the header."""

from __future__ import annotations

from ..core.constants import BOARD_OFFSET
from ..core.exceptions import InvalidDimensionsError
from ..core.models import Board
from .header import read_bytes


def strings_offset(width: int, height: int) -> int:
    """Offset of the string section, just past both board copies."""

    return BOARD_OFFSET + 2 * width * height


def read_boards(data: bytes, width: int, height: int) -> Board:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(f"Invalid grid dimensions {width}x{height}")
    size = width * height
    solution = read_bytes(data, BOARD_OFFSET, size)
    player = read_bytes(data, BOARD_OFFSET + size, size)
    return Board(width=width, height=height, solution=solution, player=player)
