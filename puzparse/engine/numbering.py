"""Crossword numbering: walk the board and pair word starts with clue text.

Cells are visited row-major. A playable cell receives a number when it starts
an across word, a down word, or both; across and down at the same cell share
one number. Clue texts are consumed in visiting order (across before down at
each cell), which is the order they are stored in the file.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

from ..core.constants import Direction
from ..core.exceptions import MalformedStringSectionError
from ..core.models import Board, ClueEntry, NumberingResult


class _NumberingState(NamedTuple):
    current_number: int
    clue_cursor: int


def cell_needs_across_number(board: Board, x: int, y: int) -> bool:
    """Left is black/edge AND right is playable."""
    if x == 0 or board.is_black(x - 1, y):
        return x + 1 < board.width and not board.is_black(x + 1, y)
    return False


def cell_needs_down_number(board: Board, x: int, y: int) -> bool:
    """Top is black/edge AND bottom is playable."""
    if y == 0 or board.is_black(x, y - 1):
        return y + 1 < board.height and not board.is_black(x, y + 1)
    return False


_DIRECTION_TESTS = (
    (Direction.ACROSS, cell_needs_across_number),
    (Direction.DOWN, cell_needs_down_number),
)


def _clue_text(clue_texts: Sequence[bytes], cursor: int, x: int, y: int) -> bytes:
    if cursor >= len(clue_texts):
        raise MalformedStringSectionError(
            f"Ran out of clue texts at cell ({x},{y}): only {len(clue_texts)} provided"
        )
    return clue_texts[cursor]


def _number_cell(
    state: _NumberingState,
    board: Board,
    clue_texts: Sequence[bytes],
    x: int,
    y: int,
) -> Tuple[_NumberingState, int, List[ClueEntry]]:
    """Number one cell, returning the next state, the cell's number and new clues."""

    if board.is_black(x, y):
        return state, 0, []

    entries: List[ClueEntry] = []
    cursor = state.clue_cursor
    for direction, needs_number in _DIRECTION_TESTS:
        if needs_number(board, x, y):
            text = _clue_text(clue_texts, cursor, x, y)
            entries.append(ClueEntry(number=state.current_number, direction=direction, text=text))
            cursor += 1

    if not entries:
        return state, 0, entries
    next_state = _NumberingState(current_number=state.current_number + 1, clue_cursor=cursor)
    return next_state, state.current_number, entries


def number_board(board: Board, clue_texts: Sequence[bytes]) -> NumberingResult:
    """Assign clue numbers to ``board`` and pair them with ``clue_texts`` in order."""

    state = _NumberingState(current_number=1, clue_cursor=0)
    grid_nums: List[int] = []
    across: List[ClueEntry] = []
    down: List[ClueEntry] = []

    for y in range(board.height):
        for x in range(board.width):
            state, number, entries = _number_cell(state, board, clue_texts, x, y)
            grid_nums.append(number)
            for entry in entries:
                if entry.direction == Direction.ACROSS:
                    across.append(entry)
                else:
                    down.append(entry)

    return NumberingResult(
        grid_nums=tuple(grid_nums),
        across=tuple(across),
        down=tuple(down),
        clues_consumed=state.clue_cursor,
    )
