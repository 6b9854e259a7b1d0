"""Pretty-print helpers for decoded puzzles."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..core.models import Puzzle


BLACK_SYMBOL = "#"


def cell_symbol(puzzle: Puzzle, index: int) -> str:
    if index >= len(puzzle.grid):
        return "?"
    letter = puzzle.grid[index]
    return BLACK_SYMBOL if letter == "." else letter


def format_grid(puzzle: Puzzle) -> str:
    width = puzzle.columns
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(puzzle.rows):
        row_cells = [cell_symbol(puzzle, r * width + c) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_numbers(puzzle: Puzzle) -> str:
    """Render ``gridNums`` as a grid, blank for unnumbered cells."""

    width = puzzle.columns
    lines: List[str] = []
    for r in range(puzzle.rows):
        row = puzzle.grid_nums[r * width:(r + 1) * width]
        lines.append(" ".join(f"{n:>3}" if n else "  ." for n in row))
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: Puzzle, *, label: str | None = None, stream=None) -> None:
    """Print the solution grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(puzzle), file=stream)


def print_puzzle_stats(puzzle: Puzzle, *, stream=None) -> None:
    """Print grid, numbering and clue lists for a decoded puzzle."""

    stream = stream or sys.stdout
    pretty_print_puzzle(puzzle, label=puzzle.title or None, stream=stream)

    total_cells = puzzle.rows * puzzle.columns
    black_cells = sum(1 for letter in puzzle.grid if letter == ".")

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {puzzle.rows} x {puzzle.columns} ({total_cells} cells)", file=stream)
    print(f"  Black cells:   {black_cells}", file=stream)
    print(f"  Clues:         {len(puzzle.across)} across, {len(puzzle.down)} down", file=stream)
    if puzzle.author:
        print(f"  Author:        {puzzle.author}", file=stream)
    if puzzle.copyright:
        print(f"  Copyright:     {puzzle.copyright}", file=stream)

    print(file=stream)
    print("--- Numbers ---", file=stream)
    print(format_numbers(puzzle), file=stream)

    for heading, clues in (("Across", puzzle.across), ("Down", puzzle.down)):
        print(file=stream)
        print(f"--- {heading} ---", file=stream)
        for clue in clues:
            print(f"  {clue}", file=stream)

    if puzzle.notes:
        print(file=stream)
        print("--- Notes ---", file=stream)
        print(f"  {puzzle.notes}", file=stream)
