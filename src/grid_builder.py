"""Crop the working grid to its content, assign clue numbers, build clue lists."""

from __future__ import annotations

import logging
from dataclasses import replace

from models import (
    CrosswordError,
    Direction,
    NumberedClue,
    PlacedWord,
    Placement,
    PuzzleGrid,
    WorkingGrid,
)

logger = logging.getLogger(__name__)


def content_bounds(grid: WorkingGrid) -> tuple[int, int, int, int]:
    """(min_row, max_row, min_col, max_col) over all filled cells."""
    rows = [r for r, row in enumerate(grid) if any(cell is not None for cell in row)]
    cols = [
        c
        for c in range(len(grid[0]) if grid else 0)
        if any(row[c] is not None for row in grid)
    ]
    if not rows:
        raise CrosswordError("Cannot compact a grid with no letters")
    return rows[0], rows[-1], cols[0], cols[-1]


def compact_grid(
    grid: WorkingGrid, placements: list[Placement]
) -> tuple[int, WorkingGrid, list[Placement]]:
    """Translate content to a square of side max(height, width) at the origin.

    The short axis keeps trailing black rows/columns; nothing is re-laid out.
    """
    min_row, max_row, min_col, max_col = content_bounds(grid)
    size = max(max_row - min_row + 1, max_col - min_col + 1)

    compacted: WorkingGrid = [[None] * size for _ in range(size)]
    for r in range(min_row, max_row + 1):
        for c in range(min_col, max_col + 1):
            compacted[r - min_row][c - min_col] = grid[r][c]

    shifted = [
        replace(p, row=p.row - min_row, col=p.col - min_col) for p in placements
    ]
    logger.debug("Compacted grid from %dx%d to %dx%d", len(grid), len(grid), size, size)
    return size, compacted, shifted


def assign_clue_numbers(placements: list[Placement]) -> list[PlacedWord]:
    """Number distinct start cells in reading order; shared starts share a number."""
    by_start: dict[tuple[int, int], list[Placement]] = {}
    for p in placements:
        by_start.setdefault((p.row, p.col), []).append(p)

    numbered: list[PlacedWord] = []
    for number, start in enumerate(sorted(by_start), start=1):
        for p in by_start[start]:
            numbered.append(PlacedWord(
                number=number,
                word=p.word,
                clue=p.clue,
                answer=p.word,
                start_row=p.row,
                start_col=p.col,
                direction=p.direction,
            ))
    return numbered


def build_puzzle(grid: WorkingGrid, placements: list[Placement]) -> PuzzleGrid:
    """Compact and number a finished working grid."""
    size, compacted, shifted = compact_grid(grid, placements)
    return PuzzleGrid(size=size, words=assign_clue_numbers(shifted), grid=compacted)


def build_clue_lists(
    puzzle: PuzzleGrid,
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Split placed words into across/down clue lists sorted by number."""
    across: list[NumberedClue] = []
    down: list[NumberedClue] = []

    for word in puzzle.words:
        clue = NumberedClue(
            number=word.number,
            clue_text=word.clue,
            answer=word.answer,
            direction=word.direction,
        )
        if word.direction == Direction.ACROSS:
            across.append(clue)
        else:
            down.append(clue)

    across.sort(key=lambda c: c.number)
    down.sort(key=lambda c: c.number)
    return across, down
