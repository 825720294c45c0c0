"""Write a finished crossword's clues and solution grid to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from grid_builder import build_clue_lists
from models import PuzzleGrid, WordInput

_BLACK = PatternFill(fill_type="solid", start_color="000000", end_color="000000")


def write_clues_xlsx(
    puzzle: PuzzleGrid,
    output_path: str,
    unplaced: list[WordInput] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Numbering is embedded in the clue cell: '1. Clue text'.
    Answers are in column B.
    A "Grid" sheet holds the solution with black cells filled.
    If *unplaced* is provided, a further sheet lists words that didn't fit.
    """
    across, down = build_clue_lists(puzzle)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1

    for title, clues in (("ACROSS", across), ("DOWN", down)):
        if row > 1:
            # Blank separator
            row += 1
        ws.cell(row=row, column=1, value=title).font = header_font
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    _write_grid_sheet(wb, puzzle)

    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Clue").font = header_font
        ws2.cell(row=1, column=2, value="Answer").font = header_font
        for i, entry in enumerate(unplaced, start=2):
            ws2.cell(row=i, column=1, value=entry.clue)
            ws2.cell(row=i, column=2, value=entry.word)

    wb.save(output_path)


def _write_grid_sheet(wb, puzzle: PuzzleGrid) -> None:
    ws = wb.create_sheet(title="Grid")
    centered = Alignment(horizontal="center", vertical="center")
    for r, cells in enumerate(puzzle.grid, start=1):
        for c, letter in enumerate(cells, start=1):
            cell = ws.cell(row=r, column=c)
            if letter is None:
                cell.fill = _BLACK
            else:
                cell.value = letter
                cell.alignment = centered
    for c in range(1, puzzle.size + 1):
        ws.column_dimensions[get_column_letter(c)].width = 4
