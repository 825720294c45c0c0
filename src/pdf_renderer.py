"""Render a crossword puzzle to a newspaper-style PDF using ReportLab.

Layout: grid centered at top, all clues (across + down) in multi-column
format below the grid; the answer key goes on page 2.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Paragraph

from grid_builder import build_clue_lists
from models import NumberedClue, PuzzleGrid

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
SECTION_HEADER_H = 14.0
HEADER_GAP = 4.0


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Grid
    grid_size: int = 15
    cell_size: float = 24.0
    grid_dim: float = 0.0
    grid_x: float = 0.0
    grid_y: float = 0.0  # top of grid in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0

    # Fonts
    clue_font_size: float = 9.0
    clue_leading: float = 10.5
    space_after: float = 1.5
    number_font_size: float = 6.0

    # Clue zone (all clues below grid)
    clue_zone_y: float = 0.0  # top of clue area
    clue_cols: int = 3
    clue_gutter: float = 12.0
    clue_col_w: float = 0.0

    title: str = "CROSSWORD"


def render_pdf(puzzle: PuzzleGrid, title: str, output_path: str) -> None:
    """Compute layout, adaptive fit, draw page 1 (puzzle) + page 2 (answer key)."""
    across, down = build_clue_lists(puzzle)
    layout = _compute_layout(puzzle.size, across, down, title)
    layout = _adaptive_fit(across, down, layout)

    c = Canvas(output_path, pagesize=letter)

    _draw_title_banner(c, layout)
    _draw_grid(c, puzzle, layout, show_answers=False)
    _draw_clue_zone(c, across, down, layout)
    c.showPage()

    _draw_answer_key_page(c, puzzle, layout)
    c.showPage()

    c.save()


def _compute_layout(
    grid_size: int,
    across: list[NumberedClue],
    down: list[NumberedClue],
    title: str,
) -> LayoutParams:
    """Calculate all positions and sizes."""
    lp = LayoutParams(grid_size=grid_size, title=title)

    if grid_size <= 13:
        lp.cell_size, lp.number_font_size = 24.0, 8.5
    elif grid_size <= 15:
        lp.cell_size, lp.number_font_size = 24.0, 8.0
    elif grid_size <= 17:
        lp.cell_size, lp.number_font_size = 21.0, 7.0
    else:
        lp.cell_size, lp.number_font_size = 17.0, 6.0
    # Large freeform grids must still fit the page width
    lp.cell_size = min(lp.cell_size, lp.usable_w / max(grid_size, 1))

    lp.clue_cols = 3 if len(across) + len(down) < 40 else 4

    _recompute_positions(lp)
    return lp


def _recompute_positions(lp: LayoutParams) -> None:
    """(Re)calculate derived positions from current params."""
    lp.grid_dim = lp.cell_size * lp.grid_size
    lp.banner_y = lp.page_h - lp.margin - lp.banner_h

    lp.grid_x = (lp.page_w - lp.grid_dim) / 2
    lp.grid_y = lp.banner_y - 8

    lp.clue_zone_y = lp.grid_y - lp.grid_dim - 12

    total_gutter = lp.clue_gutter * (lp.clue_cols - 1)
    lp.clue_col_w = (lp.usable_w - total_gutter) / lp.clue_cols


def _adaptive_fit(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> LayoutParams:
    """Step through adjustments until all content fits on page 1."""
    for _ in range(12):
        if _content_fits(across, down, layout):
            return layout

        if layout.clue_font_size > 6.0:
            layout.clue_font_size -= 0.5
            layout.clue_leading = layout.clue_font_size + 1.5
            continue

        if layout.space_after > 0.5:
            layout.space_after = 0.5
            continue

        if layout.clue_cols < 5:
            layout.clue_cols += 1
            _recompute_positions(layout)
            continue

        if layout.cell_size > 12:
            layout.cell_size -= 1
            _recompute_positions(layout)
            continue

        break

    return layout


def _content_fits(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> bool:
    """Check if all clues fit below the grid on page 1."""
    columns = _distribute_columns(across, down, layout)
    tallest = max((_column_height(col) for col in columns), default=0.0)
    return tallest <= layout.clue_zone_y - layout.margin


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_leading,
        spaceAfter=layout.space_after,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)}"


def _distribute_columns(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> list[list[tuple[str, str, float]]]:
    """Flow headers and measured clues into balanced columns.

    Items are ``(kind, content, height)`` with kind ``header`` or ``clue``.
    """
    style = _clue_style(layout)
    items: list[tuple[str, str, float]] = []
    for title, clues in (("ACROSS", across), ("DOWN", down)):
        items.append(("header", title, SECTION_HEADER_H + HEADER_GAP))
        for clue in clues:
            markup = _clue_markup(clue)
            _, h = Paragraph(markup, style).wrap(layout.clue_col_w, 10000)
            items.append(("clue", markup, h + style.spaceAfter))

    target = sum(h for _, _, h in items) / layout.clue_cols
    columns: list[list[tuple[str, str, float]]] = [[] for _ in range(layout.clue_cols)]
    col_idx = 0

    for item in items:
        current = columns[col_idx]
        if (col_idx < layout.clue_cols - 1
                and current
                and _column_height(current) + item[2] > target * 1.05):
            # Don't leave a header stranded at the bottom of a column
            stray = current.pop() if current[-1][0] == "header" else None
            col_idx += 1
            if stray is not None:
                columns[col_idx].append(stray)
        columns[col_idx].append(item)

    return columns


def _column_height(column: list[tuple[str, str, float]]) -> float:
    return sum(h for _, _, h in column)


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    c.drawString(x + (w - text_w) / 2, y + (h - 16) / 2 + 2, layout.title)


def _draw_grid(c, puzzle: PuzzleGrid, layout: LayoutParams, show_answers: bool) -> None:
    """Draw the crossword grid: black/white cells, numbers, optional letters."""
    x0 = layout.grid_x
    y0 = layout.grid_y
    cs = layout.cell_size
    starts = puzzle.start_numbers()

    for r, row in enumerate(puzzle.grid):
        for col, cell_letter in enumerate(row):
            cx = x0 + col * cs
            cy = y0 - (r + 1) * cs

            if cell_letter is None:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            number = starts.get((r, col))
            if number is not None:
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(cx + 1.5, cy + cs - layout.number_font_size - 1, str(number))

            # Answer letter (shifted down-right to avoid number)
            if show_answers:
                c.setFillColorRGB(0, 0, 0)
                font_size = cs * 0.45
                c.setFont("Helvetica", font_size)
                lw = stringWidth(cell_letter, "Helvetica", font_size)
                c.drawString(cx + cs * 0.55 - lw / 2, cy + cs * 0.42 - font_size / 2, cell_letter)

    # Outer border
    size = puzzle.size
    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - size * cs, size * cs, size * cs, fill=0, stroke=1)


def _draw_clue_zone(
    c,
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> None:
    """Draw all clues (across + down) in balanced multi-column layout below grid."""
    style = _clue_style(layout)
    columns = _distribute_columns(across, down, layout)

    for i, col_items in enumerate(columns):
        col_x = layout.margin + i * (layout.clue_col_w + layout.clue_gutter)
        current_y = layout.clue_zone_y

        for kind, content, h in col_items:
            if kind == "header":
                _draw_section_header(c, content, col_x, current_y, layout.clue_col_w)
                current_y -= h
            else:
                p = Paragraph(content, style)
                p.wrap(layout.clue_col_w, 10000)
                p.drawOn(c, col_x, current_y - h)
                current_y -= h


def _draw_section_header(c, text: str, x: float, y: float, width: float) -> None:
    """Black rect + white bold text."""
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - SECTION_HEADER_H, width, SECTION_HEADER_H, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - SECTION_HEADER_H + 3.5, text)


def _draw_answer_key_page(c, puzzle: PuzzleGrid, layout: LayoutParams) -> None:
    """Draw the answer key page: banner + filled grid centered on page."""
    ak = LayoutParams(
        grid_size=layout.grid_size,
        cell_size=layout.cell_size,
        number_font_size=layout.number_font_size,
        title="ANSWER KEY",
    )
    ak.grid_dim = ak.cell_size * ak.grid_size
    ak.banner_y = ak.page_h - ak.margin - ak.banner_h
    ak.grid_x = (ak.page_w - ak.grid_dim) / 2
    ak.grid_y = ak.banner_y - 20

    _draw_title_banner(c, ak)
    _draw_grid(c, puzzle, ak, show_answers=True)
