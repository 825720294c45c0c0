"""Render a crossword grid as standalone SVG."""

from __future__ import annotations

from models import PuzzleGrid


def render_svg(
    puzzle: PuzzleGrid,
    output_path: str,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> None:
    """Write the crossword grid to an SVG file."""
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(svg_markup(puzzle, show_answers=show_answers, cell_size=cell_size))


def svg_markup(
    puzzle: PuzzleGrid,
    show_answers: bool = False,
    cell_size: float | None = None,
) -> str:
    if cell_size is None:
        cell_size = _default_cell_size(puzzle.size)

    number_font = _number_font_size(puzzle.size)
    letter_font = cell_size * 0.45
    grid_dim = cell_size * puzzle.size
    starts = puzzle.start_numbers()

    parts: list[str] = [
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{grid_dim}" height="{grid_dim}" '
        f'viewBox="0 0 {grid_dim} {grid_dim}">\n'
    ]

    for r, row in enumerate(puzzle.grid):
        for c, letter in enumerate(row):
            x = c * cell_size
            y = r * cell_size

            if letter is None:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="black"/>\n'
                )
                continue

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="white" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )

            number = starts.get((r, c))
            if number is not None:
                parts.append(
                    f'  <text x="{x + 1.5}" y="{y + number_font + 1}" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-weight="bold" font-size="{number_font}" '
                    f'fill="black">{number}</text>\n'
                )

            if show_answers:
                parts.append(
                    f'  <text x="{x + cell_size * 0.55}" y="{y + cell_size * 0.58}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="Helvetica, Arial, sans-serif" '
                    f'font-size="{letter_font}" '
                    f'fill="black">{letter}</text>\n'
                )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{grid_dim}" height="{grid_dim}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append("</svg>\n")
    return "".join(parts)


def render_puzzle_svg(puzzle: PuzzleGrid, output_path: str) -> None:
    """Render puzzle grid (no answers) to SVG."""
    render_svg(puzzle, output_path, show_answers=False)


def render_answer_svg(puzzle: PuzzleGrid, output_path: str) -> None:
    """Render answer grid (with letters) to SVG."""
    render_svg(puzzle, output_path, show_answers=True)


def _default_cell_size(grid_size: int) -> float:
    if grid_size <= 15:
        return 24.0
    elif grid_size <= 17:
        return 21.0
    else:
        return 17.0


def _number_font_size(grid_size: int) -> float:
    if grid_size <= 13:
        return 8.5
    elif grid_size <= 15:
        return 8.0
    elif grid_size <= 17:
        return 7.0
    else:
        return 6.0
