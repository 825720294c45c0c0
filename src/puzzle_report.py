"""Text views of a finished puzzle: ASCII grid, summary, clues, checks, JSON."""

from __future__ import annotations

import json
from collections import namedtuple

from grid_builder import build_clue_lists
from models import PuzzleGrid

DifficultyAnalysis = namedtuple("DifficultyAnalysis", ["score", "level", "factors"])
ValidationResult = namedtuple("ValidationResult", ["valid", "errors"])

RULE = "━" * 35


def grid_to_ascii(puzzle: PuzzleGrid) -> str:
    """Box-drawn grid. Black cells are solid, start cells show their number."""
    size = puzzle.size
    starts = puzzle.start_numbers()
    lines = ["╔" + "═══╦" * (size - 1) + "═══╗"]

    for r in range(size):
        row = "║"
        for c in range(size):
            cell = puzzle.grid[r][c]
            if cell is None:
                row += "███"
            elif (r, c) in starts:
                row += f"{starts[(r, c)]:>2} "
            else:
                row += f" {cell} "
            row += "║"
        lines.append(row)
        if r < size - 1:
            lines.append("╠" + "═══╬" * (size - 1) + "═══╣")

    lines.append("╚" + "═══╩" * (size - 1) + "═══╝")
    return "\n".join(lines) + "\n"


def density(puzzle: PuzzleGrid) -> float:
    total = puzzle.size * puzzle.size
    return puzzle.filled_cells() / total if total else 0.0


def puzzle_summary(puzzle: PuzzleGrid) -> str:
    across, down = build_clue_lists(puzzle)
    total = puzzle.size * puzzle.size
    filled = puzzle.filled_cells()
    lengths = [len(w.answer) for w in puzzle.words]

    lines = [
        _section("CROSSWORD PUZZLE SUMMARY").strip("\n"),
        f"Grid Size: {puzzle.size} x {puzzle.size}",
        f"Total Words: {len(puzzle.words)}",
        f"Across: {len(across)} | Down: {len(down)}",
        "",
        f"Grid Density: {density(puzzle) * 100:.1f}%",
        f"Filled Cells: {filled}/{total}",
    ]
    if lengths:
        avg = sum(lengths) / len(lengths)
        lines.append("")
        lines.append(f"Word Lengths: {min(lengths)}-{max(lengths)} (avg: {avg:.1f})")
    return "\n".join(lines) + "\n"


def format_clues(puzzle: PuzzleGrid) -> str:
    """ACROSS and DOWN sections sorted by number, with answer lengths."""
    across, down = build_clue_lists(puzzle)
    lines: list[str] = []
    for title, clues in (("ACROSS", across), ("DOWN", down)):
        if not clues:
            continue
        if lines:
            lines.append("")
        lines.extend([RULE, title.center(len(RULE)).rstrip(), RULE])
        for clue in clues:
            lines.append(f"{clue.number:>2}. {clue.clue_text}")
            lines.append(f"    ({len(clue.answer)} letters)")
    return "\n".join(lines) + "\n"


def _tier(value: float, high: float, mid: float) -> int:
    if value >= high:
        return 3
    if value >= mid:
        return 2
    return 1


def analyze_difficulty(puzzle: PuzzleGrid) -> DifficultyAnalysis:
    """Score word count, grid size, average length and density (1-3 each)."""
    factors: list[str] = []
    score = 0

    count = len(puzzle.words)
    tier = _tier(count, 15, 10)
    score += tier
    factors.append({3: "Many words (15+)", 2: "Moderate word count (10-14)",
                    1: "Few words (<10)"}[tier])

    tier = _tier(puzzle.size, 15, 10)
    score += tier
    factors.append({3: "Large grid (15x15+)", 2: "Medium grid (10x14)",
                    1: "Small grid (<10)"}[tier])

    avg_len = sum(len(w.answer) for w in puzzle.words) / count if count else 0.0
    tier = _tier(avg_len, 8, 6)
    score += tier
    factors.append({3: "Long words (avg 8+ letters)", 2: "Medium words (avg 6-7 letters)",
                    1: "Short words (avg <6 letters)"}[tier])

    tier = _tier(density(puzzle), 0.6, 0.4)
    score += tier
    factors.append({3: "High density (60%+ filled)", 2: "Medium density (40-60% filled)",
                    1: "Low density (<40% filled)"}[tier])

    if score <= 5:
        level = "easy"
    elif score <= 8:
        level = "medium"
    elif score <= 11:
        level = "hard"
    else:
        level = "expert"
    return DifficultyAnalysis(score, level, factors)


def validate_puzzle(puzzle: PuzzleGrid) -> ValidationResult:
    """Check word spans against the grid, clue-number sharing and dimensions."""
    errors: list[str] = []

    square = len(puzzle.grid) == puzzle.size and all(
        len(row) == puzzle.size for row in puzzle.grid
    )
    if square:
        errors.extend(_span_errors(puzzle))
    else:
        # Spans can't be read off a ragged grid
        errors.append("Grid dimensions don't match size property")

    by_number: dict[int, list] = {}
    for word in puzzle.words:
        by_number.setdefault(word.number, []).append(word)
    for number, words in sorted(by_number.items()):
        if len(words) > 2:
            errors.append(f"Clue number {number} used by {len(words)} words")
        starts = {(w.start_row, w.start_col) for w in words}
        if len(starts) > 1:
            errors.append(f"Clue number {number} used at different positions")

    return ValidationResult(not errors, errors)


def _span_errors(puzzle: PuzzleGrid) -> list[str]:
    errors: list[str] = []
    for word in puzzle.words:
        for i, (r, c) in enumerate(word.cells()):
            if not (0 <= r < puzzle.size and 0 <= c < puzzle.size):
                errors.append(f"Word {word.number} extends beyond grid bounds")
                break
            if puzzle.grid[r][c] != word.answer[i]:
                errors.append(f"Word {word.number} has incorrect letter at position {i}")
    return errors


def export_puzzle(puzzle: PuzzleGrid) -> str:
    return json.dumps(puzzle.to_dict(), indent=2)


def _section(title: str) -> str:
    return f"\n{RULE}\n{title.center(len(RULE)).rstrip()}\n{RULE}\n"


def generate_report(puzzle: PuzzleGrid) -> str:
    """Grid, summary, clues, difficulty and validation in one block of text."""
    parts = [grid_to_ascii(puzzle), "\n", puzzle_summary(puzzle), "\n", format_clues(puzzle)]

    difficulty = analyze_difficulty(puzzle)
    parts.append(_section("DIFFICULTY ANALYSIS"))
    parts.append(f"Level: {difficulty.level.upper()}\n")
    parts.append(f"Score: {difficulty.score}/12\n")
    parts.append("Factors:\n")
    parts.extend(f"  - {f}\n" for f in difficulty.factors)

    validation = validate_puzzle(puzzle)
    parts.append(_section("VALIDATION"))
    parts.append(f"Status: {'VALID' if validation.valid else 'INVALID'}\n")
    if validation.errors:
        parts.append("Errors:\n")
        parts.extend(f"  - {e}\n" for e in validation.errors)

    return "".join(parts)
