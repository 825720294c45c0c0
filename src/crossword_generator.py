#!/usr/bin/env python3
"""Crossword generation entry point and command-line interface.

``generate_crossword`` turns word/clue pairs into a compacted, numbered
PuzzleGrid. The CLI reads pairs from XLSX and writes PDF, clue XLSX and
puzzle/answer SVGs.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path

from grid_builder import build_puzzle
from grid_placer import place_words
from models import (
    CrosswordError,
    EmptyInputError,
    GeneratorConfig,
    NoValidWordsError,
    PuzzleGrid,
    WordInput,
)
from normalizer import normalize_words

logger = logging.getLogger(__name__)


def generate_crossword(
    word_inputs: Sequence[WordInput | Mapping],
    config: GeneratorConfig | None = None,
    **overrides,
) -> PuzzleGrid:
    """Build a puzzle from *word_inputs*.

    Keyword *overrides* (``max_attempts``, ``min_intersections``,
    ``grid_padding``) replace fields of *config*. Raises EmptyInputError,
    NoValidWordsError or InsufficientPlacementError; never returns a
    partial puzzle. Identical input and config give an identical result.
    """
    if not word_inputs:
        raise EmptyInputError("No words provided")

    config = config or GeneratorConfig()
    if overrides:
        config = replace(config, **overrides)

    words = normalize_words(word_inputs)
    if not words:
        raise NoValidWordsError("No valid words after normalization")

    logger.info("Generating puzzle with %d words", len(words))
    working, placements = place_words(words, config)
    return build_puzzle(working, placements)


def unplaced_words(words: Sequence[WordInput], puzzle: PuzzleGrid) -> list[WordInput]:
    """Normalized entries from *words* that did not make it onto *puzzle*."""
    remaining = [w.word for w in puzzle.words]
    result: list[WordInput] = []
    for entry in normalize_words(words):
        if entry.word in remaining:
            remaining.remove(entry.word)
        else:
            result.append(entry)
    return result


# ── CLI ───────────────────────────────────────────────────────────────

def _build_arg_parser() -> argparse.ArgumentParser:
    from word_selection import Difficulty

    p = argparse.ArgumentParser(
        description="Generate a crossword puzzle from an XLSX word list."
    )
    p.add_argument("input", help="Path to XLSX file with words (column A) and clues (column B)")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: input with .pdf extension)",
    )
    p.add_argument("--title", default="CROSSWORD",
                   help='Title text (default: "CROSSWORD")')
    p.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=None,
                   help="Select a subset of words by difficulty before generating")
    p.add_argument("--max-words", type=int, default=12,
                   help="Words to select with --difficulty (default: 12)")
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed for --difficulty selection")
    p.add_argument("--max-attempts", type=int, default=50,
                   help="Placement attempts per word (default: 50)")
    p.add_argument("--min-intersections", type=int, default=None,
                   help="Minimum placement score to accept a word (default: 1, 2 for hard)")
    p.add_argument("--grid-padding", type=int, default=2,
                   help="Grid padding (default: 2)")
    p.add_argument("--json", dest="json_path", default=None,
                   help="Also export the puzzle as JSON to this path")
    p.add_argument("--report", action="store_true",
                   help="Print an ASCII grid and report to stdout")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log placement details")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    t0 = time.time()

    try:
        _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, t0: float) -> None:
    from puzzle_report import export_puzzle, generate_report
    from word_selection import Difficulty, min_intersections_for, select_words
    from xlsx_reader import read_words

    input_path = Path(args.input)
    output_path = args.output or str(input_path.with_suffix(".pdf"))

    words = read_words(input_path)
    print(f"Read {len(words)} word entries", file=sys.stderr)

    min_intersections = args.min_intersections
    if args.difficulty is not None:
        difficulty = Difficulty(args.difficulty)
        words = select_words(words, difficulty, max_words=args.max_words, seed=args.seed)
        print(f"Selected {len(words)} {difficulty.value} words", file=sys.stderr)
        if min_intersections is None:
            min_intersections = min_intersections_for(difficulty)

    config = GeneratorConfig(
        max_attempts=args.max_attempts,
        min_intersections=1 if min_intersections is None else min_intersections,
        grid_padding=args.grid_padding,
    )
    puzzle = generate_crossword(words, config)
    unplaced = unplaced_words(words, puzzle)

    _output_all(puzzle, args.title, output_path, unplaced=unplaced)

    if args.json_path:
        Path(args.json_path).write_text(export_puzzle(puzzle), encoding="utf-8")
        print(f"Output: {args.json_path}", file=sys.stderr)
    if args.report:
        print(generate_report(puzzle))

    elapsed = time.time() - t0
    density = puzzle.filled_cells() / (puzzle.size * puzzle.size) * 100
    print(
        f"Placed {len(puzzle.words)}/{len(puzzle.words) + len(unplaced)} words, "
        f"grid {puzzle.size}x{puzzle.size}, "
        f"density {density:.0f}%, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _output_all(
    puzzle: PuzzleGrid,
    title: str,
    output_path: str,
    unplaced: list[WordInput] | None = None,
) -> None:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(puzzle, title, pdf_path)
    write_clues_xlsx(puzzle, xlsx_path, unplaced=unplaced)
    render_puzzle_svg(puzzle, puzzle_svg_path)
    render_answer_svg(puzzle, answer_svg_path)

    for path in (pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path):
        print(f"Output: {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
