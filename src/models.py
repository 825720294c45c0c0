"""Data models for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

WorkingGrid = list[list[Optional[str]]]


class Direction(Enum):
    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> tuple[int, int]:
        """(row, col) delta between consecutive letters."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> Direction:
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


@dataclass(frozen=True)
class WordInput:
    """A word/clue pair as supplied by the caller. ``word`` may be raw text."""

    word: str
    clue: str = ""


@dataclass(frozen=True)
class Placement:
    """A word positioned on the working grid. ``row``/``col`` is the first letter."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction = Direction.ACROSS
    score: int = 0

    def cells(self) -> list[tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]


@dataclass(frozen=True)
class PlacedWord:
    """A placement with its clue number, re-based onto the compacted grid."""

    number: int
    word: str
    clue: str
    answer: str
    start_row: int
    start_col: int
    direction: Direction

    def cells(self) -> list[tuple[int, int]]:
        dr, dc = self.direction.step
        return [
            (self.start_row + dr * i, self.start_col + dc * i)
            for i in range(len(self.answer))
        ]

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "word": self.word,
            "clue": self.clue,
            "answer": self.answer,
            "startRow": self.start_row,
            "startCol": self.start_col,
            "direction": self.direction.value,
        }


@dataclass
class PuzzleGrid:
    """A finished, compacted and numbered crossword."""

    size: int
    words: list[PlacedWord] = field(default_factory=list)
    grid: WorkingGrid = field(default_factory=list)

    def start_numbers(self) -> dict[tuple[int, int], int]:
        """Map each word-start cell to its clue number."""
        return {(w.start_row, w.start_col): w.number for w in self.words}

    def filled_cells(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "words": [w.to_dict() for w in self.words],
            "grid": [list(row) for row in self.grid],
        }


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its grid-assigned display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


@dataclass(frozen=True)
class GeneratorConfig:
    """Tuning knobs for :func:`crossword_generator.generate_crossword`.

    ``grid_padding`` is accepted for compatibility with callers but the
    compactor always crops to the tight bounding box.
    """

    max_attempts: int = 50
    min_intersections: int = 1
    grid_padding: int = 2


class CrosswordError(Exception):
    """Fatal error during crossword generation."""


class EmptyInputError(CrosswordError):
    """No word/clue pairs were supplied."""


class NoValidWordsError(CrosswordError):
    """Every supplied word was rejected during normalization."""


class InsufficientPlacementError(CrosswordError):
    """Too few words could be placed to form a puzzle."""

    def __init__(self, placed: int, required: int) -> None:
        super().__init__(
            f"Placed only {placed} words (minimum {required} required)"
        )
        self.placed = placed
        self.required = required
