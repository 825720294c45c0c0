"""Crossword word placement: greedy, deterministic, longest word first."""

from __future__ import annotations

import logging
from collections import namedtuple

from models import (
    Direction,
    EmptyInputError,
    GeneratorConfig,
    InsufficientPlacementError,
    Placement,
    WordInput,
    WorkingGrid,
)

logger = logging.getLogger(__name__)

Intersection = namedtuple("Intersection", ["word_index", "placed_index"])

MIN_WORKING_SIZE = 30
INTERSECTION_SCORE = 10
NEAR_DISTANCE = 5
CLOSE_DISTANCE = 3
PROXIMITY_BONUS = 5
LONG_WORD_LENGTH = 6
LONG_WORD_PENALTY = 5


def working_grid_size(words: list[WordInput]) -> int:
    """Side of the oversized working grid: room to grow in every direction."""
    longest = max(len(w.word) for w in words)
    return max(MIN_WORKING_SIZE, longest * 3)


def place_words(
    words: list[WordInput],
    config: GeneratorConfig | None = None,
) -> tuple[WorkingGrid, list[Placement]]:
    """Place *words* on a fresh working grid, longest first.

    Words that cannot be placed are dropped. Raises
    InsufficientPlacementError if fewer than ``min(3, len(words))`` fit.
    """
    if not words:
        raise EmptyInputError("No words to place")
    config = config or GeneratorConfig()

    # Stable: equal lengths keep their input order
    ordered = sorted(words, key=lambda w: len(w.word), reverse=True)
    size = working_grid_size(ordered)
    working: WorkingGrid = [[None] * size for _ in range(size)]

    anchor = ordered[0]
    center_row = size // 2
    center_col = (size - len(anchor.word)) // 2
    first = Placement(anchor.word, anchor.clue, center_row, center_col, Direction.ACROSS)
    place_word_on_grid(working, first)
    placed: list[Placement] = [first]
    logger.debug("Anchor %s at (%d, %d)", anchor.word, center_row, center_col)

    for entry in ordered[1:]:
        best = _find_best_placement(entry, working, placed, config)
        if best is None:
            logger.warning("Could not place %s", entry.word)
            continue
        place_word_on_grid(working, best)
        placed.append(best)
        logger.debug(
            "Placed %s at (%d, %d) %s score=%d",
            best.word, best.row, best.col, best.direction.value, best.score,
        )

    required = min(3, len(ordered))
    if len(placed) < required:
        raise InsufficientPlacementError(len(placed), required)

    logger.info("Placed %d of %d words", len(placed), len(ordered))
    return working, placed


def _find_best_placement(
    entry: WordInput,
    working: WorkingGrid,
    placed: list[Placement],
    config: GeneratorConfig,
) -> Placement | None:
    """Highest-scoring candidate that clears ``config.min_intersections``.

    Nothing varies between attempts, so the pool is evaluated once; a
    non-positive ``max_attempts`` means the word is never tried.
    """
    if config.max_attempts < 1:
        return None

    candidates = candidate_placements(entry, working, placed)
    if not candidates:
        return None

    # max() keeps the first of equal scores, i.e. discovery order
    best = max(candidates, key=lambda p: p.score)
    if best.score < config.min_intersections:
        return None
    return best


# ── Candidate finding ─────────────────────────────────────────────────

def find_intersections(word: str, placed_word: str) -> list[Intersection]:
    """Every (i, j) where ``word[i] == placed_word[j]``."""
    return [
        Intersection(i, j)
        for i, ch in enumerate(word)
        for j, other in enumerate(placed_word)
        if ch == other
    ]


def candidate_placements(
    entry: WordInput,
    working: WorkingGrid,
    placed: list[Placement],
) -> list[Placement]:
    """Valid, scored placements crossing each placed word, in discovery order."""
    candidates: list[Placement] = []
    for other in placed:
        direction = other.direction.perpendicular
        for i, j in find_intersections(entry.word, other.word):
            if direction == Direction.ACROSS:
                row, col = other.row + j, other.col - i
            else:
                row, col = other.row - i, other.col + j

            if not can_place_word(working, entry.word, row, col, direction):
                continue
            score = score_placement(working, entry.word, row, col, direction, placed)
            candidates.append(Placement(entry.word, entry.clue, row, col, direction, score))
    return candidates


# ── Validation ────────────────────────────────────────────────────────

def can_place_word(
    working: WorkingGrid, word: str, row: int, col: int, direction: Direction,
) -> bool:
    """Check bounds, letter matching, no side-by-side runs, no extension."""
    size = len(working)
    length = len(word)
    dr, dc = direction.step

    if row < 0 or col < 0:
        return False
    if row + dr * (length - 1) >= size or col + dc * (length - 1) >= size:
        return False

    # Perpendicular offsets
    pr, pc = direction.perpendicular.step

    for i, letter in enumerate(word):
        r = row + dr * i
        c = col + dc * i
        existing = working[r][c]
        if existing is not None:
            if existing != letter:
                return False
            continue
        # New cell: neighbours across the word's axis must stay black
        if _occupied(working, r - pr, c - pc) or _occupied(working, r + pr, c + pc):
            return False

    # Cell before start and after end must be empty/edge
    if _occupied(working, row - dr, col - dc):
        return False
    if _occupied(working, row + dr * length, col + dc * length):
        return False

    return True


def _occupied(working: WorkingGrid, r: int, c: int) -> bool:
    size = len(working)
    return 0 <= r < size and 0 <= c < size and working[r][c] is not None


# ── Scoring ───────────────────────────────────────────────────────────

def score_placement(
    working: WorkingGrid,
    word: str,
    row: int,
    col: int,
    direction: Direction,
    placed: list[Placement],
) -> int:
    """Score a valid placement. Prefers:
    - crossing letters already on the grid (+10 each)
    - starting close to the other words' starts (+5 / +10)
    and penalizes long words that barely connect (-5).
    """
    dr, dc = direction.step
    score = 0

    for i, letter in enumerate(word):
        if working[row + dr * i][col + dc * i] == letter:
            score += INTERSECTION_SCORE

    avg = average_distance(row, col, placed)
    if avg < NEAR_DISTANCE:
        score += PROXIMITY_BONUS
    if avg < CLOSE_DISTANCE:
        score += PROXIMITY_BONUS

    if len(word) > LONG_WORD_LENGTH and score < INTERSECTION_SCORE:
        score -= LONG_WORD_PENALTY

    return score


def average_distance(row: int, col: int, placed: list[Placement]) -> float:
    """Mean Manhattan distance from (row, col) to each placed word's start."""
    if not placed:
        return 0.0
    total = sum(abs(row - p.row) + abs(col - p.col) for p in placed)
    return total / len(placed)


# ── Grid manipulation ─────────────────────────────────────────────────

def place_word_on_grid(working: WorkingGrid, placement: Placement) -> None:
    for (r, c), letter in zip(placement.cells(), placement.word):
        working[r][c] = letter
