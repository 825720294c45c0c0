"""Pick a puzzle-sized subset of a vocabulary by difficulty."""

from __future__ import annotations

import random
from enum import Enum

from models import WordInput


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Inclusive (min, max) word lengths; None means unbounded.
_LENGTH_RANGES: dict[Difficulty, tuple[int, int] | None] = {
    Difficulty.EASY: (3, 5),
    Difficulty.MEDIUM: (4, 8),
    Difficulty.HARD: None,
}


def filter_by_difficulty(words: list[WordInput], difficulty: Difficulty) -> list[WordInput]:
    bounds = _LENGTH_RANGES[difficulty]
    if bounds is None:
        return list(words)
    low, high = bounds
    return [w for w in words if low <= len(w.word.strip()) <= high]


def select_words(
    words: list[WordInput],
    difficulty: Difficulty = Difficulty.MEDIUM,
    max_words: int = 12,
    seed: int | None = None,
) -> list[WordInput]:
    """Filter by difficulty, then draw up to *max_words* with a seeded RNG.

    The same *seed* always yields the same subset in the same order.
    """
    pool = filter_by_difficulty(words, difficulty)
    rng = random.Random(seed)
    rng.shuffle(pool)
    return pool[:max(0, max_words)]


def min_intersections_for(difficulty: Difficulty) -> int:
    return 2 if difficulty == Difficulty.HARD else 1
