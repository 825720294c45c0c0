"""Tests for generate_crossword: end-to-end scenarios and output invariants."""

import pytest

from crossword_generator import generate_crossword, unplaced_words
from models import (
    Direction,
    EmptyInputError,
    GeneratorConfig,
    InsufficientPlacementError,
    NoValidWordsError,
    PuzzleGrid,
    WordInput,
)

OVERLAPPING = [
    {"word": "AREA", "clue": "a"},
    {"word": "RARE", "clue": "b"},
    {"word": "REAR", "clue": "c"},
    {"word": "EARN", "clue": "d"},
]

TECH = [
    WordInput("COMPUTER", "Electronic device for processing data"),
    WordInput("INTERNET", "Global network of networks"),
    WordInput("SOFTWARE", "Programs and operating systems"),
    WordInput("MOUSE", "Pointing device"),
    WordInput("KEYBOARD", "Input device with keys"),
    WordInput("SCREEN", "Display monitor"),
    WordInput("CODE", "Programming instructions"),
    WordInput("DATA", "Information in digital form"),
    WordInput("CLOUD", "Remote data storage"),
    WordInput("SERVER", "Computer that provides resources"),
]


def assert_valid_puzzle(puzzle: PuzzleGrid) -> None:
    """Every structural invariant a finished puzzle must satisfy."""
    size = puzzle.size
    assert len(puzzle.grid) == size
    assert all(len(row) == size for row in puzzle.grid)

    covered = set()
    for word in puzzle.words:
        assert word.answer == word.word
        for (r, c), letter in zip(word.cells(), word.answer):
            assert 0 <= r < size and 0 <= c < size
            assert puzzle.grid[r][c] == letter
            covered.add((r, c))

    filled = {
        (r, c) for r in range(size) for c in range(size) if puzzle.grid[r][c] is not None
    }
    assert filled == covered

    # Tight bounding square: content touches the top and left edges and
    # reaches the far edge on at least one axis.
    assert any(cell is not None for cell in puzzle.grid[0])
    assert any(row[0] is not None for row in puzzle.grid)
    assert (
        any(cell is not None for cell in puzzle.grid[-1])
        or any(row[-1] is not None for row in puzzle.grid)
    )

    # Numbers increase along distinct starts in reading order, without gaps.
    starts = sorted({(w.start_row, w.start_col): w.number for w in puzzle.words}.items())
    assert [number for _, number in starts] == list(range(1, len(starts) + 1))


class TestScenarios:
    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            generate_crossword([])

    def test_single_word_succeeds(self):
        puzzle = generate_crossword([{"word": "AB", "clue": "x"}])
        assert puzzle.size == 2
        assert puzzle.grid == [["A", "B"], [None, None]]
        assert len(puzzle.words) == 1
        word = puzzle.words[0]
        assert (word.number, word.answer, word.clue) == (1, "AB", "x")
        assert (word.start_row, word.start_col, word.direction) == (0, 0, Direction.ACROSS)

    def test_disjoint_words_fail(self):
        words = [
            {"word": "BCD", "clue": "a"},
            {"word": "FGH", "clue": "b"},
            {"word": "JKL", "clue": "c"},
        ]
        with pytest.raises(InsufficientPlacementError):
            generate_crossword(words)

    def test_overlapping_words_compact(self):
        puzzle = generate_crossword(OVERLAPPING)
        assert len(puzzle.words) >= 3
        assert puzzle.size < 30
        assert_valid_puzzle(puzzle)

    def test_normalization(self):
        puzzle = generate_crossword([
            {"word": "co-ffee", "clue": "bad"},
            {"word": " coffee ", "clue": " Morning drink "},
        ])
        assert [w.answer for w in puzzle.words] == ["COFFEE"]
        assert puzzle.words[0].clue == "Morning drink"

    def test_deterministic(self):
        first = generate_crossword(TECH)
        second = generate_crossword(TECH)
        assert first.to_dict() == second.to_dict()


class TestErrors:
    def test_no_valid_words(self):
        with pytest.raises(NoValidWordsError):
            generate_crossword([{"word": "a", "clue": ""}, {"word": "1-2", "clue": ""}])

    def test_override_min_intersections(self):
        with pytest.raises(InsufficientPlacementError):
            generate_crossword(OVERLAPPING, min_intersections=1000)

    def test_config_object(self):
        with pytest.raises(InsufficientPlacementError):
            generate_crossword(OVERLAPPING, GeneratorConfig(max_attempts=0))

    def test_unknown_override(self):
        with pytest.raises(TypeError):
            generate_crossword(OVERLAPPING, retries=3)


class TestInvariants:
    @pytest.mark.parametrize("words", [OVERLAPPING, TECH])
    def test_valid_output(self, words):
        assert_valid_puzzle(generate_crossword(words))

    def test_grid_padding_does_not_change_layout(self):
        assert (
            generate_crossword(TECH, grid_padding=0).to_dict()
            == generate_crossword(TECH, grid_padding=5).to_dict()
        )


class TestUnplacedWords:
    def test_lists_dropped_entries(self):
        words = [
            WordInput("CATS", "a"),
            WordInput("ACTS", "b"),
            WordInput("SCAT", "c"),
            WordInput("xyz", "d"),
        ]
        puzzle = generate_crossword(words)
        assert unplaced_words(words, puzzle) == [WordInput("XYZ", "d")]

    def test_nothing_dropped(self):
        puzzle = generate_crossword([WordInput("AB", "x")])
        assert unplaced_words([WordInput("AB", "x")], puzzle) == []
