"""Normalize raw word/clue pairs into uppercase, letters-only entries."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from models import WordInput

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[A-Z]+")
MIN_WORD_LENGTH = 2


def normalize_words(inputs: Iterable[WordInput | Mapping]) -> list[WordInput]:
    """Uppercase and trim each word, trim clues, drop words that aren't A-Z only.

    Rejected words are logged and skipped; the result may be empty.
    """
    result: list[WordInput] = []
    for raw in inputs:
        entry = coerce_input(raw)
        word = normalize_word(entry.word)
        if not is_valid_word(word):
            logger.warning("Skipping %r (need %d+ letters A-Z)", entry.word, MIN_WORD_LENGTH)
            continue
        result.append(WordInput(word=word, clue=(entry.clue or "").strip()))
    return result


def normalize_word(raw: str) -> str:
    """Uppercase and strip surrounding whitespace. Inner characters are kept."""
    return (raw or "").upper().strip()


def is_valid_word(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH and _WORD_RE.fullmatch(word) is not None


def coerce_input(raw: WordInput | Mapping) -> WordInput:
    """Accept a ``WordInput`` or a ``{"word": ..., "clue": ...}`` mapping."""
    if isinstance(raw, WordInput):
        return raw
    if isinstance(raw, Mapping):
        return WordInput(word=str(raw.get("word") or ""), clue=str(raw.get("clue") or ""))
    raise TypeError(f"Expected WordInput or mapping, got {type(raw).__name__}")
