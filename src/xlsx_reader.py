"""Read word/clue pairs from an XLSX workbook."""

from __future__ import annotations

from pathlib import Path

import openpyxl

from models import CrosswordError, WordInput

_HEADER_WORDS = {"word", "answer", "words", "answers"}


def read_words(path: str | Path) -> list[WordInput]:
    """Return raw (word, clue) pairs from column A/B of the active sheet.

    A header is skipped when the first non-blank row reads ``word`` or
    ``answer`` in column A.
    Words are not normalized here; blank rows are skipped.
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        entries: list[WordInput] = []
        first = True
        for row in ws.iter_rows(values_only=True):
            if not row or row[0] is None:
                continue
            word = str(row[0])
            if first:
                first = False
                if _is_header(word):
                    continue
            clue = str(row[1]) if len(row) > 1 and row[1] is not None else ""
            entries.append(WordInput(word=word, clue=clue))
    finally:
        wb.close()
    return entries


def _is_header(value: str) -> bool:
    return value.strip().lower() in _HEADER_WORDS
