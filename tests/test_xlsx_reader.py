"""Tests for xlsx_reader.py."""

import openpyxl
import pytest

from models import CrosswordError, WordInput
from xlsx_reader import read_words


def _write_workbook(path, rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


class TestReadWords:
    def test_valid_parse(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            ("cat", "Feline pet"),
            ("dog", "Canine"),
        ])
        assert read_words(path) == [
            WordInput("cat", "Feline pet"),
            WordInput("dog", "Canine"),
        ]

    def test_accepts_str_path(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [("cat", "Feline pet")])
        assert read_words(str(path)) == [WordInput("cat", "Feline pet")]

    @pytest.mark.parametrize("header", ["Word", "ANSWER", "words", " answers "])
    def test_skips_header(self, tmp_path, header):
        path = _write_workbook(tmp_path / "words.xlsx", [
            (header, "Clue"),
            ("cat", "Feline pet"),
        ])
        assert read_words(path) == [WordInput("cat", "Feline pet")]

    def test_header_only_checked_on_first_row(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            ("cat", "Feline pet"),
            ("word", "A unit of language"),
        ])
        assert [w.word for w in read_words(path)] == ["cat", "word"]

    def test_skips_header_after_leading_blank_row(self, tmp_path):
        path = tmp_path / "words.xlsx"
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.cell(row=2, column=1, value="Word")
        ws.cell(row=2, column=2, value="Clue")
        ws.cell(row=3, column=1, value="cat")
        ws.cell(row=3, column=2, value="Feline pet")
        wb.save(path)
        assert read_words(path) == [WordInput("cat", "Feline pet")]

    def test_skips_blank_rows(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [
            ("cat", "Feline pet"),
            (None, "orphan clue"),
            ("dog", "Canine"),
        ])
        assert [w.word for w in read_words(path)] == ["cat", "dog"]

    def test_missing_clue_becomes_empty(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [("cat",), ("dog", None)])
        assert read_words(path) == [WordInput("cat", ""), WordInput("dog", "")]

    def test_leaves_words_unnormalized(self, tmp_path):
        path = _write_workbook(tmp_path / "words.xlsx", [(" ice cream ", "Frozen treat")])
        assert read_words(path) == [WordInput(" ice cream ", "Frozen treat")]

    def test_empty_workbook(self, tmp_path):
        path = _write_workbook(tmp_path / "empty.xlsx", [])
        assert read_words(path) == []

    def test_file_not_found(self, tmp_path):
        with pytest.raises(CrosswordError, match="File not found"):
            read_words(tmp_path / "nonexistent.xlsx")
