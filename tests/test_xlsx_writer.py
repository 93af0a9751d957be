"""Tests for xlsx_writer.py."""

import openpyxl
import pytest

from grid_builder import build_grid, finalize_grid
from models import Direction, Entry, WordClue
from xlsx_writer import write_crossword_xlsx


def _sample_grid():
    entries = [
        Entry("CAT", "Feline pet", 2, 1, Direction.ACROSS, 1),
        Entry("ARC", "Curve", 0, 1, Direction.DOWN, 2),
        Entry("CAR", "Automobile", 0, 0, Direction.ACROSS, 3),
    ]
    return finalize_grid(build_grid(entries, 3, 4), entries)


@pytest.fixture
def out_path(tmp_path):
    return str(tmp_path / "crossword.xlsx")


class TestWriteCrosswordXlsx:
    def test_creates_valid_xlsx(self, out_path):
        write_crossword_xlsx(_sample_grid(), out_path)
        wb = openpyxl.load_workbook(out_path)
        assert wb.sheetnames == ["Clues", "Grid"]

    def test_across_section(self, out_path):
        write_crossword_xlsx(_sample_grid(), out_path)
        ws = openpyxl.load_workbook(out_path)["Clues"]
        assert ws.cell(row=1, column=1).value == "ACROSS"
        assert ws.cell(row=2, column=1).value == "1. Feline pet"
        assert ws.cell(row=2, column=2).value == "CAT"
        assert ws.cell(row=3, column=1).value == "3. Automobile"
        assert ws.cell(row=3, column=2).value == "CAR"

    def test_down_section(self, out_path):
        write_crossword_xlsx(_sample_grid(), out_path)
        ws = openpyxl.load_workbook(out_path)["Clues"]
        # Row 4 is blank separator, row 5 is DOWN header
        assert ws.cell(row=4, column=1).value is None
        assert ws.cell(row=5, column=1).value == "DOWN"
        assert ws.cell(row=6, column=1).value == "2. Curve"
        assert ws.cell(row=6, column=2).value == "ARC"

    def test_bold_headers(self, out_path):
        write_crossword_xlsx(_sample_grid(), out_path)
        ws = openpyxl.load_workbook(out_path)["Clues"]
        assert ws.cell(row=1, column=1).font.bold is True
        assert ws.cell(row=5, column=1).font.bold is True

    def test_grid_sheet(self, out_path):
        write_crossword_xlsx(_sample_grid(), out_path)
        ws = openpyxl.load_workbook(out_path)["Grid"]
        assert ws.cell(row=1, column=1).value == "3 C"
        assert ws.cell(row=1, column=2).value == "2 A"
        assert ws.cell(row=1, column=3).value == "R"
        assert ws.cell(row=1, column=4).value is None
        assert ws.cell(row=2, column=1).value is None
        assert ws.cell(row=2, column=2).value == "R"
        assert ws.cell(row=3, column=2).value == "1 C"
        assert ws.cell(row=3, column=4).value == "T"

    def test_unplaced_sheet_created(self, out_path):
        unplaced = [WordClue("UNUSED", "Not used clue"), WordClue("SKIPPED", "Another skipped")]
        write_crossword_xlsx(_sample_grid(), out_path, unplaced=unplaced)
        wb = openpyxl.load_workbook(out_path)
        assert "Not placed" in wb.sheetnames
        ws = wb["Not placed"]
        assert ws.cell(row=1, column=1).value == "Clue"
        assert ws.cell(row=1, column=2).value == "Word"
        assert ws.cell(row=2, column=1).value == "Not used clue"
        assert ws.cell(row=2, column=2).value == "UNUSED"
        assert ws.cell(row=3, column=2).value == "SKIPPED"

    def test_no_unplaced_sheet_when_empty(self, out_path):
        write_crossword_xlsx(_sample_grid(), out_path, unplaced=[])
        assert "Not placed" not in openpyxl.load_workbook(out_path).sheetnames
