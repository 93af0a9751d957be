"""Integration tests: end-to-end XLSX word list -> XLSX crossword."""

import json

import openpyxl
import pytest

from crossword_generator import main


def _write_word_list(path, rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.append(["Word", "Clue"])
    for row in rows:
        ws.append(list(row))
    wb.save(path)
    return str(path)


_WORDS = [
    ("cat", "Feline pet"),
    ("car", "Automobile"),
    ("arc", "Curve"),
    ("dog", "Barks"),
]


@pytest.mark.slow
class TestEndToEnd:
    def test_xlsx_to_xlsx(self, tmp_path):
        source = _write_word_list(tmp_path / "words.xlsx", _WORDS)
        target = str(tmp_path / "out.xlsx")
        main([source, target])
        wb = openpyxl.load_workbook(target)
        assert wb.sheetnames == ["Clues", "Grid"]

    def test_default_output_name(self, tmp_path):
        source = _write_word_list(tmp_path / "words.xlsx", _WORDS)
        main([source])
        assert (tmp_path / "words_crossword.xlsx").exists()

    def test_json_output(self, tmp_path, capsys):
        source = _write_word_list(tmp_path / "words.xlsx", _WORDS)
        main([source, str(tmp_path / "out.xlsx"), "--json"])
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert len(data["entries"]) == 4
        assert {e["word"] for e in data["entries"]} == {"CAT", "CAR", "ARC", "DOG"}
        assert data["rows"] == len(data["cells"])
        assert "Placed 4/4 words" in captured.err

    def test_target_and_unplaced_sheet(self, tmp_path):
        source = _write_word_list(tmp_path / "words.xlsx", _WORDS)
        target = str(tmp_path / "out.xlsx")
        main([source, target, "--target", "2"])
        ws = openpyxl.load_workbook(target)["Not placed"]
        assert ws.cell(row=3, column=2).value is not None
        assert ws.cell(row=4, column=2).value is None

    def test_verbose_trace(self, tmp_path, capsys):
        source = _write_word_list(tmp_path / "words.xlsx", _WORDS)
        main([source, str(tmp_path / "out.xlsx"), "--verbose"])
        err = capsys.readouterr().err
        assert "Target: 4 words from 4 available" in err
        assert "Final result: 4 words placed" in err

    def test_missing_input_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.xlsx")])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err
