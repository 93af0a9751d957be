"""Write a generated crossword (clues, answer grid, leftovers) to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Alignment, Font

from grid_builder import build_clue_lists
from models import CrosswordGrid, WordClue


def write_crossword_xlsx(
    grid: CrosswordGrid,
    output_path: str,
    unplaced: list[WordClue] | None = None,
) -> None:
    """Write the crossword to an Excel workbook.

    Sheet "Clues": numbering is embedded in the clue cell ('1. Clue text'),
    answers are in column B. Sheet "Grid": the answer key, one letter per cell,
    starting cells written as '<number> <letter>'.
    If *unplaced* is provided, a third sheet lists words that didn't fit.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    across, down = build_clue_lists(grid)
    row = 1

    # ACROSS section
    ws.cell(row=row, column=1, value="ACROSS").font = header_font
    row += 1
    for entry in across:
        ws.cell(row=row, column=1, value=f"{entry.number}. {entry.clue}")
        ws.cell(row=row, column=2, value=entry.word)
        row += 1

    # Blank separator
    row += 1

    # DOWN section
    ws.cell(row=row, column=1, value="DOWN").font = header_font
    row += 1
    for entry in down:
        ws.cell(row=row, column=1, value=f"{entry.number}. {entry.clue}")
        ws.cell(row=row, column=2, value=entry.word)
        row += 1

    # Set column widths
    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    _write_grid_sheet(wb, grid)

    # Unplaced words sheet
    if unplaced:
        ws3 = wb.create_sheet(title="Not placed")
        ws3.cell(row=1, column=1, value="Clue").font = header_font
        ws3.cell(row=1, column=2, value="Word").font = header_font
        for i, pair in enumerate(unplaced, start=2):
            ws3.cell(row=i, column=1, value=pair.clue)
            ws3.cell(row=i, column=2, value=pair.word)
        ws3.column_dimensions["A"].width = 60
        ws3.column_dimensions["B"].width = 15

    wb.save(output_path)


def _write_grid_sheet(wb: openpyxl.Workbook, grid: CrosswordGrid) -> None:
    ws = wb.create_sheet(title="Grid")
    center = Alignment(horizontal="center", vertical="center")
    for r, cells in enumerate(grid.cells, start=1):
        for c, cell in enumerate(cells, start=1):
            if cell.is_blank:
                continue
            value = cell.letter if cell.number is None else f"{cell.number} {cell.letter}"
            ws.cell(row=r, column=c, value=value).alignment = center
