"""Build the finished CrosswordGrid: crop to the letters, renumber, stamp numbers."""

from __future__ import annotations

from dataclasses import replace

from models import CrosswordCell, CrosswordGrid, Direction, Entry, WorkingGrid


def build_grid(entries: list[Entry], rows: int, cols: int | None = None) -> WorkingGrid:
    """Create a WorkingGrid and write letters from each Entry."""
    grid = WorkingGrid.create(rows, cols)

    for entry in entries:
        for (r, c), letter in zip(entry.cells(), entry.word):
            existing = grid.cells[r][c]
            if existing is not None and existing != letter:
                raise ValueError(
                    f"Letter conflict at ({r},{c}): existing '{existing}' vs '{letter}'"
                )
            grid.cells[r][c] = letter

    return grid


def finalize_grid(grid: WorkingGrid, entries: list[Entry]) -> CrosswordGrid:
    """Crop *grid* to its filled cells and re-express *entries* against the crop.

    Entries are numbered 1..n in the order given (placement order) and each
    number is written on the entry's starting cell. Inputs are left untouched.
    """
    bounds = grid.bounds()
    if bounds is None:
        return CrosswordGrid.empty()

    min_r, max_r, min_c, max_c = bounds
    rows = max_r - min_r + 1
    cols = max_c - min_c + 1

    cells = []
    for r in range(min_r, max_r + 1):
        row = []
        for c in range(min_c, max_c + 1):
            letter = grid.cells[r][c]
            row.append(CrosswordCell(letter=letter or "", is_blank=letter is None))
        cells.append(row)

    final_entries: list[Entry] = []
    for number, entry in enumerate(entries, start=1):
        moved = replace(entry, row=entry.row - min_r, col=entry.col - min_c, number=number)
        cells[moved.row][moved.col].number = number
        final_entries.append(moved)

    return CrosswordGrid(cells=cells, entries=final_entries, rows=rows, cols=cols)


def build_clue_lists(grid: CrosswordGrid) -> tuple[list[Entry], list[Entry]]:
    """Split the entries into across and down lists, each sorted by number."""
    across = [e for e in grid.entries if e.direction == Direction.ACROSS]
    down = [e for e in grid.entries if e.direction == Direction.DOWN]
    across.sort(key=lambda e: e.number)
    down.sort(key=lambda e: e.number)
    return across, down
