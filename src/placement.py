"""Placement rules: strict and isolated validators, intersection scoring."""

from __future__ import annotations

from models import Direction, Entry, WorkingGrid


def is_valid_placement(
    grid: WorkingGrid, word: str, row: int, col: int, direction: Direction,
    entries: list[Entry],
) -> bool:
    """Check crossword legality: bounds, no extension, letter match, no side-by-side runs.

    An occupied cell is only accepted when the same letter is already there and
    the word(s) through it run the other way. No two entries may start in the
    same box, whatever their directions.
    """
    if not word or not grid.fits(word, row, col, direction):
        return False

    length = len(word)
    dr, dc = direction.step

    # Cell before start must be empty/edge
    if not grid.is_empty(row - dr, col - dc):
        return False

    # Cell after end must be empty/edge
    if not grid.is_empty(row + dr * length, col + dc * length):
        return False

    # Perpendicular offsets
    pr, pc = dc, dr

    parallel_cells: set[tuple[int, int]] | None = None
    for i, letter in enumerate(word):
        r = row + dr * i
        c = col + dc * i
        existing = grid.cells[r][c]

        if existing is not None:
            if existing != letter:
                return False
            if parallel_cells is None:
                parallel_cells = _cells_of(entries, direction)
            if (r, c) in parallel_cells:
                return False
        elif not grid.is_empty(r + pr, c + pc) or not grid.is_empty(r - pr, c - pc):
            return False

    return all(e.row != row or e.col != col for e in entries)


def is_isolated_placement(
    grid: WorkingGrid, word: str, row: int, col: int, direction: Direction,
) -> bool:
    """Footprint plus a one-cell ring around it must be empty (edges count as empty)."""
    if not word or not grid.fits(word, row, col, direction):
        return False

    dr, dc = direction.step
    end_r = row + dr * (len(word) - 1)
    end_c = col + dc * (len(word) - 1)
    for r in range(row - 1, end_r + 2):
        for c in range(col - 1, end_c + 2):
            if not grid.is_empty(r, c):
                return False
    return True


def count_intersections(
    grid: WorkingGrid, word: str, row: int, col: int, direction: Direction,
) -> int:
    """Number of letters that would land on an identical, already-placed letter."""
    dr, dc = direction.step
    return sum(
        1 for i, letter in enumerate(word)
        if grid.get(row + dr * i, col + dc * i) == letter
    )


def entries_intersect(a: Entry, b: Entry) -> bool:
    """True when *a* and *b* run in different directions and share a cell."""
    if a.direction == b.direction:
        return False
    across, down = (a, b) if a.direction == Direction.ACROSS else (b, a)
    return (
        across.col <= down.col < across.col + len(across.word)
        and down.row <= across.row < down.row + len(down.word)
    )


def _cells_of(entries: list[Entry], direction: Direction) -> set[tuple[int, int]]:
    cells: set[tuple[int, int]] = set()
    for entry in entries:
        if entry.direction == direction:
            cells.update(entry.cells())
    return cells
