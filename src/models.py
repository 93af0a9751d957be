"""Data models for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Direction(Enum):
    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> tuple[int, int]:
        """Unit (row, col) step along this direction."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)


@dataclass(frozen=True)
class WordClue:
    """A word and the clue shown for it. ``word`` is already uppercase."""

    word: str
    clue: str


@dataclass(frozen=True)
class Entry:
    """A word that has been assigned a position on the grid.

    ``row``/``col`` address the first letter; ``number`` follows placement order.
    """

    word: str
    clue: str
    row: int
    col: int
    direction: Direction
    number: int

    def cells(self) -> list[tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]


@dataclass
class CrosswordCell:
    """A single cell of the finished crossword."""

    letter: str = ""
    is_blank: bool = True
    number: int | None = None


@dataclass
class CrosswordGrid:
    """The cropped crossword handed back to callers."""

    cells: list[list[CrosswordCell]] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)
    rows: int = 0
    cols: int = 0

    @classmethod
    def empty(cls) -> CrosswordGrid:
        return cls(cells=[], entries=[], rows=0, cols=0)

    def to_dict(self) -> dict:
        """Plain JSON-ready form, keyed the way the puzzle UI reads it."""
        cells = []
        for row in self.cells:
            out_row = []
            for cell in row:
                item: dict = {"letter": cell.letter, "isBlank": cell.is_blank}
                if cell.number is not None:
                    item["number"] = cell.number
                out_row.append(item)
            cells.append(out_row)
        entries = [
            {
                "word": e.word,
                "number": e.number,
                "direction": e.direction.value,
                "row": e.row,
                "col": e.col,
                "clue": e.clue,
            }
            for e in self.entries
        ]
        return {"cells": cells, "entries": entries, "rows": self.rows, "cols": self.cols}


@dataclass
class WorkingGrid:
    """Mutable sparse letter grid with fixed bounds, used while searching.

    Off-grid coordinates read as empty, so neighbour checks need no edge cases.
    """

    rows: int
    cols: int
    cells: list[list[Optional[str]]] = field(default_factory=list)

    @classmethod
    def create(cls, rows: int, cols: int | None = None) -> WorkingGrid:
        """Create an empty grid; *cols* defaults to *rows* (square)."""
        cols = rows if cols is None else cols
        return cls(rows=rows, cols=cols, cells=[[None] * cols for _ in range(rows)])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> str | None:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def fits(self, word: str, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        end_r = row + dr * (len(word) - 1)
        end_c = col + dc * (len(word) - 1)
        return self.in_bounds(row, col) and self.in_bounds(end_r, end_c)

    def write(self, word: str, row: int, col: int, direction: Direction) -> None:
        dr, dc = direction.step
        for i, letter in enumerate(word):
            self.cells[row + dr * i][col + dc * i] = letter

    def bounds(self) -> tuple[int, int, int, int] | None:
        """Return (min_row, max_row, min_col, max_col) of filled cells, or None."""
        min_r = min_c = None
        max_r = max_c = -1
        for r in range(self.rows):
            for c in range(self.cols):
                if self.cells[r][c] is None:
                    continue
                min_r = r if min_r is None else min(min_r, r)
                min_c = c if min_c is None else min(min_c, c)
                max_r = max(max_r, r)
                max_c = max(max_c, c)
        if min_r is None:
            return None
        return min_r, max_r, min_c, max_c


class CrosswordError(Exception):
    """Fatal error while loading input or writing output."""
