"""Crossword word placement: seeded greedy attempts, isolation filter, best-of-N."""

from __future__ import annotations

from collections import deque, namedtuple
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, TypeVar

from models import Direction, Entry, WordClue, WorkingGrid
from placement import count_intersections, entries_intersect, is_valid_placement

T = TypeVar("T")

Candidate = namedtuple("Candidate", ["row", "col", "direction", "intersections"])
Trace = Optional[Callable[[str], None]]

MAX_ATTEMPTS = 20
MIN_GRID_SIZE = 20

# Linear-congruential constants for the reproducible shuffle
_LCG_MULTIPLIER = 9301
_LCG_INCREMENT = 49297
_LCG_MODULUS = 233280


@dataclass
class Layout:
    """Uncropped result of a placement pass.

    ``sources[i]`` is the index in the input pairs of the word behind ``entries[i]``.
    """

    grid: WorkingGrid
    entries: list[Entry] = field(default_factory=list)
    sources: list[int] = field(default_factory=list)

    def add(self, pair: WordClue, source: int, row: int, col: int, direction: Direction) -> Entry:
        self.grid.write(pair.word, row, col, direction)
        entry = Entry(
            word=pair.word, clue=pair.clue, row=row, col=col,
            direction=direction, number=len(self.entries) + 1,
        )
        self.entries.append(entry)
        self.sources.append(source)
        return entry


def compute_grid_size(words: Sequence[str]) -> int:
    """Side of the square search grid.

    Large enough for any word to cross the centred seed word perpendicularly
    at either end.
    """
    longest = max((len(w) for w in words), default=0)
    return max(MIN_GRID_SIZE, 2 * longest + 3)


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """Fisher-Yates shuffle driven by a small LCG, identical for identical seeds."""
    shuffled = list(items)
    state = seed

    def _next() -> float:
        nonlocal state
        state = (state * _LCG_MULTIPLIER + _LCG_INCREMENT) % _LCG_MODULUS
        return state / _LCG_MODULUS

    for i in range(len(shuffled) - 1, 0, -1):
        j = int(_next() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def place_words(
    pairs: list[WordClue],
    target: int,
    max_attempts: int = MAX_ATTEMPTS,
    trace: Trace = None,
) -> Layout | None:
    """Run seeded attempts 0..max_attempts-1, return the layout placing most words.

    No attempt places more than *target* words; the loop stops as soon as one
    gets there. Returns None for no input.
    """
    if not pairs:
        return None

    best: Layout | None = None
    for seed in range(max_attempts):
        layout = single_attempt(pairs, seed, target)
        count = len(layout.entries)

        if best is None or count > len(best.entries):
            best = layout
            emit_trace(trace, f"Attempt {seed + 1}: placed {count} words (best so far)")

        if count >= target:
            emit_trace(trace, f"Reached target of {target} words")
            break

    return best


# ── Core placement algorithm ─────────────────────────────────────────

def single_attempt(pairs: list[WordClue], seed: int, limit: int | None = None) -> Layout:
    """Place the longest word at the centre, then greedily cross the rest onto it.

    Placement stops once *limit* words are down.
    """
    order = sorted(range(len(pairs)), key=lambda i: -len(pairs[i].word))
    first, rest = order[0], seeded_shuffle(order[1:], seed)

    grid_size = compute_grid_size([p.word for p in pairs])
    layout = Layout(grid=WorkingGrid.create(grid_size))

    seed_word = pairs[first]
    center = grid_size // 2
    first_col = max(0, (grid_size - len(seed_word.word)) // 2)
    layout.add(seed_word, first, center, first_col, Direction.ACROSS)

    for index in rest:
        if limit is not None and len(layout.entries) >= limit:
            break
        pair = pairs[index]
        best = _best_candidate(pair.word, layout)
        if best is not None:
            layout.add(pair, index, best.row, best.col, best.direction)

    return filter_isolated(layout)


def _best_candidate(word: str, layout: Layout) -> Candidate | None:
    """Highest-scoring legal crossing; ties go to the first found in scan order.

    Scan order is row-major over the grid interior, across before down.
    """
    grid = layout.grid
    best: Candidate | None = None
    for r in range(1, grid.rows - 1):
        for c in range(1, grid.cols - 1):
            for direction in (Direction.ACROSS, Direction.DOWN):
                if not is_valid_placement(grid, word, r, c, direction, layout.entries):
                    continue
                inters = count_intersections(grid, word, r, c, direction)
                if inters >= 1 and (best is None or inters > best.intersections):
                    best = Candidate(r, c, direction, inters)
    return best


# ── Connectivity ──────────────────────────────────────────────────────

def filter_isolated(layout: Layout) -> Layout:
    """Drop entries that cross no other entry; keep the seed if nothing crosses.

    The working grid is rebuilt from the survivors so dropped letters vanish.
    """
    entries = layout.entries
    keep = [
        i for i, entry in enumerate(entries)
        if any(entries_intersect(entry, other) for j, other in enumerate(entries) if j != i)
    ]
    if not keep:
        keep = [0] if entries else []
    if len(keep) == len(entries):
        return layout

    rebuilt = Layout(grid=WorkingGrid.create(layout.grid.rows, layout.grid.cols))
    for i in keep:
        entry = entries[i]
        rebuilt.add(WordClue(entry.word, entry.clue), layout.sources[i],
                    entry.row, entry.col, entry.direction)
    return rebuilt


def is_connected(entries: Sequence[Entry]) -> bool:
    """Breadth-first check that every entry is reachable from the first one."""
    if len(entries) <= 1:
        return True

    visited = {0}
    queue = deque([0])
    while queue:
        current = entries[queue.popleft()]
        for i, other in enumerate(entries):
            if i not in visited and entries_intersect(current, other):
                visited.add(i)
                queue.append(i)
    return len(visited) == len(entries)


def emit_trace(trace: Trace, message: str) -> None:
    if trace is not None:
        trace(message)
