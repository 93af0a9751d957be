"""Guarantee fallback: place leftover words in open space, no crossing required."""

from __future__ import annotations

from grid_placer import Layout, Trace, emit_trace
from models import Direction, WordClue, WorkingGrid
from placement import is_isolated_placement

FALLBACK_MIN_GRID = 50


def guarantee_minimum(
    layout: Layout,
    pairs: list[WordClue],
    target: int,
    trace: Trace = None,
) -> Layout:
    """Top *layout* up towards *target* words using the isolated-placement rule.

    The existing cluster is copied unchanged into a roomier grid; leftover words
    are tried in input order and put at the first free spot (row-major, across
    before down). Words with no free spot are dropped.
    """
    remaining = target - len(layout.entries)
    placed = set(layout.sources)
    unplaced = [i for i in range(len(pairs)) if i not in placed]
    if remaining <= 0 or not unplaced:
        return layout

    emit_trace(trace, f"Forcing up to {remaining} more words to reach target of {target}")

    result = _rematerialize(layout, max(len(pairs[i].word) for i in unplaced))
    added = 0
    for index in unplaced:
        if added >= remaining:
            break
        pair = pairs[index]
        spot = _first_free_spot(result.grid, pair.word)
        if spot is None:
            emit_trace(trace, f"Could not place {pair.word!r}")
            continue
        row, col, direction = spot
        result.add(pair, index, row, col, direction)
        added += 1
        emit_trace(trace, f"Added {pair.word!r} at ({row},{col}) {direction.value}")

    assert len(result.entries) <= target, "fallback placed more words than the target"
    return result


def _rematerialize(layout: Layout, longest: int) -> Layout:
    """Copy *layout* into a larger grid with a free margin on every side."""
    bounds = layout.grid.bounds()
    if bounds is None:
        min_r = max_r = min_c = max_c = 0
    else:
        min_r, max_r, min_c, max_c = bounds

    margin = longest + 2
    rows = max(FALLBACK_MIN_GRID, max_r - min_r + 1 + 2 * margin)
    cols = max(FALLBACK_MIN_GRID, max_c - min_c + 1 + 2 * margin)
    dr, dc = margin - min_r, margin - min_c

    result = Layout(grid=WorkingGrid.create(rows, cols))
    for entry, source in zip(layout.entries, layout.sources):
        result.add(WordClue(entry.word, entry.clue), source,
                   entry.row + dr, entry.col + dc, entry.direction)
    return result


def _first_free_spot(grid: WorkingGrid, word: str) -> tuple[int, int, Direction] | None:
    for r in range(grid.rows):
        for c in range(grid.cols):
            for direction in (Direction.ACROSS, Direction.DOWN):
                if is_isolated_placement(grid, word, r, c, direction):
                    return r, c, direction
    return None
