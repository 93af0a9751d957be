"""Public entry point: turn a word list with clues into a CrosswordGrid."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from fallback_placer import guarantee_minimum
from grid_builder import build_grid, finalize_grid
from grid_placer import MAX_ATTEMPTS, Trace, emit_trace, place_words
from models import CrosswordGrid, WordClue

MAX_TARGET_WORDS = 10
DEFAULT_CLUE = "Spell this word"


def generate_crossword(
    words: Sequence[str],
    clues: Sequence[str],
    *,
    max_attempts: int = MAX_ATTEMPTS,
    max_target: int = MAX_TARGET_WORDS,
    trace: Trace = None,
) -> CrosswordGrid:
    """Lay out *words* as a crossword, aiming for ``min(max_target, len(words))`` entries.

    ``clues[i]`` belongs to ``words[i]``; missing clues get a placeholder.
    The result depends only on the arguments. *trace*, when given, receives
    progress messages.
    """
    pairs = normalize_pairs(words, clues)
    if not pairs or max_target < 1:
        return CrosswordGrid.empty()

    target = min(max_target, len(pairs))
    emit_trace(trace, f"Target: {target} words from {len(pairs)} available")

    layout = place_words(pairs, target, max_attempts=max_attempts, trace=trace)
    if layout is None:
        return CrosswordGrid.empty()
    if len(layout.entries) < target:
        layout = guarantee_minimum(layout, pairs, target, trace=trace)

    emit_trace(trace, f"Final result: {len(layout.entries)} words placed")
    grid = build_grid(layout.entries, layout.grid.rows, layout.grid.cols)
    return finalize_grid(grid, layout.entries)


def normalize_pairs(words: Sequence[str], clues: Sequence[str]) -> list[WordClue]:
    """Pair words with clues, uppercase the words and skip blank ones."""
    pairs: list[WordClue] = []
    for i, raw in enumerate(words):
        word = (raw or "").strip().upper()
        if not word:
            continue
        clue = clues[i] if i < len(clues) else None
        if not clue or not clue.strip():
            clue = DEFAULT_CLUE
        pairs.append(WordClue(word=word, clue=clue))
    return pairs


def unplaced_words(
    words: Sequence[str], clues: Sequence[str], grid: CrosswordGrid,
) -> list[WordClue]:
    """Input pairs that did not make it into *grid*, in input order."""
    placed = Counter((e.word, e.clue) for e in grid.entries)
    missing: list[WordClue] = []
    for pair in normalize_pairs(words, clues):
        key = (pair.word, pair.clue)
        if placed[key] > 0:
            placed[key] -= 1
        else:
            missing.append(pair)
    return missing
