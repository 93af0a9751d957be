"""Read and validate a word list (word, clue) from an XLSX workbook."""

from __future__ import annotations

import sys
from pathlib import Path

import openpyxl

from models import CrosswordError, WordClue

HEADER_LABELS = {"word", "words", "answer", "answers"}


def read_word_list(
    path: str | Path, max_length: int = 20, max_words: int | None = None,
) -> list[WordClue]:
    """Open *path*, skip a header row if present, parse rows, validate and return pairs.

    Column A holds the word, column B the clue (may be empty).
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    first_row = 2 if _has_header(ws) else 1
    pairs: list[WordClue] = []

    for row in ws.iter_rows(min_row=first_row, max_col=2, values_only=True):
        if not row or row[0] is None:
            continue
        word = _normalize_word(str(row[0]))
        if not word:
            continue
        clue = str(row[1]).strip() if len(row) > 1 and row[1] is not None else ""
        pairs.append(WordClue(word=word, clue=clue))

    wb.close()
    return _validate_and_filter(pairs, max_length, max_words)


def _has_header(sheet) -> bool:
    """True when cell A1 is a column label rather than a word."""
    for row in sheet.iter_rows(min_row=1, max_row=1, max_col=1, values_only=True):
        value = row[0] if row else None
        return isinstance(value, str) and value.strip().lower() in HEADER_LABELS
    return False


def _normalize_word(raw: str) -> str:
    """Uppercase, strip everything except letters."""
    return "".join(c for c in raw.upper() if c.isalpha())


def _validate_and_filter(
    pairs: list[WordClue], max_length: int, max_words: int | None,
) -> list[WordClue]:
    """Drop over-long and duplicate words, cap the count, error if none remain."""
    seen_words: set[str] = set()
    result: list[WordClue] = []

    for pair in pairs:
        if len(pair.word) > max_length:
            print(
                f"Warning: skipping '{pair.word}' (longer than {max_length} letters)",
                file=sys.stderr,
            )
            continue
        if pair.word in seen_words:
            print(
                f"Warning: duplicate word '{pair.word}', skipping",
                file=sys.stderr,
            )
            continue
        seen_words.add(pair.word)
        result.append(pair)

    if not result:
        raise CrosswordError("No valid words after filtering")

    if max_words is not None and len(result) > max_words:
        print(
            f"Warning: using the first {max_words} of {len(result)} words",
            file=sys.stderr,
        )
        result = result[:max_words]

    return result
