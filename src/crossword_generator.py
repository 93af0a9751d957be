#!/usr/bin/env python3
"""CLI entry point for crossword generation.

Reads a word list (word, clue) from XLSX, lays it out as a crossword and writes
the clue lists plus answer grid to XLSX. ``--json`` also prints the grid.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

from models import CrosswordError


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword from an XLSX word list."
    )
    p.add_argument("input", help="Path to XLSX file with words (column A) and clues (column B)")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output XLSX path (default: <input>_crossword.xlsx)",
    )
    p.add_argument("--json", action="store_true",
                   help="Print the crossword as JSON to stdout")
    p.add_argument("--max-attempts", type=int, default=20,
                   help="Seeded placement attempts (default: 20)")
    p.add_argument("--target", type=int, default=10,
                   help="Maximum number of words in the puzzle (default: 10)")
    p.add_argument("--max-words", type=int, default=50,
                   help="Words read from the list at most (default: 50)")
    p.add_argument("--max-length", type=int, default=20,
                   help="Longest accepted word (default: 20)")
    p.add_argument("--verbose", action="store_true",
                   help="Report placement progress on stderr")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    t0 = time.time()

    try:
        _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, t0: float) -> None:
    from xlsx_reader import read_word_list
    from xlsx_writer import write_crossword_xlsx
    from generator import generate_crossword, unplaced_words

    input_path = Path(args.input)
    output_path = args.output or str(input_path.with_name(f"{input_path.stem}_crossword.xlsx"))

    pairs = read_word_list(input_path, max_length=args.max_length, max_words=args.max_words)
    print(f"Read {len(pairs)} valid words", file=sys.stderr)

    words = [p.word for p in pairs]
    clues = [p.clue for p in pairs]
    trace = _stderr_trace if args.verbose else None

    grid = generate_crossword(
        words,
        clues,
        max_attempts=args.max_attempts,
        max_target=args.target,
        trace=trace,
    )
    unplaced = unplaced_words(words, clues, grid)

    write_crossword_xlsx(grid, output_path, unplaced=unplaced)
    print(f"Output: {output_path}", file=sys.stderr)

    if args.json:
        json.dump(grid.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")

    elapsed = time.time() - t0
    print(
        f"Placed {len(grid.entries)}/{len(pairs)} words, "
        f"grid {grid.rows}x{grid.cols}, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _stderr_trace(message: str) -> None:
    print(message, file=sys.stderr)


if __name__ == "__main__":
    main()
