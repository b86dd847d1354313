#!/usr/bin/env python3
"""
Lookup precomputation tool.

Solves a set of puzzles with the exhaustive strategy and stores the
answers in a lookup file for the "lookup" strategy.

Usage:
    python precompute_lookup.py [--output lookup.json] [--moves 1 2] [puzzle ...]

Without puzzles on the command line (or in --input), every false
single-digit equation "a?b=c" is solved.

Examples:
    python tools/precompute_lookup.py --moves 1
    python tools/precompute_lookup.py --input puzzles.txt --moves 1 2
"""

import sys
import logging
import argparse
from itertools import product
from pathlib import Path
from typing import Iterator, List

sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick import evaluate_equation, solve
from matchstick.oracle import DIGITS, OPERATORS, normalize_equation
from matchstick.solver import SolutionLookup


logger = logging.getLogger("precompute_lookup")


def single_digit_puzzles() -> Iterator[str]:
    """Every false equation of the form digit, operator, digit, '=', digit."""
    for left, operator, right, result in product(DIGITS, OPERATORS, DIGITS, DIGITS):
        equation = f"{left}{operator}{right}={result}"
        if not evaluate_equation(equation):
            yield equation


def read_puzzles(path: Path) -> List[str]:
    """One puzzle per line; blank lines and '#' comments are skipped."""
    puzzles = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                puzzles.append(normalize_equation(line))
    return puzzles


def main() -> int:
    parser = argparse.ArgumentParser(description="Build a matchstick lookup file")
    parser.add_argument("puzzles", nargs="*", help="Puzzles to solve")
    parser.add_argument("--input", "-i", type=Path, help="File with one puzzle per line")
    parser.add_argument("--output", "-o", type=Path, default=Path("lookup.json"),
                        help="Lookup file to write (default: lookup.json)")
    parser.add_argument("--moves", "-m", type=int, nargs="+", default=[1],
                        help="Move budgets to precompute (default: 1)")
    parser.add_argument("--no-flip", dest="allow_flip", action="store_false",
                        help="Precompute without upside-down readings")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    puzzles = list(args.puzzles)
    if args.input:
        puzzles.extend(read_puzzles(args.input))
    if not puzzles:
        puzzles = list(single_digit_puzzles())

    # Existing entries are kept and extended
    lookup = SolutionLookup(args.output)
    total = len(puzzles) * len(args.moves)
    done = 0
    for puzzle in puzzles:
        for max_moves in args.moves:
            solutions = solve(puzzle, max_moves=max_moves, allow_flip=args.allow_flip)
            lookup.add(puzzle, max_moves, args.allow_flip, solutions)
            done += 1
            if done % 500 == 0:
                logger.info(f"{done}/{total} puzzles solved")

    lookup.save()
    print(f"Saved {len(lookup)} entries to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
