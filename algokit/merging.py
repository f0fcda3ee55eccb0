"""Cost of merging sorted files smallest first."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import accumulate


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Return the sum of the running totals of the sizes taken in ascending order."""
    running = list(accumulate(sorted(sizes)))
    return sum(running[1:])


def main(argv: Sequence[str] | None = None) -> int:
    """Read a file count and file sizes from stdin and print the merge cost."""
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("unexpected end of input")
        count = int(tokens[0])
        if count < 0:
            raise ValueError("number of files must not be negative")
        sizes = [int(token) for token in tokens[1 : 1 + count]]
        if len(sizes) < count:
            raise ValueError("unexpected end of input")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Minimum cost of merging is: {optimal_merge_cost(sizes)} Comparisons")
    return 0


if __name__ == "__main__":
    sys.exit(main())