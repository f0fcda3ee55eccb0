"""Sum of subsets by backtracking over sorted positive weights."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

Subset = tuple[int, ...]


def sum_of_subsets(weights: Iterable[int], target: int) -> Iterator[Subset]:
    """Yield every choice of positive, non-decreasing weights summing exactly to ``target``.

    Subsets that include an earlier weight come before those that leave it out.
    """
    values = list(weights)
    if any(value <= 0 for value in values):
        raise ValueError("weights must be positive")
    if any(later < earlier for earlier, later in pairwise(values)):
        raise ValueError("weights must be in non-decreasing order")
    if target <= 0:
        raise ValueError("target sum must be positive")
    count = len(values)
    chosen: list[int] = []

    def search(partial: int, index: int, remaining: int) -> Iterator[Subset]:
        weight = values[index]
        has_next = index + 1 < count
        following = values[index + 1] if has_next else 0
        chosen.append(weight)
        if partial + weight == target:
            yield tuple(chosen)
        elif has_next and partial + weight + following <= target:
            yield from search(partial + weight, index + 1, remaining - weight)
        chosen.pop()
        if has_next and partial + remaining - weight >= target and partial + following <= target:
            yield from search(partial, index + 1, remaining - weight)

    total = sum(values)
    if count == 0 or total < target:
        return iter(())
    return search(0, 0, total)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count, sorted weights and a target from stdin and print every matching subset."""
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("unexpected end of input")
        count = int(tokens[0])
        if count < 0:
            raise ValueError("number of elements must not be negative")
        if len(tokens) < count + 2:
            raise ValueError("unexpected end of input")
        weights = [int(token) for token in tokens[1 : 1 + count]]
        target = int(tokens[1 + count])
        if sum(weights) < target:
            print(f"No solution exists as sum of all elements is less than {target}")
            return 0
        subsets = list(sum_of_subsets(weights, target))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for subset in subsets:
        print(f"Subset found: {{ {' '.join(map(str, subset))} }}")
    return 0


if __name__ == "__main__":
    sys.exit(main())