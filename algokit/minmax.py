"""Minimum and maximum of a sequence by divide and conquer."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def _min_max(values: Sequence[T], low: int, high: int) -> tuple[T, T]:
    if low == high:
        return values[low], values[low]
    if high == low + 1:
        first, second = values[low], values[high]
        return (first, second) if first < second else (second, first)
    middle = (low + high) // 2
    left_min, left_max = _min_max(values, low, middle)
    right_min, right_max = _min_max(values, middle + 1, high)
    return (
        left_min if left_min < right_min else right_min,
        left_max if left_max > right_max else right_max,
    )


def min_max(values: Sequence[T]) -> tuple[T, T]:
    """Return ``(minimum, maximum)`` of a non-empty sequence."""
    if not values:
        raise ValueError("min_max() needs at least one value")
    return _min_max(values, 0, len(values) - 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many integers from stdin and print their minimum and maximum."""
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("unexpected end of input")
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + max(count, 0)]]
        if len(values) < count:
            raise ValueError("unexpected end of input")
        smallest, largest = min_max(values)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(smallest)
    print(largest)
    return 0


if __name__ == "__main__":
    sys.exit(main())