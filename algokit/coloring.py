"""Graph m-colouring by backtracking, with a search for the colourings that use fewest colours."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import TextIO

Coloring = tuple[int, ...]


def _check_square(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    return size


def colorings(adjacency: Sequence[Sequence[int]], colors: int) -> Iterator[Coloring]:
    """Yield every proper colouring with colours 1..colors, in lexicographic order.

    Vertex ``i`` gets colour ``coloring[i]``; a vertex must differ from every
    vertex its row of the matrix marks as adjacent. A vertex with a self-loop
    can never be coloured.
    """
    if colors < 0:
        raise ValueError("number of colours must not be negative")
    size = _check_square(adjacency)
    assignment = [0] * size

    def extend(vertex: int) -> Iterator[Coloring]:
        if vertex == size:
            yield tuple(assignment)
            return
        row = adjacency[vertex]
        if row[vertex]:
            return
        for color in range(1, colors + 1):
            if any(edge and assigned == color for edge, assigned in zip(row, assignment)):
                continue
            assignment[vertex] = color
            yield from extend(vertex + 1)
        assignment[vertex] = 0

    yield from extend(0)


def colors_used(coloring: Iterable[int]) -> int:
    """Return how many distinct colours a colouring uses."""
    return len(set(coloring))


def _minimal(solutions: Iterable[Coloring]) -> tuple[int | None, list[Coloring]]:
    best: int | None = None
    chosen: list[Coloring] = []
    for solution in solutions:
        used = colors_used(solution)
        if best is None or used < best:
            best = used
            chosen = []
        if used == best:
            chosen.append(solution)
    return best, chosen


def minimal_colorings(
    adjacency: Sequence[Sequence[int]], colors: int
) -> tuple[int | None, list[Coloring]]:
    """Return the fewest colours any colouring uses and every colouring that uses that many.

    When the graph cannot be coloured the count is ``None`` and the list is empty.
    """
    return _minimal(colorings(adjacency, colors))


def _take(tokens: Iterator[str], count: int) -> list[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def _read_problem(stream: TextIO) -> tuple[int, list[list[int]]]:
    tokens = iter(stream.read().split())
    vertex_count, color_count = _take(tokens, 2)
    if vertex_count < 0:
        raise ValueError("number of vertices must not be negative")
    adjacency = [_take(tokens, vertex_count) for _ in range(vertex_count)]
    return color_count, adjacency


def _join(coloring: Coloring) -> str:
    return " ".join(map(str, coloring))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a vertex count, a colour count and an adjacency matrix from stdin and print colourings."""
    parser = argparse.ArgumentParser(
        prog="coloring",
        description="List the m-colourings of a graph read from standard input.",
    )
    parser.add_argument(
        "--all-only",
        action="store_true",
        help="list every colouring without the summary of minimal ones",
    )
    args = parser.parse_args(argv)

    try:
        color_count, adjacency = _read_problem(sys.stdin)
        found = colorings(adjacency, color_count)
        if args.all_only:
            print("Coloring solutions:")
            for coloring in found:
                print(f"Solution: {_join(coloring)}")
            return 0
        solutions = list(found)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("All Coloring Solutions:")
    for coloring in solutions:
        print(f"{_join(coloring)} (Used Colors: {colors_used(coloring)})")

    best, chosen = _minimal(solutions)
    if best is None:
        print(f"\nNo coloring exists with {color_count} colors.")
        return 0
    print(f"\nMinimal Coloring Solutions (Using {best} Colors):")
    for coloring in chosen:
        print(_join(coloring))
    return 0


if __name__ == "__main__":
    sys.exit(main())