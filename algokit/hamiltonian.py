"""Hamiltonian cycles of a graph by backtracking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from itertools import islice
from typing import TextIO

Cycle = tuple[int, ...]


def _check_square(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    return size


def hamiltonian_cycles(adjacency: Sequence[Sequence[int]]) -> Iterator[Cycle]:
    """Yield every Hamiltonian cycle that starts at vertex 0.

    Each cycle lists all vertices once, in visiting order; the edge back to
    vertex 0 is implied. Cycles come out in lexicographic order, and each
    undirected cycle appears once per direction.
    """
    size = _check_square(adjacency)
    if size == 0:
        return
    path = [0]
    visited = {0}

    def extend() -> Iterator[Cycle]:
        last = path[-1]
        if len(path) == size:
            if adjacency[last][0]:
                yield tuple(path)
            return
        for vertex in range(1, size):
            if vertex in visited or not adjacency[last][vertex]:
                continue
            path.append(vertex)
            visited.add(vertex)
            yield from extend()
            path.pop()
            visited.discard(vertex)

    yield from extend()


def format_cycle(cycle: Sequence[int]) -> str:
    """Render a cycle as ``a -> b -> ... -> a``."""
    if not cycle:
        raise ValueError("a cycle needs at least one vertex")
    return " -> ".join(str(vertex) for vertex in (*cycle, cycle[0]))


def _take(tokens: Iterator[str], count: int) -> list[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def _read_matrix(stream: TextIO) -> list[list[int]]:
    tokens = iter(stream.read().split())
    (size,) = _take(tokens, 1)
    if size < 0:
        raise ValueError("number of vertices must not be negative")
    return [_take(tokens, size) for _ in range(size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a vertex count and an adjacency matrix from stdin and print every Hamiltonian cycle."""
    parser = argparse.ArgumentParser(
        prog="hamiltonian",
        description="List the Hamiltonian cycles of a graph read from standard input.",
    )
    parser.add_argument(
        "--one-based",
        action="store_true",
        help="number vertices from 1 instead of 0 in the output",
    )
    args = parser.parse_args(argv)
    offset = 1 if args.one_based else 0

    try:
        adjacency = _read_matrix(sys.stdin)
        found = False
        for cycle in hamiltonian_cycles(adjacency):
            found = True
            shifted = [vertex + offset for vertex in cycle]
            print(f"Hamiltonian Cycle: {format_cycle(shifted)}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if not found:
        print("No Hamiltonian Cycle found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())