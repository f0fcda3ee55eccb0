"""All-pairs (Floyd-Warshall) and single-source (Bellman-Ford) shortest paths."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice

Edge = tuple[int, int, int]
Distance = float  # an int, or math.inf when unreachable


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _check(vertex_count: int, *vertices: int) -> None:
    if vertex_count < 0:
        raise ValueError("number of vertices must not be negative")
    for vertex in vertices:
        if not 0 <= vertex < vertex_count:
            raise ValueError(f"vertex {vertex} is out of bounds")


def floyd_warshall(vertex_count: int, edges: Iterable[Edge]) -> list[list[Distance]]:
    """Return the 0-based matrix of shortest distances; later edges replace earlier ones."""
    _check(vertex_count)
    dist: list[list[Distance]] = [
        [0 if i == j else math.inf for j in range(vertex_count)] for i in range(vertex_count)
    ]
    for source, target, weight in edges:
        _check(vertex_count, source, target)
        dist[source][target] = weight
    for k in range(vertex_count):
        for row in dist:
            for j, from_k in enumerate(dist[k]):
                row[j] = min(row[j], row[k] + from_k)
    return dist


def bellman_ford(vertex_count: int, edges: Iterable[Edge], source: int) -> list[Distance]:
    """Return 0-based distances from ``source``; raise NegativeCycleError on a reachable negative cycle."""
    edge_list = list(edges)
    _check(vertex_count, *(v for start, end, _ in edge_list for v in (start, end)), source)
    dist: list[Distance] = [math.inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for start, end, weight in edge_list:
            dist[end] = min(dist[end], dist[start] + weight)
    if any(dist[start] + weight < dist[end] for start, end, weight in edge_list):
        raise NegativeCycleError("Graph contains a negative-weight cycle!")
    return dist


def format_distance(distance: Distance) -> str:
    """Render a distance, showing unreachable ones as ``INF``."""
    return "INF" if distance == math.inf else str(distance)


def _take(tokens: Iterator[str], count: int) -> list[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def _read_graph(tokens: Iterator[str]) -> tuple[int, list[Edge]]:
    vertex_count, edge_count = _take(tokens, 2)
    _check(vertex_count)
    if edge_count < 0:
        raise ValueError("number of edges must not be negative")
    return vertex_count, [tuple(_take(tokens, 3)) for _ in range(edge_count)]


def all_pairs_main(argv: Sequence[str] | None = None) -> int:
    """Read a graph with 1-based vertices from stdin and print all-pairs shortest distances."""
    try:
        vertex_count, raw_edges = _read_graph(iter(sys.stdin.read().split()))
        edges = []
        for source, target, weight in raw_edges:
            if 1 <= source <= vertex_count and 1 <= target <= vertex_count:
                edges.append((source - 1, target - 1, weight))
            else:
                print("Invalid edge: vertices out of bounds.")
        dist = floyd_warshall(vertex_count, edges)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Shortest distances between all pairs:")
    for row in dist:
        print("".join(f"{format_distance(value)}\t" for value in row))
    return 0


def single_source_main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and a source with 1-based vertices from stdin and print distances from it."""
    try:
        tokens = iter(sys.stdin.read().split())
        vertex_count, raw_edges = _read_graph(tokens)
        edges = [(source - 1, target - 1, weight) for source, target, weight in raw_edges]
        (start,) = _take(tokens, 1)
        dist = bellman_ford(vertex_count, edges, start - 1)
    except NegativeCycleError as exc:
        print(exc)
        return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Vertex \t Distance from Source")
    for vertex, value in enumerate(dist, start=1):
        print(f"{vertex} \t {format_distance(value)}")
    return 0


if __name__ == "__main__":
    sys.exit(all_pairs_main())