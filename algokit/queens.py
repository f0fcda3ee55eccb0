"""N-queens placements by backtracking."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

Placement = tuple[int, ...]


def queen_solutions(n: int) -> Iterator[Placement]:
    """Yield, in lexicographic order, the 0-based queen column of each row for every solution."""
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []

    def place(row: int) -> Iterator[Placement]:
        for column in range(n):
            if all(c != column and abs(c - column) != row - r for r, c in enumerate(columns)):
                columns.append(column)
                if row == n - 1:
                    yield tuple(columns)
                else:
                    yield from place(row + 1)
                columns.pop()

    return place(0)


def render_board(solution: Sequence[int]) -> str:
    """Render a placement as a tab-separated board numbered from 1, rows split by blank lines."""
    size = len(solution)
    if any(not 0 <= column < size for column in solution):
        raise ValueError("every column must lie on the board")
    header = "".join(f"\t{number}" for number in range(1, size + 1))
    rows = [
        f"{row}" + "".join("\tQ" if square == column else "\t-" for square in range(size))
        for row, column in enumerate(solution, start=1)
    ]
    return "\n\n".join([header, *rows])


def main(argv: Sequence[str] | None = None) -> int:
    """Read the number of queens from stdin and print every placement as a board."""
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("unexpected end of input")
        solutions = queen_solutions(int(tokens[0]))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for number, solution in enumerate(solutions, start=1):
        print(f"Solution {number}:\n")
        print(render_board(solution))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())