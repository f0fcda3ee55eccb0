import io

import pytest

from algokit.coloring import colorings, colors_used, main, minimal_colorings

PATH3 = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
SQUARE = [[0, 1, 0, 1], [1, 0, 1, 0], [0, 1, 0, 1], [1, 0, 1, 0]]


def _is_proper(adjacency, coloring):
    return all(
        not adjacency[i][j] or coloring[i] != coloring[j]
        for i in range(len(adjacency))
        for j in range(len(adjacency))
        if i != j
    )


@pytest.mark.parametrize("graph", [PATH3, TRIANGLE, SQUARE])
@pytest.mark.parametrize("colors", [1, 2, 3, 4])
def test_every_coloring_is_proper_and_in_range(graph, colors):
    found = list(colorings(graph, colors))
    for coloring in found:
        assert len(coloring) == len(graph)
        assert all(1 <= c <= colors for c in coloring)
        assert _is_proper(graph, coloring)


@pytest.mark.parametrize("graph", [PATH3, TRIANGLE, SQUARE])
def test_colorings_are_distinct_and_lexicographic(graph):
    found = list(colorings(graph, 4))
    assert found == sorted(set(found))


def test_first_coloring_of_path():
    assert next(colorings(PATH3, 2)) == (1, 2, 1)


def test_triangle_needs_three_colors():
    assert list(colorings(TRIANGLE, 2)) == []
    assert all(colors_used(c) == len(TRIANGLE) for c in colorings(TRIANGLE, 3))


def test_graph_without_edges_takes_every_assignment():
    empty = [[0] * 3 for _ in range(3)]
    found = list(colorings(empty, 2))
    assert len(found) == 2 ** 3


def test_zero_colors_gives_nothing():
    assert list(colorings(PATH3, 0)) == []


def test_self_loop_blocks_coloring():
    looped = [[1, 0], [0, 0]]
    assert list(colorings(looped, 3)) == []


def test_more_colors_only_adds_solutions():
    fewer = set(colorings(SQUARE, 2))
    more = set(colorings(SQUARE, 3))
    assert fewer <= more
    assert len(more) > len(fewer)


def test_negative_colors_rejected():
    with pytest.raises(ValueError):
        list(colorings(PATH3, -1))


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        list(colorings([[0, 1], [1]], 2))


def test_colors_used_counts_distinct():
    assert colors_used((1, 2, 1, 2)) == len({1, 2})
    assert colors_used(()) == 0


def test_minimal_colorings_share_the_minimum():
    best, chosen = minimal_colorings(SQUARE, 4)
    assert chosen
    assert all(colors_used(c) == best for c in chosen)
    assert all(colors_used(c) >= best for c in colorings(SQUARE, 4))


def test_minimal_colorings_when_impossible():
    assert minimal_colorings(TRIANGLE, 2) == (None, [])


def test_main_prints_all_and_minimal(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1 0\n1 0 1\n0 1 0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "All Coloring Solutions:" in out
    assert "1 2 1 (Used Colors: 2)" in out
    assert "Minimal Coloring Solutions (Using 2 Colors):" in out


def test_main_all_only(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1 0\n1 0 1\n0 1 0\n"))
    assert main(["--all-only"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Coloring solutions:"
    assert lines[1:] == ["Solution: 1 2 1", "Solution: 2 1 2"]


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n0 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err