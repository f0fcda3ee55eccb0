import io

import pytest

from algokit.minmax import main, min_max


@pytest.mark.parametrize(
    "values",
    [
        [5],
        [2, 1],
        [1, 2],
        [3, 3],
        [7, -2, 9, 0, 4],
        [10, 9, 8, 7, 6, 5, 4, 3, 2, 1],
        [-5, -1, -9, -3],
        list(range(100)),
    ],
)
def test_agrees_with_builtins(values):
    assert min_max(values) == (min(values), max(values))


def test_single_value_is_both():
    assert min_max([42]) == (42, 42)


def test_works_on_tuples_and_floats():
    values = (2.5, -1.5, 0.0)
    assert min_max(values) == (min(values), max(values))


def test_empty_rejected():
    with pytest.raises(ValueError):
        min_max([])


def test_main_prints_min_then_max(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n7 -2 9 0 4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["-2", "9"]


def test_main_rejects_empty(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err