import io
import random
import sys

import pytest

from pushswap.checker import check, main
from pushswap.sorting import solve


def test_single_swap_solves():
    assert check([2, 1, 3], ["sa\n"]) is True


def test_no_operations_leaves_unsorted():
    assert check([2, 1, 3], []) is False


def test_nonempty_b_is_not_solved():
    assert check([1, 2, 3], ["pb\n"]) is False


def test_push_and_back():
    assert check([1, 2, 3], ["pb\n", "pb\n", "pa\n", "pa\n"]) is True


def test_empty_string_ends_input():
    assert check([2, 1], ["", "sa\n"]) is False


@pytest.mark.parametrize("line", ["xx\n", "sa", "\n", "sa \n", "RA\n"])
def test_invalid_line_raises(line):
    with pytest.raises(ValueError):
        check([2, 1], [line])


@pytest.mark.parametrize("size", [2, 3, 4, 5, 9, 70])
def test_solution_round_trip(size):
    values = random.Random(size).sample(range(-500, 500), size)
    if values == sorted(values):
        values.reverse()
    lines = [f"{op}\n" for op in solve(values)]
    assert check(values, lines) is True


def _run(monkeypatch, args, stdin_text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin_text))
    return main(args)


def test_main_ok(monkeypatch, capsys):
    assert _run(monkeypatch, ["2 1 3"], "sa\n") == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    assert _run(monkeypatch, ["2", "1", "3"], "ra\n") == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(monkeypatch, capsys):
    assert _run(monkeypatch, ["2 1 3"], "sa\nfoo\n") == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_last_line_without_newline(monkeypatch, capsys):
    assert _run(monkeypatch, ["2 1 3"], "sa") == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_bad_numbers(monkeypatch, capsys):
    assert _run(monkeypatch, ["1 x"], "") == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_already_sorted(monkeypatch, capsys):
    assert _run(monkeypatch, ["1 2 3"], "sa\n") == 1
    assert capsys.readouterr().out == ""


def test_main_no_arguments(monkeypatch):
    assert _run(monkeypatch, [], "") == 1