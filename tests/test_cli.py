import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, lines):
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(line)
    return stacks


def test_two_numbers_in_one_argument(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_no_arguments():
    assert main([]) == 1


def test_already_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_single_number(capsys):
    assert main(["7"]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["abc"], ["1 1"], ["1", "1"], ["3", "-"], ["2147483648"], [""], ["1 2 "]],
)
def test_invalid_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error"
    assert captured.out == ""


@pytest.mark.parametrize("size", [3, 4, 5, 8, 60])
def test_output_sorts_input(size, capsys):
    values = list(range(-size, size, 2))
    random.Random(size).shuffle(values)
    if values == sorted(values):
        values.reverse()
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    result = _replay(values, lines)
    assert result.is_solved()
    assert len(result.a) == len(values)


def test_mixed_argument_forms(capsys):
    assert main(["3 -1", "+2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert _replay([3, -1, 2], lines).is_solved()