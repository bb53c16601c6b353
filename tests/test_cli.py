import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(values)
    for move in output.split():
        getattr(stacks, move)()
    return stacks


def test_no_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_empty_single_argument(capsys):
    assert main([""]) == 1
    assert capsys.readouterr().err == ""


def test_blank_single_argument(capsys):
    assert main(["   "]) == 1
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize(
    "argv",
    [["1", "1"], ["abc"], ["2147483648"], ["-2147483649"], ["1", ""], ["+"], ["1 2 x"], ["3 3"]],
)
def test_invalid_input_reports_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_sorts_separate_arguments(capsys):
    values = [5, -2, 9, 0, 3, 7, 1]
    assert main([str(v) for v in values]) == 0
    stacks = _replay(values, capsys.readouterr().out)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_single_string_matches_separate_arguments(capsys):
    assert main(["4 67 3 87 23"]) == 0
    joined = capsys.readouterr().out
    assert main(["4", "67", "3", "87", "23"]) == 0
    assert capsys.readouterr().out == joined


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_limits_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    assert capsys.readouterr().out == "sa\n"