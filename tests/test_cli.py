"""Tests for the coinweigh command line."""
import pytest

from coinweigh.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.coins == 12
    assert args.static is False
    assert args.quiet is False


def test_sequential_twelve(capsys):
    assert main(["-n", "12"]) == 0
    out = capsys.readouterr().out
    assert "Weigh strategy for 12 coins:" in out
    assert "( 1  2  3  4 |  5  6  7  8)" in out
    assert "Required 3 weighings." in out


def test_static_fifteen(capsys):
    assert main(["-s", "-n", "15"]) == 0
    out = capsys.readouterr().out
    assert "Static weigh strategy for 15 coins:" in out
    assert "Required 4 weighings." in out


def test_quiet(capsys):
    assert main(["-q", "-n", "13"]) == 0
    out = capsys.readouterr().out
    assert "Weigh strategy" not in out
    assert "Required 4 weighings." in out


def test_too_few_coins(capsys):
    assert main(["-n", "2"]) == 2
    captured = capsys.readouterr()
    assert "There must be more than 2 coins." in captured.err
    assert "Required" not in captured.out


@pytest.mark.parametrize("argv", [["-n", "12", "-p", "3"], ["-n", "12", "-q", "-p", "2"]])
def test_parallel_flag(argv, capsys):
    assert main(argv) == 0
    assert "Required 3 weighings." in capsys.readouterr().out
