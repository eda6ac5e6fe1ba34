import io
from unittest.mock import patch

import pytest

from ostoolkit.numberguess import hint, main


def test_correct_guess_has_no_hint():
    assert hint(37, 37) is None


@pytest.mark.parametrize("guess", [51, 55, 60])
def test_close_high(guess):
    assert hint(guess, 50) == "Too high! But you are close! Try again."


@pytest.mark.parametrize("guess", [61, 100])
def test_far_high(guess):
    assert hint(guess, 50) == "Too high! Try again."


@pytest.mark.parametrize("guess", [40, 49])
def test_close_low(guess):
    assert hint(guess, 50) == "Too low! But you are close! Try again."


def test_far_low():
    assert hint(1, 50) == "Too low! Try again."


@patch("ostoolkit.numberguess.time.sleep")
@patch("ostoolkit.numberguess.random.randint", return_value=42)
def test_main_counts_attempts(randint, sleep, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n50\n42\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "I have selected a number between 1 and 100." in out
    assert "You guessed the number 42 in 3 attempts!" in out
    assert out.rstrip().endswith("Thank you for playing!")
    assert hint(10, 42) in out
    assert hint(50, 42) in out


@patch("ostoolkit.numberguess.time.sleep")
@patch("ostoolkit.numberguess.random.randint", return_value=7)
def test_main_ignores_non_numbers(randint, sleep, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("seven\n7\n"))
    main()
    out = capsys.readouterr().out
    assert "Please enter a whole number." in out
    assert "in 1 attempts!" in out