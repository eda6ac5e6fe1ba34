"""Menu-driven calculator for the six basic operations."""

from __future__ import annotations

import math
import sys
from enum import Enum


class Operation(Enum):
    """Menu entries, keyed by the digit the user types."""

    ADD = "1"
    SUBTRACT = "2"
    MULTIPLY = "3"
    DIVIDE = "4"
    POWER = "5"
    MODULUS = "6"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Operation.ADD: "Addition (+)",
    Operation.SUBTRACT: "Subtraction (-)",
    Operation.MULTIPLY: "Multiplication (*)",
    Operation.DIVIDE: "Division (/)",
    Operation.POWER: "Exponentiation (^)",
    Operation.MODULUS: "Modulus (%)",
}

_INVALID = "Invalid input. Please enter a valid option."


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        odd_exponent = exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd_exponent else math.inf


def calculate(choice: Operation | str, first: float, second: float) -> float:
    """Apply ``choice`` to the two operands.

    Raises ZeroDivisionError when dividing or taking the modulus by zero.
    """
    operation = Operation(choice)
    if operation is Operation.ADD:
        return first + second
    if operation is Operation.SUBTRACT:
        return first - second
    if operation is Operation.MULTIPLY:
        return first * second
    if operation is Operation.DIVIDE:
        if second == 0:
            raise ZeroDivisionError("Division by zero.")
        return first / second
    if operation is Operation.POWER:
        return _power(first, second)
    if second == 0:
        raise ZeroDivisionError("Modulus by zero.")
    return math.fmod(first, second)


def format_result(value: float) -> str:
    """Format a result with six significant digits, as stream output does."""
    return f"{value:g}"


def _read_number(prompt: str) -> float:
    tokens = input(prompt).split()
    if not tokens:
        raise ValueError("no number given")
    return float(tokens[0])


def _print_menu() -> None:
    print("Calculator Menu:")
    for operation in Operation:
        print(f"{operation.value}. {operation.label}")
    print("Enter(Q/q) To Quit")


def main(argv: list[str] | None = None) -> int:
    """Run the calculator until the user quits or input ends."""
    while True:
        _print_menu()
        try:
            raw = input("Enter your choice In Number: ")
        except EOFError:
            return 0
        key = raw.strip()[:1]
        if key in ("q", "Q"):
            print("Exiting the calculator. Goodbye!")
            return 0
        try:
            operation = Operation(key)
        except ValueError:
            print(_INVALID, file=sys.stderr)
            continue
        try:
            first = _read_number("Enter the first number: ")
            second = _read_number("Enter the second number: ")
        except EOFError:
            return 0
        except ValueError:
            print(_INVALID, file=sys.stderr)
            continue
        try:
            result = calculate(operation, first, second)
        except ZeroDivisionError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            continue
        print(f"Result: {format_result(result)}")