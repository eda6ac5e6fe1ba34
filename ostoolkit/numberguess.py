"""Guess the secret number between 1 and 100."""

from __future__ import annotations

import random
import time

from ostoolkit.banner import print_header

_CLOSE = 10
_PAUSE_SECONDS = 2


def hint(guess: int, target: int) -> str | None:
    """Feedback for a guess, or None when it is right."""
    if guess == target:
        return None
    prefix = "Too high! " if guess > target else "Too low! "
    if abs(guess - target) <= _CLOSE:
        return prefix + "But you are close! Try again."
    return prefix + "Try again."


def main(argv: list[str] | None = None) -> int:
    """Play one game, counting the guesses until the number is found."""
    target = random.randint(1, 100)
    attempts = 0
    print_header("Number Guessing Game")
    print("\nI have selected a number between 1 and 100.")
    while True:
        try:
            raw = input("\nEnter your guess: ")
        except EOFError:
            return 0
        try:
            guess = int(raw.strip())
        except ValueError:
            print("Please enter a whole number.")
            continue
        attempts += 1
        message = hint(guess, target)
        if message is None:
            print(f"\nCongratulations! You guessed the number {target} "
                  f"in {attempts} attempts!")
            break
        print(message)
    time.sleep(_PAUSE_SECONDS)
    print("\nThank you for playing!")
    return 0