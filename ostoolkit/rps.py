"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import random
from enum import Enum, IntEnum


class Choice(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Outcome(Enum):
    TIE = "It's a tie!"
    WIN = "Congratulations! You win!"
    LOSE = "Sorry, you lose. Better luck next time!"


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}


def decide(player: Choice | int, computer: Choice | int) -> Outcome:
    """Outcome of the round from the player's side."""
    player, computer = Choice(player), Choice(computer)
    if player is computer:
        return Outcome.TIE
    return Outcome.WIN if _BEATS[player] is computer else Outcome.LOSE


def _read_choice() -> Choice | None:
    raw = input("Enter your choice (0 - Rock, 1 - Paper, 2 - Scissors): ")
    try:
        return Choice(int(raw.strip()))
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Play rounds until the player declines another."""
    print("Welcome to Rock, Paper, Scissors!")
    while True:
        try:
            player = _read_choice()
        except EOFError:
            return 0
        if player is None:
            print("Invalid choice. Please try again.")
            continue
        computer = Choice(random.randrange(3))
        print(f"You chose: {player.label}")
        print(f"Computer chose: {computer.label}")
        print(decide(player, computer).value)
        try:
            again = input("Do you want to play again? (y/n): ").strip()
        except EOFError:
            return 0
        if again[:1] not in ("y", "Y"):
            return 0
        print()