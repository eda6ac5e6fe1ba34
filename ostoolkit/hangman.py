"""Two-player hangman: one enters a word, the other guesses it letter by letter."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

_GALLOWS = (
    (),
    ("  O",),
    ("  O", "  |"),
    ("  O", " \\|"),
    ("  O", " \\|/"),
    ("  O", " \\|/", " /"),
    ("  O", " \\|/", " / \\"),
)
_PAUSE_SECONDS = 4


def gallows(attempts: int) -> list[str]:
    """Lines of the figure drawn after ``attempts`` wrong guesses."""
    if 0 <= attempts < len(_GALLOWS):
        return list(_GALLOWS[attempts])
    return []


@dataclass
class HangmanGame:
    """State of one round of hangman."""

    secret: str
    max_attempts: int = 6
    incorrect: list[str] = field(default_factory=list, init=False)
    _revealed: list[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("secret word must not be empty")
        self._revealed = ["_"] * len(self.secret)

    @property
    def revealed(self) -> str:
        return "".join(self._revealed)

    @property
    def attempts(self) -> int:
        return len(self.incorrect)

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempts

    @property
    def won(self) -> bool:
        return self.revealed == self.secret

    @property
    def lost(self) -> bool:
        return self.attempts >= self.max_attempts

    @property
    def over(self) -> bool:
        return self.won or self.lost

    def guess(self, letter: str) -> bool:
        """Reveal every occurrence of ``letter``; return whether it was in the word."""
        if len(letter) != 1:
            raise ValueError("guess must be a single character")
        if self.over:
            raise ValueError("the game is over")
        hits = [i for i, ch in enumerate(self.secret) if ch == letter]
        for i in hits:
            self._revealed[i] = letter
        if not hits:
            self.incorrect.append(letter)
        return bool(hits)


def _show(game: HangmanGame) -> None:
    print(f"\nGuessed word: {game.revealed}")
    for line in gallows(game.attempts):
        print(line)
    print("Incorrect letters: " + "".join(f"{ch} " for ch in game.incorrect))
    print(f"Attempts left: {game.attempts_left}")


def main(argv: list[str] | None = None) -> int:
    """Play one interactive round."""
    print("\t\t\tWelcome to Hangman!")
    print("You have to guess the secret word.")
    try:
        words = input("Enter the secret word: ").split()
        while not words:
            words = input().split()
    except EOFError:
        return 0
    game = HangmanGame(words[0])
    while True:
        _show(game)
        try:
            raw = input("\nGuess a letter: ").strip()
            while not raw:
                raw = input().strip()
        except EOFError:
            return 0
        game.guess(raw[0])
        if game.won:
            print("Congratulations! You guessed the word.")
            break
        if game.lost:
            print(f"You lost! The word was: {game.secret}")
            break
    time.sleep(_PAUSE_SECONDS)
    return 0