"""Start-up splash screen and login gate in front of the main menu."""

from __future__ import annotations

import random
import time

_USER = "user"
_PASSWORD = "password"
_CAPTCHA_LIMIT = 1000
_CLEAR = "\x1b[H\x1b[2J"

_LETTERS = (
    "       OOOOOOOO00O SSSSSSSSSS",
    "       O         O S",
    "       O         O S",
    "       O         O S",
    "       O         O SSSSSSSSS",
    "       O         O         S",
    "       O         O         S",
    "       O         O         S",
    "       OOOOOOOOOOO SSSSSSSSS",
)


def check_login(user: str, password: str, captcha: int, entered: int) -> bool:
    """Whether the credentials are accepted and the captcha was typed back."""
    return user == _USER and password == _PASSWORD and captcha == entered


def render_splash() -> str:
    """Return the welcome banner with the large block letters."""
    lines = ["\n\n\n\t\t\t\tWelcome to\n"]
    lines.extend(f"\t\t   {row}  " for row in _LETTERS)
    return "\n".join(lines) + "\n"


def _clear() -> None:
    print(_CLEAR, end="", flush=True)


def _dots(count: int, pause: float, dots: str) -> None:
    for _ in range(count):
        time.sleep(pause)
        print(dots, end="", flush=True)


def _token(prompt: str) -> str:
    words = input(prompt).split()
    while not words:
        words = input().split()
    return words[0]


def _login() -> bool:
    """Ask for credentials and a captcha once; report whether access is granted."""
    _clear()
    user = _token("\t\tUser Name : ")
    secret_entered = _token("\t\tPassword : ")
    captcha = random.randrange(_CAPTCHA_LIMIT)
    print(f"\nEnter this number below : {captcha}")
    try:
        entered = int(_token("Enter the above number : "))
    except ValueError:
        entered = -1
    accepted = check_login(user, secret_entered, captcha, entered)
    print("\n\t\t\t\t | Veryfing User | ")
    print("\t\t\t\t ", end="")
    if accepted:
        _dots(1, 2, "......")
        print("\n\n\t\t\t\t   User Verified... ;)\n")
    else:
        _dots(4, 1, "......")
        print("\n\n\t\t\t\t   Access Denied... :(\n")
    return accepted


def main(argv: list[str] | None = None) -> int:
    """Show the splash, require a login, then open the main menu."""
    _clear()
    print(render_splash(), end="")
    print("\n\t\t\t        | Loading | ")
    print("\t\t\t         ", end="")
    _dots(4, 1, "..")
    print()
    try:
        input("Press enter to continue...")
        _clear()
        while not _login():
            pass
        input("Press enter to continue...")
    except EOFError:
        return 0
    _clear()
    from ostoolkit.menu import main as menu_main

    return menu_main([])