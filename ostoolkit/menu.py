"""Main menu that launches the tools and manages the processes they run in."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from enum import IntEnum

from ostoolkit.banner import print_header
from ostoolkit.procs import (
    available_resources,
    launched_processes,
    priority_queues,
    terminate,
)

_CLEAR = "\x1b[H\x1b[2J"
_TERMINAL = ("gnome-terminal", "--disable-factory", "--")
_MONITOR = ("python3", "System-Monitor-main/process_monitor_ui.py")
_LOOP_PAUSE = 1
_QUEUE_LEVELS = (
    ("high level queue", "high", 5),
    ("medium queue", "medium", 4),
    ("low queue", "low", 4),
)


class MenuChoice(IntEnum):
    """Entries of the main menu, keyed by the number the user types."""

    CALCULATOR = 1
    CLOCK = 2
    COPY_FILE = 3
    DELETE_FILE = 4
    FILE_INFO = 5
    SYSTEM_MONITOR = 6
    TEXT_EDITOR = 7
    CUT_FILE = 8
    PLAY_SONG = 9
    PLAY_VIDEO = 10
    HANGMAN = 11
    ROCK_PAPER_SCISSORS = 12
    NUMBER_GUESS = 13
    KILL_PROCESS = 14
    RESOURCES = 15
    SCHEDULE = 16
    EXIT = -1

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def program(self) -> str | None:
        """Name of the executable this entry opens in a terminal, if any."""
        return _PROGRAMS.get(self)


_LABELS = {
    MenuChoice.CALCULATOR: "Calculator",
    MenuChoice.CLOCK: "Clock",
    MenuChoice.COPY_FILE: "Copy File",
    MenuChoice.DELETE_FILE: "Delete File",
    MenuChoice.FILE_INFO: "File Info",
    MenuChoice.SYSTEM_MONITOR: "System Monitor",
    MenuChoice.TEXT_EDITOR: "Text Editor (Partialy Complected)",
    MenuChoice.CUT_FILE: "Cut File (Not Complected)",
    MenuChoice.PLAY_SONG: "Play Song (Not Complected)",
    MenuChoice.PLAY_VIDEO: "Play Video (Not Complected)",
    MenuChoice.HANGMAN: "Run Hangman Game",
    MenuChoice.ROCK_PAPER_SCISSORS: "Run Rock Paper Scissors Game",
    MenuChoice.NUMBER_GUESS: "Run Number Guessing Game",
    MenuChoice.KILL_PROCESS: "Kernel Mode For terminating Specific Process",
    MenuChoice.RESOURCES: "Dispay Resources",
    MenuChoice.SCHEDULE: "Terminate Functions",
    MenuChoice.EXIT: "Exit",
}

_PROGRAMS = {
    MenuChoice.CALCULATOR: "calculator",
    MenuChoice.CLOCK: "clock",
    MenuChoice.COPY_FILE: "copyFile",
    MenuChoice.DELETE_FILE: "deleteFile",
    MenuChoice.FILE_INFO: "Fileproperties",
    MenuChoice.TEXT_EDITOR: "notepad",
    MenuChoice.CUT_FILE: "cutFile",
    MenuChoice.PLAY_SONG: "song",
    MenuChoice.PLAY_VIDEO: "video",
    MenuChoice.HANGMAN: "Hangman",
    MenuChoice.ROCK_PAPER_SCISSORS: "RockPaperScissors",
    MenuChoice.NUMBER_GUESS: "numberGuess",
}


def menu_text() -> str:
    """The list of options shown before each choice."""
    lines = ["Choose an option:"]
    lines.extend(f"{choice.value:02d}. {choice.label}" for choice in MenuChoice)
    return "\n".join(lines)


def launch(program: str) -> subprocess.Popen:
    """Open ``./program`` in a new terminal window without waiting for it."""
    return subprocess.Popen([*_TERMINAL, f"./{program}"])


def _clear() -> None:
    print(_CLEAR, end="", flush=True)


def _token(prompt: str) -> str:
    words = input(prompt).split()
    while not words:
        words = input().split()
    return words[0]


def _read_float(prompt: str) -> float:
    while True:
        try:
            return float(_token(prompt))
        except ValueError:
            print("Please enter a number.")


def _list_launched(proc_root: str):
    try:
        return launched_processes(proc_root)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return None


def _show_resources(ram: float, storage: float, proc_root: str) -> None:
    entries = _list_launched(proc_root)
    if entries is None:
        return
    res = available_resources(ram, storage, len(entries))
    if res.exhausted:
        print("\nNo More Memmory\nFirst Process was deleted to free some ram\n")
        if entries:
            try:
                terminate(entries[0].pid)
            except OSError as exc:
                print(f"Failed to send signal to process: {exc}", file=sys.stderr)
    print(f"Free Available RAM : {res.ram:g}")
    print(f"Free Cores : {res.cores}")
    print(f"Free Storage : {res.storage:g}")


def _kill_one(proc_root: str) -> None:
    entries = _list_launched(proc_root)
    if entries is None:
        return
    for entry in entries:
        print(f"{entry.pid} {entry.cmdline}")
    if not entries:
        print("No processes found.")
        return
    print("List of valid PIDs:")
    pids = [entry.pid for entry in entries]
    for pid in pids:
        print(pid)
    raw = _token("Enter the PID of the process you want to terminate: ")
    try:
        pid = int(raw)
    except ValueError:
        pid = None
    if pid not in pids:
        print("Invalid PID.")
        return
    try:
        terminate(pid)
    except OSError as exc:
        print(f"Failed to send signal to process: {exc}", file=sys.stderr)
        return
    print("Signal sent to process.")


def _activate_window(pid: int) -> None:
    try:
        subprocess.run(
            ["xdotool", "search", "--pid", str(pid), "--all", "windowactivate"],
            check=False,
        )
    except OSError:
        pass


def _schedule(proc_root: str) -> None:
    entries = _list_launched(proc_root)
    if entries is None:
        return
    for entry in entries:
        print(f"{entry.pid} {entry.cmdline}")
    pids = [entry.pid for entry in entries]
    print("a-------------")
    for pid in pids:
        print(pid)
    print("a-------------")
    for (title, level, pause), queue in zip(_QUEUE_LEVELS, priority_queues(pids)):
        for pid in queue:
            print(title)
            print(pid)
            _activate_window(pid)
            time.sleep(pause)
            try:
                terminate(pid)
            except OSError as exc:
                print(f"Failed to send signal to process: {exc}", file=sys.stderr)
            else:
                print(f"Terminated process {pid} with {level} priority.")


def _system_monitor() -> None:
    try:
        status = subprocess.run(list(_MONITOR), check=False).returncode
    except OSError:
        status = -1
    if status != 0:
        print("Failed to launch the System Monitor.")


def _dispatch(choice: MenuChoice, ram: float, storage: float, proc_root: str) -> None:
    if choice.program is not None:
        try:
            launch(choice.program)
        except OSError:
            print("Error creating process.", file=sys.stderr)
    elif choice is MenuChoice.SYSTEM_MONITOR:
        _system_monitor()
    elif choice is MenuChoice.KILL_PROCESS:
        _clear()
        _kill_one(proc_root)
    elif choice is MenuChoice.RESOURCES:
        _clear()
        _show_resources(ram, storage, proc_root)
        print("Press enter to continue...")
        input()
    elif choice is MenuChoice.SCHEDULE:
        _schedule(proc_root)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Main menu of the toolkit.")
    parser.add_argument(
        "--proc-root",
        default="/proc",
        help="process information directory (default: /proc)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Ask for the machine's resources, then serve the menu until exit."""
    args = _parse_args(argv)
    print_header("MAIN MENU")
    print("\n")
    try:
        ram = _read_float("Enter RAM: ")
        storage = _read_float("Enter storage: ")
    except EOFError:
        return 0
    while True:
        time.sleep(_LOOP_PAUSE)
        _clear()
        _show_resources(ram, storage, args.proc_root)
        print(menu_text())
        try:
            raw = _token("Enter your choice: ")
        except EOFError:
            return 0
        try:
            choice = MenuChoice(int(raw))
        except ValueError:
            print("This value is not acceptable.\nTry again.")
            continue
        if choice is MenuChoice.EXIT:
            return 0
        try:
            _dispatch(choice, ram, storage, args.proc_root)
        except EOFError:
            return 0