"""Create text files or open them in a graphical editor."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from ostoolkit.fileops import FileOperationError

_EDITOR = "gnome-text-editor"


def create_file(name: str, directory: str | os.PathLike[str] | None = None) -> Path:
    """Create (or empty) ``<name>.txt`` in ``directory``, the current one by default."""
    path = Path(directory if directory is not None else ".") / f"{name}.txt"
    try:
        path.open("w").close()
    except OSError as exc:
        raise FileOperationError("Error in creating file!!!") from exc
    return path


def editor_command(name: str, directory: str | os.PathLike[str] | None = None) -> list[str]:
    """Command line that opens ``<name>.txt``; the folder defaults to ~/Desktop."""
    folder = Path(directory) if directory is not None else Path.home() / "Desktop"
    return [_EDITOR, str(folder / f"{name}.txt")]


def _token(prompt: str) -> str:
    words = input(prompt).split()
    while not words:
        words = input().split()
    return words[0]


def main(argv: list[str] | None = None) -> int:
    """Offer to create or edit files until the user exits."""
    while True:
        print("Choose an option:")
        print("1. Create a new file")
        print("2. Open an existing file for editing")
        print("3. Exit")
        try:
            choice = _token("")
            if choice == "1":
                name = _token("Enter the file name: ")
                try:
                    create_file(name)
                except FileOperationError as exc:
                    print(exc)
                else:
                    print("File created successfully.")
            elif choice == "2":
                name = _token("Enter the file name: ")
                try:
                    subprocess.run(editor_command(name), check=False)
                except OSError as exc:
                    print(f"Could not start the editor: {exc}", file=sys.stderr)
            elif choice == "3":
                print("Exiting program.")
                return 0
            else:
                print("Invalid choice! Please enter 1, 2, or 3.")
        except EOFError:
            return 0