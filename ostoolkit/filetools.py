"""Interactive front ends for the copy, cut, delete, move and info tools."""

from __future__ import annotations

from pathlib import Path

from ostoolkit.banner import print_header
from ostoolkit.fileops import (
    FileOperationError,
    copy_file,
    cut_file,
    delete_file,
    file_info,
    format_file_info,
    move_file,
)

_EXIT_WORDS = ("exit", "Exit", "EXIT")


def _token(prompt: str) -> str:
    words = input(prompt).split()
    while not words:
        words = input().split()
    return words[0]


def _yes(prompt: str) -> bool:
    return _token(prompt)[0] in ("Y", "y")


def _report(exc: FileOperationError) -> None:
    print(str(exc) if exc.aborted else f"Error: {exc}")


def copy_main(argv: list[str] | None = None) -> int:
    """Copy one file chosen by the user."""
    print_header("File Copy Program")
    try:
        if not _yes("\nDo you want to copy a file? (Y/N): "):
            print("Exiting the program.")
            return 0
        source = _token("\nEnter the Path of Source File: ")
        target = _token("Enter the Path of Target File: ")
    except EOFError:
        return 0
    try:
        copy_file(source, target)
    except FileOperationError as exc:
        _report(exc)
        print("File content copy failed")
        return 0
    print("File content copied successfully")
    print(f"File content copied successfully to {target}")
    return 0


def cut_main(argv: list[str] | None = None) -> int:
    """Cut files chosen by the user until they stop or an operation fails."""
    while True:
        print_header("File Content Cut Program")
        try:
            if not _yes("\nDo you want to cut a file? (Y/N): "):
                print("Exiting the program.")
                return 0
            source = _token("\nEnter the Path of Source File: ")
            target = _token("Enter the Path of Target File: ")
        except EOFError:
            return 0
        try:
            cut_file(source, target)
        except FileOperationError as exc:
            _report(exc)
            print("File content cut failed")
            return 0
        print("File content cut successful")
        print("File content cut successful")
        try:
            choice = _token(
                "\nDo you want to perform another operation?\n"
                "1. Cut another file\n"
                "2. Exit program\n"
                "Enter your choice (1/2): "
            )[0]
        except EOFError:
            return 0
        if choice == "1":
            continue
        if choice == "2":
            print("Exiting the program.")
        else:
            print("Invalid choice. Exiting the program.")
        return 0


def delete_main(argv: list[str] | None = None) -> int:
    """Delete files named by the user, one after another."""
    print_header("File Deletion Program")
    try:
        if not _yes("\nDo you want to Delete a file? (Y/N): "):
            print("Exiting the program.")
            return 0
        while True:
            name = _token("\nEnter the Name of File: ")
            try:
                delete_file(name)
            except FileOperationError:
                print("\nError Occurred!")
            else:
                print("\nFile Deleted Successfully!")
            print()
            if not _yes("Do you want to delete another file? (Y/N): "):
                return 0
    except EOFError:
        return 0


def move_main(argv: list[str] | None = None) -> int:
    """Move files between folders until the user stops."""
    print_header("Move File Program")
    try:
        if not _yes("\nDo you want to Move a file? (Y/N): "):
            print("Exiting the program.")
            return 0
        while True:
            source_folder = _token("\nEnter the Path of Source Folder: ")
            target_folder = _token("Enter the Path of Target Folder: ")
            name = _token("Enter the File Name: ")
            if (Path(source_folder) / name).exists() and not Path(target_folder).exists():
                print("Target folder does not exist. Creating...")
            try:
                move_file(
                    source_folder,
                    target_folder,
                    name,
                    lambda: _yes(
                        "Target file already exists. Do you want to overwrite it? (Y/N): "
                    ),
                )
            except FileOperationError as exc:
                _report(exc)
                print("File transfer failed")
            else:
                print(f"File transfer successful: {name}")
                print("File transfer successful")
            if not _yes("\nDo you want to transfer another file? (Y/N): "):
                return 0
    except EOFError:
        return 0


def info_main(argv: list[str] | None = None) -> int:
    """Show the properties of files named by the user."""
    print_header("File Information Program")
    try:
        while True:
            name = _token("\nEnter File name (or 'exit' to quit): ")
            if name in _EXIT_WORDS:
                print("Exiting the program.")
                return 0
            try:
                info = file_info(name)
            except FileOperationError as exc:
                print(exc)
                continue
            print()
            print(format_file_info(info))
            if not _yes("\nDo you want to check another file? (Y/N): "):
                print("Exiting the program.")
                return 0
    except EOFError:
        return 0