from pathlib import Path
from unittest import mock

import pytest

from ostoolkit.fileops import FileOperationError
from ostoolkit.notepad import create_file, editor_command, main


def feed(monkeypatch, *answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_create_file_makes_empty_txt(tmp_path):
    path = create_file("notes", tmp_path)
    assert path == tmp_path / "notes.txt"
    assert path.read_text() == ""


def test_create_file_truncates_existing(tmp_path):
    (tmp_path / "old.txt").write_text("previous")
    path = create_file("old", tmp_path)
    assert path.read_text() == ""


def test_create_file_in_missing_folder(tmp_path):
    with pytest.raises(FileOperationError):
        create_file("x", tmp_path / "nowhere")


def test_editor_command_with_directory(tmp_path):
    command = editor_command("draft", tmp_path)
    assert command == ["gnome-text-editor", str(tmp_path / "draft.txt")]


def test_editor_command_default_folder():
    command = editor_command("draft")
    assert command[1] == str(Path.home() / "Desktop" / "draft.txt")


def test_main_creates_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "1", "memo", "3")
    assert main() == 0
    out = capsys.readouterr().out
    assert (tmp_path / "memo.txt").exists()
    assert "File created successfully." in out
    assert "Exiting program." in out


def test_main_invalid_choice(monkeypatch, capsys):
    feed(monkeypatch, "7", "3")
    assert main() == 0
    assert "Invalid choice! Please enter 1, 2, or 3." in capsys.readouterr().out


@mock.patch("ostoolkit.notepad.subprocess.run")
def test_main_opens_editor(run, monkeypatch):
    feed(monkeypatch, "2", "todo", "3")
    assert main() == 0
    run.assert_called_once_with(editor_command("todo"), check=False)