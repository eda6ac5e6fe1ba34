"""Play audio and video files and open the desktop clock."""

from __future__ import annotations

import subprocess

_PLAYER = "vlc"
_CLOCK = "gnome-clocks"
_NOT_FOUND = 127


def player_command(name: str, extension: str) -> list[str]:
    """Command line that plays ``<name>.<extension>`` in the media player."""
    return [_PLAYER, f"{name}.{extension.lstrip('.')}"]


def _run(command: list[str]) -> int:
    try:
        return subprocess.run(command, check=False).returncode
    except FileNotFoundError:
        return _NOT_FOUND


def play_song(name: str) -> int:
    """Play ``<name>.mp3``; returns the player's exit status."""
    return _run(player_command(name, "mp3"))


def play_video(name: str) -> int:
    """Play ``<name>.mp4``; returns the player's exit status."""
    return _run(player_command(name, "mp4"))


def open_clock() -> int:
    """Start the desktop clock application; returns its exit status."""
    return _run([_CLOCK])


def _token(prompt: str) -> str | None:
    try:
        words = input(prompt).split()
        while not words:
            words = input().split()
    except EOFError:
        return None
    return words[0]


def song_main(argv: list[str] | None = None) -> int:
    """Ask for an audio file name and play it."""
    name = _token("Enter the name of the audio file: ")
    if name is not None:
        play_song(name)
    return 0


def video_main(argv: list[str] | None = None) -> int:
    """Ask for a video file name and play it."""
    name = _token("Enter the name of the video file to play: ")
    if name is not None:
        play_video(name)
    return 0


def clock_main(argv: list[str] | None = None) -> int:
    """Open the clock application."""
    open_clock()
    return 0