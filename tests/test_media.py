import subprocess
from unittest import mock

from ostoolkit.media import (
    clock_main,
    open_clock,
    play_song,
    play_video,
    player_command,
    song_main,
    video_main,
)


def feed(monkeypatch, *answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_player_command_adds_extension():
    assert player_command("track", "mp3") == ["vlc", "track.mp3"]


def test_player_command_accepts_dotted_extension():
    assert player_command("clip", ".mp4") == player_command("clip", "mp4")


@mock.patch("ostoolkit.media.subprocess.run")
def test_play_song_runs_player(run):
    run.return_value = subprocess.CompletedProcess(["vlc"], 0)
    assert play_song("tune") == 0
    run.assert_called_once_with(["vlc", "tune.mp3"], check=False)


@mock.patch("ostoolkit.media.subprocess.run")
def test_play_video_reports_status(run):
    run.return_value = subprocess.CompletedProcess(["vlc"], 3)
    assert play_video("movie") == 3
    run.assert_called_once_with(["vlc", "movie.mp4"], check=False)


@mock.patch("ostoolkit.media.subprocess.run", side_effect=FileNotFoundError)
def test_missing_program_gives_127(run):
    assert open_clock() == 127
    run.assert_called_once_with(["gnome-clocks"], check=False)


@mock.patch("ostoolkit.media.subprocess.run")
def test_song_main_reads_name(run, monkeypatch):
    run.return_value = subprocess.CompletedProcess(["vlc"], 0)
    feed(monkeypatch, "  ", "melody extra")
    assert song_main() == 0
    run.assert_called_once_with(["vlc", "melody.mp3"], check=False)


@mock.patch("ostoolkit.media.subprocess.run")
def test_video_main_without_input_runs_nothing(run, monkeypatch):
    feed(monkeypatch)
    assert video_main() == 0
    assert run.call_count == 0


@mock.patch("ostoolkit.media.subprocess.run")
def test_clock_main_starts_clock(run):
    run.return_value = subprocess.CompletedProcess(["gnome-clocks"], 0)
    assert clock_main() == 0
    run.assert_called_once_with(["gnome-clocks"], check=False)