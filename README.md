# ostoolkit

A collection of small interactive terminal programs: a calculator, a year
calendar, file utilities, a plain-text notepad, media launchers, three games,
and a main menu that opens programs in terminal windows and keeps an eye on
the processes it has started.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Individual tools

Every tool is a command of its own:

| Command                 | What it does                                              |
|-------------------------|-----------------------------------------------------------|
| `ostoolkit-calculator`  | add, subtract, multiply, divide, power and modulus        |
| `ostoolkit-calendar`    | asks for a year and prints its twelve months              |
| `ostoolkit-copy`        | copies the content of one file to another                 |
| `ostoolkit-cut`         | copies a file to a new path, then removes the original    |
| `ostoolkit-delete`      | deletes files by name, one after another                  |
| `ostoolkit-move`        | moves a file from one folder to another                   |
| `ostoolkit-info`        | shows size, owner, group, mode and times of a file        |
| `ostoolkit-notepad`     | creates `<name>.txt` files and opens them in an editor    |
| `ostoolkit-song`        | plays `<name>.mp3` with `vlc`                             |
| `ostoolkit-video`       | plays `<name>.mp4` with `vlc`                             |
| `ostoolkit-clock`       | opens `gnome-clocks`                                      |
| `ostoolkit-hangman`     | two-player hangman with six wrong guesses allowed         |
| `ostoolkit-rps`         | rock, paper, scissors against the computer                |
| `ostoolkit-numberguess` | guess a number between 1 and 100                          |

Notes on some of them:

- The calculator reports division or modulus by zero as an error and keeps
  running; `q` or `Q` quits.
- `ostoolkit-move` creates the target folder if it is missing and asks before
  overwriting a file that is already there.
- `ostoolkit-info` keeps asking for file names until `exit` is typed or the
  user declines to check another file.
- `ostoolkit-notepad` creates new files in the current directory; option 2
  opens `~/Desktop/<name>.txt` in `gnome-text-editor`.

## The main menu

    ostoolkit [--proc-root DIR]

It asks for the amount of RAM and storage to budget, then repeatedly shows
the free resources and a numbered menu. Each of the tool entries runs
`gnome-terminal --disable-factory -- ./<program>` (for example `./calculator`,
`./Hangman`, `./numberGuess`) from the current directory without waiting for
it. The other entries:

- **06** runs `python3 System-Monitor-main/process_monitor_ui.py`.
- **14** lists the running processes whose command line starts with `./`
  and sends SIGKILL to the one whose pid is typed in.
- **15** shows free RAM (0.5 per launched process), free cores (9 minus the
  number launched) and free storage (0.10 per launched process). When no RAM
  is left, the first launched process is killed.
- **16** splits the launched processes into high, medium and low queues of
  three, raises each one's window with `xdotool`, waits, and then kills it.
- **-1** exits.

`--proc-root` points the process views at another directory instead of
`/proc`.

    ostoolkit-intro

shows a splash screen, then a login prompt with a fixed user name and
password and a random number to copy back; once the login is accepted it
opens the main menu.

## What the package does not do

- The main menu opens programs named `./calculator`, `./copyFile`,
  `./Hangman` and so on from the current directory. The package does not
  install executables under those names; its own tools are the `ostoolkit-*`
  commands above.
- The system monitor script that menu entry 06 runs is not part of the
  package.
- The external programs (`vlc`, `gnome-clocks`, `gnome-text-editor`,
  `gnome-terminal`, `xdotool`) must be installed separately. The process
  views read `/proc` and so work on Linux only.

## Using the pieces from Python

The logic behind the tools can be imported:

```python
from ostoolkit.calculator import calculate, format_result
from ostoolkit.yearcal import render_year, days_in_month
from ostoolkit.rps import Choice, decide
from ostoolkit.hangman import HangmanGame
from ostoolkit.fileops import copy_file, file_info, format_file_info

print(format_result(calculate("5", 2, 10)))   # 1024
print(days_in_month(1, 2024))                  # 29
print(decide(Choice.ROCK, Choice.SCISSORS))    # Outcome.WIN

game = HangmanGame("apple")
game.guess("p")
print(game.revealed)                           # _pp__

print(render_year(2024))
```

`ostoolkit.fileops` offers `copy_file`, `cut_file`, `delete_file`,
`move_file`, `file_info` and `format_file_info`; they raise
`ostoolkit.fileops.FileOperationError` when they cannot be carried out.
`ostoolkit.procs` offers `launched_processes`, `available_resources`,
`terminate` and `priority_queues`.