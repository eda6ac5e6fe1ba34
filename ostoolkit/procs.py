"""Inspect and terminate the tools launched from the main menu."""

from __future__ import annotations

import os
import signal
from dataclasses import dataclass
from pathlib import Path

_CMDLINE_LIMIT = 1024
_LAUNCH_PREFIX = "./"
_TOTAL_CORES = 9
_RAM_PER_PROCESS = 0.5
_STORAGE_PER_PROCESS = 0.10
_QUEUE_SIZE = 3
_QUEUE_COUNT = 3


@dataclass(frozen=True)
class ProcessEntry:
    """A running process and the first word of its command line."""

    pid: int
    cmdline: str


@dataclass(frozen=True)
class Resources:
    """Resources left over after the launched tools take their share."""

    ram: float
    cores: int
    storage: float

    @property
    def exhausted(self) -> bool:
        """True when no free memory is left."""
        return self.ram <= 0


def _read_cmdline(path: Path) -> str | None:
    try:
        with path.open("rb") as fh:
            data = fh.read(_CMDLINE_LIMIT)
    except OSError:
        return None
    if not data:
        return None
    return data.split(b"\0", 1)[0].decode(errors="replace")


def launched_processes(proc_root: str | os.PathLike[str] = "/proc") -> list[ProcessEntry]:
    """Processes whose command line starts with ``./``, ordered by pid."""
    root = Path(proc_root)
    try:
        children = list(root.iterdir())
    except OSError as exc:
        raise OSError(f"Failed to open directory {os.fspath(proc_root)}.") from exc
    found = []
    for child in children:
        name = child.name
        if not (name.isascii() and name.isdigit()) or not child.is_dir():
            continue
        cmdline = _read_cmdline(child / "cmdline")
        if cmdline is not None and cmdline.startswith(_LAUNCH_PREFIX):
            found.append(ProcessEntry(int(name), cmdline))
    return sorted(found, key=lambda entry: entry.pid)


def available_resources(ram: float, storage: float, running: int) -> Resources:
    """Free RAM, cores and storage with ``running`` tools open."""
    return Resources(
        ram=ram - _RAM_PER_PROCESS * running,
        cores=_TOTAL_CORES - running,
        storage=storage - _STORAGE_PER_PROCESS * running,
    )


def terminate(pid: int) -> None:
    """Send SIGKILL to ``pid``; raises OSError if the signal cannot be sent."""
    os.kill(pid, signal.SIGKILL)


def priority_queues(pids) -> tuple[list[int], list[int], list[int]]:
    """Split the first nine pids into high, medium and low queues of three."""
    chosen = list(pids)[: _QUEUE_SIZE * _QUEUE_COUNT]
    high, medium, low = (
        chosen[start:start + _QUEUE_SIZE]
        for start in range(0, _QUEUE_SIZE * _QUEUE_COUNT, _QUEUE_SIZE)
    )
    return high, medium, low