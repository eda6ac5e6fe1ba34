import signal
import subprocess
import sys
from unittest.mock import patch

import pytest

from ostoolkit.procs import (
    ProcessEntry,
    Resources,
    available_resources,
    launched_processes,
    priority_queues,
    terminate,
)


def _proc(root, name, cmdline=None):
    d = root / name
    d.mkdir()
    if cmdline is not None:
        (d / "cmdline").write_bytes(cmdline)
    return d


def test_launched_processes_filters_fake_proc(tmp_path):
    _proc(tmp_path, "100", b"./calculator\0")
    _proc(tmp_path, "200", b"/usr/bin/bash\0-l\0")
    _proc(tmp_path, "abc", b"./hidden\0")
    _proc(tmp_path, "300", b"")
    _proc(tmp_path, "400")
    (tmp_path / "500").write_bytes(b"./file\0")
    _proc(tmp_path, "50", b"./song\0extra\0")
    assert launched_processes(tmp_path) == [
        ProcessEntry(50, "./song"),
        ProcessEntry(100, "./calculator"),
    ]


def test_launched_processes_empty_root(tmp_path):
    assert launched_processes(tmp_path) == []


def test_launched_processes_missing_root(tmp_path):
    with pytest.raises(OSError):
        launched_processes(tmp_path / "missing")


def test_resources_unchanged_with_nothing_running():
    res = available_resources(8.0, 100.0, 0)
    assert res == Resources(ram=8.0, cores=9, storage=100.0)
    assert res.exhausted is False


def test_each_process_takes_fixed_share():
    one = available_resources(8.0, 100.0, 1)
    two = available_resources(8.0, 100.0, 2)
    assert one.ram - two.ram == pytest.approx(0.5)
    assert one.storage - two.storage == pytest.approx(0.10)
    assert one.cores - two.cores == 1


def test_resources_exhausted_when_ram_used_up():
    assert available_resources(1.0, 10.0, 2).exhausted is True
    assert available_resources(1.0, 10.0, 1).exhausted is False


def test_priority_queues_split_in_threes():
    pids = list(range(1, 12))
    high, medium, low = priority_queues(pids)
    assert high == [1, 2, 3]
    assert medium == [4, 5, 6]
    assert low == [7, 8, 9]


def test_priority_queues_with_few_processes():
    assert priority_queues([10, 20, 30, 40]) == ([10, 20, 30], [40], [])
    assert priority_queues(iter([])) == ([], [], [])


def test_terminate_kills_real_process():
    child = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(30)"])
    try:
        terminate(child.pid)
        assert child.wait(timeout=10) == -signal.SIGKILL
    finally:
        if child.poll() is None:
            child.kill()
            child.wait()


def test_terminate_reports_failure():
    with patch("os.kill", side_effect=ProcessLookupError):
        with pytest.raises(ProcessLookupError):
            terminate(99999)