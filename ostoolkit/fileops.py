"""File operations behind the copy, cut, delete, move and info tools."""

from __future__ import annotations

import os
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable


class FileOperationError(Exception):
    """A file operation could not be completed.

    ``aborted`` is true when the user declined to go on, not a failure of the
    file system.
    """

    def __init__(self, message: str, *, aborted: bool = False) -> None:
        super().__init__(message)
        self.aborted = aborted


@dataclass(frozen=True)
class FileInfo:
    """The properties of a file as reported by ``stat``."""

    name: str
    size: int
    uid: int
    gid: int
    mode: int
    atime: float
    mtime: float
    ctime: float


def _transfer(
    source: Path | str,
    target: Path | str,
    *,
    source_label: str,
    target_label: str,
    failure: str,
) -> None:
    try:
        src = open(source, "rb")
    except OSError as exc:
        raise FileOperationError(f"Failed to open source file {source_label}") from exc
    with src:
        try:
            dst = open(target, "wb")
        except OSError as exc:
            raise FileOperationError(f"Failed to open target file {target_label}") from exc
        with dst:
            try:
                shutil.copyfileobj(src, dst)
            except OSError as exc:
                raise FileOperationError(failure) from exc


def copy_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> Path:
    """Copy the contents of ``source`` into ``target``, replacing it."""
    _transfer(
        source,
        target,
        source_label=os.fspath(source),
        target_label=os.fspath(target),
        failure="Failed to copy file content",
    )
    return Path(target)


def cut_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> Path:
    """Copy ``source`` into ``target`` and then delete ``source``."""
    _transfer(
        source,
        target,
        source_label=os.fspath(source),
        target_label=os.fspath(target),
        failure="Failed to cut file content",
    )
    try:
        os.remove(source)
    except OSError as exc:
        raise FileOperationError(
            f"Failed to delete source file {os.fspath(source)}"
        ) from exc
    return Path(target)


def delete_file(path: str | os.PathLike[str]) -> None:
    """Remove the file at ``path``."""
    try:
        os.remove(path)
    except OSError as exc:
        raise FileOperationError(f"Failed to delete file {os.fspath(path)}") from exc


def move_file(
    source_folder: str | os.PathLike[str],
    target_folder: str | os.PathLike[str],
    file_name: str,
    confirm_overwrite: Callable[[], bool] | None = None,
) -> Path:
    """Move ``file_name`` from one folder to another.

    The target folder is created if missing. When the target file already
    exists, ``confirm_overwrite`` is asked; without it the move is aborted.
    """
    source = Path(source_folder) / file_name
    folder = Path(target_folder)
    target = folder / file_name

    if not source.exists():
        raise FileOperationError(f"Source file does not exist: {file_name}")
    if not folder.exists():
        try:
            folder.mkdir()
        except OSError as exc:
            raise FileOperationError(
                f"Failed to create target folder: {os.fspath(target_folder)}"
            ) from exc
    if target.exists() and (confirm_overwrite is None or not confirm_overwrite()):
        raise FileOperationError("File transfer aborted", aborted=True)

    _transfer(
        source,
        target,
        source_label=file_name,
        target_label=file_name,
        failure=f"Failed to transfer file {file_name}",
    )
    try:
        source.unlink()
    except OSError as exc:
        raise FileOperationError(f"Failed to delete source file {file_name}") from exc
    return target


def file_info(path: str | os.PathLike[str]) -> FileInfo:
    """Collect the ``stat`` properties of ``path``."""
    try:
        st = os.stat(path)
    except OSError as exc:
        raise FileOperationError("Failed to get file properties") from exc
    return FileInfo(
        name=os.fspath(path),
        size=st.st_size,
        uid=st.st_uid,
        gid=st.st_gid,
        mode=st.st_mode,
        atime=st.st_atime,
        mtime=st.st_mtime,
        ctime=st.st_ctime,
    )


def format_file_info(info: FileInfo) -> str:
    """Render the properties one per line, times in ``ctime`` form."""
    lines = [
        f"File name: {info.name}",
        f"Size: {info.size} bytes",
        f"Owner ID: {info.uid}",
        f"Group ID: {info.gid}",
        f"Permissions: {info.mode}",
        f"Last access time: {time.ctime(info.atime)}",
        f"Last modification time: {time.ctime(info.mtime)}",
        f"Last status change time: {time.ctime(info.ctime)}",
    ]
    return "\n".join(lines)