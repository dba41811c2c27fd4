"""Local file and directory helpers: stat, listing, recursive mkdir and delete."""

from __future__ import annotations

import os
import re
import stat
from dataclasses import dataclass, field
from typing import Any, Callable

DEFAULT_MKDIR_ACCESS = 0o750

_FOREIGN_SEP = "\\" if os.sep == "/" else "/"
_SEPARATORS = re.compile(r"[/\\]")


class TargetIsFileError(FileExistsError):
    """Raised when a directory is wanted where a regular file already exists."""


@dataclass
class LocalFileInfo:
    """A local file or directory.

    ``filecount`` is the number of entries found beneath a directory while
    listing it, counted recursively.
    """

    path: str
    filename: str
    isdir: bool
    mtime: int = 0
    size: int = 0
    parent: LocalFileInfo | None = field(default=None, repr=False, compare=False)
    filecount: int = 0
    userdata: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        ancestor = self.parent
        while ancestor is not None:
            ancestor.filecount += 1
            ancestor = ancestor.parent


def _normalize(path: str) -> tuple[str, str]:
    """Return the path with uniform separators and no trailing one, and its last part."""
    normalized = path.replace(_FOREIGN_SEP, os.sep)
    if normalized.endswith(os.sep):
        normalized = normalized[:-1]
    return normalized, normalized.rpartition(os.sep)[2]


def get_local_file_info(path: str) -> LocalFileInfo | None:
    """Describe a file or directory; None if it does not exist or is neither."""
    try:
        st = os.stat(path)
    except OSError:
        return None
    normalized, name = _normalize(path)
    if stat.S_ISDIR(st.st_mode):
        return LocalFileInfo(normalized, name, True, int(st.st_mtime), 0)
    if stat.S_ISREG(st.st_mode):
        return LocalFileInfo(normalized, name, False, int(st.st_mtime), st.st_size)
    return None


_Callback = Callable[[LocalFileInfo, "LocalFileInfo | None"], None]


def _walk(
    root: str,
    relative: str,
    recursive: bool,
    parent: LocalFileInfo | None,
    on: _Callback | None,
    found: list[LocalFileInfo],
) -> None:
    current = os.path.join(root, relative) if relative else root
    with os.scandir(current) as entries:
        for entry in entries:
            st = os.stat(entry.path)
            path = f"{relative}{os.sep}{entry.name}" if relative else entry.name
            if stat.S_ISDIR(st.st_mode):
                info = LocalFileInfo(path, entry.name, True, int(st.st_mtime), 0, parent)
            elif stat.S_ISREG(st.st_mode):
                info = LocalFileInfo(
                    path, entry.name, False, int(st.st_mtime), st.st_size, parent
                )
            else:
                raise OSError(f"unsupported file type: {entry.path}")
            found.append(info)
            if on is not None:
                on(info, parent)
            if info.isdir and recursive:
                _walk(root, path, recursive, info, on, found)


def get_directory_files(
    directory: str,
    recursive: bool = False,
    on: _Callback | None = None,
) -> list[LocalFileInfo]:
    """List the entries of ``directory``, each directory before its contents.

    Paths are relative to ``directory``. ``on(info, parent)`` is called for each
    entry as it is found. Raises OSError if the directory cannot be read or holds
    something that is neither a file nor a directory.
    """
    found: list[LocalFileInfo] = []
    _walk(directory, "", recursive, None, on, found)
    return found


def set_file_last_modify_time(path: str, mtime: float) -> None:
    """Set both access and modification time of ``path`` to ``mtime``."""
    os.utime(path, (mtime, mtime))


def _is_root(path: str) -> bool:
    if os.name == "nt":
        return re.fullmatch(r"[A-Za-z]:[/\\]?", path) is not None
    return path == "/"


def create_directory_recursive(path: str) -> None:
    """Create ``path`` and any missing parents.

    Raises TargetIsFileError if the path or one of its parents is a file,
    OSError if a directory cannot be created.
    """
    if not path or _is_root(path):
        return
    info = get_local_file_info(path)
    if info is not None:
        if not info.isdir:
            raise TargetIsFileError(f"target is a file: {path}")
        return
    for match in _SEPARATORS.finditer(path):
        if match.start() == 0:
            continue
        prefix = path[: match.start()]
        if prefix in (".", ".."):
            continue
        existing = get_local_file_info(prefix)
        if existing is None:
            os.mkdir(prefix, DEFAULT_MKDIR_ACCESS)
        elif not existing.isdir:
            raise TargetIsFileError(f"target is a file: {prefix}")
    if path[-1] not in "/\\":
        os.mkdir(path, DEFAULT_MKDIR_ACCESS)


def delete_file_recursive(path: str) -> None:
    """Delete a file, or a directory with everything in it; missing paths are ignored."""
    info = get_local_file_info(path)
    if info is None:
        return
    if info.isdir:
        for child in get_directory_files(path):
            delete_file_recursive(os.path.join(path, child.path))
        os.rmdir(path)
    else:
        os.remove(path)