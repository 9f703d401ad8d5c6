"""Directory streams with readdir-style reading, position hashes and seeking."""

from __future__ import annotations

import enum
import errno
import os
import stat
from dataclasses import dataclass
from typing import Iterator, Optional

END_OFFSET = 0x7FFFFFFF
"""Offset reported for the entry after the last one in a stream."""

_HASH_LIMIT = 260
_HASH_SEED = 5381


class EntryType(enum.IntEnum):
    """Kind of file a directory entry refers to."""

    UNKNOWN = 0
    REG = stat.S_IFREG
    DIR = stat.S_IFDIR
    CHR = stat.S_IFCHR
    LNK = stat.S_IFLNK
    FIFO = stat.S_IFIFO
    SOCK = stat.S_IFSOCK
    BLK = stat.S_IFBLK


@dataclass(frozen=True)
class DirEntry:
    """One entry read from a directory stream."""

    name: str
    type: EntryType
    offset: int
    ino: int = 0

    @property
    def namlen(self) -> int:
        return len(self.name)


def name_hash(name: str) -> int:
    """Return the 31-bit djb2 hash of a file name, used as a stream position."""
    value = _HASH_SEED
    for char in name[:_HASH_LIMIT]:
        value = (value * 33 + ord(char)) & 0xFFFFFFFF
    return value & 0x7FFFFFFF


def _entry_type(entry: os.DirEntry) -> EntryType:
    try:
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return EntryType.UNKNOWN
    if stat.S_ISCHR(mode):
        return EntryType.CHR
    if stat.S_ISLNK(mode):
        return EntryType.LNK
    if stat.S_ISDIR(mode):
        return EntryType.DIR
    if stat.S_ISFIFO(mode):
        return EntryType.FIFO
    if stat.S_ISSOCK(mode):
        return EntryType.SOCK
    if stat.S_ISBLK(mode):
        return EntryType.BLK
    return EntryType.REG


class DirStream:
    """An open directory that yields its entries one at a time."""

    def __init__(self, dirname: str) -> None:
        if not dirname:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), dirname)
        # An absolute path keeps rewind and seek working after a change of
        # working directory.
        self._path = os.path.abspath(os.fspath(dirname))
        self._entries: list[tuple[str, EntryType]] = []
        self._pos = 0
        self._invalid = False
        self._closed = False
        self._load()

    def _load(self) -> None:
        with os.scandir(self._path) as it:
            found = [(e.name, _entry_type(e)) for e in it]
        self._entries = [(".", EntryType.DIR), ("..", EntryType.DIR), *found]
        self._pos = 0

    def _check_open(self) -> None:
        if self._closed:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF))

    def _next_offset(self) -> int:
        if self._invalid or self._pos >= len(self._entries):
            return END_OFFSET
        return name_hash(self._entries[self._pos][0])

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self) -> Optional[DirEntry]:
        """Return the next entry, or None at the end of the stream."""
        self._check_open()
        if self._invalid or self._pos >= len(self._entries):
            return None
        name, kind = self._entries[self._pos]
        self._pos += 1
        return DirEntry(name=name, type=kind, offset=self._next_offset())

    def close(self) -> None:
        """Close the stream; closing twice is an error."""
        self._check_open()
        self._closed = True
        self._entries = []

    def rewind(self) -> None:
        """Restart the stream so that the first entry is read again."""
        if self._closed:
            return
        try:
            self._load()
        except OSError:
            self._invalid = True
            return
        self._invalid = False

    def tell(self) -> int:
        """Return the position of the next entry as a name hash."""
        self._check_open()
        return self._next_offset()

    def seek(self, loc: int) -> None:
        """Move to the entry whose name hash equals loc.

        When no such entry exists the stream is left at its end.
        """
        self._check_open()
        if loc < 0:
            self._invalid = True
            return
        try:
            self._load()
        except OSError:
            self._invalid = True
            return
        self._invalid = False
        for index, (name, _) in enumerate(self._entries):
            if name_hash(name) == loc:
                self._pos = index
                return
        self._invalid = True

    def __iter__(self) -> Iterator[DirEntry]:
        while (entry := self.read()) is not None:
            yield entry

    def __enter__(self) -> "DirStream":
        return self

    def __exit__(self, *args) -> None:
        if not self._closed:
            self.close()


def opendir(dirname: str) -> DirStream:
    """Open a directory stream."""
    return DirStream(dirname)