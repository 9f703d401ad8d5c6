"""Reading whole directories into sorted lists, with alphabetical and version ordering."""

from __future__ import annotations

import functools
import locale
import os
from typing import Callable, Optional, Union

from folderscan.dirstream import DirEntry, DirStream

Predicate = Callable[[DirEntry], bool]
Comparator = Callable[[DirEntry, DirEntry], int]

_ZERO = ord("0")
_NINE = ord("9")


def scandir(
    dirname: str,
    predicate: Optional[Predicate] = None,
    compare: Optional[Comparator] = None,
) -> list[DirEntry]:
    """Read every entry of a directory, keep those the predicate accepts, and sort them.

    Entries are kept in stream order unless a comparison function is given.
    Raises OSError when the directory cannot be opened.
    """
    with DirStream(dirname) as stream:
        entries = [
            entry for entry in stream if predicate is None or predicate(entry)
        ]
    if compare is not None and len(entries) > 1:
        entries.sort(key=functools.cmp_to_key(compare))
    return entries


def alphasort(a: DirEntry, b: DirEntry) -> int:
    """Compare two entries by name using the current collation locale."""
    return locale.strcoll(a.name, b.name)


def versionsort(a: DirEntry, b: DirEntry) -> int:
    """Compare two entries by name so that embedded numbers sort by value."""
    return strverscmp(a.name, b.name)


def _as_bytes(text: Union[str, bytes]) -> bytes:
    return text if isinstance(text, bytes) else os.fsencode(text)


def _at(data: bytes, index: int) -> int:
    return data[index] if index < len(data) else 0


def _isdigit(code: int) -> bool:
    return _ZERO <= code <= _NINE


def strverscmp(a: Union[str, bytes], b: Union[str, bytes]) -> int:
    """Compare two strings, treating runs of digits as version numbers.

    Returns a negative number, zero or a positive number when a sorts
    before, equal to or after b.  Digit runs with leading zeros are
    treated as fractional parts, so "000" < "00" < "01" < "0" < "1".
    """
    x = _as_bytes(a)
    y = _as_bytes(b)
    if x == y:
        return 0

    i = 0
    while _at(x, i) == _at(y, i):
        i += 1

    j = i
    while j > 0 and _isdigit(x[j - 1]):
        j -= 1

    if _at(x, j) == _ZERO or _at(y, j) == _ZERO:
        while _at(x, j) == _ZERO and _at(x, j) == _at(y, j):
            j += 1
        # The string with more digits is smaller, e.g. 002 < 01.
        if _isdigit(_at(x, j)):
            if not _isdigit(_at(y, j)):
                return -1
        elif _isdigit(_at(y, j)):
            return 1
    elif _isdigit(_at(x, j)) and _isdigit(_at(y, j)):
        k1 = j
        while _isdigit(_at(x, k1)):
            k1 += 1
        k2 = j
        while _isdigit(_at(y, k2)):
            k2 += 1
        # The number with more digits is bigger, e.g. 999 < 1000.
        if k1 < k2:
            return -1
        if k1 > k2:
            return 1

    return _at(x, i) - _at(y, i)