"""Printing file contents and listing the names in a folder."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from folderscan.dirstream import DirStream

_CHUNK = 8192
_SKIPPED = (".", "..")


def print_file(filename: "str | os.PathLike[str]", out: Optional[TextIO] = None) -> None:
    """Write a header naming the file, then the file's whole content.

    Raises OSError when the file cannot be opened; nothing is written then.
    """
    out = sys.stdout if out is None else out
    with open(filename, "r", encoding="utf-8", errors="replace", newline="") as handle:
        out.write(f"File content of {os.fspath(filename)}:\n")
        for chunk in iter(lambda: handle.read(_CHUNK), ""):
            out.write(chunk)


def list_files_in_folder(
    folder_name: "str | os.PathLike[str]", out: Optional[TextIO] = None
) -> list[str]:
    """Return the names in a folder, leaving out "." and "..".

    A heading line is written once the folder is open.  Raises OSError
    when the folder cannot be opened.
    """
    out = sys.stdout if out is None else out
    with DirStream(os.fspath(folder_name)) as stream:
        out.write("Files in the directory:\n")
        return [entry.name for entry in stream if entry.name not in _SKIPPED]