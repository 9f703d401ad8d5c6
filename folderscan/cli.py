"""Command that lists the items in a folder and optionally prints their contents."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, TextIO

from folderscan.dirstream import DirStream
from folderscan.file_utils import list_files_in_folder, print_file

_MAX_NAME = 1023
_SKIPPED = (".", "..")


def scan_folder(
    folder_name: str, show_contents: bool = False, out: Optional[TextIO] = None
) -> list[str]:
    """Report the number of items in a folder and print each item's name.

    With show_contents, each item is printed as "./<name>", relative to the
    current working directory; items that cannot be opened are reported on
    standard error and skipped.  Returns the names printed.  Raises OSError
    when the folder cannot be opened.
    """
    out = sys.stdout if out is None else out
    with DirStream(folder_name) as stream:
        names = list_files_in_folder(folder_name, out)
        out.write(f"Number of items in the folder: {len(names)}\n")
        shown = []
        for entry in stream:
            if entry.name in _SKIPPED:
                continue
            out.write(f"{entry.name}\n")
            shown.append(entry.name)
            if show_contents:
                try:
                    print_file(f"./{entry.name}", out)
                except OSError as exc:
                    sys.stderr.write(f"Error opening file: {exc.strerror or exc}\n")
    return shown


def _prompt_folder() -> Optional[str]:
    sys.stdout.write("Enter the folder to scan: ")
    sys.stdout.flush()
    for line in sys.stdin:
        tokens = line.split()
        if tokens:
            return tokens[0][:_MAX_NAME]
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the folder scan; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="folderscan", description="List the items in a folder."
    )
    parser.add_argument("folder", nargs="?", help="folder to scan; asked for when omitted")
    parser.add_argument(
        "-p",
        "--print-contents",
        action="store_true",
        help="print the content of each item after its name",
    )
    args = parser.parse_args(argv)

    folder = args.folder if args.folder else _prompt_folder()
    if not folder:
        sys.stderr.write("Unable to open directory: no folder given\n")
        return 1

    try:
        scan_folder(folder, args.print_contents, sys.stdout)
    except OSError as exc:
        sys.stderr.write(f"Unable to open directory: {exc.strerror or exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())