# folderscan

A small utility that lists the entries of a folder and, if asked, prints the contents of
each entry. It also provides a directory-stream library with positions you can seek to,
and version-aware sorting of file names.

## Command line

```
folderscan [FOLDER] [-p | --print-contents]
```

When `FOLDER` is left out, the command asks for it on standard input with
`Enter the folder to scan: `. The first word typed is used, cut to 1023 characters.

The command then writes:

1. `Files in the directory:`
2. `Number of items in the folder: N`, where `.` and `..` are not counted
3. the name of each entry, one per line, again leaving out `.` and `..`

With `-p` / `--print-contents`, each name is followed by
`File content of ./<name>:` and the content of that file. The path `./<name>` is taken
relative to the current working directory, not to the scanned folder, so contents are
only found when you scan the folder you are in. Entries that cannot be opened (for
example subfolders) are reported on standard error and skipped.

If the folder cannot be opened, or none is given, a message beginning
`Unable to open directory:` goes to standard error and the exit status is 1; otherwise
it is 0.

## Library

### Directory streams

`folderscan.dirstream` reads a directory one entry at a time:

```python
from folderscan.dirstream import opendir

with opendir("some/folder") as stream:
    for entry in stream:
        print(entry.name, entry.type)
```

- `DirStream(dirname)` / `opendir(dirname)` open the directory. An empty name raises
  `FileNotFoundError`; a missing or unreadable directory raises `OSError`. The path is
  made absolute, so `rewind()` and `seek()` keep working after the working directory
  changes.
- A stream lists `.` and `..` first, then the directory's own entries.
- `read()` returns the next `DirEntry`, or `None` at the end. Iterating a stream calls
  `read()` until the end.
- `DirEntry` has `name`, `type` (an `EntryType`: `UNKNOWN`, `REG`, `DIR`, `CHR`, `LNK`,
  `FIFO`, `SOCK`, `BLK`), `offset` (the position of the entry that follows it), `ino`
  (always 0) and `namlen`.
- `tell()` returns the position of the next entry: the 31-bit djb2 hash of its name
  (`name_hash(name)`), or `END_OFFSET` (`0x7FFFFFFF`) at the end.
- `seek(loc)` rereads the directory and moves to the first entry whose name hash equals
  `loc`. A negative or unmatched position leaves the stream at its end.
- `rewind()` rereads the directory and starts again from the first entry.
- `close()` closes the stream; reading, telling, seeking or closing again afterwards
  raises `OSError` (`EBADF`). Leaving a `with` block closes the stream.

### Collecting and sorting

`folderscan.sorting` reads a whole directory into a list:

```python
from folderscan.sorting import scandir, versionsort

entries = scandir("releases", None, versionsort)
```

- `scandir(dirname, predicate=None, compare=None)` keeps the entries the predicate
  accepts (all of them, including `.` and `..`, when it is `None`) and sorts them with
  the comparison function when one is given.
- `alphasort(a, b)` compares entry names with the current locale's collation.
- `versionsort(a, b)` compares entry names with `strverscmp`.
- `strverscmp(a, b)` compares two strings (or bytes) so that digit runs compare by
  value: `strverscmp("file9", "file10")` is negative. Runs with leading zeros count as
  fractions, so `"000" < "00" < "01" < "0" < "1"`.

### File helpers

`folderscan.file_utils`:

- `list_files_in_folder(folder_name, out=None)` writes `Files in the directory:` to
  `out` (standard output by default) and returns the entry names, without `.` and `..`.
- `print_file(filename, out=None)` writes `File content of <filename>:` followed by the
  file's content. Bytes that are not valid UTF-8 are replaced. Raises `OSError` if the
  file cannot be opened.

`folderscan.cli.scan_folder(folder_name, show_contents=False, out=None)` performs the
whole scan the command does and returns the names it printed.

## Tests

```
pip install -e ".[test]"
pytest
```