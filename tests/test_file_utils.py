import io

import pytest

from folderscan.file_utils import list_files_in_folder, print_file


def test_print_file_writes_header_and_content(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("first line\nsecond line\n", encoding="utf-8")
    out = io.StringIO()
    print_file(str(target), out)
    assert out.getvalue() == f"File content of {target}:\nfirst line\nsecond line\n"


def test_print_file_empty_file_writes_only_header(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")
    out = io.StringIO()
    print_file(str(target), out)
    assert out.getvalue() == f"File content of {target}:\n"


def test_print_file_large_content_round_trips(tmp_path):
    content = "".join(f"row {n}\n" for n in range(5000))
    target = tmp_path / "big.txt"
    target.write_text(content, encoding="utf-8")
    out = io.StringIO()
    print_file(str(target), out)
    header, _, body = out.getvalue().partition("\n")
    assert header == f"File content of {target}:"
    assert body == content


def test_print_file_missing_raises_and_writes_nothing(tmp_path):
    out = io.StringIO()
    with pytest.raises(FileNotFoundError):
        print_file(str(tmp_path / "absent.txt"), out)
    assert out.getvalue() == ""


def test_list_files_returns_all_names(tmp_path):
    for name in ("a.txt", "b.txt", "c.log"):
        (tmp_path / name).write_text("x", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    out = io.StringIO()
    names = list_files_in_folder(str(tmp_path), out)
    assert sorted(names) == ["a.txt", "b.txt", "c.log", "sub"]
    assert "." not in names and ".." not in names
    assert out.getvalue() == "Files in the directory:\n"


def test_list_files_empty_folder(tmp_path):
    out = io.StringIO()
    assert list_files_in_folder(str(tmp_path), out) == []
    assert out.getvalue() == "Files in the directory:\n"


def test_list_files_missing_folder_raises(tmp_path):
    out = io.StringIO()
    with pytest.raises(FileNotFoundError):
        list_files_in_folder(str(tmp_path / "nowhere"), out)
    assert out.getvalue() == ""


def test_list_files_empty_name_raises():
    with pytest.raises(FileNotFoundError):
        list_files_in_folder("", io.StringIO())