import io

import pytest

from folderscan.cli import main, scan_folder


@pytest.fixture
def folder(tmp_path):
    root = tmp_path / "scan"
    root.mkdir()
    (root / "one.txt").write_text("alpha\n", encoding="utf-8")
    (root / "two.txt").write_text("beta\n", encoding="utf-8")
    return root


def test_scan_folder_reports_count_and_names(folder):
    out = io.StringIO()
    shown = scan_folder(str(folder), False, out)
    assert sorted(shown) == ["one.txt", "two.txt"]
    lines = out.getvalue().splitlines()
    assert lines[0] == "Files in the directory:"
    assert lines[1] == "Number of items in the folder: 2"
    assert sorted(lines[2:]) == ["one.txt", "two.txt"]


def test_scan_folder_empty(tmp_path):
    out = io.StringIO()
    assert scan_folder(str(tmp_path), False, out) == []
    assert "Number of items in the folder: 0\n" in out.getvalue()


def test_scan_folder_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_folder(str(tmp_path / "missing"), False, io.StringIO())


def test_scan_folder_shows_contents_relative_to_cwd(folder, monkeypatch):
    monkeypatch.chdir(folder)
    out = io.StringIO()
    scan_folder(str(folder), True, out)
    text = out.getvalue()
    assert "File content of ./one.txt:\nalpha\n" in text
    assert "File content of ./two.txt:\nbeta\n" in text


def test_scan_folder_unreadable_item_reported(folder, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    shown = scan_folder(str(folder), True, out)
    assert sorted(shown) == ["one.txt", "two.txt"]
    assert "File content of" not in out.getvalue()
    assert capsys.readouterr().err.count("Error opening file") == 2


def test_main_with_argument(folder, capsys):
    assert main([str(folder)]) == 0
    captured = capsys.readouterr().out
    assert "Number of items in the folder: 2" in captured
    assert "one.txt" in captured and "two.txt" in captured


def test_main_missing_folder_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Unable to open directory" in capsys.readouterr().err


def test_main_prompts_for_folder(folder, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"\n  {folder}  extra\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Enter the folder to scan: ")
    assert "Number of items in the folder: 2" in captured


def test_main_prompt_without_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Unable to open directory" in capsys.readouterr().err


def test_main_print_contents_flag(folder, monkeypatch, capsys):
    monkeypatch.chdir(folder)
    assert main(["--print-contents", str(folder)]) == 0
    captured = capsys.readouterr().out
    assert "File content of ./one.txt:\nalpha\n" in captured