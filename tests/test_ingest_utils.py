import pytest

from ledgerconv.errors import StatementError
from ledgerconv.ingest.utils import list_csv_files, list_visible_dirs, read_csv_grid


def test_read_csv_grid_strips_bom_and_drops_blank_lines(tmp_path):
    p = tmp_path / "s.csv"
    p.write_bytes("\ufeffA,B\n\n1,2,3\n,,\n".encode("utf-8"))

    assert read_csv_grid(p) == [["A", "B"], ["1", "2", "3"], ["", "", ""]]


def test_read_csv_grid_keeps_quoted_commas(tmp_path):
    p = tmp_path / "s.csv"
    p.write_text('x,"1,500.00"\n', encoding="utf-8")

    assert read_csv_grid(p) == [["x", "1,500.00"]]


def test_read_csv_grid_missing_file_names_path(tmp_path):
    missing = tmp_path / "nope.csv"
    with pytest.raises(StatementError) as ei:
        read_csv_grid(missing)
    assert ei.value.path == missing
    assert "nope.csv" in str(ei.value)
    assert isinstance(ei.value.__cause__, OSError)


def test_read_csv_grid_undecodable_file(tmp_path):
    p = tmp_path / "latin.csv"
    p.write_bytes(b"caf\xe9,1\n")
    with pytest.raises(StatementError) as ei:
        read_csv_grid(p)
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


def test_list_visible_dirs_skips_hidden_and_files(tmp_path):
    for name in ("b-account", "A account", ".git"):
        (tmp_path / name).mkdir()
    (tmp_path / "notes.txt").write_text("x")

    assert list_visible_dirs(tmp_path) == ["A account", "b-account"]


def test_list_visible_dirs_missing_directory(tmp_path):
    with pytest.raises(StatementError):
        list_visible_dirs(tmp_path / "absent")


def test_list_csv_files_filters_by_extension(tmp_path):
    for name in ("b.csv", "A.CSV", ".hidden.csv", "readme.md", "data.csv.bak"):
        (tmp_path / name).write_text("")
    (tmp_path / "dir.csv").mkdir()

    assert list_csv_files(tmp_path) == ["A.CSV", "b.csv"]
