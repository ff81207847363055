"""Filesystem and CSV helpers shared by the conversion pipeline.

Bank exports are not well-formed CSV documents: rows have varying field
counts, metadata blocks precede the transaction table and files may start
with a UTF-8 BOM. ``read_csv_grid`` therefore returns the raw grid and leaves
all interpretation to the statement adapters.
"""

from __future__ import annotations

import csv
from os import PathLike
from pathlib import Path

from ..errors import StatementError
from ..models import RawStatement


def read_csv_grid(csv_path: str | PathLike[str]) -> RawStatement:
    """Read an entire CSV file into a list of rows.

    Physically blank lines are dropped (they carry no cells at all); rows made
    of empty cells are kept, since adapters treat those as table separators.
    Field-count mismatches between rows are tolerated.

    Raises :class:`StatementError` naming ``csv_path`` when the file cannot be
    opened, decoded or tokenized.
    """

    p = Path(csv_path)
    try:
        with p.open(encoding="utf-8-sig", newline="") as f:
            return [row for row in csv.reader(f) if row]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise StatementError(f"failed to read csv file: {p}: {e}", path=p) from e


def list_visible_dirs(directory: str | PathLike[str]) -> list[str]:
    """Return the sorted names of non-hidden subdirectories of ``directory``."""

    d = Path(directory)
    try:
        entries = list(d.iterdir())
    except OSError as e:
        raise StatementError(f"failed to list directory: {d}: {e}", path=d) from e
    return sorted(e.name for e in entries if e.is_dir() and not e.name.startswith("."))


def list_csv_files(directory: str | PathLike[str]) -> list[str]:
    """Return the sorted names of non-hidden ``.csv`` files in ``directory``.

    The extension check is case-insensitive (``STATEMENT.CSV`` is accepted).
    """

    d = Path(directory)
    try:
        entries = list(d.iterdir())
    except OSError as e:
        raise StatementError(f"failed to list directory: {d}: {e}", path=d) from e
    return sorted(
        e.name
        for e in entries
        if e.is_file() and not e.name.startswith(".") and e.suffix.lower() == ".csv"
    )


__all__ = ["read_csv_grid", "list_visible_dirs", "list_csv_files"]
