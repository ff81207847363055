"""Shared table scanner for bank statement CSV exports.

Every supported bank export is a CSV grid with a metadata block, a header row
that can be matched exactly, an optional sub-header/separator line, the
transaction rows, and then free-text trailers. ``TableParser`` implements that
scan once; each bank adapter only supplies its header signature, the offset
from header to first data row, and a row function.

Row functions return one of:

- a :class:`~ledgerconv.models.ConvertedTransaction` (row accepted),
- ``RowAction.SKIP`` (row ignored, keep scanning),
- ``RowAction.END`` (the table is over; return what was accumulated).

``END`` is the normal way a statement finishes. It is never an error.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from ...logging_setup import get_logger
from ...models import ConvertedTransaction, RawStatement

_logger = get_logger("ledgerconv.ingest.adapters")


class RowAction(Enum):
    SKIP = "skip"
    END = "end"


type RowResult = ConvertedTransaction | RowAction
type RowFunc = Callable[[Sequence[str]], RowResult]


# ---------------------------------------------------------------------------
# Cell helpers
# ---------------------------------------------------------------------------


def cell(row: Sequence[str], idx: int) -> str:
    """Return ``row[idx]`` or ``""`` when the row is too short."""

    return row[idx] if idx < len(row) else ""


def parse_amount(raw: str) -> float | None:
    """Parse a statement amount cell; ``None`` when it is not a number.

    Thousands separators are stripped. Empty cells, ``nan`` and infinities are
    rejected.
    """

    s = raw.strip().replace(",", "")
    if not s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_date(raw: str, fmt: str) -> date | None:
    """Parse ``raw`` with the bank's fixed ``strptime`` format, or ``None``."""

    try:
        return datetime.strptime(raw.strip(), fmt).date()
    except ValueError:
        return None


def resolve_debit_credit(debit_raw: str, credit_raw: str) -> float | None:
    """Combine separate debit/credit columns into one signed amount.

    Returns ``None`` when neither column holds a number (end of table). The
    debit side wins and is negated; when it is missing or zero the credit side
    is used instead (``0.0`` when that is missing too).
    """

    debit = parse_amount(debit_raw)
    credit = parse_amount(credit_raw)
    if debit is None and credit is None:
        return None
    if debit is None or debit == 0:
        return credit if credit is not None else 0.0
    return -debit


# ---------------------------------------------------------------------------
# Table scanner
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TableParser:
    """Locate a statement's transaction table and convert its rows.

    Attributes
    ----------
    name:
        Short identifier used in log lines.
    header:
        Exact header row (after trimming) that marks the table start.
    header_offset:
        Rows from the header to the first data row (``1`` when data follows
        the header directly, ``2`` when a sub-header sits in between).
    row_func:
        Per-row converter returning a transaction or a :class:`RowAction`.
    """

    name: str
    header: tuple[str, ...]
    header_offset: int
    row_func: RowFunc

    def parse(self, grid: RawStatement) -> list[ConvertedTransaction]:
        """Return the transactions found in ``grid``.

        A grid without the header (or with the header as its last usable row)
        yields an empty list: account folders routinely hold non-transaction
        CSV files.
        """

        rows = [[c.strip() for c in row] for row in grid]

        header = list(self.header)
        header_idx = next((i for i, row in enumerate(rows) if row == header), None)
        if header_idx is None:
            _logger.debug("%s: header row not found", self.name)
            return []

        start = header_idx + self.header_offset
        if start >= len(rows):
            _logger.debug("%s: header found with no data rows after it", self.name)
            return []

        out: list[ConvertedTransaction] = []
        for row in rows[start:]:
            # Statements contain blank lines inside the table.
            if not row or row[0] == "":
                continue
            result = self.row_func(row)
            if result is RowAction.END:
                break
            if result is RowAction.SKIP:
                continue
            out.append(result)

        _logger.debug("%s: parsed %d transactions", self.name, len(out))
        return out


__all__ = [
    "RowAction",
    "RowResult",
    "RowFunc",
    "TableParser",
    "cell",
    "parse_amount",
    "parse_date",
    "resolve_debit_credit",
]
