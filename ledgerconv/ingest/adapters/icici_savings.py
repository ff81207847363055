"""Adapter for ICICI Bank savings account statement CSV exports.

Header (exact, after trimming)::

    DATE, MODE, PARTICULARS, DEPOSITS, WITHDRAWALS, BALANCE

Rows carry a ``DD-MM-YYYY`` date, the payment mode, the narration, and
separate deposit (credit) and withdrawal (debit) columns. Exports usually put
an empty separator line under the header; it is skipped like any other row
with an empty first cell.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...models import ConvertedTransaction
from .base import RowAction, RowResult, TableParser, cell, parse_date, resolve_debit_credit

HEADER: tuple[str, ...] = ("DATE", "MODE", "PARTICULARS", "DEPOSITS", "WITHDRAWALS", "BALANCE")
DATE_FORMAT = "%d-%m-%Y"


def icici_savings_row(row: Sequence[str]) -> RowResult:
    timestamp = parse_date(cell(row, 0), DATE_FORMAT)
    if timestamp is None:
        return RowAction.END

    amount = resolve_debit_credit(debit_raw=cell(row, 4), credit_raw=cell(row, 3))
    if amount is None:
        return RowAction.END
    if amount == 0:
        return RowAction.SKIP

    return ConvertedTransaction(
        amount=amount,
        timestamp=timestamp,
        bank_serial="",
        bank_payment_mode=cell(row, 1),
        bank_remarks=cell(row, 2),
    )


PARSER = TableParser(
    name="icici-savings",
    header=HEADER,
    header_offset=1,
    row_func=icici_savings_row,
)


__all__ = ["HEADER", "PARSER", "icici_savings_row"]
