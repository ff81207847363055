"""Adapter for HDFC Bank savings account statement CSV exports.

Header (exact, after trimming; the truncated ``Value Dat`` is what the bank
actually exports)::

    Date, Narration, Value Dat, Debit Amount, Credit Amount, Chq/Ref Number, Closing Balance

Dates use a two-digit year (``DD/MM/YY``).
"""

from __future__ import annotations

from collections.abc import Sequence

from ...models import ConvertedTransaction
from .base import RowAction, RowResult, TableParser, cell, parse_date, resolve_debit_credit

HEADER: tuple[str, ...] = (
    "Date",
    "Narration",
    "Value Dat",
    "Debit Amount",
    "Credit Amount",
    "Chq/Ref Number",
    "Closing Balance",
)
DATE_FORMAT = "%d/%m/%y"


def hdfc_savings_row(row: Sequence[str]) -> RowResult:
    timestamp = parse_date(cell(row, 0), DATE_FORMAT)
    if timestamp is None:
        return RowAction.END

    amount = resolve_debit_credit(debit_raw=cell(row, 3), credit_raw=cell(row, 4))
    if amount is None:
        return RowAction.END
    if amount == 0:
        return RowAction.SKIP

    return ConvertedTransaction(
        amount=amount,
        timestamp=timestamp,
        bank_serial=cell(row, 5),
        bank_payment_mode="",
        bank_remarks=cell(row, 1),
    )


PARSER = TableParser(
    name="hdfc-savings",
    header=HEADER,
    header_offset=1,
    row_func=hdfc_savings_row,
)


__all__ = ["HEADER", "PARSER", "hdfc_savings_row"]
