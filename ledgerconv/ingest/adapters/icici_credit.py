"""Adapter for ICICI Bank credit card statement CSV exports.

Header (exact, after trimming)::

    Date, Sr.No., Transaction Details, Reward Point Header, Intl.Amount,
    Amount(in Rs), BillingAmountSign

A sub-header line sits between the header and the first transaction, hence
the header offset of 2. The rupee amount is unsigned; ``BillingAmountSign``
carries ``CR`` on some rows. Which polarity ``CR`` denotes has differed
between export revisions, so it is a parameter of the parser
(``cr_is_debit``) rather than a constant.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial

from ...models import ConvertedTransaction
from .base import RowAction, RowResult, TableParser, cell, parse_amount, parse_date

HEADER: tuple[str, ...] = (
    "Date",
    "Sr.No.",
    "Transaction Details",
    "Reward Point Header",
    "Intl.Amount",
    "Amount(in Rs)",
    "BillingAmountSign",
)
DATE_FORMAT = "%d/%m/%Y"
CR_SIGN = "CR"


def icici_credit_row(row: Sequence[str], *, cr_is_debit: bool = True) -> RowResult:
    timestamp = parse_date(cell(row, 0), DATE_FORMAT)
    if timestamp is None:
        return RowAction.END

    amount = parse_amount(cell(row, 5))
    if amount is None:
        return RowAction.END
    if amount == 0:
        return RowAction.SKIP

    is_cr = cell(row, 6) == CR_SIGN
    # cr_is_debit: "CR" rows are spends. Otherwise "CR" rows are payments/refunds
    # and every other row is a spend.
    if is_cr == cr_is_debit:
        amount = -amount

    return ConvertedTransaction(
        amount=amount,
        timestamp=timestamp,
        bank_serial=cell(row, 1),
        bank_payment_mode="",
        bank_remarks=cell(row, 2),
    )


def make_parser(*, cr_is_debit: bool = True) -> TableParser:
    """Build the ICICI credit card parser for the given ``CR`` polarity."""

    return TableParser(
        name="icici-credit",
        header=HEADER,
        header_offset=2,
        row_func=partial(icici_credit_row, cr_is_debit=cr_is_debit),
    )


__all__ = ["HEADER", "CR_SIGN", "icici_credit_row", "make_parser"]
