# ruff: noqa: E501
"""Small builders shared by the test modules."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from ledgerconv.models import ConvertedTransaction


def make_txn(
    amount: float,
    day: date = date(2023, 2, 1),
    remarks: str = "",
    *,
    account_name: str = "",
    serial: str = "",
    mode: str = "",
) -> ConvertedTransaction:
    return ConvertedTransaction(
        account_name=account_name,
        amount=amount,
        timestamp=day,
        bank_serial=serial,
        bank_payment_mode=mode,
        bank_remarks=remarks,
    )


def write_csv(path: Path, lines: Iterable[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class ScriptedAsk:
    """``ask`` callable for ``manual_enhance`` that replays canned answers."""

    def __init__(self, answers: Iterable[Any]) -> None:
        self._answers = iter(answers)
        self.calls: list[tuple[str, str]] = []

    def __call__(self, kind: str, label: str) -> Any:
        self.calls.append((kind, label))
        return next(self._answers)


# Sample statements as exported by the banks (metadata block, header, rows,
# trailer). Kept small but shaped like the real files.

ICICI_SAVINGS_LINES = [
    "ICICI BANK LIMITED",
    "Account Number,XXXXXXXX1234",
    "Transaction Period,01-02-2023 to 28-02-2023",
    "",
    "DATE,MODE,PARTICULARS,DEPOSITS,WITHDRAWALS,BALANCE",
    ",,,,,",
    "01-02-2023,NEFT,Salary Credit,50000,,50000",
    "03-02-2023,UPI,Swiggy Order,,450.50,49549.50",
    "05-02-2023,UPI,Rent February,,\"15,000.00\",34549.50",
    "Legends Used in Account Statement",
    "06-02-2023,UPI,After trailer,,10,0",
]

HDFC_SAVINGS_LINES = [
    "HDFC BANK Ltd.",
    "Statement of account",
    "Date,Narration,Value Dat,Debit Amount,Credit Amount,Chq/Ref Number,Closing Balance",
    "02/03/23,UPI-GROCERY MART,02/03/23,1200.00,0.00,0000312345,8800.00",
    "04/03/23,INTEREST PAID,04/03/23,0.00,35.00,0000000000,8835.00",
    "*****,*****,*****,*****,*****,*****,*****",
    "STATEMENT SUMMARY,,,,,,",
]

ICICI_CREDIT_LINES = [
    "Accountno:,XXXX XXXX XXXX 1234",
    "Customer Name:,A CUSTOMER",
    "Transaction Details:",
    "Date,Sr.No.,Transaction Details,Reward Point Header,Intl.Amount,Amount(in Rs),BillingAmountSign",
    ",,,,,,",
    "10/04/2023,9001,AMAZON PAY,12,0,1499.00,",
    "12/04/2023,9002,PAYMENT RECEIVED,0,0,5000.00,CR",
]
