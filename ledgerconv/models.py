"""Data models for ``ledgerconv``.

Every on-disk JSON shape (converted statement, enhanced statement,
auto-enhance spec) is described here as a frozen pydantic model so that
loading validates the file and nothing downstream mutates a record in place.

Sign convention (project-wide): ``amount < 0`` is a debit/outflow and
``amount > 0`` is a credit/inflow. Parsers never emit a zero amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ---------------------------------------------------------------------------
# Account types
# ---------------------------------------------------------------------------


class AccountType(StrEnum):
    """Bank + product combination that selects a statement parser."""

    ICICI_SAVINGS = "icici-savings"
    ICICI_CREDIT = "icici-credit"
    HDFC_SAVINGS = "hdfc-savings"
    HDFC_CREDIT = "hdfc-credit"


# ---------------------------------------------------------------------------
# Converted (canonical) transaction
# ---------------------------------------------------------------------------


type RawStatement = list[list[str]]
"""A CSV file as an ordered grid of string cells (rows x columns)."""


class ConvertedTransaction(BaseModel):
    """Bank-agnostic transaction record produced by the statement parsers.

    ``account_name`` is left empty by parsers; the conversion pipeline stamps
    it with the account directory name.
    """

    model_config = ConfigDict(frozen=True)

    account_name: str = ""
    amount: float
    timestamp: date
    bank_serial: str = ""
    bank_payment_mode: str = ""
    bank_remarks: str = ""

    @property
    def is_credit(self) -> bool:
        return self.amount > 0


CONVERTED_FIELDS: tuple[str, ...] = tuple(ConvertedTransaction.model_fields)


# ---------------------------------------------------------------------------
# Category distribution
# ---------------------------------------------------------------------------

DEBIT_BUCKETS: tuple[str, ...] = ("essentials", "investments", "savings", "luxury")
CREDIT_BUCKETS: tuple[str, ...] = ("salary", "returns", "misc")
SHARED_BUCKETS: tuple[str, ...] = ("ignorable",)


class AmountPerCategory(BaseModel):
    """Distribution of an amount over the budget buckets.

    On an enhanced transaction the values are absolute (signed) amounts. On an
    auto-enhance rule they are percentages of the transaction amount.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Debit buckets
    essentials: float = 0.0
    investments: float = 0.0
    savings: float = 0.0
    luxury: float = 0.0
    # Credit buckets
    salary: float = 0.0
    returns: float = 0.0
    misc: float = 0.0
    # Either polarity
    ignorable: float = 0.0

    def debit_sum(self) -> float:
        return self.essentials + self.investments + self.savings + self.luxury + self.ignorable

    def credit_sum(self) -> float:
        return self.salary + self.returns + self.misc + self.ignorable

    def has_only_debit(self) -> bool:
        return all(getattr(self, name) == 0 for name in CREDIT_BUCKETS)

    def has_only_credit(self) -> bool:
        return all(getattr(self, name) == 0 for name in DEBIT_BUCKETS)

    def scaled(self, amount: float) -> AmountPerCategory:
        """Treat the values as percentages and convert them to absolute
        amounts of ``amount`` (sign carried by ``amount``)."""

        return AmountPerCategory(
            **{name: pct * amount / 100.0 for name, pct in self.model_dump().items()}
        )


# ---------------------------------------------------------------------------
# Enhanced transaction
# ---------------------------------------------------------------------------


class EnhancedTransaction(ConvertedTransaction):
    """A converted transaction plus budget categories, labels and summary.

    The canonical fields are stored inline. ``correlation_id`` is the checksum
    of those canonical fields and ties this record to its converted source
    across runs.
    """

    correlation_id: str
    categories: AmountPerCategory = AmountPerCategory()
    labels: tuple[str, ...] = ()
    summary: str = ""
    auto_enhanced: bool = False

    def converted(self) -> ConvertedTransaction:
        """Return the embedded canonical transaction."""

        return ConvertedTransaction(**self.model_dump(include=set(CONVERTED_FIELDS)))

    @classmethod
    def from_enhancement(
        cls, txn: ConvertedTransaction, enhancement: Enhancement, *, correlation_id: str
    ) -> EnhancedTransaction:
        base = txn.converted() if isinstance(txn, EnhancedTransaction) else txn
        return cls(
            **base.model_dump(),
            correlation_id=correlation_id,
            categories=enhancement.categories,
            labels=enhancement.labels,
            summary=enhancement.summary,
            auto_enhanced=enhancement.auto_enhanced,
        )


@dataclass(frozen=True, slots=True)
class Enhancement:
    """Categories, labels and summary decided for one transaction, by a rule
    (``auto_enhanced=True``) or by the user."""

    categories: AmountPerCategory
    labels: tuple[str, ...]
    summary: str
    auto_enhanced: bool


# ---------------------------------------------------------------------------
# Auto-enhance rule
# ---------------------------------------------------------------------------


class AutoEnhanceRule(BaseModel):
    """One element of an auto-enhance spec file.

    ``categories`` holds percentages. A credit rule (``for_credit``) may only
    populate credit buckets (plus ``ignorable``) and a debit rule only debit
    buckets (plus ``ignorable``); in both cases the populated percentages must
    add up to exactly 100.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    for_credit: bool = False
    remarks_keywords: tuple[str, ...]
    categories: AmountPerCategory
    labels: tuple[str, ...] = ()
    summary: str = ""

    @field_validator("categories")
    @classmethod
    def _no_negative_percentages(cls, v: AmountPerCategory) -> AmountPerCategory:
        negative = [name for name, pct in v.model_dump().items() if pct < 0]
        if negative:
            raise ValueError("percentages cannot be negative: " + ", ".join(negative))
        return v

    @model_validator(mode="after")
    def _polarity_and_total(self) -> Self:
        cats = self.categories
        if self.for_credit:
            if not cats.has_only_credit():
                raise ValueError("credit rule cannot populate debit categories")
            if cats.credit_sum() != 100:
                raise ValueError(f"credit categories must sum to 100, got {cats.credit_sum()}")
        else:
            if not cats.has_only_debit():
                raise ValueError("debit rule cannot populate credit categories")
            if cats.debit_sum() != 100:
                raise ValueError(f"debit categories must sum to 100, got {cats.debit_sum()}")
        return self

    def applies_to(self, txn: ConvertedTransaction) -> bool:
        """Polarity check followed by a case-insensitive keyword match."""

        if self.for_credit != txn.is_credit:
            return False
        remarks = txn.bank_remarks.lower()
        return any(keyword.lower() in remarks for keyword in self.remarks_keywords)


__all__ = [
    "AccountType",
    "RawStatement",
    "ConvertedTransaction",
    "CONVERTED_FIELDS",
    "AmountPerCategory",
    "DEBIT_BUCKETS",
    "CREDIT_BUCKETS",
    "SHARED_BUCKETS",
    "EnhancedTransaction",
    "Enhancement",
    "AutoEnhanceRule",
]
