"""Interactive fallback when no auto-enhance rule matches a transaction.

The operator enters an absolute amount for every bucket of the transaction's
polarity (credit buckets for inflows, debit buckets for outflows, ``ignorable``
for both). The entries must add up exactly to the transaction amount; when they
do not, every bucket is asked again. Labels and a summary follow.

Prompting goes through an ``ask(kind, label)`` callable so the flow can be
scripted in tests. ``kind`` is ``"amount"`` (must return a float) or
``"text"`` (must return a string).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from prompt_toolkit import PromptSession
from rich.console import Console

from .logging_setup import get_logger
from .models import (
    CREDIT_BUCKETS,
    DEBIT_BUCKETS,
    SHARED_BUCKETS,
    AmountPerCategory,
    ConvertedTransaction,
    Enhancement,
)
from .term_ui import prompt_amount, prompt_text, render_transaction

_logger = get_logger("ledgerconv.manual_enhance")

type AskKind = Literal["amount", "text"]
type Ask = Callable[[AskKind, str], Any]

LABELS_PROMPT = "Labels (comma separated): "
SUMMARY_PROMPT = "Summary: "


def buckets_for(txn: ConvertedTransaction) -> tuple[str, ...]:
    """Bucket names offered for ``txn``, in prompt order."""

    base = CREDIT_BUCKETS if txn.is_credit else DEBIT_BUCKETS
    return base + SHARED_BUCKETS


def parse_labels(raw: str) -> tuple[str, ...]:
    """Split a comma separated label line into an ordered set.

    >>> parse_labels(" Food, travel,,food ")
    ('food', 'travel')
    """

    seen: dict[str, None] = {}
    for part in raw.split(","):
        label = part.strip().lower()
        if label:
            seen.setdefault(label, None)
    return tuple(seen)


def prompt_ask(session: PromptSession | None = None) -> Ask:
    """Build an ``ask`` callable backed by prompt_toolkit."""

    def ask(kind: AskKind, label: str) -> Any:
        if kind == "amount":
            return prompt_amount(label, session=session)
        return prompt_text(label, session=session)

    return ask


def _ask_categories(
    txn: ConvertedTransaction, ask: Ask, console: Console
) -> AmountPerCategory:
    names = buckets_for(txn)
    while True:
        values = {
            name: float(ask("amount", f"{name.capitalize()} component?")) for name in names
        }
        total = sum(values.values())
        if total == txn.amount:
            return AmountPerCategory(**values)
        console.print(
            f"[yellow]Amounts add up to {total:,.2f}, expected {txn.amount:,.2f}. "
            "Enter them again.[/yellow]"
        )
        _logger.debug("category total %s != amount %s; asking again", total, txn.amount)


def manual_enhance(
    txn: ConvertedTransaction,
    *,
    ask: Ask | None = None,
    console: Console | None = None,
) -> Enhancement:
    """Collect categories, labels and a summary for ``txn`` from the operator."""

    ask = ask or prompt_ask()
    console = console or Console()

    console.rule("Enhance transaction")
    render_transaction(txn, console)
    categories = _ask_categories(txn, ask, console)
    labels = parse_labels(str(ask("text", LABELS_PROMPT)))
    summary = str(ask("text", SUMMARY_PROMPT)).strip()
    return Enhancement(
        categories=categories,
        labels=labels,
        summary=summary,
        auto_enhanced=False,
    )


__all__ = [
    "Ask",
    "buckets_for",
    "parse_labels",
    "prompt_ask",
    "manual_enhance",
]
