"""Terminal prompts and rendering used by manual enhancement.

Input goes through prompt_toolkit so the helpers can be driven from a pipe in
tests (pass a ``PromptSession`` built on a pipe input and ``DummyOutput``).
Output goes through a rich ``Console``.
"""

from __future__ import annotations

import math

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import ValidationError, Validator
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import ConvertedTransaction


def _session(session: PromptSession | None) -> PromptSession:
    if session is None:
        return PromptSession()
    return PromptSession(
        input=getattr(session, "input", None),
        output=getattr(session, "output", None),
    )


# ----------------------------------------------------------------------------
# Amount entry
# ----------------------------------------------------------------------------


def parse_amount_input(text: str) -> float | None:
    """Parse an operator-entered amount. Empty means ``0``; ``None`` if invalid."""

    s = text.strip().replace(",", "")
    if not s:
        return 0.0
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class AmountValidator(Validator):
    def validate(self, document) -> None:
        if parse_amount_input(document.text) is None:
            raise ValidationError(
                message="Enter a number (leave empty for 0)",
                cursor_position=len(document.text),
            )


def prompt_amount(label: str, *, session: PromptSession | None = None) -> float:
    """Ask for the absolute amount assigned to one bucket."""

    sess = _session(session)
    text = sess.prompt(
        f"{label}: ",
        validator=AmountValidator(),
        validate_while_typing=False,
    )
    value = parse_amount_input(text)
    if value is None:
        raise ValueError(f"not a number: {text!r}")
    return value


def prompt_text(message: str, *, session: PromptSession | None = None) -> str:
    """Free-text line (labels, summary). Surrounding whitespace is removed."""

    return _session(session).prompt(message).strip()


# ----------------------------------------------------------------------------
# Rendering
# ----------------------------------------------------------------------------


def transaction_table(txn: ConvertedTransaction) -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("field", style="bold cyan", no_wrap=True)
    table.add_column("value")
    kind = "credit" if txn.is_credit else "debit"
    amount_style = "green" if txn.is_credit else "red"
    # Bank text may contain square brackets; keep it out of rich markup.
    table.add_row("Account", Text(txn.account_name or "-"))
    table.add_row("Date", txn.timestamp.isoformat())
    table.add_row("Amount", f"[{amount_style}]{txn.amount:,.2f}[/{amount_style}] ({kind})")
    table.add_row("Payment mode", Text(txn.bank_payment_mode or "-"))
    table.add_row("Serial", Text(txn.bank_serial or "-"))
    table.add_row("Remarks", Text(txn.bank_remarks or "-"))
    return table


def render_transaction(txn: ConvertedTransaction, console: Console | None = None) -> None:
    (console or Console()).print(transaction_table(txn))


__all__ = [
    "AmountValidator",
    "parse_amount_input",
    "prompt_amount",
    "prompt_text",
    "transaction_table",
    "render_transaction",
]
