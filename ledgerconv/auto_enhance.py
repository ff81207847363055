"""Keyword rules that enhance a transaction without asking the user."""

from __future__ import annotations

from collections.abc import Iterable

from .logging_setup import get_logger
from .models import AutoEnhanceRule, ConvertedTransaction, Enhancement

_logger = get_logger("ledgerconv.auto_enhance")


def apply_rule(rule: AutoEnhanceRule, txn: ConvertedTransaction) -> Enhancement:
    """Turn ``rule``'s percentages into signed amounts of ``txn.amount``."""

    return Enhancement(
        categories=rule.categories.scaled(txn.amount),
        labels=tuple(rule.labels),
        summary=rule.summary,
        auto_enhanced=True,
    )


def auto_enhance(
    txn: ConvertedTransaction, rules: Iterable[AutoEnhanceRule]
) -> Enhancement | None:
    """Apply the first rule that matches ``txn``; ``None`` when none does."""

    for idx, rule in enumerate(rules):
        if rule.applies_to(txn):
            _logger.debug("rule %d matched %r", idx, txn.bank_remarks)
            return apply_rule(rule, txn)
    return None


__all__ = ["apply_rule", "auto_enhance"]
