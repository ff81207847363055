"""Statement adapters keyed by account type.

``build_parser_registry`` returns a read-only mapping from
:class:`~ledgerconv.models.AccountType` to the :class:`TableParser` that reads
that account's exports. Account types without an adapter (currently HDFC
credit cards) are deliberately absent so the pipeline can reject them before
reading any file.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ...models import AccountType
from . import hdfc_savings, icici_credit, icici_savings
from .base import RowAction, TableParser


def build_parser_registry(
    *, icici_credit_cr_is_debit: bool = True
) -> Mapping[AccountType, TableParser]:
    icici_credit_parser = icici_credit.make_parser(cr_is_debit=icici_credit_cr_is_debit)
    return MappingProxyType(
        {
            AccountType.ICICI_SAVINGS: icici_savings.PARSER,
            AccountType.ICICI_CREDIT: icici_credit_parser,
            AccountType.HDFC_SAVINGS: hdfc_savings.PARSER,
        }
    )


__all__ = ["build_parser_registry", "RowAction", "TableParser"]
