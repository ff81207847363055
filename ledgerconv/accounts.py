"""Infer an account type from an informal account directory name.

Rules form a small tree. A node is either a :class:`Terminal` holding the
resolved :class:`~ledgerconv.models.AccountType`, or a :class:`Branch` mapping
lowercase keywords to child nodes. Resolution lowercases the name, takes the
first keyword (in declaration order) that occurs in it, and descends until a
terminal is reached. There is no backtracking: once a keyword matches, a
failure further down is final.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .errors import AccountInferenceError, RuleStructureError
from .models import AccountType


@dataclass(frozen=True, slots=True)
class Terminal:
    account_type: AccountType


@dataclass(frozen=True, slots=True)
class Branch:
    children: Mapping[str, RuleNode]


type RuleNode = Terminal | Branch


def rules_from_mapping(raw: Mapping[str, Any]) -> Branch:
    """Build a rule tree from plain nested dictionaries.

    Values must be an :class:`AccountType` (or its string value) or another
    mapping. Anything else raises :class:`RuleStructureError`.
    """

    children: dict[str, RuleNode] = {}
    for keyword, value in raw.items():
        if isinstance(value, Mapping):
            children[keyword.lower()] = rules_from_mapping(value)
            continue
        try:
            children[keyword.lower()] = Terminal(AccountType(value))
        except (TypeError, ValueError) as e:
            raise RuleStructureError(
                f"invalid rule structure: keyword {keyword!r} maps to {value!r}"
            ) from e
    return Branch(MappingProxyType(children))


# "credit" is declared ahead of the bank keywords so that "HDFC Credit Card"
# resolves to the card and not to the savings account of the same bank.
DEFAULT_RULES: Branch = rules_from_mapping(
    {
        "credit": {
            "icici": AccountType.ICICI_CREDIT,
            "hdfc": AccountType.HDFC_CREDIT,
        },
        "icici": AccountType.ICICI_SAVINGS,
        "hdfc": AccountType.HDFC_SAVINGS,
    }
)


def infer_account_type(account_name: str, rules: Branch = DEFAULT_RULES) -> AccountType:
    """Resolve ``account_name`` to an :class:`AccountType` using ``rules``.

    Raises :class:`AccountInferenceError` when no keyword matches at some level
    and :class:`RuleStructureError` when the tree contains an unknown node.
    """

    name = account_name.lower()
    node: RuleNode = rules
    while True:
        match node:
            case Terminal(account_type=account_type):
                return account_type
            case Branch(children=children):
                nxt = next((child for kw, child in children.items() if kw.lower() in name), None)
                if nxt is None:
                    raise AccountInferenceError(f"no rules matched account: {account_name!r}")
                node = nxt
            case _:
                raise RuleStructureError(f"invalid rule structure: unexpected node {node!r}")


__all__ = [
    "Terminal",
    "Branch",
    "RuleNode",
    "DEFAULT_RULES",
    "rules_from_mapping",
    "infer_account_type",
]
