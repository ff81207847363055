"""Statement conversion: account directories of bank CSVs -> one JSON statement.

Input layout::

    <input_dir>/<account name>/<any>.csv

Each visible subdirectory is one account; its (free-text) name decides the
account type and therefore the adapter. The result is a single list of
converted transactions sorted most-recent-first and written as indented JSON.

The run is all-or-nothing: any failure raises before the output is written,
and running it again on unchanged input reproduces the same file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .accounts import DEFAULT_RULES, Branch, infer_account_type
from .config import icici_credit_cr_is_debit
from .errors import AccountInferenceError, UnsupportedAccountError
from .ingest.adapters import TableParser, build_parser_registry
from .ingest.utils import list_csv_files, list_visible_dirs, read_csv_grid
from .logging_setup import get_logger
from .models import AccountType, ConvertedTransaction
from .persistence import write_statement

_logger = get_logger("ledgerconv.convert")


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Inference rules and adapter registry used for one conversion run."""

    rules: Branch = DEFAULT_RULES
    parsers: Mapping[AccountType, TableParser] = field(default_factory=build_parser_registry)


def default_config() -> ConversionConfig:
    """Build the configuration for this process from the environment."""

    return ConversionConfig(
        rules=DEFAULT_RULES,
        parsers=build_parser_registry(icici_credit_cr_is_debit=icici_credit_cr_is_debit()),
    )


def sort_most_recent_first[T: ConvertedTransaction](statement: list[T]) -> list[T]:
    """Stable sort by ``timestamp`` descending (ties keep their input order)."""

    return sorted(statement, key=lambda txn: txn.timestamp, reverse=True)


def _resolve_accounts(
    input_dir: Path, config: ConversionConfig
) -> list[tuple[str, TableParser]]:
    """Pair every account directory with its adapter before any file is read."""

    accounts: list[tuple[str, TableParser]] = []
    for account_dir in list_visible_dirs(input_dir):
        try:
            account_type = infer_account_type(account_dir, config.rules)
        except AccountInferenceError as e:
            raise AccountInferenceError(
                f"failed to infer account type for: {account_dir}: {e}"
            ) from e
        parser = config.parsers.get(account_type)
        if parser is None:
            raise UnsupportedAccountError(
                f"no statement parser implemented for account type {account_type.value!r} "
                f"(directory: {account_dir})"
            )
        _logger.debug("account %r -> %s", account_dir, account_type.value)
        accounts.append((account_dir, parser))
    return accounts


def collect_transactions(
    input_dir: str | PathLike[str], config: ConversionConfig | None = None
) -> list[ConvertedTransaction]:
    """Parse every statement under ``input_dir`` and return them sorted."""

    cfg = config or default_config()
    root = Path(input_dir)

    statement: list[ConvertedTransaction] = []
    for account_dir, parser in _resolve_accounts(root, cfg):
        account_path = root / account_dir
        for csv_name in list_csv_files(account_path):
            csv_path = account_path / csv_name
            grid = read_csv_grid(csv_path)
            parsed = parser.parse(grid)
            _logger.info("%s: %d transactions", csv_path, len(parsed))
            statement.extend(txn.model_copy(update={"account_name": account_dir}) for txn in parsed)

    return sort_most_recent_first(statement)


def convert_statements(
    input_dir: str | PathLike[str],
    output_path: str | PathLike[str],
    config: ConversionConfig | None = None,
) -> list[ConvertedTransaction]:
    """Convert all account statements under ``input_dir`` into ``output_path``.

    Returns the written statement. Raises a
    :class:`~ledgerconv.errors.LedgerconvError` subclass on the first failure
    (unknown account, missing adapter, unreadable CSV, failed write).
    """

    statement = collect_transactions(input_dir, config)
    write_statement(output_path, statement)
    _logger.info("wrote %d transactions to %s", len(statement), output_path)
    return statement


__all__ = [
    "ConversionConfig",
    "default_config",
    "sort_most_recent_first",
    "collect_transactions",
    "convert_statements",
]
