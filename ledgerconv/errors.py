"""Exception types raised by ``ledgerconv``.

Every fatal condition derives from :class:`LedgerconvError` so the CLI can
report it with a single ``except`` clause. Underlying causes (``OSError``,
``csv.Error``, pydantic ``ValidationError``) are chained with ``raise ... from``.
End-of-table conditions inside a statement are not errors and never surface
here.
"""

from __future__ import annotations


class LedgerconvError(Exception):
    """Base class for fatal ledgerconv failures."""


class StatementError(LedgerconvError):
    """A statement, directory or output file could not be read or written."""

    def __init__(self, message: str, *, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class AccountInferenceError(LedgerconvError):
    """No inference rule matched an account directory name."""


class RuleStructureError(LedgerconvError):
    """An inference rule node is neither a terminal nor a nested branch."""


class UnsupportedAccountError(LedgerconvError):
    """An account type was inferred but has no registered statement parser."""


class AutoEnhanceSpecError(LedgerconvError):
    """The auto-enhance spec file is missing, unreadable or invalid."""


class EmptyStatementError(LedgerconvError):
    """The converted statement handed to the enhancer has no transactions."""


class ConfigurationError(LedgerconvError, ValueError):
    """An environment override holds a value that cannot be interpreted."""


__all__ = [
    "LedgerconvError",
    "StatementError",
    "AccountInferenceError",
    "RuleStructureError",
    "UnsupportedAccountError",
    "AutoEnhanceSpecError",
    "EmptyStatementError",
    "ConfigurationError",
]
