"""Runtime configuration: default file names and environment overrides.

The CLI loads a ``.env`` from the working directory before any of these are
read, so every ``LEDGERCONV_*`` variable can live there as well.

Environment variables
---------------------
- ``LEDGERCONV_LOG_LEVEL``: package log level (see ``logging_setup``).
- ``LEDGERCONV_ICICI_CREDIT_CR``: meaning of ``CR`` in the ICICI credit card
  ``BillingAmountSign`` column, ``debit`` (default) or ``credit``.
- ``LEDGERCONV_AUTO_ENHANCE_SPEC``: explicit auto-enhance spec path for the
  ``enhance`` command.
"""

from __future__ import annotations

import os

from .errors import ConfigurationError

DEFAULT_CONVERTED_FILE = "converted-statement.json"
DEFAULT_ENHANCED_FILE = "enhanced-statement.json"
DEFAULT_SPEC_FILE = "auto-enhance-spec.json"

_CR_DEBIT_VALUES = {"debit", "dr", "negative", "-"}
_CR_CREDIT_VALUES = {"credit", "cr", "positive", "+"}


def icici_credit_cr_is_debit() -> bool:
    """Resolve whether ``CR`` marks a debit on ICICI credit card statements.

    Defaults to ``True`` when ``LEDGERCONV_ICICI_CREDIT_CR`` is unset. Raises
    :class:`ConfigurationError` for an unrecognised value so a typo never
    silently flips every card transaction.
    """

    raw = os.getenv("LEDGERCONV_ICICI_CREDIT_CR")
    if raw is None or not raw.strip():
        return True
    v = raw.strip().lower()
    if v in _CR_DEBIT_VALUES:
        return True
    if v in _CR_CREDIT_VALUES:
        return False
    raise ConfigurationError(
        f"LEDGERCONV_ICICI_CREDIT_CR must be 'debit' or 'credit', got {raw!r}"
    )


__all__ = [
    "DEFAULT_CONVERTED_FILE",
    "DEFAULT_ENHANCED_FILE",
    "DEFAULT_SPEC_FILE",
    "icici_credit_cr_is_debit",
]
