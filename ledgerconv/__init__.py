"""Public interface for the ``ledgerconv`` package.

Bank statement CSV exports go in, a bank-agnostic JSON statement comes out
(``convert_statements``), and that statement is then enhanced with budget
categories, labels and summaries (``enhance_statement``). Only symbol
re-exports live here.
"""

from .accounts import DEFAULT_RULES, Branch, Terminal, infer_account_type, rules_from_mapping
from .auto_enhance import auto_enhance
from .convert import ConversionConfig, collect_transactions, convert_statements, default_config
from .correlation import compute_correlation_id
from .enhance import EnhanceSummary, enhance_statement
from .errors import (
    AccountInferenceError,
    AutoEnhanceSpecError,
    ConfigurationError,
    EmptyStatementError,
    LedgerconvError,
    RuleStructureError,
    StatementError,
    UnsupportedAccountError,
)
from .manual_enhance import manual_enhance
from .models import (
    AccountType,
    AmountPerCategory,
    AutoEnhanceRule,
    ConvertedTransaction,
    EnhancedTransaction,
    Enhancement,
)

__all__ = [
    # Pipeline
    "convert_statements",
    "collect_transactions",
    "ConversionConfig",
    "default_config",
    "enhance_statement",
    "EnhanceSummary",
    "auto_enhance",
    "manual_enhance",
    "compute_correlation_id",
    # Account inference
    "infer_account_type",
    "rules_from_mapping",
    "DEFAULT_RULES",
    "Branch",
    "Terminal",
    # Models
    "AccountType",
    "AmountPerCategory",
    "AutoEnhanceRule",
    "ConvertedTransaction",
    "EnhancedTransaction",
    "Enhancement",
    # Errors
    "LedgerconvError",
    "StatementError",
    "AccountInferenceError",
    "RuleStructureError",
    "UnsupportedAccountError",
    "AutoEnhanceSpecError",
    "EmptyStatementError",
    "ConfigurationError",
]
