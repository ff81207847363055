"""Enhancement merge: attach categories, labels and a summary to new transactions.

A converted transaction counts as already enhanced when the enhanced statement
holds an entry whose ``correlation_id`` equals the transaction's checksum.
Everything else is a candidate. Candidates are tried against the auto-enhance
rules first; the rest go to the manual enhancer unless ``only_auto`` is set.

The enhanced file is rewritten (atomically) after every enhanced candidate, so
aborting in the middle of a prompt keeps all work completed up to that point.
Existing entries are never edited.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike

from .auto_enhance import auto_enhance
from .config import DEFAULT_SPEC_FILE
from .convert import sort_most_recent_first
from .correlation import compute_correlation_id
from .errors import EmptyStatementError
from .logging_setup import get_logger
from .manual_enhance import manual_enhance
from .models import ConvertedTransaction, Enhancement, EnhancedTransaction
from .persistence import (
    load_converted_statement,
    load_enhanced_statement,
    resolve_auto_enhance_spec,
    write_statement,
)

_logger = get_logger("ledgerconv.enhance")

type ManualEnhancer = Callable[[ConvertedTransaction], Enhancement]


@dataclass(slots=True)
class EnhanceSummary:
    candidates: int = 0
    auto: int = 0
    manual: int = 0
    skipped: int = 0

    @property
    def appended(self) -> int:
        return self.auto + self.manual


def find_candidates(
    converted: list[ConvertedTransaction], enhanced: list[EnhancedTransaction]
) -> list[tuple[str, ConvertedTransaction]]:
    """Return ``(checksum, txn)`` for every converted transaction not yet enhanced.

    Input order is preserved.
    """

    known = {txn.correlation_id for txn in enhanced}
    candidates: list[tuple[str, ConvertedTransaction]] = []
    for txn in converted:
        checksum = compute_correlation_id(txn)
        if checksum not in known:
            candidates.append((checksum, txn))
    return candidates


def enhance_statement(
    converted_path: str | PathLike[str],
    enhanced_path: str | PathLike[str],
    spec_path: str | PathLike[str] | None = None,
    only_auto: bool = False,
    *,
    manual: ManualEnhancer | None = None,
    on_progress: Callable[[str], None] | None = None,
    default_spec_path: str | PathLike[str] = DEFAULT_SPEC_FILE,
) -> EnhanceSummary:
    """Enhance every new transaction of ``converted_path`` into ``enhanced_path``.

    Parameters
    ----------
    converted_path:
        Converted statement produced by ``convert``. Must exist and be
        non-empty.
    enhanced_path:
        Enhanced statement to extend. Created when missing.
    spec_path:
        Auto-enhance rules. ``None`` falls back to ``default_spec_path`` when
        that file exists; an explicit path must exist.
    only_auto:
        Skip (instead of prompting for) candidates no rule matches.
    manual:
        Manual enhancer, defaults to the interactive prompts.
    on_progress:
        Receives short human-readable status lines.

    Raises a :class:`~ledgerconv.errors.LedgerconvError` subclass on any I/O,
    decode or spec failure. An invalid spec fails before any candidate is
    processed.
    """

    converted = load_converted_statement(converted_path)
    if not converted:
        raise EmptyStatementError(f"converted statement is empty: {converted_path}")

    enhanced = load_enhanced_statement(enhanced_path)
    candidates = find_candidates(converted, enhanced)
    rules = resolve_auto_enhance_spec(spec_path, default=default_spec_path)
    enhance_manually = manual or manual_enhance

    summary = EnhanceSummary(candidates=len(candidates))
    _logger.info(
        "%d converted, %d already enhanced, %d new", len(converted), len(enhanced), len(candidates)
    )
    if on_progress and not candidates:
        on_progress("Nothing new to enhance.")

    for idx, (checksum, txn) in enumerate(candidates, start=1):
        if on_progress:
            on_progress(f"Processing transaction {idx} out of {len(candidates)}")

        enhancement = auto_enhance(txn, rules)
        if enhancement is not None:
            summary.auto += 1
            if on_progress:
                on_progress("Auto enhanced.")
        elif only_auto:
            summary.skipped += 1
            if on_progress:
                on_progress("Not auto-enhanceable. Skipped.")
            continue
        else:
            enhancement = enhance_manually(txn)
            summary.manual += 1

        enhanced.append(
            EnhancedTransaction.from_enhancement(txn, enhancement, correlation_id=checksum)
        )
        enhanced = sort_most_recent_first(enhanced)
        write_statement(enhanced_path, enhanced)
        if on_progress:
            on_progress("Saved.")

    _logger.info(
        "enhanced %d (auto %d, manual %d), skipped %d",
        summary.appended,
        summary.auto,
        summary.manual,
        summary.skipped,
    )
    return summary


__all__ = ["EnhanceSummary", "ManualEnhancer", "find_candidates", "enhance_statement"]
