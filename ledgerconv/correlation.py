"""Content checksums that identify a converted transaction across runs.

No sequential IDs are ever assigned. A transaction's identity is the SHA-256
of its canonical JSON, so two independently parsed copies of the same row
share an ID, and any upstream change to a field (or to the schema) yields a
new one, which makes the enhancer treat that transaction as new.
"""

from __future__ import annotations

import hashlib
import json

from .models import ConvertedTransaction, EnhancedTransaction


def canonical_json(txn: ConvertedTransaction) -> str:
    """Deterministic JSON of the canonical (converted) fields of ``txn``."""

    if isinstance(txn, EnhancedTransaction):
        txn = txn.converted()
    payload = txn.model_dump(mode="json")
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def compute_correlation_id(txn: ConvertedTransaction) -> str:
    """Return the 64-char hex SHA-256 checksum of ``txn``'s canonical JSON."""

    return hashlib.sha256(canonical_json(txn).encode("utf-8")).hexdigest()


__all__ = ["canonical_json", "compute_correlation_id"]
