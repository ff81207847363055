"""JSON persistence for statements and auto-enhance specs.

Statements are always written wholesale. Writes target ``<file>.tmp`` first
and then ``os.replace`` into place, so an interrupted run leaves either the
previous file or the new one on disk, never a truncated mix.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import AutoEnhanceSpecError, StatementError
from .logging_setup import get_logger
from .models import AutoEnhanceRule, ConvertedTransaction, EnhancedTransaction

_logger = get_logger("ledgerconv.persistence")

_CONVERTED_ADAPTER = TypeAdapter(list[ConvertedTransaction])
_ENHANCED_ADAPTER = TypeAdapter(list[EnhancedTransaction])


# ----------------------------------------------------------------------------
# Raw JSON I/O
# ----------------------------------------------------------------------------


def _read_json(path: Path) -> Any:
    """Read and decode a JSON file. ``OSError`` (incl. ``FileNotFoundError``)
    and ``json.JSONDecodeError`` propagate to the caller."""

    with path.open(encoding="utf-8") as f:
        return json.load(f)


def write_json_atomic(path: str | PathLike[str], payload: Any) -> None:
    """Write ``payload`` as indented JSON to ``path`` via a temp file + rename."""

    p = Path(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        os.replace(tmp, p)
    except OSError as e:
        raise StatementError(f"failed to write json file: {p}: {e}", path=p) from e


def write_statement(path: str | PathLike[str], statement: Sequence[BaseModel]) -> None:
    """Persist a converted or enhanced statement as a JSON array."""

    write_json_atomic(path, [txn.model_dump(mode="json") for txn in statement])
    _logger.debug("wrote %d transactions to %s", len(statement), path)


# ----------------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------------


def _load_statement[T](path: Path, adapter: TypeAdapter[list[T]], kind: str) -> list[T]:
    try:
        data = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise StatementError(
            f"failed to read the {kind} statement at: {path}: {e}", path=path
        ) from e
    # An empty statement may have been serialized as ``null``.
    if data is None:
        return []
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise StatementError(f"invalid {kind} statement at: {path}: {e}", path=path) from e


def load_converted_statement(path: str | PathLike[str]) -> list[ConvertedTransaction]:
    """Load a converted statement. The file must exist."""

    return _load_statement(Path(path), _CONVERTED_ADAPTER, "converted")


def load_enhanced_statement(path: str | PathLike[str]) -> list[EnhancedTransaction]:
    """Load an enhanced statement, or ``[]`` when the file does not exist yet."""

    p = Path(path)
    if not p.exists():
        _logger.info("no enhanced statement at %s; starting a new one", p)
        return []
    return _load_statement(p, _ENHANCED_ADAPTER, "enhanced")


# ----------------------------------------------------------------------------
# Auto-enhance spec
# ----------------------------------------------------------------------------


def load_auto_enhance_spec(path: str | PathLike[str]) -> list[AutoEnhanceRule]:
    """Load and validate every rule in an auto-enhance spec file.

    The first invalid element aborts loading with an
    :class:`AutoEnhanceSpecError` naming its (0-based) position.
    """

    p = Path(path)
    try:
        data = _read_json(p)
    except (OSError, json.JSONDecodeError) as e:
        raise AutoEnhanceSpecError(f"failed to read the spec file at: {p}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise AutoEnhanceSpecError(f"invalid auto-enhance spec file {p}: expected a JSON array")

    rules: list[AutoEnhanceRule] = []
    for idx, elem in enumerate(data):
        try:
            rules.append(AutoEnhanceRule.model_validate(elem))
        except ValidationError as e:
            raise AutoEnhanceSpecError(
                f"invalid auto-enhance spec file {p}: element no: {idx}: {e}"
            ) from e
    return rules


def resolve_auto_enhance_spec(
    path: str | PathLike[str] | None, *, default: str | PathLike[str]
) -> list[AutoEnhanceRule]:
    """Treat the spec file as optional unless the caller asked for one.

    - ``path`` given: it must exist and be valid.
    - ``path`` is ``None``: ``default`` is used when it exists, otherwise no
      rules apply.
    """

    if path is None:
        d = Path(default)
        if not d.exists():
            _logger.info("no auto-enhance spec at %s; auto-enhancement disabled", d)
            return []
        rules = load_auto_enhance_spec(d)
        _logger.info("using auto-enhance spec file: %s (%d rules)", d, len(rules))
        return rules

    p = Path(path)
    if not p.exists():
        raise AutoEnhanceSpecError(f"auto-enhance spec file not found: {p}")
    rules = load_auto_enhance_spec(p)
    _logger.info("using auto-enhance spec file: %s (%d rules)", p, len(rules))
    return rules


__all__ = [
    "write_json_atomic",
    "write_statement",
    "load_converted_statement",
    "load_enhanced_statement",
    "load_auto_enhance_spec",
    "resolve_auto_enhance_spec",
]
