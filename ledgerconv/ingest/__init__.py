"""CSV ingest: raw grid reading and per-bank statement adapters."""

from .adapters import build_parser_registry
from .utils import list_csv_files, list_visible_dirs, read_csv_grid

__all__ = ["build_parser_registry", "list_csv_files", "list_visible_dirs", "read_csv_grid"]
