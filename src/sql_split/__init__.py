"""Split text holding several SQLite statements into individual statements."""

from sql_split.scanner import Enclosure, ScanState, iter_statements
from sql_split.split import count, has_multiple, split_all, split_bounded

__all__ = [
    "count",
    "Enclosure",
    "has_multiple",
    "iter_statements",
    "ScanState",
    "split_all",
    "split_bounded",
]
