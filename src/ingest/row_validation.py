"""Row filtering policy for raw tabular rows."""

from __future__ import annotations

from typing import Sequence

from core.constants import MIN_ROW_CELL_COUNT


def is_valid_row(row: Sequence[str]) -> bool:
    """Return whether a raw row is well-formed enough to normalize.

    A row qualifies when it has at least five cells and a non-empty
    first cell. Rows failing this check are dropped without error.
    """
    return len(row) >= MIN_ROW_CELL_COUNT and row[0] != ""
