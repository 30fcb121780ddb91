"""Row normalization into canonical goal records.

This module maps a validated raw row through a column layout.
Numeric cells are parsed permissively so normalization never fails.
"""

from __future__ import annotations

import math
import re

from core.types import GoalRecord, Layout, RawRow

_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_row(row: RawRow, layout: Layout) -> GoalRecord:
    """Build a goal record from one validated row.

    Args:
        row: Raw row long enough for every layout position.
        layout: Column positions for each field.

    Returns:
        Normalized goal record.
    """
    return GoalRecord(
        goal_number=row[layout.goal_number],
        indicator=row[layout.indicator],
        target_value=parse_number(row[layout.target_value]),
        current_value=parse_number(row[layout.current_value]),
        progress_status=row[layout.progress_status],
    )


def parse_number(cell: str) -> float:
    """Parse the leading decimal number of a cell.

    Leading whitespace is skipped. Text without a numeric prefix,
    including the empty string, yields 0.0, as does a prefix that
    overflows to infinity.

    Examples:
        ``"42"`` -> 42.0, ``" 7.5 kg"`` -> 7.5, ``"n/a"`` -> 0.0
    """
    match = _NUMERIC_PREFIX.match(cell.lstrip())
    if match is None:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0
