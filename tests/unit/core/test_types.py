"""Unit tests for shared typed models."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from core.errors import ReportConfigError
from core.types import GoalRecord, Layout, ProgressBar, UploadedFile


def test_layout_rejects_duplicate_positions() -> None:
    """Layout should require a distinct column for each field."""
    with pytest.raises(ReportConfigError):
        Layout(goal_number=0, indicator=0, target_value=2, current_value=3, progress_status=4)


def test_layout_rejects_negative_positions() -> None:
    """Layout should reject negative column positions."""
    with pytest.raises(ReportConfigError):
        Layout(goal_number=-1, indicator=1, target_value=2, current_value=3, progress_status=4)


def test_layout_min_row_length_covers_highest_position() -> None:
    """Minimum row length should be one past the highest position."""
    layout = Layout(goal_number=0, indicator=1, target_value=2, current_value=7, progress_status=4)

    assert layout.min_row_length == 8


def test_goal_record_is_immutable() -> None:
    """Goal records should not allow mutation after creation."""
    record = GoalRecord("1", "Indicator", 100.0, 50.0, "On Track")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.current_value = 75.0  # type: ignore[misc]


def test_uploaded_file_extension_is_lowercase() -> None:
    """Upload extension should be derived from the original filename."""
    upload = UploadedFile(original_filename="Goals.XLSX", path=Path("/tmp/upload-1"))

    assert upload.extension == "xlsx"


def test_progress_bar_fill_width_ignores_negative_percent() -> None:
    """Negative progress should draw an empty bar."""
    bar = ProgressBar(
        percent=-20.0,
        fill_color=(244, 67, 54),
        background_color=(240, 240, 240),
        width=180.0,
        height=10.0,
        advance=15.0,
    )

    assert bar.fill_width == 0.0


def test_layout_positions_follow_field_order() -> None:
    """Positions should list goal, indicator, target, current, status columns."""
    layout = Layout(goal_number=4, indicator=3, target_value=2, current_value=1, progress_status=0)

    assert layout.positions() == (4, 3, 2, 1, 0)
