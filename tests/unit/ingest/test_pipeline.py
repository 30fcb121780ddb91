"""Unit tests for the goal record ingest pipeline."""

from __future__ import annotations

import shutil
from dataclasses import replace
from pathlib import Path

import pytest

from core.config import ReportConfig
from core.errors import UnsupportedFileTypeError, UploadInvalidError
from core.types import GoalRecord, Layout, UploadedFile
from ingest.format_registry import STANDARD_LAYOUT
from ingest.pipeline import ingest_goal_records
from tests.fixture_paths import fixture_path


def _upload(name: str) -> UploadedFile:
    return UploadedFile(original_filename=name, path=fixture_path(name))


def test_ingest_goal_records_skips_header_row() -> None:
    """Header row should be discarded and the data row normalized."""
    records = ingest_goal_records(_upload("goals_single.csv"), STANDARD_LAYOUT)

    assert records == [
        GoalRecord(
            goal_number="1",
            indicator="Indicator text",
            target_value=100.0,
            current_value=50.0,
            progress_status="On Track",
        )
    ]


def test_ingest_goal_records_returns_empty_for_header_only() -> None:
    """A header-only file should yield no records."""
    assert ingest_goal_records(_upload("header_only.csv"), STANDARD_LAYOUT) == []


def test_ingest_goal_records_drops_invalid_rows_in_order() -> None:
    """Blank, short, and goal-less rows should be dropped silently."""
    records = ingest_goal_records(_upload("goals_mixed.csv"), STANDARD_LAYOUT)

    assert [record.goal_number for record in records] == ["1", "3", "4"]
    assert records[1].current_value == 0.0


def test_ingest_goal_records_discards_first_row_even_with_data(tmp_path: Path) -> None:
    """The first row is always treated as a header, whatever it contains."""
    csv_path = tmp_path / "no_header.csv"
    csv_path.write_text("1,First,10,5,Ok\n2,Second,10,5,Ok\n", encoding="utf-8")
    upload = UploadedFile(original_filename="no_header.csv", path=csv_path)

    records = ingest_goal_records(upload, STANDARD_LAYOUT)

    assert [record.goal_number for record in records] == ["2"]


def test_ingest_goal_records_drops_rows_shorter_than_layout(tmp_path: Path) -> None:
    """Rows that cannot cover every layout column should be dropped."""
    csv_path = tmp_path / "wide.csv"
    csv_path.write_text("h\n1,A,10,5,Ok\n2,B,10,5,Ok,x,y\n", encoding="utf-8")
    upload = UploadedFile(original_filename="wide.csv", path=csv_path)
    layout = Layout(goal_number=0, indicator=1, target_value=2, current_value=3, progress_status=6)

    records = ingest_goal_records(upload, layout)

    assert [record.progress_status for record in records] == ["y"]


def test_ingest_goal_records_raises_for_txt_extension(tmp_path: Path) -> None:
    """Unsupported extensions should fail before reading."""
    txt_path = tmp_path / "goals.txt"
    shutil.copy(fixture_path("goals_single.csv"), txt_path)
    upload = UploadedFile(original_filename="goals.txt", path=txt_path)

    with pytest.raises(UnsupportedFileTypeError):
        ingest_goal_records(upload, STANDARD_LAYOUT)


def test_ingest_goal_records_raises_for_missing_upload(tmp_path: Path) -> None:
    """Uploads without a stored file should be rejected."""
    upload = UploadedFile(original_filename="goals.csv", path=tmp_path / "missing.csv")

    with pytest.raises(UploadInvalidError):
        ingest_goal_records(upload, STANDARD_LAYOUT)


def test_ingest_goal_records_raises_for_truncated_upload() -> None:
    """Uploads whose size differs from the declared size are incomplete."""
    upload = replace(_upload("goals_single.csv"), declared_size=10_000)

    with pytest.raises(UploadInvalidError):
        ingest_goal_records(upload, STANDARD_LAYOUT)


def test_ingest_goal_records_raises_for_oversized_upload() -> None:
    """Uploads above the configured limit should be rejected."""
    config = replace(ReportConfig.from_env(), max_upload_bytes=8)

    with pytest.raises(UploadInvalidError):
        ingest_goal_records(_upload("goals_single.csv"), STANDARD_LAYOUT, config)


def test_ingest_goal_records_reads_xlsx(tmp_path: Path) -> None:
    """XLSX uploads should go through the spreadsheet reader."""
    openpyxl = pytest.importorskip("openpyxl")
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.append(["Goal", "Indicator", "Target", "Current", "Status"])
    sheet.append([1, "Poverty rate", 100, 80, "On Track"])
    sheet.append([None, "Missing goal", 100, 80, "On Track"])
    xlsx_path = tmp_path / "upload-7f3a"
    workbook.save(xlsx_path)
    upload = UploadedFile(original_filename="Goals.XLSX", path=xlsx_path)

    records = ingest_goal_records(upload, STANDARD_LAYOUT)

    assert [(record.goal_number, record.current_value) for record in records] == [("1", 80.0)]


def test_ingest_goal_records_reads_legacy_workbook() -> None:
    """XLS uploads should pass through the header skip and normalization."""
    pytest.importorskip("xlrd")

    records = ingest_goal_records(_upload("goals_single.xls"), STANDARD_LAYOUT)

    assert records == [GoalRecord("1", "Ind", 100.0, 50.0, "Ok")]
