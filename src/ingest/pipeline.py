"""Ingest orchestration for uploaded goal progress files.

This module checks the upload, selects a row reader by extension,
skips the header row, filters invalid rows, and normalizes the rest
into ordered goal records.
"""

from __future__ import annotations

from typing import Iterable

from core.config import ReportConfig
from core.constants import DEFAULT_CSV_ENCODING, DEFAULT_MAX_UPLOAD_BYTES
from core.errors import UploadInvalidError
from core.logging_config import get_logger
from core.types import GoalRecord, Layout, RawRow, UploadedFile
from ingest.record_normalizer import normalize_row
from ingest.row_readers import select_row_reader
from ingest.row_validation import is_valid_row

_LOGGER = get_logger(__name__)


def ingest_goal_records(
    upload: UploadedFile,
    layout: Layout,
    config: ReportConfig | None = None,
) -> list[GoalRecord]:
    """Read an upload into ordered goal records.

    The first row is always treated as a header and discarded. Rows
    that fail validation, or are too short for the layout, are dropped.

    Args:
        upload: Uploaded file and its original name.
        layout: Column layout for the requested format.
        config: Optional runtime configuration for limits and encoding.

    Returns:
        Goal records in source row order.

    Raises:
        UnsupportedFileTypeError: If the extension is not csv, xls, or xlsx.
        UploadInvalidError: If the upload is missing, truncated, or too large.
        ReadError: If the file cannot be decoded.
    """
    csv_encoding = config.csv_encoding if config else DEFAULT_CSV_ENCODING
    max_upload_bytes = config.max_upload_bytes if config else DEFAULT_MAX_UPLOAD_BYTES
    reader = select_row_reader(upload.extension, csv_encoding)
    _check_upload(upload, max_upload_bytes)
    rows = reader.read_rows(upload.path)
    records, dropped_count = _normalize_rows(_skip_header(rows), layout)
    if dropped_count:
        _LOGGER.info(
            "rows_dropped",
            filename=upload.original_filename,
            dropped_count=dropped_count,
        )
    _LOGGER.info(
        "ingest_completed",
        filename=upload.original_filename,
        extension=upload.extension,
        record_count=len(records),
    )
    return records


def _check_upload(upload: UploadedFile, max_upload_bytes: int) -> None:
    """Reject uploads that are not a complete file on disk.

    Raises:
        UploadInvalidError: If the upload fails any check.
    """
    if not upload.path.is_file():
        raise UploadInvalidError(
            f"Upload '{upload.original_filename}' has no stored file at {upload.path}."
        )
    actual_size = upload.path.stat().st_size
    if upload.declared_size is not None and actual_size != upload.declared_size:
        raise UploadInvalidError(
            f"Upload '{upload.original_filename}' is incomplete: "
            f"expected {upload.declared_size} bytes, found {actual_size}."
        )
    if actual_size > max_upload_bytes:
        raise UploadInvalidError(
            f"Upload '{upload.original_filename}' is {actual_size} bytes, "
            f"above the {max_upload_bytes} byte limit."
        )


def _skip_header(rows: Iterable[RawRow]) -> Iterable[RawRow]:
    """Drop exactly the first row regardless of its content."""
    iterator = iter(rows)
    next(iterator, None)
    return iterator


def _normalize_rows(rows: Iterable[RawRow], layout: Layout) -> tuple[list[GoalRecord], int]:
    """Normalize valid rows and count the dropped ones."""
    records: list[GoalRecord] = []
    dropped_count = 0
    for row in rows:
        if is_valid_row(row) and len(row) >= layout.min_row_length:
            records.append(normalize_row(row, layout))
        else:
            dropped_count += 1
    return records, dropped_count
