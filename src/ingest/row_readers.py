"""Tabular row readers for uploaded files.

This module turns CSV and spreadsheet uploads into rows of string
cells. The reader is chosen purely by file extension.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Protocol

from core.constants import CSV_EXTENSION, DEFAULT_CSV_ENCODING, SUPPORTED_FILE_EXTENSIONS
from core.errors import ReadError, ReportDependencyError, UnsupportedFileTypeError
from core.types import RawRow


class RowReader(Protocol):
    """Capability of producing ordered raw rows from a file."""

    def read_rows(self, path: Path) -> Iterator[RawRow]:
        """Yield rows of string cells in source order, header included."""
        ...


@dataclass(frozen=True)
class CsvRowReader:
    """Lazy CSV reader that decodes one line at a time.

    Attributes:
        encoding: Text encoding of the CSV file.
    """

    encoding: str = DEFAULT_CSV_ENCODING

    def read_rows(self, path: Path) -> Iterator[RawRow]:
        """Yield CSV rows as tuples of strings.

        Raises:
            ReadError: If the file cannot be opened or decoded.
        """
        try:
            with path.open("r", encoding=self.encoding, newline="") as handle:
                for row in csv.reader(handle):
                    yield tuple(row)
        except (OSError, UnicodeDecodeError, csv.Error) as error:
            raise ReadError(f"Failed to read CSV file {path}: {error}") from error


@dataclass(frozen=True)
class XlsxRowReader:
    """Reader for Office Open XML workbooks using the active worksheet."""

    def read_rows(self, path: Path) -> Iterator[RawRow]:
        """Yield worksheet rows as tuples of strings.

        Raises:
            ReportDependencyError: If openpyxl is missing.
            ReadError: If the workbook cannot be opened.
        """
        openpyxl = _import_openpyxl()
        # Stored uploads may lack an .xlsx suffix, so openpyxl gets a file object.
        try:
            with path.open("rb") as handle:
                workbook = openpyxl.load_workbook(handle, data_only=True)
                try:
                    rows = [
                        tuple(_cell_to_text(value) for value in row)
                        for row in workbook.active.iter_rows(values_only=True)
                    ]
                finally:
                    workbook.close()
        except Exception as error:
            raise ReadError(f"Failed to read spreadsheet {path}: {error}") from error
        yield from rows


@dataclass(frozen=True)
class XlsRowReader:
    """Reader for legacy BIFF workbooks using the first worksheet."""

    def read_rows(self, path: Path) -> Iterator[RawRow]:
        """Yield worksheet rows as tuples of strings.

        Raises:
            ReportDependencyError: If xlrd is missing.
            ReadError: If the workbook cannot be opened.
        """
        xlrd = _import_xlrd()
        try:
            with xlrd.open_workbook(str(path)) as workbook:
                sheet = workbook.sheet_by_index(0)
                rows = [
                    tuple(_cell_to_text(value) for value in sheet.row_values(index))
                    for index in range(sheet.nrows)
                ]
        except Exception as error:
            raise ReadError(f"Failed to read spreadsheet {path}: {error}") from error
        yield from rows


def select_row_reader(extension: str, csv_encoding: str = DEFAULT_CSV_ENCODING) -> RowReader:
    """Choose the row reader for a declared file extension.

    Args:
        extension: File extension without the leading dot, any case.
        csv_encoding: Encoding used when the CSV reader is selected.

    Returns:
        Reader matching the extension.

    Raises:
        UnsupportedFileTypeError: If the extension is not supported.
    """
    normalized = extension.lower().lstrip(".")
    if normalized == CSV_EXTENSION:
        return CsvRowReader(encoding=csv_encoding)
    if normalized == "xlsx":
        return XlsxRowReader()
    if normalized == "xls":
        return XlsRowReader()
    supported = ", ".join(SUPPORTED_FILE_EXTENSIONS)
    raise UnsupportedFileTypeError(
        f"Unsupported file extension '{extension}'. Upload one of: {supported}."
    )


def _cell_to_text(value: object) -> str:
    """Render a spreadsheet cell value as text."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _import_openpyxl() -> Any:
    try:
        import openpyxl
    except ImportError as error:
        raise ReportDependencyError(
            "XLSX support requires openpyxl, but it is not installed. "
            "Install openpyxl to read .xlsx uploads."
        ) from error
    return openpyxl


def _import_xlrd() -> Any:
    try:
        import xlrd
    except ImportError as error:
        raise ReportDependencyError(
            "XLS support requires xlrd, but it is not installed. "
            "Install xlrd to read .xls uploads."
        ) from error
    return xlrd
