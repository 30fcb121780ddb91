"""Runtime configuration model for the report builder.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_CSV_ENCODING, DEFAULT_MAX_UPLOAD_BYTES, DEFAULT_OUTPUT_DIR
from core.errors import ReportConfigError


@dataclass(frozen=True)
class ReportConfig:
    """Validated runtime configuration.

    Attributes:
        output_dir: Directory where the CLI writes generated reports.
        max_upload_bytes: Largest accepted upload size in bytes.
        csv_encoding: Text encoding used to decode CSV uploads.
        layouts_file: Optional YAML file declaring extra column layouts.
    """

    output_dir: Path
    max_upload_bytes: int
    csv_encoding: str
    layouts_file: Path | None

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ReportConfigError: If environment values are invalid.
        """
        output_dir_value = os.getenv("SDG_REPORT_OUTPUT_DIR", str(DEFAULT_OUTPUT_DIR))
        max_upload_value = os.getenv("SDG_REPORT_MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))
        csv_encoding = os.getenv("SDG_REPORT_CSV_ENCODING", DEFAULT_CSV_ENCODING)
        layouts_file_value = os.getenv("SDG_REPORT_LAYOUTS_FILE")
        return cls(
            output_dir=Path(output_dir_value).expanduser().resolve(),
            max_upload_bytes=_parse_max_upload_bytes(max_upload_value),
            csv_encoding=_validate_encoding(csv_encoding),
            layouts_file=(
                Path(layouts_file_value).expanduser().resolve() if layouts_file_value else None
            ),
        )


def _parse_max_upload_bytes(raw_value: str) -> int:
    """Parse the upload size limit environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive byte count.

    Raises:
        ReportConfigError: If value is not a positive integer.
    """
    try:
        max_upload_bytes = int(raw_value)
    except ValueError as error:
        raise ReportConfigError(
            "Invalid SDG_REPORT_MAX_UPLOAD_BYTES value: "
            f"expected integer, got '{raw_value}'. "
            "Set SDG_REPORT_MAX_UPLOAD_BYTES to a numeric value."
        ) from error
    if max_upload_bytes <= 0:
        raise ReportConfigError(
            "Invalid SDG_REPORT_MAX_UPLOAD_BYTES value: "
            f"expected a positive integer, got {max_upload_bytes}."
        )
    return max_upload_bytes


def _validate_encoding(encoding: str) -> str:
    """Check that the CSV encoding name is known to the codec registry."""
    try:
        codecs.lookup(encoding)
    except LookupError as error:
        raise ReportConfigError(
            f"Invalid SDG_REPORT_CSV_ENCODING value: unknown encoding '{encoding}'. "
            "Use a Python codec name such as utf-8 or latin-1."
        ) from error
    return encoding
