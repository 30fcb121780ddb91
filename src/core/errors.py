"""Report builder exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base exception for all report builder failures."""

    error_code = "report_failed"
    user_message = "The report could not be generated."


class ReportConfigError(ReportError):
    """Raised for invalid runtime configuration or layout definitions."""

    error_code = "invalid_configuration"
    user_message = "The report builder is misconfigured. Contact the administrator."


class ReportDependencyError(ReportError):
    """Raised when an optional runtime dependency is missing."""

    error_code = "missing_dependency"
    user_message = "The report builder is missing a required component."


class UnsupportedDataFormatError(ReportError):
    """Raised when a logical data format name is not registered."""

    error_code = "unsupported_data_format"
    user_message = "Unsupported data format."


class UnsupportedFileTypeError(ReportError):
    """Raised when an upload extension is not a supported tabular type."""

    error_code = "unsupported_file_type"
    user_message = "Unsupported file format. Please upload CSV, XLS, or XLSX files."


class UploadInvalidError(ReportError):
    """Raised when an upload is missing, truncated, or oversized."""

    error_code = "upload_invalid"
    user_message = "Invalid file upload."


class ReadError(ReportError):
    """Raised when a tabular file cannot be decoded."""

    error_code = "read_error"
    user_message = "The uploaded file could not be read. Check that it is not corrupt."


class TemplateSelectionError(ReportError):
    """Raised when the report template is missing or unknown."""

    error_code = "template_invalid"
    user_message = "Please select a valid report template."


class ReportRenderError(ReportError):
    """Raised when the PDF renderer fails."""

    error_code = "render_failed"
    user_message = "The report could not be rendered."
