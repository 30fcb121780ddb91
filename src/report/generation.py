"""Report generation entry point.

This module runs the full upload-to-PDF pipeline and returns an
explicit success or failure result. Callers such as the CLI or a
web handler decide how to present a failure; detailed causes are
logged here and never copied into the user-facing message.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping

from core.config import ReportConfig
from core.constants import REPORT_CONTENT_TYPE, REPORT_FILE_NAME, SUPPORTED_TEMPLATE_NAMES
from core.errors import ReportError, TemplateSelectionError
from core.logging_config import get_logger
from core.types import Layout, ReportFailure, ReportOutcome, ReportRequest, ReportSuccess
from ingest.format_registry import build_format_registry, resolve_layout, supported_formats
from ingest.pipeline import ingest_goal_records
from report.builder import build_report
from report.pdf_renderer import render_pdf

_LOGGER = get_logger(__name__)


class ReportClient:
    """Primary entry point for report generation requests."""

    def __init__(
        self,
        config: ReportConfig | None = None,
        registry: Mapping[str, Layout] | None = None,
    ) -> None:
        """Create a client with a process-wide format registry.

        Args:
            config: Optional runtime configuration.
            registry: Optional prebuilt registry; built from config when omitted.

        Raises:
            ReportConfigError: If the configured layouts file is invalid.
        """
        self._config = config or ReportConfig.from_env()
        self._registry = registry or build_format_registry(self._config.layouts_file)

    @property
    def config(self) -> ReportConfig:
        return self._config

    def supported_formats(self) -> tuple[str, ...]:
        """Return registered data format names."""
        return supported_formats(self._registry)

    def generate(self, request: ReportRequest, generated_on: date | None = None) -> ReportOutcome:
        """Generate a PDF report for one request.

        Args:
            request: Upload, template, and format selection.
            generated_on: Optional cover date; defaults to today.

        Returns:
            ``ReportSuccess`` with the PDF bytes, or ``ReportFailure``
            carrying one user-safe message.
        """
        try:
            success = self._generate(request, generated_on)
        except ReportError as error:
            _LOGGER.error(
                "report_failed",
                filename=request.upload.original_filename,
                error_code=error.error_code,
                error_type=type(error).__name__,
                detail=str(error),
            )
            return ReportFailure(error_code=error.error_code, message=error.user_message)
        _LOGGER.info(
            "report_generated",
            filename=request.upload.original_filename,
            template=request.template_name,
            format_name=request.format_name,
            record_count=success.record_count,
            page_count=success.page_count,
        )
        return success

    def _generate(self, request: ReportRequest, generated_on: date | None) -> ReportSuccess:
        validate_template_name(request.template_name)
        layout = resolve_layout(request.format_name, self._registry)
        records = ingest_goal_records(request.upload, layout, self._config)
        document = build_report(records, generated_on=generated_on)
        content = render_pdf(document)
        return ReportSuccess(
            content=content,
            filename=REPORT_FILE_NAME,
            content_type=REPORT_CONTENT_TYPE,
            record_count=len(records),
            page_count=document.page_count,
        )


def generate_report(
    request: ReportRequest,
    config: ReportConfig | None = None,
    generated_on: date | None = None,
) -> ReportOutcome:
    """Generate a report with a one-off client.

    Args:
        request: Upload, template, and format selection.
        config: Optional runtime configuration.
        generated_on: Optional cover date.

    Returns:
        Success or failure result.
    """
    return ReportClient(config).generate(request, generated_on)


def validate_template_name(template_name: str) -> str:
    """Check the template selection against the offered templates.

    The template is accepted for compatibility with the upload form;
    every template currently renders the same report structure.

    Raises:
        TemplateSelectionError: If the name is empty or unknown.
    """
    normalized = template_name.strip().lower()
    if not normalized:
        raise TemplateSelectionError("Template selection is required.")
    if normalized not in SUPPORTED_TEMPLATE_NAMES:
        supported = ", ".join(SUPPORTED_TEMPLATE_NAMES)
        raise TemplateSelectionError(
            f"Unknown template '{template_name}'. Choose one of: {supported}."
        )
    return normalized
