"""Public SDK surface for the SDG report builder.

This module provides a stable import path for library users.
It re-exports the primary client, typed models, and pipeline steps.
"""

from __future__ import annotations

from core.config import ReportConfig
from core.types import (
    GoalRecord,
    Layout,
    ProgressBand,
    ProgressResult,
    ReportDocument,
    ReportFailure,
    ReportRequest,
    ReportSuccess,
    UploadedFile,
)
from ingest.format_registry import build_format_registry, resolve_layout
from ingest.pipeline import ingest_goal_records
from report.builder import build_report
from report.generation import ReportClient, generate_report
from report.pdf_renderer import render_pdf
from report.progress import compute_progress

__all__ = [
    "GoalRecord",
    "Layout",
    "ProgressBand",
    "ProgressResult",
    "ReportClient",
    "ReportConfig",
    "ReportDocument",
    "ReportFailure",
    "ReportRequest",
    "ReportSuccess",
    "UploadedFile",
    "build_format_registry",
    "build_report",
    "compute_progress",
    "generate_report",
    "ingest_goal_records",
    "render_pdf",
    "resolve_layout",
]
