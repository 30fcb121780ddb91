"""Generate command wiring for the report CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from core.constants import DEFAULT_TEMPLATE_NAME, STANDARD_FORMAT_NAME, SUPPORTED_TEMPLATE_NAMES
from core.types import ReportFailure, ReportRequest, UploadedFile
from report.generation import ReportClient


def add_generate_command(subparsers: Any) -> None:
    """Register generate subcommand."""
    parser = subparsers.add_parser("generate", help="Build a PDF report from a data file")
    parser.add_argument("source", help="CSV, XLS, or XLSX file with goal progress rows")
    parser.add_argument(
        "--template",
        default=DEFAULT_TEMPLATE_NAME,
        type=str.lower,
        choices=SUPPORTED_TEMPLATE_NAMES,
        help="Report template, case-insensitive",
    )
    parser.add_argument(
        "--format",
        dest="format_name",
        default=STANDARD_FORMAT_NAME,
        help="Logical column layout of the data file",
    )
    parser.add_argument("--output-dir", help="Override SDG_REPORT_OUTPUT_DIR for this command")


def run_generate_command(client: ReportClient, args: argparse.Namespace) -> int:
    """Generate a report and write it into the output directory.

    Args:
        client: Report client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source_path = Path(args.source).expanduser().resolve()
    request = ReportRequest(
        upload=UploadedFile(original_filename=source_path.name, path=source_path),
        template_name=args.template,
        format_name=args.format_name,
    )
    outcome = client.generate(request)
    if isinstance(outcome, ReportFailure):
        print(f"error: {outcome.message}", file=sys.stderr)
        return 1
    output_dir = (
        Path(args.output_dir).expanduser().resolve()
        if args.output_dir
        else client.config.output_dir
    )
    output_dir.mkdir(parents=True, exist_ok=True)
    report_path = output_dir / outcome.filename
    report_path.write_bytes(outcome.content)
    print(report_path)
    return 0
