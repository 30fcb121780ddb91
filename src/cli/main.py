"""Report builder CLI entry points.
This module exposes commands for report generation and format listing.
It maps argparse commands onto the report client.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from cli.generate_command import add_generate_command, run_generate_command
from core.config import ReportConfig
from core.errors import ReportError
from report.generation import ReportClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="sdg-report", description="SDG progress report builder")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_generate_command(subparsers)
    _add_formats_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = ReportClient(ReportConfig.from_env())
    except ReportError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.command == "generate":
        return run_generate_command(client, args)
    if args.command == "formats":
        return _run_formats_command(client)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_formats_command(client: ReportClient) -> int:
    """Handle formats command.

    Args:
        client: Report client.

    Returns:
        Exit code.
    """
    for format_name in client.supported_formats():
        print(format_name)
    return 0


def _add_formats_command(subparsers: Any) -> None:
    """Register formats subcommand."""
    subparsers.add_parser("formats", help="List registered data formats")
