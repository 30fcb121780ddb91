"""Report page assembly.

This module lays out the cover page and one page per goal record
using fixed margins and fixed cursor advances per element. It
produces renderer-independent page descriptions; drawing happens
in ``report.pdf_renderer``.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from core.constants import (
    BODY_FONT_SIZE,
    BODY_LINE_HEIGHT_MM,
    COVER_DATE_FONT_SIZE,
    COVER_DATE_HEIGHT_MM,
    COVER_TITLE_FONT_SIZE,
    COVER_TITLE_HEIGHT_MM,
    GOAL_HEADER_FONT_SIZE,
    GOAL_HEADER_HEIGHT_MM,
    LABEL_COLUMN_WIDTH_MM,
    PROGRESS_BAR_BACKGROUND,
    PROGRESS_BAR_GAP_MM,
    PROGRESS_BAR_HEIGHT_MM,
    PROGRESS_BAR_WIDTH_MM,
    PROGRESS_LABEL_OFFSET_MM,
    REPORT_AUTHOR,
    REPORT_DATE_FORMAT,
    REPORT_TITLE,
    SECTION_GAP_MM,
)
from core.types import (
    GoalRecord,
    Page,
    PageElement,
    ProgressBar,
    ReportDocument,
    TextBlock,
    TextCell,
    VerticalGap,
)
from report.progress import band_color, compute_progress


def build_report(
    records: Sequence[GoalRecord],
    generated_on: date | None = None,
    title: str = REPORT_TITLE,
    author: str = REPORT_AUTHOR,
) -> ReportDocument:
    """Assemble the report document for ordered goal records.

    Args:
        records: Goal records in display order.
        generated_on: Date printed on the cover; defaults to today.
        title: Report title.
        author: Report author metadata.

    Returns:
        Document with one cover page followed by one page per record.
    """
    report_date = generated_on or date.today()
    pages = [build_cover_page(title, report_date)]
    pages.extend(build_goal_page(record) for record in records)
    return ReportDocument(
        title=title,
        author=author,
        generated_on=report_date,
        pages=tuple(pages),
    )


def build_cover_page(title: str, generated_on: date) -> Page:
    """Build the title page with the generation date."""
    elements = (
        TextCell(
            text=title,
            height=COVER_TITLE_HEIGHT_MM,
            font_size=COVER_TITLE_FONT_SIZE,
            bold=True,
            align="center",
        ),
        TextCell(
            text=f"Generated on: {generated_on.strftime(REPORT_DATE_FORMAT)}",
            height=COVER_DATE_HEIGHT_MM,
            font_size=COVER_DATE_FONT_SIZE,
            align="center",
        ),
    )
    return Page(kind="cover", elements=elements)


def build_goal_page(record: GoalRecord) -> Page:
    """Build one goal page with its values and progress bar."""
    elements: list[PageElement] = [
        TextCell(
            text=f"Goal {record.goal_number}",
            height=GOAL_HEADER_HEIGHT_MM,
            font_size=GOAL_HEADER_FONT_SIZE,
            bold=True,
        ),
        TextBlock(
            text=f"Indicator: {record.indicator}",
            line_height=BODY_LINE_HEIGHT_MM,
            font_size=BODY_FONT_SIZE,
        ),
        VerticalGap(height=SECTION_GAP_MM),
        TextCell(
            text="Progress Overview:",
            height=BODY_LINE_HEIGHT_MM,
            font_size=BODY_FONT_SIZE,
            bold=True,
        ),
    ]
    elements.extend(_label_value_row("Target Value:", format_value(record.target_value)))
    elements.extend(_label_value_row("Current Value:", format_value(record.current_value)))
    elements.extend(_label_value_row("Status:", record.progress_status))
    elements.extend(_progress_elements(record))
    return Page(kind="goal", elements=tuple(elements))


def format_value(value: float) -> str:
    """Format a numeric value with thousands separators and two decimals."""
    return f"{value:,.2f}"


def format_percent_label(percent: float) -> str:
    """Return the caption printed under a progress bar."""
    return f"{_round_half_away(percent)}% Progress Towards Target"


def _label_value_row(label: str, value: str) -> tuple[TextCell, TextCell]:
    return (
        TextCell(
            text=label,
            height=BODY_LINE_HEIGHT_MM,
            font_size=BODY_FONT_SIZE,
            width=LABEL_COLUMN_WIDTH_MM,
            line_break=False,
        ),
        TextCell(text=value, height=BODY_LINE_HEIGHT_MM, font_size=BODY_FONT_SIZE),
    )


def _progress_elements(record: GoalRecord) -> tuple[PageElement, ...]:
    progress = compute_progress(record)
    return (
        VerticalGap(height=PROGRESS_BAR_GAP_MM),
        ProgressBar(
            percent=progress.percent,
            fill_color=band_color(progress.band),
            background_color=PROGRESS_BAR_BACKGROUND,
            width=PROGRESS_BAR_WIDTH_MM,
            height=PROGRESS_BAR_HEIGHT_MM,
            advance=PROGRESS_LABEL_OFFSET_MM,
        ),
        TextCell(
            text=format_percent_label(progress.percent),
            height=BODY_LINE_HEIGHT_MM,
            font_size=BODY_FONT_SIZE,
            align="center",
        ),
    )


def _round_half_away(value: float) -> int:
    """Round to the nearest integer with halves away from zero."""
    if value < 0:
        return -int(-value + 0.5)
    return int(value + 0.5)
