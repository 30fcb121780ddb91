"""Shared typed models.

This module defines immutable data models used by the ingest,
report, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Literal, Union

from core.constants import DEFAULT_TEMPLATE_NAME, STANDARD_FORMAT_NAME
from core.errors import ReportConfigError

RawRow = tuple[str, ...]
RgbColor = tuple[int, int, int]
TextAlign = Literal["left", "center"]
PageKind = Literal["cover", "goal"]


@dataclass(frozen=True)
class Layout:
    """Column positions of each semantic field for one data format.

    Attributes:
        goal_number: Column holding the goal identifier.
        indicator: Column holding the indicator description.
        target_value: Column holding the numeric target.
        current_value: Column holding the numeric current value.
        progress_status: Column holding the status label.
    """

    goal_number: int
    indicator: int
    target_value: int
    current_value: int
    progress_status: int

    def __post_init__(self) -> None:
        positions = self.positions()
        if any(position < 0 for position in positions):
            raise ReportConfigError(
                f"Invalid layout {positions}: column positions must be non-negative."
            )
        if len(set(positions)) != len(positions):
            raise ReportConfigError(
                f"Invalid layout {positions}: each field needs a distinct column position."
            )

    def positions(self) -> tuple[int, ...]:
        """Return column positions in canonical field order."""
        return (
            self.goal_number,
            self.indicator,
            self.target_value,
            self.current_value,
            self.progress_status,
        )

    @property
    def min_row_length(self) -> int:
        """Smallest row length that covers every referenced column."""
        return max(self.positions()) + 1


@dataclass(frozen=True)
class GoalRecord:
    """Normalized progress data for one tracked goal.

    Attributes:
        goal_number: Goal identifier as written in the source.
        indicator: Indicator description text.
        target_value: Numeric target value.
        current_value: Numeric current value.
        progress_status: Free-form status label.
    """

    goal_number: str
    indicator: str
    target_value: float
    current_value: float
    progress_status: str


class ProgressBand(Enum):
    """Qualitative completion bucket."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ProgressResult:
    """Completion percentage and its band."""

    percent: float
    band: ProgressBand


@dataclass(frozen=True)
class TextCell:
    """Single-line text cell that advances the cursor by its height.

    Attributes:
        text: Cell content.
        height: Cell height in millimetres.
        font_size: Font size in points.
        bold: Whether to use the bold face.
        align: Horizontal alignment inside the cell.
        width: Cell width in millimetres, or None to span to the right margin.
        line_break: Whether the cursor moves to the next line after the cell.
    """

    text: str
    height: float
    font_size: int
    bold: bool = False
    align: TextAlign = "left"
    width: float | None = None
    line_break: bool = True


@dataclass(frozen=True)
class TextBlock:
    """Wrapped text spanning the content width, one line_height per line."""

    text: str
    line_height: float
    font_size: int
    bold: bool = False


@dataclass(frozen=True)
class VerticalGap:
    """Blank vertical space in millimetres."""

    height: float


@dataclass(frozen=True)
class ProgressBar:
    """Filled progress bar drawn over a neutral background.

    Attributes:
        percent: Completion percent used for the fill width.
        fill_color: RGB fill color of the completed part.
        background_color: RGB color of the full-width track.
        width: Track width in millimetres.
        height: Track height in millimetres.
        advance: Cursor advance after drawing, in millimetres.
    """

    percent: float
    fill_color: RgbColor
    background_color: RgbColor
    width: float
    height: float
    advance: float

    @property
    def fill_width(self) -> float:
        """Width of the filled part; negative progress draws nothing."""
        return self.width * max(self.percent, 0.0) / 100


PageElement = Union[TextCell, TextBlock, VerticalGap, ProgressBar]


@dataclass(frozen=True)
class Page:
    """One logical report page with ordered layout elements."""

    kind: PageKind
    elements: tuple[PageElement, ...]


@dataclass(frozen=True)
class ReportDocument:
    """Finalized report: cover page followed by one page per goal.

    Attributes:
        title: Document title, also written to PDF metadata.
        author: Document author metadata.
        generated_on: Report generation date shown on the cover.
        pages: Ordered logical pages.
    """

    title: str
    author: str
    generated_on: date
    pages: tuple[Page, ...]

    @property
    def page_count(self) -> int:
        """Return the number of logical pages."""
        return len(self.pages)


@dataclass(frozen=True)
class UploadedFile:
    """A received upload stored on local disk.

    Attributes:
        original_filename: Client-side file name used to derive the type.
        path: Local path of the stored upload.
        declared_size: Size announced by the transfer, when known.
    """

    original_filename: str
    path: Path
    declared_size: int | None = None

    @property
    def extension(self) -> str:
        """Lowercase extension without the leading dot."""
        return Path(self.original_filename).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class ReportRequest:
    """One report generation request.

    Attributes:
        upload: Uploaded tabular file.
        template_name: Requested report template.
        format_name: Logical column layout name.
    """

    upload: UploadedFile
    template_name: str = DEFAULT_TEMPLATE_NAME
    format_name: str = STANDARD_FORMAT_NAME


@dataclass(frozen=True)
class ReportSuccess:
    """Rendered report ready for download."""

    content: bytes
    filename: str
    content_type: str
    record_count: int
    page_count: int
    ok: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class ReportFailure:
    """Single user-facing failure for a report request."""

    error_code: str
    message: str
    ok: Literal[False] = field(default=False, init=False)


ReportOutcome = Union[ReportSuccess, ReportFailure]
