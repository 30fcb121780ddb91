"""Progress percentage and color banding for goal records.

Percent completion is clamped at 100 on the upper side only, so a
negative current value keeps its negative percentage. A zero target
is reported as zero progress, and so is a ratio that is not a finite
number.
"""

from __future__ import annotations

import math

from core.constants import (
    HIGH_BAND_COLOR,
    HIGH_BAND_THRESHOLD,
    LOW_BAND_COLOR,
    MAX_PROGRESS_PERCENT,
    MEDIUM_BAND_COLOR,
    MEDIUM_BAND_THRESHOLD,
)
from core.types import GoalRecord, ProgressBand, ProgressResult, RgbColor

_BAND_COLORS: dict[ProgressBand, RgbColor] = {
    ProgressBand.HIGH: HIGH_BAND_COLOR,
    ProgressBand.MEDIUM: MEDIUM_BAND_COLOR,
    ProgressBand.LOW: LOW_BAND_COLOR,
}


def compute_progress(record: GoalRecord) -> ProgressResult:
    """Compute completion percent and band for one record.

    Args:
        record: Normalized goal record.

    Returns:
        Percent toward target and its qualitative band.
    """
    percent = completion_percent(record.current_value, record.target_value)
    return ProgressResult(percent=percent, band=band_for_percent(percent))


def completion_percent(current_value: float, target_value: float) -> float:
    """Return ``current / target * 100`` capped at 100, or 0 for a zero target."""
    if target_value == 0:
        return 0.0
    percent = min(current_value / target_value * 100, MAX_PROGRESS_PERCENT)
    return percent if math.isfinite(percent) else 0.0


def band_for_percent(percent: float) -> ProgressBand:
    """Map a percentage onto the Low/Medium/High bands."""
    if percent >= HIGH_BAND_THRESHOLD:
        return ProgressBand.HIGH
    if percent >= MEDIUM_BAND_THRESHOLD:
        return ProgressBand.MEDIUM
    return ProgressBand.LOW


def band_color(band: ProgressBand) -> RgbColor:
    """Return the RGB fill color for a band."""
    return _BAND_COLORS[band]
