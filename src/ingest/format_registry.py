"""Named column layouts for supported data formats.

This module resolves a logical format name into a column layout.
The built-in ``standard`` layout can be extended with a YAML file
declaring more named layouts; the resulting registry is read-only.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, cast

from core.constants import LAYOUT_FIELD_NAMES, STANDARD_FORMAT_NAME
from core.errors import ReportConfigError, ReportDependencyError, UnsupportedDataFormatError
from core.types import Layout

STANDARD_LAYOUT = Layout(
    goal_number=0,
    indicator=1,
    target_value=2,
    current_value=3,
    progress_status=4,
)
BUILTIN_LAYOUTS: Mapping[str, Layout] = MappingProxyType({STANDARD_FORMAT_NAME: STANDARD_LAYOUT})


def build_format_registry(layouts_file: Path | None = None) -> Mapping[str, Layout]:
    """Build the read-only format registry.

    Args:
        layouts_file: Optional YAML file with additional named layouts.

    Returns:
        Immutable mapping from format name to layout.

    Raises:
        ReportDependencyError: If a layouts file is given and PyYAML is missing.
        ReportConfigError: If the layouts file is unreadable or invalid.
    """
    layouts = dict(BUILTIN_LAYOUTS)
    if layouts_file is not None:
        layouts.update(load_layouts_file(layouts_file))
    return MappingProxyType(layouts)


def resolve_layout(
    format_name: str,
    registry: Mapping[str, Layout] = BUILTIN_LAYOUTS,
) -> Layout:
    """Return the layout registered under a format name.

    Raises:
        UnsupportedDataFormatError: If the name is not registered.
    """
    layout = registry.get(format_name)
    if layout is None:
        supported = ", ".join(sorted(registry))
        raise UnsupportedDataFormatError(
            f"Unsupported data format '{format_name}'. Choose one of: {supported}."
        )
    return layout


def supported_formats(registry: Mapping[str, Layout] = BUILTIN_LAYOUTS) -> tuple[str, ...]:
    """Return registered format names in sorted order."""
    return tuple(sorted(registry))


def load_layouts_file(layouts_file: Path) -> dict[str, Layout]:
    """Parse named layouts from a YAML file.

    The file holds a ``formats`` mapping of format name to a mapping
    of the five field names to zero-based column positions.

    Args:
        layouts_file: Path to the YAML file.

    Returns:
        Parsed layouts keyed by format name.

    Raises:
        ReportDependencyError: If PyYAML is unavailable.
        ReportConfigError: If the file is missing or fails schema checks.
    """
    payload = _load_yaml_payload(layouts_file)
    if not isinstance(payload, Mapping) or not isinstance(payload.get("formats"), Mapping):
        raise ReportConfigError(
            f"Invalid layouts file {layouts_file}: expected a top-level 'formats' mapping."
        )
    formats = cast(Mapping[object, object], payload["formats"])
    return {
        _expect_format_name(name, layouts_file): _parse_layout(name, fields, layouts_file)
        for name, fields in formats.items()
    }


def _load_yaml_payload(layouts_file: Path) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise ReportDependencyError(
            "Layout files require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    if not layouts_file.is_file():
        raise ReportConfigError(
            f"Layouts file does not exist at {layouts_file}. "
            "Set SDG_REPORT_LAYOUTS_FILE to an existing YAML file."
        )
    try:
        return cast(object, yaml.safe_load(layouts_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ReportConfigError(
            f"Failed to read layouts file {layouts_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise ReportConfigError(
            f"Failed to parse layouts file {layouts_file}: {error}. Fix YAML syntax and retry."
        ) from error


def _expect_format_name(name: object, layouts_file: Path) -> str:
    if isinstance(name, str) and name.strip():
        return name.strip()
    raise ReportConfigError(
        f"Invalid format name {name!r} in {layouts_file}: expected a non-empty string."
    )


def _parse_layout(name: object, fields: object, layouts_file: Path) -> Layout:
    if not isinstance(fields, Mapping):
        raise ReportConfigError(
            f"Invalid layout '{name}' in {layouts_file}: expected a field-to-column mapping."
        )
    missing = [field_name for field_name in LAYOUT_FIELD_NAMES if field_name not in fields]
    unknown = sorted(str(key) for key in fields if key not in LAYOUT_FIELD_NAMES)
    if missing or unknown:
        raise ReportConfigError(
            f"Invalid layout '{name}' in {layouts_file}: "
            f"missing fields {missing}, unknown fields {unknown}."
        )
    positions: dict[str, int] = {}
    for field_name in LAYOUT_FIELD_NAMES:
        value = fields[field_name]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ReportConfigError(
                f"Invalid layout '{name}' in {layouts_file}: "
                f"'{field_name}' must be an integer column position."
            )
        positions[field_name] = value
    return Layout(**positions)
