"""Validation of column definitions.

Works on plain mappings as well as ColumnDefinition models, so stored or
imported configurations can be checked before they are parsed.
"""

import json
import math
from collections.abc import Mapping
from typing import Any

from ..renderers.builtin import RendererTypes
from ..renderers.schemas import RenderConfig, ValidationResult
from .schemas import ColumnDefinition, ColumnsValidationResult

MIN_COLUMN_WIDTH = 50
MAX_COLUMN_WIDTH = 1000


def _as_mapping(column: Any) -> Mapping:
    if isinstance(column, ColumnDefinition):
        return column.model_dump(by_alias=True)
    if isinstance(column, Mapping):
        return column
    return {}


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _width_ok(width: Any) -> bool:
    if isinstance(width, bool):
        return False
    try:
        number = float(width)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and MIN_COLUMN_WIDTH <= number <= MAX_COLUMN_WIDTH


def validate_column(column: Any, index: int) -> list[str]:
    """Validate one column; messages are prefixed with its 1-based position."""
    data = _as_mapping(column)
    label = f"Column {index + 1}"
    errors = []

    if _blank(data.get("title")):
        errors.append(f"{label}: title is required")

    if _blank(data.get("dataIndex", data.get("data_index"))):
        errors.append(f"{label}: data field is required")

    width = data.get("width")
    if width is not None and not _width_ok(width):
        errors.append(
            f"{label}: width must be between {MIN_COLUMN_WIDTH} "
            f"and {MAX_COLUMN_WIDTH} pixels"
        )

    render = data.get("render")
    if render:
        errors.extend(f"{label}: {message}" for message in _render_errors(render))

    return errors


def _render_errors(render: Any) -> list[str]:
    """Check that a column's render config can be applied.

    Looser than validate_render_config: renderer defaults are merged in at
    render time, so only the type and a usable date format are checked.
    """
    if isinstance(render, RenderConfig):
        render = render.model_dump()
    if not isinstance(render, Mapping):
        render = {}

    config = render.get("config")
    if not isinstance(config, Mapping):
        config = {}

    errors = []
    if not render.get("type"):
        errors.append("render type is required")

    if render.get("type") == RendererTypes.DATE:
        date_format = config.get("format")
        if date_format and not isinstance(date_format, str):
            errors.append("invalid date format")

    return errors


def validate_columns(columns: Any) -> ValidationResult:
    """Validate a list of columns, including duplicate data fields."""
    if not isinstance(columns, list):
        return ValidationResult(
            valid=False, errors=["columns configuration must be a list"]
        )

    errors = []
    if not columns:
        errors.append("at least one column must be configured")

    for index, column in enumerate(columns):
        errors.extend(validate_column(column, index))

    seen: set[str] = set()
    duplicates: list[str] = []
    for column in columns:
        data = _as_mapping(column)
        data_index = data.get("dataIndex", data.get("data_index"))
        if not data_index or not isinstance(data_index, str):
            continue
        if data_index in seen and data_index not in duplicates:
            duplicates.append(data_index)
        seen.add(data_index)

    if duplicates:
        errors.append(f"duplicate data fields found: {', '.join(duplicates)}")

    return ValidationResult(valid=not errors, errors=errors)


def validate_columns_json(text: str) -> ColumnsValidationResult:
    """Validate a JSON column import.

    Only the shape and the required title/dataIndex keys are checked here;
    run validate_columns on the parsed data for the full rules.
    """
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError) as e:
        return ColumnsValidationResult(valid=False, errors=[f"invalid JSON: {e}"])

    if not isinstance(parsed, list):
        return ColumnsValidationResult(
            valid=False, errors=["JSON must be an array of columns"]
        )

    errors = []
    for index, column in enumerate(parsed):
        if not isinstance(column, Mapping):
            errors.append(f"Column {index + 1}: must be an object")
            continue
        if not column.get("title"):
            errors.append(f'Column {index + 1}: the "title" field is required')
        if not column.get("dataIndex"):
            errors.append(f'Column {index + 1}: the "dataIndex" field is required')

    if errors:
        return ColumnsValidationResult(valid=False, errors=errors)

    return ColumnsValidationResult(valid=True, errors=[], data=parsed)
