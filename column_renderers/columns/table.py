"""Render records through column definitions."""

from collections.abc import Mapping
from typing import Any

from ..renderers.executor import RenderExecutor
from .schemas import ColumnDefinition


def resolve_data_index(record: Any, data_index: str) -> Any:
    """Look up a field in a record; dots walk into nested mappings."""
    if not isinstance(record, Mapping) or not data_index:
        return None
    if data_index in record:
        return record[data_index]

    value: Any = record
    for part in data_index.split("."):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return value


def render_rows(
    columns: list[ColumnDefinition],
    records: list[Any],
    executor: RenderExecutor,
) -> list[dict[str, Any]]:
    """Apply each column's renderer to each record.

    Returns one mapping per record, keyed by column key.
    """
    cell_renderers = [
        (column.column_key, column.data_index, executor.column_renderer(column.render))
        for column in columns
    ]

    rows = []
    for index, record in enumerate(records):
        rows.append(
            {
                key: render_cell(resolve_data_index(record, data_index), record, index)
                for key, data_index, render_cell in cell_renderers
            }
        )
    return rows
