"""Column definitions — table columns bound to render configs.

Provides the column model, validation rules for stored and imported
column lists, file loading and row rendering.
"""

from .loader import load_columns
from .schemas import ColumnDefinition, ColumnPreviewRequest, ColumnsValidationResult
from .table import render_rows, resolve_data_index
from .validator import validate_column, validate_columns, validate_columns_json

__all__ = [
    "ColumnDefinition",
    "ColumnPreviewRequest",
    "ColumnsValidationResult",
    "load_columns",
    "render_rows",
    "resolve_data_index",
    "validate_column",
    "validate_columns",
    "validate_columns_json",
]
