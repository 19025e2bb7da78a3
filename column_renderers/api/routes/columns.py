"""API routes for column definitions.

Validates column lists (including their render configs) and renders
sample records through them for previews.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from column_renderers.api.dependencies import get_executor
from column_renderers.columns.schemas import ColumnPreviewRequest, ColumnsValidationResult
from column_renderers.columns.table import render_rows
from column_renderers.columns.validator import validate_columns, validate_columns_json
from column_renderers.renderers.executor import RenderExecutor
from column_renderers.renderers.schemas import ValidationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/columns", tags=["columns"])


class ColumnsJsonRequest(BaseModel):
    """Raw JSON text of a column import."""

    text: str


@router.post("/validate", response_model=ValidationResult)
async def validate_column_list(columns: Any = Body(...)):
    """Validate a list of column definitions."""
    return validate_columns(columns)


@router.post("/validate-json", response_model=ColumnsValidationResult)
async def validate_column_import(req: ColumnsJsonRequest):
    """Validate the JSON text of a column import."""
    return validate_columns_json(req.text)


@router.post("/preview", response_model=list[dict[str, Any]])
async def preview_columns(
    req: ColumnPreviewRequest,
    executor: RenderExecutor = Depends(get_executor),
):
    """Render sample records through the given columns."""
    rows = render_rows(req.columns, req.records, executor)
    logger.debug(f"Rendered {len(rows)} preview rows for {len(req.columns)} columns")
    return rows
