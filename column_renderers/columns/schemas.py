"""Column definition schemas.

A column binds a record field (data_index) to a title and a render config.
Field names accept the camelCase keys used in stored configurations.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..renderers.schemas import RenderConfig


class ColumnDefinition(BaseModel):
    """A table column with its render configuration."""

    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(default="", description="Column key; falls back to data_index")
    title: str = ""
    data_index: str = Field(default="", alias="dataIndex")
    sortable: bool = False
    sort_field: Optional[str] = Field(default=None, alias="sortField")
    clickable: bool = False
    width: Optional[float] = None
    render: Optional[RenderConfig] = Field(
        default_factory=lambda: RenderConfig(type="default", config={})
    )

    @property
    def column_key(self) -> str:
        return self.key or self.data_index


class ColumnPreviewRequest(BaseModel):
    """Columns plus sample records to render."""

    columns: list[ColumnDefinition]
    records: list[dict[str, Any]] = Field(default_factory=list)


class ColumnsValidationResult(BaseModel):
    """Outcome of validating a JSON column import."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    data: Optional[list[dict[str, Any]]] = None
