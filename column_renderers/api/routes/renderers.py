"""API routes for column renderers.

Configuration UIs fetch the catalog to populate renderer selectors and
build per-renderer forms; table frontends can validate render configs
and preview rendered values.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, Field

from column_renderers.api.dependencies import get_executor, get_or_404, get_registry
from column_renderers.renderers.executor import RenderExecutor
from column_renderers.renderers.registry import RendererRegistry
from column_renderers.renderers.schemas import (
    FieldDescriptor,
    FieldKind,
    FieldOption,
    RendererSummary,
    ValidationResult,
)
from column_renderers.renderers.validator import validate_render_config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/renderers", tags=["renderers"])


class FieldSchema(BaseModel):
    """Serializable view of a renderer configuration field."""

    name: str
    label: str
    kind: FieldKind
    default_value: Any = None
    options: Optional[list[FieldOption]] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    allow_custom: bool = False
    conditional: bool = Field(
        default=False,
        description="Visibility depends on the current config; "
        "ask /visible-fields to evaluate it",
    )


class RenderRequest(BaseModel):
    """A value to render with an optional render config and record."""

    value: Any = None
    render: Optional[dict[str, Any]] = None
    record: Optional[dict[str, Any]] = None


class RenderResponse(BaseModel):
    """Rendered display value (a string, a {text, color} tag or the raw value)."""

    display: Any = None


def _field_schema(field: FieldDescriptor) -> FieldSchema:
    return FieldSchema(
        name=field.name,
        label=field.label,
        kind=field.kind,
        default_value=field.default_value,
        options=field.options,
        placeholder=field.placeholder,
        help_text=field.help_text,
        allow_custom=field.allow_custom,
        conditional=field.visible_when is not None,
    )


# -- List endpoints --


@router.get("", response_model=list[RendererSummary])
async def list_renderers(registry: RendererRegistry = Depends(get_registry)):
    """List all renderers for a type selector, in registration order."""
    return registry.list_summaries()


# -- Validation / rendering --


@router.post("/validate", response_model=ValidationResult)
async def validate_config(
    render_config: Optional[dict[str, Any]] = Body(default=None),
    registry: RendererRegistry = Depends(get_registry),
):
    """Validate a {type, config} render config without rendering."""
    return validate_render_config(render_config, registry)


@router.post("/apply", response_model=RenderResponse)
async def apply_renderer(
    req: RenderRequest,
    executor: RenderExecutor = Depends(get_executor),
):
    """Render a single value. Never fails on renderer errors."""
    return RenderResponse(display=executor.apply(req.value, req.render, req.record))


# -- Detail endpoints --


@router.get("/{renderer_type}", response_model=RendererSummary)
async def get_renderer(
    renderer_type: str, registry: RendererRegistry = Depends(get_registry)
):
    """Get a single renderer summary by type."""
    renderer = get_or_404(registry, renderer_type)
    return RendererSummary(
        value=renderer_type,
        label=renderer.label or renderer_type,
        description=renderer.description,
    )


@router.get("/{renderer_type}/fields", response_model=list[FieldSchema])
async def get_renderer_fields(
    renderer_type: str, registry: RendererRegistry = Depends(get_registry)
):
    """Get the configuration fields of a renderer, in display order."""
    get_or_404(registry, renderer_type)
    return [_field_schema(f) for f in registry.get_fields(renderer_type)]


@router.get("/{renderer_type}/default-config")
async def get_renderer_default_config(
    renderer_type: str, registry: RendererRegistry = Depends(get_registry)
) -> dict[str, Any]:
    """Get the default configuration of a renderer."""
    get_or_404(registry, renderer_type)
    return registry.get_default_config(renderer_type)


@router.post("/{renderer_type}/visible-fields", response_model=list[str])
async def get_visible_fields(
    renderer_type: str,
    config: Optional[dict[str, Any]] = Body(default=None),
    registry: RendererRegistry = Depends(get_registry),
):
    """Names of the fields to show for a config being edited.

    The config is merged over the renderer defaults before the
    visibility rules are evaluated.
    """
    renderer = get_or_404(registry, renderer_type)
    merged = {**renderer.default_config, **(config or {})}
    return [f.name for f in renderer.fields if f.is_visible(merged)]
