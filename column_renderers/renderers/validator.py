"""Static validation of render configs.

Checks shape and the type-specific required fields without rendering
anything. Errors accumulate; validation never stops at the first one.
"""

from collections.abc import Mapping
from typing import Any

from .builtin import RendererTypes
from .registry import RendererRegistry
from .schemas import RenderConfig, ValidationResult


def _as_mapping(render_config: Any) -> Mapping:
    if isinstance(render_config, RenderConfig):
        return render_config.model_dump()
    if isinstance(render_config, Mapping):
        return render_config
    return {}


def render_config_errors(render_config: Any, registry: RendererRegistry) -> list[str]:
    """Collect error messages for a render config (empty when valid)."""
    if render_config is None:
        return []

    data = _as_mapping(render_config)
    renderer_type = data.get("type")
    config = data.get("config")
    if not isinstance(config, Mapping):
        config = {}

    errors = []

    if not renderer_type:
        errors.append("render type is required")
    elif not registry.has(renderer_type):
        errors.append(f'render type "{renderer_type}" is not registered')

    if renderer_type == RendererTypes.BOOLEAN:
        if not config.get("trueText"):
            errors.append("true text is required")
        if not config.get("falseText"):
            errors.append("false text is required")

    if renderer_type == RendererTypes.DATE:
        if not config.get("format"):
            errors.append("date format is required")

    return errors


def validate_render_config(render_config: Any, registry: RendererRegistry) -> ValidationResult:
    """Validate a render config.

    An absent config is valid: the column renders with the default renderer.
    """
    errors = render_config_errors(render_config, registry)
    return ValidationResult(valid=not errors, errors=errors)
