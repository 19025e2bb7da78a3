"""Column renderers — pluggable display formatting for table cells.

Renderers turn raw cell values into display values (text or tagged text)
according to a serializable {type, config} render config. Each renderer
declares its configuration fields and defaults so configuration forms can
be built without code changes per renderer.
"""

from .builtin import RendererTypes, register_builtin_renderers
from .errors import InvalidRegistration, RendererError
from .executor import RenderExecutor
from .registry import DEFAULT_RENDERER, RendererRegistry, build_renderer_registry
from .schemas import (
    FieldDescriptor,
    FieldKind,
    FieldOption,
    RenderConfig,
    RendererSummary,
    RendererVariant,
    TaggedText,
    ValidationResult,
)
from .validator import validate_render_config

__all__ = [
    "DEFAULT_RENDERER",
    "FieldDescriptor",
    "FieldKind",
    "FieldOption",
    "InvalidRegistration",
    "RenderConfig",
    "RenderExecutor",
    "RendererError",
    "RendererRegistry",
    "RendererSummary",
    "RendererTypes",
    "RendererVariant",
    "TaggedText",
    "ValidationResult",
    "build_renderer_registry",
    "register_builtin_renderers",
    "validate_render_config",
]
