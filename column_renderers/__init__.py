"""Column Renderers - pluggable cell formatting for tabular data.

Turns raw values into display values from a serializable render config:
- Renderer registry with default fallback
- Built-in default, boolean and date renderers
- Fail-soft rendering and static config validation
- Column definitions and an HTTP API for configuration UIs
"""

__version__ = "0.1.0"

from column_renderers.renderers import (
    DEFAULT_RENDERER,
    FieldDescriptor,
    FieldKind,
    FieldOption,
    InvalidRegistration,
    RenderConfig,
    RenderExecutor,
    RendererError,
    RendererRegistry,
    RendererSummary,
    RendererTypes,
    RendererVariant,
    TaggedText,
    ValidationResult,
    build_renderer_registry,
    register_builtin_renderers,
    validate_render_config,
)

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
    "__version__",
    "build_renderer_registry",
    "register_builtin_renderers",
    "validate_render_config",
]
