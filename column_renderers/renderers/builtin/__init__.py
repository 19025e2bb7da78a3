"""Built-in renderers: default, boolean and date."""

from ..registry import RendererRegistry
from .boolean import BOOLEAN_RENDERER, render_boolean
from .date import DATE_RENDERER, render_date
from .default import DEFAULT_RENDERER, render_default


class RendererTypes:
    """Registry keys of the built-in renderers."""

    DEFAULT = "default"
    BOOLEAN = "boolean"
    DATE = "date"


BUILTIN_RENDERERS = {
    RendererTypes.DEFAULT: DEFAULT_RENDERER,
    RendererTypes.BOOLEAN: BOOLEAN_RENDERER,
    RendererTypes.DATE: DATE_RENDERER,
}


def register_builtin_renderers(registry: RendererRegistry) -> RendererRegistry:
    """Register the built-in renderers into a registry."""
    for renderer_type, variant in BUILTIN_RENDERERS.items():
        registry.register(renderer_type, variant)
    return registry


__all__ = [
    "BOOLEAN_RENDERER",
    "BUILTIN_RENDERERS",
    "DATE_RENDERER",
    "DEFAULT_RENDERER",
    "RendererTypes",
    "register_builtin_renderers",
    "render_boolean",
    "render_date",
    "render_default",
]
