"""Request dependencies shared by the API routes."""

from fastapi import HTTPException, Request

from column_renderers.renderers.executor import RenderExecutor
from column_renderers.renderers.registry import RendererRegistry
from column_renderers.renderers.schemas import RendererVariant


def get_registry(request: Request) -> RendererRegistry:
    """The renderer registry the app was built with."""
    return request.app.state.renderer_registry


def get_executor(request: Request) -> RenderExecutor:
    """The render executor bound to the app's registry."""
    return request.app.state.render_executor


def get_or_404(registry: RendererRegistry, renderer_type: str) -> RendererVariant:
    """Get a registered renderer (no default fallback) or raise 404."""
    if not registry.has(renderer_type):
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Renderer '{renderer_type}' not found. Available: {available}",
        )
    return registry.get(renderer_type)
