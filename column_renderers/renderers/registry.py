"""Renderer registry — maps renderer type keys to renderer variants.

- In-memory dict keyed by renderer type, in registration order
- Lookup falls back to the "default" renderer, then to None
- Explicit instances injected into consumers (no global singleton)
- Overwrites are allowed and logged; strict registries reject them
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from .errors import InvalidRegistration
from .schemas import FieldDescriptor, RendererSummary, RendererVariant

logger = logging.getLogger(__name__)

DEFAULT_RENDERER = "default"


def _read(implementation: Any, *names: str) -> Any:
    """Read the first present attribute or mapping key out of names."""
    for name in names:
        if isinstance(implementation, Mapping):
            if name in implementation:
                return implementation[name]
        elif hasattr(implementation, name):
            return getattr(implementation, name)
    return None


class RendererRegistry:
    """Registry of column renderers keyed by type."""

    def __init__(
        self,
        allow_overwrite: bool = True,
        log: Optional[logging.Logger] = None,
    ):
        self.allow_overwrite = allow_overwrite
        self.log = log or logger
        self._renderers: dict[str, RendererVariant] = {}

    def register(self, renderer_type: str, implementation: Any) -> RendererVariant:
        """Register (or overwrite) a renderer under a type key.

        implementation may be a RendererVariant, a mapping or any object
        exposing a callable ``render``. Missing metadata falls back to the
        type key for the label and to empty values otherwise.

        Raises:
            InvalidRegistration: If the key is not a non-empty string, the
                implementation has no callable render, or the key is taken
                on a registry built with allow_overwrite=False.
        """
        if not isinstance(renderer_type, str) or not renderer_type:
            raise InvalidRegistration("Renderer type must be a non-empty string")

        variant = self._coerce(renderer_type, implementation)

        if renderer_type in self._renderers:
            if not self.allow_overwrite:
                raise InvalidRegistration(
                    f"Renderer '{renderer_type}' is already registered"
                )
            self.log.warning(f"Renderer '{renderer_type}' is being overwritten")

        self._renderers[renderer_type] = variant
        self.log.debug(f"Registered renderer: {renderer_type}")
        return variant

    def _coerce(self, renderer_type: str, implementation: Any) -> RendererVariant:
        if implementation is None:
            raise InvalidRegistration(
                "Renderer implementation must have a render function"
            )

        render = _read(implementation, "render")
        if not callable(render):
            raise InvalidRegistration(
                "Renderer implementation must have a render function"
            )

        if isinstance(implementation, RendererVariant):
            if implementation.label:
                return implementation
            return implementation.model_copy(update={"label": renderer_type})

        fields = _read(implementation, "fields") or []
        default_config = _read(implementation, "default_config", "defaultConfig") or {}
        try:
            return RendererVariant(
                label=_read(implementation, "label") or renderer_type,
                description=_read(implementation, "description") or "",
                render=render,
                fields=[
                    f if isinstance(f, FieldDescriptor) else FieldDescriptor.model_validate(f)
                    for f in fields
                ],
                default_config=dict(default_config),
            )
        except (TypeError, ValueError) as e:
            raise InvalidRegistration(
                f"Invalid metadata for renderer '{renderer_type}': {e}"
            ) from e

    def get(self, renderer_type: Optional[str]) -> Optional[RendererVariant]:
        """Get a renderer, falling back to the default renderer.

        Returns None when neither the type nor the default is registered.
        """
        renderer = (
            self._renderers.get(renderer_type)
            if isinstance(renderer_type, str)
            else None
        )
        if renderer is not None:
            return renderer

        fallback = self._renderers.get(DEFAULT_RENDERER)
        if fallback is None:
            self.log.error(
                f"Renderer '{renderer_type}' not found and no default renderer is registered"
            )
        else:
            self.log.warning(
                f"Renderer '{renderer_type}' not found, falling back to default"
            )
        return fallback

    def get_default(self) -> Optional[RendererVariant]:
        """Get the default renderer without logging a miss."""
        return self._renderers.get(DEFAULT_RENDERER)

    def list_summaries(self) -> list[RendererSummary]:
        """List renderers for selection controls, in registration order."""
        return [
            RendererSummary(
                value=key,
                label=r.label or key,
                description=r.description,
            )
            for key, r in self._renderers.items()
        ]

    def list_keys(self) -> list[str]:
        """List all registered renderer types."""
        return list(self._renderers.keys())

    def get_fields(self, renderer_type: Optional[str]) -> list[FieldDescriptor]:
        """Get the configuration fields of a renderer (empty if none resolves)."""
        renderer = self.get(renderer_type)
        return list(renderer.fields) if renderer else []

    def get_default_config(self, renderer_type: Optional[str]) -> dict[str, Any]:
        """Get a copy of a renderer's default config (empty if none resolves)."""
        renderer = self.get(renderer_type)
        return dict(renderer.default_config) if renderer else {}

    def has(self, renderer_type: Optional[str]) -> bool:
        """Check whether a type is registered (no fallback)."""
        return isinstance(renderer_type, str) and renderer_type in self._renderers

    def count(self) -> int:
        """Get total number of registered renderers."""
        return len(self._renderers)


def build_renderer_registry(
    allow_overwrite: bool = True,
    log: Optional[logging.Logger] = None,
) -> RendererRegistry:
    """Create a registry with the built-in renderers registered."""
    from .builtin import register_builtin_renderers

    registry = RendererRegistry(allow_overwrite=allow_overwrite, log=log)
    register_builtin_renderers(registry)
    logger.info(f"Registered {registry.count()} renderers")
    return registry
