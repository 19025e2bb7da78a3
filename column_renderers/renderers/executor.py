"""Render executor — applies render configs to cell values.

Resolution order:
- no config or no type: the default renderer with an empty config
- named type: registry lookup (falls back to the default renderer)
- nothing resolved: the raw value

A renderer that raises is logged and the raw value is rendered through
the default renderer instead. apply() never raises.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .registry import RendererRegistry
from .schemas import RenderConfig

logger = logging.getLogger(__name__)

ColumnRenderFunction = Callable[[Any, Optional[Any], Optional[int]], Any]


def split_render_config(render_config: Any) -> tuple[Optional[str], dict[str, Any]]:
    """Read (type, config) out of a RenderConfig, a mapping or None.

    Anything that is not a mapping is treated as an empty config.
    """
    if render_config is None:
        return None, {}

    if isinstance(render_config, RenderConfig):
        return render_config.type, dict(render_config.config)

    if isinstance(render_config, Mapping):
        renderer_type = render_config.get("type")
        config = render_config.get("config")
        return (
            renderer_type if isinstance(renderer_type, str) else None,
            dict(config) if isinstance(config, Mapping) else {},
        )

    return None, {}


class RenderExecutor:
    """Applies renderers from a registry to values."""

    def __init__(self, registry: RendererRegistry, log: Optional[logging.Logger] = None):
        self.registry = registry
        self.log = log or logger

    def apply(
        self,
        value: Any,
        render_config: Any = None,
        record: Optional[Any] = None,
    ) -> Any:
        """Render a value according to a render config.

        Args:
            value: Raw cell value
            render_config: RenderConfig, {"type", "config"} mapping or None
            record: Full data row, passed through to the renderer

        Returns:
            The display value, or the raw value if nothing can render it
        """
        renderer_type, config = split_render_config(render_config)

        if not renderer_type:
            return self._render_default(value, record)

        renderer = self.registry.get(renderer_type)
        if renderer is None:
            return value

        final_config = {**renderer.default_config, **config}

        try:
            return renderer.render(value, final_config, record)
        except Exception as e:
            self.log.error(
                f"Error applying renderer '{renderer_type}': {e}", exc_info=True
            )
            return self._render_default(value, record)

    def _render_default(self, value: Any, record: Optional[Any]) -> Any:
        """Render through the default renderer, or return the raw value."""
        default = self.registry.get_default()
        if default is None:
            return value

        try:
            return default.render(value, {}, record)
        except Exception as e:
            self.log.error(f"Error applying default renderer: {e}", exc_info=True)
            return value

    def column_renderer(self, render_config: Any) -> ColumnRenderFunction:
        """Create a per-cell callback for a table column.

        The callback takes (value, record, index); index is accepted for
        table components that pass it and is otherwise ignored.
        """

        def render_cell(
            value: Any, record: Optional[Any] = None, index: Optional[int] = None
        ) -> Any:
            return self.apply(value, render_config, record)

        return render_cell
