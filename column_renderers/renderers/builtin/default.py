"""Default renderer — shows the value without customization."""

import json
from collections.abc import Mapping
from typing import Any, Optional

from ..schemas import RendererVariant

OBJECT_PLACEHOLDER = "[Object]"


def render_default(
    value: Any, config: Optional[dict[str, Any]] = None, record: Optional[Any] = None
) -> Any:
    """Return the value as-is; None becomes "" and containers become JSON."""
    if value is None:
        return ""

    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError):
            return OBJECT_PLACEHOLDER

    return value


DEFAULT_RENDERER = RendererVariant(
    label="Padrão",
    description="Exibe o valor sem customização",
    render=render_default,
    fields=[],
    default_config={},
)
