"""Renderer errors.

Only registration problems are raised to callers. Unknown renderer types
and failures inside a render function are logged and converted into a
fallback display value by the executor.
"""


class RendererError(Exception):
    """Base class for column renderer errors."""


class InvalidRegistration(RendererError, ValueError):
    """Malformed renderer type key or implementation without a render function."""
