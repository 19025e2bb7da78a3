"""Shared fixtures: every test gets its own registry."""

import pytest

from column_renderers.renderers import builtin
from column_renderers.renderers.builtin import date as date_renderer
from column_renderers.renderers.executor import RenderExecutor
from column_renderers.renderers.registry import RendererRegistry, build_renderer_registry


@pytest.fixture(autouse=True)
def utc_reference_timezone(monkeypatch):
    """Pin the date renderer to UTC regardless of the environment."""
    monkeypatch.setattr(date_renderer, "RENDER_TIMEZONE", "UTC")


@pytest.fixture
def registry():
    return build_renderer_registry()


@pytest.fixture
def empty_registry():
    return RendererRegistry()


@pytest.fixture
def executor(registry):
    return RenderExecutor(registry)


@pytest.fixture
def builtin_types():
    return list(builtin.BUILTIN_RENDERERS)
