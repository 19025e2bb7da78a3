"""Column Renderers API.

Serves the renderer catalog to configuration UIs and renders values for
table previews:
- Renderer selector feed, configuration fields and defaults
- Render config validation
- Single value and column preview rendering
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from column_renderers import __version__
from column_renderers.api.routes import columns, renderers
from column_renderers.renderers.executor import RenderExecutor
from column_renderers.renderers.registry import RendererRegistry, build_renderer_registry

# Configure logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    registry = app.state.renderer_registry
    logger.info(f"Serving {registry.count()} renderers: {registry.list_keys()}")
    logger.info("Column Renderers API ready")
    yield
    logger.info("Shutting down Column Renderers API")


def create_app(registry: Optional[RendererRegistry] = None) -> FastAPI:
    """Build the API around a renderer registry.

    The built-in registry is used when none is given. Registration must be
    complete before the app starts serving.
    """
    if registry is None:
        registry = build_renderer_registry()

    app = FastAPI(
        title="Column Renderers API",
        description="""
## Column Renderers

Pluggable display formatting for table cells. A column carries a
`{type, config}` render config; this API lists the available renderers,
describes their configuration fields, validates configs and renders values.

### Key Endpoints

- `GET /v1/renderers` - List renderers for a type selector
- `GET /v1/renderers/{type}/fields` - Configuration fields for a renderer
- `GET /v1/renderers/{type}/default-config` - Default configuration
- `POST /v1/renderers/validate` - Validate a render config
- `POST /v1/renderers/apply` - Render a value
- `POST /v1/columns/preview` - Render records through columns
""",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.renderer_registry = registry
    app.state.render_executor = RenderExecutor(registry)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers with /v1 prefix
    app.include_router(renderers.router, prefix="/v1")
    app.include_router(columns.router, prefix="/v1")

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "service": "Column Renderers API",
            "version": __version__,
            "docs": "/docs",
            "endpoints": {
                "renderers": "/v1/renderers",
                "columns": "/v1/columns",
            },
        }

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        registry = request.app.state.renderer_registry
        return {
            "status": "healthy",
            "renderers_loaded": registry.count(),
            "default_renderer": registry.get_default() is not None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "column_renderers.api.main:app",
        host=os.environ.get("COLUMN_RENDERERS_HOST", "0.0.0.0"),
        port=int(os.environ.get("COLUMN_RENDERERS_PORT", "8000")),
    )
