"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, batchfetch.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import uvicorn
from fastapi import FastAPI

from batchfetch import __version__
from batchfetch.configs import get_settings
from batchfetch.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import collections_router, health_router


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        debug=get_settings().debug,
        title="Batch Fetch API",
        description="Chunked multi-key document lookups over marketplace collections",
        version=__version__,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(collections_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    from batchfetch.observability.logger import configure_logging

    configure_logging()
    uvicorn.run(
        "batchfetch.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
