"""FastAPI application factory."""

from fastapi import FastAPI

from .api import api_router
from .web import web_router
from .middleware import (
    CORSHeadersMiddleware,
    ErrorHandlingMiddleware,
    LoggingMiddleware,
    register_exception_handlers,
)


def create_app(
    store_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Store instance
        service_instance: Service instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Short Link Service",
        description="Create, resolve and list short links per user",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    register_exception_handlers(app)

    # Last added runs first: logging wraps CORS, which wraps error handling
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(CORSHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.include_router(api_router, tags=["API"])
    # Catch-all /{short_code} goes last so it never shadows /urls
    app.include_router(web_router, tags=["Web"])

    return app
