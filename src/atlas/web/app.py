"""
Atlas Gateway - FastAPI application.

Application factory for the resource gateway. Run with:

    uvicorn atlas.web.app:create_app --factory
"""

import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from atlas import __version__
from atlas.config import GatewaySettings, get_settings
from atlas.db.adapter import TableBackend
from atlas.db.memory import InMemoryBackend
from atlas.errors import MethodNotAllowed
from atlas.gateway.capabilities import CapabilityMap
from atlas.logging_config import configure_logging
from atlas.web.envelope import error_response
from atlas.web.middleware import CORSHeadersMiddleware, RequestLoggingMiddleware
from atlas.web.routes import router as resource_router

logger = logging.getLogger(__name__)


def create_app(
    settings: GatewaySettings | None = None,
    backend: TableBackend | None = None,
) -> FastAPI:
    """
    Build the gateway application.

    Args:
        settings: Gateway settings (defaults to environment settings)
        backend: Fixed backend for every request. When omitted, the
            in-memory backend is used for ATLAS_BACKEND=memory and a
            per-request Supabase backend otherwise.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if backend is None and settings.atlas_backend == "memory":
        backend = InMemoryBackend()

    app = FastAPI(title="Atlas Gateway", version=__version__)
    app.state.settings = settings
    app.state.backend = backend
    app.state.capabilities = CapabilityMap(settings.atlas_resources)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, "service": "atlas-gateway"}

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Routing-level 404/405 in the error envelope."""
        if exc.status_code == 405:
            message = MethodNotAllowed().message
        else:
            message = str(exc.detail)
        return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))

    # Prefixed routes first: "/api/x" would otherwise match "/{resource}/{record_id}"
    if settings.api_prefix:
        app.include_router(resource_router, prefix=settings.api_prefix, include_in_schema=False)
    app.include_router(resource_router)

    # Last added runs first: CORS wraps request logging
    app.add_middleware(RequestLoggingMiddleware, slow_request_ms=settings.slow_request_ms)
    app.add_middleware(CORSHeadersMiddleware, headers=settings.cors_headers)

    logger.info(
        f"Atlas gateway ready (env={settings.atlas_env}, backend={settings.atlas_backend}, "
        f"prefix={settings.api_prefix or '/'}, "
        f"resources={'open' if app.state.capabilities.is_open else sorted(settings.atlas_resources)})"
    )
    return app
