import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from kjnotify.config import Settings, get_settings
from kjnotify.flows import build_flows
from kjnotify.middleware import CorsHeadersMiddleware, RequestSizeLimitMiddleware
from kjnotify.providers import MessageProvider, TwilioProvider
from kjnotify.response import error_response
from kjnotify.routers import notifications

API_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[MessageProvider] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the API around one settings object.

    ``provider`` replaces the Twilio provider entirely; ``transport`` keeps
    Twilio but routes its HTTP calls through the given httpx transport.
    """
    settings = settings or get_settings()
    provider = provider or TwilioProvider.from_settings(settings, transport=transport)

    logging.getLogger("kjnotify").setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        missing = settings.missing_credentials()
        if missing:
            logger.error("Provider credentials not configured: %s", ", ".join(missing))
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Relay order, booking and verification notifications over SMS and WhatsApp.",
        version=API_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.flows = build_flows(settings, provider)

    # Added last so it wraps everything, including 413 responses
    app.add_middleware(RequestSizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_middleware(CorsHeadersMiddleware)

    # --- Exception Handlers ---

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error")

    # --- Routes ---

    app.include_router(notifications.router)

    @app.get("/", summary="API root")
    async def root():
        return {"name": settings.app_name, "status": "ok", "version": API_VERSION}

    @app.get("/health", summary="Health check")
    async def health_ping():
        missing = settings.missing_credentials()
        return {
            "status": "degraded" if missing else "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": API_VERSION,
            "checks": {"provider_credentials": "missing" if missing else "ok"},
        }

    return app


app = create_app()
