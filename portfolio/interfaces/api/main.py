"""
FastAPI Main Application - Portfolio backend entry point.

Run with: uvicorn portfolio.interfaces.api:create_app --factory --port 3000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio import __version__
from portfolio.config import NotFoundError, Settings, ValidationError, get_settings

from .middleware import (
    AccessLogMiddleware,
    AllowAnyOriginMiddleware,
    ErrorHandlerMiddleware,
    portfolio_error_response,
)
from .routes import catalog, contact, health

# Static file paths
INTERFACES_DIR = Path(__file__).parent.parent
LANDING_DIR = INTERFACES_DIR / "landing"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Portfolio backend running on port %d", settings.port)
    logger.info("Health check: http://localhost:%d/health", settings.port)

    yield

    logger.info("Shutting down portfolio backend...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Portfolio API",
        description="Personal portfolio backend: health, contact form, projects and skills",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url=None,
    )
    app.state.settings = settings

    # Add middleware (order matters - first added = innermost)
    # 1. Error handling (catch exceptions from routes)
    app.add_middleware(ErrorHandlerMiddleware)

    # 2. Request ID, latency and access log
    app.add_middleware(AccessLogMiddleware)

    # 3. CORS (outside the error handler so error responses carry the headers too)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 4. Wildcard origin even without an Origin request header
    if settings.cors_origins == ["*"]:
        app.add_middleware(AllowAnyOriginMiddleware)

    # Unmatched path or method -> 404, bad JSON -> 400
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code in (404, 405):
            return portfolio_error_response(
                request, NotFoundError(details={"method": request.method})
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return portfolio_error_response(
            request,
            ValidationError("Invalid request body", {"errors": exc.errors()}),
        )

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
    app.include_router(catalog.router, prefix="/api", tags=["Catalog"])

    # Serve the landing page at root
    if LANDING_DIR.exists():

        @app.get("/styles.css", include_in_schema=False)
        async def serve_landing_css():
            """Serve landing page CSS."""
            return FileResponse(LANDING_DIR / "styles.css", media_type="text/css")

        @app.get("/script.js", include_in_schema=False)
        async def serve_landing_js():
            """Serve landing page JavaScript."""
            return FileResponse(LANDING_DIR / "script.js", media_type="application/javascript")

        @app.get("/", include_in_schema=False)
        async def serve_landing_page():
            """Serve the portfolio landing page."""
            return FileResponse(LANDING_DIR / "index.html")

    return app


# Create app instance
app = create_app()
