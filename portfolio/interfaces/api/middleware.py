"""
API Middleware - Request/response processing.

Provides:
- Access log line per request (request ID, route, outcome, latency)
- Unconditional wildcard origin header for the public API
- Error handling with taxonomy codes
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from starlette.middleware.base import BaseHTTPMiddleware

from portfolio.config.errors import PortfolioError

logger = logging.getLogger(__name__)

GENERIC_ERROR_BODY = {"success": False, "message": "Something went wrong!"}

NextHandler = Callable[[Request], Awaitable[Response]]


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID and log one line when it completes.

    The line names the matched route template (``/api/contact``) rather than
    the raw path, and whether the caller got a success body.
    """

    async def dispatch(self, request: Request, call_next: NextHandler) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        route = getattr(request.scope.get("route"), "path", None) or "unmatched"
        outcome = "success" if response.status_code < 400 else "failure"
        logger.info(
            "%s %s route=%s status=%d outcome=%s elapsed_ms=%.1f request_id=%s",
            request.method,
            request.url.path,
            route,
            response.status_code,
            outcome,
            elapsed_ms,
            request_id,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"
        return response


class AllowAnyOriginMiddleware(BaseHTTPMiddleware):
    """
    Send ``Access-Control-Allow-Origin: *`` on every response.

    ``CORSMiddleware`` only answers requests that carry an ``Origin``
    header; the public API advertises the wildcard to all callers.
    """

    async def dispatch(self, request: Request, call_next: NextHandler) -> Response:
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Convert exceptions escaping the routes to JSON error responses."""

    async def dispatch(self, request: Request, call_next: NextHandler) -> Response:
        try:
            return await call_next(request)
        except PortfolioError as e:
            return portfolio_error_response(request, e)
        except Exception as e:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception("Unhandled error: %s request_id=%s", str(e), request_id)
            return JSONResponse(status_code=500, content=GENERIC_ERROR_BODY)


def portfolio_error_response(request: Request, error: PortfolioError) -> JSONResponse:
    """Log a typed error and render the caller-facing body."""
    request_id = getattr(request.state, "request_id", "unknown")
    log = logger.error if error.http_status >= 500 else logger.warning
    log(
        "%s: %s path=%s request_id=%s details=%s",
        error.code.value,
        error.message,
        request.url.path,
        request_id,
        error.details,
    )
    return JSONResponse(status_code=error.http_status, content=error.to_dict())
