"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from portfolio.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def _log_request(request: Request, status_code: int, started: float) -> None:
    elapsed = time.perf_counter() - started
    log_with_context(
        logger,
        "info",
        f"{request.method} {request.url.path} {status_code} {_format_duration(elapsed)}",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        duration_ms=round(elapsed * 1000, 3),
        event_type="http_request",
    )


def _format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
    """
    log_with_context(
        logger,
        "debug",
        "Configuring request logging middleware",
        event_type="middleware_config",
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, final status and elapsed time of every request."""
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _log_request(request, 500, started)
            raise
        _log_request(request, response.status_code, started)
        return response
