"""Exception handlers for the application."""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from portfolio.exceptions import PortfolioException
from portfolio.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def portfolio_exception_handler(request: Request, exc: PortfolioException) -> PlainTextResponse:
    """Log a portfolio exception and answer with the bare status phrase.

    Error details stay in the log; the client only sees e.g. "bad request".
    """
    log_with_context(
        logger,
        "error" if exc.status_code >= 500 else "warning",
        exc.message,
        error_code=exc.code.value,
        status_code=exc.status_code,
        details=exc.details,
        method=request.method,
        path=request.url.path,
        event_type="portfolio_error",
    )

    return PlainTextResponse(HTTPStatus(exc.status_code).phrase.lower(), status_code=exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return PlainTextResponse("internal server error", status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(PortfolioException, portfolio_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
